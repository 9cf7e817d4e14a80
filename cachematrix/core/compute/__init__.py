"""
Compute infrastructure: timing, tolerances, device detection and the
linear algebra kernels the inversion backends are built on.
"""
