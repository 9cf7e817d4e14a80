"""
Tests for the Result[P] envelope.

Validates:
    - Construction with an InverseParams payload
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from cachematrix.core.result import Result
from cachematrix.inverse.solution import InverseParams


def _result(**overrides):
    fields = dict(
        params=InverseParams(inverse=np.eye(2), rank=2),
        info={'method': 'lu'},
        timing={'total_seconds': 0.01},
        backend_name='cpu_lu',
    )
    fields.update(overrides)
    return Result(**fields)


class TestResult:

    def test_fields(self):
        result = _result()
        assert result.params.n == 2
        assert result.info['method'] == 'lu'
        assert result.timing['total_seconds'] == 0.01
        assert result.backend_name == 'cpu_lu'

    def test_timing_optional(self):
        assert _result(timing=None).timing is None

    def test_frozen(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'gpu'

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = _result(warnings=("matrix is ill-conditioned",))
        assert result.has_warning("ill-conditioned")
        assert not result.has_warning("singular")
