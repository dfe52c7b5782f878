"""Tests for the declarative validation rules."""

import math

import pytest

from msnsim.config import ConfigValidationError, ValidatorRegistry


class TestValidatorRegistry:

    def test_builtin_rules(self):
        ValidatorRegistry.get_validator("positive")(0.1, "dt_ms")
        ValidatorRegistry.get_validator("nonzero")(-6.0, "tau")
        ValidatorRegistry.get_validator("probability")(1.0, "d1")
        with pytest.raises(ConfigValidationError):
            ValidatorRegistry.get_validator("positive")(0.0, "dt_ms")
        with pytest.raises(ConfigValidationError):
            ValidatorRegistry.get_validator("finite")(math.nan, "v")

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown validation rule"):
            ValidatorRegistry.get_validator("even")

    def test_bool_is_not_numeric(self):
        with pytest.raises(ConfigValidationError, match="numeric"):
            ValidatorRegistry.get_validator("finite")(True, "flag")
