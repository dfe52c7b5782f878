"""
Configuration validation for msnsim.

Declarative validation patterns that catch bad parameters before a single
step is integrated:
- Predefined validators (positive, nonzero, finite, probability, ...)
- ValidatedConfig mixin driven by a `_validation_rules` mapping

A zero time constant or capacitance would otherwise surface much later as
inf/NaN in the trajectory, so those are rejected at construction time.

Author: msnsim Project
Date: March 2026
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

from msnsim.errors import ConfigurationError


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""


# =============================================================================
# DECLARATIVE VALIDATION FRAMEWORK
# =============================================================================


class ValidatorRegistry:
    """Registry of predefined validation rules.

    Usage:
        validator = ValidatorRegistry.get_validator('positive')
        validator(0.1, 'dt_ms')  # Passes
        validator(0.0, 'dt_ms')  # Raises ConfigValidationError
    """

    _validators: Dict[str, Callable[[Any, str], None]] = {}

    @classmethod
    def register(cls, name: str, validator: Callable[[Any, str], None]) -> None:
        """Register a validation function."""
        cls._validators[name] = validator

    @classmethod
    def get_validator(cls, rule: str) -> Callable[[Any, str], None]:
        """Get validator by name."""
        if rule in cls._validators:
            return cls._validators[rule]

        raise ValueError(f"Unknown validation rule: {rule}")


def _require_numeric(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigValidationError(f"{name} must be numeric, got {type(value)}")


def _register_builtin_validators() -> None:
    """Register standard validation rules."""

    def positive(value: Any, name: str) -> None:
        """Value must be > 0."""
        _require_numeric(value, name)
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive")

    def non_negative(value: Any, name: str) -> None:
        """Value must be >= 0."""
        _require_numeric(value, name)
        if value < 0:
            raise ConfigValidationError(f"{name}={value} must be non-negative")

    def nonzero(value: Any, name: str) -> None:
        """Value is used as a divisor."""
        _require_numeric(value, name)
        if value == 0:
            raise ConfigValidationError(f"{name}={value} must be nonzero (used as divisor)")

    def finite(value: Any, name: str) -> None:
        """Value must be finite (not inf or nan)."""
        _require_numeric(value, name)
        if not math.isfinite(value):
            raise ConfigValidationError(f"{name}={value} must be finite (not inf/nan)")

    def positive_integer(value: Any, name: str) -> None:
        """Value must be a positive integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(f"{name} must be integer, got {type(value)}")
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive integer")

    def probability(value: Any, name: str) -> None:
        """Value must be in [0, 1]."""
        _require_numeric(value, name)
        if not (0.0 <= value <= 1.0):
            raise ConfigValidationError(f"{name}={value} must be a fraction in [0, 1]")

    ValidatorRegistry.register('positive', positive)
    ValidatorRegistry.register('non_negative', non_negative)
    ValidatorRegistry.register('nonzero', nonzero)
    ValidatorRegistry.register('finite', finite)
    ValidatorRegistry.register('positive_integer', positive_integer)
    ValidatorRegistry.register('probability', probability)


_register_builtin_validators()


class ValidatedConfig:
    """Mixin for declarative config validation.

    Usage:
        @dataclass(frozen=True)
        class MyConfig(ValidatedConfig):
            dt_ms: float = 0.1
            d1: float = 0.0

            _validation_rules = {
                'dt_ms': ('positive', 'finite'),
                'd1': ('probability',),
            }

            def __post_init__(self) -> None:
                self.validate_config()
    """

    _validation_rules: Dict[str, Tuple[str, ...]] = {}

    def validate_config(self) -> None:
        """Validate configuration based on _validation_rules.

        Raises:
            ConfigValidationError: If any validation fails
        """
        errors: List[str] = []

        for field_name, rules in self._validation_rules.items():
            if not hasattr(self, field_name):
                errors.append(f"Validation rule for non-existent field: {field_name}")
                continue

            value = getattr(self, field_name)

            for rule in rules:
                try:
                    validator = ValidatorRegistry.get_validator(rule)
                    validator(value, field_name)
                except ConfigValidationError as e:
                    errors.append(str(e))
                except ValueError as e:
                    errors.append(f"Validation error for {field_name}: {e}")

        if errors:
            error_msg = (
                f"{self.__class__.__name__} validation failed:\n" +
                "\n".join(f"  • {e}" for e in errors)
            )
            raise ConfigValidationError(error_msg)
