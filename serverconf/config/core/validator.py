"""
Parameter validation framework.

This module provides the error taxonomy raised while loading startup
parameters and the validators that can be attached to a parameter.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class ConfigurationError(Exception):
    """Base exception for startup configuration failures."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ParameterError(ConfigurationError):
    """Exception raised when a required parameter is not supplied."""

    @classmethod
    def missing(cls, key: str) -> 'ParameterError':
        return cls(f'Required parameter "{key}" not found.', field=key)


class ValidationError(ConfigurationError):
    """Exception raised when a parameter value fails validation."""


class ValidationResult:
    """Result of parameter validation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ConfigurationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ConfigurationError):
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    @property
    def first_error(self) -> Optional[ConfigurationError]:
        return self.errors[0] if self.errors else None

    def raise_for_errors(self):
        """Raise the first recorded error, if any."""
        if self.errors:
            raise self.errors[0]

    def __bool__(self):
        return self.is_valid


class Validator(ABC):
    """Abstract base class for parameter validators."""

    @abstractmethod
    def validate(self, name: str, value: Optional[str]) -> None:
        """
        Validate the value of a named parameter.

        Raises:
            ValidationError: If the value violates the rule
        """
        pass

    def check(self, name: str, value: Optional[str]) -> ValidationResult:
        """Validate and report the outcome as a ValidationResult."""
        result = ValidationResult()
        try:
            self.validate(name, value)
        except ValidationError as e:
            result.add_error(e)
        return result

    def __repr__(self):
        return f"{type(self).__name__}()"


class NotBlankValidator(Validator):
    """Rejects empty and whitespace-only strings."""

    def validate(self, name: str, value: Optional[str]) -> None:
        if value is not None and not value.strip():
            raise ValidationError(f"Parameter {name} should not be blank", field=name)


class MinLengthValidator(Validator):
    """Rejects strings shorter than ``min_length`` characters."""

    def __init__(self, min_length: int):
        if min_length < 0:
            raise ValueError("min_length must not be negative")
        self.min_length = min_length

    def validate(self, name: str, value: Optional[str]) -> None:
        if value is not None and len(value) < self.min_length:
            raise ValidationError(
                f'The minimum length for "{name}" is {self.min_length} characters.',
                field=name
            )

    def __repr__(self):
        return f"{type(self).__name__}(min_length={self.min_length})"


class NotBlankMinLengthValidator(Validator):
    """
    Secret rule: not blank, then at least ``min_length`` characters.

    The blank check runs first, so an empty string is reported as blank
    rather than as too short.
    """

    def __init__(self, min_length: int = 16):
        self._not_blank = NotBlankValidator()
        self._min_length = MinLengthValidator(min_length)

    @property
    def min_length(self) -> int:
        return self._min_length.min_length

    def validate(self, name: str, value: Optional[str]) -> None:
        self._not_blank.validate(name, value)
        self._min_length.validate(name, value)

    def __repr__(self):
        return f"{type(self).__name__}(min_length={self.min_length})"
