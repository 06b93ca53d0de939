"""
Parameter declarations.

A ParameterSpec names one startup parameter, whether it must be supplied,
and the validators applied to its value in declaration order.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .validator import Validator


@dataclass(frozen=True)
class ParameterSpec:
    """Declaration of a single startup parameter."""
    key: str
    required: bool = False
    validators: Tuple[Validator, ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self):
        if not self.key:
            raise ValueError("Parameter key must not be empty")
        # Accept lists at declaration sites but keep the spec immutable
        object.__setattr__(self, 'validators', tuple(self.validators))
