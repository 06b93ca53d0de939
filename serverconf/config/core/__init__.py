"""
Core configuration management components.

This module provides the foundational components for startup parameter loading:
- ParameterSpec: Declaration of a parameter and its validators
- ConfigProvider: Abstract provider interface and implementations
- Validator: Validation framework for parameter values
- ConfigurationLoader: Resolves declarations against a provider
"""

from .validator import (
    ConfigurationError, ParameterError, ValidationError, ValidationResult,
    Validator, NotBlankValidator, MinLengthValidator, NotBlankMinLengthValidator
)
from .node_id import NodeIdFileValidator
from .parameter import ParameterSpec
from .provider import ConfigProvider, RuntimeConfigProvider, EnvConfigProvider
from .loader import Configuration, ConfigurationLoader

__all__ = [
    # Errors and results
    'ConfigurationError',
    'ParameterError',
    'ValidationError',
    'ValidationResult',

    # Validators
    'Validator',
    'NotBlankValidator',
    'MinLengthValidator',
    'NotBlankMinLengthValidator',
    'NodeIdFileValidator',

    # Declarations
    'ParameterSpec',

    # Providers
    'ConfigProvider',
    'RuntimeConfigProvider',
    'EnvConfigProvider',

    # Loader
    'Configuration',
    'ConfigurationLoader'
]
