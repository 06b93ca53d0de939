"""
Startup configuration system.

This module provides:
- Core parameter declarations, providers, validators and the loader
- The server domain with its parameter table and typed configuration
"""

# Core infrastructure
from .core import (
    ConfigurationError, ParameterError, ValidationError, ValidationResult,
    Validator, NotBlankValidator, MinLengthValidator, NotBlankMinLengthValidator,
    NodeIdFileValidator, ParameterSpec, ConfigProvider, RuntimeConfigProvider,
    EnvConfigProvider, Configuration, ConfigurationLoader
)

# Domain configurations
from .server import ServerConfig, SERVER_PARAMETERS, load_server_config


__all__ = [
    # Core infrastructure
    'ConfigurationError',
    'ParameterError',
    'ValidationError',
    'ValidationResult',
    'Validator',
    'NotBlankValidator',
    'MinLengthValidator',
    'NotBlankMinLengthValidator',
    'NodeIdFileValidator',
    'ParameterSpec',
    'ConfigProvider',
    'RuntimeConfigProvider',
    'EnvConfigProvider',
    'Configuration',
    'ConfigurationLoader',

    # Server domain
    'ServerConfig',
    'SERVER_PARAMETERS',
    'load_server_config'
]
