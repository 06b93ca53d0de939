"""
Server domain configuration classes.

This module defines the typed view of the validated server startup
parameters and the entry point that loads them.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from serverconf.config.core import Configuration, ConfigurationLoader, ConfigProvider
from .schema import SERVER_PARAMETERS, PASSWORD_SECRET, NODE_ID_FILE


@dataclass(frozen=True)
class ServerConfig:
    """
    Validated server startup configuration.

    Only built from values that passed every declared validator.
    """
    password_secret: str = field(repr=False)
    node_id_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            PASSWORD_SECRET: self.password_secret,
            NODE_ID_FILE: self.node_id_file
        }

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> 'ServerConfig':
        """Create configuration from a loaded Configuration."""
        return cls(
            password_secret=configuration[PASSWORD_SECRET],
            node_id_file=configuration.get(NODE_ID_FILE)
        )


def load_server_config(provider: ConfigProvider, fail_fast: bool = True) -> ServerConfig:
    """
    Load and validate the server parameters from a provider.

    Raises:
        ParameterError: password_secret is not supplied
        ValidationError: A supplied value failed validation
    """
    loader = ConfigurationLoader(SERVER_PARAMETERS)
    return ServerConfig.from_configuration(loader.load(provider, fail_fast=fail_fast))
