"""
Configuration provider base classes and implementations.

Providers supply raw string values keyed by parameter name. A provider
never interprets values; absent keys are reported as ``None`` so that they
stay distinct from empty strings.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from serverconf.logger import get_serverconf_logger


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.

    Defines the interface that all configuration providers must implement.
    """

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_serverconf_logger(f"ConfigProvider_{domain}")

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the raw value for a key, or None if it is not supplied."""
        pass

    @abstractmethod
    def get_config(self) -> Dict[str, str]:
        """Get all supplied key/value pairs."""
        pass

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class RuntimeConfigProvider(ConfigProvider):
    """
    Runtime configuration provider that keeps config in memory.

    Keys mapped to ``None`` are treated as not supplied.
    """

    def __init__(self, initial_config: Optional[Mapping[str, Optional[str]]] = None,
                 domain: str = "runtime"):
        super().__init__(domain)
        self._config = dict(initial_config or {})
        self.logger.debug("Runtime provider initialized", keys=sorted(self._config))

    def get(self, key: str) -> Optional[str]:
        return self._config.get(key)

    def get_config(self) -> Dict[str, str]:
        """Get current configuration from memory."""
        return {k: v for k, v in self._config.items() if v is not None}


class EnvConfigProvider(ConfigProvider):
    """
    Environment configuration provider.

    Parameter ``password_secret`` is read from ``<PREFIX>PASSWORD_SECRET``.
    An environment variable set to the empty string is a supplied value.
    """

    def __init__(self, prefix: str = "SERVERCONF_", environ: Optional[Mapping[str, str]] = None,
                 domain: str = "environment"):
        super().__init__(domain)
        self.prefix = prefix
        self._environ = os.environ if environ is None else environ
        self.logger.debug("Environment provider initialized", prefix=prefix)

    def env_name(self, key: str) -> str:
        return f"{self.prefix}{key.upper()}"

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(self.env_name(key))

    def get_config(self) -> Dict[str, str]:
        return {
            name[len(self.prefix):].lower(): value
            for name, value in self._environ.items()
            if name.startswith(self.prefix)
        }
