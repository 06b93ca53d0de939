from serverconf.config import (
    ConfigurationError, ParameterError, ValidationError,
    RuntimeConfigProvider, EnvConfigProvider, ServerConfig, load_server_config
)
from serverconf.logger import get_serverconf_logger, init_logger

__version__ = '0.1.0'
