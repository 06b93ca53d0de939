"""
Server configuration domain.

This module provides the server startup parameters: the signing secret
and the node ID file location.
"""

from .config import ServerConfig, load_server_config
from .schema import (
    SERVER_PARAMETERS, PASSWORD_SECRET, NODE_ID_FILE, PASSWORD_SECRET_MIN_LENGTH
)

__all__ = [
    'ServerConfig',
    'load_server_config',
    'SERVER_PARAMETERS',
    'PASSWORD_SECRET',
    'NODE_ID_FILE',
    'PASSWORD_SECRET_MIN_LENGTH'
]
