"""
Configuration Adapters - Load configuration from various sources.
"""

from .credentials import Credentials, CredentialsFile, parse_properties
from .environment import EnvironmentConfigProvider

__all__ = [
    "Credentials",
    "CredentialsFile",
    "parse_properties",
    "EnvironmentConfigProvider",
]
