# Configuration module
from .config_loader import ConfigLoader, merge_config
from .fixtures import Credentials, load_fixture, load_users
from .settings import ConfigError, E2ESettings, load_settings

__all__ = [
    "ConfigLoader",
    "ConfigError",
    "Credentials",
    "E2ESettings",
    "load_fixture",
    "load_settings",
    "load_users",
    "merge_config",
]
