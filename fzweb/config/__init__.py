"""Settings and file locations."""

from .paths import PathProvider, default_config_dir, default_store_path, fixed_path
from .settings import ConfigurationManager, FzwebConfig

__all__ = [
    "ConfigurationManager",
    "FzwebConfig",
    "PathProvider",
    "default_config_dir",
    "default_store_path",
    "fixed_path",
]
