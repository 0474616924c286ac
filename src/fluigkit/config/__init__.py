"""Configuration loading."""

from fluigkit.config.loader import (
    FLUIG_DIRNAME,
    get_home_config_path,
    get_local_config_path,
    load_config,
    local_config_exists,
    save_config,
)
from fluigkit.config.schema import DEFAULT_CONFIG, FluigConfig

__all__ = [
    "DEFAULT_CONFIG",
    "FLUIG_DIRNAME",
    "FluigConfig",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
    "local_config_exists",
    "save_config",
]
