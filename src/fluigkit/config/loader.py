"""Configuration file loading and merging."""

import logging
from pathlib import Path

import yaml

from fluigkit.config.schema import DEFAULT_CONFIG, FluigConfig

logger = logging.getLogger(__name__)

FLUIG_DIRNAME = ".fluig"
CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.fluig/config.yaml."""
    return Path.home() / FLUIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path(workspace: Path | None = None) -> Path:
    """Get path to workspace config: <workspace>/.fluig/config.yaml.

    Falls back to the current directory when no workspace is known.
    """
    base = workspace if workspace is not None else Path.cwd()
    return base / FLUIG_DIRNAME / CONFIG_FILENAME


def local_config_exists(workspace: Path | None = None) -> bool:
    """Check if the workspace config exists."""
    return get_local_config_path(workspace).exists()


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Read one config layer.

    A missing, empty, malformed or non-mapping file contributes nothing;
    the latter two are logged so a typo in config.yaml is discoverable
    with --verbose.
    """
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.debug("Ignoring malformed config %s: %s", path, e)
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.debug(
            "Ignoring config %s: expected a mapping, got %s", path, type(data).__name__
        )
        return None
    logger.debug("Loaded config layer %s", path)
    return data


def load_config(workspace: Path | None = None) -> FluigConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.fluig/config.yaml)
    3. Workspace config (<workspace>/.fluig/config.yaml)
    """
    config = DEFAULT_CONFIG
    for path in (get_home_config_path(), get_local_config_path(workspace)):
        data = load_yaml_config(path)
        if data:
            config = config.merge(FluigConfig.from_dict(data))
    return config


def save_config(config: FluigConfig, path: Path) -> None:
    """Write the non-None fields of `config` to `path` as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False)
    path.write_text(text, encoding="utf-8")
    logger.debug("Saved config to %s", path)
