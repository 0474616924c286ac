"""Configuration schema for fluigkit."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FluigConfig:
    """fluigkit configuration schema.

    None values indicate "not set" and will use defaults or be inherited
    from a lower-precedence layer. Instances are immutable; the effective
    configuration is built once per command and passed around by reference.
    """

    # Workspace settings
    workspace: str | None = None
    templates_dir: str | None = None

    # Editor settings
    editor: str | None = None
    open_after_create: bool | None = None

    # Logging
    log_level: str | None = None

    def merge(self, other: FluigConfig) -> FluigConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new FluigConfig instance.
        """
        return FluigConfig(
            workspace=other.workspace if other.workspace is not None else self.workspace,
            templates_dir=(
                other.templates_dir
                if other.templates_dir is not None
                else self.templates_dir
            ),
            editor=other.editor if other.editor is not None else self.editor,
            open_after_create=(
                other.open_after_create
                if other.open_after_create is not None
                else self.open_after_create
            ),
            log_level=other.log_level if other.log_level is not None else self.log_level,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FluigConfig:
        """Create a FluigConfig from a dictionary.

        Unknown keys are ignored. Type validation is performed.
        """
        workspace = data.get("workspace")
        templates_dir = data.get("templates_dir")
        editor = data.get("editor")
        open_raw = data.get("open_after_create")
        open_after_create = bool(open_raw) if open_raw is not None else None

        log_level_raw = data.get("log_level")
        log_level: str | None = None
        if isinstance(log_level_raw, str) and log_level_raw.upper() in LOG_LEVELS:
            log_level = log_level_raw.upper()

        return cls(
            workspace=str(workspace) if workspace is not None else None,
            templates_dir=str(templates_dir) if templates_dir is not None else None,
            editor=str(editor) if editor is not None else None,
            open_after_create=open_after_create,
            log_level=log_level,
        )


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = FluigConfig(
    open_after_create=True,
    log_level="WARNING",
)
