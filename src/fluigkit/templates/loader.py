"""Template root discovery and default template installation."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from fluigkit.config.loader import FLUIG_DIRNAME

logger = logging.getLogger(__name__)

TEMPLATE_DIRNAME = "templates"


def get_package_templates_path() -> Path:
    """Get path to package-bundled default templates."""
    return Path(__file__).parent / "default"


def get_global_templates_path() -> Path:
    """Get path to global user templates: ~/.fluig/templates/."""
    return Path.home() / FLUIG_DIRNAME / TEMPLATE_DIRNAME


def get_local_templates_path(workspace: Path | None = None) -> Path:
    """Get path to workspace templates: <workspace>/.fluig/templates/."""
    base = workspace if workspace is not None else Path.cwd()
    return base / FLUIG_DIRNAME / TEMPLATE_DIRNAME


def get_template_search_paths(
    workspace: Path | None = None, configured: str | None = None
) -> list[Path]:
    """Return template root candidates in priority order (highest first).

    Resolution order:
    1. Configured templates_dir
    2. Workspace templates (<workspace>/.fluig/templates/)
    3. Global user templates (~/.fluig/templates/)
    4. Package-bundled defaults
    """
    paths: list[Path] = []

    if configured:
        paths.append(Path(configured).expanduser())

    if workspace is not None:
        local = get_local_templates_path(workspace)
        if local.is_dir():
            paths.append(local)

    global_templates = get_global_templates_path()
    if global_templates.is_dir():
        paths.append(global_templates)

    paths.append(get_package_templates_path())
    return paths


def resolve_templates_root(
    workspace: Path | None = None, configured: str | None = None
) -> Path:
    """Pick the template root to use for this process.

    A configured directory wins even when it does not exist, so that a typo
    shows up as an empty catalog instead of silently using other templates.
    """
    root = get_template_search_paths(workspace, configured)[0]
    logger.debug("Using template root %s", root)
    return root


def copy_default_templates(target: Path, overwrite: bool = False) -> list[str]:
    """Copy package default templates into a template root.

    Args:
        target: Destination template root.
        overwrite: If True, overwrite existing files. If False, skip them.

    Returns:
        Relative paths (posix) of the template files that were copied.
    """
    package_path = get_package_templates_path()
    copied: list[str] = []

    for source in sorted(package_path.rglob("*.txt")):
        relative = source.relative_to(package_path)
        dest = target / relative

        if dest.exists() and not overwrite:
            continue

        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
        copied.append(relative.as_posix())

    return copied
