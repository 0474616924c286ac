"""Workspace, filesystem and document collaborators."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Protocol

import click
from rich.markup import escape

from fluigkit.config.loader import FLUIG_DIRNAME
from fluigkit.console import console
from fluigkit.errors import ArtifactWriteError

logger = logging.getLogger(__name__)


class FileStatus(Enum):
    """Result of checking a path."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"


def find_workspace_root(start: Path, explicit: str | Path | None = None) -> Path | None:
    """Locate the workspace root.

    An explicit root is used as-is when it is an existing directory.
    Otherwise walks up from `start` to the nearest directory holding a
    .fluig/ directory. Returns None when there is no workspace.
    """
    if explicit:
        root = Path(explicit).expanduser()
        if root.is_dir():
            return root.resolve()
        logger.warning("Configured workspace does not exist: %s", root)
        return None

    current = start.resolve()
    for candidate in (current, *current.parents):
        if (candidate / FLUIG_DIRNAME).is_dir():
            return candidate
    return None


class FileSystem(Protocol):
    """Filesystem operations needed to materialize artifacts."""

    def stat(self, path: Path) -> FileStatus: ...

    def write_file(self, path: Path, data: bytes) -> None: ...


class LocalFileSystem:
    """Local disk implementation of FileSystem."""

    def stat(self, path: Path) -> FileStatus:
        """Report whether something exists at path."""
        return FileStatus.EXISTS if path.exists() else FileStatus.NOT_FOUND

    def write_file(self, path: Path, data: bytes) -> None:
        """Write bytes, creating missing parent directories.

        Raises:
            ArtifactWriteError: If the OS refuses the write.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise ArtifactWriteError(str(path), e.strerror or str(e)) from e


class DocumentOpener(Protocol):
    """Opens an artifact for editing."""

    def open(self, path: Path) -> None: ...


class EditorOpener:
    """Opens documents in the user's editor via click.edit."""

    def __init__(self, editor: str | None = None) -> None:
        """Initialize with an editor command ($VISUAL/$EDITOR when None)."""
        self._editor = editor

    def open(self, path: Path) -> None:
        console.print(f"[dim]Opening {escape(str(path))}[/dim]")
        try:
            click.edit(filename=str(path), editor=self._editor)
        except click.ClickException as e:
            # The artifact is already on disk; a broken editor is not fatal
            logger.warning("Could not open editor for %s: %s", path, e.format_message())
            console.print(f"[yellow]Could not open editor: {e.format_message()}[/yellow]")


class EchoOpener:
    """Prints the artifact path instead of launching an editor."""

    def open(self, path: Path) -> None:
        console.print(f"[cyan]{escape(str(path))}[/cyan]")
