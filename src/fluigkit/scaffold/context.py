"""Infer the target entity of a command from the path it was invoked on."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PureWindowsPath

from fluigkit.errors import NotAFormContextError, NotAProcessContextError
from fluigkit.templates.base import ArtifactCategory

FORMS_SEGMENT = "forms"
PROCESS_SUFFIX = ".process"


@dataclass(frozen=True)
class ResolvedEntity:
    """Category plus the form or process name a command applies to."""

    category: ArtifactCategory
    entity_name: str | None = None


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    Both separators are accepted so Windows paths resolve the same way.
    """
    posix = PureWindowsPath(path).as_posix() if "\\" in path else path
    return [segment for segment in posix.split("/") if segment]


def form_name_from_path(path: str) -> str:
    """Return the segment following the last ``forms`` segment.

    Raises:
        NotAFormContextError: If no ``forms/<name>`` pair is present.
    """
    segments = split_segments(path)
    # Last occurrence wins for nested layouts such as forms/x/forms/y
    for index in range(len(segments) - 2, -1, -1):
        if segments[index] == FORMS_SEGMENT:
            return segments[index + 1]
    raise NotAFormContextError(path)


def process_name_from_path(path: str) -> str:
    """Return the base name of a trailing ``<name>.process`` segment.

    Raises:
        NotAProcessContextError: If the last segment is not a process file.
    """
    segments = split_segments(path)
    if segments:
        last = segments[-1]
        if last.endswith(PROCESS_SUFFIX) and len(last) > len(PROCESS_SUFFIX):
            return last[: -len(PROCESS_SUFFIX)]
    raise NotAProcessContextError(path)


def resolve_context(path: str | None, category: ArtifactCategory) -> ResolvedEntity:
    """Resolve an invocation path for a category.

    Only form and workflow events derive a name from the path; every other
    category is created relative to the workspace root and ignores it.
    """
    match category:
        case ArtifactCategory.FORM_EVENT:
            return ResolvedEntity(category, form_name_from_path(path or ""))
        case ArtifactCategory.WORKFLOW_EVENT:
            return ResolvedEntity(category, process_name_from_path(path or ""))
        case _:
            return ResolvedEntity(category)
