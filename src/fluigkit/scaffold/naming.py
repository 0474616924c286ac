"""Per-category naming rules.

Every function here is pure: the same request always yields the same
target, and distinct names within a category never share a path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from fluigkit.errors import InvalidArtifactNameError
from fluigkit.templates.base import ArtifactCategory

DATASET_TEMPLATE = "createDataset"
FORM_TEMPLATE = "form"
SCRIPT_SUFFIX = ".js"
FORM_SUFFIX = ".html"

_FORBIDDEN_CHARS = ("/", "\\", "\0")


@dataclass(frozen=True)
class DatasetRequest:
    name: str


@dataclass(frozen=True)
class FormRequest:
    name: str


@dataclass(frozen=True)
class FormEventRequest:
    form_name: str
    event_name: str


@dataclass(frozen=True)
class GlobalEventRequest:
    event_name: str


@dataclass(frozen=True)
class WorkflowEventRequest:
    process_name: str
    event_name: str
    new_function: bool = False  # generate a stub instead of copying a template


ArtifactRequest = (
    DatasetRequest
    | FormRequest
    | FormEventRequest
    | GlobalEventRequest
    | WorkflowEventRequest
)


@dataclass(frozen=True)
class TargetArtifact:
    """Where an artifact goes and what fills it."""

    category: ArtifactCategory
    relative_path: PurePosixPath  # relative to the workspace root
    template_id: str
    is_generated: bool = False


def validate_name(name: str) -> str:
    """Return a stripped name that is safe to use as a single path segment.

    Raises:
        InvalidArtifactNameError: If the name is blank, a relative directory
            reference, or contains a path separator.
    """
    cleaned = name.strip()
    if not cleaned or cleaned in (".", ".."):
        raise InvalidArtifactNameError(name)
    if any(char in cleaned for char in _FORBIDDEN_CHARS):
        raise InvalidArtifactNameError(name)
    return cleaned


def derive_target(request: ArtifactRequest) -> TargetArtifact:
    """Map a request to its workspace-relative path and template."""
    match request:
        case DatasetRequest(name=name):
            filename = validate_name(name)
            if not filename.endswith(SCRIPT_SUFFIX):
                filename += SCRIPT_SUFFIX
            return TargetArtifact(
                category=ArtifactCategory.DATASET,
                relative_path=PurePosixPath("datasets", filename),
                template_id=DATASET_TEMPLATE,
            )
        case FormRequest(name=name):
            form = validate_name(name)
            return TargetArtifact(
                category=ArtifactCategory.FORM,
                relative_path=PurePosixPath("forms", form, form + FORM_SUFFIX),
                template_id=FORM_TEMPLATE,
            )
        case FormEventRequest(form_name=form_name, event_name=event_name):
            form = validate_name(form_name)
            event = validate_name(event_name)
            return TargetArtifact(
                category=ArtifactCategory.FORM_EVENT,
                relative_path=PurePosixPath(
                    "forms", form, "events", event + SCRIPT_SUFFIX
                ),
                template_id=event,
            )
        case GlobalEventRequest(event_name=event_name):
            event = validate_name(event_name)
            return TargetArtifact(
                category=ArtifactCategory.GLOBAL_EVENT,
                relative_path=PurePosixPath("events", event + SCRIPT_SUFFIX),
                template_id=event,
            )
        case WorkflowEventRequest(
            process_name=process_name,
            event_name=event_name,
            new_function=new_function,
        ):
            process = validate_name(process_name)
            event = validate_name(event_name)
            return TargetArtifact(
                category=ArtifactCategory.WORKFLOW_EVENT,
                relative_path=PurePosixPath(
                    "workflow", "scripts", f"{process}.{event}{SCRIPT_SUFFIX}"
                ),
                template_id=event,
                is_generated=new_function,
            )
    raise TypeError(f"Unsupported request: {request!r}")


def generate_function_stub(function_name: str) -> str:
    """Build the content of a new shared workflow function."""
    return f"""/**
 *
 *
 */
function {function_name}() {{

}}

"""
