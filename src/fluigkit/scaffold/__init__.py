"""Contextual scaffolding engine."""

from fluigkit.scaffold.context import ResolvedEntity, resolve_context
from fluigkit.scaffold.naming import (
    DatasetRequest,
    FormEventRequest,
    FormRequest,
    GlobalEventRequest,
    TargetArtifact,
    WorkflowEventRequest,
    derive_target,
    generate_function_stub,
    validate_name,
)
from fluigkit.scaffold.orchestrator import (
    NEW_FUNCTION_OPTION,
    ScaffoldOutcome,
    ScaffoldResult,
    Scaffolder,
)
from fluigkit.scaffold.prompts import ClickPrompter, Prompter
from fluigkit.scaffold.workspace import (
    DocumentOpener,
    EchoOpener,
    EditorOpener,
    FileStatus,
    FileSystem,
    LocalFileSystem,
    find_workspace_root,
)

__all__ = [
    "NEW_FUNCTION_OPTION",
    "ClickPrompter",
    "DatasetRequest",
    "DocumentOpener",
    "EchoOpener",
    "EditorOpener",
    "FileStatus",
    "FileSystem",
    "FormEventRequest",
    "FormRequest",
    "GlobalEventRequest",
    "LocalFileSystem",
    "Prompter",
    "ResolvedEntity",
    "ScaffoldOutcome",
    "ScaffoldResult",
    "Scaffolder",
    "TargetArtifact",
    "WorkflowEventRequest",
    "derive_target",
    "find_workspace_root",
    "generate_function_stub",
    "resolve_context",
    "validate_name",
]
