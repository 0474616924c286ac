"""Scaffolding orchestrator.

Each command walks the same states: resolve the invocation context, let the
user choose a name, compute the target, then either open the existing
artifact or materialize a new one and open it. Cancelling a prompt ends the
flow without writing anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from fluigkit.errors import NoWorkspaceError, TemplateNotFoundError
from fluigkit.scaffold.context import form_name_from_path, process_name_from_path
from fluigkit.scaffold.naming import (
    ArtifactRequest,
    DatasetRequest,
    FormEventRequest,
    FormRequest,
    GlobalEventRequest,
    TargetArtifact,
    WorkflowEventRequest,
    derive_target,
    generate_function_stub,
)
from fluigkit.scaffold.prompts import Prompter
from fluigkit.scaffold.workspace import (
    DocumentOpener,
    FileStatus,
    FileSystem,
    LocalFileSystem,
)
from fluigkit.templates.base import ArtifactCategory
from fluigkit.templates.catalog import TemplateCatalog

logger = logging.getLogger(__name__)

DATASET_PROMPT = "What is the Dataset name (no spaces or special characters)?"
DATASET_PLACEHOLDER = "ds_dataset_name"
FORM_PROMPT = "What is the Form name (no spaces or special characters)?"
FORM_PLACEHOLDER = "FormName"
EVENT_PLACEHOLDER = "Select the event"
NEW_FUNCTION_OPTION = "New Function"
FUNCTION_PROMPT = "What is the name of the new function (no spaces or special characters)?"
FUNCTION_PLACEHOLDER = "functionName"


class ScaffoldOutcome(Enum):
    """How a scaffolding command ended."""

    EXISTING = "existing"  # artifact was already there and was opened
    MATERIALIZED = "materialized"  # artifact was written and opened
    ABORTED = "aborted"  # user cancelled a prompt


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of a scaffolding command."""

    outcome: ScaffoldOutcome
    target: TargetArtifact | None = None
    path: Path | None = None


CANCELLED = ScaffoldResult(ScaffoldOutcome.ABORTED)


class Scaffolder:
    """Creates or opens workspace artifacts from the template catalog."""

    def __init__(
        self,
        catalog: TemplateCatalog,
        workspace_root: Path | None,
        prompter: Prompter,
        opener: DocumentOpener,
        filesystem: FileSystem | None = None,
    ) -> None:
        self._catalog = catalog
        self._workspace_root = workspace_root
        self._prompter = prompter
        self._opener = opener
        self._fs = filesystem or LocalFileSystem()

    def new_dataset(self, name: str | None = None) -> ScaffoldResult:
        """Create datasets/<name>.js from the dataset template."""
        root = self._require_workspace()
        name = name or self._prompter.prompt_name(DATASET_PROMPT, DATASET_PLACEHOLDER)
        if not name:
            return CANCELLED
        return self._scaffold(root, DatasetRequest(name))

    def new_form(self, name: str | None = None) -> ScaffoldResult:
        """Create forms/<name>/<name>.html from the form template."""
        root = self._require_workspace()
        name = name or self._prompter.prompt_name(FORM_PROMPT, FORM_PLACEHOLDER)
        if not name:
            return CANCELLED
        return self._scaffold(root, FormRequest(name))

    def new_form_event(self, path: str, event: str | None = None) -> ScaffoldResult:
        """Create an event script for the form containing `path`."""
        root = self._require_workspace()
        form_name = form_name_from_path(path)
        event = self._choose_event(ArtifactCategory.FORM_EVENT, event)
        if not event:
            return CANCELLED
        return self._scaffold(root, FormEventRequest(form_name, event))

    def new_global_event(self, event: str | None = None) -> ScaffoldResult:
        """Create a global event script under events/."""
        root = self._require_workspace()
        event = self._choose_event(ArtifactCategory.GLOBAL_EVENT, event)
        if not event:
            return CANCELLED
        return self._scaffold(root, GlobalEventRequest(event))

    def new_workflow_event(
        self,
        path: str,
        event: str | None = None,
        function_name: str | None = None,
    ) -> ScaffoldResult:
        """Create a workflow script for the process file at `path`.

        Besides the catalog events, the user may pick NEW_FUNCTION_OPTION
        and type a function name; that script is generated, not copied.
        A pre-supplied function name is validated like any other name, so
        a blank one is rejected rather than treated as a cancellation.
        """
        root = self._require_workspace()
        process_name = process_name_from_path(path)

        if function_name is not None:
            request = WorkflowEventRequest(
                process_name, function_name, new_function=True
            )
        elif event is not None:
            self._require_template(ArtifactCategory.WORKFLOW_EVENT, event)
            request = WorkflowEventRequest(process_name, event)
        else:
            candidates = [
                *self._catalog.list_template_ids(ArtifactCategory.WORKFLOW_EVENT),
                NEW_FUNCTION_OPTION,
            ]
            choice = self._prompter.pick_one(candidates, EVENT_PLACEHOLDER)
            if not choice:
                return CANCELLED
            if choice == NEW_FUNCTION_OPTION:
                typed = self._prompter.prompt_name(FUNCTION_PROMPT, FUNCTION_PLACEHOLDER)
                if not typed:
                    return CANCELLED
                request = WorkflowEventRequest(process_name, typed, new_function=True)
            else:
                request = WorkflowEventRequest(process_name, choice)

        return self._scaffold(root, request)

    def _require_workspace(self) -> Path:
        if self._workspace_root is None:
            raise NoWorkspaceError()
        return self._workspace_root

    def _require_template(self, category: ArtifactCategory, template_id: str) -> None:
        if not self._catalog.has_template(category, template_id):
            raise TemplateNotFoundError(category.value, template_id)

    def _choose_event(self, category: ArtifactCategory, event: str | None) -> str | None:
        if event is not None:
            self._require_template(category, event)
            return event
        return self._prompter.pick_one(
            self._catalog.list_template_ids(category), EVENT_PLACEHOLDER
        )

    def _scaffold(self, root: Path, request: ArtifactRequest) -> ScaffoldResult:
        target = derive_target(request)
        path = root / target.relative_path

        if self._fs.stat(path) is FileStatus.EXISTS:
            logger.info("Opening existing artifact %s", path)
            self._opener.open(path)
            return ScaffoldResult(ScaffoldOutcome.EXISTING, target, path)

        if target.is_generated:
            content = generate_function_stub(target.template_id).encode("utf-8")
        else:
            content = self._catalog.resolve_template_content(
                target.category, target.template_id
            )

        self._fs.write_file(path, content)
        logger.info("Created %s from %s", path, target.template_id)
        self._opener.open(path)
        return ScaffoldResult(ScaffoldOutcome.MATERIALIZED, target, path)
