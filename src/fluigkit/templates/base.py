"""Artifact categories and template catalog entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ArtifactCategory(Enum):
    """Kinds of artifacts that can be scaffolded."""

    DATASET = "dataset"
    FORM = "form"
    FORM_EVENT = "formEvent"
    WORKFLOW_EVENT = "workflowEvent"
    GLOBAL_EVENT = "globalEvent"

    @property
    def template_subdir(self) -> str:
        """Subdirectory of the template root holding this category's files.

        Datasets and forms share the root directory.
        """
        return _TEMPLATE_SUBDIRS[self]


_TEMPLATE_SUBDIRS: dict[ArtifactCategory, str] = {
    ArtifactCategory.DATASET: "",
    ArtifactCategory.FORM: "",
    ArtifactCategory.FORM_EVENT: "formEvents",
    ArtifactCategory.WORKFLOW_EVENT: "workflowEvents",
    ArtifactCategory.GLOBAL_EVENT: "globalEvents",
}


@dataclass(frozen=True)
class TemplateCatalogEntry:
    """A single template available for a category."""

    category: ArtifactCategory
    template_id: str  # file name without the .txt extension
    source: Path  # file backing the template
