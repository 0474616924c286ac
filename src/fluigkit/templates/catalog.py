"""Read-only template catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fluigkit.errors import TemplateNotFoundError
from fluigkit.templates.base import ArtifactCategory, TemplateCatalogEntry

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".txt"


@dataclass(frozen=True)
class TemplateCatalog:
    """Templates available per artifact category.

    Built once from a template root and never mutated afterwards. Content is
    read lazily, so a file removed after the catalog was built surfaces as
    TemplateNotFoundError at resolution time.
    """

    root: Path
    entries: tuple[TemplateCatalogEntry, ...] = ()

    def list_template_ids(self, category: ArtifactCategory) -> list[str]:
        """Return identifiers available for a category, in display order."""
        return [e.template_id for e in self.entries if e.category is category]

    def get_entry(
        self, category: ArtifactCategory, template_id: str
    ) -> TemplateCatalogEntry | None:
        """Find the catalog entry for an identifier, or None."""
        for entry in self.entries:
            if entry.category is category and entry.template_id == template_id:
                return entry
        return None

    def has_template(self, category: ArtifactCategory, template_id: str) -> bool:
        """Check whether the catalog lists an identifier for a category."""
        return self.get_entry(category, template_id) is not None

    def resolve_template_content(
        self, category: ArtifactCategory, template_id: str
    ) -> bytes:
        """Read the raw bytes backing a template.

        Raises:
            TemplateNotFoundError: If the identifier is unknown or its file
                is gone.
        """
        entry = self.get_entry(category, template_id)
        if entry is None:
            raise TemplateNotFoundError(category.value, template_id)
        try:
            return entry.source.read_bytes()
        except FileNotFoundError:
            logger.warning("Template file disappeared: %s", entry.source)
            raise TemplateNotFoundError(category.value, template_id) from None


def list_template_files(directory: Path) -> list[Path]:
    """List template files directly inside a directory, sorted by name."""
    if not directory.is_dir():
        logger.debug("Template directory not found: %s", directory)
        return []
    return sorted(
        p for p in directory.glob(f"*{TEMPLATE_SUFFIX}") if p.is_file()
    )


def load_catalog(root: Path) -> TemplateCatalog:
    """Build a catalog from a template root.

    Each category lists the *.txt files of its subdirectory; the identifier
    is the file name without extension.
    """
    entries: list[TemplateCatalogEntry] = []
    for category in ArtifactCategory:
        directory = root / category.template_subdir
        for path in list_template_files(directory):
            entries.append(
                TemplateCatalogEntry(
                    category=category,
                    template_id=path.name[: -len(TEMPLATE_SUFFIX)],
                    source=path,
                )
            )

    logger.debug("Loaded %d templates from %s", len(entries), root)
    return TemplateCatalog(root=root, entries=tuple(entries))
