"""Template catalog and discovery."""

from fluigkit.templates.base import ArtifactCategory, TemplateCatalogEntry
from fluigkit.templates.catalog import TemplateCatalog, load_catalog
from fluigkit.templates.loader import (
    copy_default_templates,
    get_global_templates_path,
    get_local_templates_path,
    get_package_templates_path,
    get_template_search_paths,
    resolve_templates_root,
)

__all__ = [
    "ArtifactCategory",
    "TemplateCatalog",
    "TemplateCatalogEntry",
    "copy_default_templates",
    "get_global_templates_path",
    "get_local_templates_path",
    "get_package_templates_path",
    "get_template_search_paths",
    "load_catalog",
    "resolve_templates_root",
]
