"""fluigkit - contextual scaffolding for Fluig workspaces."""

__version__ = "0.1.0"
