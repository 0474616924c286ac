"""Scaffolding error hierarchy.

Every error is scoped to a single command invocation. The CLI reports them
as short messages; nothing here is fatal to the process.
"""


class ScaffoldError(Exception):
    """Base exception for scaffolding failures."""


class NoWorkspaceError(ScaffoldError):
    """Raised when no workspace root could be found."""

    def __init__(self) -> None:
        super().__init__(
            "You need to be inside a Fluig workspace (run 'fluig init')."
        )


class InvalidInvocationContextError(ScaffoldError):
    """Raised when a command is invoked on the wrong kind of path."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class NotAFormContextError(InvalidInvocationContextError):
    """Raised when a form event is requested outside a form folder."""

    def __init__(self, path: str) -> None:
        super().__init__("Select a form to create the event.", path)


class NotAProcessContextError(InvalidInvocationContextError):
    """Raised when a workflow event is requested outside a .process file."""

    def __init__(self, path: str) -> None:
        super().__init__("Select a process to create the event.", path)


class InvalidArtifactNameError(ScaffoldError):
    """Raised when a name would escape its folder or is otherwise unusable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid name: {name!r}")
        self.name = name


class TemplateNotFoundError(ScaffoldError):
    """Raised when no template file backs a catalog identifier."""

    def __init__(self, category: str, template_id: str) -> None:
        super().__init__(f"Template not found: {category}/{template_id}")
        self.category = category
        self.template_id = template_id


class ArtifactWriteError(ScaffoldError):
    """Raised when an artifact could not be written to disk."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
