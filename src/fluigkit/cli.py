"""Command-line interface for fluigkit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import click
from rich.markup import escape

from fluigkit import __version__
from fluigkit.config import (
    DEFAULT_CONFIG,
    FLUIG_DIRNAME,
    FluigConfig,
    get_home_config_path,
    get_local_config_path,
    load_config,
    local_config_exists,
    save_config,
)
from fluigkit.console import console, setup_logging
from fluigkit.errors import ScaffoldError
from fluigkit.scaffold import (
    ClickPrompter,
    DocumentOpener,
    EchoOpener,
    EditorOpener,
    ScaffoldOutcome,
    ScaffoldResult,
    Scaffolder,
    find_workspace_root,
)
from fluigkit.templates import (
    ArtifactCategory,
    TemplateCatalog,
    copy_default_templates,
    get_local_templates_path,
    load_catalog,
    resolve_templates_root,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """Settings resolved once per invocation and shared by all commands."""

    config: FluigConfig
    workspace_root: Path | None
    catalog: TemplateCatalog


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"fluig [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def load_state(workspace: str | None) -> AppState:
    """Resolve workspace, configuration and template catalog."""
    base_config = load_config()
    root = find_workspace_root(Path.cwd(), workspace or base_config.workspace)
    config = load_config(root) if root is not None else base_config
    templates_root = resolve_templates_root(root, config.templates_dir)
    return AppState(
        config=config,
        workspace_root=root,
        catalog=load_catalog(templates_root),
    )


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option(
    "--workspace",
    "-w",
    envvar="FLUIG_WORKSPACE",
    help="Workspace root (default: nearest directory containing .fluig/).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, workspace: str | None, verbose: bool) -> None:
    """fluig - scaffold datasets, forms and events in a Fluig workspace."""
    # Configure before loading so config and catalog discovery honour --verbose
    setup_logging("DEBUG" if verbose else "WARNING")
    state = load_state(workspace)
    if not verbose:
        setup_logging(state.config.log_level or "WARNING")
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        console.print("[bold]fluig[/bold] - Fluig workspace scaffolding")
        console.print("\nRun [cyan]fluig --help[/cyan] for available commands.")


def _make_opener(config: FluigConfig, no_open: bool) -> DocumentOpener:
    if no_open or config.open_after_create is False:
        return EchoOpener()
    return EditorOpener(config.editor)


def _run_scaffold(
    state: AppState, no_open: bool, action: Callable[[Scaffolder], ScaffoldResult]
) -> None:
    """Run one scaffolding flow and report its outcome."""
    scaffolder = Scaffolder(
        catalog=state.catalog,
        workspace_root=state.workspace_root,
        prompter=ClickPrompter(),
        opener=_make_opener(state.config, no_open),
    )
    try:
        result = action(scaffolder)
    except ScaffoldError as e:
        logger.debug("Scaffolding failed", exc_info=True)
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1) from None

    if result.target is None:
        return  # cancelled

    relative = escape(str(result.target.relative_path))
    if result.outcome is ScaffoldOutcome.MATERIALIZED:
        console.print(f"[green]Created {relative}[/green]")
    else:
        console.print(f"[dim]Already exists: {relative}[/dim]")


no_open_option = click.option(
    "--no-open", is_flag=True, help="Print the artifact path instead of opening it."
)


@main.group()
def new() -> None:
    """Create a dataset, form or event from a template."""


@new.command("dataset")
@click.argument("name", required=False)
@no_open_option
@click.pass_obj
def new_dataset(state: AppState, name: str | None, no_open: bool) -> None:
    """Create datasets/NAME.js."""
    _run_scaffold(state, no_open, lambda s: s.new_dataset(name))


@new.command("form")
@click.argument("name", required=False)
@no_open_option
@click.pass_obj
def new_form(state: AppState, name: str | None, no_open: bool) -> None:
    """Create forms/NAME/NAME.html."""
    _run_scaffold(state, no_open, lambda s: s.new_form(name))


@new.command("form-event")
@click.argument("path")
@click.option("--event", "-e", help="Event template to use (skips the picker).")
@no_open_option
@click.pass_obj
def new_form_event(
    state: AppState, path: str, event: str | None, no_open: bool
) -> None:
    """Create a form event for the form containing PATH."""
    _run_scaffold(state, no_open, lambda s: s.new_form_event(path, event))


@new.command("workflow-event")
@click.argument("path")
@click.option("--event", "-e", help="Event template to use (skips the picker).")
@click.option(
    "--function",
    "-f",
    "function_name",
    help="Generate a new shared function with this name.",
)
@no_open_option
@click.pass_obj
def new_workflow_event(
    state: AppState,
    path: str,
    event: str | None,
    function_name: str | None,
    no_open: bool,
) -> None:
    """Create a workflow script for the .process file at PATH."""
    if event and function_name:
        console.print("[red]Only one of --event, --function allowed[/red]")
        raise SystemExit(1)
    _run_scaffold(
        state,
        no_open,
        lambda s: s.new_workflow_event(path, event, function_name),
    )


@new.command("global-event")
@click.argument("path", required=False)
@click.option("--event", "-e", help="Event template to use (skips the picker).")
@no_open_option
@click.pass_obj
def new_global_event(
    state: AppState, path: str | None, event: str | None, no_open: bool
) -> None:
    """Create a global event under events/.

    PATH is accepted for symmetry with the other event commands and ignored.
    """
    _run_scaffold(state, no_open, lambda s: s.new_global_event(event))


@main.command()
@click.option(
    "--templates",
    "with_templates",
    is_flag=True,
    help="Copy the bundled templates into .fluig/templates/ for editing.",
)
@click.option("--force", is_flag=True, help="Overwrite templates already copied.")
def init(with_templates: bool, force: bool) -> None:
    """Mark the current directory as a Fluig workspace."""
    root = Path.cwd()
    fluig_dir = root / FLUIG_DIRNAME
    fluig_dir.mkdir(parents=True, exist_ok=True)

    config_path = get_local_config_path(root)
    if not local_config_exists(root):
        save_config(DEFAULT_CONFIG, config_path)
        console.print(f"[green]Configuration saved to {config_path}[/green]")
    else:
        console.print(f"[dim]Configuration already exists: {config_path}[/dim]")

    if with_templates:
        copied = copy_default_templates(get_local_templates_path(root), overwrite=force)
        if copied:
            console.print(f"[green]Copied {len(copied)} default templates[/green]")
        else:
            console.print("[dim]Templates already present; use --force to overwrite.[/dim]")

    console.print(f"[bold green]Workspace ready: {root}[/bold green]")


@main.command()
@click.argument(
    "category",
    required=False,
    type=click.Choice([c.value for c in ArtifactCategory]),
)
@click.pass_obj
def templates(state: AppState, category: str | None) -> None:
    """List available templates per category."""
    catalog = state.catalog
    console.print(f"[dim]Template root: {escape(str(catalog.root))}[/dim]\n")

    categories = (
        [ArtifactCategory(category)] if category else list(ArtifactCategory)
    )
    for cat in categories:
        ids = catalog.list_template_ids(cat)
        console.print(f"[bold]{cat.value}[/bold] ({len(ids)})")
        if not ids:
            console.print("  [yellow]No templates found.[/yellow]")
        for template_id in ids:
            console.print(f"  [cyan]{escape(template_id)}[/cyan]")


@main.command("config")
@click.pass_obj
def show_config(state: AppState) -> None:
    """Show the effective configuration."""
    console.print("\n[bold]Current Effective Configuration:[/bold]")
    console.print(f"  [dim]Global: {get_home_config_path()}[/dim]")
    console.print(f"  [dim]Local: {get_local_config_path(state.workspace_root)}[/dim]")
    console.print()

    for key, value in state.config.to_dict().items():
        console.print(f"  {key}: {value}")

    console.print()
    if state.workspace_root is not None:
        console.print(f"  [green]Workspace: {state.workspace_root}[/green]")
    else:
        console.print("  [yellow]Workspace: not found[/yellow]")
    console.print(f"  [dim]Templates: {state.catalog.root}[/dim]")
