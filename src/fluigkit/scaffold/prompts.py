"""Interactive selection: pick one candidate or type a name."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import click
from rich.markup import escape

from fluigkit.console import console


class Prompter(Protocol):
    """Asks the user for a value; None means the user cancelled."""

    def pick_one(self, candidates: Sequence[str], placeholder: str) -> str | None: ...

    def prompt_name(self, prompt: str, placeholder: str) -> str | None: ...


class ClickPrompter:
    """Terminal prompts backed by click.

    Blank answers and Ctrl-C/Ctrl-D count as cancellation.
    """

    def pick_one(self, candidates: Sequence[str], placeholder: str) -> str | None:
        """Show a numbered list and read a number or an exact name."""
        if not candidates:
            console.print("[yellow]Nothing to choose from.[/yellow]")
            return None

        console.print(f"[bold]{placeholder}[/bold]")
        for i, candidate in enumerate(candidates, 1):
            console.print(f"  {i}. [cyan]{escape(candidate)}[/cyan]")

        while True:
            answer = self._ask("Choice")
            if answer is None:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(candidates):
                return candidates[int(answer) - 1]
            if answer in candidates:
                return answer
            console.print(f"[red]Invalid choice: {escape(answer)}[/red]")

    def prompt_name(self, prompt: str, placeholder: str) -> str | None:
        """Read a free-form name; the placeholder is shown as a hint."""
        console.print(f"[bold]{prompt}[/bold] [dim](e.g. {placeholder})[/dim]")
        return self._ask("Name")

    @staticmethod
    def _ask(label: str) -> str | None:
        try:
            answer: str = click.prompt(label, default="", show_default=False)
        except click.Abort:
            return None
        answer = answer.strip()
        return answer or None
