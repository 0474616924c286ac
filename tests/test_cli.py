"""Tests for the CLI."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from fluigkit import __version__
from fluigkit.cli import main
from fluigkit.templates import get_package_templates_path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real ~/.fluig out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("FLUIG_WORKSPACE", raising=False)
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "ws"
    (root / ".fluig").mkdir(parents=True)
    return root


def _invoke(args: list[str], input: str | None = None):  # noqa: A002
    runner = CliRunner()
    return runner.invoke(main, args, input=input)


def test_cli_help() -> None:
    """Test that --help exits cleanly."""
    result = _invoke(["--help"])
    assert result.exit_code == 0
    assert "fluig" in result.output.lower()


def test_cli_version() -> None:
    """Test that --version shows the version."""
    result = _invoke(["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_new_help_lists_commands() -> None:
    """Test that all five scaffolding commands are registered."""
    result = _invoke(["new", "--help"])
    assert result.exit_code == 0
    for name in ("dataset", "form", "form-event", "workflow-event", "global-event"):
        assert name in result.output


class TestNewCommands:
    """Tests for the `fluig new` commands."""

    def test_dataset_with_name(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "new", "dataset", "ds_clientes", "--no-open"])

        assert result.exit_code == 0
        assert "Created datasets/ds_clientes.js" in result.output
        expected = (get_package_templates_path() / "createDataset.txt").read_bytes()
        assert (workspace / "datasets" / "ds_clientes.js").read_bytes() == expected

    def test_dataset_prompts_for_name(self, workspace: Path) -> None:
        result = _invoke(
            ["-w", str(workspace), "new", "dataset", "--no-open"], input="ds_vendas\n"
        )

        assert result.exit_code == 0
        assert (workspace / "datasets" / "ds_vendas.js").exists()

    def test_dataset_blank_name_is_silent_noop(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "new", "dataset", "--no-open"], input="\n")

        assert result.exit_code == 0
        assert not (workspace / "datasets").exists()
        assert "Created" not in result.output

    def test_dataset_twice_reports_existing(self, workspace: Path) -> None:
        args = ["-w", str(workspace), "new", "dataset", "ds_clientes", "--no-open"]
        _invoke(args)
        result = _invoke(args)

        assert result.exit_code == 0
        assert "Already exists: datasets/ds_clientes.js" in result.output

    def test_form(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "new", "form", "Cadastro", "--no-open"])

        assert result.exit_code == 0
        assert (workspace / "forms" / "Cadastro" / "Cadastro.html").exists()

    def test_form_event_picker_by_number(self, workspace: Path) -> None:
        form_path = str(workspace / "forms" / "Cadastro" / "Cadastro.html")
        result = _invoke(
            ["-w", str(workspace), "new", "form-event", form_path, "--no-open"],
            input="1\n",
        )

        assert result.exit_code == 0
        assert "Select the event" in result.output
        events = list((workspace / "forms" / "Cadastro" / "events").glob("*.js"))
        assert len(events) == 1

    def test_form_event_picker_by_name(self, workspace: Path) -> None:
        result = _invoke(
            ["-w", str(workspace), "new", "form-event", "forms/Cadastro", "--no-open"],
            input="nope\nvalidateForm\n",
        )

        assert result.exit_code == 0
        assert "Invalid choice: nope" in result.output
        assert (workspace / "forms" / "Cadastro" / "events" / "validateForm.js").exists()

    def test_form_event_outside_form(self, workspace: Path) -> None:
        result = _invoke(
            ["-w", str(workspace), "new", "form-event", "datasets/ds.js", "--no-open"]
        )

        assert result.exit_code == 1
        assert "Select a form to create the event." in result.output
        assert not (workspace / "forms").exists()

    def test_form_event_unknown_template(self, workspace: Path) -> None:
        result = _invoke(
            [
                "-w",
                str(workspace),
                "new",
                "form-event",
                "forms/Cadastro",
                "--event",
                "nope",
                "--no-open",
            ]
        )

        assert result.exit_code == 1
        assert "Template not found" in result.output

    def test_workflow_event_new_function(self, workspace: Path) -> None:
        result = _invoke(
            [
                "-w",
                str(workspace),
                "new",
                "workflow-event",
                "workflow/diagrams/Aprovacao.process",
                "--no-open",
            ],
            input="New Function\ncalcularTotal\n",
        )

        assert result.exit_code == 0
        script = workspace / "workflow" / "scripts" / "Aprovacao.calcularTotal.js"
        assert "function calcularTotal()" in script.read_text()

    def test_workflow_event_template(self, workspace: Path) -> None:
        result = _invoke(
            [
                "-w",
                str(workspace),
                "new",
                "workflow-event",
                "Aprovacao.process",
                "--event",
                "beforeTaskSave",
                "--no-open",
            ]
        )

        assert result.exit_code == 0
        expected = (
            get_package_templates_path() / "workflowEvents" / "beforeTaskSave.txt"
        ).read_bytes()
        script = workspace / "workflow" / "scripts" / "Aprovacao.beforeTaskSave.js"
        assert script.read_bytes() == expected

    def test_workflow_event_rejects_event_and_function(self, workspace: Path) -> None:
        result = _invoke(
            [
                "-w",
                str(workspace),
                "new",
                "workflow-event",
                "Aprovacao.process",
                "-e",
                "beforeTaskSave",
                "-f",
                "helper",
            ]
        )

        assert result.exit_code == 1
        assert "Only one of --event, --function allowed" in result.output

    def test_workflow_event_blank_function(self, workspace: Path) -> None:
        result = _invoke(
            [
                "-w",
                str(workspace),
                "new",
                "workflow-event",
                "Aprovacao.process",
                "--function",
                "",
                "--no-open",
            ]
        )

        assert result.exit_code == 1
        assert "Invalid name" in result.output
        assert not (workspace / "workflow").exists()

    def test_workflow_event_outside_process(self, workspace: Path) -> None:
        result = _invoke(
            ["-w", str(workspace), "new", "workflow-event", "forms/Cadastro", "--no-open"]
        )

        assert result.exit_code == 1
        assert "Select a process to create the event." in result.output

    def test_global_event(self, workspace: Path) -> None:
        result = _invoke(
            ["-w", str(workspace), "new", "global-event", "--event", "onNotify", "--no-open"]
        )

        assert result.exit_code == 0
        assert (workspace / "events" / "onNotify.js").exists()

    def test_no_workspace(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = _invoke(["new", "dataset", "ds_clientes", "--no-open"])

        assert result.exit_code == 1
        assert "Fluig workspace" in result.output
        assert not (tmp_path / "datasets").exists()

    def test_workspace_found_from_subdirectory(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        subdir = workspace / "forms" / "Cadastro"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)

        result = _invoke(["new", "global-event", "-e", "onNotify", "--no-open"])

        assert result.exit_code == 0
        assert (workspace / "events" / "onNotify.js").exists()

    def test_invalid_name(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "new", "form", "../evil", "--no-open"])

        assert result.exit_code == 1
        assert "Invalid name" in result.output

    def test_open_after_create_false_uses_echo(self, workspace: Path) -> None:
        (workspace / ".fluig" / "config.yaml").write_text(
            "open_after_create: false\n"
        )
        result = _invoke(["-w", str(workspace), "new", "form", "Cadastro"])

        assert result.exit_code == 0
        assert "Created forms/Cadastro/Cadastro.html" in result.output


class TestInitCommand:
    """Tests for the init command."""

    def test_init_creates_workspace(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)

        result = _invoke(["init"])

        assert result.exit_code == 0
        config_path = project / ".fluig" / "config.yaml"
        data = yaml.safe_load(config_path.read_text())
        assert data["open_after_create"] is True

    def test_init_with_templates(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = _invoke(["init", "--templates"])

        assert result.exit_code == 0
        assert "default templates" in result.output
        assert (tmp_path / ".fluig" / "templates" / "formEvents" / "validateForm.txt").exists()

    def test_workspace_templates_are_used(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        _invoke(["init", "--templates"])
        custom = tmp_path / ".fluig" / "templates" / "globalEvents" / "custom.txt"
        custom.write_text("// custom global event")

        result = _invoke(["new", "global-event", "-e", "custom", "--no-open"])

        assert result.exit_code == 0
        assert (tmp_path / "events" / "custom.js").read_text() == "// custom global event"


class TestTemplatesCommand:
    """Tests for the templates command."""

    def test_lists_all_categories(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "templates"])

        assert result.exit_code == 0
        for category in ("dataset", "form", "formEvent", "workflowEvent", "globalEvent"):
            assert category in result.output
        assert "createDataset" in result.output

    def test_single_category(self, workspace: Path) -> None:
        result = _invoke(["-w", str(workspace), "templates", "globalEvent"])

        assert result.exit_code == 0
        assert "onNotify" in result.output
        assert "beforeTaskSave" not in result.output

    def test_template_ids_printed_literally(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        _invoke(["init", "--templates"])
        odd = tmp_path / ".fluig" / "templates" / "globalEvents" / "[bold]notes.txt"
        odd.write_text("// notes")

        result = _invoke(["templates", "globalEvent"])

        assert result.exit_code == 0
        assert "[bold]notes" in result.output


def test_config_command_shows_workspace(workspace: Path) -> None:
    """Test that config displays the effective configuration."""
    result = _invoke(["-w", str(workspace), "config"])

    assert result.exit_code == 0
    assert "Current Effective Configuration" in result.output
    assert "open_after_create: True" in result.output


def test_verbose_logs_template_root(workspace: Path) -> None:
    result = _invoke(["-w", str(workspace), "--verbose", "templates"])

    assert result.exit_code == 0
    assert "Using template root" in result.output


def test_quiet_by_default(workspace: Path) -> None:
    result = _invoke(["-w", str(workspace), "templates"])

    assert result.exit_code == 0
    assert "Using template root" not in result.output
