"""
Unit tests for CLI commands.
"""

from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from saasistent import __version__
from saasistent.cli.app import app
from saasistent.providers import RateLimitError
from saasistent.session import LocalSessionProvider, UserProfile
from saasistent.storage import ProjectRecord, ProjectStore
from saasistent.wizard import ProjectConfig


def _sign_in() -> None:
    LocalSessionProvider().sign_in(UserProfile(email="ada@example.com", display_name="Ada"))


def _mock_manager(complete_text) -> MagicMock:
    manager = MagicMock()
    manager.complete_text = complete_text
    return manager


def test_version(cli_runner: CliRunner) -> None:
    """Test --version flag."""
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "saasistent" in result.stdout
    assert "new" in result.stdout
    assert "generate" in result.stdout
    assert "projects" in result.stdout


class TestAuthCommands:
    """Tests for auth login, whoami and logout."""

    def test_login_whoami_logout(self, cli_runner: CliRunner) -> None:
        """Test the session lifecycle."""
        result = cli_runner.invoke(app, ["auth", "login", "--email", "ada@example.com", "--name", "Ada"])
        assert result.exit_code == 0
        assert "Signed in as" in result.stdout

        result = cli_runner.invoke(app, ["auth", "whoami"])
        assert result.exit_code == 0
        assert "Ada" in result.stdout
        assert "ada@example.com" in result.stdout

        result = cli_runner.invoke(app, ["auth", "logout"])
        assert result.exit_code == 0
        assert "Signed out" in result.stdout

        result = cli_runner.invoke(app, ["auth", "whoami"])
        assert result.exit_code == 1

    def test_login_rejects_bad_email(self, cli_runner: CliRunner) -> None:
        """Test email validation."""
        result = cli_runner.invoke(app, ["auth", "login", "--email", "nobody"])
        assert result.exit_code != 0


class TestProjectsCommands:
    """Tests for the projects dashboard."""

    def test_requires_session(self, cli_runner: CliRunner) -> None:
        """Test that anonymous users are sent to login."""
        result = cli_runner.invoke(app, ["projects", "list"])
        assert result.exit_code == 1
        assert "sign in" in result.stdout

    def test_new_requires_session(self, cli_runner: CliRunner) -> None:
        """Test that the wizard needs a session."""
        result = cli_runner.invoke(app, ["new"])
        assert result.exit_code == 1
        assert "sign in" in result.stdout

    def test_empty_list(self, cli_runner: CliRunner) -> None:
        """Test the empty state."""
        _sign_in()
        result = cli_runner.invoke(app, ["projects", "list"])
        assert result.exit_code == 0
        assert "No projects yet" in result.stdout

    def test_list_and_show(self, cli_runner: CliRunner, acme_config: ProjectConfig) -> None:
        """Test listing and showing a stored project."""
        _sign_in()
        record = ProjectStore().save(ProjectRecord.from_config(acme_config))

        result = cli_runner.invoke(app, ["projects", "list"])
        assert result.exit_code == 0
        assert "Acme" in result.stdout
        assert "configured" in result.stdout

        result = cli_runner.invoke(app, ["projects", "show", record.id[:8]])
        assert result.exit_code == 0
        assert "Invoice tracker" in result.stdout
        assert "Next.js" in result.stdout
        assert "AI Features" not in result.stdout

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        """Test showing an unknown project."""
        _sign_in()
        result = cli_runner.invoke(app, ["projects", "show", "deadbeef"])
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_delete(self, cli_runner: CliRunner, acme_config: ProjectConfig) -> None:
        """Test deleting a project without confirmation."""
        _sign_in()
        record = ProjectStore().save(ProjectRecord.from_config(acme_config))

        result = cli_runner.invoke(app, ["projects", "delete", record.id, "--yes"])
        assert result.exit_code == 0
        assert ProjectStore().list_projects() == []


class TestGenerateCommand:
    """Tests for non-interactive generation."""

    def test_generate_writes_files(self, cli_runner: CliRunner, temp_dir, sample_project_yaml: str) -> None:
        """Test that all three artifacts are written."""
        config_file = temp_dir / "acme.yaml"
        config_file.write_text(sample_project_yaml, encoding="utf-8")
        out_dir = temp_dir / "out"
        complete_text = AsyncMock(return_value="# Generated")

        with patch("saasistent.cli.common.get_provider_manager", return_value=_mock_manager(complete_text)):
            result = cli_runner.invoke(app, ["generate", str(config_file), "--output", str(out_dir)])

        assert result.exit_code == 0, result.stdout
        assert complete_text.await_count == 3
        for suffix in ("init-prompt", "mvp-scope", "max-scope"):
            assert (out_dir / f"acme-{suffix}.md").read_text(encoding="utf-8") == "# Generated"

        prompts = [call.args[0] for call in complete_text.await_args_list]
        assert all("- AI: openai (chat, summarization)" in p for p in prompts)
        assert all("- Framework: remix" in p for p in prompts)

    def test_generate_partial_failure(self, cli_runner: CliRunner, temp_dir, sample_project_yaml: str) -> None:
        """Test that a failed artifact exits 1 while the others are saved."""
        config_file = temp_dir / "acme.yaml"
        config_file.write_text(sample_project_yaml, encoding="utf-8")
        out_dir = temp_dir / "out"

        async def complete_text(prompt: str, max_tokens: int) -> str:
            if "comprehensive MAX" in prompt:
                raise RateLimitError("quota exceeded", "openai")
            return "# Generated"

        with patch("saasistent.cli.common.get_provider_manager", return_value=_mock_manager(complete_text)):
            result = cli_runner.invoke(app, ["generate", str(config_file), "--output", str(out_dir)])

        assert result.exit_code == 1
        assert (out_dir / "acme-init-prompt.md").exists()
        assert (out_dir / "acme-mvp-scope.md").exists()
        assert not (out_dir / "acme-max-scope.md").exists()

    def test_generate_requires_identity(self, cli_runner: CliRunner, temp_dir) -> None:
        """Test that a config without a name issues no requests."""
        config_file = temp_dir / "blank.json"
        config_file.write_text('{"description": "no name"}', encoding="utf-8")
        complete_text = AsyncMock(return_value="x")

        with patch("saasistent.cli.common.get_provider_manager", return_value=_mock_manager(complete_text)):
            result = cli_runner.invoke(app, ["generate", str(config_file)])

        assert result.exit_code == 1
        complete_text.assert_not_awaited()

    def test_generate_invalid_file(self, cli_runner: CliRunner, temp_dir) -> None:
        """Test that unknown settings are reported."""
        config_file = temp_dir / "bad.yaml"
        config_file.write_text("name: Acme\ncolour: red\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["generate", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid project file" in result.stdout


class TestExpandCommand:
    """Tests for idea expansion."""

    def test_expand(self, cli_runner: CliRunner) -> None:
        """Test printing the expanded idea."""
        complete_text = AsyncMock(return_value="Target users are freelancers.")

        with patch(
            "saasistent.cli.commands.expand.get_provider_manager",
            return_value=_mock_manager(complete_text),
        ):
            result = cli_runner.invoke(app, ["expand", "Invoice tracker"])

        assert result.exit_code == 0
        assert "Target users are freelancers." in result.stdout
        assert complete_text.await_args.args[1] == 1024

    def test_expand_blank(self, cli_runner: CliRunner) -> None:
        """Test that a blank idea is rejected."""
        complete_text = AsyncMock(return_value="x")

        with patch(
            "saasistent.cli.commands.expand.get_provider_manager",
            return_value=_mock_manager(complete_text),
        ):
            result = cli_runner.invoke(app, ["expand", "   "])

        assert result.exit_code == 1
        complete_text.assert_not_awaited()
