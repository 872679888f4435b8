"""
Pytest configuration and fixtures for saasistent tests.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from saasistent.config import clear_config_cache
from saasistent.providers import clear_provider_manager
from saasistent.wizard import ProjectConfig


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def saasistent_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point SAASISTENT_HOME at a temporary directory and reset cached singletons."""
    home = temp_dir / ".saasistent"
    home.mkdir()
    monkeypatch.setenv("SAASISTENT_HOME", str(home))
    clear_config_cache()
    clear_provider_manager()

    yield home

    clear_config_cache()
    clear_provider_manager()


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample global configuration dictionary."""
    return {
        "providers": {
            "default": "anthropic/claude-sonnet-4-20250514",
            "aliases": {
                "fast": "openai/gpt-4o-mini",
            },
        },
        "generation": {
            "max_tokens": {
                "max_scope": 4000,
            },
            "timeout_seconds": 30,
        },
        "logging": {
            "level": "DEBUG",
        },
    }


@pytest.fixture
def acme_config() -> ProjectConfig:
    """A finalized configuration with AI turned off."""
    return ProjectConfig(
        name="Acme",
        description="Invoice tracker",
        framework="nextjs",
        ai_provider="none",
    )


@pytest.fixture
def sample_project_yaml() -> str:
    """Provide a project configuration file using camelCase keys."""
    return """
name: Acme
description: Invoice tracker for freelancers
componentLibrary: mantine
applicationPattern: dashboard
designStyle: modern
framework: remix
database: planetscale
auth: clerk
storage: aws
aiProvider: openai
aiFeatures:
  - chat
  - summarization
"""


class FakeCompletion:
    """
    Async completion double that answers by artifact.

    Records every ``(prompt, max_tokens)`` call. ``responses`` maps a
    substring of the prompt to either the text to return or an exception
    to raise.
    """

    def __init__(self, responses: dict[str, str | Exception] | None = None, default: str = "generated"):
        self.responses = responses or {}
        self.default = default
        self.calls: list[tuple[str, int]] = []

    async def __call__(self, prompt: str, max_tokens: int) -> str:
        self.calls.append((prompt, max_tokens))
        for marker, response in self.responses.items():
            if marker in prompt:
                if isinstance(response, Exception):
                    raise response
                return response
        return self.default


@pytest.fixture
def fake_completion() -> FakeCompletion:
    """Provide a completion double returning 'generated' for every prompt."""
    return FakeCompletion()
