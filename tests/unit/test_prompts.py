"""
Unit tests for prompt construction and idea expansion.
"""

import pytest

from saasistent.config import TokenBudgets
from saasistent.generation import (
    ArtifactKey,
    InvalidInputError,
    build_project_summary,
    build_prompt,
    build_requests,
    expand_idea,
)
from saasistent.wizard import ProjectConfig


@pytest.fixture
def ai_config() -> ProjectConfig:
    return ProjectConfig(
        name="Notely",
        description="Meeting notes to tasks",
        expanded_description="Turns transcripts into tracked action items.",
        framework="sveltekit",
        component_library="radix",
        database="mongodb",
        ai_provider="openai",
        ai_features={"summarization", "chat"},
    )


class TestProjectSummary:
    """Tests for the shared project summary."""

    def test_labeled_lines(self, ai_config):
        """Test the summary lines and their order."""
        lines = build_project_summary(ai_config).splitlines()
        assert lines[0] == "Project: Notely"
        assert lines[1] == "Description: Meeting notes to tasks"
        assert lines[2] == "Expanded: Turns transcripts into tracked action items."
        assert "Tech Stack:" in lines
        assert "- Framework: sveltekit" in lines
        assert "- UI: radix" in lines
        assert "- Pattern: dashboard" in lines
        assert "- Design: minimal" in lines
        assert "- Database: mongodb" in lines
        assert "- Auth: supabase" in lines
        assert "- Storage: supabase" in lines

    def test_ai_line_lists_features(self, ai_config):
        """Test the AI line with features in catalog order."""
        summary = build_project_summary(ai_config)
        assert "- AI: openai (chat, summarization)" in summary

    def test_no_expansion_line_when_absent(self, acme_config):
        """Test that the Expanded line is omitted without an expansion."""
        assert "Expanded:" not in build_project_summary(acme_config)

    def test_no_ai_line_when_provider_none(self, acme_config):
        """Test that provider none drops the AI line even with stored features."""
        config = acme_config.merged({"ai_features": ["chat"]})
        assert "- AI:" not in build_project_summary(config)


class TestPrompts:
    """Tests for the three artifact prompts."""

    def test_init_prompt_opening_instruction(self, acme_config):
        """Test the init prompt asks to start with the framework and name."""
        prompt = build_prompt(ArtifactKey.INIT_PROMPT, acme_config)
        assert 'Start with "Create a new nextjs application called Acme..."' in prompt
        assert "folder structure" in prompt

    def test_mvp_prompt(self, acme_config):
        """Test the MVP prompt content."""
        prompt = build_prompt(ArtifactKey.MVP_SCOPE, acme_config)
        assert "MVP (Minimum Viable Product)" in prompt
        assert "Core features only" in prompt
        assert "Project: Acme" in prompt

    def test_max_prompt(self, acme_config):
        """Test the MAX prompt content."""
        prompt = build_prompt(ArtifactKey.MAX_SCOPE, acme_config)
        assert "Admin dashboard features" in prompt
        assert "Security considerations" in prompt

    def test_requests_in_key_order_with_budgets(self, acme_config):
        """Test one request per artifact with its ceiling."""
        requests = build_requests(acme_config, TokenBudgets(init_prompt=100, mvp_scope=200, max_scope=300))
        assert [r.key for r in requests] == list(ArtifactKey)
        assert [r.max_tokens for r in requests] == [100, 200, 300]


class TestExpandIdea:
    """Tests for AI idea expansion."""

    @pytest.mark.asyncio
    async def test_expand_idea(self, fake_completion):
        """Test the expansion request and the trimmed result."""
        fake_completion.default = "  Value proposition...  \n"

        result = await expand_idea("A tool for dentists", fake_completion)

        assert result == "Value proposition..."
        prompt, max_tokens = fake_completion.calls[0]
        assert max_tokens == 1024
        assert "Product idea: A tool for dentists" in prompt
        assert "monetization" in prompt

    @pytest.mark.asyncio
    async def test_blank_description_rejected(self, fake_completion):
        """Test that nothing is requested for a blank description."""
        with pytest.raises(InvalidInputError):
            await expand_idea("   ", fake_completion)
        assert fake_completion.calls == []
