"""Tests for the interactive prompts.

Covers:
- prompt_with_default: default on empty input, verbatim otherwise
- is_affirmative / prompt_confirm
- prompt_tech_stack menu and fallback
- collect_project_config ordering and overrides
"""

from __future__ import annotations

import pytest

from template_setup.config import ProjectConfig, TechStack
from template_setup.customizer.prompts import (
    collect_project_config,
    is_affirmative,
    prompt_confirm,
    prompt_tech_stack,
    prompt_with_default,
)

pytestmark = pytest.mark.unit


class TestPromptWithDefault:
    def test_empty_input_returns_default(self, answer, recording_console):
        answer("")
        assert prompt_with_default(recording_console, "Project name", "my-ai-project") == "my-ai-project"

    def test_input_used_verbatim(self, answer, recording_console):
        answer("  Widget AI  ")
        assert prompt_with_default(recording_console, "Project name", "x") == "  Widget AI  "

    def test_prompt_shows_label_and_default(self, answer, recording_console):
        mock_input = answer("")
        prompt_with_default(recording_console, "Author email", "your.email@example.com")
        prompt_text = mock_input.call_args.args[0]
        assert "Author email" in prompt_text
        assert "(default: your.email@example.com)" in prompt_text


class TestConfirm:
    @pytest.mark.parametrize("reply", ["y", "Y", "yes", "YES", "Yes"])
    def test_affirmative(self, reply):
        assert is_affirmative(reply) is True

    @pytest.mark.parametrize("reply", ["", "n", "no", "N", "yep", " y", "y ", "ye", "yess"])
    def test_everything_else_declines(self, reply):
        assert is_affirmative(reply) is False

    def test_prompt_confirm(self, answer, recording_console):
        answer("y")
        assert prompt_confirm(recording_console) is True

    def test_prompt_confirm_empty_declines(self, answer, recording_console):
        answer("")
        assert prompt_confirm(recording_console) is False


class TestPromptTechStack:
    def test_menu_lists_all_presets(self, answer, recording_console):
        answer("4")
        assert prompt_tech_stack(recording_console) is TechStack.PYTHON_ONLY
        output = recording_console.file.getvalue()
        assert "1) Node.js + React (default)" in output
        assert "5) Custom (manual setup)" in output

    def test_invalid_choice_is_node(self, answer, recording_console):
        answer("9")
        assert prompt_tech_stack(recording_console) is TechStack.NODE


class TestCollectProjectConfig:
    def test_all_defaults(self, answer, recording_console):
        answer("", "", "", "", "")
        assert collect_project_config(recording_console) == ProjectConfig()

    def test_answers_in_order(self, answer, recording_console):
        answer("widget-ai", "Smart widgets", "Ada", "ada@example.com", "3")
        config = collect_project_config(recording_console)
        assert config == ProjectConfig(
            name="widget-ai",
            description="Smart widgets",
            author_name="Ada",
            author_email="ada@example.com",
            tech_stack=TechStack.NODE_API,
        )

    def test_overrides_are_not_prompted(self, answer, recording_console):
        mock_input = answer("Smart widgets", "")
        config = collect_project_config(
            recording_console,
            {
                "name": "widget-ai",
                "description": None,
                "author_name": "Ada",
                "author_email": "ada@example.com",
                "tech_stack": "python",
            },
        )
        assert mock_input.call_count == 1
        assert config.name == "widget-ai"
        assert config.description == "Smart widgets"
        assert config.tech_stack is TechStack.PYTHON

    def test_full_overrides_prompt_nothing(self, answer, recording_console):
        mock_input = answer()
        config = collect_project_config(
            recording_console,
            {
                "name": "widget-ai",
                "description": "d",
                "author_name": "a",
                "author_email": "e",
                "tech_stack": "custom",
            },
        )
        mock_input.assert_not_called()
        assert config.tech_stack is TechStack.CUSTOM
