"""
Unit tests for prompts
"""

from clickup_mcp.services.tool_registry import ToolRegistry
from clickup_mcp.tools.prompts import GetTasksPrompt, register_prompts


class TestGetTasksPrompt:
    """Tests for the getTasks prompt."""

    def test_definition(self):
        definition = GetTasksPrompt().definition()
        assert definition.name == "getTasks"
        assert [arg.name for arg in definition.arguments] == ["timezone"]
        assert definition.arguments[0].required is False

    def test_default_timezone(self):
        result = GetTasksPrompt().get()

        assert len(result.messages) == 1
        message = result.messages[0]
        assert message.role == "user"
        assert "timezone Asia/Singapore (SGT)" in message.content.text
        assert "13-digit Unix timestamps" in message.content.text
        assert "do not infer or confuse date_done with date_closed" in message.content.text

    def test_custom_timezone(self):
        result = GetTasksPrompt().get({"timezone": "Europe/Berlin"})
        assert "timezone Europe/Berlin" in result.messages[0].content.text

    def test_register(self):
        registry = ToolRegistry()
        assert register_prompts(registry) == 1
        assert registry.get_prompt("getTasks") is not None


class TestBasePrompt:
    """Tests for prompt argument declarations."""

    def test_arguments_are_immutable(self):
        assert isinstance(GetTasksPrompt.arguments, tuple)

    def test_definition_returns_fresh_list(self):
        prompt = GetTasksPrompt()
        first = prompt.definition()
        first.arguments.clear()

        assert [arg.name for arg in prompt.definition().arguments] == ["timezone"]
