"""
Tests for tool base classes and validation.
"""

import pytest

from core.config import ToolboxConfig
from core.errors import ConfigurationError
from tools.base import ToolboxTool, ToolParameter, ToolResult


class TestToolParameter:
    """Test ToolParameter validation."""

    def test_required_parameter_missing(self):
        """Required parameter with None should fail validation."""
        param = ToolParameter(name="layer_name", type=str, description="Layer", required=True)

        is_valid, error = param.validate(None)
        assert not is_valid
        assert "Required parameter 'layer_name' is missing" in error

    def test_required_parameter_present(self):
        """Required parameter with value should pass validation."""
        param = ToolParameter(name="layer_name", type=str, description="Layer", required=True)

        is_valid, error = param.validate("Hats")
        assert is_valid
        assert error is None

    def test_optional_parameter_missing(self):
        """Optional parameter with None should pass validation."""
        param = ToolParameter(
            name="value", type=float, description="Toggle value", required=False, default=0.0
        )

        is_valid, error = param.validate(None)
        assert is_valid
        assert error is None

    def test_type_mismatch(self):
        """Parameter with wrong type should fail validation."""
        param = ToolParameter(name="clips", type=list, description="Clips", required=True)

        is_valid, error = param.validate("Hat")
        assert not is_valid
        assert "must be list, got str" in error

    def test_tuple_of_types(self):
        """Either listed type should pass; the error names both."""
        param = ToolParameter(name="value", type=(int, float), description="Value")

        assert param.validate(2) == (True, None)
        assert param.validate(2.5) == (True, None)
        is_valid, error = param.validate("2")
        assert not is_valid
        assert "must be int or float, got str" in error

    def test_bool_rejected_for_numbers(self):
        """bool is an int subclass but should not pass as a number."""
        param = ToolParameter(name="value", type=(int, float), description="Value")

        is_valid, error = param.validate(True)
        assert not is_valid
        assert "got bool" in error

    def test_bool_accepted_for_bool(self):
        param = ToolParameter(name="add_to_menu", type=bool, description="Flag")
        assert param.validate(False) == (True, None)


class TestToolResult:
    """Test ToolResult data structure."""

    def test_success_result(self):
        """Successful result with data."""
        result = ToolResult(success=True, data={"layers": []}, metadata={"source": "test"})

        assert result.success is True
        assert result.data == {"layers": []}
        assert result.error is None
        assert result.metadata == {"source": "test"}

    def test_failure_result(self):
        """Failed result with error message."""
        result = ToolResult(success=False, error="No Expressions Menu found.")

        assert result.success is False
        assert result.data is None
        assert result.error == "No Expressions Menu found."


class DummyTool(ToolboxTool):
    """Dummy tool for testing base class."""

    @property
    def name(self) -> str:
        return "dummy_tool"

    @property
    def description(self) -> str:
        return "A dummy tool for testing"

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(name="text", type=str, description="Some text", required=True),
            ToolParameter(
                name="count", type=int, description="A number", required=False, default=1
            ),
        ]

    def execute(self, **kwargs) -> ToolResult:
        """Echo back the inputs."""
        return ToolResult(success=True, data=kwargs)


class TestToolboxTool:
    """Test ToolboxTool base class."""

    def test_tool_properties(self):
        """Tool should expose name, description, parameters."""
        tool = DummyTool()

        assert tool.name == "dummy_tool"
        assert "dummy tool" in tool.description.lower()
        assert len(tool.parameters) == 2

    def test_default_config(self):
        assert DummyTool().config == ToolboxConfig()

    def test_custom_config(self):
        config = ToolboxConfig(page_capacity=4)
        assert DummyTool(config=config).config is config

    def test_validate_inputs_success(self):
        """Valid inputs should pass validation."""
        tool = DummyTool()

        is_valid, error = tool.validate_inputs(text="hello", count=5)
        assert is_valid
        assert error is None

    def test_validate_inputs_missing_required(self):
        """Missing required parameter should fail validation."""
        tool = DummyTool()

        is_valid, error = tool.validate_inputs(count=5)  # Missing 'text'
        assert not is_valid
        assert "Required parameter 'text' is missing" in error

    def test_validate_inputs_wrong_type(self):
        """Wrong parameter type should fail validation."""
        tool = DummyTool()

        is_valid, error = tool.validate_inputs(text="hello", count="not_an_int")
        assert not is_valid
        assert "must be int" in error

    def test_call_with_valid_inputs(self):
        """Calling tool with valid inputs should succeed."""
        tool = DummyTool()

        result = tool(text="hello", count=3)
        assert result.success is True
        assert result.data == {"text": "hello", "count": 3}

    def test_call_fills_defaults(self):
        """Missing optional parameters reach execute() with their defaults."""
        result = DummyTool()(text="hello")
        assert result.data == {"text": "hello", "count": 1}

    def test_call_with_invalid_inputs(self):
        """Calling tool with invalid inputs should return error."""
        tool = DummyTool()

        result = tool(count=5)  # Missing 'text'
        assert result.success is False
        assert "Required parameter" in result.error

    def test_to_dict(self):
        """Tool should serialize to dict for API."""
        tool = DummyTool()

        data = tool.to_dict()
        assert data["name"] == "dummy_tool"
        assert "dummy tool" in data["description"].lower()
        assert len(data["parameters"]) == 2
        assert data["parameters"][0]["name"] == "text"
        assert data["parameters"][0]["type"] == "str"
        assert data["parameters"][0]["required"] is True


class MisconfiguredTool(ToolboxTool):
    """Tool that reports a configuration problem."""

    @property
    def name(self) -> str:
        return "misconfigured_tool"

    @property
    def description(self) -> str:
        return "A tool whose setup is always incomplete"

    @property
    def parameters(self) -> list[ToolParameter]:
        return []

    def execute(self, **kwargs) -> ToolResult:
        raise ConfigurationError("No Expressions Menu found.")


class FailingTool(MisconfiguredTool):
    """Tool that raises an unexpected exception during execution."""

    @property
    def name(self) -> str:
        return "failing_tool"

    def execute(self, **kwargs) -> ToolResult:
        raise RuntimeError("Intentional failure")


class TestToolboxToolErrorHandling:
    """Test error handling in tool execution."""

    def test_configuration_error_becomes_result(self):
        """ConfigurationError during execute should be returned as error."""
        result = MisconfiguredTool()()

        assert result.success is False
        assert result.error == "Configuration error: No Expressions Menu found."

    def test_other_exceptions_propagate(self):
        """Unexpected exceptions are not swallowed."""
        with pytest.raises(RuntimeError, match="Intentional failure"):
            FailingTool()()
