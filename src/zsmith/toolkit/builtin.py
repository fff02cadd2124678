"""Built-in tools: calculator and current_time.

Each tool carries an action-oriented description and a JSON Schema for its
input, and raises ToolExecutionError with a model-readable message when the
input cannot be handled.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from zsmith.exceptions import ToolExecutionError

if TYPE_CHECKING:
    from collections.abc import Callable

    from zsmith.toolkit.protocols import Tool

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_number(value: float) -> str:
    """Render integral results without a trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _operand(input: dict, key: str) -> float:
    if key not in input:
        raise ToolExecutionError(f"Missing required argument: {key}")
    value = input[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ToolExecutionError(f"Argument {key} must be a number, got {value!r}")
    return float(value)


class CalculatorTool:
    """Basic arithmetic on two operands."""

    name = "calculator"
    description = "Performs basic arithmetic operations: add, subtract, multiply, divide"
    input_schema: dict = {
        "type": "object",
        "properties": {
            "operation": {
                "type": "string",
                "enum": ["add", "subtract", "multiply", "divide"],
                "description": "The arithmetic operation to perform",
            },
            "a": {"type": "number", "description": "First operand"},
            "b": {"type": "number", "description": "Second operand"},
        },
        "required": ["operation", "a", "b"],
    }

    def execute(self, input: dict) -> str:
        operation = input.get("operation")
        if operation is None:
            raise ToolExecutionError("Missing required argument: operation")
        a = _operand(input, "a")
        b = _operand(input, "b")

        if operation == "add":
            result = a + b
        elif operation == "subtract":
            result = a - b
        elif operation == "multiply":
            result = a * b
        elif operation == "divide":
            if b == 0:
                raise ToolExecutionError("Division by zero")
            result = a / b
        else:
            raise ToolExecutionError(f"Unknown operation: {operation}")

        return _format_number(result)


class CurrentTimeTool:
    """Reads the local wall clock.

    Args:
        clock: Zero-argument callable returning a datetime. Defaults to
            ``datetime.now``.
    """

    name = "current_time"
    description = "Returns the current date and time"
    input_schema: dict = {"type": "object", "properties": {}}

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or datetime.now

    def execute(self, input: dict) -> str:
        return self._clock().strftime(TIME_FORMAT)


def builtin_tools() -> list[Tool]:
    """Fresh instances of every built-in tool."""
    return [CalculatorTool(), CurrentTimeTool()]
