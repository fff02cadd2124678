"""Tests for the Agent tool-use loop."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import (
    ScriptedClient,
    make_agent,
    text_response,
    tool_response,
    tool_use_block,
)
from zsmith import (
    MAX_ITERATIONS_REACHED,
    Agent,
    AgentConfig,
    CalculatorTool,
    ContentValidationError,
    FunctionTool,
    LLMRateLimitError,
    ToolUse,
)


# ===========================================================================
# Construction and tool registration
# ===========================================================================


class TestAgentSetup:
    def test_defaults(self):
        agent = Agent(ScriptedClient())
        assert agent.system_prompt == "You are a helpful assistant."
        assert agent.config.max_iterations == 10
        assert agent.config.temperature == 0.7
        assert agent.tools == {}
        assert agent.memory.size() == 0

    def test_system_prompt_argument_overrides_config(self):
        config = AgentConfig(system_prompt="ignored", max_iterations=3)
        agent = Agent(ScriptedClient(), "Be terse.", config=config)
        assert agent.system_prompt == "Be terse."
        assert agent.config.max_iterations == 3

    def test_config_validation(self):
        with pytest.raises(ValueError):
            AgentConfig(max_iterations=0)
        with pytest.raises(ValueError):
            AgentConfig(temperature=1.5)

    def test_with_tool_chains(self):
        agent = Agent(ScriptedClient())
        assert agent.with_tool(CalculatorTool()) is agent
        assert list(agent.tools) == ["calculator"]

    def test_tools_is_a_copy(self):
        agent, _ = make_agent([])
        agent.tools.clear()
        assert set(agent.tools) == {"calculator", "current_time"}

    def test_tool_definitions(self):
        agent, _ = make_agent([])
        definitions = agent.tool_definitions()
        assert [d["name"] for d in definitions] == ["calculator", "current_time"]
        assert set(definitions[0]) == {"name", "description", "input_schema"}

    def test_execute_tool(self):
        agent, _ = make_agent([])
        result = agent.execute_tool(
            ToolUse(id="t1", name="calculator", input={"operation": "add", "a": 2, "b": 2})
        )
        assert result.content == "4"
        assert not result.is_error

    def test_execute_unknown_tool(self):
        agent, _ = make_agent([])
        result = agent.execute_tool(ToolUse(id="t1", name="weather"))
        assert result.is_error
        assert result.content == "Tool not available: weather"


# ===========================================================================
# chat(): plain answers
# ===========================================================================


class TestChatWithoutTools:
    def test_text_answer(self):
        client = ScriptedClient([text_response("Hi there!")])
        agent = Agent(client)

        assert agent.chat("Hello") == "Hi there!"
        assert agent.memory.serialize() == [
            {"role": "user", "content": "Hello"},
            {"role": "assistant", "content": "Hi there!"},
        ]

    def test_request_carries_system_temperature_and_no_tools(self):
        client = ScriptedClient([text_response("ok")])
        Agent(client, "Be terse.", config=AgentConfig(temperature=0.2)).chat("Hello")

        call = client.calls[0]
        assert call["system"] == "Be terse."
        assert call["temperature"] == 0.2
        assert call["tools"] is None
        assert call["messages"] == [{"role": "user", "content": "Hello"}]

    def test_multiple_text_blocks_joined(self):
        agent, _ = make_agent([text_response("first", "second")])
        assert agent.chat("Hi") == "first\nsecond"
        assert agent.memory.messages[-1].content == "first\nsecond"

    def test_empty_response_returns_empty_string(self):
        agent, _ = make_agent([text_response()])
        assert agent.chat("Hi") == ""
        assert agent.memory.serialize() == [{"role": "user", "content": "Hi"}]

    def test_missing_stop_reason_is_final(self):
        agent, _ = make_agent([text_response("done", stop_reason=None)])
        assert agent.chat("Hi") == "done"

    def test_memory_accumulates_across_turns(self):
        agent, client = make_agent([text_response("one"), text_response("two")])
        agent.chat("first")
        agent.chat("second")
        assert client.calls[1]["messages"] == [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "one"},
            {"role": "user", "content": "second"},
        ]

    def test_clear_memory(self):
        agent, client = make_agent([text_response("one"), text_response("two")])
        agent.chat("first")
        agent.clear_memory()
        agent.chat("second")
        assert client.calls[1]["messages"] == [{"role": "user", "content": "second"}]


# ===========================================================================
# chat(): tool rounds
# ===========================================================================


class TestChatWithTools:
    def test_calculator_and_clock_scenario(self):
        agent, client = make_agent([
            tool_response(
                tool_use_block("toolu_1", "calculator", operation="multiply", a=42, b=17),
                tool_use_block("toolu_2", "current_time"),
                text="Let me work that out.",
            ),
            text_response("42 x 17 = 714. It is 2025-01-02 03:04:05."),
        ])

        answer = agent.chat("What is 42 multiplied by 17? Also, what time is it now?")

        assert answer == "42 x 17 = 714. It is 2025-01-02 03:04:05."
        assert len(client.calls) == 2
        assert [t["name"] for t in client.calls[0]["tools"]] == ["calculator", "current_time"]

        second_request = client.calls[1]["messages"]
        assert second_request[1] == {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "Let me work that out."},
                {
                    "type": "tool_use",
                    "id": "toolu_1",
                    "name": "calculator",
                    "input": {"operation": "multiply", "a": 42, "b": 17},
                },
                {"type": "tool_use", "id": "toolu_2", "name": "current_time", "input": {}},
            ],
        }
        assert second_request[2] == {
            "role": "user",
            "content": [
                {"type": "tool_result", "tool_use_id": "toolu_1", "content": "714"},
                {"type": "tool_result", "tool_use_id": "toolu_2", "content": "2025-01-02 03:04:05"},
            ],
        }
        assert [m["role"] for m in agent.memory.serialize()] == [
            "user", "assistant", "user", "assistant",
        ]

    def test_tool_failure_is_fed_back(self):
        agent, client = make_agent([
            tool_response(tool_use_block("t1", "calculator", operation="divide", a=1, b=0)),
            text_response("Cannot divide by zero."),
        ])

        assert agent.chat("1/0?") == "Cannot divide by zero."
        results = client.calls[1]["messages"][2]["content"]
        assert results == [
            {"type": "tool_result", "tool_use_id": "t1", "content": "Division by zero", "is_error": True},
        ]

    def test_unknown_tool_is_fed_back(self):
        agent, client = make_agent([
            tool_response(tool_use_block("t1", "weather", city="Paris")),
            text_response("I cannot check the weather."),
        ])

        agent.chat("Weather?")
        result = client.calls[1]["messages"][2]["content"][0]
        assert result["is_error"] is True
        assert result["content"] == "Tool not available: weather"

    def test_raising_tool_does_not_abort_turn(self):
        def explode():
            raise RuntimeError("kaboom")

        client = ScriptedClient([
            tool_response(tool_use_block("t1", "explode")),
            text_response("Sorry."),
        ])
        agent = Agent(client).with_tool(
            FunctionTool(name="explode", description="Fails.", input_schema={}, handler=explode)
        )

        assert agent.chat("Go") == "Sorry."
        assert client.calls[1]["messages"][2]["content"][0]["content"] == "kaboom"

    def test_tool_use_without_tool_use_stop_reason_is_final(self):
        agent, client = make_agent([
            tool_response(
                tool_use_block("t1", "calculator", operation="add", a=1, b=1),
                text="Here you go.",
                stop_reason="end_turn",
            ),
        ])

        assert agent.chat("1+1?") == "Here you go."
        assert len(client.calls) == 1
        assert agent.memory.serialize()[-1] == {"role": "assistant", "content": "Here you go."}

    def test_tool_mutating_its_input_leaves_memory_intact(self):
        def grab(items):
            items.append(99)
            return len(items)

        client = ScriptedClient([
            tool_response(tool_use_block("t1", "grab", items=[1, 2])),
            text_response("Three items."),
        ])
        agent = Agent(client).with_tool(
            FunctionTool(name="grab", description="Appends.", input_schema={}, handler=grab)
        )

        agent.chat("Grab")
        assert agent.memory.serialize()[1]["content"][0]["input"] == {"items": [1, 2]}
        assert client.calls[1]["messages"][1]["content"][0]["input"] == {"items": [1, 2]}
        assert client.calls[1]["messages"][2]["content"][0]["content"] == "3"

    def test_unknown_blocks_are_echoed_back(self):
        response = tool_response(tool_use_block("t1", "current_time"))
        response["content"].insert(0, {"type": "thinking", "thinking": "hmm", "signature": "s"})
        agent, client = make_agent([response, text_response("Noon.")])

        agent.chat("Time?")
        assistant_turn = client.calls[1]["messages"][1]["content"]
        assert assistant_turn[0] == {"type": "thinking", "thinking": "hmm", "signature": "s"}

    def test_max_iterations(self, caplog):
        responses = [
            tool_response(tool_use_block(f"t{i}", "current_time")) for i in range(3)
        ]
        agent, client = make_agent(responses, config=AgentConfig(max_iterations=3))

        with caplog.at_level(logging.WARNING, logger="zsmith.agent.loop"):
            assert agent.chat("Loop forever") == MAX_ITERATIONS_REACHED

        assert len(client.calls) == 3
        # user + three (assistant, tool results) pairs
        assert agent.memory.size() == 7
        assert "Stopped after 3 iterations" in caplog.text

    def test_answer_on_last_iteration(self):
        agent, client = make_agent(
            [
                tool_response(tool_use_block("t1", "current_time")),
                text_response("Done."),
            ],
            config=AgentConfig(max_iterations=2),
        )
        assert agent.chat("Time?") == "Done."
        assert len(client.calls) == 2


# ===========================================================================
# chat(): failures
# ===========================================================================


class TestChatFailures:
    def test_client_error_propagates(self):
        class FailingClient(ScriptedClient):
            def chat(self, *args, **kwargs):
                raise LLMRateLimitError("Rate limited", retry_after=5)

        agent = Agent(FailingClient())
        with pytest.raises(LLMRateLimitError):
            agent.chat("Hello")
        # The user message stays in memory.
        assert agent.memory.serialize() == [{"role": "user", "content": "Hello"}]

    def test_malformed_response_raises(self):
        agent = Agent(ScriptedClient([{"stop_reason": "end_turn"}]))
        with pytest.raises(ContentValidationError):
            agent.chat("Hello")
