"""Agent loop: the orchestrator tying memory, tools and the LLM client."""

from zsmith.agent.loop import MAX_ITERATIONS_REACHED, Agent

__all__ = ["Agent", "MAX_ITERATIONS_REACHED"]
