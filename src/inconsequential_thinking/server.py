"""MCP host. Validates tool input, hands it to the engine, returns the response record."""

from __future__ import annotations

from typing import Annotated, Any, Optional

import structlog
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field

from inconsequential_thinking import __version__
from inconsequential_thinking.config import Settings
from inconsequential_thinking.engine import ThinkingEngine
from inconsequential_thinking.observability import setup_logging

logger = structlog.get_logger(__name__)

TOOL_NAME = "inconsequential_thinking"
TOOL_DESCRIPTION = (
    "Process sequential thoughts and recommend relevant slash commands "
    "based on thought content"
)


class ThinkingInput(BaseModel):
    """Input schema for the inconsequential_thinking tool."""

    thought: str = Field(description="The current thought text")
    thought_number: int = Field(gt=0, description="Current thought number")
    total_thoughts: int = Field(gt=0, description="Estimated total thoughts needed")
    next_thought_needed: bool = Field(description="Whether another thought is needed")


mcp = FastMCP(
    "inconsequential-thinking",
    instructions=(
        "Sequential thinking with slash command recommendations. "
        f"Version {__version__}."
    ),
)

# One engine per process; tools reach it through _get_engine().
_engine: Optional[ThinkingEngine] = None


def init_engine(settings: Settings | None = None) -> ThinkingEngine:
    """Initialize the process-wide ThinkingEngine from settings."""
    global _engine
    settings = settings or Settings()
    _engine = ThinkingEngine(**settings.engine_kwargs())
    return _engine


def _get_engine() -> ThinkingEngine:
    global _engine
    if _engine is None:
        _engine = init_engine()
    return _engine


def process_thought(engine: ThinkingEngine, payload: ThinkingInput | dict[str, Any]) -> dict[str, Any]:
    """Validate payload, record and analyze it, return the wire-shaped response.

    Raises pydantic.ValidationError on malformed input.
    """
    args = payload if isinstance(payload, ThinkingInput) else ThinkingInput.model_validate(payload)
    response = engine.think(
        args.thought,
        args.thought_number,
        args.total_thoughts,
        next_thought_needed=args.next_thought_needed,
    )
    return response.to_dict()


@mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
def inconsequential_thinking(
    thought: Annotated[str, Field(description="The current thought text")],
    thought_number: Annotated[int, Field(gt=0, description="Current thought number")],
    total_thoughts: Annotated[int, Field(gt=0, description="Estimated total thoughts needed")],
    next_thought_needed: Annotated[bool, Field(description="Whether another thought is needed")],
) -> dict[str, Any]:
    return process_thought(_get_engine(), ThinkingInput(
        thought=thought,
        thought_number=thought_number,
        total_thoughts=total_thoughts,
        next_thought_needed=next_thought_needed,
    ))


def run_server(transport: str = "stdio", settings: Settings | None = None) -> None:
    """Configure logging, build the engine and serve until the transport closes."""
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_format)
    engine = init_engine(settings)
    logger.info(
        "server.starting",
        version=__version__,
        transport=transport,
        memory_limit=engine.history.memory_limit,
        commands=len(engine.catalog),
    )
    mcp.run(transport=transport)  # type: ignore[arg-type]
