"""inconsequential-thinking: sequential thoughts in, ranked slash commands out."""

__version__ = "0.1.0"

from inconsequential_thinking.models import Action, Thought, Recommendation, ThinkingResponse
from inconsequential_thinking.catalog import SLASH_COMMANDS, find_command_by_name, all_command_names
from inconsequential_thinking.keywords import extract_keywords
from inconsequential_thinking.relevance import calculate_relevance
from inconsequential_thinking.history import History
from inconsequential_thinking.engine import ThinkingEngine, rank_actions

__all__ = [
    "ThinkingEngine", "History", "Action", "Thought", "Recommendation", "ThinkingResponse",
    "SLASH_COMMANDS", "find_command_by_name", "all_command_names",
    "extract_keywords", "calculate_relevance", "rank_actions",
]
