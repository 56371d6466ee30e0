"""Static catalog of personal slash commands. Loaded once, never mutated."""

from __future__ import annotations

from inconsequential_thinking.models import Action

SLASH_COMMANDS: tuple[Action, ...] = (
    Action(
        name="/plan:create",
        description="Create an implementation plan based on user input and project context",
        use_when="When starting a new feature or complex task that requires planning",
        keywords=("plan", "design", "architecture", "implementation", "approach",
                  "strategy", "feature", "project"),
    ),
    Action(
        name="/analyse:project:analyse",
        description="Provide a detailed high-level overview of the codebase",
        use_when="When you need to understand the structure and organization of a project",
        keywords=("analyze", "overview", "structure", "codebase", "project",
                  "understand", "explore", "architecture"),
    ),
    Action(
        name="/analyse:project:crit",
        description="Probe the project for weaknesses and issues",
        use_when="When looking for bugs, code smells, or areas that need improvement",
        keywords=("critique", "weakness", "bug", "issue", "problem", "smell",
                  "review", "quality", "improve"),
    ),
    Action(
        name="/task:execute:minima",
        description="Achieve a goal with a minimalist approach",
        use_when="When you want the simplest possible solution with minimal changes",
        keywords=("minimal", "simple", "quick", "basic", "straightforward",
                  "least", "small", "change"),
    ),
    Action(
        name="/task:suggest:targeted",
        description="Suggest the next logical task based on codebase examination",
        use_when="When you are unsure what to work on next or need direction",
        keywords=("next", "suggest", "recommend", "what", "should", "task",
                  "todo", "direction"),
    ),
    Action(
        name="/style:layout:fix",
        description="Fix layout problems whilst considering knock-on effects",
        use_when="When UI layout is broken or components are misaligned",
        keywords=("layout", "ui", "style", "css", "alignment", "positioning",
                  "display", "fix", "visual"),
    ),
    Action(
        name="/style:style:unify",
        description="Edit the styling of a component to make it fit the rest of the project",
        use_when="When a component looks inconsistent with the rest of the UI",
        keywords=("style", "consistent", "theme", "unify", "match", "design",
                  "look", "feel", "ui", "component"),
    ),
    Action(
        name="/git:pull-request",
        description="Create a pull request for the current branch",
        use_when="When code is ready to be reviewed and merged",
        keywords=("pull", "request", "pr", "merge", "review", "git", "commit",
                  "ready", "submit"),
    ),
)


def find_command_by_name(name: str,
                         catalog: tuple[Action, ...] = SLASH_COMMANDS) -> Action | None:
    """Lookup by exact name. None if the command doesn't exist."""
    for action in catalog:
        if action.name == name:
            return action
    return None


def all_command_names(catalog: tuple[Action, ...] = SLASH_COMMANDS) -> list[str]:
    return [action.name for action in catalog]
