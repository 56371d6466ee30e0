"""python -m inconsequential_thinking [--transport stdio|sse|streamable-http]"""

from __future__ import annotations

import argparse

from inconsequential_thinking.server import run_server


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="inconsequential-thinking",
        description="Sequential thinking MCP server with slash command recommendations.",
    )
    parser.add_argument("--transport", default="stdio",
                        choices=["stdio", "sse", "streamable-http"])
    args = parser.parse_args(argv)
    run_server(transport=args.transport)


if __name__ == "__main__":
    main()
