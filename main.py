#!/usr/bin/env python3
"""Main entry point for toolchat.

Runs one query through the tool-calling agent and prints the final answer.
Loads a .env file from --workdir (or the current directory) if present to
populate environment variables, then validates configuration (model and API
key) before contacting the model.
"""

import asyncio
import os
import sys
from argparse import ArgumentParser
from pathlib import Path

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_EXHAUSTED = 2


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Ask a tool-calling model to complete a task")
    parser.add_argument("query", help="Task or question for the model")
    parser.add_argument(
        "--workdir",
        help="Directory to run in; its .env file is loaded if present",
    )
    parser.add_argument(
        "--system",
        help="System prompt to use instead of the built-in one",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        help="Maximum number of tool-call rounds (overrides MAX_TOOL_ROUNDS)",
    )
    parser.add_argument(
        "--tools",
        help="Comma-separated list of tools to enable (default: all builtin tools)",
    )
    parser.add_argument(
        "--log-format",
        choices=["pretty", "json"],
        help="Log format (pretty or json). Overrides LOG_FORMAT env var.",
    )
    parser.add_argument(
        "--log-colors",
        type=lambda x: x.lower() in ("true", "1", "yes", "on"),
        help="Enable colored logs (true/false). Overrides LOG_COLORS env var.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging env vars must be set before the logger module is imported
    if args.log_format:
        os.environ["LOG_FORMAT"] = args.log_format
    if args.log_colors is not None:
        os.environ["LOG_COLORS"] = "true" if args.log_colors else "false"

    from toolchat.utils.logger import get_logger

    startup_logger = get_logger("toolchat.startup")

    if args.workdir:
        workdir_path = Path(args.workdir).expanduser().resolve()
        if not workdir_path.is_dir():
            startup_logger.error(
                "--workdir is not a directory", path=str(workdir_path)
            )
            return EXIT_CONFIG_ERROR
        os.chdir(workdir_path)

    from toolchat.config import load_env_file, settings

    if load_env_file():
        startup_logger.info("Loaded .env", path=str(Path.cwd() / ".env"))

    is_valid, errors = settings.validation_status()
    if not is_valid:
        for error in errors:
            startup_logger.error("Configuration error", error=error)
        return EXIT_CONFIG_ERROR

    from toolchat.agents import ConversationState, ToolAgent
    from toolchat.tools import build_registry
    from toolchat.tools.core.errors import ToolConfigurationError

    include = (
        {name.strip() for name in args.tools.split(",") if name.strip()}
        if args.tools
        else None
    )
    try:
        agent = ToolAgent(
            registry=build_registry(include=include),
            system_prompt=args.system,
            max_rounds=args.max_rounds,
        )
    except ToolConfigurationError as e:
        startup_logger.error("Tool configuration error", error=str(e))
        return EXIT_CONFIG_ERROR
    except ValueError as e:
        startup_logger.error("Configuration error", error=str(e))
        return EXIT_CONFIG_ERROR

    result = asyncio.run(agent.process(args.query))

    print("\n[Final answer]")
    print(result.content)
    if result.status is ConversationState.EXHAUSTED:
        startup_logger.warning(
            "Stopped before the model finished", rounds=result.rounds
        )
        return EXIT_EXHAUSTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
