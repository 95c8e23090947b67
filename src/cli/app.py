"""
dotsim CLI — a simulated dotfiles manager.

Usage: dotsim <command> [argument]

Commands:
  add <path>     Track a file
  remove <path>  Stop tracking a file
  list           List tracked files
  sync           Simulate syncing tracked files (no I/O)
  help           Show usage

State lives in memory for a single run and starts from the seed paths in
the config. No command touches the filesystem.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import typer

from ..config import Config, load_config
from ..storage.models import Outcome
from ..storage.tracker import Tracker
from . import display

app = typer.Typer(
    name="dotsim",
    help="Simulated dotfiles manager.",
    add_completion=False,
    pretty_exceptions_enable=False,
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2

Handler = Callable[["CommandContext", Optional[str]], int]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class CommandContext:
    """What a handler gets to work with: the store and the run's config."""

    def __init__(self, tracker: Tracker, config: Config):
        self.tracker = tracker
        self.config = config

    @property
    def program(self) -> str:
        return self.config.display.program_name

    def usage_error(self) -> int:
        return EXIT_USAGE if self.config.cli.strict_exit_codes else EXIT_OK


# ── Handlers ──────────────────────────────────────────────────────────────────

def handle_add(ctx: CommandContext, path: Optional[str]) -> int:
    if not path:
        display.print_error("The 'add' command requires a file path.")
        display.print_usage(ctx.program, "add")
        return ctx.usage_error()

    if ctx.tracker.add(path) is Outcome.DUPLICATE:
        display.print_warn(f"'{path}' is already being tracked.")
    else:
        display.print_success(f"'{path}' added to the tracking list.")
    return EXIT_OK


def handle_remove(ctx: CommandContext, path: Optional[str]) -> int:
    if not path:
        display.print_error("The 'remove' command requires a file path.")
        display.print_usage(ctx.program, "remove")
        return ctx.usage_error()

    if ctx.tracker.remove(path) is Outcome.REMOVED:
        display.print_success(f"'{path}' removed from the tracking list.")
    else:
        display.print_error(f"'{path}' was not found in the tracking list.")
    return EXIT_OK


def handle_list(ctx: CommandContext, _argument: Optional[str]) -> int:
    display.print_listing(ctx.tracker.list())
    return EXIT_OK


def handle_sync(ctx: CommandContext, _argument: Optional[str]) -> int:
    display.print_sync(ctx.tracker.sync())
    return EXIT_OK


def handle_help(ctx: CommandContext, _argument: Optional[str]) -> int:
    display.print_help(ctx.program)
    return EXIT_OK


COMMANDS: dict[str, Handler] = {
    "add": handle_add,
    "remove": handle_remove,
    "list": handle_list,
    "sync": handle_sync,
    "help": handle_help,
}


def dispatch(ctx: CommandContext, command: Optional[str], argument: Optional[str] = None) -> int:
    """Route a command name to its handler and return the exit code."""
    if command is None:
        return handle_help(ctx, None)

    handler = COMMANDS.get(command)
    if handler is None:
        logger.debug(f"Unknown command: {command!r}")
        display.print_error(f"Unknown command '{command}'.")
        display.print_help(ctx.program)
        return ctx.usage_error()

    logger.debug(f"Dispatching {command!r} with argument {argument!r}")
    return handler(ctx, argument)


def run(command: Optional[str], argument: Optional[str] = None, config: Optional[Config] = None) -> int:
    """One process run: fresh store from the seed paths, one command."""
    cfg = config or load_config()
    tracker = Tracker(cfg.seed_paths)
    return dispatch(CommandContext(tracker, cfg), command, argument)


# ── Entry point ───────────────────────────────────────────────────────────────

@app.command(
    name="dotsim",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    command: Optional[str] = typer.Argument(
        None, help="One of: add, remove, list, sync, help (default: help)"
    ),
    argument: Optional[str] = typer.Argument(
        None, help="File path for add/remove, taken verbatim"
    ),
) -> None:
    """Track a list of dotfile paths in memory for a single run."""
    config = load_config()
    _setup_logging(config.display.log_level)

    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {ctx.args}")

    raise typer.Exit(run(command, argument, config))
