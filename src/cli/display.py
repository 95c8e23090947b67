"""
Rich display helpers for the dotsim CLI.
All terminal output goes through this module for consistency.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..storage.models import Listing

# Paths are echoed verbatim: no emoji codes, one line each when piped
console = Console(highlight=False, soft_wrap=True, emoji=False)

_COMMAND_HELP = (
    ("add <path>", "Track a file."),
    ("remove <path>", "Stop tracking a file."),
    ("list", "List all tracked files."),
    ("sync", "Simulate syncing the tracked files."),
    ("help", "Show this help message."),
)


# ── Help ──────────────────────────────────────────────────────────────────────

def print_help(program: str) -> None:
    title = "Dotfiles Manager Simulator"
    console.print(f"[bold]{title}[/bold]")
    console.print("-" * len(title))
    console.print(f"Usage: {escape(program)} <command> \\[argument]")
    console.print()
    console.print("Commands:")
    width = max(len(usage) for usage, _ in _COMMAND_HELP) + 2
    for usage, description in _COMMAND_HELP:
        console.print(Text(f"  {usage:<{width}}{description}"))


def print_usage(program: str, command: str) -> None:
    console.print(f"Usage: {escape(program)} {escape(command)} <path>")


# ── Tracked paths ─────────────────────────────────────────────────────────────

def print_listing(listing: Listing) -> None:
    if not listing.entries:
        console.print("[dim]No dotfiles are being tracked right now.[/dim]")
        return

    console.print("[bold]Tracked dotfiles:[/bold]")
    for entry in listing.entries:
        console.print(Text(f"  [{entry.position}] {entry.path}"))


def print_sync(listing: Listing) -> None:
    if not listing.entries:
        console.print(
            "[dim]Nothing to sync. Add files first with the 'add' command.[/dim]"
        )
        return

    console.print("Starting simulated sync...")
    for entry in listing.entries:
        line = Text("  -> Syncing ")
        line.append(entry.path)
        line.append(" ... ")
        line.append("OK", style="bold green")
        console.print(line)
    console.print("[bold green]Simulated sync completed successfully![/bold green]")


# ── Utility ───────────────────────────────────────────────────────────────────

def print_error(msg: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(msg)}")


def print_success(msg: str) -> None:
    console.print(f"[bold green]✓[/bold green] {escape(msg)}")


def print_warn(msg: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(msg)}")
