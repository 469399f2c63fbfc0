"""Terminal rendering: help text, template colors, and run summaries."""

from __future__ import annotations

import shlex

from rich.console import Console
from rich.markup import escape

from create_init.models import DecisionRecord, Mode
from create_init.templates import TEMPLATES

TEMPLATE_COLORS: dict[str, str] = {
    "vanilla": "yellow",
    "vue": "green",
    "demo": "cyan",
}

HELP_BANNER = """\
Usage: create-init [OPTION]... [DIRECTORY]

Create a new JavaScript project.
With no arguments, start the CLI in interactive mode.

Options:
  -t, --template NAME        use a specific template
  -u, --update               update the dependencies of an existing project
      --config PATH          read settings from a JSON file
  -v, --verbose              enable debug logging
      --version              show the version and exit

Available templates:"""


def template_color(name: str) -> str | None:
    return TEMPLATE_COLORS.get(name)


def print_help(console: Console) -> None:
    console.print(HELP_BANNER, markup=False, highlight=False)
    for template in TEMPLATES:
        color = template_color(template.name)
        name = escape(template.name)
        console.print(f"[{color}]{name}[/]" if color else name, highlight=False)


def print_cancelled(console: Console, message: str) -> None:
    console.print(f"[red]{escape(message)}[/]", highlight=False)


def format_next_steps(record: DecisionRecord) -> list[str]:
    """Commands to suggest once the project is written. Nothing is run."""
    if record.mode is Mode.UPDATE:
        return ["npm install"]
    steps: list[str] = []
    if record.target_dir != ".":
        steps.append(f"cd {shlex.quote(record.target_dir)}")
    steps.extend(["npm install", "npm run dev"])
    return steps


def print_summary(console: Console, record: DecisionRecord) -> None:
    console.print("\nDone. Now run:\n", highlight=False)
    for step in format_next_steps(record):
        console.print(f"  {escape(step)}", highlight=False)
    console.print()


__all__ = [
    "HELP_BANNER",
    "TEMPLATE_COLORS",
    "format_next_steps",
    "print_cancelled",
    "print_help",
    "print_summary",
    "template_color",
]
