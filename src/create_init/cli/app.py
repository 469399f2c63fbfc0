"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from rich.console import Console

from create_init.exceptions import ConfigError, ManifestError, ScaffoldError
from create_init.models import Cancelled


def main(argv: list[str] | None = None) -> int:
    import create_init.cli as cli

    parser = cli.build_parser()
    invocation = cli.invocation_from_args(parser.parse_args(argv))
    console = Console()

    if invocation.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    if invocation.help:
        cli.print_help(console)
        return 0

    try:
        settings = cli.load_config(invocation.config) if invocation.config else cli.ScaffoldSettings()
        result = cli.run_flow(
            invocation,
            cli.QuestionaryPrompter(),
            settings=settings,
            style_for=cli.template_color,
        )
        if isinstance(result, Cancelled):
            if result.message is not None:
                cli.print_cancelled(console, result.message)
            return settings.cancel_exit_code

        cli.materialize(result.record, settings=settings, console=console)
        cli.print_summary(console, result.record)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ManifestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (ScaffoldError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
