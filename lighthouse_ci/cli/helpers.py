# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared console output and usage error handling for the CLI
"""

import math
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from lighthouse_ci.constants import EXIT_USAGE

console = Console(highlight=False)


class LighthouseUsageError(click.UsageError):
    """Usage error that prints the full help text and exits with EXIT_USAGE."""

    exit_code = EXIT_USAGE

    def show(self, file=None):
        click.echo(self.format_message(), file=file)
        if self.ctx is not None:
            click.echo('', file=file)
            click.echo(self.ctx.get_help(), file=file)


class LighthouseCommand(click.Command):
    """Command whose parse errors (bad --score, unknown --runner, ...) exit with EXIT_USAGE."""

    def parse_args(self, ctx: click.Context, args: list) -> list:
        try:
            return super().parse_args(ctx, args)
        except LighthouseUsageError:
            raise
        except click.UsageError as e:
            raise LighthouseUsageError(e.format_message(), ctx=ctx) from e


def validate_score(ctx: click.Context, param: click.Parameter, value: Optional[float]) -> Optional[float]:
    """Reject scores JSON cannot carry (nan, inf)."""
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f'Score must be a finite number (got {value})', ctx=ctx, param=param)
    return value


def show_help_and_exit(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Eager ``--help`` callback, exits with EXIT_USAGE like a usage error."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help())
    ctx.exit(EXIT_USAGE)


def print_info(message: str) -> None:
    console.print(escape(message), soft_wrap=True)


def print_success(message: str) -> None:
    """Print a standardized success message."""
    console.print(f'[green]✓[/green] {escape(message)}', soft_wrap=True)


def print_warning(message: str) -> None:
    console.print(f'[yellow]{escape(message)}[/yellow]', soft_wrap=True)


def print_error(message: str, detail: Optional[str] = None) -> None:
    """Print a standardized error message."""
    console.print(f'[red]✗[/red] {escape(message)}', soft_wrap=True)
    if detail:
        console.print(f'  [dim]{escape(detail)}[/dim]', soft_wrap=True)
