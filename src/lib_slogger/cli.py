"""Click command group exposing metadata and a rendering demo.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* :func:`cli_info` - ``info`` subcommand.
* :func:`cli_demo` - ``demo`` subcommand emitting one record per level.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import sys
from typing import Sequence

import click

from . import __init__conf__
from .domain import Attr, group
from .runtime import Format, new_slogger, with_debug, with_format, with_output

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner as one string ending with a newline."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Structured logging handlers: colourised text and severity-mapped JSON."""

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--debug", "debug_", is_flag=True, help="Enable DEBUG records.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([item.value for item in Format], case_sensitive=False),
    default=Format.TEXT.value,
    show_default=True,
    help="Output encoding.",
)
def cli_demo(debug_: bool, fmt: str) -> None:
    """Emit a sample record per level to stdout."""

    options = [with_format(fmt), with_output(sys.stdout)]
    if debug_:
        options.append(with_debug())
    log = new_slogger(*options).with_attrs(service=__init__conf__.name)
    log.debug("resolving configuration", source="demo")
    log.info("request served", group("http", Attr("method", "GET"), Attr("status", 200)))
    log.warn("cache almost full", usage="93%")
    log.error("upstream timeout", upstream="billing", elapsed_ms=5000)
    log.success("demo finished")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
