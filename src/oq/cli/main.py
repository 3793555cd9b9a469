# src/oq/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config, LOG_LEVELS
from ..dialects import DIALECTS, available_dialects
from ..environment import Environment
from ..errors import OqError
from ..evaluator import evaluate
from ..object import Error
from ..oq_token import EOF
from ..session import Session, parse_source, read_source, tokenize

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(level):
    logger = logging.getLogger("oq")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    logger.setLevel(LOG_LEVELS[level])


def _load(file):
    try:
        return read_source(file)
    except OqError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


def _print_parser_errors(errors):
    console.print("[bold red]Parser errors:[/bold red]")
    for error in errors:
        console.print(f"\t{escape(error)}")


def _print_warnings(warnings, out=console):
    for warning in warnings:
        out.print(f"[yellow]Warning: {escape(warning)}[/yellow]")


@click.group()
@click.version_option(version=__version__, prog_name="oQ")
@click.option('--log-level', type=click.Choice(list(LOG_LEVELS)), default=None,
              help="Logging threshold (default: OQ_LOG_LEVEL or warning)")
@click.option('--dialect', type=click.Choice(available_dialects()), default=None,
              help="Keyword table to start in (default: OQ_DEFAULT_DIALECT or eng)")
@click.pass_context
def cli(ctx, log_level, dialect):
    """oQ programming language - one grammar, keywords in several languages"""
    if log_level:
        config.set_log_level(log_level)
    _configure_logging(config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["dialect"] = dialect


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def run(ctx, file):
    """Run an oQ program"""
    source = _load(file)

    program, errors, warnings, _ = parse_source(source + "\n", dialect=ctx.obj["dialect"])
    _print_warnings(warnings, err_console)
    if errors:
        _print_parser_errors(errors)
        sys.exit(1)

    result = evaluate(program, Environment())

    if result is None:
        return
    if isinstance(result, Error):
        console.print(f"[bold red]{escape(result.inspect())}[/bold red]")
        sys.exit(1)
    console.print(escape(result.inspect()))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx, file):
    """Check syntax of an oQ file"""
    source = _load(file)

    _, errors, warnings, _ = parse_source(source + "\n", dialect=ctx.obj["dialect"])
    _print_warnings(warnings, err_console)
    if errors:
        _print_parser_errors(errors)
        sys.exit(1)
    console.print("[bold green]Syntax is valid[/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def ast(ctx, file):
    """Show the canonical form of an oQ file"""
    source = _load(file)

    program, errors, warnings, _ = parse_source(source + "\n", dialect=ctx.obj["dialect"])
    _print_warnings(warnings, err_console)
    if errors:
        _print_parser_errors(errors)
        sys.exit(1)

    console.print(Panel.fit(
        escape(str(program)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))
    for stmt in program.statements:
        console.print(f"  {escape(repr(stmt))}")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def tokens(ctx, file):
    """Show tokens of an oQ file"""
    source = _load(file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Canonical", style="magenta")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in tokenize(source, dialect=ctx.obj["dialect"]):
        if token.type == EOF:
            break
        literal = "\\n" if token.literal == "\n" else token.literal
        canonical = "\\n" if token.canonical == "\n" else token.canonical
        table.add_row(token.type, escape(literal), escape(canonical), str(token.line), str(token.column))

    console.print(table)


@cli.command()
def dialects():
    """List keyword tables"""
    table = Table(title="Dialects")
    table.add_column("Keyword", style="cyan")
    for name in available_dialects():
        table.add_column(name, style="green")

    canonicals = [entry.canonical for entry in DIALECTS["eng"].values()]
    for canonical in canonicals:
        row = [canonical]
        for name in available_dialects():
            spellings = [s for s, entry in DIALECTS[name].items() if entry.canonical == canonical]
            row.append(", ".join(spellings))
        table.add_row(*row)

    console.print(table)


@cli.command()
@click.pass_context
def repl(ctx):
    """Start the oQ REPL"""
    session = Session(dialect=ctx.obj["dialect"])
    console.print(f"[bold green]oQ REPL v{__version__}[/bold green]")
    console.print("Switch keywords with ~eng, ~trk or ~qzq. Type 'exit' to quit\n")

    while True:
        try:
            line = console.input("[bold blue]>> [/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() in ['exit', 'quit']:
            break
        if not line.strip():
            continue

        outcome = session.execute(line)
        _print_warnings(outcome.warnings)
        if outcome.errors:
            for error in outcome.errors:
                console.print(f"[red]\t{escape(error)}[/red]")
            continue

        if outcome.value is None:
            continue
        style = "red" if isinstance(outcome.value, Error) else "green"
        console.print(f"[{style}]{escape(outcome.value.inspect())}[/{style}]")


if __name__ == "__main__":
    cli()
