"""
FUSION CLI - Entry point.

Commands:
- eval: Evaluate an expression and print one result per statement
- tokens: Show the token stream produced by the lexer
- tree: Show the parsed syntax tree
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from fusion._version import get_version
from fusion.core.config import CONFIG_FILENAME, FusionConfig, configure_logging, load_config
from fusion.core.errors import ConfigError, EvaluationError, ParseError
from fusion.core.expression_lang import ASTPrinter, Evaluator, Parser, tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="FUSION – integer expression lexer, parser, and evaluator",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"fusion {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Configuration file (default: ./{CONFIG_FILENAME})",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """FUSION CLI main callback for global options."""
    config_path = config if config is not None else Path.cwd() / CONFIG_FILENAME
    if config is not None and not config.exists():
        typer.echo(f"Config file not found: {config}", err=True)
        raise typer.Exit(code=1)

    try:
        settings = load_config(config_path)
        configure_logging(settings, verbose=verbose)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Loaded configuration from %s", config_path)
    ctx.obj = settings


def _read_source(source: str) -> str:
    """Resolve the SOURCE argument; '-' reads standard input."""
    if source == "-":
        return sys.stdin.read()
    return source


def _settings(ctx: typer.Context) -> FusionConfig:
    if isinstance(ctx.obj, FusionConfig):
        return ctx.obj
    return FusionConfig()


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Expression to evaluate ('-' reads stdin)"),
) -> None:
    """
    Evaluate an expression.

    Prints one integer per top-level statement.

    Examples:
        fusion eval "(7 + 8) * 8 / 2"     # 60
        echo "1 + 2 * 3" | fusion eval -  # 7
    """
    text = _read_source(source)
    evaluator = Evaluator(_settings(ctx).evaluation.overflow)
    try:
        ast = Parser.from_source(text).parse()
        results = evaluator.visit_ast(ast)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except EvaluationError as e:
        typer.echo(f"Evaluation error: {e}", err=True)
        raise typer.Exit(code=1)

    for value in results:
        typer.echo(str(value))


@app.command(name="tokens")
def tokens_command(
    source: str = typer.Argument(..., help="Expression to tokenize ('-' reads stdin)"),
) -> None:
    """Show the token stream for an expression, whitespace included."""
    text = _read_source(source)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Span")
    table.add_column("Literal", style="green")
    table.add_column("Value", justify="right")

    for tok in tokenize(text):
        table.add_row(
            tok.kind.name,
            f"{tok.span.start}..{tok.span.end}",
            repr(tok.span.literal),
            "" if tok.value is None else str(tok.value),
        )

    Console().print(table)


@app.command(name="tree")
def tree_command(
    source: str = typer.Argument(..., help="Expression to parse ('-' reads stdin)"),
) -> None:
    """Show the syntax tree for an expression."""
    text = _read_source(source)
    try:
        ast = Parser.from_source(text).parse()
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)

    Console().print(ASTPrinter().render(ast))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
