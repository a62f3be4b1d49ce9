import logging
import sys
from typing import Optional

import click
import typer

from kazoe.errors import KazoeError
from kazoe.helper import describe_error
from kazoe.parse import evaluate, format_value
from kazoe.token import Token
from kazoe.tokenize import tokenize

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}

app = typer.Typer(add_completion=False)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING - 10 * min(verbosity, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def format_token(token: Token) -> str:
    if token.value is None:
        return token.kind.name
    return f"{token.kind.name}({token.value})"


def run_line(line: str, show_tokens: bool = False) -> str:
    if show_tokens:
        return " ".join(format_token(token) for token in tokenize(line))
    return format_value(evaluate(line))


def report(line: str, err: KazoeError) -> None:
    message = describe_error(line, err)
    click.echo(click.style(message, fg="red"), err=True, nl=False)


def repl(prompt: str, show_tokens: bool) -> None:
    while True:
        try:
            line = click.prompt(
                prompt, default="", show_default=False, prompt_suffix=" "
            )
        except click.Abort:
            click.echo()
            return
        if line.strip() in QUIT_COMMANDS:
            return
        if not line.strip():
            continue
        try:
            click.echo(run_line(line, show_tokens))
        except KazoeError as err:
            logger.info("rejected %r: %s", line, err.message)
            report(line, err)


@app.command()
def main(
    expression: Optional[str] = typer.Option(
        None, "-e", "--expression", help="Evaluate one expression and exit."
    ),
    show_tokens: bool = typer.Option(
        False, "--tokens", help="Print the token stream instead of the value."
    ),
    prompt: str = typer.Option(
        "expr>", "--prompt", envvar="KAZOE_PROMPT", help="Interactive prompt."
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True, help="Increase log verbosity."
    ),
):
    configure_logging(verbose)
    sys.set_int_max_str_digits(0)
    if expression is None:
        repl(prompt, show_tokens)
        return
    try:
        click.echo(run_line(expression, show_tokens))
    except KazoeError as err:
        report(expression, err)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
