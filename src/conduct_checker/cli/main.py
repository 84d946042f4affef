from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from conduct_checker._defaults import (
    DEFAULT_ENDPOINT,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
)
from conduct_checker.checkers.openai_checker import OpenAiConductChecker
from conduct_checker.data.models import Message
from conduct_checker.errors import ConductCheckError
from conduct_checker.providers.file_provider import FileCodeOfConductProvider

app = typer.Typer(name="conduct-checker", help="Check messages against a code of conduct with an LLM.")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(level: str) -> None:
    key = level.strip().upper()
    if key not in _LOG_LEVELS:
        raise typer.BadParameter(f"Unsupported log level: {level}. Use one of: {', '.join(_LOG_LEVELS)}")
    logging.basicConfig(level=getattr(logging, key), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _read_body(body: str | None, body_file: Path | None) -> str:
    if body is not None and body_file is not None:
        raise typer.BadParameter("Use either --body or --body-file, not both.")
    if body_file is not None:
        return body_file.read_text(encoding="utf-8")
    if body is None:
        raise typer.BadParameter("A message body is required (--body or --body-file).")
    return body


def _build_checker(
    endpoint: str,
    api_key: str,
    model: str,
    code_of_conduct: Path,
    max_redirects: int,
    timeout: float,
) -> OpenAiConductChecker:
    return OpenAiConductChecker(
        endpoint=endpoint,
        api_key=api_key,
        model=model,
        code_of_conduct_provider=FileCodeOfConductProvider(code_of_conduct),
        max_redirects=max_redirects,
        timeout=timeout,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def cli() -> None:
    """Check messages against a code of conduct with an LLM."""


@app.command()
def check(
    title: str = typer.Option(..., help="Message title"),
    body: Optional[str] = typer.Option(None, help="Message body"),
    body_file: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="File holding the message body"),
    code_of_conduct: Path = typer.Option(..., exists=True, dir_okay=False, help="Code of conduct file, e.g. CODE_OF_CONDUCT.md"),
    endpoint: str = typer.Option(DEFAULT_ENDPOINT, envvar="CONDUCT_CHECKER_ENDPOINT", help="Chat-completion endpoint URL"),
    api_key: Optional[str] = typer.Option(
        None,
        envvar=["CONDUCT_CHECKER_API_KEY", "OPENAI_API_KEY"],
        help="API key sent as bearer token",
        show_default=False,
    ),
    model: str = typer.Option(DEFAULT_MODEL, envvar="CONDUCT_CHECKER_MODEL", help="Model identifier"),
    max_redirects: int = typer.Option(DEFAULT_MAX_REDIRECTS, help="Max 307 redirects to follow"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, help="HTTP timeout in seconds"),
    log_level: str = typer.Option("WARNING", help="Log level: DEBUG, INFO, WARNING, ERROR"),
) -> None:
    """Check one message and print the verdict as JSON."""
    _configure_logging(log_level)
    if not api_key:
        raise typer.BadParameter("An API key is required (--api-key or CONDUCT_CHECKER_API_KEY).")
    message = Message(title=title, message=_read_body(body, body_file))

    try:
        with _build_checker(endpoint, api_key, model, code_of_conduct, max_redirects, timeout) as checker:
            result = checker.check(message)
    except ConductCheckError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.to_json())


def main(argv: list[str] | None = None) -> None:
    if argv is not None:
        app(standalone_mode=False, args=argv)
    else:
        app()


if __name__ == "__main__":
    main()
