"""Interactive create command.

Asks for the frame name, description, FID and seed phrase, then runs the
generator in ./<name>. No flags besides --version.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import typer
import yaml
from pydantic import SecretStr, ValidationError
from rich.console import Console
from rich.markup import escape

from frames_quickstart import __version__
from frames_quickstart.errors import QuickstartError
from frames_quickstart.manifest.registry import resolve_signer
from frames_quickstart.models.config import load_generator_config
from frames_quickstart.models.inputs import (
    UserInputs,
    validate_account_id,
    validate_description,
    validate_project_name,
    validate_secret_phrase,
)
from frames_quickstart.scaffold.generator import ProjectGenerator

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def ask(text: str, validator: Callable[[str], str], hide_input: bool = False) -> str:
    """Prompt until validator accepts the answer, naming the problem each time.

    Blank answers are passed to the validator too, so an empty line gets the
    same field-specific message as whitespace.
    """
    while True:
        value = typer.prompt(
            text,
            default="",
            show_default=False,
            prompt_suffix=" ",
            hide_input=hide_input,
        )
        try:
            return validator(value)
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)


def collect_inputs() -> UserInputs:
    """Prompt for each value until it passes validation."""
    project_name = ask("What is the name of your frame?", validate_project_name)
    description = ask("Give a one-line description of your frame:", validate_description)
    account_id = ask("Enter your Farcaster FID:", validate_account_id)
    secret_phrase = ask(
        "Enter your Farcaster account seed phrase:",
        validate_secret_phrase,
        hide_input=True,
    )
    return UserInputs(
        project_name=project_name,
        description=description,
        account_id=account_id,
        secret_phrase=SecretStr(secret_phrase),
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"frames-v2-quickstart {__version__}")
        raise typer.Exit()


def create(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new Frames v2 app in a directory named after the frame."""
    try:
        config = load_generator_config()
    except (OSError, ValidationError, yaml.YAMLError) as exc:
        _fail(f"invalid configuration: {exc}")

    try:
        signer = resolve_signer(config)
    except (ImportError, ValueError, TypeError) as exc:
        _fail(str(exc))

    inputs = collect_inputs()
    destination = Path.cwd() / inputs.trimmed_name

    generator = ProjectGenerator(signer=signer, config=config, console=console)
    try:
        generator.run(inputs, destination)
    except (QuickstartError, OSError) as exc:
        _fail(str(exc))
