from __future__ import annotations

import json

import typer
from pydantic import ValidationError

from .config import Settings
from .errors import TemplateStoreError
from .files import InputFile
from .logging import configure_logging
from .memory import InMemoryTemplateFileService

app = typer.Typer(help="Inspect an in-memory template store")

FILE_HELP = "Virtual file as DIR/NAME=CONTENTS; may be repeated"


def _parse_file(spec: str) -> InputFile:
    path, sep, contents = spec.partition("=")
    directory, slash, name = path.rpartition("/")
    if not sep or not slash or not directory or not name:
        raise typer.BadParameter(f"expected DIR/NAME=CONTENTS, got {spec!r}", param_hint="--file")
    return InputFile(directory=directory, file=name, contents=contents)


def _build_service(files: list[str], extension: str | None) -> InMemoryTemplateFileService:
    service = InMemoryTemplateFileService(template_extension=extension)
    service.register_files(*(_parse_file(spec) for spec in files))
    return service


@app.command()
def partials(
    directory: str | None = typer.Argument(None, help="Directory holding partial templates"),
    file: list[str] = typer.Option([], "--file", "-f", help=FILE_HELP),
    extension: str | None = typer.Option(None, help="Template file extension"),
) -> None:
    """Print the partial templates found in DIRECTORY as JSON."""
    overrides: dict[str, object] = {}
    if extension is not None:
        overrides["template_extension"] = extension
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(
            f"invalid template extension {extension!r}", param_hint="--extension"
        ) from exc
    service = _build_service(file, settings.template_extension)
    directory = directory or settings.partials_directory
    try:
        found = service.describe_partial_templates({}, directory)
    except TemplateStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps({k: v.to_dict() for k, v in found.items()}, indent=2))


@app.command()
def show(
    directory: str = typer.Argument(..., help="Directory of the file"),
    name: str = typer.Argument(..., help="File name"),
    file: list[str] = typer.Option([], "--file", "-f", help=FILE_HELP),
) -> None:
    """Print the contents of NAME in DIRECTORY."""
    service = _build_service(file, None)
    try:
        contents = service.get_template_file_contents(directory, name)
    except TemplateStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(contents)


@app.command("settings")
def show_settings() -> None:
    """Print the effective settings."""
    typer.echo(Settings().model_dump_json(indent=2))


def main() -> None:
    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
