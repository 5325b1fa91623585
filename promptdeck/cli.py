import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .artifacts import save_render
from .config import Settings, load_settings
from .errors import NotFoundError, TemplateError
from .logging_setup import setup_logging
from .models import MappingTable, RenderedDocument
from .renderer import render
from .store import default_store

logger = logging.getLogger(__name__)

app = typer.Typer(help="Render the bundled prompt templates.")

# stdout carries only the rendered prompt
err_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
    log_json: Optional[bool] = typer.Option(None, "--log-json/--no-log-json", help="Emit JSON log lines."),
):
    """Promptdeck CLI entrypoint."""
    overrides = {}
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if log_json is not None:
        overrides["log_json"] = log_json
    try:
        settings = load_settings()
        if overrides:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    setup_logging(settings.log_level, json_output=settings.log_json)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit(code=0)


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return load_settings()


def _read_file(file: Path) -> str:
    if not file.exists():
        print(f"[red]File not found:[/red] {escape(str(file))}")
        raise typer.Exit(code=1)
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[red]Cannot read file:[/red] {escape(str(file))} ({escape(str(exc))})")
        raise typer.Exit(code=1)


def _parse_assignments(assignments: List[str], option: str) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            print(f"[red]Invalid {option} '{escape(assignment)}'. Use KEY=VALUE.[/red]")
            raise typer.Exit(code=2)
        parsed[key] = value
    return parsed


def _render_or_exit(template_id: str, values: dict[str, str], strict: bool) -> RenderedDocument:
    try:
        return render(template_id, values, strict=strict)
    except NotFoundError as exc:
        logger.warning("Render failed: %s", exc, extra={"template_id": template_id})
        print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)
    except TemplateError as exc:
        logger.warning("Render failed: %s", exc, extra={"template_id": template_id})
        print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)


def _emit(ctx: typer.Context, document: RenderedDocument, save: bool) -> None:
    typer.echo(document.text)
    if save:
        paths = save_render(document, runs_dir=_settings(ctx).runs_dir)
        err_console.print(f"Saved prompt to [bold]{escape(paths['prompt_path'])}[/bold]")
        err_console.print(f"Saved metadata to [bold]{escape(paths['meta_path'])}[/bold]")


def _resolve_strict(ctx: typer.Context, strict: Optional[bool]) -> bool:
    return _settings(ctx).strict if strict is None else strict


def _print_mapping(mapping: MappingTable) -> None:
    table = Table(title=mapping.name)
    table.add_column(mapping.key_header)
    table.add_column(mapping.value_header)
    for key, value in mapping.items():
        table.add_row(escape(key), escape(value))
    print(table)


@app.command("list")
def list_templates():
    store = default_store()
    table = Table(title="Templates")
    table.add_column("id")
    table.add_column("title")
    table.add_column("placeholders")
    for template_id in store.template_ids():
        template = store.get_template(template_id)
        table.add_row(template.id, template.title, ", ".join(template.referenced_placeholders))
    print(table)


@app.command()
def mappings(name: Optional[str] = typer.Argument(None, help="Mapping table name.")):
    store = default_store()
    if name is None:
        for mapping in store.mappings.values():
            _print_mapping(mapping)
        return
    try:
        mapping = store.get_mapping(name)
    except NotFoundError as exc:
        print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)
    _print_mapping(mapping)


@app.command()
def diagram(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Terraform file to embed."),
    save: bool = typer.Option(False, "--save", help="Write the prompt into the runs directory."),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict"),
):
    content = _read_file(file)
    document = _render_or_exit("diagram", {"TerraformSource": content}, _resolve_strict(ctx, strict))
    _emit(ctx, document, save)


@app.command()
def blueprint(
    ctx: typer.Context,
    customer: str = typer.Argument(..., help="Customer company name."),
    save: bool = typer.Option(False, "--save", help="Write the prompt into the runs directory."),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict"),
):
    document = _render_or_exit("blueprint", {"CustomerName": customer}, _resolve_strict(ctx, strict))
    _emit(ctx, document, save)


@app.command("render")
def render_command(
    ctx: typer.Context,
    template_id: str = typer.Argument(..., help="Template id, see `list`."),
    values: Optional[List[str]] = typer.Option(None, "--set", help="KEY=VALUE placeholder value."),
    files: Optional[List[str]] = typer.Option(None, "--set-file", help="KEY=PATH, value read from file."),
    save: bool = typer.Option(False, "--save", help="Write the prompt into the runs directory."),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict"),
):
    resolved = _parse_assignments(values or [], "--set")
    for key, path in _parse_assignments(files or [], "--set-file").items():
        resolved[key] = _read_file(Path(path))

    document = _render_or_exit(template_id, resolved, _resolve_strict(ctx, strict))
    _emit(ctx, document, save)


if __name__ == "__main__":
    app()
