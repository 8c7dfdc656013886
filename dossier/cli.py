"""
Resume Studio CLI

Parse, preview, export and persist LaTeX resumes from the command line.

Commands:
    new     - Write a starter template (classic or modern dialect)
    parse   - Print the parsed document tree as YAML
    preview - Write the live-preview HTML fragment
    export  - Build the print-ready document and open the print dialog
    save    - Store a LaTeX file as a user's resume
    load    - Retrieve a user's saved resume

Examples:\n

    dossier new --template modern --output resume.tex

    dossier parse resume.tex

    dossier export resume.tex --delay 1.0

    dossier save student-42 resume.tex --title "Fall applications"
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from dossier.config import LOGS_PATH
from dossier.contexts.parsing import parse_document
from dossier.contexts.rendering import export_document, open_browser_surface, render_preview
from dossier.contexts.rendering.logger import setup_rendering_logger
from dossier.contexts.storage import StorageError, get_resume_store
from dossier.contexts.studio import DEFAULT_TEMPLATE, get_starter_template
from dossier.utils.logger import session_log_dir
from dossier.utils.timestamp import format_timestamp

app = typer.Typer(
    help="Parse, preview and export LaTeX resumes",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def read_source(path: Path) -> str:
    if not path.exists():
        typer.secho(f"Error: file not found: {path}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text, encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


def warn_user(message: str) -> None:
    typer.secho(f"Warning: {message}", fg=typer.colors.RED, bold=True, err=True)


SourceArgument = Annotated[Path, typer.Argument(help="LaTeX resume source file")]
OutputOption = Annotated[
    Optional[Path], typer.Option("--output", "-o", help="Write to this file instead of stdout")
]
BackendOption = Annotated[
    Optional[str], typer.Option("--backend", "-b", help="Storage backend: local or sqlite")
]


@app.command("new")
def new_command(
    template: Annotated[
        str, typer.Option("--template", "-t", help="Starter template: classic or modern")
    ] = DEFAULT_TEMPLATE,
    output: OutputOption = None,
):
    """Write a starter LaTeX resume."""
    try:
        source = get_starter_template(template)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    emit(source, output)


@app.command("parse")
def parse_command(source: SourceArgument, output: OutputOption = None):
    """Print the structured document tree (name, contact, sections, entries, bullets) as YAML."""
    tree = parse_document(read_source(source))
    emit(tree.to_yaml(), output)


@app.command("preview")
def preview_command(source: SourceArgument, output: OutputOption = None):
    """Render the live-preview HTML fragment."""
    tree = parse_document(read_source(source))
    emit(render_preview(tree).to_html(), output)


@app.command("export")
def export_command(
    source: SourceArgument,
    delay: Annotated[
        Optional[float],
        typer.Option("--delay", "-d", help="Seconds to wait before printing", min=0.0),
    ] = None,
    directory: Annotated[
        Optional[Path], typer.Option("--dir", help="Directory for the exported HTML file")
    ] = None,
):
    """
    Export a print-ready document and open the print dialog.

    Examples:\n

        $ dossier export resume.tex

        $ dossier export resume.tex --dir outs/exports --delay 1
    """
    setup_rendering_logger(session_log_dir(LOGS_PATH, "export"))
    tree = parse_document(read_source(source))

    result = export_document(
        tree,
        surface_factory=lambda: open_browser_surface(directory),
        notify=warn_user,
        print_delay=delay,
    )

    if not result.success:
        raise typer.Exit(code=1)

    typer.secho("✓ Export ready", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  File: {result.path}")


@app.command("save")
def save_command(
    user_id: Annotated[str, typer.Argument(help="User identifier")],
    source: SourceArgument,
    title: Annotated[Optional[str], typer.Option("--title", help="Document title")] = None,
    backend: BackendOption = None,
):
    """Save a LaTeX file as the user's resume (replaces any previous save)."""
    try:
        store = get_resume_store(backend)
        saved = store.save(user_id, read_source(source), title)
    except (ValueError, StorageError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Saved '{saved.title}' for {user_id}", fg=typer.colors.GREEN)


@app.command("load")
def load_command(
    user_id: Annotated[str, typer.Argument(help="User identifier")],
    output: OutputOption = None,
    backend: BackendOption = None,
):
    """Print (or write) the user's saved resume source."""
    try:
        saved = get_resume_store(backend).load(user_id)
    except (ValueError, StorageError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if saved is None:
        typer.secho(f"No saved resume for {user_id}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"{saved.title} (saved {format_timestamp(saved.updated_at)})", fg=typer.colors.BLUE, err=True
    )
    emit(saved.latex_code, output)


if __name__ == "__main__":
    app()
