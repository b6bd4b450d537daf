from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from dock_tools.core.licenses import generate_license_report
from dock_tools.settings import get_settings

console = Console()
err_console = Console(stderr=True)


def licenses(
    manifest: Annotated[Path, typer.Argument(help="License manifest JSON (module name -> license info).")],
    output: Annotated[Path, typer.Argument(help="Markdown file to write.")],
) -> None:
    """Create the license overview page in markdown."""
    settings = get_settings()
    try:
        report = generate_license_report(
            manifest,
            output,
            base_dir=Path.cwd(),
            templates_dir=settings.templates_dir,
            project_license_path=settings.project_license,
        )
    except (FileNotFoundError, ValueError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    console.print(
        f"[green]Wrote[/green] {escape(str(report.path))} "
        f"({report.modules} modules, {len(report.embedded)} license texts)"
    )
    if report.missing:
        console.print(f"[yellow]Missing license files:[/yellow] {escape(', '.join(report.missing))}")
