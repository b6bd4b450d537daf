from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from dock_tools.core.ota_firmware import write_firmware_metadata
from dock_tools.core.ota_hawkbit import DEPLOYMENT_FILE, write_deployment
from dock_tools.settings import get_settings

ota_app = typer.Typer(help="Create OTA metadata for hawkBit deployments.")
console = Console()
err_console = Console(stderr=True)


def _fail(exc: Exception) -> typer.Exit:
    err_console.print(f"[red]{escape(str(exc))}[/red]")
    return typer.Exit(1)


@ota_app.command("firmware-meta")
def firmware_meta(
    firmware: Annotated[Path, typer.Argument(help="Firmware binary.")],
    version: Annotated[str, typer.Argument(help="Firmware version.")],
    channel: Annotated[str, typer.Argument(help="Release channel, e.g. DEVELOPMENT.")],
    output: Annotated[Path, typer.Argument(help="Metadata JSON file to write.")],
) -> None:
    """Create the firmware metadata file included in the deployment."""
    settings = get_settings()
    try:
        metadata = write_firmware_metadata(firmware, version, channel, output, settings.release_notes_dir)
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(exc) from None

    languages = ", ".join(metadata.description)
    console.print(f"[green]Wrote[/green] {escape(str(output))} (size {metadata.size}, languages: {languages})")


@ota_app.command("hawkbit-meta")
def hawkbit_meta(
    version: Annotated[str, typer.Argument(help="Software module version.")],
    files: Annotated[list[str], typer.Argument(help="Deployment files, each with .MD5SUM/.sha1sum/.sha256sum.")],
) -> None:
    """Create a hawkBit DDI deployment object (deployment.json)."""
    try:
        deployment = write_deployment(version, files, Path(DEPLOYMENT_FILE))
    except (FileNotFoundError, ValueError) as exc:
        raise _fail(exc) from None

    count = len(deployment.chunks[0].artifacts)
    console.print(f"[green]Wrote[/green] {DEPLOYMENT_FILE} ({count} artifacts)")
