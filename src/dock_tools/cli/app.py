import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from dock_tools.cli.ir import ir_app
from dock_tools.cli.licenses import licenses
from dock_tools.cli.ota import ota_app
from dock_tools.settings import get_settings

app = typer.Typer(
    name="dock-tools",
    help="Dock firmware tooling: license docs, IR test clients, OTA metadata.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("licenses")(licenses)
app.add_typer(ir_app, name="ir")
app.add_typer(ota_app, name="ota")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def _root() -> None:
    configure_logging(get_settings().log_level)


def main() -> None:
    app()
