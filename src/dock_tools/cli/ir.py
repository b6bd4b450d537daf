import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from dock_tools.core.ir_codes import DEFAULT_TORTURE_CODE, build_send_command
from dock_tools.core.ir_repeat import DEFAULT_DELAY_MS, DEFAULT_DURATION_MS, RepeatConfig, run_repeat
from dock_tools.core.ir_torture import TortureConfig, run_torture
from dock_tools.core.ports.connection import DockConnection
from dock_tools.settings import get_settings

ir_app = typer.Typer(help="IR test clients for the dock WebSocket API.")
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


async def _open_connection(url: str) -> DockConnection:
    from dock_tools.transport.websockets_adapter import open_dock_connection

    return await open_dock_connection(url)


@ir_app.command("repeat")
def repeat(
    url: Annotated[str, typer.Argument(help="Dock WebSocket URL, e.g. ws://UCD3-xxxxxx.local:946/.")],
    code: Annotated[str, typer.Argument(help="IR code (hex, Global Caché sendir or Pronto).")],
    repeat_count: Annotated[int, typer.Argument(metavar="REPEAT", min=0, help="IR repeat count sent with the command.")],
    duration: Annotated[int, typer.Argument(min=0, help="Total repeat duration in ms.")] = DEFAULT_DURATION_MS,
    delay: Annotated[int, typer.Argument(min=1, help="Delay between repeat commands in ms.")] = DEFAULT_DELAY_MS,
) -> None:
    """Send an IR command, then repeat signals for DURATION ms, then stop."""
    config = RepeatConfig(
        code=code,
        repeat=repeat_count,
        duration_ms=duration,
        delay_ms=delay,
        token=get_settings().auth_token,
    )
    command = build_send_command(code, repeat=repeat_count)
    logger.info("Using dock command: %s", command.model_dump_json(exclude_none=True))

    async def _run() -> None:
        connection = await _open_connection(url)
        sent = await run_repeat(connection, config)
        console.print(f"Sent {sent['ir_send']} IR command(s) and {sent['ir_stop']} stop command(s)")

    try:
        asyncio.run(_run())
    except ConnectionError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None


@ir_app.command("torture")
def torture(
    url: Annotated[str, typer.Argument(help="Dock WebSocket URL, e.g. ws://UCD3-xxxxxx.local:946/.")],
    code: Annotated[str, typer.Argument(help="IR code to send continuously.")] = DEFAULT_TORTURE_CODE,
) -> None:
    """Send an IR command every 100 ms until the connection fails or Ctrl-C."""
    config = TortureConfig(code=code, token=get_settings().auth_token)

    async def _run() -> None:
        connection = await _open_connection(url)
        await run_torture(connection, config)

    try:
        asyncio.run(_run())
    except ConnectionError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None
    except KeyboardInterrupt:
        console.print("Interrupted")
