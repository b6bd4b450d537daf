"""IR torture test: send the same IR command to a dock until something breaks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from dock_tools.core.ir_codes import DEFAULT_TORTURE_CODE, build_send_command
from dock_tools.core.ports.connection import DockConnection
from dock_tools.core.session import DockSession, run_session
from dock_tools.settings import DEFAULT_AUTH_TOKEN

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 100


@dataclass(frozen=True)
class TortureConfig:
    code: str = DEFAULT_TORTURE_CODE
    interval_ms: int = DEFAULT_INTERVAL_MS
    token: str = DEFAULT_AUTH_TOKEN


async def run_torture(connection: DockConnection, config: TortureConfig) -> int:
    """Send the command every ``interval_ms`` until the connection ends.

    Returns the number of IR commands sent.
    """
    command = build_send_command(config.code)

    async def _hammer(session: DockSession) -> None:
        await session.authenticate(config.token)
        while True:
            await asyncio.sleep(config.interval_ms / 1000)
            await session.send(command)

    session = DockSession(connection)
    try:
        await run_session(session, _hammer)
    finally:
        logger.info("Closed. Number of sent messages: %d", session.sent["ir_send"])
    return session.sent["ir_send"]
