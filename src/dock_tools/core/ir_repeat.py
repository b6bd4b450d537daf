"""IR repeat test: one IR command, repeat signals for a while, then stop."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass

from dock_tools.core.ir_codes import build_send_command, build_stop_command
from dock_tools.core.ports.connection import DockConnection
from dock_tools.core.schedule import Action, build_repeat_schedule
from dock_tools.core.session import DockSession, run_session
from dock_tools.settings import DEFAULT_AUTH_TOKEN

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 2000
DEFAULT_DELAY_MS = 200


@dataclass(frozen=True)
class RepeatConfig:
    code: str
    repeat: int
    duration_ms: int = DEFAULT_DURATION_MS
    delay_ms: int = DEFAULT_DELAY_MS
    token: str = DEFAULT_AUTH_TOKEN


async def run_repeat(connection: DockConnection, config: RepeatConfig) -> Counter[str]:
    """Play the repeat schedule on an open connection.

    Returns how many commands of each kind were sent.
    """
    command = build_send_command(config.code, repeat=config.repeat)
    stop = build_stop_command()
    schedule = build_repeat_schedule(config.duration_ms, config.delay_ms)

    async def _play(session: DockSession) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        logger.info("Connected! Sending authentication")
        await session.authenticate(config.token)

        for step in schedule:
            await asyncio.sleep(max(0.0, started + step.at_ms / 1000 - loop.time()))
            if step.action is Action.SEND:
                logger.info("Sent IR: %d", await session.send(command))
            elif step.action is Action.STOP:
                logger.info("Sent Stop: %d", await session.send(stop))
            else:
                await session.close()

    session = DockSession(connection)
    await run_session(session, _play)
    return session.sent
