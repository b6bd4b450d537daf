from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import Counter
from collections.abc import Awaitable, Callable

from dock_tools.core.ir_codes import build_auth_message
from dock_tools.core.ports.connection import DockConnection
from dock_tools.models import DockCommand

logger = logging.getLogger(__name__)


class DockSession:
    """One authenticated dock connection.

    Numbers every command with a fresh, strictly increasing id starting at 1
    and counts the commands that were sent successfully.
    """

    def __init__(self, connection: DockConnection) -> None:
        self._connection = connection
        self._last_id = 0
        self.sent: Counter[str] = Counter()

    @property
    def last_id(self) -> int:
        return self._last_id

    async def authenticate(self, token: str) -> None:
        await self._connection.send(build_auth_message(token).model_dump_json())

    async def send(self, command: DockCommand) -> int:
        self._last_id += 1
        message = command.model_copy(update={"id": self._last_id})
        await self._connection.send(message.model_dump_json(exclude_none=True))
        self.sent[command.command] += 1
        return self._last_id

    async def log_replies(self) -> None:
        async for reply in self._connection.replies():
            logger.info("received: %s", reply)

    async def close(self) -> None:
        await self._connection.close()


async def run_session(session: DockSession, sender: Callable[[DockSession], Awaitable[None]]) -> None:
    """Drive ``sender`` while logging replies until either side finishes.

    When the sender completes, replies are drained until the connection
    closes. When the reply stream ends first, the sender is cancelled.
    Transport errors are logged; the connection is always closed.
    """
    sending = asyncio.create_task(sender(session))
    receiving = asyncio.create_task(session.log_replies())
    try:
        done, _ = await asyncio.wait({sending, receiving}, return_when=asyncio.FIRST_COMPLETED)
        if sending in done:
            sending.result()
            await receiving
        else:
            receiving.result()
    except ConnectionError as exc:
        logger.error("Connection error: %s", exc)
    finally:
        for task in (sending, receiving):
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, ConnectionError):
                await task
        await session.close()
        logger.info("Closed")
