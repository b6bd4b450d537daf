from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, WebSocketException

logger = logging.getLogger(__name__)


class WebsocketsDockConnection:
    """Dock connection over a ``websockets`` client.

    Implements the ``DockConnection`` protocol; library errors are re-raised
    as ``ConnectionError``.
    """

    def __init__(self, websocket: ClientConnection) -> None:
        self._websocket = websocket

    async def send(self, message: str) -> None:
        try:
            await self._websocket.send(message)
        except ConnectionClosed as exc:
            raise ConnectionError(f"Connection closed while sending: {exc}") from exc

    async def replies(self) -> AsyncIterator[str]:
        try:
            async for message in self._websocket:
                yield message if isinstance(message, str) else message.decode("utf-8", errors="replace")
        except ConnectionClosedError as exc:
            raise ConnectionError(f"Connection lost: {exc}") from exc

    async def close(self) -> None:
        await self._websocket.close()


async def open_dock_connection(url: str) -> WebsocketsDockConnection:
    """Connect to the dock WebSocket API at ``url``."""
    logger.info("Connecting to %s", url)
    try:
        websocket = await connect(url)
    except (OSError, asyncio.TimeoutError, WebSocketException) as exc:
        raise ConnectionError(f"Cannot connect to {url}: {exc}") from exc
    return WebsocketsDockConnection(websocket)
