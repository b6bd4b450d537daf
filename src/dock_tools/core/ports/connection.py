from collections.abc import AsyncIterator
from typing import Protocol


class DockConnection(Protocol):
    """Text message channel to a dock.

    Transport failures surface as ``ConnectionError``.
    """

    async def send(self, message: str) -> None: ...

    def replies(self) -> AsyncIterator[str]: ...

    async def close(self) -> None: ...
