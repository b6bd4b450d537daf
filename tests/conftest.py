"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from typing import Any

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# FakeDockConnection — in-memory DockConnection for session/client tests
# ---------------------------------------------------------------------------


class FakeDockConnection:
    """Records sent messages and replays queued replies until closed.

    ``fail_after`` makes every send beyond that many messages (auth included)
    raise ``ConnectionError``.
    """

    def __init__(self, replies: Iterable[str] = (), fail_after: int | None = None) -> None:
        self.sent: list[str] = []
        self.closed = False
        self.close_calls = 0
        self._fail_after = fail_after
        self._replies: asyncio.Queue[str | None] = asyncio.Queue()
        for reply in replies:
            self._replies.put_nowait(reply)

    async def send(self, message: str) -> None:
        if self.closed:
            raise ConnectionError("connection is closed")
        if self._fail_after is not None and len(self.sent) >= self._fail_after:
            raise ConnectionError("dock went away")
        self.sent.append(message)

    async def replies(self) -> AsyncIterator[str]:
        while True:
            reply = await self._replies.get()
            if reply is None:
                return
            yield reply

    async def close(self) -> None:
        self.close_calls += 1
        if not self.closed:
            self.closed = True
            self._replies.put_nowait(None)

    def hang_up(self) -> None:
        """Simulate the dock closing the connection."""
        self.closed = True
        self._replies.put_nowait(None)

    def messages(self) -> list[dict[str, Any]]:
        return [json.loads(m) for m in self.sent]


@pytest.fixture
def connection() -> FakeDockConnection:
    return FakeDockConnection()


# ---------------------------------------------------------------------------
# License doc workspace
# ---------------------------------------------------------------------------


@pytest.fixture
def license_workspace(tmp_path: Path) -> Path:
    """A directory with header/footer templates under ``_templates``."""
    templates = tmp_path / "_templates"
    templates.mkdir()
    (templates / "licenses-header.md").write_text("# Licenses\n\n", encoding="utf-8")
    (templates / "licenses-footer.md").write_text("---\nEnd of licenses\n", encoding="utf-8")
    return tmp_path
