from dataclasses import dataclass
from enum import Enum

# Time between the stop command and closing the connection.
CLOSE_GRACE_MS = 200


class Action(str, Enum):
    SEND = "send"
    STOP = "stop"
    CLOSE = "close"


@dataclass(frozen=True)
class ScheduledAction:
    at_ms: int
    action: Action


def build_repeat_schedule(duration_ms: int, delay_ms: int) -> list[ScheduledAction]:
    """Precompute the IR repeat timeline, offsets relative to connection open.

    A repeat is sent at every multiple of ``delay_ms`` strictly below
    ``duration_ms``; the stop command follows at ``duration_ms + delay_ms``.
    """
    if delay_ms <= 0:
        raise ValueError(f"Delay must be positive, got {delay_ms}")
    if duration_ms < 0:
        raise ValueError(f"Duration must not be negative, got {duration_ms}")

    schedule = [ScheduledAction(at, Action.SEND) for at in range(delay_ms, duration_ms, delay_ms)]
    stop_at = duration_ms + delay_ms
    schedule.append(ScheduledAction(stop_at, Action.STOP))
    schedule.append(ScheduledAction(stop_at + CLOSE_GRACE_MS, Action.CLOSE))
    return schedule
