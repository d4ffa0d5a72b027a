import logging
import time
from dataclasses import dataclass, replace
from typing import Callable, Optional

from .constants import DURATIONS, STOCK_KINDS, STORAGE_KEYS, TICK_MS

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def format_remaining(ms: int) -> str:
    if ms <= 0:
        return "00:00:00"
    total = ms // 1000
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass
class TimerState:
    created_at: Optional[int] = None
    normal_remaining: int = DURATIONS['normal']
    mirage_remaining: int = DURATIONS['mirage']


class StockTimers:
    """Restock countdowns for normal and mirage stock.

    Every mutation is written to ``store`` under the keys in STORAGE_KEYS so
    that a restart picks the countdown up where it stopped, minus the time
    spent offline.
    """

    def __init__(self, store, clock: Callable[[], int] = now_ms):
        self.store = store
        self.clock = clock
        self._state = TimerState()

    @property
    def state(self) -> TimerState:
        return replace(self._state)

    def remaining(self, kind: str) -> int:
        return getattr(self._state, f"{kind}_remaining")

    def restore(self) -> TimerState:
        created_at = self._read_int(STORAGE_KEYS['created_at'])
        normal = self._read_int(STORAGE_KEYS['normal'])
        mirage = self._read_int(STORAGE_KEYS['mirage'])

        if created_at is None or normal is None or mirage is None:
            logger.info("No saved timers, starting from full durations")
            self._state = TimerState()
            return self.state

        elapsed = self.clock() - created_at
        self._state = TimerState(
            created_at=created_at,
            normal_remaining=max(0, normal - elapsed),
            mirage_remaining=max(0, mirage - elapsed),
        )
        logger.info("Restored timers after %d ms offline: normal=%s mirage=%s",
                    elapsed,
                    format_remaining(self._state.normal_remaining),
                    format_remaining(self._state.mirage_remaining))
        return self.state

    def tick(self, kind: str) -> int:
        remaining = self._advance(kind, self.clock())
        self._persist(kind)
        return remaining

    def tick_all(self):
        # One clock reading for both timers keeps the shared createdAt valid for each
        now = self.clock()
        for kind in STOCK_KINDS:
            self._advance(kind, now)
        self._persist(*STOCK_KINDS)
        return self.state

    def reset(self):
        self._state = TimerState(created_at=self.clock())
        self._persist(*STOCK_KINDS)
        logger.info("Timers reset to full durations")
        return self.state

    def _advance(self, kind, now):
        if kind not in DURATIONS:
            raise ValueError(f"Unknown stock kind: {kind}")
        remaining = self.remaining(kind) - TICK_MS
        if remaining <= 0:
            remaining = DURATIONS[kind]
            logger.info("%s stock timer expired, restarting", kind.capitalize())
        setattr(self._state, f"{kind}_remaining", remaining)
        self._state.created_at = now
        return remaining

    def _persist(self, *kinds):
        values = {STORAGE_KEYS['created_at']: self._state.created_at}
        for kind in kinds:
            values[STORAGE_KEYS[kind]] = self.remaining(kind)
        self.store.update(values)

    def _read_int(self, key):
        value = self.store.get(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", key, value)
            return None
