from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable

from blackout.constants import SESSION_DURATION


@dataclass(slots=True)
class GameTimer:
	"""Wall-clock session timer.

	Reads (``elapsed``, ``remaining``, ``expired``) never mutate state; only
	``restart`` moves the start mark. ``clock`` defaults to ``time.monotonic``
	and can be swapped for a fake in tests.
	"""

	duration: float = SESSION_DURATION
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	started_at: float = field(init=False, default=0.0)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self.duration = max(0.0, float(self.duration))
		self.started_at = self._clock()

	def restart(self) -> None:
		self.started_at = self._clock()

	def elapsed(self) -> float:
		return max(0.0, self._clock() - self.started_at)

	def remaining(self) -> float:
		return max(0.0, self.duration - self.elapsed())

	def expired(self) -> bool:
		return self.elapsed() >= self.duration
