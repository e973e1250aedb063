## Cooperative cancellation for a single generation request
import threading
import time

from inagiffy.errors import GenerationCancelled


class CancelToken:
    """
    Cancelled explicitly via cancel() or implicitly once the deadline passes.

    The pipeline checks it between stages only; an LLM call already in flight
    is left to its own HTTP timeout.
    """

    def __init__(self, timeout: float | None = None, *, clock=time.monotonic):
        self._clock = clock
        self._event = threading.Event()
        self._reason = "Request cancelled"
        self.deadline = clock() + timeout if timeout is not None else None

    def cancel(self, reason: str = "Request cancelled") -> None:
        self._reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self.deadline is not None and self._clock() >= self.deadline:
            self._reason = "Generation exceeded the time limit"
            self._event.set()
            return True
        return False

    def remaining(self) -> float | None:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - self._clock())

    def raise_if_cancelled(self, stage: str = "") -> None:
        if self.cancelled:
            where = f" before {stage}" if stage else ""
            raise GenerationCancelled(f"{self._reason}{where}")
