import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class StageTimer:
    """Wall clock milliseconds per stage of a solve (load, solve, rank, ...).

    Stages are kept in the order they ran, so ``report()`` reads like the
    pipeline: ``load=1.2ms solve=0.4ms total=1.7ms``.
    """

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            # A repeated stage name accumulates
            elapsed = (time.perf_counter() - t0) * 1000
            self.timings[name] = round(self.timings.get(name, 0.0) + elapsed, 1)
            logger.debug("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}

    def report(self) -> str:
        return " ".join(f"{name}={ms:.1f}ms" for name, ms in self.summary().items())
