"""
Background execution of WFC solves.

A solve is one CPU-bound, non-interruptible unit of work. SolveTask runs it
on a worker thread so the event loop stays responsive, and exposes only a
definite outcome: consumers never see a half-solved grid. A timeout cancels
the solve cooperatively and yields a failed outcome.
"""

from __future__ import annotations

import asyncio
import threading
import time
from dataclasses import dataclass
from typing import Callable

from ...logging_config import get_logger
from .solver import Contradiction, SolveCancelled, Solution, WFCSolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class SolveOutcome:
    """Final result of a background solve.

    Exactly one of `tiles` or `contradiction_at` is set, unless the solve
    timed out or was cancelled first (then both are None).
    """

    tiles: Solution | None = None
    contradiction_at: tuple[int, int] | None = None
    timed_out: bool = False
    cancelled: bool = False
    elapsed_ms: int = 0

    @property
    def solved(self) -> bool:
        return self.tiles is not None

    @property
    def failed(self) -> bool:
        """True for any solve that did not produce tiles."""
        return not self.solved

    @property
    def is_contradiction(self) -> bool:
        """True for a contradiction or an expired timeout, never for a cancel."""
        return self.contradiction_at is not None or self.timed_out


class SolveTask:
    """
    Runs a WFC solve as an awaitable background unit.

    Usage:
        task = SolveTask(lambda: make_solver(seed), timeout=5.0)
        task.start()
        ...
        outcome = task.poll()          # None until finished
        outcome = await task.wait()    # or poll on a fixed cadence until done
    """

    def __init__(
        self,
        solver_factory: Callable[[], WFCSolver],
        timeout: float | None = None,
    ):
        """
        Args:
            solver_factory: Builds a fresh solver (with its own random stream)
            timeout: Seconds before the solve is abandoned (None = no limit)
        """
        self._factory = solver_factory
        self.timeout = timeout
        self._cancel = threading.Event()
        self._task: asyncio.Task[SolveOutcome] | None = None
        self._started_at: float | None = None

    @property
    def started(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Schedule the solve on a worker thread. Must be called from a running loop."""
        if self._task is not None:
            logger.warning("SolveTask already started")
            return
        self._started_at = time.monotonic()
        self._task = asyncio.create_task(self._run())

    def cancel(self) -> None:
        """Ask the solve to stop at its next step."""
        self._cancel.set()

    def _run_solver(self) -> SolveOutcome:
        started = time.perf_counter()
        solver = self._factory()
        try:
            tiles = solver.solve(cancel=self._cancel)
        except Contradiction as exc:
            return SolveOutcome(
                contradiction_at=exc.at,
                elapsed_ms=int((time.perf_counter() - started) * 1000),
            )
        return SolveOutcome(
            tiles=tiles,
            elapsed_ms=int((time.perf_counter() - started) * 1000),
        )

    async def _run(self) -> SolveOutcome:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._run_solver), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            # The worker thread can't be killed; stop it at its next step
            self._cancel.set()
            logger.warning(f"WFC solve timed out after {self.timeout}s")
            return SolveOutcome(timed_out=True, elapsed_ms=int((self.timeout or 0) * 1000))
        except SolveCancelled:
            return SolveOutcome(
                cancelled=True,
                elapsed_ms=int((time.monotonic() - (self._started_at or 0.0)) * 1000),
            )

    def poll(self) -> SolveOutcome | None:
        """Return the outcome if the solve has finished, else None."""
        if self._task is None or not self._task.done():
            return None
        return self._task.result()

    async def wait(self, poll_interval: float = 0.05) -> SolveOutcome:
        """Poll on a fixed cadence until an outcome is available."""
        if self._task is None:
            self.start()
        while True:
            outcome = self.poll()
            if outcome is not None:
                return outcome
            await asyncio.sleep(poll_interval)
