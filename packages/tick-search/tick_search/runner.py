"""SearchRunner - stepping loop, pacing, and completion hooks."""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from tick_search.config import RunnerConfig

if TYPE_CHECKING:
    from tick_search.types import SearchAlgorithm, SearchDetails

logger = logging.getLogger(__name__)

Hook = Callable[["SearchDetails"], None]


class SearchRunner:
    def __init__(
        self,
        algorithm: SearchAlgorithm,
        config: RunnerConfig | None = None,
    ) -> None:
        self._algorithm = algorithm
        self._config = config if config is not None else RunnerConfig()
        self._step_hooks: list[Hook] = []
        self._finish_hooks: list[Hook] = []
        self._last: SearchDetails | None = None
        self._ticks = 0
        self._finished = False

    @property
    def algorithm(self) -> SearchAlgorithm:
        return self._algorithm

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def last(self) -> SearchDetails | None:
        return self._last

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def finished(self) -> bool:
        return self._finished

    def on_step(self, hook: Hook) -> None:
        self._step_hooks.append(hook)

    def on_finish(self, hook: Hook) -> None:
        self._finish_hooks.append(hook)

    def step(self) -> SearchDetails:
        details = self._algorithm.tick()
        self._ticks += 1
        self._last = details
        for hook in self._step_hooks:
            hook(details)
        if details.finished and not self._finished:
            self._finished = True
            logger.info(
                "%s %s after %d ticks (visited=%d, frontier=%d)",
                self._algorithm.name,
                "found a path" if details.found else "exhausted the frontier",
                self._ticks, details.visited_size, details.frontier_size,
            )
            for hook in self._finish_hooks:
                hook(details)
        return details

    def run(self, n: int) -> SearchDetails | None:
        """Tick ``n`` times, stopping early once the search has finished."""
        for _ in range(n):
            if self.step().finished:
                break
        return self._last

    def _under_cap(self) -> bool:
        cap = self._config.max_ticks
        return cap is None or self._ticks < cap

    def run_until_done(self) -> SearchDetails | None:
        while not self._finished and self._under_cap():
            self.step()
        if not self._finished:
            logger.warning(
                "%s stopped at max_ticks=%d before finishing",
                self._algorithm.name, self._config.max_ticks,
            )
        return self._last

    def run_paced(
        self,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> SearchDetails | None:
        """Tick at ``config.tps`` until finished or the tick cap is reached."""
        dt = self._config.dt
        while not self._finished and self._under_cap():
            start = clock()
            self.step()
            if self._finished:
                break
            sleep_time = dt - (clock() - start)
            if sleep_time > 0:
                sleep(sleep_time)
        return self._last
