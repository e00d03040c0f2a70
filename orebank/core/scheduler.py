# orebank/core/scheduler.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from discord.ext import tasks

from orebank.core.config import settings

log = logging.getLogger(__name__)


@dataclass
class _Job:
    callback: Callable[[], None]
    interval: int
    next_tick: int
    repeat: bool
    name: str


class TickScheduler:
    """
    Ordonnanceur coopératif calé sur les ticks de l'hôte.

    - run_interval(cb, n): cb au tick n, 2n, 3n...
    - run_timeout(cb, n): cb une seule fois au tick n
    - tick(): avance d'un tick et exécute ce qui est dû, dans l'ordre d'enregistrement

    Une callback qui lève est loggée puis ignorée: les autres jobs tournent quand même.
    start() pompe tick() en temps réel via discord.ext.tasks (boucle asyncio courante).
    """

    def __init__(self, ticks_per_second: Optional[int] = None):
        self.ticks_per_second = int(ticks_per_second or settings.ticks_per_second)
        self.current_tick = 0
        self._jobs: list[_Job] = []
        self._pump: Optional[tasks.Loop] = None

    def _add(self, callback: Callable[[], None], ticks: int, repeat: bool, name: Optional[str]) -> _Job:
        if ticks <= 0:
            raise ValueError("ticks must be > 0")
        job = _Job(callback, int(ticks), self.current_tick + int(ticks), repeat,
                   name or getattr(callback, "__qualname__", repr(callback)))
        self._jobs.append(job)
        log.info("Job %s: %s tous les %d ticks", "interval" if repeat else "timeout", job.name, job.interval)
        return job

    def run_interval(self, callback: Callable[[], None], ticks: int, *, name: Optional[str] = None) -> _Job:
        return self._add(callback, ticks, True, name)

    def run_timeout(self, callback: Callable[[], None], ticks: int, *, name: Optional[str] = None) -> _Job:
        return self._add(callback, ticks, False, name)

    @property
    def jobs(self) -> list[_Job]:
        return list(self._jobs)

    def tick(self) -> None:
        self.current_tick += 1
        for job in list(self._jobs):
            if job.next_tick > self.current_tick:
                continue
            try:
                job.callback()
            except Exception:
                log.exception("Job %s a échoué au tick %d", job.name, self.current_tick)
            if job.repeat:
                job.next_tick += job.interval
            else:
                self._jobs.remove(job)

    def advance(self, ticks: int) -> None:
        for _ in range(int(ticks)):
            self.tick()

    # ── Pompe temps réel
    async def _run_tick(self) -> None:
        self.tick()

    def start(self) -> None:
        if self._pump is not None and self._pump.is_running():
            return
        self._pump = tasks.loop(seconds=1 / self.ticks_per_second)(self._run_tick)
        self._pump.start()
        log.info("TickScheduler démarré (%d ticks/s)", self.ticks_per_second)

    def stop(self) -> None:
        if self._pump is not None and self._pump.is_running():
            self._pump.cancel()
        self._pump = None

    def is_running(self) -> bool:
        return self._pump is not None and self._pump.is_running()
