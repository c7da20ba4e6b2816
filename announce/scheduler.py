"""Job scheduling and the command that runs the announcer."""

from __future__ import annotations

import argparse
import functools
import signal
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from announce.attendance import handle_attendance
from announce.config import Config, load_config
from announce.logger import Logger
from announce.reminders import THURSDAY, grc, notif

_log = Logger("MAIN")

_MAX_SLEEP = 60.0


def _check_time(hour: int, minute: int, second: int) -> None:
    if not 0 <= hour <= 23:
        raise ValueError(f"invalid hour: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"invalid minute: {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"invalid second: {second}")


@dataclass(frozen=True)
class IntervalTrigger:
    """Fires every ``seconds`` seconds."""

    seconds: float

    def __post_init__(self) -> None:
        if self.seconds <= 0:
            raise ValueError(f"duration must be greater than 0, got {self.seconds}")

    def next_run(self, after: datetime) -> datetime:
        """Return the run time following ``after``."""
        return after + timedelta(seconds=self.seconds)


@dataclass(frozen=True)
class DailyTrigger:
    """Fires once a day at a fixed time."""

    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        _check_time(self.hour, self.minute, self.second)

    def next_run(self, after: datetime) -> datetime:
        """Return the first matching time strictly after ``after``."""
        candidate = after.replace(
            hour=self.hour, minute=self.minute, second=self.second, microsecond=0
        )
        if candidate <= after:
            candidate += timedelta(days=1)
        return candidate


@dataclass(frozen=True)
class WeeklyTrigger:
    """Fires once a week on ``weekday`` (Monday is 0) at a fixed time."""

    weekday: int
    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"invalid weekday: {self.weekday}")
        _check_time(self.hour, self.minute, self.second)

    def next_run(self, after: datetime) -> datetime:
        """Return the first matching time strictly after ``after``."""
        days_ahead = (self.weekday - after.weekday()) % 7
        candidate = after.replace(
            hour=self.hour, minute=self.minute, second=self.second, microsecond=0
        ) + timedelta(days=days_ahead)
        if candidate <= after:
            candidate += timedelta(days=7)
        return candidate


Trigger = IntervalTrigger | DailyTrigger | WeeklyTrigger


@dataclass
class Job:
    """A task together with its trigger and next run time."""

    trigger: Trigger
    task: Callable[[], object]
    next_run: datetime

    @property
    def name(self) -> str:
        target = getattr(self.task, "func", self.task)
        return getattr(target, "__name__", repr(target))


class Scheduler:
    """Runs tasks when their triggers come due, in a background thread once started."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock if clock is not None else datetime.now
        self._jobs: list[Job] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def jobs(self) -> list[Job]:
        with self._lock:
            return list(self._jobs)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def add_job(self, trigger: Trigger, task: Callable[[], object]) -> Job:
        """Register ``task`` to run whenever ``trigger`` fires."""
        job = Job(trigger, task, trigger.next_run(self._clock()))
        with self._lock:
            self._jobs.append(job)
        return job

    def run_pending(self, now: datetime | None = None) -> int:
        """Run every job that is due at ``now``; return how many ran."""
        now = now if now is not None else self._clock()
        with self._lock:
            due = [job for job in self._jobs if job.next_run <= now]
            for job in due:
                job.next_run = job.trigger.next_run(now)
        for job in due:
            try:
                job.task()
            except Exception as exc:  # a failing task must not stop the others
                _log.error(f"job {job.name} failed: ", str(exc))
        return len(due)

    def _seconds_until_next(self) -> float:
        with self._lock:
            if not self._jobs:
                return _MAX_SLEEP
            earliest = min(job.next_run for job in self._jobs)
        delay = (earliest - self._clock()).total_seconds()
        return min(max(delay, 0.0), _MAX_SLEEP)

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.run_pending()
            self._stop.wait(self._seconds_until_next())

    def start(self) -> None:
        """Begin running jobs in a background thread."""
        if self.running:
            raise RuntimeError("scheduler already started")
        now = self._clock()
        with self._lock:
            for job in self._jobs:
                job.next_run = job.trigger.next_run(now)
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="scheduler", daemon=True)
        self._thread.start()

    def shutdown(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None


def build_scheduler(config: Config) -> Scheduler:
    """Return a scheduler holding the uniform, attendance and progress jobs."""
    scheduler = Scheduler()
    tasks = (
        functools.partial(notif, config),
        functools.partial(handle_attendance, config),
        functools.partial(grc, config),
    )

    if config.mode == "test":
        _log.log("Scheduler test started")
        seconds = config.time_schedule_notif
        makers: list[Callable[[], Trigger]] = [lambda: IntervalTrigger(seconds)] * 3
    else:
        _log.log("Scheduler started")
        makers = [
            lambda: WeeklyTrigger(THURSDAY, 5, 0, 0),
            lambda: DailyTrigger(9, 10, 0),
            lambda: DailyTrigger(9, 0, 0),
        ]

    for make_trigger, task in zip(makers, tasks):
        try:
            scheduler.add_job(make_trigger(), task)
        except ValueError as exc:
            _log.log(str(exc))
    return scheduler


def main(argv: list[str] | None = None) -> int:
    """Run the announcer until interrupted."""
    parser = argparse.ArgumentParser(prog="announce", description="Post scheduled chat announcements.")
    parser.add_argument("--env-file", default=None, help="path of the dotenv file (default: .env)")
    args = parser.parse_args(argv)

    config = load_config(args.env_file)
    scheduler = build_scheduler(config)
    scheduler.start()

    stop = threading.Event()

    def _on_signal(signum: int, frame: object) -> None:
        stop.set()

    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)

    stop.wait()
    _log.log("Shutting down scheduler\n")
    scheduler.shutdown()
    return 0