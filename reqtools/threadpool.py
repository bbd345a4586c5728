"""A thread pool that grows on demand and shrinks back when workers sit idle."""

from __future__ import annotations

import os
import threading
import time
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")

_DEFAULT_MAX_IDLE_MS = 60_000


class PoolStatus(Enum):
    """Lifecycle state of a :class:`ThreadPool`."""

    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


def _run_task(future: Future, fn: Callable[..., Any], args: tuple, kwargs: dict) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        result = fn(*args, **kwargs)
    except BaseException as exc:
        future.set_exception(exc)
    else:
        future.set_result(result)


class ThreadPool:
    """Runs submitted callables on between ``min_threads`` and ``max_threads`` workers.

    A worker that finds no task for ``max_idle_ms`` milliseconds exits, as long
    as more than ``min_threads`` workers remain.
    """

    def __init__(
        self,
        min_threads: int = 1,
        max_threads: int | None = None,
        max_idle_ms: int = _DEFAULT_MAX_IDLE_MS,
    ) -> None:
        self.min_threads = min_threads
        self.max_threads = max_threads if max_threads is not None else (os.cpu_count() or 1)
        self.max_idle_ms = max_idle_ms
        self._cond = threading.Condition()
        self._status = PoolStatus.STOP
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: list[threading.Thread] = []
        self._thread_count = 0
        self._idle_count = 0

    @property
    def status(self) -> PoolStatus:
        return self._status

    @property
    def thread_count(self) -> int:
        with self._cond:
            return self._thread_count

    @property
    def idle_thread_count(self) -> int:
        with self._cond:
            return self._idle_count

    @property
    def task_count(self) -> int:
        with self._cond:
            return len(self._tasks)

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with ``start_threads`` workers, clamped to the pool's limits."""
        with self._cond:
            if self._status is not PoolStatus.STOP:
                raise RuntimeError("thread pool is already started")
            self._status = PoolStatus.RUNNING
            count = max(self.min_threads, min(start_threads, self.max_threads))
            count = min(count, self.max_threads)
            for _ in range(count):
                self._create_thread()

    def stop(self) -> None:
        """Stop all workers and wait for them; queued tasks stay queued."""
        with self._cond:
            if self._status is PoolStatus.STOP:
                raise RuntimeError("thread pool is not running")
            self._status = PoolStatus.STOP
            self._cond.notify_all()
            threads = list(self._threads)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._thread_count = 0
            self._idle_count = 0
            self._cond.notify_all()

    def pause(self) -> None:
        """Keep workers from taking new tasks; a no-op unless running."""
        with self._cond:
            if self._status is PoolStatus.RUNNING:
                self._status = PoolStatus.PAUSE
                self._cond.notify_all()

    def resume(self) -> None:
        """Let paused workers take tasks again; a no-op unless paused."""
        with self._cond:
            if self._status is PoolStatus.PAUSE:
                self._status = PoolStatus.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every worker is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is PoolStatus.STOP
                or (not self._tasks and self._idle_count == self._thread_count)
            )

    def submit(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._status is PoolStatus.STOP:
                raise RuntimeError("cannot submit to a stopped thread pool")
            self._tasks.append(lambda: _run_task(future, fn, args, kwargs))
            if len(self._tasks) > self._idle_count and self._thread_count < self.max_threads:
                self._create_thread()
            self._cond.notify()
        return future

    def __enter__(self) -> ThreadPool:
        if self._status is PoolStatus.STOP:
            self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        if self._status is not PoolStatus.STOP:
            self.stop()

    def _create_thread(self) -> bool:
        # Caller holds the lock.
        if self._thread_count >= self.max_threads:
            return False
        thread = threading.Thread(target=self._worker, daemon=True)
        self._thread_count += 1
        self._idle_count += 1
        self._threads.append(thread)
        thread.start()
        return True

    def _retire(self) -> None:
        # Caller holds the lock.
        self._thread_count -= 1
        self._idle_count -= 1
        current = threading.current_thread()
        self._threads = [t for t in self._threads if t is not current]
        self._cond.notify_all()

    def _wait_for_work(self) -> bool:
        # Caller holds the lock. True when a task is ready, False when the worker must exit.
        deadline: float | None = None
        while True:
            if self._status is PoolStatus.STOP:
                return False
            if self._status is PoolStatus.PAUSE:
                deadline = None
                self._cond.wait()
                continue
            if self._tasks:
                return True
            now = time.monotonic()
            if deadline is None:
                deadline = now + self.max_idle_ms / 1000
            remaining = deadline - now
            if remaining <= 0:
                if self._thread_count > self.min_threads:
                    self._retire()
                    return False
                deadline = None
                continue
            self._cond.wait(remaining)

    def _worker(self) -> None:
        while True:
            with self._cond:
                if not self._wait_for_work():
                    return
                task = self._tasks.popleft()
                self._idle_count -= 1
            task()
            with self._cond:
                self._idle_count += 1
                self._cond.notify_all()