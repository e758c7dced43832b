"""One-shot background tasks with start/complete notification hooks.

A task is started from a running event loop, which plays the role of the UI
context: `on_start` is called synchronously before the request is
dispatched, and `on_complete` is called on the same loop once the result is
ready.

Usage:
    task = LoadPostTask(service, display, blog_id)
    post = await task.execute(post_id)
"""

import asyncio
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

import structlog

from ..blogger.protocol import PostsService

logger = structlog.get_logger()

ResultT = TypeVar("ResultT")


class TaskStatus(str, Enum):
    """Lifecycle of a background task."""

    PENDING = "pending"
    RUNNING = "running"
    FINISHED = "finished"


@runtime_checkable
class TaskCallbacks(Protocol):
    """Two-phase UI callback interface."""

    def on_start(self, message: str) -> None:
        """Show a progress indicator with `message`."""
        ...

    def on_complete(self, result: Any) -> None:
        """Hide the progress indicator and display `result`."""
        ...


class BackgroundTask(Generic[ResultT]):
    """Base class for the sample tasks.

    Subclasses set `progress_message` and implement `run_in_background`,
    which must return a value for every expected API failure instead of
    raising.
    """

    progress_message: str = "Working..."

    def __init__(self, service: PostsService, callbacks: TaskCallbacks, blog_id: str):
        self.service = service
        self.callbacks = callbacks
        self.blog_id = blog_id
        self._status = TaskStatus.PENDING
        self._task: Optional["asyncio.Task[ResultT]"] = None

    @property
    def status(self) -> TaskStatus:
        return self._status

    def execute(self, *args: Any) -> "asyncio.Task[ResultT]":
        """Start the task on the running event loop.

        Returns:
            The asyncio task; it resolves to the same result handed to
            `on_complete` and may be cancelled.

        Raises:
            RuntimeError: If the task was already executed.
        """
        if self._status is not TaskStatus.PENDING:
            raise RuntimeError(f"Cannot execute task: the task is already {self._status.value}")

        self._status = TaskStatus.RUNNING
        self.on_pre_execute()
        self._task = asyncio.create_task(self._run(*args), name=type(self).__name__)
        # Runs even when the task is cancelled before its first step
        self._task.add_done_callback(self._on_done)
        return self._task

    def on_pre_execute(self) -> None:
        self.callbacks.on_start(self.progress_message)

    def on_post_execute(self, result: ResultT) -> None:
        self.callbacks.on_complete(result)

    async def run_in_background(self, *args: Any) -> ResultT:
        raise NotImplementedError

    async def _run(self, *args: Any) -> ResultT:
        task_name = type(self).__name__
        try:
            result = await self.run_in_background(*args)
        except Exception as e:
            logger.error("task_failed", task=task_name, error=str(e), exc_info=True)
            raise
        finally:
            self._status = TaskStatus.FINISHED

        self.on_post_execute(result)
        return result

    def _on_done(self, task: "asyncio.Task[ResultT]") -> None:
        self._status = TaskStatus.FINISHED
        if task.cancelled():
            logger.info("task_cancelled", task=type(self).__name__)
