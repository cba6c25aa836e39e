"""Background execution of analysis jobs."""
import asyncio
import logging
from typing import Set

from .job_processor import JobProcessor

logger = logging.getLogger(__name__)


class JobRunner:
    """Runs ``JobProcessor.process`` as fire-and-forget tasks on the current loop."""

    def __init__(self, processor: JobProcessor):
        self.processor = processor
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, job_id: str) -> asyncio.Task:
        """Schedule ``job_id`` and return immediately."""
        task = asyncio.create_task(self.processor.process(job_id), name=f"job-{job_id}")
        # The loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning(f"{task.get_name()} was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"{task.get_name()} escaped with {exc!r}", exc_info=exc)

    async def wait_all(self) -> None:
        """Wait for every submitted job, including ones submitted while waiting."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
