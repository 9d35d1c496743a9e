"""
Bounded file operations for complexity-report.

Walking a large tree issues many filesystem operations at once; the queue
caps how many may hold a file descriptor at the same time so the process never
exhausts the OS limit.
"""

import asyncio
import os
from pathlib import Path
from typing import Callable, List, TypeVar

from .config import DEFAULT_MAX_FILES
from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BoundedFileQueue:
    """
    Performs stat/read/readdir/write with at most ``max_open`` in flight.

    Requests beyond the ceiling wait for a free slot rather than failing. A
    slot is released when the operation completes, successfully or not. This
    is not a cache: every call hits the filesystem.

    The blocking syscall runs in the loop's default executor while holding its
    slot. Counters are only touched from the event loop.
    """

    def __init__(self, max_open: int = DEFAULT_MAX_FILES):
        if max_open < 1:
            raise ValueError("max_open must be at least 1")
        self.max_open = max_open
        self.active = 0
        self.peak = 0
        self._slots = asyncio.Semaphore(max_open)

    async def _run(self, operation: str, path: str, func: Callable[[], T]) -> T:
        async with self._slots:
            self.active += 1
            self.peak = max(self.peak, self.active)
            try:
                loop = asyncio.get_running_loop()
                return await loop.run_in_executor(None, func)
            except (OSError, UnicodeDecodeError) as e:
                reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
                raise FileAccessError(path, operation, reason) from e
            finally:
                self.active -= 1

    async def stat(self, path: str) -> os.stat_result:
        return await self._run("stat", path, lambda: os.stat(path))

    async def read_file(self, path: str, encoding: str = "utf-8") -> str:
        """Read a whole file as text."""

        def _read() -> str:
            with open(path, encoding=encoding) as f:
                return f.read()

        return await self._run("readFile", path, _read)

    async def read_directory(self, path: str) -> List[str]:
        """List entry names of a directory, sorted for stable traversal."""
        return await self._run("readDirectory", path, lambda: sorted(os.listdir(path)))

    async def write_file(self, path: str, text: str, encoding: str = "utf-8") -> None:
        """Write text to a file, creating parent directories as needed."""

        def _write() -> None:
            target = Path(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding=encoding) as f:
                f.write(text)

        await self._run("writeFile", path, _write)
        logger.debug(f"Wrote {len(text)} characters to {path}")
