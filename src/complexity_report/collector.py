"""Recursive source collection.

Walks input paths through the bounded file queue, applies the path filter and
accumulates normalized ``SourceRecord`` objects. The first failure anywhere in
the tree aborts the whole collection.
"""

import asyncio
import os
import stat
from typing import Iterable, List, Optional

from .config import ReportConfig
from .file_ops import BoundedFileQueue
from .filters import PathFilter
from .logging_config import get_logger
from .models import SourceRecord

logger = get_logger(__name__)

SHEBANG = "#!"


def begins_with_shebang(text: str) -> bool:
    return text.startswith(SHEBANG)


def normalize_source(text: str) -> str:
    """Turn a leading shebang into an inert ``//`` comment.

    The line is kept, not removed, so line numbers reported by the engine
    still match the file on disk.
    """
    if begins_with_shebang(text):
        return "//" + text[1:]
    return text


class SourceCollector:
    """Collects source records for a set of files and directories.

    Siblings at one directory level are visited concurrently; records are
    appended in the order reads complete.
    """

    def __init__(self, config: ReportConfig, queue: Optional[BoundedFileQueue] = None):
        self.config = config
        self.filter = PathFilter(config)
        self.queue = queue or BoundedFileQueue(config.maxfiles)
        self.sources: List[SourceRecord] = []

    async def collect(self, paths: Iterable[str]) -> List[SourceRecord]:
        """Collect every accepted source file below ``paths``.

        Raises:
            FileAccessError: On the first stat/read/readdir failure
        """
        self.sources = []
        await self._visit_all([str(p) for p in paths])
        logger.debug(f"Collected {len(self.sources)} source files")
        return list(self.sources)

    async def _visit_all(self, paths: List[str]) -> None:
        tasks = [asyncio.ensure_future(self._visit(path)) for path in paths]
        if not tasks:
            return
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _visit(self, path: str) -> None:
        info = await self.queue.stat(path)

        if stat.S_ISDIR(info.st_mode):
            if self.filter.accepts_directory(path):
                await self._read_directory(path)
            else:
                logger.debug(f"Skipping directory {path}")
        elif self.filter.accepts_file(path):
            await self._read_file(path)

    async def _read_directory(self, directory: str) -> None:
        entries = await self.queue.read_directory(directory)
        children = [
            os.path.abspath(os.path.join(directory, name))
            for name in entries
            if self.filter.accepts_entry(name)
        ]
        await self._visit_all(children)

    async def _read_file(self, path: str) -> None:
        text = await self.queue.read_file(path)
        record = SourceRecord(path=path, text=normalize_source(text))
        self.sources.append(record)
        logger.debug(f"Read {path}")


async def collect_sources(
    paths: Iterable[str], config: ReportConfig, queue: Optional[BoundedFileQueue] = None
) -> List[SourceRecord]:
    """Convenience wrapper around ``SourceCollector.collect``."""
    return await SourceCollector(config, queue).collect(paths)
