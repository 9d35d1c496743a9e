"""Path filtering for source traversal."""

import os

from .config import ReportConfig


class PathFilter:
    """Decides which files and directories take part in a report.

    Pure: never touches the filesystem.
    """

    def __init__(self, config: ReportConfig):
        self.config = config

    def accepts_directory(self, path: str) -> bool:
        """A directory is walked when no dir pattern is set or it matches."""
        regex = self.config.dir_regex
        return regex is None or regex.search(str(path)) is not None

    def accepts_file(self, path: str) -> bool:
        return self.config.file_regex.search(str(path)) is not None

    def accepts_entry(self, name: str) -> bool:
        """Hidden entries (leading ``.``) are dropped unless allfiles is set."""
        if self.config.allfiles:
            return True
        return not os.path.basename(str(name)).startswith(".")
