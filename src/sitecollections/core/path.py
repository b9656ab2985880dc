"""Collections made of every file under a directory."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath
from typing import Any

from sitecollections.core.base import CollectionBase
from sitecollections.core.models import CollectionConfig, File

logger = logging.getLogger(__name__)


def _is_under(path: str, directory: str) -> bool:
    """Check whether ``path`` lies inside ``directory``, component-wise."""
    parts = PurePosixPath(path.strip("/")).parts
    prefix = PurePosixPath(directory.strip("/")).parts
    return parts[: len(prefix)] == prefix


class PathCollection(CollectionBase):
    """A collection of all files found under the configured ``path``.

    Files under any of ``exclude_paths`` are left out. The matching files
    are paginated as a single group.
    """

    def __init__(
        self, name: str, config: CollectionConfig | Mapping[str, Any] | None = None
    ):
        super().__init__(name, config)
        self.files: list[File] = []

    def is_file_in_collection(self, file: File) -> bool:
        """Return True if the file is under ``path`` and not excluded."""
        if self.path is None or not _is_under(file.path, self.path):
            return False
        return not any(_is_under(file.path, excluded) for excluded in self.exclude_paths or [])

    def populate(self, files: Iterable[File]) -> "PathCollection":
        """Collect matching files, sort them and build the collection pages."""
        self.pages = []
        matching = [
            f for f in files if not self.is_filtered(f) and self.is_file_in_collection(f)
        ]
        self.files = self.sort_files(matching, self.sort)
        self.data["files"] = [f.data for f in self.files]

        self._create_collection_pages()

        logger.info(
            "Populated collection %s: %d files, %d pages",
            self.name,
            len(self.files),
            len(self.pages),
        )
        return self

    def _create_collection_pages(self) -> bool:
        """Paginate the collection's files. False when permalinks are missing."""
        if self.pagination is None or not self.pagination.enabled:
            logger.debug("Collection %s has no pagination permalinks, skipping pages", self.name)
            return False

        self._paginate(self.files, self.pagination)
        self._link_pages()
        return True
