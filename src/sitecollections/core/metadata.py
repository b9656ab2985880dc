"""Collections grouped by a frontmatter metadata value."""

import logging
from collections.abc import Iterable

from sitecollections.core.base import CollectionBase
from sitecollections.core.keys import group_key, normalize_values
from sitecollections.core.models import File

logger = logging.getLogger(__name__)


class MetadataCollection(CollectionBase):
    """A collection that derives its content from a frontmatter property.

    With ``metadata: tags`` every distinct tag becomes a group::

        metadata_files = {
            "python": [file, file],
            "rust": [file],
        }

    ``data["metadata"]`` mirrors this mapping with each file's data instead
    of the file itself, for use in templates. Every group is paginated
    separately, and all pages end up in one flat ``pages`` list.
    """

    def is_file_in_collection(self, file: File) -> bool:
        """Return True if the file defines the collection's metadata key."""
        return self.metadata in file.data

    def populate(self, files: Iterable[File]) -> "MetadataCollection":
        """Group files by metadata value and build the collection pages."""
        if self.pages:
            logger.debug(
                "Collection %s repopulated, discarding %d pages",
                self.name,
                len(self.pages),
            )
        self.pages = []
        self.data["metadata"] = {}

        metadata_files: dict[str, list[File]] = {}
        for file in files:
            if not self.is_file_in_collection(file):
                continue

            for value in normalize_values(file.data[self.metadata]):
                key = group_key(value)
                metadata_files.setdefault(key, []).append(file)
                self.data["metadata"].setdefault(key, []).append(file.data)

        self.metadata_files = metadata_files
        self._create_collection_pages()

        logger.info(
            "Populated collection %s: %d groups, %d pages",
            self.name,
            len(metadata_files),
            len(self.pages),
        )
        return self

    def _create_collection_pages(self) -> bool:
        """Create CollectionPage objects for every metadata group.

        Returns:
            True if pages were created and linked, False if the collection
            has no index and page permalinks configured.
        """
        if self.pagination is None or not self.pagination.enabled:
            logger.debug("Collection %s has no pagination permalinks, skipping pages", self.name)
            return False

        for key, files in (self.metadata_files or {}).items():
            self._paginate(
                self.sort_files(files, self.sort),
                self.pagination,
                metadata=key,
            )

        self._link_pages()
        return True
