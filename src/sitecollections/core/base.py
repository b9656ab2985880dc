"""Shared behaviour for all collection variants."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any

from pydantic import ValidationError

from sitecollections.core.errors import CollectionConfigError
from sitecollections.core.keys import group_key
from sitecollections.core.models import (
    CollectionConfig,
    File,
    PageContext,
    PaginationConfig,
    SortConfig,
)
from sitecollections.core.page import CollectionPage

logger = logging.getLogger(__name__)


def _is_future(value: Any) -> bool:
    """Check whether a frontmatter date value lies in the future."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return False
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value > datetime.now()
        return value > datetime.now(timezone.utc)
    if isinstance(value, date):
        return value > date.today()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch milliseconds
        return value / 1000 > datetime.now(timezone.utc).timestamp()
    return False


class CollectionBase(ABC):
    """Abstract base class for collections.

    Subclasses decide which files belong to the collection in ``populate``
    and build their ``pages`` from that. Filtering, sorting and page linking
    are shared here.
    """

    def __init__(self, name: str, config: CollectionConfig | Mapping[str, Any] | None = None):
        if not name:
            raise CollectionConfigError("Collection requires a name")

        if config is None:
            config = CollectionConfig()
        elif not isinstance(config, CollectionConfig):
            try:
                config = CollectionConfig.model_validate(config)
            except ValidationError as e:
                raise CollectionConfigError(
                    f"Invalid configuration for collection {name!r}: {e}"
                ) from e

        self.name = name
        self.path = config.path
        self.metadata = config.metadata
        self.template = config.template
        self.permalink = config.permalink
        self.sort = config.sort
        self.pagination = config.pagination
        self.filter = config.filter
        self.exclude_paths = config.exclude_paths

        self.pages: list[CollectionPage] = []
        self.data: dict[str, Any] = {}
        self.metadata_files: dict[str, list[File]] | None = None

    @abstractmethod
    def populate(self, files: Iterable[File]) -> "CollectionBase":
        """Fill the collection from the site's files. Returns self."""
        ...

    def is_filtered(self, file: File) -> bool:
        """Return True if the collection's filter rules exclude the file."""
        if self.filter is None:
            return False

        for key, value in self.filter.metadata.items():
            if key in file.data and file.data[key] == value:
                return True

        if self.filter.filters_future_dates:
            date_key = self.filter.future_date or "date"
            if date_key in file.data and _is_future(file.data[date_key]):
                return True

        return False

    @staticmethod
    def sort_files(files: Iterable[File], sort: SortConfig | None) -> list[File]:
        """Return files stably sorted by ``sort.key``.

        Any order other than ``"descending"`` sorts ascending. Files without
        the key keep their relative order after all keyed files.
        """
        files = list(files)
        if sort is None:
            return files

        keyed = [f for f in files if sort.key in f.data]
        missing = [f for f in files if sort.key not in f.data]
        try:
            keyed = sorted(keyed, key=lambda f: f.data[sort.key], reverse=sort.descending)
        except TypeError:
            # Mixed value types: compare canonical string forms instead
            keyed = sorted(
                keyed,
                key=lambda f: group_key(f.data[sort.key]),
                reverse=sort.descending,
            )
        return keyed + missing

    def _paginate(
        self,
        files: list[File],
        pagination: PaginationConfig,
        metadata: str | None = None,
    ) -> list[CollectionPage]:
        """Chunk already-sorted files into pages and append them to ``pages``."""
        size = pagination.size
        chunks = [files[i : i + size] for i in range(0, len(files), size)]

        created = []
        for index, chunk in enumerate(chunks):
            context = PageContext(
                metadata=metadata,
                page=index + 1,
                total_pages=len(chunks),
                per_page=size,
                total=len(files),
            )
            permalink = pagination.permalink_index if index == 0 else pagination.permalink_page
            created.append(CollectionPage(chunk, permalink, context))

        self.pages.extend(created)
        return created

    def _link_pages(self) -> None:
        """Link every page in ``pages`` to its neighbours."""
        previous = None
        for page in self.pages:
            page.previous_page = previous
            page.next_page = None
            if previous is not None:
                previous.next_page = page
            previous = page

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, pages={len(self.pages)})"
