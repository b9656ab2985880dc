"""A single paginated page of a collection."""

from typing import Any

from sitecollections.core.models import File, PageContext


class CollectionPage:
    """One page worth of files, bound to a permalink template and context.

    Pages are linked to their siblings through ``previous_page`` and
    ``next_page`` once the owning collection has created all of its pages.
    """

    def __init__(self, files: list[File], permalink: str, context: PageContext):
        self.files = list(files)
        self.permalink = permalink
        self.context = context
        self.previous_page: "CollectionPage | None" = None
        self.next_page: "CollectionPage | None" = None

    def template_data(self) -> dict[str, Any]:
        """Return the context plus the page's file data for rendering."""
        return {
            **self.context.as_dict(),
            "files": [file.data for file in self.files],
        }

    def __repr__(self) -> str:
        return (
            f"CollectionPage(permalink={self.permalink!r}, "
            f"page={self.context.page}/{self.context.total_pages}, "
            f"files={len(self.files)})"
        )
