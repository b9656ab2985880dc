"""Selecting and populating collection variants."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from sitecollections.core.base import CollectionBase
from sitecollections.core.errors import CollectionConfigError
from sitecollections.core.metadata import MetadataCollection
from sitecollections.core.models import CollectionConfig, File
from sitecollections.core.path import PathCollection


def create_collection(
    name: str, config: CollectionConfig | Mapping[str, Any]
) -> CollectionBase:
    """Create the collection variant matching the configuration.

    A ``metadata`` key selects a MetadataCollection, otherwise a ``path``
    selects a PathCollection.
    """
    if not isinstance(config, CollectionConfig):
        try:
            config = CollectionConfig.model_validate(config)
        except ValidationError as e:
            raise CollectionConfigError(
                f"Invalid configuration for collection {name!r}: {e}"
            ) from e

    if config.metadata:
        return MetadataCollection(name, config)
    if config.path:
        return PathCollection(name, config)
    raise CollectionConfigError(
        f"Collection {name!r} needs either a 'metadata' or a 'path' setting"
    )


def populate_collections(
    collections: Iterable[CollectionBase], files: Iterable[File]
) -> dict[str, CollectionBase]:
    """Populate every collection with the same files, keyed by name."""
    files = list(files)
    return {collection.name: collection.populate(files) for collection in collections}
