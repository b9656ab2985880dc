"""Exceptions raised by site collections."""


class SiteCollectionsError(Exception):
    """Base class for all site collection errors."""


class CollectionConfigError(SiteCollectionsError, ValueError):
    """A collection or its configuration is invalid."""
