"""Application configuration."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitecollections.core.base import CollectionBase
from sitecollections.core.errors import CollectionConfigError
from sitecollections.core.factory import create_collection
from sitecollections.core.models import CollectionConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    collections_file: Path = Path("collections.yml")
    default_page_size: int = 1

    model_config = SettingsConfigDict(
        env_prefix="SITECOLLECTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from ``path``."""
    if not path.exists():
        raise CollectionConfigError(f"Collections file not found: {path}")

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise CollectionConfigError(f"Malformed collections file {path}: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise CollectionConfigError(
            f"Collections file {path} must contain a mapping of collection names"
        )
    return document


def load_collection_configs(path: Path | None = None) -> dict[str, CollectionConfig]:
    """Load collection configurations keyed by collection name.

    Args:
        path: YAML file to read. Defaults to ``settings.collections_file``.

    Returns:
        Mapping of collection name to validated CollectionConfig, in file order.
    """
    path = path or settings.collections_file
    configs = {}
    for name, raw in _read_yaml(path).items():
        if raw is not None and not isinstance(raw, dict):
            raise CollectionConfigError(
                f"Configuration for collection {name!r} must be a mapping"
            )
        raw = dict(raw or {})
        pagination = raw.get("pagination")
        if isinstance(pagination, dict) and "size" not in pagination:
            raw["pagination"] = {**pagination, "size": settings.default_page_size}
        try:
            configs[str(name)] = CollectionConfig.model_validate(raw)
        except ValidationError as e:
            raise CollectionConfigError(
                f"Invalid configuration for collection {name!r}: {e}"
            ) from e

    logger.info("Loaded %d collection configs from %s", len(configs), path)
    return configs


def load_collections(path: Path | None = None) -> list[CollectionBase]:
    """Load the collections file and build a collection for each entry."""
    return [
        create_collection(name, config)
        for name, config in load_collection_configs(path).items()
    ]
