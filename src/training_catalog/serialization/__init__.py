"""Serialization module: export trainings to JSON catalogs and tables."""

from training_catalog.serialization.catalog_json import (
    from_catalog_dict,
    load_catalog,
    to_catalog_dict,
    to_catalog_json_string,
)
from training_catalog.serialization.frames import activities_frame, content_breakdown

__all__ = [
    "activities_frame",
    "content_breakdown",
    "from_catalog_dict",
    "load_catalog",
    "to_catalog_dict",
    "to_catalog_json_string",
]
