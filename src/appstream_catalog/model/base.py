from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseCatalogModel(BaseModel):
    """Base class for catalog models."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )
