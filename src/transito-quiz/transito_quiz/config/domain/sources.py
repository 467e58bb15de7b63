"""Source asset configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field


class InventoryColumns(BaseModel, frozen=True):
    """Column names of the sign inventory CSV."""

    name: str = Field(default="nombre_visible", min_length=1)
    path: str = Field(default="archivo", min_length=1)
    url: str = Field(default="url", min_length=1)


class SourcesConfig(BaseModel, frozen=True):
    base_questions: Path
    sign_inventory: Path
    supplementary_questions: Path | None = None
    definitions: Path | None = None
    sign_catalog: Path | None = None
    inventory_columns: InventoryColumns = InventoryColumns()
