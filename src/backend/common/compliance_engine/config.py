from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ScanConfig(BaseModel):
    """Engine-level scan options.

    An empty `regulations` list means every regulation in the catalog.
    """

    max_workers: int = Field(default=1, ge=1)
    regulations: List[str] = Field(default_factory=list)
    # JSON/YAML catalog that replaces the built-in one when set.
    catalog_path: Optional[str] = None

    @classmethod
    def from_settings(cls, settings) -> "ScanConfig":
        return cls(
            max_workers=settings.scan_max_workers,
            catalog_path=settings.catalog_path,
        )
