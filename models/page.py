"""
Watch page region contract.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PageRegions(BaseModel):
    """Element ids of the page regions the pipeline writes into.

    Field names double as template placeholders (``$shorts_grid``), values are
    the element ids used in the rendered markup. Ids must be unique.
    """

    model_config = ConfigDict(frozen=True)

    shorts_grid: str = Field("shorts-grid", description="Grid holding short video cards")
    episodes_grid: str = Field("episodes-grid", description="Grid holding full episode cards")
    shorts_note: str = Field("shorts-note", description="Summary line under the shorts heading")
    episodes_note: str = Field("episodes-note", description="Summary line under the episodes heading")
    shorts_error: str = Field("shorts-error", description="Error banner for the shorts section")
    episodes_error: str = Field("episodes-error", description="Error banner for the episodes section")

    @model_validator(mode="after")
    def validate_unique_ids(self):
        """Reject two regions sharing one element id."""
        region_ids = list(self.model_dump().values())
        duplicates = sorted({region_id for region_id in region_ids if region_ids.count(region_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate region ids: {', '.join(duplicates)}")
        return self

    def placeholders(self) -> Dict[str, str]:
        """Map element id -> template placeholder name."""
        return {region_id: name for name, region_id in self.model_dump().items()}
