"""Pydantic schemas for data export and import."""

from pydantic import BaseModel, Field


class ImportResponse(BaseModel):
    model_config = {"from_attributes": True}

    success: bool = True
    imported_count: int
    error_count: int
    sections: dict[str, int] = Field(default_factory=dict, description="Rows imported per section")
    errors: list[str] = Field(default_factory=list)
