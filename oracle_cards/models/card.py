"""
Card model for rows of the remote cards table.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional


class Card(BaseModel):
    """A displayable card row."""
    id: str = Field(..., description="Unique card identifier, sort key")
    name: str = Field(..., description="Display name")
    number: str = Field("", description="Card number, shown as 'Card #<number>'")
    description: str = Field("", description="Free-form description")
    image_url: Optional[str] = Field(None, description="Public image URL, if any")

    model_config = ConfigDict(extra="ignore")

    @field_validator("id", "number", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> Any:
        # int8 columns come back as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", "number", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def display_number(self) -> str:
        return f"Card #{self.number}"
