"""Shared base for Tenor response models."""

from pydantic import BaseModel, ConfigDict


class TenorModel(BaseModel):
    """Base for every response model: immutable, and lenient about new fields."""

    model_config = ConfigDict(frozen=True, extra="allow")
