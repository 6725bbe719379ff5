"""Base model class for all content models."""

from pydantic import BaseModel, ConfigDict


class ContentModel(BaseModel):
    """Base model for all content models."""

    model_config = ConfigDict(validate_assignment=True)
