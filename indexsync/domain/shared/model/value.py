from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value object compared by its fields."""

    model_config = ConfigDict(frozen=True)
