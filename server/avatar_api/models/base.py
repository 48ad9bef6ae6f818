"""Base model shared by the API schemas."""

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """Base model with alias-aware dumping."""

    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, **kwargs) -> dict:
        """Dump the model using field aliases."""
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)
