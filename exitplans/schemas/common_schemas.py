"""Shared schema configuration.

All public JSON uses camelCase keys. Models accept either the camelCase alias
or the Python field name on input (populate_by_name), and FastAPI serializes
response models by alias.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
