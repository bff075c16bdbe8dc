"""Shared pydantic base for dashboard payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Python attribute names, camelCase on the wire (the SPA reads camelCase)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
