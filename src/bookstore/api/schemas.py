"""Base Pydantic schemas shared by every router."""

import json

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both camelCase (wire format) and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def cleared_fields(self) -> str:
        """JSON list of the fields the client explicitly sent as ``null``."""
        return json.dumps(sorted(f for f in self.model_fields_set if getattr(self, f) is None))


class MessageResponse(BaseModel):
    message: str
