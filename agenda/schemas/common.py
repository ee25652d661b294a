from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class Timestamped(CamelModel):
    created_at: datetime
    updated_at: datetime | None = None


class IDModel(CamelModel):
    id: int
