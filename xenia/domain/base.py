from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns round-trip."""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Wire model: camelCase JSON, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )
