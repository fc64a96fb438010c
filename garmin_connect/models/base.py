"""Base model for Garmin Connect JSON payloads."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GarminModel(BaseModel):
    """Snake_case attributes over Garmin's camelCase JSON.

    Unknown upstream fields are kept so that a record fetched from Garmin can
    be sent back without losing data.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> Dict[str, Any]:
        """Dump the record the way Garmin expects it in a request body."""
        return self.model_dump(by_alias=True, exclude_unset=True)
