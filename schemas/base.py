"""Shared Pydantic base classes.

API bodies use camelCase keys on the wire while Python code keeps
snake_case attribute names; both spellings are accepted on input.
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize aware datetimes to naive UTC, the storage convention."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PartialUpdate(CamelModel):
    """Request body where every field is optional.

    Only fields the client actually sent are applied. An explicit null is
    ignored unless the field is listed in `clearable`.
    """

    clearable: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.clearable
        }


class MessageResponse(BaseModel):
    message: str
