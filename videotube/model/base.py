from typing import Annotated, Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _object_id_to_str(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


# ObjectId stored in MongoDB, exposed as its hex string
ObjectIdStr = Annotated[str, BeforeValidator(_object_id_to_str)]


def to_object_id(value) -> ObjectId:
    """Raises ValueError for anything that is not a valid ObjectId"""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValueError(f"Invalid id: {value!r}") from e


class MongoModel(BaseModel):
    """Documents keep camelCase keys in storage and in API payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self, exclude: set = frozenset()) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude=set(exclude))
