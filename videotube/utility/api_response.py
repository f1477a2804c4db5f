from typing import Any
from pydantic import BaseModel, ConfigDict, Field, computed_field


class ApiResponse(BaseModel):
    """Success envelope; ``success`` is derived from the status code."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    data: Any = None
    message: str = "Success"

    def __init__(self, status_code: int = None, data: Any = None, message: str = "Success", **kwargs):
        if status_code is not None:
            kwargs["status_code"] = status_code
        super().__init__(data=data, message=message, **kwargs)

    @computed_field
    @property
    def success(self) -> bool:
        return self.status_code < 400

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
