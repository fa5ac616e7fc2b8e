from pydantic import BaseModel
from typing import Generic, TypeVar, Optional

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    status_code: int
    message: str
    data: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def send_custom_response(status_code: int, message: str, data: Optional[T] = None):
    return APIResponse(status_code=status_code, message=message, data=data)
