import traceback
from typing import Any, Optional, Sequence


class ApiError(Exception):
    """
    The single unit of failure information across the service.

    Args:
        status_code: HTTP status to answer with
        message: Human readable reason
        errors: Auxiliary error details, may be empty
        stack: Call-origin trace; captured here when not supplied

    Attributes are read-only once constructed. ``data`` is always None and
    ``success`` always False, so an error is never mistaken for a success
    envelope.
    """

    def __init__(
            self,
            status_code: int,
            message: str = "Something went wrong",
            errors: Sequence[Any] = (),
            stack: Optional[str] = None
    ):
        super().__init__(message)
        self._status_code = status_code
        self._message = message
        self._errors = tuple(errors)
        if stack is None:
            # Drop this frame, keep where the error was created
            stack = "".join(traceback.format_stack()[:-1])
        self._stack = stack

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def errors(self) -> tuple:
        return self._errors

    @property
    def data(self) -> None:
        return None

    @property
    def success(self) -> bool:
        return False

    @property
    def stack(self) -> str:
        return self._stack

    def to_dict(self, include_stack: bool = False) -> dict:
        body = {
            "statusCode": self.status_code,
            "data": self.data,
            "message": self.message,
            "success": self.success,
            "errors": list(self.errors),
        }
        if include_stack:
            body["stack"] = self.stack
        return body

    def __repr__(self):
        return f"ApiError(status_code={self.status_code!r}, message={self.message!r})"
