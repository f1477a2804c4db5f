import functools
import logging

from videotube.config.environments import ENVIRONMENT
from videotube.utility.api_error import ApiError

logger = logging.getLogger(__name__)


def async_handler(handler):
    """
    Wrap an async handler so every failure leaves through ApiError.

    ApiError passes through untouched. Anything else is logged and re-raised
    as a 500 ApiError chained to the original exception, which the
    centralized error responder turns into the error envelope. The exception
    text only reaches the client in development. The wrapped
    callable keeps the original signature for FastAPI's dependency injection.
    """

    @functools.wraps(handler)
    async def wrapper(*args, **kwargs):
        try:
            return await handler(*args, **kwargs)
        except ApiError:
            raise
        except Exception as e:
            logger.exception("Unhandled error in %s", handler.__qualname__)
            message = "Internal Server Error"
            if ENVIRONMENT == "development" and str(e):
                message = str(e)
            raise ApiError(500, message) from e

    return wrapper
