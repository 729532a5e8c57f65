"""Error handling for product service operations."""

import functools
import logging
from typing import Callable

from ....core.exceptions import CatalogError, PersistenceError
from ....core.shared.result import ErrorKind, Result

logger = logging.getLogger(__name__)


def product_result_handler(failure_message: str):
    """Turn exceptions raised by a service operation into failure results.

    Domain errors (not found, duplicate SKU, invalid filter) map onto their
    result kind and are logged at info. Persistence and unexpected errors are
    logged with the real cause and reported with ``failure_message`` so store
    internals never reach the caller.

    Usage:
        @product_result_handler("An error occurred while retrieving the product")
        async def get_product(self, product_id): ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Result:
            try:
                return await func(*args, **kwargs)
            except PersistenceError as e:
                logger.error(f"Persistence failure in {func.__name__}: {e.message} {e.details}")
                return Result.failure(failure_message, ErrorKind.PERSISTENCE_FAILURE)
            except CatalogError as e:
                logger.info(f"{func.__name__} rejected: {e.message}")
                return Result.from_error(e)
            except Exception as e:
                logger.exception(f"Unexpected error in {func.__name__}: {e}")
                return Result.failure(failure_message, ErrorKind.PERSISTENCE_FAILURE)
        return wrapper
    return decorator
