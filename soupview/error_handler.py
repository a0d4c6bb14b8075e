import logging
from enum import Enum
from typing import Optional

import aiohttp

from .result import QueryResult

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of the failures a query, parse or fetch can produce"""
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT_SHAPE = "invalid_argument_shape"
    WRONG_NODE_KIND = "wrong_node_kind"
    TRANSPORT_FAILURE = "transport_failure"
    READ_FAILURE = "read_failure"
    PARSE_FAILURE = "parse_failure"


class SoupError(Exception):
    """A failure surfaced by a query, parse or fetch operation"""

    def __init__(self, error_type: ErrorType, message: str):
        super().__init__(message)
        self.error_type = error_type
        self.message = message

    def __repr__(self):
        return f"SoupError({self.error_type.value}, {self.message!r})"


class InvalidArgumentShape(SoupError, ValueError):
    """Criteria given as something other than a tag, or a tag plus attribute name and value"""

    def __init__(self, message: str):
        super().__init__(ErrorType.INVALID_ARGUMENT_SHAPE, message)


class ErrorHandler:
    """Single place where failures are produced.

    With debug off a failure becomes a failed QueryResult the caller inspects.
    With debug on the same failure is raised on the spot, carrying the same
    message.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def fail(self, error_type: ErrorType, message: str,
             cause: Optional[Exception] = None) -> QueryResult:
        """Return a failed result, or raise immediately in debug mode"""
        error = SoupError(error_type, message)
        if self.debug:
            logger.error(f"{error_type.value}: {message}")
            if cause is not None:
                raise error from cause
            raise error

        logger.debug(f"{error_type.value}: {message}")
        return QueryResult(error=error)

    def classify_error(self, error: Exception) -> ErrorType:
        """Classify an HTTP client exception"""
        if isinstance(error, (aiohttp.ClientPayloadError, UnicodeDecodeError)):
            return ErrorType.READ_FAILURE
        return ErrorType.TRANSPORT_FAILURE

    def from_exception(self, error: Exception, message: str,
                       error_type: Optional[ErrorType] = None) -> QueryResult:
        """Wrap an exception raised by a collaborator as a failure"""
        error_type = error_type or self.classify_error(error)
        logger.warning(f"{message}: {error_type.value} - {error!r}")
        return self.fail(error_type, message, cause=error)
