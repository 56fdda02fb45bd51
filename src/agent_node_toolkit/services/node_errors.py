"""Error classification and retry decisions for AI nodes."""

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import ToolkitError


class AiErrorType(str, Enum):
    """Kinds of failure an AI node can report."""

    CONNECTION_ERROR = "connection_error"
    AUTHENTICATION_ERROR = "authentication_error"

    MODEL_NOT_FOUND = "model_not_found"
    INVALID_MODEL_PARAMETERS = "invalid_model_parameters"
    CONTEXT_WINDOW_EXCEEDED = "context_window_exceeded"
    TOKEN_LIMIT_EXCEEDED = "token_limit_exceeded"

    CONTENT_FILTERED = "content_filtered"
    CONTENT_POLICY_VIOLATION = "content_policy_violation"

    TOOL_EXECUTION_ERROR = "tool_execution_error"
    TOOL_NOT_FOUND = "tool_not_found"

    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    QUOTA_EXCEEDED = "quota_exceeded"

    SERVER_ERROR = "server_error"
    TIMEOUT_ERROR = "timeout_error"

    VALIDATION_ERROR = "validation_error"

    UNKNOWN_ERROR = "unknown_error"


class AiNodeError(ToolkitError):
    """Exception for errors raised by AI nodes."""
    def __init__(
        self,
        message: str,
        error_type: AiErrorType,
        status_code: Optional[int] = None,
        retryable: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.type = error_type
        self.status_code = status_code
        self.retryable = retryable
        super().__init__(message, error_type.value.upper(), details)


_CONNECTION_TYPES = frozenset({AiErrorType.CONNECTION_ERROR, AiErrorType.AUTHENTICATION_ERROR})
_MODEL_TYPES = frozenset({
    AiErrorType.MODEL_NOT_FOUND,
    AiErrorType.INVALID_MODEL_PARAMETERS,
    AiErrorType.CONTEXT_WINDOW_EXCEEDED,
    AiErrorType.TOKEN_LIMIT_EXCEEDED,
})
_CONTENT_POLICY_TYPES = frozenset({AiErrorType.CONTENT_FILTERED, AiErrorType.CONTENT_POLICY_VIOLATION})
_TOOL_TYPES = frozenset({AiErrorType.TOOL_EXECUTION_ERROR, AiErrorType.TOOL_NOT_FOUND})
_RATE_LIMIT_TYPES = frozenset({AiErrorType.RATE_LIMIT_EXCEEDED, AiErrorType.QUOTA_EXCEEDED})
_SERVER_TYPES = frozenset({AiErrorType.SERVER_ERROR, AiErrorType.TIMEOUT_ERROR})


def is_connection_error(error: AiNodeError) -> bool:
    return error.type in _CONNECTION_TYPES


def is_model_error(error: AiNodeError) -> bool:
    return error.type in _MODEL_TYPES


def is_content_policy_error(error: AiNodeError) -> bool:
    return error.type in _CONTENT_POLICY_TYPES


def is_tool_error(error: AiNodeError) -> bool:
    return error.type in _TOOL_TYPES


def is_rate_limit_error(error: AiNodeError) -> bool:
    return error.type in _RATE_LIMIT_TYPES


def is_server_error(error: AiNodeError) -> bool:
    return error.type in _SERVER_TYPES


_RATE_LIMIT_RE = re.compile(r"rate limit|too many|429", re.IGNORECASE)
_SERVER_RE = re.compile(r"5\d\d|internal|server", re.IGNORECASE)
_TIMEOUT_RE = re.compile(r"timeout|timed out", re.IGNORECASE)


def create_error_handler(logger: Optional[logging.Logger] = None) -> Callable[[BaseException, int], bool]:
    """Build a retry predicate for model calls.

    The returned handler takes the exception and the attempt number and
    returns True when the call should be retried. AiNodeError carries its own
    ``retryable`` flag; other errors are retried when their message looks like
    a rate limit, server failure or timeout.
    """
    def handle(error: BaseException, attempt_number: int) -> bool:
        if isinstance(error, AiNodeError):
            if logger:
                logger.error(
                    f"AI Node Error (attempt {attempt_number}): {error.message} "
                    f"[type={error.type.value}, status_code={error.status_code}, retryable={error.retryable}]"
                )
            return error.retryable

        message = str(error)
        if logger:
            logger.error(f"AI Error (attempt {attempt_number}): {message}")

        return bool(
            _RATE_LIMIT_RE.search(message)
            or _SERVER_RE.search(message)
            or _TIMEOUT_RE.search(message)
        )

    return handle
