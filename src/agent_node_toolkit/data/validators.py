"""Validators for input and output data."""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass
class ValidationResult:
    """Outcome of validate_with_model."""

    success: bool
    data: Any = None
    errors: list[str] = field(default_factory=list)


@dataclass
class CheckResult:
    """Outcome of a single-value check such as validate_json or validate_url."""

    valid: bool
    value: Any = None
    error: Optional[str] = None


def validate_with_model(data: Any, model: Any) -> ValidationResult:
    """Validate ``data`` against a pydantic model or type annotation.

    Never raises for invalid data; errors come back as ``"path: message"``
    strings.
    """
    try:
        parsed = TypeAdapter(model).validate_python(data)
    except PydanticValidationError as exc:
        return ValidationResult(success=False, errors=ValidationError.from_pydantic(exc).errors)
    return ValidationResult(success=True, data=parsed)


def sanitize_user_input(text: str) -> str:
    """Escape HTML-significant characters in user input."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
        .replace("/", "&#x2F;")
    )


class ApiError(BaseModel):
    message: str
    code: Optional[str] = None


class ApiResponse(BaseModel):
    """Generic API response envelope."""

    status: Literal["success", "error"]
    data: Any = None
    error: Optional[ApiError] = None


class PaginatedData(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    items: list[Any]
    total: float
    page: float
    page_size: float = Field(..., alias="pageSize")
    total_pages: float = Field(..., alias="totalPages")


class PaginatedApiResponse(BaseModel):
    """Paginated API response envelope."""

    status: Literal["success", "error"]
    data: Optional[PaginatedData] = None
    error: Optional[ApiError] = None


class ToolCall(BaseModel):
    name: str
    parameters: dict[str, Any]


class TokenUsage(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    prompt_tokens: Optional[float] = Field(default=None, alias="promptTokens")
    completion_tokens: Optional[float] = Field(default=None, alias="completionTokens")
    total_tokens: Optional[float] = Field(default=None, alias="totalTokens")


class ModelResponseMetadata(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, protected_namespaces=())

    usage: Optional[TokenUsage] = None
    model: Optional[str] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class AiModelResponse(BaseModel):
    """Response returned by an AI model node."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    content: str
    tool_calls: Optional[list[ToolCall]] = Field(default=None, alias="toolCalls")
    metadata: Optional[ModelResponseMetadata] = None


def validate_json(value: str) -> CheckResult:
    """Check that ``value`` is a JSON document and return the parsed data."""
    try:
        return CheckResult(valid=True, value=json.loads(value))
    except (json.JSONDecodeError, TypeError) as e:
        return CheckResult(valid=False, error=str(e))


def validate_url(url: str) -> CheckResult:
    """Check that ``url`` is absolute (scheme and host present)."""
    try:
        parsed = urlparse(url)
    except (ValueError, AttributeError):
        return CheckResult(valid=False, error="Invalid URL")
    if not parsed.scheme or not parsed.netloc:
        return CheckResult(valid=False, error="Invalid URL")
    return CheckResult(valid=True, value=parsed)


def validate_email(email: str) -> CheckResult:
    if _EMAIL_RE.match(email):
        return CheckResult(valid=True, value=email)
    return CheckResult(valid=False, error="Invalid email address format")


class Validator:
    """Fluent validation chain for a single value.

    Checks after the first failure are skipped, so ``result`` reports at most
    one error.
    """

    def __init__(self, value: Any):
        self.value = value
        self.errors: list[str] = []
        self.is_valid = True

    def _check(self, passed: bool, message: str) -> "Validator":
        if self.is_valid and not passed:
            self.is_valid = False
            self.errors.append(message)
        return self

    def not_empty(self, message: str = "Value cannot be empty") -> "Validator":
        return self._check(self.value not in (None, ""), message)

    def is_string(self, message: str = "Value must be a string") -> "Validator":
        return self._check(isinstance(self.value, str), message)

    def is_number(self, message: str = "Value must be a number") -> "Validator":
        value = self.value
        passed = isinstance(value, (int, float)) and not isinstance(value, bool) and value == value
        return self._check(passed, message)

    def is_boolean(self, message: str = "Value must be a boolean") -> "Validator":
        return self._check(isinstance(self.value, bool), message)

    def is_array(self, message: str = "Value must be an array") -> "Validator":
        return self._check(isinstance(self.value, (list, tuple)), message)

    def is_object(self, message: str = "Value must be an object") -> "Validator":
        return self._check(isinstance(self.value, dict), message)

    def matches(self, pattern: "str | re.Pattern[str]", message: str = "Value does not match the required pattern") -> "Validator":
        passed = isinstance(self.value, str) and re.search(pattern, self.value) is not None
        return self._check(passed, message)

    def min_length(self, length: int, message: Optional[str] = None) -> "Validator":
        passed = isinstance(self.value, str) and len(self.value) >= length
        return self._check(passed, message or f"Value must be at least {length} characters")

    def max_length(self, length: int, message: Optional[str] = None) -> "Validator":
        passed = isinstance(self.value, str) and len(self.value) <= length
        return self._check(passed, message or f"Value must be at most {length} characters")

    @property
    def result(self) -> ValidationResult:
        return ValidationResult(success=self.is_valid, data=self.value, errors=list(self.errors))


def validate(value: Any) -> Validator:
    """Start a validation chain for ``value``."""
    return Validator(value)
