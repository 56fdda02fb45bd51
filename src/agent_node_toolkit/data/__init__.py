"""Input/output data handling: adapters, validators and formatters."""

from .adapters import (
    AdapterOptions,
    flat_record_to_json,
    json_to_flat_record,
    key_value_pairs_to_object,
    object_to_key_value_pairs,
)
from .formatters import (
    FormattingOptions,
    format_array,
    format_byte_size,
    format_currency,
    format_date,
    format_duration,
    format_for_csv,
    format_number,
    format_object,
    format_percentage,
    format_phone_number,
    format_string,
    format_value,
)
from .validators import (
    AiModelResponse,
    ApiResponse,
    CheckResult,
    PaginatedApiResponse,
    ValidationResult,
    Validator,
    sanitize_user_input,
    validate,
    validate_email,
    validate_json,
    validate_url,
    validate_with_model,
)

__all__ = [
    "AdapterOptions",
    "AiModelResponse",
    "ApiResponse",
    "CheckResult",
    "FormattingOptions",
    "PaginatedApiResponse",
    "ValidationResult",
    "Validator",
    "flat_record_to_json",
    "format_array",
    "format_byte_size",
    "format_currency",
    "format_date",
    "format_duration",
    "format_for_csv",
    "format_number",
    "format_object",
    "format_percentage",
    "format_phone_number",
    "format_string",
    "format_value",
    "json_to_flat_record",
    "key_value_pairs_to_object",
    "object_to_key_value_pairs",
    "sanitize_user_input",
    "validate",
    "validate_email",
    "validate_json",
    "validate_url",
    "validate_with_model",
]
