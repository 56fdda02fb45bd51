# Tool parameter models
# Recursive tagged union describing typed tool inputs and outputs

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

ParameterType = Literal["string", "number", "boolean", "array", "object"]
StringFormat = Literal["date", "date-time", "email", "uri", "regex", "text"]
NumberFormat = Literal["float", "double", "int32", "int64"]


def _strict_number(value: Any) -> int | float:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    return value


# No coercion from str or bool; ints stay ints on the wire
Number = Annotated[Union[int, float], PlainValidator(_strict_number)]


class ParameterBase(BaseModel):
    """Fields shared by every parameter variant."""

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    name: StrictStr = Field(..., min_length=1, description="Identifier within the owning scope")
    description: StrictStr = Field(..., description="Human readable description, may be empty")
    required: StrictBool = Field(default=False, description="Whether the parameter must be supplied")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not blank."""
        if not v.strip():
            raise ValueError("Parameter name cannot be empty")
        return v


def _check_upper_bound(high: Any, info: ValidationInfo, low_field: str, low_name: str, high_name: str) -> Any:
    """Reject ``high`` below the already validated lower bound.

    Runs as a field validator so it is reported alongside errors on other
    fields. Skipped when the lower bound itself failed validation.
    """
    low = info.data.get(low_field)
    if low is not None and high is not None and low > high:
        raise ValueError(f"{low_name} ({low}) cannot be greater than {high_name} ({high})")
    return high


class StringParameter(ParameterBase):
    type: Literal["string"] = "string"
    format: StringFormat | None = None
    min_length: StrictInt | None = Field(default=None, ge=0, alias="minLength")
    max_length: StrictInt | None = Field(default=None, ge=0, alias="maxLength")
    pattern: str | None = None
    enum: list[str] | None = None
    default: str | None = None

    @field_validator("max_length")
    @classmethod
    def validate_lengths(cls, v: int | None, info: ValidationInfo) -> int | None:
        return _check_upper_bound(v, info, "min_length", "minLength", "maxLength")


class NumberParameter(ParameterBase):
    type: Literal["number"] = "number"
    minimum: Number | None = None
    maximum: Number | None = None
    multiple_of: Number | None = Field(default=None, alias="multipleOf")
    format: NumberFormat | None = None
    default: Number | None = None

    @field_validator("maximum")
    @classmethod
    def validate_range(cls, v: float | None, info: ValidationInfo) -> float | None:
        return _check_upper_bound(v, info, "minimum", "minimum", "maximum")

    @field_validator("multiple_of")
    @classmethod
    def validate_multiple_of(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("multipleOf must be greater than 0")
        return v


class BooleanParameter(ParameterBase):
    type: Literal["boolean"] = "boolean"
    default: StrictBool | None = None


class ArrayParameter(ParameterBase):
    type: Literal["array"] = "array"
    items: "Parameter" = Field(..., description="Element type")
    min_items: StrictInt | None = Field(default=None, ge=0, alias="minItems")
    max_items: StrictInt | None = Field(default=None, ge=0, alias="maxItems")
    unique_items: StrictBool | None = Field(default=None, alias="uniqueItems")
    default: list[Any] | None = None

    @field_validator("max_items")
    @classmethod
    def validate_item_counts(cls, v: int | None, info: ValidationInfo) -> int | None:
        return _check_upper_bound(v, info, "min_items", "minItems", "maxItems")


class ObjectParameter(ParameterBase):
    """Object parameter.

    ``required`` is either the common "must be supplied" flag or the list of
    property names that must be present. Only the list form is part of the
    generated JSON Schema.

    The property-name check needs both ``required`` and ``properties``, so it
    runs once every field is valid.
    """

    type: Literal["object"] = "object"
    properties: dict[str, "Parameter"] | None = None
    required: list[str] | StrictBool = False
    additional_properties: StrictBool | None = Field(default=None, alias="additionalProperties")
    default: dict[str, Any] | None = None

    @property
    def required_properties(self) -> list[str]:
        """Names of properties that must be present."""
        return list(self.required) if isinstance(self.required, list) else []

    @model_validator(mode="after")
    def validate_required_properties(self) -> "ObjectParameter":
        known = self.properties or {}
        missing = [name for name in self.required_properties if name not in known]
        if missing:
            raise ValueError(
                "required lists properties not defined in properties: " + ", ".join(missing)
            )
        return self


Parameter = Annotated[
    Union[StringParameter, NumberParameter, BooleanParameter, ArrayParameter, ObjectParameter],
    Field(discriminator="type"),
]

ArrayParameter.model_rebuild()
ObjectParameter.model_rebuild()

parameter_adapter: TypeAdapter[Parameter] = TypeAdapter(Parameter)


def validate_parameter(value: Any) -> Parameter:
    """Validate an untyped value into a parameter model.

    Wrong primitive types are reported, never coerced. Raises ValidationError
    listing every structural problem found.
    """
    try:
        parameter = value if isinstance(value, ParameterBase) else parameter_adapter.validate_python(value)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
    return parameter.model_copy(deep=True)
