# Tool domain models
# Tool definitions as consumed by LLM tool-calling integrations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from .parameter import Parameter


class ToolExample(BaseModel):
    """Example invocation of a tool."""

    model_config = ConfigDict(frozen=True)

    input: dict[str, Any] = Field(..., description="Example input arguments")
    output: Any = Field(default=None, description="Expected output for the input")
    description: str | None = None


class Tool(BaseModel):
    """Tool definition held by the registry.

    Cross references are not checked: names in ``required_parameters`` need
    not exist in ``parameters``, and ``returns``/``examples`` are never
    matched against parameter names.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    name: StrictStr = Field(..., min_length=1, description="Unique tool name")
    description: StrictStr = Field(..., min_length=1, description="What the tool does")
    parameters: dict[str, Parameter] = Field(
        default_factory=dict, description="Input parameters keyed by name"
    )
    required_parameters: list[str] = Field(
        default_factory=list, alias="requiredParameters", description="Names of required inputs"
    )
    returns: Parameter | None = Field(default=None, description="Shape of the tool output")
    tags: list[str] = Field(default_factory=list, description="Categorization tags")
    examples: list[ToolExample] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name and description are not blank."""
        if not v.strip():
            raise ValueError("Value cannot be blank")
        return v


def validate_tool(value: Any) -> Tool:
    """Validate an untyped value into a Tool.

    The result is deep-copied so it never aliases the input.
    """
    try:
        tool = value if isinstance(value, Tool) else Tool.model_validate(value)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
    return tool.model_copy(deep=True)
