# Prompt template models
# Discriminated by templateType, mirroring the chat roles they render to

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

MessageRole = Literal["system", "user", "assistant", "function", "tool"]


class _PromptModel(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )


class BasePromptTemplate(_PromptModel):
    """Fields shared by every prompt template."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    version: str = "1.0.0"
    template: str = Field(..., min_length=1, description="Template text with {{variables}}")
    variables: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class SystemPromptTemplate(BasePromptTemplate):
    template_type: Literal["system"] = Field(default="system", alias="templateType")


class UserPromptTemplate(BasePromptTemplate):
    template_type: Literal["user"] = Field(default="user", alias="templateType")


class AssistantPromptTemplate(BasePromptTemplate):
    template_type: Literal["assistant"] = Field(default="assistant", alias="templateType")


class FunctionPromptTemplate(BasePromptTemplate):
    template_type: Literal["function", "tool"] = Field(default="function", alias="templateType")
    function_name: str = Field(..., min_length=1, alias="functionName")
    parameters: dict[str, Any] | None = None


class PromptMessage(_PromptModel):
    """Single message inside a complete template."""

    role: MessageRole
    content: str = Field(..., min_length=1)
    name: str | None = None


class CompletePromptTemplate(BasePromptTemplate):
    template_type: Literal["complete"] = Field(default="complete", alias="templateType")
    prompts: list[PromptMessage]


PromptTemplate = Annotated[
    Union[
        SystemPromptTemplate,
        UserPromptTemplate,
        AssistantPromptTemplate,
        FunctionPromptTemplate,
        CompletePromptTemplate,
    ],
    Field(discriminator="template_type"),
]

prompt_template_adapter: TypeAdapter[PromptTemplate] = TypeAdapter(PromptTemplate)


class PromptTemplateCollection(_PromptModel):
    """Group of prompt templates for one use case."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    version: str = "1.0.0"
    templates: list[PromptTemplate]
    metadata: dict[str, Any] = Field(default_factory=dict)


def validate_prompt_template(template: Any) -> PromptTemplate:
    """Validate a prompt template against its schema."""
    try:
        return prompt_template_adapter.validate_python(template)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def validate_prompt_template_collection(collection: Any) -> PromptTemplateCollection:
    """Validate a prompt template collection against its schema."""
    try:
        return PromptTemplateCollection.model_validate(collection)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
