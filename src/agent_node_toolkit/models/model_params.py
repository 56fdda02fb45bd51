# AI model parameter models
# Request parameters for chat, completion and embedding model calls

from typing import Any, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

MessageRole = Literal["system", "user", "assistant", "function", "tool"]

_ParamsModel = TypeVar("_ParamsModel", bound=BaseModel)


class _ModelParamsBase(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )


class ModelParams(_ModelParamsBase):
    """Sampling and limit parameters shared by chat and completion calls."""

    temperature: Optional[StrictFloat] = Field(default=None, ge=0, le=2)
    top_p: Optional[StrictFloat] = Field(default=None, ge=0, le=1, alias="topP")
    max_tokens: Optional[StrictInt] = Field(default=None, gt=0, alias="maxTokens")
    presence_penalty: Optional[StrictFloat] = Field(default=None, ge=-2, le=2, alias="presencePenalty")
    frequency_penalty: Optional[StrictFloat] = Field(default=None, ge=-2, le=2, alias="frequencyPenalty")
    timeout: Optional[StrictFloat] = Field(default=None, gt=0, description="Request timeout in seconds")


class ChatMessage(_ModelParamsBase):
    role: MessageRole
    # Plain text or a list of content parts
    content: str | list[Any]
    name: Optional[str] = None


class FunctionDefinition(_ModelParamsBase):
    name: str
    description: Optional[str] = None
    parameters: Optional[dict[str, Any]] = None


class ChatTool(_ModelParamsBase):
    type: str
    function: Optional[FunctionDefinition] = None


class ResponseFormat(_ModelParamsBase):
    type: Literal["text", "json_object"]


class ChatModelParams(ModelParams):
    model: str = Field(..., min_length=1)
    messages: list[ChatMessage]
    functions: Optional[list[FunctionDefinition]] = None
    tools: Optional[list[ChatTool]] = None
    response_format: Optional[ResponseFormat] = Field(default=None, alias="responseFormat")


class CompletionModelParams(ModelParams):
    model: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1)


class EmbeddingModelParams(_ModelParamsBase):
    model: str = Field(..., min_length=1)
    input: str | list[str]
    dimensions: Optional[StrictInt] = Field(default=None, gt=0)


def _validate(model: type[_ParamsModel], params: Any) -> _ParamsModel:
    try:
        return model.model_validate(params)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def validate_chat_model_params(params: Any) -> ChatModelParams:
    """Validate chat model parameters, raising ValidationError on failure."""
    return _validate(ChatModelParams, params)


def validate_completion_model_params(params: Any) -> CompletionModelParams:
    """Validate completion model parameters, raising ValidationError on failure."""
    return _validate(CompletionModelParams, params)


def validate_embedding_model_params(params: Any) -> EmbeddingModelParams:
    """Validate embedding model parameters, raising ValidationError on failure."""
    return _validate(EmbeddingModelParams, params)
