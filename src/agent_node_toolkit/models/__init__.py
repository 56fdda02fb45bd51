"""Pydantic models for tool and prompt definitions."""

from .model_params import (
    ChatModelParams,
    CompletionModelParams,
    EmbeddingModelParams,
    ModelParams,
    validate_chat_model_params,
    validate_completion_model_params,
    validate_embedding_model_params,
)
from .parameter import (
    ArrayParameter,
    BooleanParameter,
    NumberParameter,
    ObjectParameter,
    Parameter,
    ParameterBase,
    StringParameter,
    validate_parameter,
)
from .prompt import (
    AssistantPromptTemplate,
    CompletePromptTemplate,
    FunctionPromptTemplate,
    PromptMessage,
    PromptTemplate,
    PromptTemplateCollection,
    SystemPromptTemplate,
    UserPromptTemplate,
    validate_prompt_template,
    validate_prompt_template_collection,
)
from .tool import Tool, ToolExample, validate_tool

__all__ = [
    "ArrayParameter",
    "AssistantPromptTemplate",
    "BooleanParameter",
    "ChatModelParams",
    "CompletionModelParams",
    "CompletePromptTemplate",
    "EmbeddingModelParams",
    "FunctionPromptTemplate",
    "ModelParams",
    "NumberParameter",
    "ObjectParameter",
    "Parameter",
    "ParameterBase",
    "PromptMessage",
    "PromptTemplate",
    "PromptTemplateCollection",
    "StringParameter",
    "SystemPromptTemplate",
    "Tool",
    "ToolExample",
    "UserPromptTemplate",
    "validate_chat_model_params",
    "validate_completion_model_params",
    "validate_embedding_model_params",
    "validate_parameter",
    "validate_prompt_template",
    "validate_prompt_template_collection",
    "validate_tool",
]
