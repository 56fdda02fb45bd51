"""Loading tool definitions from JSON or YAML files."""

import json
import logging
import os
from pathlib import Path
from string import Template
from typing import List, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..models.tool import Tool
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def _substitute_env_vars(content: str) -> str:
    """Substitute ${VAR} references with environment values, leaving unknown ones intact."""
    return Template(content).safe_substitute(dict(os.environ))


def load_tool_definitions(path: Union[str, Path]) -> List[Tool]:
    """Read and validate tool definitions from a file.

    The file holds either a list of tools or a mapping with a ``tools`` list.
    Every tool is validated before any is returned; all problems are reported
    together, prefixed with the tool's position.
    """
    file_path = Path(path)
    raw_content = _substitute_env_vars(file_path.read_text(encoding="utf-8"))

    try:
        if file_path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw_content)
        else:
            data = json.loads(raw_content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Tool definition parsing failed for {file_path}: {e}")
        raise ValidationError([f"{file_path}: {e}"]) from e

    if isinstance(data, dict):
        data = data.get("tools")
    if not isinstance(data, list):
        raise ValidationError([f"{file_path}: expected a list of tools or a mapping with a 'tools' list"])

    tools: List[Tool] = []
    errors: List[str] = []
    for index, entry in enumerate(data):
        try:
            tools.append(Tool.model_validate(entry))
        except PydanticValidationError as e:
            errors.extend(ValidationError.from_pydantic(e, prefix=f"tools.{index}").errors)

    if errors:
        logger.error(f"{len(errors)} validation error(s) in {file_path}")
        raise ValidationError(errors)

    logger.info(f"Loaded {len(tools)} tool definitions from {file_path}")
    return tools


def register_tools_from_file(registry: ToolRegistry, path: Union[str, Path]) -> List[Tool]:
    """Load tool definitions from a file and register them in order."""
    return registry.register_many(load_tool_definitions(path))
