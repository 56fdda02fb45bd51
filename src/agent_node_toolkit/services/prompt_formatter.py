# Prompt formatting
# Renders {{variable}}, {{#if}} and {{#each}} blocks in prompt templates

import json
import re
from typing import Any

from ..data.formatters import to_text
from ..models.prompt import CompletePromptTemplate, FunctionPromptTemplate, PromptTemplate

_CONDITIONAL_RE = re.compile(r"{{#if\s+([^}]+?)\s*}}(.*?){{/if}}", re.DOTALL)
_LOOP_RE = re.compile(r"{{#each\s+([^}]+?)\s*}}(.*?){{/each}}", re.DOTALL)
_ITEM_PROPERTY_RE = re.compile(r"{{this\.([^}]+)}}")
_LEFTOVER_RE = re.compile(r"{{[^}]+}}")


def _render_item(content: str, item: Any) -> str:
    if isinstance(item, (dict, list)):
        rendered = content.replace("{{this}}", json.dumps(item))
    else:
        rendered = content.replace("{{this}}", to_text(item))

    if isinstance(item, dict):
        rendered = _ITEM_PROPERTY_RE.sub(
            lambda m: to_text(item.get(m.group(1))), rendered
        )
    return rendered


def format_template(template: str, variables: dict[str, Any] | None = None) -> str:
    """Format a template string by replacing variables with values.

    Falsy values render as empty strings. Placeholders left unresolved after
    conditionals and loops are removed.
    """
    variables = variables or {}
    formatted = template

    for key, value in variables.items():
        pattern = re.compile(r"{{\s*" + re.escape(key) + r"\s*}}")
        replacement = to_text(value) if value else ""
        formatted = pattern.sub(lambda _m: replacement, formatted)

    formatted = _CONDITIONAL_RE.sub(
        lambda m: m.group(2) if variables.get(m.group(1)) else "", formatted
    )

    def render_loop(match: re.Match) -> str:
        items = variables.get(match.group(1))
        if not isinstance(items, (list, tuple)) or not items:
            return ""
        return "".join(_render_item(match.group(2), item) for item in items)

    formatted = _LOOP_RE.sub(render_loop, formatted)

    return _LEFTOVER_RE.sub("", formatted)


def format_prompt_template(template: PromptTemplate, variables: dict[str, Any] | None = None) -> PromptTemplate:
    """Return a copy of ``template`` with its text (and nested prompts) formatted."""
    update: dict[str, Any] = {"template": format_template(template.template, variables)}

    if isinstance(template, CompletePromptTemplate):
        update["prompts"] = [
            prompt.model_copy(update={"content": format_template(prompt.content, variables)})
            for prompt in template.prompts
        ]

    return template.model_copy(update=update, deep=True)


def prompt_template_to_message(template: PromptTemplate, variables: dict[str, Any] | None = None) -> dict[str, str]:
    """Convert a prompt template into a chat message dict."""
    formatted = format_prompt_template(template, variables)

    if isinstance(formatted, FunctionPromptTemplate):
        return {
            "role": "function",
            "content": formatted.template,
            "name": formatted.function_name,
        }
    return {"role": formatted.template_type, "content": formatted.template}


def prompt_templates_to_messages(
    templates: list[PromptTemplate], variables: dict[str, Any] | None = None
) -> list[dict[str, str]]:
    return [prompt_template_to_message(template, variables) for template in templates]


def create_system_message(content: str, variables: dict[str, Any] | None = None) -> dict[str, str]:
    return {"role": "system", "content": format_template(content, variables)}


def create_user_message(content: str, variables: dict[str, Any] | None = None) -> dict[str, str]:
    return {"role": "user", "content": format_template(content, variables)}


def create_assistant_message(content: str, variables: dict[str, Any] | None = None) -> dict[str, str]:
    return {"role": "assistant", "content": format_template(content, variables)}
