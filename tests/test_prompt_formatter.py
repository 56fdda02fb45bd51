import pytest

from agent_node_toolkit.errors import ValidationError
from agent_node_toolkit.models.prompt import (
    CompletePromptTemplate,
    FunctionPromptTemplate,
    SystemPromptTemplate,
    validate_prompt_template,
    validate_prompt_template_collection,
)
from agent_node_toolkit.services.prompt_formatter import (
    create_system_message,
    create_user_message,
    format_prompt_template,
    format_template,
    prompt_template_to_message,
    prompt_templates_to_messages,
)


@pytest.fixture
def system_template():
    return validate_prompt_template({
        "id": "support-system",
        "name": "Support system prompt",
        "templateType": "system",
        "template": "You are a support agent for {{company}}.",
        "variables": ["company"],
    })


class TestFormatTemplate:
    def test_variables_are_replaced(self):
        assert format_template("Hello {{ name }}, you are {{age}}", {"name": "Ada", "age": 36}) == "Hello Ada, you are 36"

    def test_falsy_values_render_empty(self):
        assert format_template("[{{a}}][{{b}}][{{c}}]", {"a": 0, "b": None, "c": False}) == "[][][]"

    def test_lists_and_dicts(self):
        assert format_template("{{tags}}", {"tags": ["a", "b"]}) == "a,b"
        assert format_template("{{meta}}", {"meta": {"k": 1}}) == '{"k": 1}'

    def test_conditional_blocks(self):
        template = "Start{{#if premium}} VIP{{/if}} end"

        assert format_template(template, {"premium": True}) == "Start VIP end"
        assert format_template(template, {"premium": False}) == "Start end"
        assert format_template(template) == "Start end"

    def test_each_blocks(self):
        template = "Items:{{#each items}} {{this}}{{/each}}"

        assert format_template(template, {"items": ["a", "b"]}) == "Items: a b"
        assert format_template(template, {"items": []}) == "Items:"

    def test_each_block_item_properties(self):
        template = "{{#each users}}{{this.name}}<{{this.email}}>;{{/each}}"
        users = [{"name": "Ada", "email": "ada@example.com"}, {"name": "Alan"}]

        assert format_template(template, {"users": users}) == "Ada<ada@example.com>;Alan<>;"

    def test_unresolved_placeholders_are_removed(self):
        assert format_template("Hi {{name}}{{missing}}!", {"name": "Bo"}) == "Hi Bo!"


class TestPromptTemplates:
    def test_template_type_selects_variant(self, system_template):
        assert isinstance(system_template, SystemPromptTemplate)
        assert system_template.version == "1.0.0"

    def test_function_template_requires_function_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_prompt_template({
                "id": "f",
                "name": "Function",
                "templateType": "function",
                "template": "Result: {{result}}",
            })

        assert any("functionName" in e for e in exc_info.value.errors)

    def test_unknown_template_type_is_rejected(self):
        with pytest.raises(ValidationError):
            validate_prompt_template({"id": "x", "name": "X", "templateType": "narrator", "template": "t"})

    def test_collection(self, system_template):
        collection = validate_prompt_template_collection({
            "id": "support",
            "name": "Support prompts",
            "templates": [system_template.model_dump()],
        })

        assert collection.templates == [system_template]

    def test_format_prompt_template_returns_copy(self, system_template):
        formatted = format_prompt_template(system_template, {"company": "Acme"})

        assert formatted.template == "You are a support agent for Acme."
        assert system_template.template == "You are a support agent for {{company}}."

    def test_complete_template_formats_nested_prompts(self):
        template = validate_prompt_template({
            "id": "chat",
            "name": "Chat",
            "templateType": "complete",
            "template": "{{topic}} conversation",
            "prompts": [
                {"role": "system", "content": "Discuss {{topic}}"},
                {"role": "user", "content": "Tell me about {{topic}}"},
            ],
        })

        formatted = format_prompt_template(template, {"topic": "tides"})

        assert isinstance(formatted, CompletePromptTemplate)
        assert [p.content for p in formatted.prompts] == ["Discuss tides", "Tell me about tides"]
        assert template.prompts[0].content == "Discuss {{topic}}"


class TestMessages:
    def test_system_template_to_message(self, system_template):
        assert prompt_template_to_message(system_template, {"company": "Acme"}) == {
            "role": "system",
            "content": "You are a support agent for Acme.",
        }

    def test_function_template_to_message(self):
        template = FunctionPromptTemplate(
            id="weather",
            name="Weather result",
            template="It is {{temp}} degrees",
            function_name="weatherInfo",
        )

        assert prompt_template_to_message(template, {"temp": 21}) == {
            "role": "function",
            "content": "It is 21 degrees",
            "name": "weatherInfo",
        }

    def test_templates_to_messages(self, system_template):
        user = validate_prompt_template({
            "id": "ask",
            "name": "Ask",
            "templateType": "user",
            "template": "{{question}}",
        })

        messages = prompt_templates_to_messages([system_template, user], {"company": "Acme", "question": "Hi?"})

        assert [m["role"] for m in messages] == ["system", "user"]
        assert messages[1]["content"] == "Hi?"

    def test_create_messages(self):
        assert create_system_message("Be {{tone}}", {"tone": "brief"}) == {"role": "system", "content": "Be brief"}
        assert create_user_message("plain") == {"role": "user", "content": "plain"}
