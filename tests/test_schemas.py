import pytest

from actionkit.errors import SchemaError
from actionkit.tools.schemas import ActionSchemas, SchemaFormat


def _forecast_parameters(p):
    p.property("city", type="string", description="City name", required=True)
    p.property("days", type="integer")


@pytest.fixture()
def schemas():
    registry = ActionSchemas("weather")
    registry.add_action("get_forecast", description="Get the forecast", parameters=_forecast_parameters)
    registry.add_action("list_cities", description="List supported cities")
    registry.add_action("alerts", description="Active alerts", parameters=lambda p: p.property("region", type="string"))
    return registry


def test_openai_format(schemas):
    rendered = schemas.to_openai_format()

    assert [r["function"]["name"] for r in rendered] == [
        "weather__get_forecast",
        "weather__list_cities",
        "weather__alerts",
    ]
    assert rendered[0] == {
        "type": "function",
        "function": {
            "name": "weather__get_forecast",
            "description": "Get the forecast",
            "parameters": {
                "type": "object",
                "properties": {
                    "city": {"type": "string", "description": "City name"},
                    "days": {"type": "integer"},
                },
                "required": ["city"],
            },
        },
    }
    assert "parameters" not in rendered[1]["function"]


def test_anthropic_format_renames_parameters(schemas):
    rendered = schemas.to_anthropic_format()

    assert rendered[0]["input_schema"]["required"] == ["city"]
    assert "parameters" not in rendered[0]
    assert rendered[1] == {"name": "weather__list_cities", "description": "List supported cities"}


def test_formats_are_derivable_from_openai(schemas):
    openai = schemas.to_provider_format(SchemaFormat.OPENAI)
    anthropic = schemas.to_provider_format("anthropic")
    gemini = schemas.to_gemini_format()

    assert gemini == [entry["function"] for entry in openai]
    expected_anthropic = []
    for entry in openai:
        function = dict(entry["function"])
        if "parameters" in function:
            function["input_schema"] = function.pop("parameters")
        expected_anthropic.append(function)
    assert anthropic == expected_anthropic


def test_rendered_schemas_are_copies(schemas):
    rendered = schemas.to_openai_format()
    rendered[0]["function"]["parameters"]["properties"].clear()

    assert schemas.get("get_forecast").parameters["properties"]


def test_unknown_format(schemas):
    with pytest.raises(ValueError):
        schemas.to_provider_format("cohere")


def test_action_without_block_has_no_parameters():
    registry = ActionSchemas("clock")
    schema = registry.add_action("now", description="Current time")

    assert schema.parameters is None
    assert schema.qualified_name == "clock__now"
    assert "now" in registry
    assert len(registry) == 1


def test_action_with_empty_block_is_rejected():
    registry = ActionSchemas("clock")

    with pytest.raises(SchemaError, match="action has no parameters"):
        registry.add_action("now", description="Current time", parameters=lambda p: None)
    assert len(registry) == 0


def test_action_requires_description():
    with pytest.raises(SchemaError, match="missing description"):
        ActionSchemas("clock").add_action("now", description="  ")


def test_redefining_an_action_keeps_its_position(schemas):
    schemas.add_action("get_forecast", description="Updated")

    assert [s.action_name for s in schemas] == ["get_forecast", "list_cities", "alerts"]
    assert schemas.get("get_forecast").description == "Updated"
