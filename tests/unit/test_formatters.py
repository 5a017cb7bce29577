import json

import pytest

from settingsflat.core.flattener import flatten
from settingsflat.core.loader import describe_formatters, discover_formatter_plugins, formatter_choices, select_formatter
from settingsflat.formatters.azure import AzureFormatter
from settingsflat.formatters.compose import DockerComposeFormatter


def test_azure_record_for_single_setting():
    text = AzureFormatter().render(flatten({"x": "y"}), slot_setting=True)
    assert json.loads(text) == [{"name": "x", "value": "y", "slotSetting": True}]


def test_azure_output_is_indented_and_ordered():
    text = AzureFormatter().render(flatten({"b": {"c": 1}, "a": "z"}))
    records = json.loads(text)
    assert [r["name"] for r in records] == ["b:c", "a"]
    assert all(r["slotSetting"] is False for r in records)
    assert '\n  {\n    "name": "b:c",' in text


def test_azure_keeps_non_ascii_text():
    text = AzureFormatter().render(flatten({"city": "Zürich"}))
    assert "Zürich" in text


def test_compose_lines():
    text = DockerComposeFormatter().render(flatten({"x": "y", "z": "w"}))
    assert text == "- x=y\n- z=w"


def test_compose_ignores_slot_setting():
    mapping = flatten({"a": [True, None]})
    assert DockerComposeFormatter().render(mapping, slot_setting=True) == "- a:0=true\n- a:1=null"


def test_empty_mapping_renders_empty_output():
    mapping = flatten({})
    assert AzureFormatter().render(mapping) == "[]"
    assert DockerComposeFormatter().render(mapping) == ""


def test_discovery_finds_both_formatters():
    plugins = discover_formatter_plugins()
    assert set(plugins) == {"azure", "docker-compose"}
    assert "compose" in formatter_choices(plugins)


@pytest.mark.parametrize("selector", ["docker-compose", "DockerCompose", "docker_compose", " compose "])
def test_select_formatter_is_forgiving(selector):
    plugins = discover_formatter_plugins()
    assert select_formatter(plugins, selector).NAME == "docker-compose"


def test_select_formatter_unknown():
    with pytest.raises(KeyError):
        select_formatter(discover_formatter_plugins(), "yaml")


def test_describe_formatters_lists_names_and_descriptions():
    lines = describe_formatters(discover_formatter_plugins())
    assert lines[0].startswith("  azure (aliases: records): JSON list")
    assert "docker-compose (aliases: compose, dockercompose)" in lines[1]
