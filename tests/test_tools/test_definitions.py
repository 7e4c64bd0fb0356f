"""Tests for the tool schemas offered to the model."""

from __future__ import annotations

from read_agent.tools import TOOLS, get_tool_definitions, read_file


class TestToolDefinitions:
    def test_only_read_is_offered(self) -> None:
        assert TOOLS == {"Read": read_file}
        assert [d.name for d in get_tool_definitions()] == ["Read"]

    def test_read_schema(self) -> None:
        (definition,) = get_tool_definitions()
        assert definition.description == "Read and return the contents of a file"
        assert definition.parameters["type"] == "object"
        assert definition.parameters["required"] == ["file_path"]
        assert definition.parameters["properties"]["file_path"]["type"] == "string"
