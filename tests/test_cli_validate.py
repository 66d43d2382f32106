"""Tests for `graphql-schema-policy validate` CLI command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from gqlpolicy import __version__
from gqlpolicy.cli import main

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

WIDGET_SDL = "type Widget { id: ID name: String }\n"

DOCUMENTED_SDL = '''
"""Reads."""
type Query {
  """Find a widget."""
  widget: Widget
}

"""A widget."""
type Widget {
  """Identifier."""
  id: ID
}
'''


class TestValidateCommand:
    """Tests for the `validate` command."""

    def test_clean_schema_exits_zero(
        self,
        write_schema: Callable[..., Path],
        write_config: Callable[..., Path],
        all_rules: dict[str, bool],
    ) -> None:
        schema = write_schema(DOCUMENTED_SDL)
        config = write_config(all_rules)
        result = CliRunner().invoke(main, ["validate", str(schema), str(config)])
        assert result.exit_code == 0, result.output
        assert f"Schema loaded: {schema}" in result.output
        assert "validation passed" in result.output

    def test_violations_exit_one(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema(WIDGET_SDL)
        config = write_config(
            {
                "validateTypeType": True,
                "validateBasicTypeFields": True,
                "alphabeticalOrderFields": True,
            }
        )
        result = CliRunner().invoke(main, ["validate", str(schema), str(config)])
        assert result.exit_code == 1, result.output
        assert '✗ Type "Widget" is missing documentation' in result.output
        assert '✗ Field "Widget.id" is missing documentation' in result.output
        assert '✗ Field "Widget.name" is missing documentation' in result.output
        assert "3 violations found" in result.output

    def test_empty_rules_exit_zero(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema(WIDGET_SDL)
        config = write_config({})
        result = CliRunner().invoke(main, ["validate", str(schema), str(config)])
        assert result.exit_code == 0, result.output

    def test_alias(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema(WIDGET_SDL)
        config = write_config({"validateTypeType": True})
        result = CliRunner().invoke(main, ["v", str(schema), str(config)])
        assert result.exit_code == 1, result.output

    def test_glob_schema_path(
        self,
        tmp_path: Path,
        write_schema: Callable[..., Path],
        write_config: Callable[..., Path],
    ) -> None:
        write_schema('"""Reads."""\ntype Query { "A." a: Int }\n', "schema/query.graphql")
        write_schema('extend type Query { b: Int }\n', "schema/more/ext.graphql")
        config = write_config({"validateQueryFields": True})
        pattern = str(tmp_path / "schema" / "**" / "*.graphql")
        result = CliRunner().invoke(main, ["validate", pattern, str(config)])
        assert result.exit_code == 1, result.output
        assert 'Query field "Query.b" is missing documentation' in result.output
        assert "Query.a" not in result.output

    def test_json_format(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema(WIDGET_SDL)
        config = write_config({"validateTypeType": True})
        result = CliRunner().invoke(
            main, ["validate", str(schema), str(config), "--format", "json"]
        )
        assert result.exit_code == 1, result.output
        data = json.loads(result.output)
        assert data["violations"] == ['Type "Widget" is missing documentation']
        assert data["summary"]["violations_count"] == 1


class TestValidateFailures:
    """Load and configuration failures exit 2."""

    def test_missing_schema(self, tmp_path: Path, write_config: Callable[..., Path]) -> None:
        config = write_config({})
        result = CliRunner().invoke(
            main, ["validate", str(tmp_path / "missing.graphql"), str(config)]
        )
        assert result.exit_code == 2
        assert "failed to load schema" in result.output

    def test_invalid_schema(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema("type Widget {")
        config = write_config({})
        result = CliRunner().invoke(main, ["validate", str(schema), str(config)])
        assert result.exit_code == 2
        assert "failed to load schema" in result.output

    def test_malformed_config(self, tmp_path: Path, write_schema: Callable[..., Path]) -> None:
        schema = write_schema(WIDGET_SDL)
        config = tmp_path / "config.json"
        config.write_text("{not json")
        result = CliRunner().invoke(main, ["validate", str(schema), str(config)])
        assert result.exit_code == 2
        assert "invalid configuration" in result.output
        assert "missing documentation" not in result.output

    def test_missing_config(self, tmp_path: Path, write_schema: Callable[..., Path]) -> None:
        schema = write_schema(WIDGET_SDL)
        result = CliRunner().invoke(
            main, ["validate", str(schema), str(tmp_path / "none.json")]
        )
        assert result.exit_code == 2
        assert "invalid configuration" in result.output


class TestMainGroup:
    """Group-level options."""

    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_validate(self) -> None:
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "validate" in result.output

    def test_verbose_flag(
        self, write_schema: Callable[..., Path], write_config: Callable[..., Path]
    ) -> None:
        schema = write_schema(WIDGET_SDL)
        config = write_config({})
        result = CliRunner().invoke(main, ["--verbose", "validate", str(schema), str(config)])
        assert result.exit_code == 0, result.output
