"""Tests for the command line interface."""

import pytest
import yaml
from click.testing import CliRunner

from collectionql.cli.main import cli


@pytest.fixture
def inventory_path(tmp_path, inventory_data):
    path = tmp_path / "inventory.yml"
    path.write_text(yaml.safe_dump(inventory_data))
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestPrintSchema:
    """Tests for the print-schema command."""

    def test_stdout(self, runner, inventory_path):
        result = runner.invoke(cli, ["-i", str(inventory_path), "print-schema"])

        assert result.exit_code == 0, result.output
        assert "type Person implements Node" in result.output
        assert "allPeople(" in result.output

    def test_output_file(self, runner, inventory_path, tmp_path):
        output = tmp_path / "out" / "schema.graphql"
        result = runner.invoke(cli, ["-i", str(inventory_path), "print-schema", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "type Post implements Node" in output.read_text()

    def test_node_id_field_override(self, runner, inventory_path):
        result = runner.invoke(cli, ["-i", str(inventory_path), "print-schema", "--node-id-field", "globalId"])

        assert result.exit_code == 0, result.output
        assert "globalId: ID!" in result.output
        assert "nodeId" not in result.output

    def test_missing_inventory(self, runner, tmp_path):
        result = runner.invoke(cli, ["-i", str(tmp_path / "missing.yml"), "print-schema"])

        assert result.exit_code != 0
        assert "Inventory not found" in result.output

    def test_invalid_inventory(self, runner, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("collections:\n  people:\n    type: person\n")
        result = runner.invoke(cli, ["-i", str(path), "print-schema"])

        assert result.exit_code != 0
        assert "Invalid inventory" in result.output


class TestValidate:
    """Tests for the validate command."""

    def test_passes_with_warning(self, runner, inventory_path):
        result = runner.invoke(cli, ["-i", str(inventory_path), "validate"])

        assert result.exit_code == 0, result.output
        assert "post_id" in result.output
        assert "Validation passed" in result.output

    def test_strict_fails_on_warning(self, runner, inventory_path):
        result = runner.invoke(cli, ["-i", str(inventory_path), "validate", "--strict"])

        assert result.exit_code == 1


class TestInfo:
    def test_lists_collections(self, runner, inventory_path):
        result = runner.invoke(cli, ["-i", str(inventory_path), "info"])

        assert result.exit_code == 0, result.output
        assert "people" in result.output
        assert "author_id" in result.output
