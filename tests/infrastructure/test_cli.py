"""CLI tests using click's CliRunner against a temporary data directory."""

from uuid import UUID

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


class TestProductCommands:

    def test_create_prints_id(self, run):
        result = run("product", "create", "--name", "Widget", "--price", "15.00")
        assert result.exit_code == 0, result.output
        UUID(result.output.strip())

    def test_create_then_get(self, run):
        created = run("product", "create", "--name", "iPhone 15 Pro", "--price", "1299.99")
        product_id = created.output.strip()

        result = run("product", "get", "--id", product_id)

        assert result.exit_code == 0, result.output
        assert "iPhone 15 Pro" in result.output
        assert "$1299.99" in result.output

    def test_get_unknown_id_fails(self, run):
        missing = "00000000-0000-0000-0000-000000000001"
        result = run("product", "get", "--id", missing)
        assert result.exit_code == 1
        assert f"Product with ID '{missing}' not found" in result.output

    def test_get_malformed_id_rejected(self, run):
        result = run("product", "get", "--id", "not-a-uuid")
        assert result.exit_code == 2

    def test_create_negative_price_fails(self, run):
        result = run("product", "create", "--name", "Widget", "--price", "-1")
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_list_empty(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_list_in_creation_order(self, run):
        for n in (1, 2, 3):
            run("product", "create", "--name", f"Product {n}", "--price", str(n * 100))

        lines = run("product", "list").output.splitlines()[2:]

        assert [line.split()[1:3] for line in lines] == [
            ["Product", "1"],
            ["Product", "2"],
            ["Product", "3"],
        ]

    def test_data_dir_from_environment(self, tmp_path):
        runner = CliRunner(env={"CATALOG_DATA_DIR": str(tmp_path)})
        runner.invoke(cli, ["product", "create", "--name", "Widget", "--price", "1"])
        assert (tmp_path / "products.json").exists()

    def test_damaged_catalog_reported_cleanly(self, run, tmp_path):
        (tmp_path / "products.json").write_text("{oops", encoding="utf-8")
        result = run("product", "list")
        assert result.exit_code == 1
        assert "Cannot read product catalog" in result.output
        assert not isinstance(result.exception, ValueError)
