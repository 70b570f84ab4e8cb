"""Tests for the CLI module."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner
from terraformer import __version__
from terraformer.cli import app

runner = CliRunner()

WIDE = {"COLUMNS": "200"}


class TestVersion:
    """Tests for version option."""

    def test_version_long(self) -> None:
        """Should print the version with --version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_short(self) -> None:
        """Should print the version with -v."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestNoArgs:
    """Tests for no arguments behavior."""

    def test_no_args_shows_help(self) -> None:
        """Should show help listing the commands."""
        result = runner.invoke(app)
        assert "generate" in result.output
        assert "validate" in result.output
        assert "info" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_file(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should write the module and the index."""
        result = runner.invoke(app, ["generate", str(space_center_json), "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "space_center.rs").exists()
        assert (tmp_path / "mod.rs").exists()
        assert "Wrote 2 file(s)" in result.output

    def test_generate_directory(self, services_dir: Path, tmp_path: Path) -> None:
        """Should compile every service file in a directory."""
        output = tmp_path / "out"
        result = runner.invoke(app, ["generate", str(services_dir), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in output.iterdir()) == [
            "drawing.rs",
            "mod.rs",
            "space_center.rs",
        ]

    def test_no_index(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should skip the index with --no-index."""
        result = runner.invoke(
            app, ["generate", str(space_center_json), "-o", str(tmp_path), "--no-index"]
        )
        assert result.exit_code == 0, result.output
        assert not (tmp_path / "mod.rs").exists()

    def test_extension(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should honour --extension."""
        result = runner.invoke(
            app,
            ["generate", str(space_center_json), "-o", str(tmp_path), "-e", ".txt", "--no-index"],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "space_center.txt").exists()

    def test_invalid_extension(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should reject an extension without a leading dot."""
        result = runner.invoke(
            app, ["generate", str(space_center_json), "-o", str(tmp_path), "-e", "rs"]
        )
        assert result.exit_code == 1
        assert list(tmp_path.iterdir()) == []

    def test_dry_run(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should list outputs without writing them."""
        output = tmp_path / "out"
        result = runner.invoke(
            app, ["generate", str(space_center_json), "-o", str(output), "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert "space_center.rs" in result.output
        assert "Would write" in result.output
        assert not output.exists()

    def test_templates(self, space_center_json: Path, tmp_path: Path) -> None:
        """Should use templates from --templates."""
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "service.rs.j2").write_text("// {{ service_name }}\n")
        output = tmp_path / "out"

        result = runner.invoke(
            app,
            ["generate", str(space_center_json), "-o", str(output), "-t", str(templates)],
        )
        assert result.exit_code == 0, result.output
        assert (output / "space_center.rs").read_text() == "// SpaceCenter\n"

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Should fail when the directory holds no service files."""
        source = tmp_path / "empty"
        source.mkdir()
        result = runner.invoke(app, ["generate", str(source), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "No .json files found" in result.output

    def test_nonexistent_input(self, tmp_path: Path) -> None:
        """Should reject a missing input path."""
        result = runner.invoke(app, ["generate", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

    def test_malformed_type(self, tmp_path: Path, minimal_service_data: dict) -> None:
        """Should report arity violations and write nothing."""
        minimal_service_data["procedures"] = {
            "Broken": {
                "id": 1,
                "documentation": "",
                "parameters": [],
                "return_type": {"code": "SET", "types": []},
            }
        }
        source = tmp_path / "broken.json"
        source.write_text(json.dumps({"Broken": minimal_service_data}))
        output = tmp_path / "out"

        result = runner.invoke(app, ["generate", str(source), "-o", str(output)])

        assert result.exit_code == 1
        assert "Malformed type" in result.output
        assert not (output / "broken.rs").exists()

    def test_unknown_type_code(self, tmp_path: Path, minimal_service_data: dict) -> None:
        """Should report schema errors with their location."""
        minimal_service_data["procedures"] = {
            "P": {
                "id": 1,
                "documentation": "",
                "parameters": [],
                "return_type": {"code": "BYTES"},
            }
        }
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"Demo": minimal_service_data}))

        result = runner.invoke(app, ["generate", str(source), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Service File Validation Failed" in result.output
        assert "Demo.procedures.P.return_type" in result.output
        assert "BYTES" in result.output

    def test_strict_rejects_warnings(self, tmp_path: Path, minimal_service_data: dict) -> None:
        """Should refuse to generate with --strict when a receiver is suspicious."""
        minimal_service_data["classes"] = {"Engine": {"documentation": "An engine."}}
        minimal_service_data["procedures"] = {
            "Engine_Activate": {"id": 1, "documentation": "", "parameters": []}
        }
        source = tmp_path / "engine.json"
        source.write_text(json.dumps({"Demo": minimal_service_data}))
        output = tmp_path / "out"

        lenient = runner.invoke(app, ["generate", str(source), "-o", str(output)])
        assert lenient.exit_code == 0, lenient.output

        strict = runner.invoke(
            app, ["generate", str(source), "-o", str(tmp_path / "strict"), "--strict"]
        )
        assert strict.exit_code == 1
        assert "W002" in strict.output
        assert not (tmp_path / "strict").exists()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_file(self, space_center_json: Path) -> None:
        """Should report a clean file as valid."""
        result = runner.invoke(app, ["validate", str(space_center_json)])
        assert result.exit_code == 0, result.output
        assert "is valid" in result.output

    def test_warnings(self, demo_json: Path) -> None:
        """Should pass with warnings for undocumented declarations."""
        result = runner.invoke(app, ["validate", str(demo_json)], env=WIDE)
        assert result.exit_code == 0, result.output
        assert "W003" in result.output
        assert "valid with warnings" in result.output

    def test_quiet(self, space_center_json: Path) -> None:
        """Should print nothing for a valid file with --quiet."""
        result = runner.invoke(app, ["validate", str(space_center_json), "--quiet"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_schema_error(self, tmp_path: Path, minimal_service_data: dict) -> None:
        """Should list schema errors and exit 1."""
        del minimal_service_data["enumerations"]
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"Demo": minimal_service_data}))

        result = runner.invoke(app, ["validate", str(source)], env=WIDE)
        assert result.exit_code == 1
        assert "Validation failed" in result.output
        assert "Demo.enumerations" in result.output

    def test_semantic_error(self, tmp_path: Path, minimal_service_data: dict) -> None:
        """Should exit 1 on undefined references."""
        minimal_service_data["procedures"] = {
            "P": {
                "id": 1,
                "documentation": "",
                "parameters": [],
                "return_type": {"code": "CLASS", "service": "Demo", "name": "Missing"},
            }
        }
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"Demo": minimal_service_data}))

        result = runner.invoke(app, ["validate", str(source)], env=WIDE)
        assert result.exit_code == 1
        assert "E001" in result.output

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Should report unparsable files."""
        source = tmp_path / "broken.json"
        source.write_text("{")

        result = runner.invoke(app, ["validate", str(source)], env=WIDE)
        assert result.exit_code == 1
        assert "JSON parsing error" in result.output


class TestInfoCommand:
    """Tests for the info command."""

    def test_summary(self, drawing_json: Path) -> None:
        """Should summarize each service."""
        result = runner.invoke(app, ["info", str(drawing_json)], env=WIDE)

        assert result.exit_code == 0, result.output
        assert "Drawing" in result.output
        assert "space_center::ReferenceFrame" in result.output

    def test_no_dependencies(self, space_center_json: Path) -> None:
        """Should show a dash when nothing is imported."""
        result = runner.invoke(app, ["info", str(space_center_json)], env=WIDE)
        assert result.exit_code == 0, result.output
        assert "space_center" in result.output
