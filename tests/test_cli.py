"""Tests for the jdconv command line."""

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from jdconv.formats import RecordReader, RecordWriter, block_size
from jdconv.models import Patch800, Patch990, SpecialSetup800, SpecialSetup990

runner = CliRunner()


@pytest.fixture
def patch_file(tmp_path, messy_patch990):
    filepath = tmp_path / "messy.json"
    RecordWriter.write(messy_patch990, filepath)
    return filepath


class TestConvertCommand:
    def test_convert_patch(self, patch_file):
        result = runner.invoke(app, ["convert", str(patch_file)])

        assert result.exit_code == 0
        assert "Converted patch:" in result.output
        assert "Conversion Diagnostics" in result.output

        output = patch_file.with_name("messy_800.json")
        patch = RecordReader.read(output, Patch800)
        assert patch.common.name == "MESSY PATCH"

    def test_lossless_patch(self, tmp_path):
        source = tmp_path / "init.json"
        RecordWriter.write(Patch990(), source)

        result = runner.invoke(app, ["convert", str(source), "-o", str(tmp_path / "init.bin")])

        assert result.exit_code == 0
        assert "Lossless conversion." in result.output
        assert (tmp_path / "init.bin").stat().st_size == block_size(Patch800)

    def test_convert_setup(self, tmp_path):
        source = tmp_path / "drums.json"
        RecordWriter.write(SpecialSetup990(), source)

        result = runner.invoke(app, ["convert", str(source), "--setup", "-f", "bin", "-q"])

        assert result.exit_code == 0
        assert "Converted setup:" in result.output
        assert "Diagnostics" not in result.output
        output = tmp_path / "drums_800.bin"
        assert output.stat().st_size == block_size(SpecialSetup800)

    def test_missing_source(self, tmp_path):
        result = runner.invoke(app, ["convert", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unknown_format(self, patch_file):
        result = runner.invoke(app, ["convert", str(patch_file), "-f", "syx"])

        assert result.exit_code == 1
        assert "Unknown output format" in result.output

    def test_invalid_record(self, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text('{"common": {"patch_level": 200}}')

        result = runner.invoke(app, ["convert", str(source)])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestShowCommand:
    def test_show_patch(self, patch_file):
        result = runner.invoke(app, ["show", str(patch_file)])

        assert result.exit_code == 0
        assert "MESSY PATCH" in result.output

    def test_unknown_model(self, patch_file):
        result = runner.invoke(app, ["show", str(patch_file), "--model", "900"])

        assert result.exit_code == 1
        assert "Unknown model" in result.output


class TestJX8PCommand:
    def test_extract(self, tmp_path):
        frame = bytes([0xF0, 0x41, 0x35, 0x00, 0x21, 0x20]) + bytes(32) + b"\xf7"
        filepath = tmp_path / "tones.syx"
        filepath.write_bytes(frame * 2)

        result = runner.invoke(app, ["jx8p", str(filepath), "--raw"])

        assert result.exit_code == 0
        assert "JX-8P patch(es)" in result.output
        assert result.output.count("JX8P Patch Data:") == 2

    def test_parameter_grid(self, tmp_path):
        frame = bytes([0xF0, 0x41, 0x35, 0x00, 0x21, 0x20]) + bytes(range(32)) + b"\xf7"
        filepath = tmp_path / "tone.syx"
        filepath.write_bytes(frame)

        result = runner.invoke(app, ["jx8p", str(filepath)])

        assert result.exit_code == 0
        assert "Patch 1" in result.output
        assert "Offset" in result.output
        assert "1F" in result.output
        assert "JX8P Patch Data" not in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["jx8p", str(tmp_path / "none.syx")])

        assert result.exit_code == 1


class TestVersion:
    def test_version_command(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "jdconv" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
