"""CLI tests — ``main()`` is called in-process with tmp_path files."""

import json

import pytest

from wirelang.cli import main
from wirelang.examples import simple_led_circuit
from wirelang.transform.compiler import compile_dsl_to_db


CIRCUIT_SOURCE = """\
from wirelang import Circuit, DC, R, GND

schematic = Circuit("Cli Test", DC(5), R(100), GND())
"""

BROKEN_SOURCE = """\
from wirelang import Circuit, DC, R, GND

board = Circuit("Shorted", DC(5), R(0), GND())
"""


@pytest.fixture
def circuit_py(tmp_path):
    path = tmp_path / "circuit.py"
    path.write_text(CIRCUIT_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def led_json(tmp_path):
    path = tmp_path / "led.json"
    path.write_text(compile_dsl_to_db(simple_led_circuit()).to_json(), encoding="utf-8")
    return path


# ═══════════════════════════════════════════════════════════
# dsl2db / db2dsl
# ═══════════════════════════════════════════════════════════


class TestDsl2Db:
    def test_stdout(self, circuit_py, capsys):
        assert main(["dsl2db", str(circuit_py)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["schema"] == "wirelang-db@v1"
        assert data["name"] == "Cli Test"
        assert len(data["components"]) == 3

    def test_out_file(self, circuit_py, tmp_path):
        out = tmp_path / "circuit.json"
        assert main(["dsl2db", str(circuit_py), "--out", str(out)]) == 0
        assert json.loads(out.read_text(encoding="utf-8"))["name"] == "Cli Test"

    def test_missing_export(self, circuit_py, capsys):
        assert main(["dsl2db", str(circuit_py), "--export", "board"]) == 1
        assert "Export 'board' not found" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["dsl2db", str(tmp_path / "nope.py")]) == 1
        assert "wirelang: No such file" in capsys.readouterr().err


class TestDb2Dsl:
    def test_generates_source(self, led_json, capsys):
        assert main(["db2dsl", str(led_json)]) == 0
        source = capsys.readouterr().out
        assert source.startswith("from wirelang import (")
        assert "apply_component_identity" in source
        assert source.rstrip().endswith("schematic = s")

    def test_options(self, led_json, tmp_path):
        out = tmp_path / "led.py"
        code = main([
            "db2dsl", str(led_json), "--out", str(out),
            "--module", "circuits", "--export", "board", "--no-ids",
        ])
        assert code == 0
        source = out.read_text(encoding="utf-8")
        assert source.startswith("from circuits import (")
        assert "apply_component_identity" not in source
        assert source.endswith("board = s\n")

    def test_export_name_not_an_identifier(self, led_json, capsys):
        assert main(["db2dsl", str(led_json), "--export", "my-export"]) == 1
        assert "export_name must be a Python identifier" in capsys.readouterr().err

    def test_invalid_document(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{"schema": "other", "name": "x"}', encoding="utf-8")
        assert main(["db2dsl", str(bad)]) == 1
        assert "Document validation failed" in capsys.readouterr().err

    def test_unsupported_component(self, tmp_path, capsys):
        data = compile_dsl_to_db(simple_led_circuit()).to_dict()
        data["components"][1]["type"] = "memristor"
        path = tmp_path / "odd.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        assert main(["db2dsl", str(path)]) == 1
        assert "Unsupported component type: memristor" in capsys.readouterr().err


# ═══════════════════════════════════════════════════════════
# validate / example
# ═══════════════════════════════════════════════════════════


class TestValidate:
    def test_valid_document(self, led_json, capsys):
        assert main(["validate", str(led_json)]) == 0
        out = capsys.readouterr().out
        assert out.strip().endswith("LED Blinker: VALID (0 error(s), 0 warning(s))")

    def test_valid_module(self, circuit_py, capsys):
        assert main(["validate", str(circuit_py)]) == 0
        assert "Cli Test: VALID" in capsys.readouterr().out

    def test_invalid_module(self, tmp_path, capsys):
        path = tmp_path / "broken.py"
        path.write_text(BROKEN_SOURCE, encoding="utf-8")
        assert main(["validate", str(path), "--export", "board"]) == 1
        out = capsys.readouterr().out
        assert "error: Resistor: Resistance cannot be zero" in out
        assert "Shorted: INVALID (1 error(s), 0 warning(s))" in out


class TestExample:
    def test_summary(self, capsys):
        assert main(["example", "divider"]) == 0
        assert capsys.readouterr().out.startswith("Circuit: Voltage Divider")

    def test_json(self, capsys):
        assert main(["example", "led", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["name"] == "LED Blinker"

    def test_unknown_example(self):
        with pytest.raises(SystemExit):
            main(["example", "flux-capacitor"])
