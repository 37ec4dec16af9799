"""End-to-end tests for the changelog-catalog CLI."""

import csv
import io
import json
import logging
import os

import pytest

from catalog import main, render, run
from constants import Constants, ExitCodes


def _snapshot(version, filename):
    return os.path.join(Constants.SNAPSHOTS_FOLDER_NAME, version, filename)


def _update(version):
    return os.path.join(Constants.UPDATES_FOLDER_NAME, version, Constants.UPDATES_FILENAME)


def _json_out(capsys):
    return json.loads(capsys.readouterr().out)


class TestCommands:
    """Each sub-command against the compiled-in inventory."""

    def test_combinations(self, capsys):
        assert run(["combinations", "-q"]) == ExitCodes.SUCCESS.value
        result = _json_out(capsys)
        assert list(result) == ["1.9.x", "2.1.x", "2.2.x", "2.3.x"]
        assert result["2.3.x"] == [
            _snapshot("2.3.x", Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME),
            _snapshot("2.3.x", Constants.SNAPSHOTS_CORE_DATA_FILENAME),
            _update("2.4.x"),
        ]
        assert len(result["1.9.x"]) == 7

    def test_snapshot_combinations_csv(self, capsys):
        assert run(["combinations", "--snapshots-only", "-f", "csv", "-q"]) == 0
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
        assert rows[0] == ["version", "index", "path"]
        assert rows[1] == ["1.9.x", "0", _snapshot("1.9.x", Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME)]
        assert len(rows) == 1 + 2 * 4

    def test_snapshot(self, capsys):
        assert run(["snapshot", "2.1.3", "-q"]) == 0
        assert _json_out(capsys) == [
            _snapshot("2.1.x", Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME),
            _snapshot("2.1.x", Constants.SNAPSHOTS_CORE_DATA_FILENAME),
        ]

    def test_latest(self, capsys):
        assert run(["latest", "-q"]) == 0
        assert _json_out(capsys) == {
            "version": "2.3.x",
            "schema": _snapshot("2.3.x", Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME),
            "core_data": _snapshot("2.3.x", Constants.SNAPSHOTS_CORE_DATA_FILENAME),
        }

    def test_updates(self, capsys):
        assert run(["updates", "2.1.3", "-q"]) == 0
        assert _json_out(capsys) == ["2.2.x", "2.3.x", "2.4.x"]

    def test_updates_inclusive(self, capsys):
        assert run(["updates", "2.1.x", "--inclusive", "-q"]) == 0
        assert _json_out(capsys) == ["2.1.x", "2.2.x", "2.3.x", "2.4.x"]

    def test_updates_files(self, capsys):
        assert run(["updates", "2.3.0", "--files", "-q"]) == 0
        assert _json_out(capsys) == [_update("2.4.x")]


class TestErrors:
    """Error handling and exit codes."""

    def test_unknown_version(self, capsys):
        assert run(["updates", "9.9.9", "--inclusive"]) == ExitCodes.INVALID_VERSION.value
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "liquibase update version '9.9.x' does not exist" in captured.err

    def test_invalid_version(self, capsys):
        assert run(["snapshot", "2.1"]) == ExitCodes.INVALID_VERSION.value
        assert "does not match 'major.minor.' pattern" in capsys.readouterr().err

    def test_missing_config(self, tmp_path):
        assert run(["latest", "-q", "-c", str(tmp_path / "missing.yml")]) == ExitCodes.FILE_ERROR.value

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "inventory.yml"
        path.write_text("snapshots: ['2.1.x', '2.1.x']\n", encoding="utf-8")
        assert run(["latest", "-q", "-c", str(path)]) == ExitCodes.FILE_ERROR.value

    def test_main_exits_with_code(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["changelog-catalog", "snapshot", "nope", "-q"])
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == ExitCodes.INVALID_VERSION.value


class TestConfigAndOutput:
    """Alternate inventories and output files."""

    def test_custom_inventory(self, tmp_path, capsys):
        path = tmp_path / "inventory.yml"
        path.write_text("snapshots: []\nupdates: ['3.0.x']\n", encoding="utf-8")
        assert run(["latest", "-q", "-c", str(path)]) == 0
        assert _json_out(capsys) == {"version": None, "schema": None, "core_data": None}

    def test_config_from_environment(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "inventory.json"
        path.write_text(json.dumps({"snapshots": ["3.0.x"], "updates": ["3.0.x", "3.1.x"]}), encoding="utf-8")
        monkeypatch.setenv(Constants.ENV_CONFIG, str(path))
        assert run(["combinations", "-q"]) == 0
        assert _json_out(capsys) == {
            "3.0.x": [
                _snapshot("3.0.x", Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME),
                _snapshot("3.0.x", Constants.SNAPSHOTS_CORE_DATA_FILENAME),
                _update("3.1.x"),
            ]
        }

    def test_output_file_infers_csv(self, tmp_path, capsys):
        out = tmp_path / "updates.csv"
        assert run(["updates", "2.2.x", "-q", "-o", str(out)]) == 0
        assert capsys.readouterr().out == ""
        assert out.read_text(encoding="utf-8") == "index,version\n0,2.3.x\n1,2.4.x\n"

    def test_logfile(self, tmp_path):
        log_file = tmp_path / "catalog.log"
        assert run(["latest", "-q", "--loglevel", "debug", "--logfile", str(log_file)]) == 0
        assert "CLI start" in log_file.read_text(encoding="utf-8")

    def test_repeated_runs_write_each_record_once(self, tmp_path):
        log_file = tmp_path / "catalog.log"
        for _ in range(3):
            assert run(["latest", "-q", "--loglevel", "DEBUG", "--logfile", str(log_file)]) == 0
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert log_file.read_text(encoding="utf-8").count("CLI start") == 3

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "ERROR")
        assert run(["latest", "-q"]) == 0
        assert logging.getLogger().level == logging.ERROR

    def test_loglevel_option_beats_environment(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "ERROR")
        assert run(["latest", "-q", "--loglevel", "WARNING"]) == 0
        assert logging.getLogger().level == logging.WARNING


class TestCheck:
    """The check sub-command."""

    def test_in_sync(self, make_resources, capsys):
        assert run(["check", str(make_resources()), "-q"]) == ExitCodes.SUCCESS.value
        assert _json_out(capsys)["ok"] is True

    def test_out_of_sync(self, make_resources, capsys):
        root = make_resources(updates=("1.9.x", "2.0.x", "2.1.x", "2.2.x", "2.3.x"))
        assert run(["check", str(root), "-f", "csv"]) == ExitCodes.INVENTORY_MISMATCH.value
        captured = capsys.readouterr()
        assert captured.out == "kind,issue,version\nupdate,missing_on_disk,2.4.x\n"
        assert "update version 2.4.x: missing on disk" in captured.err

    def test_missing_resources_dir(self, tmp_path):
        assert run(["check", str(tmp_path / "nope"), "-q"]) == ExitCodes.FILE_ERROR.value


def test_render_json_uses_to_dict():
    class Payload:  # pylint: disable=too-few-public-methods
        def to_dict(self):
            return {"ok": True}

    assert json.loads(render(Payload(), [], "json")) == {"ok": True}
