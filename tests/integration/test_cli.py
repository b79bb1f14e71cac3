"""End-to-end tests for the command line entry point."""

import json
import pytest
from ast import literal_eval

from collkit.cli import EXIT_OK, EXIT_USAGE, main
from collkit.demo import PIPELINES


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep any collkit.yaml in the real working directory out of the way."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCli:
    """Test the collkit CLI."""

    def test_default_pipeline_prints_summary(self, capsys):
        assert main([]) == EXIT_OK

        out = capsys.readouterr().out
        result = literal_eval(out)
        assert result["names"][0] == "GRUNT-MOCHA-CLI"
        assert result["keywordCount"]["LODASH"] == 7

    def test_json_format(self, capsys):
        assert main(["times-ten", "--format", "json"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == [10, 20, 30, 40]

    def test_list(self, capsys):
        assert main(["--list"]) == EXIT_OK
        lines = capsys.readouterr().out.strip().splitlines()
        assert [line.split()[0] for line in lines] == list(PIPELINES)

    def test_all(self, capsys):
        assert main(["--all", "--format", "json"]) == EXIT_OK
        out = capsys.readouterr().out
        headers = [line for line in out.splitlines() if line.startswith("# ")]
        assert headers == [f"# {name}" for name in PIPELINES]

    def test_data_flag(self, capsys, isolated_cwd):
        data = isolated_cwd / "data.json"
        data.write_text(json.dumps([{"name": "x", "author": "me"}]))

        assert main(["authors", "--data", str(data), "--format", "json"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == ["me"]

    def test_config_dir_flag(self, capsys, tmp_path_factory):
        config_dir = tmp_path_factory.mktemp("cfg")
        (config_dir / "collkit.yaml").write_text("output:\n  format: json\n  indent: 0\n")

        assert main(["times-ten", "--config-dir", str(config_dir)]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "[10, 20, 30, 40]"

    def test_unknown_pipeline(self, capsys):
        assert main(["nope"]) == EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown pipeline 'nope'" in captured.err

    def test_missing_dataset(self, capsys):
        assert main(["authors", "--data", "missing.yaml"]) == EXIT_USAGE
        assert "Dataset file not found" in capsys.readouterr().err

    def test_invalid_log_level(self, capsys):
        assert main(["--log-level", "LOUD"]) == EXIT_USAGE
        assert "logging.level" in capsys.readouterr().err

    def test_debug_logs_stay_off_stdout(self, capsys):
        assert main(["times-ten", "--log-level", "DEBUG", "--log-json", "--format", "json"]) == EXIT_OK
        captured = capsys.readouterr()
        assert json.loads(captured.out) == [10, 20, 30, 40]
        assert "Pipeline finished" in captured.err

    def test_bad_format_choice(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--format", "xml"])
        assert exc_info.value.code == 2

    def test_empty_dataset_for_first_record_pipelines(self, capsys, isolated_cwd):
        data = isolated_cwd / "empty.json"
        data.write_text("[]")

        for name in ("pluck-first", "pluck-record"):
            assert main([name, "--data", str(data)]) == EXIT_USAGE
            captured = capsys.readouterr()
            assert captured.out == ""
            assert f"Pipeline '{name}' needs at least one record" in captured.err

    def test_record_without_name(self, capsys, isolated_cwd):
        data = isolated_cwd / "data.yaml"
        data.write_text("- license: MIT\n")

        assert main(["--data", str(data)]) == EXIT_USAGE
        assert "needs a string 'name'" in capsys.readouterr().err

        assert main(["uppercase-names", "--data", str(data)]) == EXIT_USAGE
        assert "record 0 has None" in capsys.readouterr().err

    def test_misspelled_config_key(self, capsys, isolated_cwd):
        (isolated_cwd / "collkit.yaml").write_text("pluck:\n  defualt: n/a\n")

        assert main(["pluck-first"]) == EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "pluck.defualt: Unknown key" in captured.err

    def test_empty_config_section(self, capsys, isolated_cwd):
        (isolated_cwd / "collkit.yaml").write_text("output:\n")

        assert main(["times-ten"]) == EXIT_USAGE
        assert "output: Must be a mapping" in capsys.readouterr().err
