"""CLI generate command integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from kibana_index_pattern.cli import cli


def _write_fields(beat_dir: Path) -> None:
    (beat_dir / "fields.yml").write_text(
        """
- key: beat
  title: Beat
  fields:
    - name: "@timestamp"
      type: date
    - name: host
      type: keyword
""",
        encoding="utf-8",
    )


def test_generate_command_writes_both_files(tmp_path: Path) -> None:
    _write_fields(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "--index",
            "beat-*",
            "--name",
            "b eat ?!",
            "--beat-dir",
            str(tmp_path),
            "--kibana-version",
            "7.0.0",
        ],
    )

    assert result.exit_code == 0
    legacy_path = tmp_path / "_meta/kibana/5.x/index-pattern/beat.json"
    default_path = tmp_path / "_meta/kibana/default/index-pattern/beat.json"
    output_lines = result.output.splitlines()
    assert str(legacy_path) in output_lines
    assert str(default_path) in output_lines
    assert json.loads(legacy_path.read_text(encoding="utf-8"))["title"] == "beat-*"
    assert json.loads(default_path.read_text(encoding="utf-8"))["version"] == "7.0.0"


def test_generate_command_can_omit_time_field(tmp_path: Path) -> None:
    _write_fields(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "-v",
            "generate",
            "--index",
            "beat-*",
            "--name",
            "beat",
            "--beat-dir",
            str(tmp_path),
            "--kibana-version",
            "7.0.0",
            "--time-field",
            "",
        ],
    )

    assert result.exit_code == 0
    legacy = json.loads(
        (tmp_path / "_meta/kibana/5.x/index-pattern/beat.json").read_text(encoding="utf-8")
    )
    assert "timeFieldName" not in legacy
