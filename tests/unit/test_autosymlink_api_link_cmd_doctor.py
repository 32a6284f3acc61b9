"""Unit tests for autosymlink.api.link.cmd_doctor module."""

import os

from autosymlink.api.link.cmd_doctor import cmd_doctor
from autosymlink.api.validate_output import validate_output
from tests.unit.conftest import run_cmd, write_config


def test_cmd_doctor_all_ok(home, config_dir):
    (home / "a").write_text("a")
    os.symlink(f"{home}/a", home / "link-a")
    write_config(config_dir / "config.json", [{"source": "~/a", "destination": "~/link-a"}])

    result = run_cmd(cmd_doctor)

    assert result.success is True
    assert result.output["counts"]["ok"] == 1
    assert result.output["report"] == [f"[OK]       {home}/link-a -> {home}/a"]
    validate_output(cmd_doctor, result.output)


def test_cmd_doctor_classifies_every_status(home, config_dir):
    (home / "a").write_text("a")
    (home / "other").write_text("other")
    os.symlink(f"{home}/a", home / "ok")
    os.symlink(f"{home}/gone", home / "broken")
    os.symlink(f"{home}/other", home / "wrong")
    (home / "conflict").write_text("regular file")
    write_config(
        config_dir / "config.json",
        [
            {"source": "~/a", "destination": "~/ok"},
            {"source": "~/gone", "destination": "~/broken"},
            {"source": "~/a", "destination": "~/missing"},
            {"source": "~/a", "destination": "~/conflict"},
            {"source": "~/a", "destination": "~/wrong"},
        ],
    )

    result = run_cmd(cmd_doctor)

    assert [entry["outcome"] for entry in result.output["links"]] == [
        "ok",
        "broken",
        "missing",
        "not-a-symlink",
        "wrong-target",
    ]
    assert result.output["links"][4]["message"] == f"{home}/wrong -> {home}/other (expected {home}/a)"
    assert result.output["summary"] == "1 ok, 1 broken, 1 missing, 1 wrong, 1 conflict, 0 error"
    assert result.success is False


def test_cmd_doctor_never_mutates(home, config_dir):
    write_config(config_dir / "config.json", [{"source": "~/a", "destination": "~/sub/link"}])

    run_cmd(cmd_doctor)

    assert not (home / "sub").exists()


def test_cmd_doctor_inspection_error_is_reported(home, config_dir):
    (home / "file").write_text("x")
    write_config(
        config_dir / "config.json",
        [
            {"source": "~/a", "destination": "~/file/link"},
            {"source": "${nope_xyz}", "destination": "~/x"},
        ],
    )

    result = run_cmd(cmd_doctor)

    assert [entry["tag"] for entry in result.output["links"]] == ["[ERROR]", "[ERROR]"]
    assert result.output["counts"]["error"] == 2
    assert result.success is False


def test_cmd_doctor_empty_config_is_healthy(home, config_dir):
    write_config(config_dir / "config.json", [])

    result = run_cmd(cmd_doctor)

    assert result.success is True
    assert result.output["summary"] == "0 ok, 0 broken, 0 missing, 0 wrong, 0 conflict, 0 error"


def test_cmd_doctor_parse_error(home, config_dir):
    (config_dir / "config.json").write_text("not json")

    result = run_cmd(cmd_doctor)

    assert result.success is False
    assert "Failed to parse config file" in result.output["errors"][0]
    validate_output(cmd_doctor, result.output)
