"""Unit tests for autosymlink.api.link.cmd_link module."""

import os

from autosymlink.api.link.cmd_link import cmd_link
from autosymlink.api.validate_output import validate_output
from tests.unit.conftest import run_cmd, write_config


def test_cmd_link_creates_links(home, config_dir):
    (home / ".dotfiles").mkdir()
    (home / ".dotfiles" / "bashrc").write_text("# bashrc")
    write_config(
        config_dir / "config.json",
        [{"source": "${dotfiles}/bashrc", "destination": "~/.bashrc"}],
        aliases={"dotfiles": "${_home}/.dotfiles"},
    )

    result = run_cmd(cmd_link)

    assert result.success is True
    assert result.output["errors"] == []
    assert result.output["counts"] == {"created": 1, "skipped": 0, "failed": 0}
    assert result.output["config_path"] == str(config_dir / "config.json")
    assert result.result == "1 created, 0 skipped, 0 failed"
    assert os.readlink(home / ".bashrc") == f"{home}/.dotfiles/bashrc"
    validate_output(cmd_link, result.output)


def test_cmd_link_declaration_order_and_mixed_outcomes(home, config_dir):
    (home / "a").write_text("a")
    (home / "existing").write_text("keep")
    write_config(
        config_dir / "config.json",
        [
            {"source": "~/a", "destination": "~/link-a"},
            {"source": "~/a", "destination": "~/existing"},
            {"source": "~/missing", "destination": "~/link-missing"},
        ],
    )

    result = run_cmd(cmd_link)

    assert [entry["outcome"] for entry in result.output["links"]] == ["created", "skipped", "created-broken"]
    assert result.output["counts"] == {"created": 2, "skipped": 1, "failed": 0}
    assert result.success is True


def test_cmd_link_failure_does_not_stop_batch(home, config_dir):
    (home / "a").write_text("a")
    (home / "blocker").write_text("file, not a directory")
    write_config(
        config_dir / "config.json",
        [
            {"source": "~/a", "destination": "~/blocker/inside"},
            {"source": "~/a", "destination": "~/link-a"},
        ],
    )

    result = run_cmd(cmd_link)

    assert [entry["outcome"] for entry in result.output["links"]] == ["failed", "created"]
    assert result.success is False
    assert (home / "link-a").is_symlink()


def test_cmd_link_expansion_error_is_per_link(home, config_dir):
    (home / "a").write_text("a")
    write_config(
        config_dir / "config.json",
        [
            {"source": "${undefined_alias_xyz}/a", "destination": "~/broken"},
            {"source": "~/a", "destination": "~/link-a"},
        ],
    )

    result = run_cmd(cmd_link)

    first = result.output["links"][0]
    assert first["outcome"] == "error"
    assert first["tag"] == "[FAIL]"
    assert "undefined_alias_xyz" in first["message"]
    assert result.output["links"][1]["outcome"] == "created"
    assert result.output["counts"]["failed"] == 1
    assert result.success is False


def test_cmd_link_config_not_found(home):
    result = run_cmd(cmd_link, config_path=str(home / "nope.json"))

    assert result.success is False
    assert "Config file not found" in result.output["errors"][0]
    assert result.output["links"] == []
    assert result.output["summary"] == ""
    assert result.result.startswith("Configuration error:")
    validate_output(cmd_link, result.output)


def test_cmd_link_bad_alias_aborts_before_any_link(home, config_dir):
    write_config(
        config_dir / "config.json",
        [{"source": "/tmp", "destination": "~/never-created"}],
        aliases={"loop": "${loop}"},
    )

    result = run_cmd(cmd_link)

    assert result.success is False
    assert "maximum depth" in result.output["errors"][0]
    assert not os.path.lexists(home / "never-created")


def test_cmd_link_force(home, config_dir):
    (home / "a").write_text("a")
    (home / "dest").write_text("old")
    write_config(config_dir / "config.json", [{"source": "~/a", "destination": "~/dest", "force": True}])

    result = run_cmd(cmd_link)

    assert result.output["links"][0]["outcome"] == "created"
    assert os.readlink(home / "dest") == f"{home}/a"


def test_cmd_link_rejected_path_does_not_stop_batch(home, config_dir):
    (home / "a").write_text("a")
    write_config(
        config_dir / "config.json",
        [
            {"source": "~/a", "destination": "~/bad\u0000dir/x"},
            {"source": "~/a", "destination": "~/link-a"},
        ],
    )

    result = run_cmd(cmd_link)

    assert [entry["outcome"] for entry in result.output["links"]] == ["failed", "created"]
    assert result.output["counts"] == {"created": 1, "skipped": 0, "failed": 1}
    assert result.success is False
    assert (home / "link-a").is_symlink()
