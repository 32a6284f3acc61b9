"""Unit tests for output schema registration and validation."""

import pytest

from autosymlink.api._output_schemas import get_output_schema, register_output_schema
from autosymlink.api._output_schemas.link import LinkDoctorOutput, LinkLinkOutput
from autosymlink.api.link.cmd_doctor import cmd_doctor
from autosymlink.api.link.cmd_link import cmd_link
from autosymlink.api.validate_output import validate_output


def test_link_schemas_registered():
    assert get_output_schema("link", "link") is LinkLinkOutput
    assert get_output_schema("link", "doctor") is LinkDoctorOutput
    assert get_output_schema("link", "nothing") is None


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("link", "link", LinkLinkOutput)


def test_validate_output_rejects_missing_fields():
    with pytest.raises(ValueError, match="Output validation failed for link.doctor"):
        validate_output(cmd_doctor, {"errors": [], "warnings": []})


def test_validate_output_fills_defaults():
    output = {
        "config_path": "/c.json",
        "links": [],
        "counts": {"created": 0, "skipped": 0, "failed": 0},
        "report": [],
        "summary": "0 created, 0 skipped, 0 failed",
    }
    validated = validate_output(cmd_link, output)
    assert validated["errors"] == []
    assert validated["warnings"] == []


def test_validate_output_skips_non_api_functions():
    def cmd_local():
        return None

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}
