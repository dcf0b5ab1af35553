"""Tests for configuration and suite selection."""

import pytest

from business_planner.config import SUITES, Config, _parse_suites


def test_default_suites():
    assert _parse_suites("") == SUITES


def test_parse_suites_trims_and_skips_blanks():
    assert _parse_suites(" knowledge-base, ,orchestration ") == ("knowledge-base", "orchestration")


def test_validate_defaults():
    assert Config.validate() is True


def test_validate_rejects_unknown_suite(monkeypatch):
    monkeypatch.setattr(Config, "ENABLED_SUITES", ("knowledge-base", "astrology"))

    with pytest.raises(ValueError, match="astrology"):
        Config.validate()


def test_validate_rejects_file_as_output_dir(monkeypatch, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    monkeypatch.setattr(Config, "OUTPUT_DIR", blocker)

    with pytest.raises(ValueError, match="not a directory"):
        Config.validate()


def test_display_lists_suites():
    assert "knowledge-base" in Config.display()


def test_build_registry_subset():
    from business_planner.tools import build_registry

    registry = build_registry(["market-research"])

    assert len(registry) == 4
    assert "perform-swot-analysis" not in registry


def test_build_registry_uses_config(monkeypatch):
    from business_planner.tools import build_registry

    monkeypatch.setattr(Config, "ENABLED_SUITES", ("orchestration",))
    assert len(build_registry()) == 5


def test_build_registry_unknown_suite():
    from business_planner.tools import build_registry

    with pytest.raises(ValueError):
        build_registry(["astrology"])
