"""Tests for clippath/config.py — option merging and clamping."""
import logging
import pytest
from clippath.config import ClipPathConfig, ConfigWarning, FIELD_ALIASES, clamp_config
from clippath.constants import (
    DEFAULT_CORNER_COUNT, DEFAULT_OUTER_RADIUS, DEFAULT_INNER_RADIUS_RATIO,
    DEFAULT_CORNER_RADIUS, DEFAULT_TILT,
)


class TestDefaults:
    def test_no_input(self):
        cfg, warnings = clamp_config()
        assert cfg == ClipPathConfig()
        assert warnings == []

    def test_default_values(self):
        cfg = ClipPathConfig()
        assert cfg.corner_count == DEFAULT_CORNER_COUNT == 4
        assert cfg.outer_radius == DEFAULT_OUTER_RADIUS == 1.0
        assert cfg.inner_radius_ratio == DEFAULT_INNER_RADIUS_RATIO == 0.4
        assert cfg.corner_radius == DEFAULT_CORNER_RADIUS == 1.0
        assert cfg.tilt == DEFAULT_TILT == 0.0

    def test_partial_merge(self):
        cfg, warnings = clamp_config({"tilt": 90})
        assert cfg == ClipPathConfig(tilt=90.0)
        assert warnings == []


class TestClamping:
    def test_clamp_scenario(self):
        cfg, warnings = clamp_config({"corner_count": 2, "outer_radius": 1.5, "tilt": 400})
        assert cfg.corner_count == 3
        assert cfg.outer_radius == 1.0
        assert cfg.tilt == 360.0
        assert {w.field for w in warnings} == {"corner_count", "outer_radius", "tilt"}

    def test_warning_contents(self):
        _, warnings = clamp_config({"outer_radius": 1.5})
        assert warnings == [ConfigWarning("outer_radius", 1.5, 1.0, "above maximum 1")]

    @pytest.mark.parametrize("field", ["outer_radius", "inner_radius_ratio", "corner_radius", "tilt"])
    def test_negative_clamped_to_zero(self, field):
        cfg, warnings = clamp_config({field: -0.5})
        assert getattr(cfg, field) == 0.0
        assert warnings[0].reason == "below minimum 0"

    def test_in_range_untouched(self):
        raw = {"corner_count": 7, "outer_radius": 0.8, "inner_radius_ratio": 0.45,
               "corner_radius": 0.7, "tilt": 270}
        cfg, warnings = clamp_config(raw)
        assert cfg == ClipPathConfig(7, 0.8, 0.45, 0.7, 270.0)
        assert warnings == []

    def test_corner_count_truncated(self):
        cfg, warnings = clamp_config({"corner_count": 5.7})
        assert cfg.corner_count == 5
        assert isinstance(cfg.corner_count, int)
        assert warnings[0].reason == "truncated to integer"

    def test_numeric_strings_accepted(self):
        cfg, warnings = clamp_config({"corner_count": "6", "tilt": "45.5"})
        assert cfg.corner_count == 6
        assert cfg.tilt == 45.5
        assert warnings == []

    def test_clamp_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="clippath.config"):
            clamp_config({"tilt": 400})
        assert "tilt" in caplog.text
        assert "360" in caplog.text


class TestIgnoredValues:
    @pytest.mark.parametrize("value", ["abc", None, [3], True, float("nan"), float("inf")])
    def test_bad_value_keeps_default(self, value):
        cfg, warnings = clamp_config({"corner_radius": value})
        assert cfg.corner_radius == DEFAULT_CORNER_RADIUS
        assert len(warnings) == 1
        assert warnings[0].applied is None

    def test_unknown_key(self):
        cfg, warnings = clamp_config({"sides": 6})
        assert cfg == ClipPathConfig()
        assert warnings == [ConfigWarning("sides", 6, None, "unknown option")]


class TestAliases:
    def test_camel_case_schema(self):
        cfg, warnings = clamp_config({
            "cornerCount": 3, "outerRadius": 0.9, "innerRadiusRatio": 0.45,
            "cornerRadius": 0.7, "tilt": 270,
        })
        assert cfg == ClipPathConfig(3, 0.9, 0.45, 0.7, 270.0)
        assert warnings == []

    def test_legacy_schema(self):
        cfg, _ = clamp_config({"corners": 6, "radius": 0.5, "ratio": 0.5, "cornerRadius": 0.2})
        assert cfg == ClipPathConfig(6, 0.5, 0.5, 0.2, 0.0)

    def test_last_alias_wins(self):
        cfg, _ = clamp_config({"corners": 5, "cornerCount": 8})
        assert cfg.corner_count == 8

    def test_aliases_cover_every_field(self):
        assert set(FIELD_ALIASES.values()) == set(ClipPathConfig._fields)
        for field in ClipPathConfig._fields:
            assert FIELD_ALIASES[field] == field
