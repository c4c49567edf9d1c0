"""test_overrides.py - Unit tests for the level override source.

Covers:
    - property_key() naming
    - setprop / getprop / clear on SystemProperties
    - Environment fallback and precedence of programmatic properties
    - load() of local.prop-style files
    - get_level() parsing, missing and unrecognised values
"""

import pytest

from xloglib.overrides import SystemProperties, property_key
from xloglib.priority import DEBUG, SUPPRESS, WARN


class TestSystemProperties:
    def test_property_key_uses_log_tag_prefix(self):
        assert property_key("MyApp") == "log.tag.MyApp"

    def test_getprop_returns_default_when_unset(self):
        props = SystemProperties(environ={})
        assert props.getprop("log.tag.MyApp") is None
        assert props.getprop("log.tag.MyApp", "INFO") == "INFO"

    def test_setprop_then_getprop(self):
        props = SystemProperties(environ={})
        props.setprop("log.tag.MyApp", "DEBUG")
        assert props.getprop("log.tag.MyApp") == "DEBUG"

    def test_setprop_none_removes_property(self):
        props = SystemProperties(environ={})
        props.setprop("log.tag.MyApp", "DEBUG")
        props.setprop("log.tag.MyApp", None)
        assert props.getprop("log.tag.MyApp") is None

    def test_clear_removes_programmatic_properties(self):
        props = SystemProperties(environ={})
        props.setprop("a", "1")
        props.clear()
        assert props.getprop("a") is None

    def test_environment_fallback(self):
        """Keys missing from the store are looked up in the environment."""
        props = SystemProperties(environ={"log.tag.MyApp": "WARN"})
        assert props.get_level("MyApp") is WARN

    def test_programmatic_property_wins_over_environment(self):
        props = SystemProperties(environ={"log.tag.MyApp": "WARN"})
        props.setprop("log.tag.MyApp", "DEBUG")
        assert props.get_level("MyApp") is DEBUG

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("log.tag.EnvApp", "SUPPRESS")
        assert SystemProperties().get_level("EnvApp") == SUPPRESS


class TestGetLevel:
    def test_get_level_missing_entry_is_none(self, props):
        assert props.get_level("MyApp") is None

    def test_get_level_parses_value(self, props):
        props.setprop("log.tag.MyApp", "debug")
        assert props.get_level("MyApp") is DEBUG

    def test_get_level_unrecognised_value_is_none(self, props):
        props.setprop("log.tag.MyApp", "LOUD")
        assert props.get_level("MyApp") is None

    def test_get_level_is_per_tag(self, props):
        props.setprop("log.tag.Other", "DEBUG")
        assert props.get_level("MyApp") is None


class TestLoad:
    def test_load_reads_key_value_lines(self, tmp_path, props):
        path = tmp_path / "local.prop"
        path.write_text(
            "# operator overrides\n"
            "\n"
            "log.tag.MyApp = VERBOSE\n"
            "log.tag.Other=SUPPRESS\n"
            "garbage line\n",
            encoding="utf-8",
        )

        assert props.load(str(path)) == 2
        assert props.getprop("log.tag.MyApp") == "VERBOSE"
        assert props.get_level("Other") == SUPPRESS

    def test_load_missing_file_raises(self, tmp_path, props):
        with pytest.raises(OSError):
            props.load(str(tmp_path / "missing.prop"))
