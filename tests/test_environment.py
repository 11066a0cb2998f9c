"""Tests for sysincludes.environment."""

import pytest

from sysincludes.environment import read_include_env
from sysincludes.errors import EnvironmentVariableMissingError, IncludeDirsError


class TestReadIncludeEnv:
    def test_splits_and_normalizes(self):
        env = {"INCLUDE": "C:\\foo;;C:\\bar\\baz"}
        assert read_include_env(env) == ["C:/foo", "C:/bar/baz"]

    def test_msvc_style_value(self):
        env = {
            "INCLUDE": (
                "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community\\VC\\Tools\\MSVC\\14.38.33130\\include;"
                "C:\\Program Files (x86)\\Windows Kits\\10\\include\\10.0.22621.0\\ucrt;"
            )
        }
        assert read_include_env(env) == [
            "C:/Program Files/Microsoft Visual Studio/2022/Community/VC/Tools/MSVC/14.38.33130/include",
            "C:/Program Files (x86)/Windows Kits/10/include/10.0.22621.0/ucrt",
        ]

    def test_order_and_duplicates_preserved(self):
        assert read_include_env({"INCLUDE": "b;a;b"}) == ["b", "a", "b"]

    def test_only_separators_is_empty(self):
        assert read_include_env({"INCLUDE": ";;;"}) == []

    def test_empty_value_is_empty(self):
        assert read_include_env({"INCLUDE": ""}) == []

    def test_missing_variable(self):
        with pytest.raises(EnvironmentVariableMissingError) as exc_info:
            read_include_env({})
        assert exc_info.value.variable == "INCLUDE"
        assert str(exc_info.value) == "INCLUDE environment variable not set"
        assert isinstance(exc_info.value, IncludeDirsError)

    def test_custom_variable(self):
        assert read_include_env({"CPATH_WIN": "D:\\inc"}, variable="CPATH_WIN") == ["D:/inc"]

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("INCLUDE", "C:\\sdk\\include")
        assert read_include_env() == ["C:/sdk/include"]

    def test_process_environment_missing(self, monkeypatch):
        monkeypatch.delenv("INCLUDE", raising=False)
        with pytest.raises(EnvironmentVariableMissingError):
            read_include_env()
