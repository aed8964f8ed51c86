"""Unit tests for foundation utilities."""

import logging
from pathlib import Path

import pytest

from ptp_conf.utils import compute_hash, configure_logging, read_text

pytestmark = pytest.mark.unit


class TestReadText:
    def test_Should_ReturnContents_When_FileExists(self, tmp_path: Path):
        path = tmp_path / "ptp4l.conf"
        path.write_text("[global]\n", encoding="utf-8")

        assert read_text(path) == "[global]\n"

    def test_Should_RaiseFileNotFound_When_FileMissing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "missing.conf")


class TestComputeHash:
    def test_Should_MatchForStrAndBytes_When_ContentEqual(self):
        assert compute_hash("payload") == compute_hash(b"payload")

    def test_Should_IgnoreKeyOrder_When_HashingDicts(self):
        assert compute_hash({"a": 1, "b": 2}) == compute_hash({"b": 2, "a": 1})

    def test_Should_Return64HexChars_When_Hashing(self):
        digest = compute_hash("x")

        assert len(digest) == 64
        int(digest, 16)


class TestConfigureLogging:
    def test_Should_SetRootLevel_When_LevelValid(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_Should_RaiseValueError_When_LevelUnknown(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_Should_ReplaceHandler_When_CalledTwice(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            configure_logging("INFO")
            configure_logging("WARNING", structured=True)

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert root.handlers[0].formatter._fmt.startswith('{"timestamp"')
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
