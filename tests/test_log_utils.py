"""Tests for the pure rendering helpers."""

import sys
from datetime import datetime
from unittest.mock import patch

import pytest

from daylog import config
from daylog.log_utils import caller_tag, error_message, format_line, sprint, sprintf, timestamp


class TestSprint:
    """Test default value rendering."""

    def test_joins_values_with_spaces(self):
        assert sprint("disk", "usage", 93, 0.5) == "disk usage 93 0.5"

    def test_single_value(self):
        assert sprint("hello") == "hello"

    def test_no_values_is_empty(self):
        assert sprint() == ""

    def test_renders_containers_and_none(self):
        assert sprint([1, 2], {"a": 1}, None) == "[1, 2] {'a': 1} None"


class TestSprintf:
    """Test printf-style rendering."""

    def test_positional_args(self):
        assert sprintf("%s has %d items", "queue", 4) == "queue has 4 items"

    def test_no_args_returns_format_unchanged(self):
        assert sprintf("100% done") == "100% done"

    def test_mapping_arg(self):
        assert sprintf("%(user)s logged in", {"user": "ana"}) == "ana logged in"

    def test_float_precision(self):
        assert sprintf("%.2f", 3.14159) == "3.14"

    def test_bad_format_raises(self):
        with pytest.raises(TypeError):
            sprintf("%d", "not a number")


class TestTimestamp:
    """Test timestamp rendering."""

    def test_fixed_time(self):
        assert timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"

    def test_defaults_to_now(self):
        value = timestamp()
        assert datetime.strptime(value, config.TIMESTAMP_FORMAT)


class TestCallerTag:
    """Test caller location lookup."""

    def test_names_calling_line(self):
        expected = sys._getframe().f_lineno + 1
        tag = caller_tag()
        assert tag == f"test_log_utils.py:{expected}"

    def test_depth_walks_up_the_stack(self):
        def helper():
            return caller_tag(depth=1)

        expected = sys._getframe().f_lineno + 1
        tag = helper()
        assert tag == f"test_log_utils.py:{expected}"

    def test_unavailable_frame_is_unknown(self):
        with patch("daylog.log_utils.sys._getframe", side_effect=ValueError):
            assert caller_tag() == "unknown:0"

    def test_too_deep_is_unknown(self):
        assert caller_tag(depth=10_000) == config.UNKNOWN_CALLER


class TestFormatLine:
    """Test full line composition."""

    def test_line_layout(self):
        expected = sys._getframe().f_lineno + 1
        line = format_line("ready", now=datetime(2024, 1, 2, 3, 4, 5))
        assert line == f"[2024-01-02 03:04:05] [test_log_utils.py:{expected}] ready"

    def test_error_message_prefix(self):
        assert error_message("disk full") == "[ERROR] disk full"
