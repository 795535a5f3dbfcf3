"""Tests for pinpoint utility modules."""

import logging

import pytest

from pinpoint import NodeKind, debug
from pinpoint.nodes import identifier, node


class TestStringBuilder:
    """Tests for the length-aware StringBuilder."""

    def test_build(self) -> None:
        from pinpoint.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append(" + ").append("b")
        assert sb.build() == "a + b"

    def test_length_counts_characters(self) -> None:
        from pinpoint.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert len(sb) == 0
        sb.append("héllo").append("")
        assert len(sb) == 5
        sb.append("(").append(")")
        assert len(sb) == 7
        assert sb.build() == "héllo()"


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from pinpoint.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "pinpoint.mymodule"

    def test_logger_with_pinpoint_prefix(self) -> None:
        from pinpoint.utils.logger import get_logger

        logger = get_logger("pinpoint.debugger")
        assert logger.name == "pinpoint.debugger"

    def test_logger_name_starting_with_pinpoint_not_submodule(self) -> None:
        from pinpoint.utils.logger import get_logger

        logger = get_logger("pinpoint_other")
        assert logger.name == "pinpoint.pinpoint_other"

    def test_logger_exact_pinpoint_name(self) -> None:
        from pinpoint.utils.logger import get_logger

        assert get_logger("pinpoint").name == "pinpoint"

    def test_no_handlers_installed(self) -> None:
        from pinpoint.utils.logger import get_logger

        assert get_logger("debugger").handlers == []

    def test_render_logs_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        a = identifier("a")
        expr = node(NodeKind.NOT, a)
        with caplog.at_level(logging.DEBUG, logger="pinpoint.debugger"):
            debug(a)
        messages = [record.getMessage() for record in caplog.records]
        assert any("Rendered 2 nodes into 2 characters, cause at [1, 2)" in m for m in messages)
        assert expr.child_count() == 1
