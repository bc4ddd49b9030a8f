"""
Tests for the shipped backends.
"""

import logging
import os

import pytest
from ff_log_facade import TRACE, InteropError, NullBackend, StdlibBackend, create
from ff_log_facade.testing import CaptureBackend


@pytest.fixture
def stdlib_log(caplog):
    """A facade over the stdlib backend, capturing at TRACE."""
    caplog.set_level(TRACE, logger="ff.test.stdlib")
    return create("ff.test.stdlib", backend=StdlibBackend())


class TestStdlibBackend:
    """Test the stdlib logging backend."""

    def test_trace_level_registered(self):
        StdlibBackend()
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_handles_are_interned(self):
        backend = StdlibBackend()
        assert backend.get_logger("ff.test.a").logger is backend.get_logger("ff.test.a").logger

    @pytest.mark.parametrize(
        "level,levelname",
        [
            ("trace", "TRACE"),
            ("debug", "DEBUG"),
            ("info", "INFO"),
            ("warn", "WARNING"),
            ("error", "ERROR"),
            ("fatal", "ERROR"),
        ],
    )
    def test_levels(self, stdlib_log, caplog, level, levelname):
        getattr(stdlib_log, level)("hello")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [(levelname, "hello")]
        assert caplog.records[0].name == "ff.test.stdlib"

    def test_enablement_follows_logger_level(self, stdlib_log):
        logging.getLogger("ff.test.stdlib").setLevel(logging.WARNING)

        assert not stdlib_log.trace_enabled()
        assert not stdlib_log.info_enabled()
        assert stdlib_log.warn_enabled()
        assert stdlib_log.error_enabled()

    def test_disabled_level_skips_producer(self, stdlib_log, caplog):
        logging.getLogger("ff.test.stdlib").setLevel(logging.ERROR)
        calls = []

        stdlib_log.debug(producer=lambda: calls.append(1) or "built")

        assert calls == []
        assert caplog.records == []

    def test_interop_cause_becomes_exc_info(self, stdlib_log, caplog):
        cause = OSError("disk gone")
        try:
            raise cause
        except OSError as ex:
            stdlib_log.error("write failed", InteropError(ex))

        record = caplog.records[0]
        assert record.getMessage() == "write failed"
        assert record.exc_info[1] is cause
        assert "disk gone" in caplog.text

    def test_plain_exception_is_text(self, stdlib_log, caplog):
        try:
            raise ValueError("bad value")
        except ValueError as ex:
            stdlib_log.warn("parse failed", ex)

        record = caplog.records[0]
        assert record.exc_info is None
        assert record.getMessage().startswith("parse failed\nValueError: bad value\n\t")

    def test_records_point_at_caller(self, stdlib_log, caplog):
        """Records carry the location of the code calling the facade."""
        ex = ValueError("bad value")

        stdlib_log.info("hello")
        stdlib_log.debug(producer=lambda: "lazy")
        stdlib_log.warn("parse failed", ex)
        stdlib_log.error(ex)
        stdlib_log.info_ex("direct", ex)
        stdlib_log.fatal("interop", InteropError(OSError("disk gone")))
        stdlib_log.add(logging.WARNING, "low disk", "monitor")
        stdlib_log.log("info", "via log")
        stdlib_log << "appended"

        assert len(caplog.records) == 9
        for record in caplog.records:
            assert record.filename == os.path.basename(__file__)
            assert record.funcName == "test_records_point_at_caller"

    def test_legacy_add(self, stdlib_log, caplog):
        stdlib_log.add(logging.WARNING, "low disk", "monitor")
        assert caplog.records[0].levelname == "WARNING"
        assert caplog.records[0].getMessage() == "monitor - low disk"


class TestNullBackend:
    """Test the null backend."""

    def test_everything_disabled(self):
        log = create("null", backend=NullBackend())

        for level in ("trace", "debug", "info", "warn", "error", "fatal"):
            assert getattr(log, f"{level}_enabled")() is False

    def test_zero_cost(self):
        """Expensive producers are never evaluated."""
        expensive_called = False

        def expensive_function():
            nonlocal expensive_called
            expensive_called = True
            return "expensive result"

        log = create("null", backend=NullBackend())
        log.debug(producer=expensive_function)
        log.add("error", producer=expensive_function)

        assert expensive_called is False

    def test_repr(self):
        log = create("null.repr", backend=NullBackend())
        assert "null.repr" in repr(log.backend_logger)


class TestCaptureBackend:
    """Test the capture backend used by the test suite."""

    def test_records_checks_and_entries(self):
        backend = CaptureBackend(enabled=["info"])
        log = create("capture", backend=backend)

        log.info("kept")
        log.debug("dropped")

        assert backend.texts() == ["kept"]
        assert ("capture", "debug") in backend.checks

    def test_clear(self):
        backend = CaptureBackend()
        create("capture", backend=backend).info("x")

        backend.clear()
        assert backend.entries == []
        assert backend.checks == []

    def test_aliases_enabled(self):
        backend = CaptureBackend(enabled=["fatal", "warning"])
        assert backend.enabled == {"error", "warn"}
