"""Tests for sinks, effect dispatch and the asynchronous file reader."""
import io
import json
import threading

import pytest

from prompt_wizard.domain import ImportTarget, Severity
from prompt_wizard.infrastructure import (
    AsyncFileReader,
    EffectDispatcher,
    LoggingNotificationSink,
    MemoryClipboard,
    RecordingNotificationSink,
)
from prompt_wizard.interfaces import Notify, WriteClipboard
from prompt_wizard.services.telemetry import StructuredLogger


class TestEffectDispatcher:

    def test_routes_effects(self):
        notifications = RecordingNotificationSink()
        clipboard = MemoryClipboard()
        dispatcher = EffectDispatcher(notifications, clipboard)

        dispatcher.dispatch([
            Notify("Copied", "done"),
            WriteClipboard("prompt text"),
            Notify("Oops", "bad", Severity.DESTRUCTIVE),
        ])

        assert notifications.titles() == ["Copied", "Oops"]
        assert notifications.notifications[1].severity is Severity.DESTRUCTIVE
        assert clipboard.history == ["prompt text"]

    def test_unknown_effect(self):
        dispatcher = EffectDispatcher(RecordingNotificationSink(), MemoryClipboard())
        with pytest.raises(TypeError):
            dispatcher.dispatch(["not an effect"])


class TestMemoryClipboard:

    def test_empty(self):
        assert MemoryClipboard().text is None

    def test_last_write_wins(self):
        clipboard = MemoryClipboard()
        clipboard.write_text("a")
        clipboard.write_text("b")
        assert clipboard.text == "b"


class TestLoggingNotificationSink:

    def test_logs_json_line(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="prompt_wizard.tests.sink", stream=stream)
        LoggingNotificationSink(logger).notify("Wizard Reset", "All inputs have been cleared.")

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "notification"
        assert record["title"] == "Wizard Reset"
        assert record["severity"] == "info"
        assert record["level"] == "INFO"

    def test_destructive_is_warning(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="prompt_wizard.tests.sink2", stream=stream)
        LoggingNotificationSink(logger).notify("Format Error", "bad", Severity.DESTRUCTIVE)

        assert json.loads(stream.getvalue().strip())["level"] == "WARNING"


class TestStructuredLogger:

    def test_import_outcome_levels(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="prompt_wizard.tests.imports", stream=stream)
        logger.log_import("selectors", "replaced", file_name="a.json", entries=2)
        logger.log_import("selectors", "unsupported_shape", file_name="b.json")

        first, second = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert first["level"] == "INFO" and first["entries"] == 2
        assert second["level"] == "WARNING" and second["outcome"] == "unsupported_shape"

    def test_text_output(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="prompt_wizard.tests.text", json_output=False, stream=stream)
        logger.info("demo_loaded", framework="Selenium Java")

        assert "INFO prompt_wizard.tests.text: demo_loaded" in stream.getvalue()


class TestAsyncFileReader:

    def test_reads_and_calls_back(self, tmp_path):
        path = tmp_path / "selectors.json"
        path.write_text('{"a": "#a"}', encoding="utf-8")
        received = []
        done = threading.Event()

        def on_loaded(raw_text, target, file_name):
            received.append((raw_text, target, file_name))
            done.set()

        with AsyncFileReader(logger=StructuredLogger(name="prompt_wizard.tests.reader", enable_console=False)) as reader:
            future = reader.read(path, "selectors", on_loaded)
            assert future.result(timeout=5) == '{"a": "#a"}'

        assert done.wait(timeout=5)
        assert received == [('{"a": "#a"}', ImportTarget.SELECTORS, "selectors.json")]

    def test_missing_file_surfaces_on_future(self, tmp_path):
        with AsyncFileReader(logger=StructuredLogger(name="prompt_wizard.tests.reader", enable_console=False)) as reader:
            future = reader.read(tmp_path / "absent.txt", ImportTarget.DATA)
            with pytest.raises(OSError):
                future.result(timeout=5)

    def test_result_applied_to_controller(self, tmp_path, controller):
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")

        with AsyncFileReader(logger=StructuredLogger(name="prompt_wizard.tests.reader", enable_console=False)) as reader:
            raw_text = reader.read(path, "data").result(timeout=5)
        controller.receive_file(raw_text, "data", path.name)

        assert controller.config.test_data == "a,b\n1,2\n"
