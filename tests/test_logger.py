import json
import logging

from shared.config import GlobalConfig
from shared.logger import PrismLogger


def _close(log: PrismLogger) -> None:
    for handler in list(log.underlying.handlers):
        handler.close()
        log.underlying.removeHandler(handler)


def test_json_lines_carry_component_operation_and_context(tmp_path):
    log_file = tmp_path / "logs" / "prism.log"
    log = PrismLogger("engine", log_file=log_file, json_logs=True, console_output=False)
    try:
        with log.operation("profile"):
            log.info("profiled %s", "sample.exe", size=4096)
        log.warning("outside")
    finally:
        _close(log)

    first, second = (json.loads(line) for line in log_file.read_text().splitlines())
    assert first["message"] == "profiled sample.exe"
    assert first["level"] == "INFO"
    assert first["logger"] == "prism.engine"
    assert first["component"] == "engine"
    assert first["operation"] == "profile"
    assert first["context"] == {"size": 4096}
    assert "operation" not in second
    assert "context" not in second


def test_plain_text_file_handler(tmp_path):
    log_file = tmp_path / "prism.log"
    log = PrismLogger("cli", log_file=log_file, console_output=False)
    try:
        log.error("digest failed")
    finally:
        _close(log)

    line = log_file.read_text().strip()
    assert "ERROR" in line
    assert "prism.cli" in line
    assert line.endswith("digest failed")


def test_operation_context_restores_previous(tmp_path):
    log = PrismLogger("nested", console_output=False)
    try:
        with log.operation("outer"):
            with log.operation("inner"):
                assert log._operation == "inner"
            assert log._operation == "outer"
        assert log._operation is None
    finally:
        _close(log)


def test_level_is_applied():
    log = PrismLogger("levels", log_level="warning", console_output=False)
    assert log.underlying.level == logging.WARNING
    assert log.underlying.propagate is False


def test_from_config_with_overrides(tmp_path):
    settings = GlobalConfig(log_level="ERROR", log_file=str(tmp_path / "x.log"))
    log = PrismLogger.from_config("cfg", settings, log_level="DEBUG", console_output=False)
    try:
        assert log.component == "cfg"
        assert log.underlying.level == logging.DEBUG
        assert len(log.underlying.handlers) == 1
    finally:
        _close(log)


def test_timed_measures_elapsed():
    log = PrismLogger("timer", console_output=False)
    with log.timed("work") as timer:
        pass
    assert timer.elapsed >= 0.0
