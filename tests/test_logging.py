import json
import logging
from fractions import Fraction
from pathlib import Path

from mensura.parsing import parse_document
from mensura.quantities import Dimension
from mensura.utils.logging import configure_json_logger, flush_handlers, log_event


def _read_jsonl(path: Path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def test_structured_logger_emits_jsonl(tmp_path: Path) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    trace_id = log_event(logger, "scale.start", input="in.jsonl")
    log_event(logger, "scale.completed", trace_id=trace_id, documents=2)
    flush_handlers(logger)
    configure_json_logger(None)

    lines = _read_jsonl(log_file)

    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"scale.start", "scale.completed"}
    assert lines[0]["input"] == "in.jsonl"
    assert lines[1]["documents"] == 2
    assert lines[0]["level"] == "info"
    assert lines[0]["timestamp"].endswith("Z")


def test_library_records_reach_the_json_log(tmp_path: Path) -> None:
    log_file = tmp_path / "debug.jsonl"
    logger = configure_json_logger(log_file, "debug")

    parse_document("Use 1/0 cups")
    flush_handlers(logger)
    configure_json_logger(None)

    lines = _read_jsonl(log_file)
    loggers = {line["logger"] for line in lines}

    assert "mensura.parsing.document" in loggers
    assert any("infinite number" in line["message"] for line in lines)
    assert all(line["level"] == "debug" for line in lines)


def test_logger_without_path_discards_records(tmp_path: Path) -> None:
    logger = configure_json_logger(None, logging.DEBUG)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
    assert logger.propagate is False


def test_exact_values_are_logged_as_rationals(tmp_path: Path) -> None:
    log_file = tmp_path / "values.jsonl"
    logger = configure_json_logger(log_file, "debug")

    log_event(logger, "scale.start", factor=Fraction(3, 2), dimension=Dimension.VOLUME)
    parse_document("Use 1/0 cups")
    flush_handlers(logger)
    configure_json_logger(None)

    first, *debug = _read_jsonl(log_file)

    assert first["factor"] == "3/2"
    assert first["dimension"] == "volume"
    assert "location" not in first
    assert debug and all(line["location"].startswith("document:") for line in debug)
