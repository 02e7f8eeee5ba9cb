"""Tests for the JSONL logging bootstrap."""

import json
import logging

import pytest

from gotype_finder.logging_setup import JsonlHandler
from gotype_finder.logging_setup import init_json_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, JsonlHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_writes_one_json_object_per_record(tmp_path, clean_root_logger):
    path = tmp_path / "logs" / "finder.jsonl"
    init_json_logging(path, "debug")

    logging.getLogger("gotype_finder.test").debug("[resolve] a -> b", extra={"import_path": "a"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["lvl"] == "DEBUG"
    assert record["logger"] == "gotype_finder.test"
    assert record["message"] == "[resolve] a -> b"
    assert record["import_path"] == "a"
    assert record["schema"]["name"] == "gotype-finder.log"


def test_reinitializing_replaces_handler(tmp_path, clean_root_logger):
    init_json_logging(tmp_path / "first.jsonl", "INFO")
    init_json_logging(tmp_path / "second.jsonl", "INFO")

    handlers = [h for h in clean_root_logger.handlers if isinstance(h, JsonlHandler)]
    assert len(handlers) == 1
    assert handlers[0].path == tmp_path / "second.jsonl"


def test_level_filters_records(tmp_path, clean_root_logger):
    path = tmp_path / "finder.jsonl"
    init_json_logging(path, "WARNING")

    logging.getLogger("gotype_finder.test").info("quiet")
    logging.getLogger("gotype_finder.test").warning("loud")

    messages = [json.loads(line)["message"] for line in path.read_text().splitlines()]
    assert messages == ["loud"]


def test_exception_text_is_recorded(tmp_path, clean_root_logger):
    path = tmp_path / "finder.jsonl"
    init_json_logging(path, "ERROR")

    try:
        raise ValueError("boom")
    except ValueError:
        logging.getLogger("gotype_finder.test").exception("failed")

    record = json.loads(path.read_text().splitlines()[0])
    assert "ValueError: boom" in record["exc"]
