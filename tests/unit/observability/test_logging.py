"""Unit tests for observability logging integration."""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

import pytest
import structlog

from mp_masking.application.masking import Masker, reset_default_masker
from mp_masking.observability.logging import (
    JsonLoggerFactory,
    MaskingProcessor,
    PiiLogFilter,
    get_logger,
)


@dataclass
class Credentials:
    user: str
    password: str = field(default="", metadata={"mask": "fixed"})


@pytest.fixture
def masker() -> Masker:
    m = Masker()
    m.register_field_rule("password", "fixed")
    m.register_field_rule("email", "hash")
    return m


def _record(msg: Any, args: Any = None) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname=__file__, lineno=1, msg=msg, args=args, exc_info=None
    )


# ---------------------------------------------------------------------------
# MaskingProcessor
# ---------------------------------------------------------------------------


class TestMaskingProcessor:
    def test_masks_registered_keys(self, masker: Masker) -> None:
        processor = MaskingProcessor(masker)
        event = {"event": "login", "password": "s3cr3t", "user": "alice"}
        result = processor(None, "info", event)
        assert result == {"event": "login", "password": "********", "user": "alice"}
        assert event["password"] == "s3cr3t"

    def test_masks_dataclass_values(self, masker: Masker) -> None:
        result = MaskingProcessor(masker)(None, "info", {"creds": Credentials("alice", "pw")})
        assert result["creds"] == Credentials("alice", "********")

    def test_uses_default_masker(self) -> None:
        reset_default_masker()
        try:
            processor = MaskingProcessor()
            assert processor({}, "info", {"creds": Credentials("bob", "pw")})["creds"].password == "********"
        finally:
            reset_default_masker()

    def test_in_structlog_chain(self, masker: Masker) -> None:
        captured: list[dict[str, Any]] = []

        def capture(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
            captured.append(event_dict)
            raise structlog.DropEvent

        log = structlog.wrap_logger(
            structlog.PrintLogger(io.StringIO()),
            processors=[MaskingProcessor(masker), capture],
        )
        log.info("login", password="hunter2", email="a")
        assert captured == [
            {
                "event": "login",
                "password": "********",
                "email": "86f7e437faa5a7fce15d1ddcb9eaeaea377667b8",
            }
        ]


# ---------------------------------------------------------------------------
# PiiLogFilter
# ---------------------------------------------------------------------------


class TestPiiLogFilter:
    def test_masks_dict_message(self, masker: Masker) -> None:
        record = _record({"password": "s3cr3t", "action": "login"})
        assert PiiLogFilter(masker).filter(record) is True
        assert record.msg == {"password": "********", "action": "login"}

    def test_masks_positional_args(self, masker: Masker) -> None:
        record = _record("user %s", (Credentials("alice", "pw"),))
        PiiLogFilter(masker).filter(record)
        assert record.getMessage() == "user Credentials(user='alice', password='********')"

    def test_masks_mapping_args(self, masker: Masker) -> None:
        # LogRecord unwraps a single mapping argument into record.args.
        record = _record("%(password)s", ({"password": "pw"},))
        assert isinstance(record.args, dict)
        PiiLogFilter(masker).filter(record)
        assert record.getMessage() == "********"

    def test_leaves_plain_message(self, masker: Masker) -> None:
        record = _record("nothing to hide")
        PiiLogFilter(masker).filter(record)
        assert record.getMessage() == "nothing to hide"

    def test_attached_to_logger(self, masker: Masker) -> None:
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.addFilter(PiiLogFilter(masker))
        logger = logging.getLogger("test.pii_filter")
        logger.handlers = [handler]
        logger.setLevel(logging.INFO)
        logger.propagate = False

        logger.info("creds %s", Credentials("alice", "pw"))
        assert "pw'" not in stream.getvalue()
        assert "********" in stream.getvalue()


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        log = get_logger("test")
        assert hasattr(log, "info")
        assert hasattr(log, "bind")

    def test_initial_values(self) -> None:
        log = get_logger("test", service="masking")
        assert hasattr(log, "info")


class TestJsonLoggerFactory:
    def test_configure_installs_root_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_masks_events(self, masker: Masker, restore_logging: None) -> None:
        JsonLoggerFactory.configure(masker=masker)
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)  # type: ignore[attr-defined]

        structlog.get_logger("test.json").info("login", password="hunter2", user="alice")

        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["event"] == "login"
        assert line["password"] == "********"
        assert line["user"] == "alice"
