from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.predictor",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(
        _record("Prediction completed", risk_level="HIGH", location="Sector 1.0,2.0", unrelated="x")
    )

    assert output == "Prediction completed | risk_level=HIGH location=Sector 1.0,2.0"


def test_formatter_renders_floats_compactly() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record("Classified window", risk_score=0.6500000001))

    assert output.endswith("risk_score=0.650")


def test_formatter_leaves_plain_messages_untouched() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["stage"])

    assert formatter.format(_record("hello", risk_level="LOW")) == "hello"
