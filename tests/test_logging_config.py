import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.analytics",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Recorded hourly reading",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_context_keys() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s | %(message)s")

    output = formatter.format(_record(panel_id="SSSS22225555TTYY", reading_id=1, shard="x"))

    assert output == "INFO | Recorded hourly reading | panel_id=SSSS22225555TTYY reading_id=1"


def test_formatter_skips_missing_and_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["panel_id", "day_count"])

    output = formatter.format(_record(panel_id=None))

    assert output == "Recorded hourly reading"
