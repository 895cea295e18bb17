import json
import logging

from app.core.logging_utils import REDACTED, log_llm_usage, sanitize_for_logging
from app.shared.correlation import CorrelationContext, get_correlation_id
from app.shared.logging_config import CorrelationIdFilter, HumanReadableFormatter, JSONFormatter


def _record(msg="Journal entry saved", **extra):
    record = logging.LogRecord("MindJournal.Journal", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSanitize:
    def test_redacts_entry_text_and_credentials(self):
        sanitized = sanitize_for_logging({
            "content": "Dear diary",
            "access_token": "abc",
            "api_key": "sk-1",
            "prompt_id": "p-1",
            "input_tokens": 12,
        })
        assert sanitized == {
            "content": REDACTED,
            "access_token": REDACTED,
            "api_key": REDACTED,
            "prompt_id": "p-1",
            "input_tokens": 12,
        }

    def test_truncates_and_strips_control_characters(self):
        assert sanitize_for_logging("line\none", max_len=100) == "lineone"
        assert sanitize_for_logging("x" * 50, max_len=10) == "x" * 10 + "..."

    def test_nested_values(self):
        assert sanitize_for_logging({"themes": ["work", "family"], "meta": {"email": "a@b.c"}}) == {
            "themes": ["work", "family"],
            "meta": {"email": REDACTED},
        }


class TestCorrelation:
    def test_context_sets_and_resets(self):
        assert get_correlation_id() is None
        with CorrelationContext("backfill-42") as correlation_id:
            assert correlation_id == "backfill-42"
            assert get_correlation_id() == "backfill-42"
        assert get_correlation_id() is None

    def test_filter_stamps_records(self):
        record = _record()
        with CorrelationContext("req-1"):
            CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-1"


class TestFormatters:
    def test_json_line_includes_sanitized_extras(self):
        record = _record(entry_id="e-1", content="Dear diary", word_count=2)
        CorrelationIdFilter().filter(record)

        line = json.loads(JSONFormatter("mindjournal-service").format(record))

        assert line["message"] == "Journal entry saved"
        assert line["service"] == "mindjournal-service"
        assert line["entry_id"] == "e-1"
        assert line["word_count"] == 2
        assert line["content"] == REDACTED
        assert "correlation_id" not in line

    def test_human_readable_line(self):
        record = _record(entry_id="e-1", correlation_id="req-9")
        line = HumanReadableFormatter().format(record)

        assert "[req-9] MindJournal.Journal: Journal entry saved | entry_id=e-1" in line


def test_usage_line_is_parseable(caplog):
    with caplog.at_level(logging.INFO, logger="MindJournal.Usage"):
        log_llm_usage("claude-haiku-4-5-20251001", "extract_themes", 120, 30, duration_ms=410)

    message = caplog.records[-1].getMessage()
    assert message.startswith("LLM_USAGE ")
    event = json.loads(message[len("LLM_USAGE "):])
    assert event["total_tokens"] == 150
    assert event["operation"] == "extract_themes"
