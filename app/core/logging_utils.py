"""
Helpers for logging around journal data.

- ``sanitize_for_logging`` keeps entry text, prompts and credentials out of
  log lines and shortens anything long.
- ``log_llm_usage`` writes one structured line per Claude call.
"""
import json
import logging
import re
from typing import Any, Optional

# A key is redacted when it equals one of these or ends with "_<word>"
REDACTED_WORDS = frozenset({
    "content", "prompt", "description", "email",
    "token", "password", "secret", "key", "authorization",
})
REDACTED = "***REDACTED***"

_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]")


def is_sensitive_key(key: Any) -> bool:
    name = str(key).lower()
    return name in REDACTED_WORDS or any(name.endswith(f"_{word}") for word in REDACTED_WORDS)


def sanitize_for_logging(data: Any, max_len: int = 100) -> Any:
    """
    Return a log-safe copy of ``data``.

    Dict values under sensitive keys are replaced, strings lose control
    characters and are cut at ``max_len``, numbers and booleans pass through.
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, dict):
        return {
            key: REDACTED if is_sensitive_key(key) else sanitize_for_logging(value, max_len)
            for key, value in data.items()
        }

    if isinstance(data, (list, tuple, set)):
        return [sanitize_for_logging(item, max_len) for item in data]

    text = _CONTROL_CHARS.sub("", str(data))
    return text if len(text) <= max_len else text[:max_len] + "..."


# =============================================================================
# LLM USAGE
# =============================================================================

_usage_logger = logging.getLogger("MindJournal.Usage")


def log_llm_usage(
    model: str,
    operation: str,
    input_tokens: int,
    output_tokens: int,
    duration_ms: Optional[int] = None,
) -> None:
    """
    Log token usage for one enrichment call.

    The message is ``LLM_USAGE {json}`` so usage can be grepped out of the
    stream even when the human-readable formatter is active.
    """
    event = {
        "event": "llm_usage",
        "model": model,
        "operation": operation,
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "total_tokens": input_tokens + output_tokens,
    }
    if duration_ms is not None:
        event["duration_ms"] = duration_ms

    _usage_logger.info("LLM_USAGE %s", json.dumps(event))
