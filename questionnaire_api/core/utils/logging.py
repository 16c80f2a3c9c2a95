"""
Logging Utility Module.

Filters shared by the logging configuration: credential redaction and
request-id stamping.
"""

import logging
import re
from contextvars import ContextVar

# Set by RequestIdMiddleware for the lifetime of a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

_REDACTION_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?i)(bearer\s+)[A-Za-z0-9\-._~+/]+=*"), r"\1[REDACTED]"),
    (re.compile(r"\beyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]*"), "[REDACTED_JWT]"),
    (
        re.compile(r"(?i)(['\"]?(?:password|password_hash|access_token)['\"]?\s*[:=]\s*)(['\"]?)[^'\",\s}]+"),
        r"\1\2[REDACTED]",
    ),
)


def redact_credentials(text: str) -> str:
    """Mask bearer tokens, JWTs and password-like fields in ``text``."""
    for pattern, replacement in _REDACTION_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class CredentialRedactingFilter(logging.Filter):
    """Custom logging filter to keep credentials out of log output."""

    def __init__(self, name: str = "CredentialRedactor"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        original_message = record.getMessage()
        sanitized_message = redact_credentials(original_message)

        if sanitized_message != original_message:
            # Bake the sanitized text into msg so formatters cannot re-expand args
            record.msg = sanitized_message
            record.args = ()

        return True


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True
