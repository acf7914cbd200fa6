"""Logging setup for github-gitdata.

The library only creates loggers under the ``github_gitdata`` namespace and
never installs handlers on import. Applications call ``configure_logging``
once; ``set_library_log_level`` adjusts just this package's verbosity and is
what ``get_github_client`` applies from ``GitHubConfig.log_level``.
"""

import json
import logging
import re
import sys
from typing import Optional, Union

LIBRARY_LOGGER = "github_gitdata"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Bearer headers and the known GitHub token prefixes
_TOKEN_PATTERN = re.compile(
    r"(Bearer\s+)\S+|\b(?:ghp|gho|ghs|ghu)_[A-Za-z0-9]{20,}|\bgithub_pat_[A-Za-z0-9_]{20,}"
)


def redact_tokens(text: str) -> str:
    """Mask anything that looks like a GitHub credential."""
    return _TOKEN_PATTERN.sub(lambda m: f"{m.group(1)}***" if m.group(1) else "***", text)


class TokenRedactingFilter(logging.Filter):
    """Rewrites record messages so credentials never reach a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class SafeStreamHandler(logging.StreamHandler):
    """
    Stream handler that gracefully handles closed streams during shutdown.
    """

    def emit(self, record):
        try:
            super().emit(record)
        except (ValueError, OSError) as e:
            # Closed stderr at interpreter exit
            if "closed file" in str(e).lower() or "bad file descriptor" in str(e).lower():
                pass
            else:
                raise


class StructuredLogFormatter(logging.Formatter):
    """
    Formats log records as one JSON object per line.

    Request context passed through ``extra`` by ``GitHubClient.request``
    (method, endpoint, status, duration_ms) becomes top-level keys.
    """

    CONTEXT_FIELDS = ("method", "endpoint", "status", "duration_ms")

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in self.CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            log_record["exception"] = record.exc_text
        return json.dumps(log_record, ensure_ascii=False)


def set_library_log_level(log_level: Union[str, int]) -> None:
    """Set the level of the ``github_gitdata`` logger only."""
    if isinstance(log_level, str):
        log_level = log_level.upper()
    logging.getLogger(LIBRARY_LOGGER).setLevel(log_level)


def configure_logging(
    log_level: str = "INFO",
    structured: bool = True,
    stream: Optional[object] = None,
) -> logging.Handler:
    """
    Install a single stderr handler on the root logger.

    ``structured=False`` switches to a plain one-line text format. Either way
    the handler redacts tokens. Returns the installed handler.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = SafeStreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(StructuredLogFormatter() if structured else logging.Formatter(PLAIN_FORMAT))
    handler.addFilter(TokenRedactingFilter())
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())
    set_library_log_level(log_level)
    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("aiohttp").setLevel("WARNING")
    return handler
