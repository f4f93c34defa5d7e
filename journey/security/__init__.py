"""Secret redaction for logs and error strings."""

from journey.security.redact import redact_sensitive

__all__ = ["redact_sensitive"]
