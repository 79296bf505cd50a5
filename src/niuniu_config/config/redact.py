"""Secret redaction for printed configuration."""

import re


REDACTED_VALUE = "[REDACTED]"

# user:password@ at the start of a driver DSN or inside a URL authority
DSN_PASSWORD_PATTERN = re.compile(r"^(?P<user>[^:@/\s]*):(?P<password>[^@]+)@")
URL_PASSWORD_PATTERN = re.compile(r"(?P<prefix>://[^:@/\s]*):(?P<password>[^@/\s]+)@")


def redact_dsn(dsn: str) -> str:
    """Mask the password part of a connection string.

    Handles both driver DSNs ('user:pw@tcp(host:3306)/db') and URL
    style strings ('postgres://user:pw@host/db').

    Args:
        dsn: Connection string.

    Returns:
        The DSN with its password replaced by REDACTED_VALUE.
    """
    if "://" in dsn:
        return URL_PASSWORD_PATTERN.sub(rf"\g<prefix>:{REDACTED_VALUE}@", dsn, count=1)
    return DSN_PASSWORD_PATTERN.sub(rf"\g<user>:{REDACTED_VALUE}@", dsn, count=1)


def redact_document(document: dict[str, object]) -> dict[str, object]:
    """Return a copy of a dumped config document with secrets masked.

    Args:
        document: Output of Config.to_document().

    Returns:
        New document; the DbConfig.dsn value is redacted.
    """
    redacted = dict(document)
    db = redacted.get("DbConfig")
    if isinstance(db, dict) and isinstance(db.get("dsn"), str):
        redacted["DbConfig"] = {**db, "dsn": redact_dsn(db["dsn"])}
    return redacted
