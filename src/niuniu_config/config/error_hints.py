"""Error hints for configuration loading errors.

Provides user-friendly hints with actionable remediation steps
for common loading and decoding errors.
"""

from typing import Final

from niuniu_config.data_model import normalize_key


# Mapping of error types to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    # Type errors
    "int_type": "This field must be an integer (whole number).",
    "int_parsing": "This field must be an integer (whole number).",
    "int_from_float": "This field must be a whole number, not a fraction.",
    "string_type": "This field must be a text string.",
    "bool_type": "This field must be true or false.",
    "bool_parsing": "This field must be true or false.",
    "model_type": "This section must be a mapping of keys to values.",
    "model_attributes_type": "This section must be a mapping of keys to values.",
    # Value constraint errors
    "greater_than_equal": "The value is too small. Connection caps cannot be negative.",
    # File errors
    "file_not_found": "No config.yaml was found. Run from the directory holding it "
    "or add its directory to NIUNIU_CONFIG_DIRS.",
    "file_unreadable": "The file exists but cannot be read. Check permissions and "
    "that it is UTF-8 encoded.",
    "yaml_parse_error": "Invalid YAML syntax. Check for proper indentation and formatting.",
    "not_a_mapping": "The document must be a mapping at the top level (key: value).",
    "unsupported_config_type": "Only YAML documents are supported. Set NIUNIU_CONFIG_TYPE "
    "to 'yaml' or 'yml'.",
}

# Field-specific hints, keyed by normalized field name
FIELD_HINTS: Final[dict[str, str]] = {
    "maxidle": "Must be a non-negative integer (e.g. 'maxIdle: 4').",
    "maxopen": "Must be a non-negative integer (e.g. 'maxOpen: 16').",
    "showsql": "Must be true or false.",
    "showexectime": "Must be true or false.",
    "dsn": "Must be a connection string (e.g. 'user:pw@tcp(localhost:3306)/app').",
    "channeltype": "Use 'gochannel' for a single node or 'kafka' for a broker.",
    "kafkahosts": "Must be a comma-separated broker list (e.g. 'h1:9092,h2:9092').",
    "level": "Use one of: trace, debug, info, warn, error, fatal, panic.",
}

DEFAULT_HINT: Final[str] = "Check the configuration documentation for valid values."


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a loading error.

    Args:
        error_type: The error type (e.g. 'int_parsing', 'file_not_found').
        field_name: Optional dotted location for field-specific hints.

    Returns:
        A user-friendly hint string.
    """
    if field_name:
        # 'DbConfig.maxIdle' -> 'maxidle'
        simple_field = normalize_key(field_name.split(".")[-1])
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(error_type, DEFAULT_HINT)


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a loading error with optional hint.

    Args:
        location: The error location (e.g. 'DbConfig.maxIdle').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
