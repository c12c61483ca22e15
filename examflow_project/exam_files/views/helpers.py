def error_message(exc):
    """First human-readable message of a ValidationError."""
    return exc.messages[0] if exc.messages else str(exc)
