"""Detection of date/time number format codes."""

_DATE_TIME_CHARS = frozenset("DdYyHhSsMm")
_ELAPSED_TIME_CHARS = frozenset("hms")


def is_date_time(format_code: str) -> bool:
    """Return True if the number format code probably formats a date or time."""
    length = len(format_code)
    i = 0
    while i < length:
        char = format_code[i]
        if char == "[":
            if i < length - 2 and format_code[i + 2] == "]":
                # [h], [m] and [s] are elapsed-time formats
                if format_code[i + 1].lower() in _ELAPSED_TIME_CHARS:
                    return True
                i += 2
            else:
                # condition or colour: skip to the closing bracket
                while i < length and format_code[i] != "]":
                    i += 1
        elif char == '"':
            # quoted literal text is skipped
            while i < length - 1:
                i += 1
                if format_code[i] == '"':
                    break
        elif char == "\\":
            # escaped character is skipped
            if i < length - 1:
                i += 1
        elif char in "#;":
            # only the first section can hold a date, and '#' marks a number
            return False
        elif char in _DATE_TIME_CHARS:
            return True
        i += 1
    return False