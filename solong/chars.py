"""ASCII character classification and case conversion on integer codes."""


def is_alpha(code: int) -> bool:
    """True for ASCII letters."""
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(code: int) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= code <= 57


def is_alnum(code: int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Map a lower-case ASCII letter to upper case; other codes unchanged."""
    return code - 32 if 97 <= code <= 122 else code


def to_lower(code: int) -> int:
    """Map an upper-case ASCII letter to lower case; other codes unchanged."""
    return code + 32 if 65 <= code <= 90 else code