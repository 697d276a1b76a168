"""Display width of table cell text.

Fixed-width text editors give CJK ideographs, kana and full-width Latin two
columns. Aligning table borders needs that visual width, not ``len()``.

Ranges are fixed tables rather than ``unicodedata.east_asian_width`` so that
rendering is identical on every Python build.

Usage:
    >>> from mesita.width import display_width, pad
    >>> display_width("あい")
    4
    >>> pad("あ", 4)
    'あ  '
"""

# Inclusive code point ranges rendered two columns wide
WIDE_RANGES: tuple[tuple[int, int], ...] = (
    (0x3000, 0x303F),  # CJK Symbols and Punctuation
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x3400, 0x4DBF),  # CJK Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xFF01, 0xFF5E),  # Full-width Latin
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B73F),  # CJK Extension C
    (0x2B740, 0x2B81F),  # CJK Extension D
    (0x2B820, 0x2CEAF),  # CJK Extension E
)

# Everything below this is narrow; skips the range scan for ASCII/Latin text
_FIRST_WIDE = WIDE_RANGES[0][0]


def is_wide(char: str) -> bool:
    """Check if a single character occupies two columns."""
    code = ord(char)
    if code < _FIRST_WIDE:
        return False
    for low, high in WIDE_RANGES:
        if low <= code <= high:
            return True
    return False


def display_width(text: str) -> int:
    """Number of columns text occupies in a fixed-width editor.

    Counts code points, so astral-plane ideographs (Extension B and later)
    count once, as two columns.

    Args:
        text: Cell text

    Returns:
        Visual width (1 per narrow code point, 2 per wide one)

    Examples:
        >>> display_width("a")
        1
        >>> display_width("あ")
        2
        >>> display_width("")
        0
    """
    if text.isascii():
        return len(text)
    return sum(2 if is_wide(char) else 1 for char in text)


def pad(text: str, target_width: int, fill_char: str = " ") -> str:
    """Right-pad text to a visual width.

    Never truncates: text already wider than target_width is returned
    unchanged.

    Args:
        text: Text to pad
        target_width: Desired visual width
        fill_char: Padding character (assumed narrow)

    Returns:
        text followed by the missing number of fill characters
    """
    missing = target_width - display_width(text)
    if missing <= 0:
        return text
    return text + fill_char * missing


__all__ = [
    "WIDE_RANGES",
    "display_width",
    "is_wide",
    "pad",
]
