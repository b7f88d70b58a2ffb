# Largest integer a double holds exactly; word_ordinal rejects anything above it.
MAX_SAFE_INTEGER = 2**53 - 1

_UNITS = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
}
_ORDINAL_UNITS = {
    0: "zeroth",
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "eighth",
    9: "ninth",
    10: "tenth",
    11: "eleventh",
    12: "twelfth",
    13: "thirteenth",
    14: "fourteenth",
    15: "fifteenth",
    16: "sixteenth",
    17: "seventeenth",
    18: "eighteenth",
    19: "nineteenth",
}
# Stems take "y" (twenty), "ieth" (twentieth) or "y-<unit>" (twenty-first).
_TENS_STEMS = {
    20: "twent",
    30: "thirt",
    40: "fort",
    50: "fift",
    60: "sixt",
    70: "sevent",
    80: "eight",
    90: "ninet",
}
# Indexed by magnitude // 3, except for index 0 which names the hundreds.
_GROUPS = {
    0: "hundred",
    1: "thousand",
    2: "million",
    3: "billion",
    4: "trillion",
    5: "quadrillion",
}
_SUFFIXES = {
    1: "st",
    2: "nd",
    3: "rd",
}


class OutOfRange(ValueError):
    def __init__(self, value, maximum=MAX_SAFE_INTEGER):
        super().__init__(f"Argument must be between 0 and {maximum}, got {value}")
        self.value = value
        self.maximum = maximum


def digit_ordinal(n):
    # Negative numbers always take "th".
    if n < 0:
        return f"{n}th"
    last_two = n % 100
    key = last_two % 10 if last_two >= 20 else last_two
    return f"{n}{_SUFFIXES.get(key, 'th')}"


def _magnitude(value):
    return len(str(value)) - 1


def _cardinal_phrase(value):
    if value < 20:
        return _UNITS[value]
    if value < 100:
        ones = value % 10
        stem = _TENS_STEMS[value // 10 * 10]
        if ones == 0:
            return f"{stem}y"
        return f"{stem}y-{_UNITS[ones]}"
    hundreds, remainder = divmod(value, 100)
    if remainder == 0:
        return f"{_UNITS[hundreds]} {_GROUPS[0]}"
    return f"{_UNITS[hundreds]} {_GROUPS[0]} {_cardinal_phrase(remainder)}"


def _with_ordinal_remainder(head, remainder):
    if remainder == 0:
        return f"{head}th"
    return f"{head} {word_ordinal(remainder)}"


def word_ordinal(n):
    """Return the English word ordinal for ``n``.

    >>> word_ordinal(1729)
    'one thousand seven hundred twenty-ninth'

    Every group but the last nonzero one is spelled as a cardinal, and zero
    groups are skipped entirely. ``n`` must be an int in the range
    ``0 .. MAX_SAFE_INTEGER``; anything outside it raises :class:`OutOfRange`.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Argument must be an int, got {type(n).__name__}")
    if n < 0 or n > MAX_SAFE_INTEGER:
        raise OutOfRange(n)

    if n < 20:
        return _ORDINAL_UNITS[n]
    magnitude = _magnitude(n)
    if magnitude == 1:
        ones = n % 10
        stem = _TENS_STEMS[n // 10 * 10]
        if ones == 0:
            return f"{stem}ieth"
        return f"{stem}y-{_ORDINAL_UNITS[ones]}"
    if magnitude == 2:
        hundreds, remainder = divmod(n, 100)
        return _with_ordinal_remainder(f"{_UNITS[hundreds]} {_GROUPS[0]}", remainder)

    group = magnitude // 3
    # Guard only: unreachable while MAX_SAFE_INTEGER stays below 10**18.
    if group not in _GROUPS:
        raise OutOfRange(n)
    leading, remainder = divmod(n, 10 ** (group * 3))
    return _with_ordinal_remainder(
        f"{_cardinal_phrase(leading)} {_GROUPS[group]}", remainder
    )
