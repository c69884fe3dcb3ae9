"""Sample tables and helpers for comparing rendered output."""

HEADERS = ["id", "name", "age"]

DATA = [
    ["1", "john", None],
    ["2", "tom", "20"],
    ["3", "verylongname", None],
    ["4", "mary", "30"],
]


def table(text: str) -> str:
    """Strip the indentation of an expected table written inline in a test.

    Every rendered line starts and ends with a border glyph, so stripping
    surrounding whitespace never touches cell padding.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    return "".join(line + "\n" for line in lines)
