"""Small text formatting helpers: centring, ordinals and word wrapping."""

_NBSP = "\u00a0"

_ORDINAL_SUFFIXES = {
    0: "th",
    1: "st",
    2: "nd",
    3: "rd",
    4: "th",
    5: "th",
    6: "th",
    7: "th",
    8: "th",
    9: "th",
}


def center(s: str, width: int) -> str:
    """Pad ``s`` with spaces so that it sits in the middle of ``width`` columns."""
    if len(s) >= width:
        return s
    left = (width - len(s)) // 2
    return " " * left + s + " " * (width - left - len(s))


def ordinal(i: int) -> str:
    """Return ``i`` followed by its suffix chosen from its last digit."""
    last = abs(i) % 10
    # a negative number with a non-zero last digit has no suffix
    suffix = "" if i < 0 and last else _ORDINAL_SUFFIXES[last]
    return f"{i}{suffix}"


def wrap(s: str, width: int) -> str:
    """Wrap ``s`` at whitespace so lines fit in ``width`` columns.

    Existing newlines are kept and words longer than the width are never split.
    """
    out: list[str] = []
    word: list[str] = []
    space: list[str] = []
    current = 0
    for ch in s:
        if ch == "\n":
            out.extend(space)
            space.clear()
            out.extend(word)
            word.clear()
            out.append(ch)
            current = 0
        elif ch.isspace() and ch != _NBSP:
            if not space or word:
                current += len(space) + len(word)
                out.extend(space)
                space.clear()
                out.extend(word)
                word.clear()
            space.append(ch)
        else:
            word.append(ch)
            if current + len(space) + len(word) > width and len(word) < width:
                out.append("\n")
                current = 0
                space.clear()
    if not word:
        if current + len(space) <= width:
            out.extend(space)
    else:
        out.extend(space)
        out.extend(word)
    return "".join(out)


def wrap_indent(s: str, width: int, indent: str) -> str:
    """Wrap ``s`` and prefix every non-empty line with ``indent``."""
    return "\n".join(
        indent + line if line else line for line in wrap(s, width).split("\n")
    )