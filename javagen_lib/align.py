import re
from typing import Any, Callable, List, Sequence, Tuple

PLACEHOLDER_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_\-\.]+)\}")

# Leading space of the line an argument is inserted into. The first match wins,
# so a part ending in "    foo" yields "    " and a part ending in "x = " yields " ".
_INSERTION_SPACE = re.compile(r"([ \t]*)[^\s]*\Z")
_LINE_BREAK = re.compile(r"\r?\n")
_OUTER_BLANK_LINES = re.compile(r"\A[ \t]*\r?\n|\r?\n[ \t]*\Z")
_LEADING_SPACE = re.compile(r"^\s+")
_BLANK_RUN = re.compile(r"[ \t]*\r?\n(?:[ \t]*\r?\n)+")


def _insertion_space(part: str) -> str:
    m = _INSERTION_SPACE.search(part)
    return m.group(1) if m else ""


def _indent_arg(part: str, arg: Any) -> str:
    text = "" if arg is None else str(arg)
    if not text:
        return ""
    # Trailing empty lines of the argument are dropped
    lines = _LINE_BREAK.split(text)
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        return ""
    space = _insertion_space(part)
    return ("\n" + space).join(lines)


def _dedent(text: str) -> str:
    # re.split keeps trailing empty strings, so blank last lines survive the round trip
    lines = _LINE_BREAK.split(text)

    prefix: str | None = None
    for line in lines:
        if not line.strip():
            continue
        m = _LEADING_SPACE.match(line)
        candidate = m.group(0) if m else ""
        # Only the length counts; on a tie the first prefix seen is kept
        if prefix is None or len(candidate) < len(prefix):
            prefix = candidate
    prefix = prefix or ""

    aligned = [line[len(prefix):] if line.startswith(prefix) else line for line in lines]
    return "\n".join(aligned)


def align(parts: Sequence[str], args: Sequence[Any]) -> str:
    """
    Interpolate args into the literal parts and normalize the indentation.

    Multi-line arguments are re-indented to the column they are inserted at, one
    leading and one trailing blank line are dropped, the indentation shared by all
    non-blank lines is removed and runs of blank lines shrink to a single one.
    """
    if len(parts) != len(args) + 1:
        raise ValueError(
            f"Template needs exactly one more part than arguments, got {len(parts)} parts "
            f"and {len(args)} arguments"
        )

    pieces: List[str] = []
    for part, arg in zip(parts, args):
        pieces.append(part)
        pieces.append(_indent_arg(part, arg))
    pieces.append(parts[-1])

    text = _OUTER_BLANK_LINES.sub("", "".join(pieces))
    return _BLANK_RUN.sub("\n\n", _dedent(text))


def split_template(template: str) -> Tuple[List[str], List[str]]:
    """Split a ${name} template into its literal parts and the placeholder names between them."""
    tokens = PLACEHOLDER_PATTERN.split(template)
    return tokens[0::2], tokens[1::2]


def render(template: str, **values: Any) -> str:
    """
    Align a template whose arguments are given as ${name} placeholders.

    Every placeholder must have a value; None renders as nothing.
    """
    parts, names = split_template(template)
    missing = [name for name in names if name not in values]
    if missing:
        raise KeyError(f"No value for template placeholder(s): {', '.join(sorted(set(missing)))}")
    return align(parts, [values[name] for name in names])


def expand(lo: int, hi: int, f: Callable[[int], Any], delimiter: str = "") -> str:
    """Apply f to every integer in [lo, hi] and join the results with delimiter."""
    return delimiter.join(str(f(i)) for i in range(lo, hi + 1))

