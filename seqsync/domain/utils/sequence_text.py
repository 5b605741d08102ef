"""
Text helpers for sequences: delimited-string loading and a two-column
side-by-side table for eyeballing a specification against its state.
"""

from typing import List, Sequence


def parse_sequence(text: str, sep: str = ",") -> List[int]:
    """
    Parse "1, 4,8" into [1, 4, 8].

    An empty or blank string yields []. Raises ValueError on a token that
    is not an integer, including empty tokens such as "1,,2".
    """
    if not text.strip():
        return []

    values: List[int] = []
    for token in text.split(sep):
        token = token.strip()
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid sequence element {token!r} in {text!r}") from None
    return values


def format_sequence(values: Sequence[int], sep: str = ",") -> str:
    return sep.join(str(v) for v in values)


def render_table(spec: Sequence[int], state: Sequence[int], width: int = 12) -> str:
    """Render both sequences as "Config" / "Actual" columns, one position per row."""
    rows = [f"{'Config':>{width}}  {'Actual':>{width}}"]
    for i in range(max(len(spec), len(state))):
        left = str(spec[i]) if i < len(spec) else ""
        right = str(state[i]) if i < len(state) else ""
        rows.append(f"{left:>{width}}  {right:>{width}}")
    return "\n".join(rows)
