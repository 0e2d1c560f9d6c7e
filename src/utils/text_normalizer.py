"""Text helpers for company-name input.

Two concerns live here:

1. **Query key splitting** -- turning the raw text of a positional argument
   or an input file into the ordered list of company names to look up.

2. **Name similarity** -- a rapidfuzz score used to tell the user *how far*
   a registry's best match is from what they typed when strict-name mode
   rejects it.  The score is informational; strict matching itself is an
   exact string comparison.
"""

from rapidfuzz import fuzz


def split_query_keys(text: str, sep: str = "\n") -> list[str]:
    """Split *text* on *sep* into an ordered list of company names.

    Each piece is stripped of surrounding whitespace (so CRLF files and
    ``"a, b"`` with ``sep=","`` behave) and blank pieces are dropped.
    Duplicates and order are preserved.

    Args:
        text: Raw input text.
        sep: Separator between names.  An empty separator falls back to
             newline.

    Returns:
        The non-empty names in input order.
    """
    if not sep:
        sep = "\n"
    return [piece.strip() for piece in text.strip().split(sep) if piece.strip()]


def name_similarity(query: str, candidate: str) -> float:
    """Return the similarity of two company names as a ratio in ``[0, 1]``.

    Uses ``fuzz.ratio`` rather than a token-based scorer: Chinese company
    names are not whitespace-tokenized, so character-level edit distance is
    the meaningful measure.
    """
    return fuzz.ratio(query.strip(), candidate.strip()) / 100.0
