import re


def matches(text: str, term: str) -> bool:
    """Case-insensitive substring test. A blank or whitespace-only term matches everything."""
    if not term.strip():
        return True
    return term.lower() in text.lower()


def split_highlight(text: str, term: str) -> list[tuple[str, bool]]:
    """Split text into (segment, is_match) pairs for the search term.

    Matching is case-insensitive and the term is taken literally, so
    "c++" or "a.b" are not treated as patterns.
    """
    if not term.strip():
        return [(text, False)]
    pattern = re.compile(f"({re.escape(term)})", re.IGNORECASE)
    parts = pattern.split(text)
    # re.split with one capture group alternates plain / match
    return [(part, idx % 2 == 1) for idx, part in enumerate(parts) if part]


def parse_bulk_names(text: str) -> list[str]:
    """Newline-separated names, trimmed, blanks dropped, first occurrence kept."""
    seen: set[str] = set()
    names: list[str] = []
    for line in text.split("\n"):
        name = line.strip()
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names
