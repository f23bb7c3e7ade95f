import re

# Separators people type inside course codes: spaces, tabs, '-', '_', ','
SEPARATORS = re.compile(r'[\s\-_,]+')


def normalize_code(raw: str | None) -> str:
    """
    Normalizes a course code to its canonical key.
    Handles: 'cs-200', 'CS 200', 'cs_200', '  csci 200 ' → 'CS200' / 'CSCI200'
    Returns '' for None or for strings made only of separators.
    """
    if not raw:
        return ""
    return SEPARATORS.sub("", str(raw)).upper().strip()
