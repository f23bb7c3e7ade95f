import sys
from typing import Iterable

from catalog import Catalog, Course
from normalizer import normalize_code
from record_parser import split_record

MIN_FIELDS = 2  # code, title


def _course_from_fields(fields: list[str]) -> Course:
    """Build a Course from parsed fields: code, title, then prereq codes."""
    prereqs = []
    for raw in fields[2:]:
        code = normalize_code(raw)
        if code:
            prereqs.append(code)
    return Course(
        code=normalize_code(fields[0]),
        title=fields[1].strip(),
        prereq_codes=tuple(prereqs),
    )


def parse_course_lines(lines: Iterable[str]) -> tuple[dict[str, Course], list[int]]:
    """
    Parse course records from an iterable of text lines.

    Returns (courses, malformed_line_numbers). Blank lines are ignored,
    lines with fewer than two fields are reported by 1-based line number,
    records whose code normalizes to '' are dropped, and a repeated code
    keeps the last record seen.
    """
    courses: dict[str, Course] = {}
    malformed: list[int] = []

    for line_num, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        fields = split_record(line)
        if len(fields) < MIN_FIELDS:
            malformed.append(line_num)
            continue

        course = _course_from_fields(fields)
        if course.code:
            courses[course.code] = course

    return courses, malformed


def load_catalog(path: str, catalog: Catalog) -> dict:
    """
    Load a course file into the catalog.

    The new mapping is built completely before catalog.replace() is called,
    so an unreadable file leaves the previous catalog exactly as it was.

    Returns {"success": bool, "loaded_count": int}.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            courses, malformed = parse_course_lines(fh)
    except OSError as exc:
        print(f'[ERROR] Could not open "{path}": {exc.strerror or exc}', file=sys.stderr)
        return {"success": False, "loaded_count": 0}

    for line_num in malformed:
        print(f"[WARN] Malformed line {line_num}; skipped.", file=sys.stderr)

    catalog.replace(courses, source_path=path)
    print(f'[OK] Loaded {len(courses)} courses from "{path}".')
    return {"success": True, "loaded_count": len(courses)}
