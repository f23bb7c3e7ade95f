"""
In-memory course catalog and the two read-only queries over it.

The catalog is an explicit object handed to every operation. It holds the
code → Course mapping together with the sorted code list computed when that
mapping was installed. Both are swapped in one assignment by replace(), so a
reader never sees a half-installed load.

Query results follow one shape so the shell can print them uniformly:
  {"mode": "list",   "courses": [(code, title), ...]}
  {"mode": "course", "course": {...}, "prerequisites": {...}}
  {"mode": "error",  "error": {"error_code": "...", "message": "..."}}
"""

from dataclasses import dataclass, field

from normalizer import normalize_code

ERROR_MESSAGES = {
    "EMPTY_QUERY": "No course entered.",
    "NOT_LOADED": "Please load the data first.",
    "NOT_FOUND": "Course not found.",
}


@dataclass(frozen=True)
class Course:
    code: str
    title: str
    prereq_codes: tuple[str, ...] = field(default_factory=tuple)


class Catalog:
    """Owns the loaded courses and their cached sorted codes."""

    def __init__(self):
        # (courses, sorted_codes) or None while unloaded
        self._snapshot: tuple[dict[str, Course], tuple[str, ...]] | None = None
        self.source_path: str | None = None

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def courses(self) -> dict[str, Course]:
        return self._snapshot[0] if self._snapshot else {}

    @property
    def sorted_codes(self) -> tuple[str, ...]:
        return self._snapshot[1] if self._snapshot else ()

    def __len__(self) -> int:
        return len(self.courses)

    def get(self, code: str) -> Course | None:
        return self.courses.get(code)

    def replace(self, courses: dict[str, Course], source_path: str | None = None) -> None:
        """Install a freshly built mapping. The sort happens here and only here."""
        self._snapshot = (courses, tuple(sorted(courses)))
        self.source_path = source_path


def _error(error_code: str) -> dict:
    return {
        "mode": "error",
        "error": {
            "error_code": error_code,
            "message": ERROR_MESSAGES[error_code],
        },
    }


def list_courses(catalog: Catalog) -> dict:
    """Return every (code, title) pair in ascending code order."""
    if not catalog.loaded:
        return _error("NOT_LOADED")
    courses = catalog.courses
    return {
        "mode": "list",
        "courses": [(code, courses[code].title) for code in catalog.sorted_codes],
    }


def resolve_prereqs(course: Course, catalog: Catalog) -> dict:
    """
    Resolve a course's prerequisite codes against the catalog.

    Returns {"type": "none"} when the course has no prerequisites, otherwise
      {"type": "list", "courses": [
          {"code": "CSCI100", "title": "Intro to CS", "missing": False},
          {"code": "CSCI050", "title": None,          "missing": True},
      ]}
    in the course's stored order. Unknown codes are kept and flagged.
    """
    if not course.prereq_codes:
        return {"type": "none"}

    resolved = []
    for code in course.prereq_codes:
        prereq = catalog.get(code)
        if prereq is None:
            resolved.append({"code": code, "title": None, "missing": True})
        else:
            resolved.append({"code": prereq.code, "title": prereq.title, "missing": False})
    return {"type": "list", "courses": resolved}


def lookup_course(catalog: Catalog, raw_query: str | None) -> dict:
    code = normalize_code(raw_query)
    if not code:
        return _error("EMPTY_QUERY")
    if not catalog.loaded:
        return _error("NOT_LOADED")

    course = catalog.get(code)
    if course is None:
        return _error("NOT_FOUND")

    return {
        "mode": "course",
        "course": {"code": course.code, "title": course.title},
        "prerequisites": resolve_prereqs(course, catalog),
    }


def format_prereq_line(prerequisites: dict) -> str:
    """
    Human-readable prerequisite line, e.g.
      "Prerequisites: None"
      "Prerequisites: CSCI100 (Introduction to Computer Science), CSCI050 (missing)"
    """
    if prerequisites.get("type") != "list":
        return "Prerequisites: None"
    parts = []
    for p in prerequisites["courses"]:
        label = "missing" if p["missing"] else p["title"]
        parts.append(f"{p['code']} ({label})")
    return "Prerequisites: " + ", ".join(parts)
