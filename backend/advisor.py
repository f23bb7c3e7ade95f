"""
Interactive advising shell.

Menu-driven front end over the catalog operations. It only prompts, calls
load_catalog / list_courses / lookup_course and prints their results.

Usage:
  python backend/advisor.py                       # interactive menu
  python backend/advisor.py --data data/courses.csv
  python backend/advisor.py --data data/courses.csv --course csci-300
  python backend/advisor.py --data data/courses.csv --list
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, TextIO

from dotenv import load_dotenv

from catalog import ERROR_MESSAGES, Catalog, format_prereq_line, list_courses, lookup_course
from data_loader import load_catalog

BACKEND_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(BACKEND_DIR)

DIVIDER = "-" * 40
MENU = (
    "1. Load Data Structure\n"
    "2. Print Course List\n"
    "3. Print Course\n"
    "9. Exit"
)
CHOICE_LOAD = "1"
CHOICE_LIST = "2"
CHOICE_COURSE = "3"
CHOICE_EXIT = "9"


def _default_data_path() -> str | None:
    """COURSE_DATA_PATH from the environment (or .env), relative to the project root."""
    env_path = os.environ.get("COURSE_DATA_PATH", "").strip()
    if not env_path:
        return None
    if not os.path.isabs(env_path):
        return os.path.join(PROJECT_ROOT, env_path)
    return env_path


def _prompt(text: str, input_fn: Callable[[], str], output: TextIO) -> str | None:
    """Write a prompt and read one line. None means input is exhausted."""
    output.write(text)
    output.flush()
    try:
        return input_fn()
    except EOFError:
        return None


def print_result(result: dict, output: TextIO) -> bool:
    """Print a list/course/error result. Returns False for error results."""
    mode = result.get("mode")
    if mode == "error":
        print(result["error"]["message"], file=output)
        return False
    if mode == "list":
        for code, title in result["courses"]:
            print(f"{code}, {title}", file=output)
        return True
    course = result["course"]
    print(f"{course['code']}, {course['title']}", file=output)
    print(format_prereq_line(result["prerequisites"]), file=output)
    return True


def run_menu(
    catalog: Catalog,
    input_fn: Callable[[], str] = input,
    output: TextIO | None = None,
) -> None:
    """Loop over the menu until the user exits or input runs out."""
    output = output or sys.stdout
    print("Welcome to the course planner.", file=output)

    while True:
        print(DIVIDER, file=output)
        print(MENU, file=output)
        print(DIVIDER, file=output)
        choice = _prompt("Enter choice: ", input_fn, output)
        if choice is None:
            print(file=output)
            return
        choice = choice.strip()

        if choice == CHOICE_LOAD:
            filename = _prompt("Enter the file name: ", input_fn, output)
            if filename is None:
                return
            filename = filename.strip()
            if not filename:
                print("No file name entered.", file=output)
                continue
            load_catalog(filename, catalog)
        elif choice == CHOICE_LIST:
            print_result(list_courses(catalog), output)
        elif choice == CHOICE_COURSE:
            if not catalog.loaded:
                print(ERROR_MESSAGES["NOT_LOADED"], file=output)
                continue
            query = _prompt("What course do you want to know about? ", input_fn, output)
            if query is None:
                return
            print_result(lookup_course(catalog, query), output)
        elif choice == CHOICE_EXIT:
            print("Thank you for using the Advising Assistance Program.", file=output)
            return
        else:
            print("That is not a valid option. Try again.", file=output)


def main(argv=None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Course advising assistant: list courses and look up prerequisites."
    )
    parser.add_argument(
        "--data",
        type=str,
        default=_default_data_path(),
        help="Course file to load at startup (default: $COURSE_DATA_PATH).",
    )
    parser.add_argument("--list", action="store_true", help="Print the course list and exit.")
    parser.add_argument("--course", type=str, help="Print one course with its prerequisites and exit.")
    args = parser.parse_args(argv)

    catalog = Catalog()
    one_shot = args.list or args.course is not None

    if args.data:
        outcome = load_catalog(args.data, catalog)
        if one_shot and not outcome["success"]:
            return 1
    elif one_shot:
        parser.error("--list and --course need a course file (--data or COURSE_DATA_PATH)")

    if one_shot:
        ok = True
        if args.list:
            ok = print_result(list_courses(catalog), sys.stdout) and ok
        if args.course is not None:
            ok = print_result(lookup_course(catalog, args.course), sys.stdout) and ok
        return 0 if ok else 1

    try:
        run_menu(catalog)
    except KeyboardInterrupt:
        print("\nStopped by user.", flush=True)
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
