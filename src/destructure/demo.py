"""Demonstration driver: seven literal values destructured and printed."""
from __future__ import annotations

from typing import Any

from rich.console import Console

from .extractor import destructured, extract, extract_each
from .logging import get_logger
from .patterns import key, name, obj, seq

logger = get_logger(__name__)


def _fmt(value: Any) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(_fmt(v) for v in value) + "]"
    return str(value)


def array_defaults() -> list[str]:
    numbers = [5, 10]
    b = extract(numbers, seq(name("a", 0), name("b", 0), name("c", 0)))
    return [f"{b['a']} {b['b']} {b['c']}"]


def object_defaults() -> list[str]:
    user = {"name": "Alice", "age": 30}
    b = extract(user, obj("name", "age", key("location", default="Unknown")))
    return [f"{b['name']} is {b['age']} years old and lives in {b['location']}"]


def skipping_elements() -> list[str]:
    colors = ["red", "green", "blue", "yellow"]
    b = extract(colors, seq("first", None, None, "last"))
    return [f"{b['first']} {b['last']}"]


def nested_object() -> list[str]:
    book = {
        "title": "JavaScript Guide",
        "author": {"name": "John Doe", "country": "USA"},
        "publisher": {"name": "Tech Press", "year": 2020},
    }
    b = extract(
        book,
        obj(
            "title",
            key("author", obj(key("name", as_="authorName"))),
            key("publisher", obj("year")),
        ),
    )
    return [f"{b['title']} by {b['authorName']}, published in {b['year']}"]


@destructured(obj(key("theme", default="light"), key("fontSize", default="medium"), default={}))
def configure_settings(theme: str, fontSize: str) -> str:
    return f"Theme: {theme}, Font Size: {fontSize}"


def parameter_defaults() -> list[str]:
    return [configure_settings({"theme": "dark"})]


def rest_elements() -> list[str]:
    scores = [85, 90, 75, 88, 92]
    b = extract(scores, seq("firstScore", "secondScore", rest="remainingScores"))
    return [f"{b['firstScore']} {b['secondScore']}", _fmt(b["remainingScores"])]


USERS = [
    {"id": 1, "profile": {"name": "Alice", "details": {"age": 30, "city": "New York"}}},
    # No city: falls back to the default
    {"id": 2, "profile": {"name": "Bob", "details": {"age": 25}}},
]

PROFILE_PATTERN = obj(
    key(
        "profile",
        obj(
            "name",
            key("details", obj("age", key("city", default="Location Unknown")), default={}),
        ),
    )
)


def user_profiles(users: list[dict] | None = None) -> list[str]:
    return [
        f"{b['name']} is {b['age']} years old and lives in {b['city']}"
        for b in extract_each(USERS if users is None else users, PROFILE_PATTERN)
    ]


EXAMPLES = [
    ("array_defaults", array_defaults),
    ("object_defaults", object_defaults),
    ("skipping_elements", skipping_elements),
    ("nested_object", nested_object),
    ("parameter_defaults", parameter_defaults),
    ("rest_elements", rest_elements),
    ("user_profiles", user_profiles),
]


def demo_lines() -> list[str]:
    lines: list[str] = []
    for example, run in EXAMPLES:
        output = run()
        logger.info("demo.example", example=example, lines=len(output))
        lines.extend(output)
    return lines


def run_demo(console: Console | None = None) -> None:
    console = console or Console()
    for line in demo_lines():
        console.print(line, markup=False, highlight=False, soft_wrap=True)
