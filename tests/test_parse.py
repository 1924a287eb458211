"""Data-driven test suite for command extraction.

Reads test cases from test_cases.txt and validates that each input is
extracted to the expected command, free text and due date, with "now"
pinned so relative days resolve the same way on every run.

See test_cases.txt for the format specification.
"""

import pytest
from datetime import datetime
from pathlib import Path

from hazel.commands import extract

NOW = datetime(2017, 6, 1, 12, 0)


def _parse_value(s):
    """Parse a dotted-attribute value (always an int for datetimes)."""
    if s == "none":
        return None
    return int(s)


def _load_test_cases():
    """Load test cases from test_cases.txt."""
    path = Path(__file__).parent / "test_cases.txt"
    cases = []
    current = None

    for line_num, line in enumerate(path.read_text().splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped.startswith("> "):
            if current:
                cases.append(current)
            current = {
                "input": stripped[2:],
                "command": None,
                "checks": [],
                "line": line_num,
            }
            continue

        if current is None:
            continue

        # key: value
        key, _, value = stripped.partition(":")
        key = key.strip()
        value = value.strip()

        if key == "command":
            current["command"] = "" if value == "none" else value
        elif key == "text":
            current["checks"].append(("text", value))
        elif key == "due":
            current["checks"].append(("due", _parse_value(value)))
        elif key.startswith("due."):
            current["checks"].append(("dotted", key[4:], _parse_value(value)))
        else:
            raise ValueError(f"test_cases.txt line {line_num}: unknown key {key!r}")

    if current:
        cases.append(current)

    return cases


_CASES = _load_test_cases()


def _fmt(ex):
    """Format an Extraction for failure output."""
    due = ex.due.isoformat() if ex.due is not None else None
    return f"command={ex.command!r}, text={ex.text!r}, due={due}"


@pytest.mark.parametrize("case", _CASES, ids=[c["input"] for c in _CASES])
def test_parse(case):
    text = case["input"]
    ex = extract(text, now=NOW)

    assert ex.command == case["command"], (
        f"\n  Input:    {text!r}"
        f"\n  Expected: command={case['command']!r}"
        f"\n  Got:      {_fmt(ex)}"
    )

    # No-match case: everything else must be empty too
    if case["command"] == "":
        assert ex.text == "" and ex.due is None, (
            f"\n  Input:    {text!r}"
            f"\n  Expected: no match"
            f"\n  Got:      {_fmt(ex)}"
        )
        return

    for check in case["checks"]:
        kind = check[0]

        if kind == "text":
            assert ex.text == check[1], (
                f"\n  Input:    {text!r}"
                f"\n  Expected: text={check[1]!r}"
                f"\n  Got:      {_fmt(ex)}"
            )

        elif kind == "due":
            assert ex.due is None, (
                f"\n  Input:    {text!r}"
                f"\n  Expected: due=None"
                f"\n  Got:      {_fmt(ex)}"
            )

        elif kind == "dotted":
            attr, expected_val = check[1], check[2]
            actual_val = getattr(ex.due, attr, None)
            assert actual_val == expected_val, (
                f"\n  Input:    {text!r}"
                f"\n  Expected: due.{attr}={expected_val!r}"
                f"\n  Got:      due.{attr}={actual_val!r}"
                f"\n  Full:     {_fmt(ex)}"
            )


def test_cases_loaded():
    assert len(_CASES) > 30
    assert all(c["command"] is not None for c in _CASES)
