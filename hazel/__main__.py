"""Entry point for `python -m hazel`."""

import sys


def _parse_cmd(text, now=None):
    """Extract a single input and print the result in test_cases.txt format."""
    from hazel.commands import extract

    ex = extract(text, now=now)

    print(f"> {text}")

    if not ex.matched:
        print("command: none")
        return

    print(f"command: {ex.command}")
    print(f"text: {ex.text}")

    if ex.due is None:
        print("due: none")
    else:
        for attr in ("year", "month", "day", "hour", "minute"):
            print(f"due.{attr}: {getattr(ex.due, attr)}")


if __name__ == "__main__":
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(" ".join(sys.argv[2:]))
    else:
        from hazel.main import main
        main()
