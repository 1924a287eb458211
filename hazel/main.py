"""Hazel main loop.

Reads chat lines from stdin, extracts the command, and prints the reply.
The Telegram bot (if configured) shares the same router in a background thread.

Usage:
    python -m hazel
"""

import sys

from hazel.commands import DEFAULT_REGISTRY, Extractor
from hazel.commands.router import Router


def log(msg):
    print(msg, flush=True)


def build_router(registry=DEFAULT_REGISTRY):
    return Router(Extractor(registry))


def main():
    router = build_router()
    log(f"Commands: {', '.join(router.extractor.registry.names)}")

    # Start Telegram bot (if token is configured)
    try:
        from hazel.telegram_bot import start_telegram
        start_telegram(router)
    except Exception as e:
        log(f"Telegram bot failed to start: {e}")

    log("Type a command (Ctrl-D to quit).\n")

    try:
        for line in sys.stdin:
            text = line.strip()
            if not text:
                continue
            response, _ = router.dispatch(text)
            if response is None:
                log("  (no command)")
            else:
                log(f"  Response: \"{response}\"")
    except KeyboardInterrupt:
        pass
    log("\nShutting down.")


if __name__ == "__main__":
    main()
