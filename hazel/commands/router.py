"""Command router: extracts each chat line and dispatches it to a handler.

Handlers are registered per command name:
    handler(extraction: Extraction) -> str   # the reply to send back

Commands with no registered handler get a plain description of what was
understood, so the bot stays usable while handlers are being written.
"""

import os
from datetime import datetime

# Log file: lives next to the hazel package directory
_LOG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "hazel.log")


def describe(ex):
    """One-line summary of an Extraction, used as the default reply."""
    parts = [ex.command]
    if ex.text:
        parts.append(repr(ex.text))
    if ex.due is not None:
        parts.append(f"due {ex.due.strftime('%a %d %b %Y %I:%M %p')}")
    return "Got it: " + " ".join(parts)


class Router:
    """Routes chat lines to per-command handlers using an Extractor."""

    def __init__(self, extractor, log_path=_LOG_PATH):
        self.extractor = extractor
        self.log_path = log_path  # None disables the request log
        self._handlers = {}

    def register(self, name, handler):
        """Register handler(extraction) -> str for a known command name."""
        spec = self.extractor.registry.get(name)
        if spec is None:
            raise ValueError(f"Unknown command: {name!r}")
        self._handlers[spec.name] = handler

    def dispatch(self, text, source="[console]"):
        """Extract the command from text and run its handler.

        Args:
            text: One line of chat input.
            source: Source tag for logging, e.g. "[console]" or "[Telegram:Joe]".

        Returns:
            (response, extraction): response is None when no command matched.
        """
        ex = self.extractor.extract(text)
        self._log_request(text, ex, source)

        if not ex.matched:
            return None, ex

        spec = self.extractor.registry.get(ex.command)
        if spec.requires_payload and not ex.text:
            return f"{ex.command} what? Try \"{ex.command} <text>\".", ex

        handler = self._handlers.get(ex.command)
        if handler is None:
            return describe(ex), ex
        return handler(ex), ex

    def _log_request(self, text, ex, source):
        """Append a compact 2-line entry to the log file."""
        if self.log_path is None:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        if not ex.matched:
            parse_line = "  -> none"
        else:
            parts = [ex.command, f"text={ex.text!r}"]
            if ex.due is not None:
                parts.append(f"due={ex.due.isoformat()}")
            parse_line = f"  -> {', '.join(parts)}"
        try:
            with open(self.log_path, "a") as f:
                f.write(f"{ts} {source}  {text}\n{parse_line}\n")
        except OSError:
            pass
