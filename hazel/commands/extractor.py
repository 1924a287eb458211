"""Extraction facade: turns one chat line into (command, text, due).

    >>> from hazel.commands import DEFAULT_REGISTRY
    >>> Extractor(DEFAULT_REGISTRY).extract("remind me to feed the cat")
    Extraction(command='remind', text='feed the cat', due=None)

Everything after the matched keyword goes through split_payload(): the text
before the first ":" is the payload, the text after it is a due-date phrase
handed to dates.resolve(). A bad phrase only loses the due date, never the text.
"""

from hazel.commands import dates
from hazel.commands.parse import Extraction, NO_MATCH

_ME_TO = "me to "


def split_payload(rest):
    """Split what follows a command keyword into (text, phrase).

    phrase is None when there is no ":" in rest.
    """
    rest = rest.lstrip()
    if rest[:len(_ME_TO)].lower() == _ME_TO:
        rest = rest[len(_ME_TO):]

    text, colon, phrase = rest.partition(":")
    if not colon:
        return rest.strip(), None
    return text.strip(), phrase.strip()


class Extractor:
    """Matches lines against a CommandRegistry and pulls out payload and due date."""

    def __init__(self, registry):
        self.registry = registry

    def extract(self, line, now=None):
        """Extract the command, free text and due date from one chat line.

        Args:
            line: Raw chat text. Any string is accepted.
            now: Current moment for "today"/"tomorrow"; defaults to the clock.

        Returns:
            Extraction. Lines that don't start with a known command give
            Extraction("", "", None).
        """
        m = self.registry.match(line)
        if m is None:
            return NO_MATCH

        text, phrase = split_payload(line[m.end:])
        due = dates.resolve(phrase, now) if phrase else None
        return Extraction(command=m.command.name, text=text, due=due)

    def __repr__(self):
        return f"Extractor({self.registry!r})"
