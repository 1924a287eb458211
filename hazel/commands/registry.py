"""Command registry: the fixed set of keywords a chat line may start with.

A keyword only counts when the character right after it is a boundary:
end of input, whitespace, or one of ":", "~", "!". So "listen" is not
"list", "clearance" is not "clear" and "hazelnut" is not "hazel".

When several keywords qualify, the longest wins ("clearall" over "clear").

Examples:
    >>> reg = CommandRegistry([CommandSpec("clear", True), CommandSpec("clearall")])
    >>> reg.match("clearall").command.name
    'clearall'
    >>> reg.match("clear 2").end
    6
    >>> reg.match("clearance sale") is None
    True
"""

from dataclasses import dataclass

BOUNDARY_CHARS = ":~!"


def is_boundary(text, index):
    """True if a keyword ending at `index` in text is properly terminated."""
    if index >= len(text):
        return True
    ch = text[index]
    return ch.isspace() or ch in BOUNDARY_CHARS


@dataclass(frozen=True)
class CommandSpec:
    name: str
    requires_payload: bool = False


@dataclass(frozen=True)
class Match:
    command: CommandSpec
    end: int    # where the remainder starts; a ":" boundary is left in place


class CommandRegistry:
    """An immutable, ordered set of CommandSpecs."""

    def __init__(self, specs):
        normalized = []
        seen = set()
        for spec in specs:
            name = spec.name.lower()
            if not name:
                raise ValueError("Command name must not be empty")
            if any(ch.isspace() or ch in BOUNDARY_CHARS for ch in name):
                raise ValueError(f"Command name {spec.name!r} contains a boundary character")
            if name in seen:
                raise ValueError(f"Duplicate command name: {spec.name!r}")
            seen.add(name)
            normalized.append(CommandSpec(name, spec.requires_payload))

        self._specs = tuple(normalized)
        # Longest first; sorted() is stable so declared order breaks ties
        self._by_length = tuple(sorted(self._specs, key=lambda s: -len(s.name)))

    def __iter__(self):
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)

    def __contains__(self, name):
        return self.get(name) is not None

    def __repr__(self):
        return f"CommandRegistry({list(self.names)!r})"

    @property
    def names(self):
        return tuple(s.name for s in self._specs)

    def get(self, name):
        """Look up a spec by name (case-insensitive). Returns CommandSpec or None."""
        name = name.lower()
        for spec in self._specs:
            if spec.name == name:
                return spec
        return None

    def match(self, text):
        """Find the command that `text` invokes. Returns Match or None."""
        for spec in self._by_length:
            n = len(spec.name)
            if text[:n].lower() != spec.name or not is_boundary(text, n):
                continue
            end = n
            if end < len(text) and text[end] != ":":
                end += 1
            return Match(spec, end)
        return None
