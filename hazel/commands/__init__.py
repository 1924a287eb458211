from hazel.commands.registry import CommandRegistry, CommandSpec
from hazel.commands.extractor import Extractor
from hazel.commands.parse import Extraction

DEFAULT_COMMANDS = [
    CommandSpec("remind", requires_payload=True),
    CommandSpec("list"),
    CommandSpec("clear", requires_payload=True),
    CommandSpec("clearall"),
    CommandSpec("renum"),
    CommandSpec("hazel"),
]

DEFAULT_REGISTRY = CommandRegistry(DEFAULT_COMMANDS)

extract = Extractor(DEFAULT_REGISTRY).extract
