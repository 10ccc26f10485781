"""
Command-line syntax: argument prefixes and the tokenizer that splits an
argument string on them.

    " 1 n/John Doe t/friend t/colleague"

tokenizes to preamble "1", n/ -> ["John Doe"], t/ -> ["friend", "colleague"].
A prefix only counts when it starts the string or follows whitespace, so
"an/" inside a value is not mistaken for "n/".
"""
import re
from dataclasses import dataclass
from typing import Optional

from recruit.commands.messages import duplicate_prefixes_message
from recruit.services.exceptions import ParseError


@dataclass(frozen=True)
class Prefix:
    """An argument marker such as 'n/'."""
    prefix: str

    def __str__(self):
        return self.prefix


PREAMBLE = Prefix("")
PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")


class ArgumentMultimap:
    """Values collected per prefix, in the order they appeared."""

    def __init__(self):
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Last value given for prefix, or None."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def get_preamble(self) -> str:
        return self.get_value(PREAMBLE) or ""

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Raises:
            ParseError: one of the single-valued prefixes was given more than once
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(duplicate_prefixes_message(duplicated))


class ArgumentTokenizer:
    """Splits an argument string into preamble and per-prefix values."""

    @staticmethod
    def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
        positions = []
        for prefix in prefixes:
            pattern = re.compile(r"(?:^|(?<=\s))" + re.escape(prefix.prefix))
            positions.extend((match.start(), prefix) for match in pattern.finditer(args_string))
        positions.sort(key=lambda position: position[0])

        multimap = ArgumentMultimap()
        preamble_end = positions[0][0] if positions else len(args_string)
        multimap.put(PREAMBLE, args_string[:preamble_end].strip())

        for i, (start, prefix) in enumerate(positions):
            value_start = start + len(prefix.prefix)
            value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
            multimap.put(prefix, args_string[value_start:value_end].strip())

        return multimap
