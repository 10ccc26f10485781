"""
Tag and Tags - case-insensitive labels attached to a person.

A Tags value is immutable: combine/exclude/replace return a new Tags and
never touch the receiver. Equality and hashing of a Tag ignore case, so
"Friend" and "friend" are the same tag; the original spelling is kept for
display.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple

from recruit.services.exceptions import ValidationError

TAG_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True, eq=False)
class Tag:
    """A single label. Compares and hashes case-insensitively."""

    tag_name: str

    MESSAGE_CONSTRAINTS = "Tag names should be alphanumeric"

    def __post_init__(self):
        if not isinstance(self.tag_name, str) or not self.is_valid_tag_name(self.tag_name):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid_tag_name(test: str) -> bool:
        """Check a raw string against the tag format."""
        return TAG_NAME_PATTERN.fullmatch(test) is not None

    @property
    def key(self) -> str:
        return self.tag_name.lower()

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return f"[{self.tag_name}]"


class TagSeparationResult(NamedTuple):
    """Incoming tags split against an existing set."""
    new_tags: "Tags"
    duplicate_tags: "Tags"

    def __str__(self):
        return f"New: {self.new_tags}, Duplicates: {self.duplicate_tags}"


class Tags:
    """
    Immutable set of unique Tag objects.

    Construction from raw strings goes through from_strings(), which raises
    ValidationError on the first invalid name. Iteration order is sorted by
    lowercase name so output is stable.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[Tag] = ()):
        tag_set = frozenset(tags)
        for tag in tag_set:
            if not isinstance(tag, Tag):
                raise TypeError(f"Tags can only hold Tag objects, got {type(tag).__name__}")
        object.__setattr__(self, "_tags", tag_set)

    def __setattr__(self, name, value):
        raise AttributeError("Tags is immutable")

    @classmethod
    def from_strings(cls, tag_names: Iterable[str]) -> "Tags":
        """Build a Tags value from raw tag names (whitespace is trimmed)."""
        return cls(Tag(name.strip()) for name in tag_names)

    def combine(self, other: "Tags") -> "Tags":
        """Union. Tags already in the receiver keep the receiver's spelling."""
        return Tags(self._tags | other._tags)

    def exclude(self, other: "Tags") -> "Tags":
        """Difference: the receiver's tags minus any tag also in other."""
        return Tags(self._tags - other._tags)

    def replace(self, old_tag: Tag, new_tag: Tag) -> "Tags":
        """Drop old_tag (if present) and insert new_tag."""
        return Tags((self._tags - {old_tag}) | {new_tag})

    def separate_new_from_existing(self, incoming: "Tags") -> TagSeparationResult:
        """
        Split incoming tags into ones the receiver lacks and ones it already has.

        Duplicates are returned as the receiver's own Tag instances, so their
        spelling matches what is stored rather than what was typed.
        """
        existing = {tag: tag for tag in self._tags}
        new_tags = []
        duplicate_tags = []
        for tag in incoming._tags:
            if tag in existing:
                duplicate_tags.append(existing[tag])
            else:
                new_tags.append(tag)
        return TagSeparationResult(Tags(new_tags), Tags(duplicate_tags))

    def get(self, tag: Tag):
        """Return the stored instance equal to tag, or None."""
        return {stored: stored for stored in self._tags}.get(tag)

    def contains(self, tag: Tag) -> bool:
        return tag in self._tags

    def is_empty(self) -> bool:
        return not self._tags

    def to_strings(self) -> list[str]:
        """Raw tag names in display order."""
        return [tag.tag_name for tag in self]

    def __contains__(self, tag) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(sorted(self._tags, key=lambda t: (t.key, t.tag_name)))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other):
        if not isinstance(other, Tags):
            return NotImplemented
        return self._tags == other._tags

    def __hash__(self):
        return hash(self._tags)

    def __str__(self):
        return "[" + ", ".join(f'"{name}"' for name in self.to_strings()) + "]"

    def __repr__(self):
        return f"Tags({self.to_strings()!r})"
