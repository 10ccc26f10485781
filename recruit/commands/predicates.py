"""Filter predicates used by the find command."""
from dataclasses import dataclass

from recruit.services.person import Person
from recruit.services.tags import Tag


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """True if word equals one of the whitespace-separated words in sentence."""
    word = word.strip().casefold()
    if not word:
        return False
    return word in (w.casefold() for w in sentence.split())


@dataclass(frozen=True)
class ContainsKeywordsPredicate:
    """
    Matches persons by name words and/or tags, ignoring case.

    Within one field any keyword may match; when both fields are given a
    person must match both.
    """

    name_keywords: tuple[str, ...] = ()
    tag_keywords: tuple[str, ...] = ()

    def __call__(self, person: Person) -> bool:
        if not self.name_keywords and not self.tag_keywords:
            return False
        if self.name_keywords and not any(
            contains_word_ignore_case(person.name.value, keyword) for keyword in self.name_keywords
        ):
            return False
        if self.tag_keywords and not any(
            Tag(keyword) in person.tags for keyword in self.tag_keywords
        ):
            return False
        return True
