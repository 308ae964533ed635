"""String case helpers.

Every helper takes one string and returns one string. Word boundaries are
non-alphanumeric characters and case changes (``fooBar``, ``HTTPServer``).
Plural and singular forms come from the ``inflection`` library; they only
inflect the trailing word of the input.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

import inflection

StringHelper = Callable[[str], str]

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_WORD = re.compile(r"[^\W_]+")
_TRAILING_WORD = re.compile(r"\w*$")


def split_words(value: str) -> List[str]:
    """Split a string into its words, dropping separators."""
    value = _ACRONYM_BOUNDARY.sub(r"\1 \2", value)
    value = _CAMEL_BOUNDARY.sub(r"\1 \2", value)
    return _WORD.findall(value)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _trailing_word(value: str) -> str:
    match = _TRAILING_WORD.search(value)
    return match.group(0) if match else ""


def _inflect_last(words: List[str], inflect: StringHelper) -> List[str]:
    if not words:
        return words
    return words[:-1] + [inflect(words[-1])]


def to_lower_case(value: str) -> str:
    return value.lower()


def to_upper_case(value: str) -> str:
    return value.upper()


def to_camel_case(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w) for w in words[1:])


def to_pascal_case(value: str) -> str:
    return "".join(_capitalize(w) for w in split_words(value))


def to_snake_case(value: str) -> str:
    return "_".join(w.lower() for w in split_words(value))


def to_screaming_snake_case(value: str) -> str:
    return "_".join(w.upper() for w in split_words(value))


def to_kebab_case(value: str) -> str:
    return "-".join(w.lower() for w in split_words(value))


def to_train_case(value: str) -> str:
    return "-".join(_capitalize(w) for w in split_words(value))


def to_sentence_case(value: str) -> str:
    sentence = " ".join(w.lower() for w in split_words(value))
    return sentence[:1].upper() + sentence[1:]


def to_title_case(value: str) -> str:
    return " ".join(_capitalize(w) for w in split_words(value))


def to_plural(value: str) -> str:
    word = _trailing_word(value)
    return inflection.pluralize(word) if word else ""


def to_singular(value: str) -> str:
    word = _trailing_word(value)
    return inflection.singularize(word) if word else ""


def to_class_case(value: str) -> str:
    """PascalCase with the last word singularized: ``foo_bars`` -> ``FooBar``."""
    words = _inflect_last(split_words(value), inflection.singularize)
    return "".join(_capitalize(w) for w in words)


def to_table_case(value: str) -> str:
    """snake_case with the last word pluralized: ``FooBar`` -> ``foo_bars``."""
    words = _inflect_last(split_words(value), inflection.pluralize)
    return "_".join(w.lower() for w in words)


STRING_HELPERS: Dict[str, StringHelper] = {
    "to_lower_case": to_lower_case,
    "to_upper_case": to_upper_case,
    "to_camel_case": to_camel_case,
    "to_pascal_case": to_pascal_case,
    "to_snake_case": to_snake_case,
    "to_screaming_snake_case": to_screaming_snake_case,
    "to_kebab_case": to_kebab_case,
    "to_train_case": to_train_case,
    "to_sentence_case": to_sentence_case,
    "to_title_case": to_title_case,
    "to_class_case": to_class_case,
    "to_table_case": to_table_case,
    "to_plural": to_plural,
    "to_singular": to_singular,
}
