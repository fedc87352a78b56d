"""
English pluralization and word series.

    >>> plural(42, "object")
    '42 objects'
    >>> plural_word(2, "child")
    'children'
    >>> oxford_word_series(["apples", "oranges", "bananas"])
    'apples, oranges, and bananas'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from collections.abc import Iterable
from functools import lru_cache
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import HumanConf
from .formatters import fmt_type, fmt_value
from .sentinels import UNSET, UnsetType
from .sink import Renderable

# @formatter:off

IRREGULAR_PLURALS = frozendict({
    "index": "indices", "matrix": "matrices", "vertex": "vertices",
    "radius": "radii", "focus": "foci", "nucleus": "nuclei",
    "syllabus": "syllabi", "fungus": "fungi", "cactus": "cacti",
    "thesis": "theses", "crisis": "crises",
    "phenomenon": "phenomena", "criterion": "criteria", "datum": "data",
    "child": "children", "person": "people", "man": "men", "woman": "women",
    "foot": "feet", "tooth": "teeth", "goose": "geese",
    "mouse": "mice", "louse": "lice", "ox": "oxen",
})

# Consonant + "o" words that take a plain "s"
O_EXCEPTIONS = frozenset({"photo", "piano", "halo", "zero", "auto", "memo", "solo"})

VOWELS = frozenset("aeiou")

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PluralWord(Renderable):
    """
    Word in singular or plural form depending on quantity.

    Attributes:
        quantity: Count the word refers to; 1 and -1 keep the singular.
        singular: Singular form.
        plural: Explicit plural form; None or "" to derive it with pluralize().

    Examples:
        >>> str(PluralWord(99, "locus").with_plural("loci"))
        'loci'
    """
    quantity: int
    singular: str
    plural: str | None = None

    def __post_init__(self):
        _validate_quantity(self.quantity)
        _validate_word(self.singular, "singular")
        if self.plural is not None:
            _validate_word(self.plural, "plural")

    def merge(self,
              quantity: int | UnsetType = UNSET,
              singular: str | UnsetType = UNSET,
              plural: str | None | UnsetType = UNSET,
              ) -> Self:
        """Create a new instance with merged options; UNSET arguments are inherited."""
        quantity = self.quantity if quantity is UNSET else quantity
        singular = self.singular if singular is UNSET else singular
        plural = self.plural if plural is UNSET else plural
        return type(self)(quantity=quantity, singular=singular, plural=plural)

    def with_plural(self, plural: str) -> Self:
        return self.merge(plural=plural)

    def __str__(self) -> str:
        if self.quantity in (1, -1):
            return self.singular
        if self.plural:
            return self.plural
        return pluralize(self.singular)


@dataclass(frozen=True)
class Plural(PluralWord):
    """
    Quantity followed by the word in matching form.

        >>> str(Plural(1, "object")), str(Plural(42, "object"))
        ('1 object', '42 objects')
    """

    def __str__(self) -> str:
        return f"{self.quantity} {super().__str__()}"


@dataclass(frozen=True)
class WordSeries(Renderable):
    """
    Natural-language list of words.

    Attributes:
        words: Words in display order.
        conjunction: Word placed before the last item.
        oxford: Place a serial comma before the conjunction in lists of three or more.

    Examples:
        >>> str(WordSeries(("foo", "bar", "baz")))
        'foo, bar and baz'
        >>> str(WordSeries(("foo", "bar", "baz")).with_conjunction("or").with_oxford_comma())
        'foo, bar, or baz'
    """
    words: tuple[str, ...]
    conjunction: str = HumanConf.CONJUNCTION
    oxford: bool = False

    def __post_init__(self):
        if isinstance(self.words, str) or not isinstance(self.words, Iterable):
            raise TypeError(f"words must be an iterable of str, but got {fmt_type(self.words)}")
        words = tuple(self.words)
        for word in words:
            _validate_word(word, "word")
        _validate_word(self.conjunction, "conjunction")
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "oxford", bool(self.oxford))

    def merge(self,
              words: Iterable[str] | UnsetType = UNSET,
              conjunction: str | UnsetType = UNSET,
              oxford: bool | UnsetType = UNSET,
              ) -> Self:
        """Create a new instance with merged options; UNSET arguments are inherited."""
        words = self.words if words is UNSET else words
        conjunction = self.conjunction if conjunction is UNSET else conjunction
        oxford = self.oxford if oxford is UNSET else oxford
        return type(self)(words=words, conjunction=conjunction, oxford=oxford)

    def with_conjunction(self, conjunction: str) -> Self:
        return self.merge(conjunction=conjunction)

    def with_oxford_comma(self) -> Self:
        return self.merge(oxford=True)

    def __str__(self) -> str:
        words = self.words
        if not words:
            return ""
        if len(words) == 1:
            return words[0]
        if len(words) == 2:
            return f"{words[0]} {self.conjunction} {words[1]}"

        head = ", ".join(words[:-1])
        joiner = f", {self.conjunction} " if self.oxford else f" {self.conjunction} "
        return f"{head}{joiner}{words[-1]}"


# Methods --------------------------------------------------------------------------------------------------------------

@lru_cache(maxsize=1024)
def pluralize(word: str) -> str:
    """
    Plural form of an English noun.

    Irregular nouns are looked up case-insensitively and returned as listed. Other words
    follow suffix rules, checked in order:

    - ends in s, x, z, sh, ch: add "es" - bus → buses, church → churches
    - consonant + y: y → "ies" - baby → babies (key → keys)
    - consonant + o: add "es" - hero → heroes, except photo, piano, halo, zero, auto,
      memo, solo which add "s"
    - ends in f: f → "ves" - leaf → leaves
    - ends in fe: fe → "ves" - knife → knives
    - otherwise add "s"

    All-uppercase words get uppercase suffixes: "BUS" → "BUSES".

    Results are memoised with lru_cache.
    """
    _validate_word(word, "word")
    if not word:
        return ""

    lower = word.lower()
    irregular = IRREGULAR_PLURALS.get(lower)
    if irregular is not None:
        return irregular

    def suffix(s: str) -> str:
        return s.upper() if len(word) > 1 and word.isupper() else s

    last = lower[-1]
    consonant_before = len(lower) >= 2 and lower[-2].isalpha() and lower[-2] not in VOWELS

    if last in "sxz" or lower.endswith(("sh", "ch")):
        return word + suffix("es")
    if last == "y" and consonant_before:
        return word[:-1] + suffix("ies")
    if last == "o" and consonant_before:
        return word + suffix("s" if lower in O_EXCEPTIONS else "es")
    if last == "f":
        return word[:-1] + suffix("ves")
    if lower.endswith("fe"):
        return word[:-2] + suffix("ves")
    return word + suffix("s")


def plural_word(quantity: int, singular: str, plural: str | None = None) -> str:
    """
    Singular for quantity 1 or -1, otherwise the plural override or pluralize(singular).

    Examples:
        >>> plural_word(1, "object")
        'object'
        >>> plural_word(2, "baby")
        'babies'
        >>> plural_word(0, "index")
        'indices'
    """
    return str(PluralWord(quantity, singular, plural=plural))


def plural(quantity: int, singular: str, plural: str | None = None) -> str:
    """
    Quantity, a space and plural_word() of the quantity.

    Examples:
        >>> plural(1, "object")
        '1 object'
        >>> plural(5, "cat")
        '5 cats'
    """
    return str(Plural(quantity, singular, plural=plural))


def word_series(words: Iterable[str], conjunction: str = HumanConf.CONJUNCTION, oxford: bool = False) -> str:
    """
    Join words into a natural-language list.

    Examples:
        >>> word_series([])
        ''
        >>> word_series(["foo", "bar"])
        'foo and bar'
        >>> word_series(["foo", "bar", "baz"], conjunction="or")
        'foo, bar or baz'
    """
    return str(WordSeries(words, conjunction=conjunction, oxford=oxford))


def oxford_word_series(words: Iterable[str], conjunction: str = HumanConf.CONJUNCTION) -> str:
    """
    Join words into a natural-language list with a serial comma.

        >>> oxford_word_series(["foo", "bar", "baz"])
        'foo, bar, and baz'
    """
    return word_series(words, conjunction=conjunction, oxford=True)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_quantity(quantity) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise TypeError(f"quantity must be int, but got {fmt_type(quantity)}")


def _validate_word(word, name: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"{name} must be str, but got {fmt_value(word)}")
