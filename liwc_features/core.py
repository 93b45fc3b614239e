"""
=============================================================================
LIWC Feature Function Definitions
=============================================================================
"""

# --- Library imports ---
import re
import warnings
from dataclasses import dataclass, field
from types import MappingProxyType
from re import Pattern
from typing import Dict, Iterable, List, Mapping, Optional, Union

from .segment import tokenize, split_sentences

__all__ = [
    "LIWCError",
    "DictionaryNotFound",
    "DictionaryFormatError",
    "EmptyInputError",
    "MissingNumbersCategoryError",
    "LIWCDictionary",
    "PUNCTUATION_FEATURES",
    "NUMBERS_POLICIES",
    "load_liwc_cat",
    "parse_liwc_cat",
    "build_category_pattern",
    "count_structure",
    "count_categories",
    "apply_numbers_adjustment",
    "build_feature_vector",
    "get_counts",
]


# --- Errors ---
class LIWCError(Exception):
    """Base class for dictionary and analysis errors."""


class DictionaryNotFound(LIWCError, FileNotFoundError):
    pass


class DictionaryFormatError(LIWCError, ValueError):
    pass


class EmptyInputError(LIWCError, ValueError):
    """Text has no word tokens, so every percentage would divide by zero."""


class MissingNumbersCategoryError(LIWCError, LookupError):
    pass


# --- LIWC.CAT line shapes (whole-line matches) ---
_HEADER_LINE = re.compile(r"\t[\w ]+", re.ASCII)
_MEMBER_LINE = re.compile(r"\t\t.+ \(\d+\)", re.ASCII)
WILDCARD_STEM = r"[\w']*"

NUMBERS_CATEGORY = "NUMBERS"
NUMBERS_POLICIES = ("error", "skip")


@dataclass(frozen=True, eq=False)
class LIWCDictionary:
    """
    Ordered, read-only mapping category name -> compiled pattern.
    Iteration order is the order categories first appear in the source,
    which is also the order of the dictionary fields in a feature vector.
    """
    categories: Mapping[str, Pattern] = field(default_factory=dict)
    source: Optional[str] = None

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    def __reduce__(self):
        # Pickle the plain dict; the read-only view is rebuilt on load
        return (type(self), (dict(self.categories), self.source))

    @property
    def names(self) -> List[str]:
        return list(self.categories)

    def pattern(self, name: str) -> Pattern:
        return self.categories[name]

    def __contains__(self, name) -> bool:
        return name in self.categories

    def __iter__(self):
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)


# --- Pattern compilation ---
def build_category_pattern(members: Iterable[str]) -> Pattern:
    """
    Compile the disjunction of member words into one pattern.
    Members are lower-cased and escaped; '*' becomes a stem wildcard.
    Each alternative must match a whole word.
    """
    alternatives = []
    for member in members:
        regex = re.escape(member.lower()).replace(r"\*", WILDCARD_STEM)
        alternatives.append(r"\b" + regex + r"\b")
    if not alternatives:
        # An empty alternation would match at every position
        raise DictionaryFormatError("Cannot build a category pattern without members.")
    return re.compile("(" + "|".join(alternatives) + ")", re.ASCII)


def parse_liwc_cat(text: str, source: Optional[str] = None) -> LIWCDictionary:
    """
    Parse LIWC.CAT content.
      - "\\t<name>"            : category header
      - "\\t\\t<word> (<n>)"   : member of the current category, n ignored
    Other lines are ignored. Categories without members are dropped.
    """
    members: Dict[str, List[str]] = {}
    current = None
    n_headers = 0

    for lineno, line in enumerate(text.splitlines(), 1):
        if _HEADER_LINE.fullmatch(line):
            current = line.split("\t")[1]
            if current in members:
                raise DictionaryFormatError(f"Line {lineno}: category '{current}' is defined twice.")
            members[current] = []
            n_headers += 1
        elif _MEMBER_LINE.fullmatch(line):
            if current is None:
                raise DictionaryFormatError(f"Line {lineno}: member line before any category header.")
            members[current].append(line.split()[0])

    if n_headers == 0:
        raise DictionaryFormatError("No category header found (expected TAB-indented category names).")

    compiled = {
        name: build_category_pattern(words)
        for name, words in members.items()
        if words
    }
    if not compiled:
        raise DictionaryFormatError("No category has any member word.")
    return LIWCDictionary(categories=compiled, source=source)


def load_liwc_cat(path, encoding: str = "utf-8") -> LIWCDictionary:
    """Load a LIWC.CAT dictionary file. Raises DictionaryNotFound / DictionaryFormatError."""
    try:
        with open(path, encoding=encoding) as f:
            text = f.read()
    except OSError as e:
        raise DictionaryNotFound(f"Dictionary file {path} cannot be read: {e}") from e
    return parse_liwc_cat(text, source=str(path))


# --- Structural and punctuation features ---
_NUMBER_TOKEN = re.compile(r"-?[\d,]*\.?\d+", re.ASCII)
_ABBREVIATION = re.compile(r"\w\.(?:\w\.)+", re.ASCII)
_EMOTICON = re.compile(r"[:;8%]-[)(@\[\]|]+", re.ASCII)
_QUESTION = re.compile(r"\w\s*\?", re.ASCII)

# Feature name -> pattern counted over the whole text (order is output order)
PUNCTUATION_FEATURES = {
    "PERIOD": re.compile(r"\."),
    "COMMA": re.compile(r","),
    "COLON": re.compile(r":"),
    "SEMIC": re.compile(r";"),
    "QMARK": re.compile(r"\?"),
    "EXCLAM": re.compile(r"!"),
    "DASH": re.compile(r"-"),
    "QUOTE": re.compile(r"\""),
    "APOSTRO": re.compile(r"'"),
    "PARENTH": re.compile(r"[(\[{]"),
    "OTHERP": re.compile(r"[^\w\d\s.:;?!\"'({\[,-]", re.ASCII),
}


def _count_matches(pattern: Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def count_structure(text: str, words: List[str], sentences: List[str], absolute_counts: bool = False):
    """
    Structural and punctuation features of one text.
    Return: (features, numbers) where features is an ordered dict
    (WC?, WPS, UNIQUE, SIXLTR, ABBREVIATIONS, EMOTICONS, QMARKS, 11 marks, ALLPCT)
    and numbers is the percentage of numeric tokens, folded into NUMBERS later.
    """
    n_words = len(words)
    n_sentences = len(sentences)
    if n_words == 0:
        raise EmptyInputError("Text has no word tokens.")
    if n_sentences == 0:
        raise EmptyInputError("Text has no sentence.")
    perc_factor = 100.0 / n_words

    counts: Dict[str, Union[int, float]] = {}
    # word count (raw, not a percentage)
    if absolute_counts:
        counts["WC"] = n_words
    counts["WPS"] = 1.0 * n_words / n_sentences

    sixletters = sum(1 for w in words if len(w) > 6)
    numbers = sum(1 for w in words if _NUMBER_TOKEN.fullmatch(w))

    counts["UNIQUE"] = perc_factor * len(set(words))
    counts["SIXLTR"] = perc_factor * sixletters
    counts["ABBREVIATIONS"] = perc_factor * _count_matches(_ABBREVIATION, text)
    counts["EMOTICONS"] = perc_factor * _count_matches(_EMOTICON, text)
    # questions are relative to sentences, not words
    counts["QMARKS"] = 100.0 * _count_matches(_QUESTION, text) / n_sentences

    allp = 0
    for name, rx in PUNCTUATION_FEATURES.items():
        c = _count_matches(rx, text)
        counts[name] = perc_factor * c
        allp += c
    counts["ALLPCT"] = perc_factor * allp

    # direct division, see count_categories
    return counts, 100.0 * numbers / n_words


# --- Dictionary features ---
def count_categories(dictionary: LIWCDictionary, words: List[str]):
    """
    Percentage of words per category, scanning each lower-cased token
    separately (a token can match a category more than once).
    Return: (scores in dictionary order, DIC)
    """
    n_words = len(words)
    if n_words == 0:
        raise EmptyInputError("Text has no word tokens.")

    lowered = [w.lower() for w in words]
    in_dic = set()
    scores: Dict[str, float] = {}
    for cat, rx in dictionary.categories.items():
        cat_count = 0
        for i, word in enumerate(lowered):
            for _ in rx.finditer(word):
                cat_count += 1
                in_dic.add(i)
        # Direct division avoids rounding drift from a shared factor
        scores[cat] = 100.0 * cat_count / n_words

    return scores, 100.0 * len(in_dic) / n_words


def apply_numbers_adjustment(scores: Dict[str, float], numbers: float, policy: str = "error") -> Dict[str, float]:
    """
    Add the structural number percentage to the NUMBERS category in place.
    policy:
      - 'error' : raise MissingNumbersCategoryError if NUMBERS is absent
      - 'skip'  : warn and leave scores unchanged if NUMBERS is absent
    """
    if policy not in NUMBERS_POLICIES:
        raise ValueError("numbers_policy must be 'error' or 'skip'")
    if NUMBERS_CATEGORY in scores:
        scores[NUMBERS_CATEGORY] = scores[NUMBERS_CATEGORY] + numbers
    elif policy == "error":
        raise MissingNumbersCategoryError(
            f"Dictionary has no '{NUMBERS_CATEGORY}' category to add numeric tokens to."
        )
    else:
        warnings.warn(
            f"Dictionary has no '{NUMBERS_CATEGORY}' category; numeric tokens are not counted.",
            UserWarning,
            stacklevel=2,
        )
    return scores


def build_feature_vector(structure: Mapping[str, float], scores: Mapping[str, float], dic: float) -> Dict[str, float]:
    """Merge structural features, category scores and DIC in output order."""
    vector = dict(structure)
    vector.update(scores)
    vector["DIC"] = dic
    return vector


def get_counts(
    dictionary: LIWCDictionary,
    text: str,
    absolute_counts: bool = False,
    numbers_policy: str = "error",
) -> Dict[str, float]:
    """
    Feature vector of one text: structural/punctuation features, one
    percentage per dictionary category, then DIC (% of words in any category).
    absolute_counts adds the raw word count WC as first field.
    """
    if numbers_policy not in NUMBERS_POLICIES:
        raise ValueError("numbers_policy must be 'error' or 'skip'")
    words = tokenize(text)
    if not words:
        raise EmptyInputError("Text is empty or contains no words.")
    sentences = split_sentences(text)

    structure, numbers = count_structure(text, words, sentences, absolute_counts=absolute_counts)
    scores, dic = count_categories(dictionary, words)
    apply_numbers_adjustment(scores, numbers, policy=numbers_policy)
    return build_feature_vector(structure, scores, dic)
