"""
Word computations used when rendering names.

Handles capitalization and English singular/plural forms. Only the last word
of a name is inflected, so ``storage_domain`` becomes ``storage_domains``.
"""

import re
from typing import Dict, Optional

from .names import Name


# Irregular forms, singular -> plural
IRREGULAR_PLURALS: Dict[str, str] = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "datum": "data",
    "criterion": "criteria",
    "analysis": "analyses",
    "half": "halves",
    "knife": "knives",
    "leaf": "leaves",
    "life": "lives",
    "self": "selves",
    "shelf": "shelves",
    "wife": "wives",
    "wolf": "wolves",
}

# Words that are the same in both forms
UNCOUNTABLE_WORDS = {
    "data",
    "equipment",
    "information",
    "metadata",
    "series",
    "species",
    "statistics",
}


class Words:
    """Capitalization and inflection of single words and names."""

    def __init__(
        self,
        irregular: Optional[Dict[str, str]] = None,
        uncountable: Optional[set] = None,
    ):
        self.irregular = dict(IRREGULAR_PLURALS)
        if irregular:
            self.irregular.update(irregular)
        self.uncountable = set(UNCOUNTABLE_WORDS) | set(uncountable or ())
        self._singulars = {plural: singular for singular, plural in self.irregular.items()}

    def capitalize(self, word: str) -> str:
        return word[:1].upper() + word[1:].lower()

    def pluralize(self, word: str) -> str:
        """Return the plural form of a single lowercase word."""
        if not word or word in self.uncountable:
            return word
        if word in self.irregular:
            return self.irregular[word]
        if word in self._singulars:
            return word
        if re.search(r"[^aeiou]y$", word):
            return word[:-1] + "ies"
        if re.search(r"(s|x|z|ch|sh)$", word):
            return word + "es"
        return word + "s"

    def singularize(self, word: str) -> str:
        """Return the singular form of a single lowercase word."""
        if not word or word in self.uncountable:
            return word
        if word in self._singulars:
            return self._singulars[word]
        if word in self.irregular:
            return word
        if word.endswith("ies") and len(word) > 3:
            return word[:-3] + "y"
        if re.search(r"(ss|x|z|ch|sh|[^aeiou]us|ias)es$", word):
            return word[:-2]
        if word.endswith("ss") or word.endswith("us") or word.endswith("is"):
            return word
        if word.endswith("s"):
            return word[:-1]
        return word

    def plural(self, name: Name) -> Name:
        """Return the plural of a name, inflecting only the last word."""
        if not name:
            return name
        return name.with_last(self.pluralize(name.words[-1]))

    def singular(self, name: Name) -> Name:
        """Return the singular of a name, inflecting only the last word."""
        if not name:
            return name
        return name.with_last(self.singularize(name.words[-1]))


_default_words: Optional[Words] = None


def get_words() -> Words:
    """Get the shared word service."""
    global _default_words
    if _default_words is None:
        _default_words = Words()
    return _default_words
