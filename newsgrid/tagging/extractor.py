"""Tag extraction from article text."""

import re
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, FrozenSet, List

from ..errors import TagExtractionError

STOPWORDS: FrozenSet[str] = frozenset(
    """
    a about above after again against all also am an and any are as at be
    because been before being below between both but by can could did do does
    doing down during each even ever every few for from further get got had has
    have having he her here hers herself him himself his how i if in into is it
    its itself just last like made make many may me more most much must my
    myself new no nor not now of off on once one only or other our ours
    ourselves out over own said same say says she should since so some still
    such than that the their theirs them themselves then there these they this
    those through to too two under until up upon us very was we were what when
    where which while who whom why will with would year years yet you your
    yours yourself yourselves mr ms mrs
    """.split()
)

_WORD_RE = re.compile(r"[^\W\d_]+(?:['’-][^\W\d_]+)*")


class TagExtractor(ABC):
    """Base class for tag extractors."""

    @abstractmethod
    def extract_tags(self, text: str, count: int) -> List[str]:
        """
        Derive the top tags for a piece of text.

        Args:
            text: Article text
            count: Maximum number of tags to return

        Returns:
            Tags ordered from most to least relevant

        Raises:
            TagExtractionError: If no tags can be derived
        """
        pass


class KeywordTagExtractor(TagExtractor):
    """Rank terms by frequency, ignoring stopwords and short words."""

    def __init__(self, min_length: int = 3, stopwords: FrozenSet[str] = STOPWORDS) -> None:
        self.min_length = min_length
        self.stopwords = stopwords

    def _candidate_terms(self, text: str) -> List[str]:
        terms = []
        for match in _WORD_RE.finditer(text.lower()):
            term = match.group(0).replace("’", "'")
            if term.endswith("'s"):
                term = term[:-2]
            if len(term) < self.min_length or term in self.stopwords:
                continue
            terms.append(term)
        return terms

    def extract_tags(self, text: str, count: int) -> List[str]:
        if count < 1:
            raise TagExtractionError(f"Tag count must be positive, got {count}")

        terms = self._candidate_terms(text)
        if not terms:
            raise TagExtractionError("No candidate terms in text")

        counts = Counter(terms)
        first_seen: Dict[str, int] = {}
        for position, term in enumerate(terms):
            first_seen.setdefault(term, position)

        ranked = sorted(counts, key=lambda term: (-counts[term], first_seen[term]))
        return ranked[:count]
