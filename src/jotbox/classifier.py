"""
Keyword classifier for Jotbox.

Routes a note into one of the taxonomy categories by scoring whole-word
keyword hits. Title hits count double. Pure and deterministic: no I/O, no
state beyond a cache of compiled patterns.
"""

import re
from functools import lru_cache
from typing import Mapping, Sequence

from jotbox.taxonomy import CATEGORIES, GENERAL

# Title is a stronger signal than body
TITLE_WEIGHT = 2
CONTENT_WEIGHT = 1


@lru_cache(maxsize=None)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile a bounded, literal pattern for a keyword or phrase."""
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


def count_matches(keyword: str, text: str) -> int:
    """Count bounded occurrences of keyword in already lower-cased text."""
    return len(keyword_pattern(keyword).findall(text))


def score_categories(
    title: str,
    content: str,
    taxonomy: Mapping[str, Sequence[str]] = CATEGORIES,
) -> dict[str, int]:
    """
    Score every category against a title/content pair.

    Returns a dict in taxonomy order, category -> score.
    """
    title_lower = title.lower()
    content_lower = content.lower()

    scores: dict[str, int] = {}
    for category, keywords in taxonomy.items():
        score = 0
        for keyword in keywords:
            score += TITLE_WEIGHT * count_matches(keyword, title_lower)
            score += CONTENT_WEIGHT * count_matches(keyword, content_lower)
        scores[category] = score

    return scores


def categorize(
    title: str,
    content: str,
    taxonomy: Mapping[str, Sequence[str]] = CATEGORIES,
) -> str:
    """
    Pick the category for a note.

    The strictly highest score wins; on a tie the category that comes first in
    the taxonomy keeps it. If nothing matched at all, returns General.
    """
    best_category = GENERAL
    best_score = 0

    for category, score in score_categories(title, content, taxonomy).items():
        if score > best_score:
            best_score = score
            best_category = category

    return best_category
