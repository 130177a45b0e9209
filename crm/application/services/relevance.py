"""Heuristic relevance scoring for intelligent search.

Fields are passed in order of importance; field i has weight 1 / (i + 1).
Per field: exact match 100, prefix 80, substring 60, otherwise 30 times the
share of whitespace-separated words that contain the term. Scores are not
normalized and only compare within one search.
"""

from typing import Any

EXACT_MATCH_SCORE = 100.0
PREFIX_MATCH_SCORE = 80.0
SUBSTRING_MATCH_SCORE = 60.0
WORD_MATCH_SCORE = 30.0


def field_score(term: str, value: Any) -> float:
    """Unweighted score of one field value against a lower-cased term."""
    if value is None or value == "":
        return 0.0
    text = str(value).lower()
    if text == term:
        return EXACT_MATCH_SCORE
    if text.startswith(term):
        return PREFIX_MATCH_SCORE
    if term in text:
        return SUBSTRING_MATCH_SCORE
    words = text.split()
    matching = sum(1 for word in words if term in word)
    if matching:
        return WORD_MATCH_SCORE * matching / len(words)
    return 0.0


def calculate_relevance(search_term: str, *fields: Any) -> float:
    """Sum the harmonically weighted field scores for search_term.

    Args:
        search_term: Query text; trimmed and lower-cased here.
        fields: Candidate field values, most important first. None is skipped.

    Returns:
        Non-negative score.
    """
    term = search_term.strip().lower()
    score = 0.0
    for index, value in enumerate(fields):
        score += field_score(term, value) / (index + 1)
    return score
