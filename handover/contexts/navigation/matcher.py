"""
Search resolution for the handover guide.

Maps a free-text query to a section id by plain substring containment. No fuzzy
matching and no ranking: catalog declaration order decides, and the first section
satisfying any rule wins.

Per section, rules are tried in this order:
    1. label contains the query
    2. some keyword contains the query
    3. the query contains some keyword (long phrase typed around a short keyword)

Both sides are normalized (lower-cased, all whitespace removed) on every
comparison. Nothing is cached, so a catalog built at any time is always matched
against its current strings.

Examples:
    >>> find_section(catalog, "수입")
    <SectionId.INCOME: 'income'>
    >>> find_section(catalog, "이번달 수입 정리")
    <SectionId.INCOME: 'income'>
    >>> find_section(catalog, "   ") is None
    True
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from handover.contexts.navigation.section_catalog import SectionCatalog, SectionId


class MatchRule(Enum):
    """Which containment rule resolved a query."""

    LABEL_CONTAINS_QUERY = "label_contains_query"
    KEYWORD_CONTAINS_QUERY = "keyword_contains_query"
    QUERY_CONTAINS_KEYWORD = "query_contains_keyword"


@dataclass(frozen=True)
class SectionMatch:
    """
    Result of a successful resolution.

    Attributes:
        section_id: Resolved section
        rule: Rule that matched
        matched_text: The label or keyword (as written in the catalog) that matched
    """

    section_id: SectionId
    rule: MatchRule
    matched_text: str


def normalize(text: str) -> str:
    """
    Normalize text for matching.

    Lower-cases and removes every whitespace character (spaces, tabs, newlines,
    including Unicode spaces), so "수입 업무" and "수입업무" compare equal.

    Args:
        text: Raw label, keyword, or query

    Returns:
        Normalized text
    """
    return "".join(text.lower().split())


def explain_match(catalog: SectionCatalog, query: str) -> Optional[SectionMatch]:
    """
    Resolve a query and report which rule matched.

    Args:
        catalog: Catalog to scan in declaration order
        query: Raw user input, any length or content

    Returns:
        SectionMatch for the first section satisfying a rule, or None if no
        section matches (including empty and whitespace-only queries)
    """
    if not isinstance(query, str) or not query.strip():
        return None

    q = normalize(query)

    for section in catalog:
        if q in normalize(section.label):
            return SectionMatch(section.id, MatchRule.LABEL_CONTAINS_QUERY, section.label)

        for keyword in section.keywords:
            if q in normalize(keyword):
                return SectionMatch(section.id, MatchRule.KEYWORD_CONTAINS_QUERY, keyword)

        for keyword in section.keywords:
            normalized_keyword = normalize(keyword)
            # "" is contained in every query
            if normalized_keyword and normalized_keyword in q:
                return SectionMatch(section.id, MatchRule.QUERY_CONTAINS_KEYWORD, keyword)

    return None


def find_section(catalog: SectionCatalog, query: str) -> Optional[SectionId]:
    """
    Resolve a query to a section id.

    Args:
        catalog: Catalog to scan in declaration order
        query: Raw user input

    Returns:
        Matched SectionId, or None if nothing matches
    """
    match = explain_match(catalog, query)
    return match.section_id if match else None
