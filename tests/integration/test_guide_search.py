"""
Integration tests for search against the bundled guide catalogs.

Uses the real Korean labels and keywords, including the collisions the catalog
order resolves (e.g. "e-Branch" is a keyword of both overview and systems).
"""

import pytest

from handover.contexts.navigation import (
    MatchRule,
    NavigationController,
    NavigationSession,
    SectionId,
    bundled_catalog_path,
    explain_match,
    find_section,
    load_catalog,
)


@pytest.fixture(scope="module")
def catalog():
    return load_catalog(bundled_catalog_path("sections"))


@pytest.fixture(scope="module")
def compact_catalog():
    return load_catalog(bundled_catalog_path("sections_compact"))


@pytest.mark.integration
@pytest.mark.parametrize(
    "query, expected",
    [
        ("수입", SectionId.INCOME),
        ("지출", SectionId.EXPENSE),
        ("대체결의", SectionId.REALLOCATION),
        ("간접비", SectionId.REALLOCATION),
        ("세금계산서", SectionId.EXPENSE),
        ("73733", SectionId.EXPENSE),
        ("체크리스트", SectionId.CHECKLIST),
        ("증빙", SectionId.CHECKLIST),
        ("비밀번호", SectionId.SECURITY),
        ("마스킹", SectionId.SECURITY),
        ("연락처", SectionId.CONTACTS),
        ("마감", SectionId.DASHBOARD),
        ("흐름", SectionId.OVERVIEW),
    ],
)
def test_keyword_search(catalog, query, expected):
    assert find_section(catalog, query) is expected


@pytest.mark.integration
def test_every_label_resolves_to_its_section(catalog):
    """Labels are distinctive enough that each one finds its own section."""
    for section in catalog:
        assert find_section(catalog, section.label) is section.id


@pytest.mark.integration
def test_label_with_spacing_and_case(catalog):
    assert find_section(catalog, "  보안및 유의 사항 ") is SectionId.SECURITY
    assert find_section(catalog, "E-BRANCH") is SectionId.OVERVIEW


@pytest.mark.integration
def test_shared_keyword_goes_to_earlier_section(catalog):
    """e-Branch is listed under overview and systems; overview is declared first."""
    match = explain_match(catalog, "e-Branch")

    assert match.section_id is SectionId.OVERVIEW
    assert match.rule is MatchRule.KEYWORD_CONTAINS_QUERY


@pytest.mark.integration
def test_shared_prefix_goes_to_earlier_section(catalog):
    """계좌 is a prefix of income's 계좌거래 and a keyword of security."""
    assert find_section(catalog, "계좌") is SectionId.INCOME


@pytest.mark.integration
def test_tutorial_label_tie(catalog):
    """Three labels end in 튜토리얼; income is declared first."""
    assert find_section(catalog, "튜토리얼") is SectionId.INCOME


@pytest.mark.integration
def test_reverse_containment(catalog):
    match = explain_match(catalog, "이번달 수입 정리")

    assert match.section_id is SectionId.INCOME
    assert match.rule is MatchRule.QUERY_CONTAINS_KEYWORD


@pytest.mark.integration
def test_sentence_query(catalog):
    assert find_section(catalog, "담당자 연락처 알려줘") is SectionId.CONTACTS


@pytest.mark.integration
def test_no_match(catalog):
    assert find_section(catalog, "존재하지않는검색어") is None


@pytest.mark.integration
def test_compact_catalog_has_no_contacts(compact_catalog):
    """Without a contacts page the same sentence finds nothing."""
    assert find_section(compact_catalog, "담당자 연락처 알려줘") is None
    assert find_section(compact_catalog, "비밀번호") is SectionId.SECURITY


@pytest.mark.integration
def test_browsing_session(catalog):
    """Sidebar clicks and searches on one view of the full guide."""
    session = NavigationSession(NavigationController(catalog))
    assert session.active_section is SectionId.OVERVIEW

    session.set_active(SectionId.CHECKLIST)
    assert session.resolve_and_activate("존재하지않는검색어") is None
    assert session.active_section is SectionId.CHECKLIST

    assert session.resolve_and_activate("카드 청구") is SectionId.EXPENSE
    assert session.active_section is SectionId.EXPENSE
