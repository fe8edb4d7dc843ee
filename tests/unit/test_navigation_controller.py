"""Unit tests for NavigationController, NavigationState and NavigationSession."""

import pytest
from loguru import logger

from handover.contexts.navigation.controller import (
    NavigationController,
    NavigationSession,
    NavigationState,
)
from handover.contexts.navigation.exceptions import UnknownSectionError
from handover.contexts.navigation.section_catalog import Section, SectionCatalog, SectionId


@pytest.fixture
def catalog():
    """Two-section catalog: overview lands, income is searchable."""
    return SectionCatalog(
        [
            Section(SectionId.OVERVIEW, "업무 개요", ("개요", "흐름")),
            Section(SectionId.INCOME, "수입 업무 튜토리얼", ("수입", "계좌거래")),
        ],
        landing=SectionId.OVERVIEW,
    )


@pytest.fixture
def controller(catalog):
    return NavigationController(catalog)


@pytest.fixture
def log_messages():
    """Capture loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.mark.unit
def test_new_state_starts_on_landing(controller):
    state = controller.new_state()
    assert state.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_explicit_default_section(catalog):
    controller = NavigationController(catalog, default_section="income")
    assert controller.new_state().active_section is SectionId.INCOME


@pytest.mark.unit
def test_default_section_must_be_in_catalog(catalog):
    """A default outside the catalog is rejected at construction."""
    with pytest.raises(UnknownSectionError):
        NavigationController(catalog, default_section=SectionId.CONTACTS)

    with pytest.raises(UnknownSectionError):
        NavigationController(catalog, default_section="payroll")


@pytest.mark.unit
def test_set_active_round_trip(controller, catalog):
    """set_active(i) leaves active_section == i for every id."""
    state = controller.new_state()

    for section_id in catalog.all_ids():
        assert controller.set_active(state, section_id) is section_id
        assert state.active_section is section_id


@pytest.mark.unit
def test_set_active_is_idempotent(controller):
    state = controller.new_state()

    controller.set_active(state, SectionId.INCOME)
    controller.set_active(state, SectionId.INCOME)

    assert state.active_section is SectionId.INCOME


@pytest.mark.unit
def test_set_active_accepts_string(controller):
    state = controller.new_state()
    assert controller.set_active(state, "income") is SectionId.INCOME
    assert state.active_section is SectionId.INCOME


@pytest.mark.unit
def test_set_active_rejects_unknown(controller):
    """Ids outside the catalog raise and leave the state alone."""
    state = controller.new_state()

    with pytest.raises(UnknownSectionError):
        controller.set_active(state, SectionId.SECURITY)
    with pytest.raises(UnknownSectionError):
        controller.set_active(state, "payroll")

    assert state.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_resolve_and_activate_scenario(controller):
    """Search 수입 -> income; then a miss leaves income active."""
    state = controller.new_state()
    assert state.active_section is SectionId.OVERVIEW

    assert controller.resolve_and_activate(state, "수입") is SectionId.INCOME
    assert state.active_section is SectionId.INCOME

    assert controller.resolve_and_activate(state, "존재하지않는검색어") is None
    assert state.active_section is SectionId.INCOME


@pytest.mark.unit
def test_resolve_reverse_containment(controller):
    state = controller.new_state()
    assert controller.resolve_and_activate(state, "이번달 수입 정리") is SectionId.INCOME


@pytest.mark.unit
@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_resolve_empty_query_is_a_miss(controller, query):
    state = controller.new_state()
    controller.set_active(state, SectionId.INCOME)

    assert controller.resolve_and_activate(state, query) is None
    assert state.active_section is SectionId.INCOME


@pytest.mark.unit
def test_repeated_misses_leave_state(controller):
    state = controller.new_state()
    controller.set_active(state, SectionId.INCOME)

    controller.resolve_and_activate(state, "없는메뉴")
    controller.resolve_and_activate(state, "없는메뉴")

    assert state.active_section is SectionId.INCOME


@pytest.mark.unit
def test_states_are_independent(controller):
    """One controller serves many views without sharing their state."""
    first = controller.new_state()
    second = controller.new_state()

    controller.resolve_and_activate(first, "수입")

    assert first.active_section is SectionId.INCOME
    assert second.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_caller_owned_state(controller):
    """The controller works on any state object the caller hands it."""
    state = NavigationState(active_section=SectionId.INCOME)
    controller.resolve_and_activate(state, "개요")
    assert state.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_session_wraps_controller(controller):
    session = NavigationSession(controller)

    assert session.active_section is SectionId.OVERVIEW
    assert session.catalog is controller.catalog

    assert session.resolve_and_activate("계좌거래") is SectionId.INCOME
    assert session.active_section is SectionId.INCOME

    assert session.set_active(SectionId.OVERVIEW) is SectionId.OVERVIEW
    assert session.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_sessions_do_not_share_state(controller):
    first = NavigationSession(controller)
    second = NavigationSession(controller)

    first.set_active("income")

    assert second.active_section is SectionId.OVERVIEW


@pytest.mark.unit
def test_resolution_is_logged(controller, log_messages):
    """Hits and misses are logged at debug level with the [nav] prefix."""
    state = controller.new_state()

    controller.resolve_and_activate(state, "수입")
    controller.resolve_and_activate(state, "없는메뉴")

    text = "".join(log_messages)
    assert "[nav]" in text
    assert "resolved to 'income'" in text
    assert "No section matches" in text
    assert "Navigated 'overview' -> 'income'" in text
