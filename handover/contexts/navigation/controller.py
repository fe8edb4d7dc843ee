"""
Active-section state machine for the handover guide.

The only mutable state in the navigation context is which section a viewer is
looking at. That state lives in a NavigationState owned by the caller, one per
view/session, and is passed into the controller on every call. The controller
itself holds nothing but the (immutable) catalog and the landing section, so one
controller can serve any number of independent views.

Usage:
    controller = NavigationController(load_catalog())
    state = controller.new_state()

    controller.set_active(state, SectionId.EXPENSE)   # sidebar click
    controller.resolve_and_activate(state, "수입")     # search box submit
"""

from dataclasses import dataclass
from typing import Optional, Union

from handover.contexts.navigation.exceptions import UnknownSectionError
from handover.contexts.navigation.logger import log_navigation, log_resolution
from handover.contexts.navigation.matcher import explain_match
from handover.contexts.navigation.section_catalog import SectionCatalog, SectionId


@dataclass
class NavigationState:
    """Per-viewer navigation state."""

    active_section: SectionId


class NavigationController:
    """Transitions a NavigationState between the sections of one catalog."""

    def __init__(
        self,
        catalog: SectionCatalog,
        default_section: Optional[Union[SectionId, str]] = None,
    ):
        """
        Initialize the controller.

        Args:
            catalog: Sections that can be navigated to
            default_section: Section new states start on. Defaults to the
                catalog's landing section

        Raises:
            UnknownSectionError: If default_section is not in the catalog
        """
        self.catalog = catalog

        if default_section is None:
            self.default_section = catalog.landing
        else:
            self.default_section = self._validate(default_section)

    def _validate(self, section_id: Union[SectionId, str]) -> SectionId:
        """Reject ids outside the catalog."""
        if section_id not in self.catalog:
            raise UnknownSectionError(section_id, available=self.catalog.all_ids())
        return SectionId.parse(section_id)

    def new_state(self) -> NavigationState:
        """Create state for a new view, starting on the default section."""
        return NavigationState(active_section=self.default_section)

    def set_active(self, state: NavigationState, section_id: Union[SectionId, str]) -> SectionId:
        """
        Make a section active unconditionally.

        Args:
            state: View state to update
            section_id: Target section

        Returns:
            The now-active SectionId

        Raises:
            UnknownSectionError: If section_id is not in the catalog
        """
        target = self._validate(section_id)
        previous = state.active_section

        state.active_section = target
        log_navigation(previous.value, target.value)

        return target

    def resolve_and_activate(self, state: NavigationState, query: str) -> Optional[SectionId]:
        """
        Resolve a search query and, on a hit, activate the matched section.

        A miss is a normal outcome: the state is left untouched and None is
        returned. Never raises.

        Args:
            state: View state to update
            query: Raw search input

        Returns:
            The activated SectionId, or None if nothing matched
        """
        match = explain_match(self.catalog, query)
        log_resolution(query, match)

        if match is None:
            return None

        return self.set_active(state, match.section_id)


class NavigationSession:
    """
    One viewer's navigation: a controller paired with its own state.

    Convenience for single-view callers such as the interactive CLI.
    """

    def __init__(self, controller: NavigationController, state: Optional[NavigationState] = None):
        self.controller = controller
        self.state = state if state is not None else controller.new_state()

    @property
    def catalog(self) -> SectionCatalog:
        return self.controller.catalog

    @property
    def active_section(self) -> SectionId:
        return self.state.active_section

    def set_active(self, section_id: Union[SectionId, str]) -> SectionId:
        return self.controller.set_active(self.state, section_id)

    def resolve_and_activate(self, query: str) -> Optional[SectionId]:
        return self.controller.resolve_and_activate(self.state, query)
