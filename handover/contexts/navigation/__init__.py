"""
Navigation Context

Responsibilities:
- Declares the closed catalog of guide sections (id, label, keywords)
- Tracks which section a viewer has active
- Resolves free-text search queries to a section

Owns: Section catalog, active-section state machine, search resolution
Never: Renders guide content or persists state
"""

from handover.contexts.navigation.catalog_loader import (
    available_catalogs,
    bundled_catalog_path,
    catalog_from_dict,
    load_catalog,
)
from handover.contexts.navigation.controller import (
    NavigationController,
    NavigationSession,
    NavigationState,
)
from handover.contexts.navigation.exceptions import CatalogConfigError, UnknownSectionError
from handover.contexts.navigation.matcher import (
    MatchRule,
    SectionMatch,
    explain_match,
    find_section,
    normalize,
)
from handover.contexts.navigation.section_catalog import Section, SectionCatalog, SectionId

__all__ = [
    # Catalog
    "SectionId",
    "Section",
    "SectionCatalog",
    "load_catalog",
    "catalog_from_dict",
    "available_catalogs",
    "bundled_catalog_path",
    # Resolution
    "normalize",
    "find_section",
    "explain_match",
    "MatchRule",
    "SectionMatch",
    # State machine
    "NavigationState",
    "NavigationController",
    "NavigationSession",
    # Errors
    "CatalogConfigError",
    "UnknownSectionError",
]
