"""
Section catalog for the handover guide.

A catalog is the immutable, ordered registry of navigable sections. Each section
has a symbolic id from the closed SectionId set, a display label, and the search
keywords used by the matcher.

The order sections are supplied in is the catalog's declaration order. The matcher
scans in that order and the first hit wins, so the order is part of the contract.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from handover.contexts.navigation.exceptions import CatalogConfigError, UnknownSectionError


class SectionId(str, Enum):
    """Closed set of section identifiers, in sidebar order."""

    DASHBOARD = "dashboard"
    OVERVIEW = "overview"
    INCOME = "income"
    REALLOCATION = "reallocation"
    EXPENSE = "expense"
    SYSTEMS = "systems"
    CHECKLIST = "checklist"
    CONTACTS = "contacts"
    SECURITY = "security"

    @classmethod
    def parse(cls, value: Union["SectionId", str]) -> "SectionId":
        """
        Convert a raw identifier to a SectionId member.

        Args:
            value: SectionId member or its string value (case-insensitive)

        Returns:
            Matching SectionId member

        Raises:
            UnknownSectionError: If value is not a member of the closed set
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise UnknownSectionError(value, available=list(cls))


@dataclass(frozen=True)
class Section:
    """
    One navigable unit of guide content.

    Attributes:
        id: Symbolic identifier
        label: Sidebar/title text
        keywords: Search keywords (never empty strings)
        subtitle: One-line description shown under the title
    """

    id: SectionId
    label: str
    keywords: Tuple[str, ...] = ()
    subtitle: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, SectionId):
            raise CatalogConfigError(f"Section id must be a SectionId, got {self.id!r}")

        if not isinstance(self.label, str) or not self.label.strip():
            raise CatalogConfigError(f"Section '{self.id.value}' has an empty label")

        # A bare string would split into single-character keywords
        if isinstance(self.keywords, str):
            raise CatalogConfigError(
                f"Keywords for section '{self.id.value}' must be a sequence of strings, "
                f"not a single string",
                entry=self.keywords,
            )

        # Accept any sequence from callers but store a tuple
        object.__setattr__(self, "keywords", tuple(self.keywords))

        for keyword in self.keywords:
            # An empty keyword would be contained in every query
            if not isinstance(keyword, str) or not keyword.strip():
                raise CatalogConfigError(
                    f"Section '{self.id.value}' has an empty keyword",
                    entry=list(self.keywords),
                )


class SectionCatalog:
    """
    Immutable registry of sections in declaration order.

    All reads are total over the ids the catalog was built with. Asking for a
    SectionId that was not configured into this catalog raises UnknownSectionError.
    """

    def __init__(self, sections: Sequence[Section], landing: Optional[SectionId] = None):
        """
        Initialize the catalog.

        Args:
            sections: Sections in declaration order
            landing: Section shown first. Defaults to the first declared section

        Raises:
            CatalogConfigError: If the catalog is empty, or ids/labels repeat,
                or landing is not one of the sections
        """
        sections = tuple(sections)
        if not sections:
            raise CatalogConfigError("Section catalog must contain at least one section")

        by_id: Dict[SectionId, Section] = {}
        seen_labels = set()

        for section in sections:
            if section.id in by_id:
                raise CatalogConfigError(
                    f"Duplicate section id '{section.id.value}'", entry=section
                )
            if section.label in seen_labels:
                raise CatalogConfigError(
                    f"Duplicate section label '{section.label}'", entry=section
                )
            by_id[section.id] = section
            seen_labels.add(section.label)

        if landing is None:
            landing = sections[0].id
        else:
            try:
                landing = SectionId.parse(landing)
            except UnknownSectionError as e:
                raise CatalogConfigError(f"Invalid landing section: {e}") from e

            if landing not in by_id:
                raise CatalogConfigError(
                    f"Landing section '{landing.value}' is not in the catalog",
                    entry=[s.id.value for s in sections],
                )

        self._sections = sections
        self._by_id = by_id
        self._landing = landing

    @property
    def landing(self) -> SectionId:
        """Section a new view starts on."""
        return self._landing

    def get(self, section_id: Union[SectionId, str]) -> Section:
        """
        Get the section descriptor for an id.

        Args:
            section_id: SectionId member or its string value

        Returns:
            Section descriptor

        Raises:
            UnknownSectionError: If the id is not in this catalog
        """
        try:
            return self._by_id[SectionId.parse(section_id)]
        except KeyError:
            raise UnknownSectionError(section_id, available=self.all_ids()) from None

    def label_of(self, section_id: Union[SectionId, str]) -> str:
        return self.get(section_id).label

    def keywords_of(self, section_id: Union[SectionId, str]) -> Tuple[str, ...]:
        return self.get(section_id).keywords

    def subtitle_of(self, section_id: Union[SectionId, str]) -> Optional[str]:
        return self.get(section_id).subtitle

    def all_ids(self) -> Tuple[SectionId, ...]:
        """Section ids in declaration order."""
        return tuple(section.id for section in self._sections)

    def __contains__(self, section_id: object) -> bool:
        try:
            return SectionId.parse(section_id) in self._by_id
        except UnknownSectionError:
            return False

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        ids = ", ".join(section_id.value for section_id in self.all_ids())
        return f"SectionCatalog([{ids}], landing={self._landing.value})"
