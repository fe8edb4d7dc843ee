"""
Section catalog loading from YAML configuration.

Catalogs are declared once in a YAML file and turned into an immutable
SectionCatalog at startup. This is the only place configuration errors surface:
unknown ids, missing labels, and empty keywords are all rejected here.

Catalog format:
    landing: overview
    sections:
      - id: dashboard
        label: 대시보드
        subtitle: 오늘 처리해야 할 업무 유형과 ...
        keywords: [대시보드, 오늘, 처리, 마감]
      - id: overview
        ...

Sections are kept in file order; that order is the search tie-break.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from handover.contexts.navigation.exceptions import CatalogConfigError, UnknownSectionError
from handover.contexts.navigation.logger import log_catalog_loaded
from handover.contexts.navigation.section_catalog import Section, SectionCatalog, SectionId

load_dotenv()

CATALOGS_PATH = Path(__file__).parent / "catalogs"
DEFAULT_CATALOG_PATH = CATALOGS_PATH / "sections.yaml"


def available_catalogs() -> List[str]:
    """Names of the catalogs bundled with the package."""
    return sorted(path.stem for path in CATALOGS_PATH.glob("*.yaml"))


def bundled_catalog_path(name: str) -> Path:
    """
    Get the file path for a bundled catalog.

    Args:
        name: Catalog name (e.g., 'sections', 'sections_compact')

    Returns:
        Path to the catalog YAML file

    Raises:
        CatalogConfigError: If no bundled catalog has that name
    """
    path = CATALOGS_PATH / f"{name}.yaml"
    if not path.exists():
        raise CatalogConfigError(
            f"Bundled catalog '{name}' not found. Available catalogs: {available_catalogs()}"
        )
    return path


def default_catalog_path() -> Path:
    """Catalog path from SECTION_CATALOG_PATH, falling back to the bundled catalog."""
    configured = os.getenv("SECTION_CATALOG_PATH")
    return Path(configured) if configured else DEFAULT_CATALOG_PATH


def _section_from_entry(entry: Any, config_path: Path = None) -> Section:
    """Build one Section from a raw config entry."""
    if not isinstance(entry, dict):
        raise CatalogConfigError("Section entry must be a mapping", config_path, entry)

    if "id" not in entry:
        raise CatalogConfigError("Section entry is missing 'id'", config_path, entry)

    try:
        section_id = SectionId.parse(str(entry["id"]))
    except UnknownSectionError as e:
        raise CatalogConfigError(str(e), config_path, entry) from e

    label = entry.get("label")
    if not isinstance(label, str) or not label.strip():
        raise CatalogConfigError(
            f"Section '{section_id.value}' is missing a label", config_path, entry
        )

    keywords = entry.get("keywords") or []
    if not isinstance(keywords, list):
        raise CatalogConfigError(
            f"Keywords for section '{section_id.value}' must be a list", config_path, entry
        )
    for keyword in keywords:
        # YAML reads bare yes/no/on/off as booleans
        if isinstance(keyword, bool):
            raise CatalogConfigError(
                f"Keyword {keyword!r} for section '{section_id.value}' is a YAML boolean; "
                "quote it (e.g. \"yes\")",
                config_path,
                entry,
            )
    # YAML turns bare numbers like 73733 into ints
    keywords = [str(k) if isinstance(k, (int, float)) else k for k in keywords]

    subtitle = entry.get("subtitle")
    if subtitle is not None and not isinstance(subtitle, str):
        raise CatalogConfigError(
            f"Subtitle for section '{section_id.value}' must be a string", config_path, entry
        )

    try:
        return Section(
            id=section_id,
            label=label,
            keywords=tuple(keywords),
            subtitle=subtitle,
        )
    except CatalogConfigError as e:
        raise CatalogConfigError(e.message, config_path, entry) from e


def catalog_from_dict(data: Dict[str, Any], config_path: Path = None) -> SectionCatalog:
    """
    Build a catalog from a plain config dict.

    Args:
        data: Dict with a 'sections' list and an optional 'landing' id
        config_path: Source file, used only for error messages

    Returns:
        SectionCatalog with sections in the order given

    Raises:
        CatalogConfigError: If the config is malformed
    """
    if not isinstance(data, dict):
        raise CatalogConfigError("Catalog config must be a mapping", config_path)

    entries = data.get("sections")
    if not isinstance(entries, list) or not entries:
        raise CatalogConfigError(
            "Catalog config must contain a non-empty 'sections' list", config_path
        )

    sections = [_section_from_entry(entry, config_path) for entry in entries]

    landing = data.get("landing")
    if landing is not None:
        try:
            landing = SectionId.parse(str(landing))
        except UnknownSectionError as e:
            raise CatalogConfigError(f"Invalid landing section: {e}", config_path) from e

    try:
        return SectionCatalog(sections, landing=landing)
    except CatalogConfigError as e:
        raise CatalogConfigError(e.message, config_path, e.entry) from e


def load_catalog(config_path: Path = None) -> SectionCatalog:
    """
    Load a section catalog from YAML.

    Args:
        config_path: Optional path to catalog file (defaults to SECTION_CATALOG_PATH
                     env variable, then the bundled sections.yaml)

    Returns:
        SectionCatalog

    Raises:
        CatalogConfigError: If the file is missing, unreadable, or invalid
    """
    if config_path is None:
        config_path = default_catalog_path()
    config_path = Path(config_path)

    if not config_path.exists():
        raise CatalogConfigError("Catalog file not found", config_path)
    if not config_path.is_file():
        raise CatalogConfigError("Catalog path is not a file", config_path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (OmegaConfBaseException, YAMLError) as e:
        raise CatalogConfigError(f"Could not parse catalog: {e}", config_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogConfigError(f"Could not read catalog: {e}", config_path) from e

    catalog = catalog_from_dict(data, config_path)
    log_catalog_loaded(config_path, len(catalog), catalog.landing.value)

    return catalog
