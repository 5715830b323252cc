"""Plugin system for loading offer rule parsers."""

import logging
from importlib.metadata import entry_points
from typing import Any, Dict, List, Optional

from .core.types import OfferParser
from .offers.bundle import BundleOfferParser
from .offers.discount import DiscountOfferParser

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "pricebasket.offer_parsers"

# Parsers that are always available
DEFAULT_PARSERS: List[OfferParser] = [
    DiscountOfferParser(),
    BundleOfferParser(),
]


def discover_parsers(group: str = ENTRY_POINT_GROUP) -> Dict[str, OfferParser]:
    """Discover offer parsers registered by installed packages.

    Each entry point must resolve to a parser class (instantiated with no
    arguments) or to a ready-made parser instance.

    Args:
        group: Entry point group to search

    Returns:
        Dictionary mapping parser names to parser instances
    """
    discovered: Dict[str, OfferParser] = {}

    for entry_point in entry_points(group=group):
        try:
            target = entry_point.load()
        except ImportError as e:
            logger.warning(f"Could not load offer parser plugin '{entry_point.name}': {e}")
            continue

        parser = target() if isinstance(target, type) else target
        if not isinstance(parser, OfferParser):
            logger.warning(f"Plugin '{entry_point.name}' is not an offer parser, skipping")
            continue

        name = getattr(parser, "name", entry_point.name)
        discovered[name] = parser
        logger.debug(f"Discovered offer parser plugin '{name}'")

    return discovered


def load_parsers(config: Optional[Dict[str, Any]] = None) -> List[OfferParser]:
    """Load offer parsers based on configuration.

    Args:
        config: Configuration dictionary (``offers`` section is used)

    Returns:
        List of parser instances, built-in parsers first
    """
    offers_config = (config or {}).get("offers", {}) or {}

    parsers = DEFAULT_PARSERS.copy()

    if offers_config.get("discover_plugins", True):
        builtin = {parser.name for parser in parsers}
        for name, parser in discover_parsers().items():
            if name in builtin:
                logger.warning(f"Plugin parser '{name}' shadows a built-in parser, skipping")
                continue
            parsers.append(parser)

    disabled = offers_config.get("disabled_parsers", []) or []
    parsers = [p for p in parsers if p.name not in disabled]

    return parsers
