"""Package of all the special offers available in the shop."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Union

from ..core.catalog import Catalog
from ..core.errors import AmbiguousRuleError, UnsupportedRuleError
from ..core.loader import OFFERS_FILE, NumberedLine, iter_data_lines, number_lines
from ..core.types import BasketView, OfferParser, OfferRule

if TYPE_CHECKING:
    from ..core.loader import DataReader

logger = logging.getLogger(__name__)


class OfferPackage:
    """
    Ordered collection of validated offer rules.

    Each line of the offers data file is one rule. Every registered parser is
    tried on every line and exactly one of them must accept it; a line that no
    parser accepts, or that more than one parser accepts, makes the whole
    file invalid.
    """

    def __init__(self, catalog: Catalog, rules: Iterable[OfferRule] = ()):
        self.catalog = catalog
        self._rules: List[OfferRule] = list(rules)
        self._warn_shared_descriptions()

    @classmethod
    def from_lines(cls, catalog: Catalog,
                   lines: Union[str, Iterable[str]],
                   parsers: Optional[Sequence[OfferParser]] = None,
                   source: Optional[str] = None) -> "OfferPackage":
        """
        Parse offer rules from raw text or an iterable of lines.

        Args:
            catalog: Catalog used to validate the items named by each rule
            lines: Offer rules, one per line
            parsers: Parsers to try on every line (default: registered parsers)
            source: Name of the data file, for error messages

        Returns:
            The parsed offer package

        Raises:
            UnsupportedRuleError: If no parser accepts a line
            AmbiguousRuleError: If more than one parser accepts a line
        """
        return cls._parse(catalog, number_lines(lines), parsers, source)

    @classmethod
    def from_text(cls, catalog: Catalog, text: str,
                  parsers: Optional[Sequence[OfferParser]] = None) -> "OfferPackage":
        return cls.from_lines(catalog, text, parsers)

    @classmethod
    def load(cls, catalog: Catalog, reader: "DataReader",
             parsers: Optional[Sequence[OfferParser]] = None,
             name: str = OFFERS_FILE) -> "OfferPackage":
        """Load the offers data file through a DataReader."""
        package = cls._parse(catalog, reader.read_lines(name), parsers, name)
        logger.info(f"Loaded {len(package)} offer rules from {name}")
        return package

    @classmethod
    def _parse(cls, catalog: Catalog,
               lines: Iterable[NumberedLine],
               parsers: Optional[Sequence[OfferParser]],
               source: Optional[str]) -> "OfferPackage":
        if parsers is None:
            from ..plugins import load_parsers
            parsers = load_parsers()
        parsers = list(parsers)

        rules: List[OfferRule] = []
        for line_number, line in iter_data_lines(lines):
            matches = []
            for parser in parsers:
                rule = parser.parse(catalog, line)
                if rule is not None:
                    matches.append((parser, rule))

            if not matches:
                raise UnsupportedRuleError(line, line_number, source)
            if len(matches) > 1:
                names = [getattr(parser, "name", type(parser).__name__) for parser, _ in matches]
                raise AmbiguousRuleError(line, line_number, names, source)

            parser, rule = matches[0]
            logger.debug(f"Line {line_number} parsed by {getattr(parser, 'name', parser)}: {rule.description}")
            rules.append(rule)

        return cls(catalog, rules)

    def _warn_shared_descriptions(self) -> None:
        counts = Counter(rule.description for rule in self._rules)
        for description, count in counts.items():
            if count > 1:
                logger.warning(
                    f"{count} offer rules share the description '{description}'; "
                    f"their discounts will be combined"
                )

    def available_offers(self) -> List[OfferRule]:
        """All offers, in the order they appear in the source."""
        return list(self._rules)

    def applicable_offers(self, basket: BasketView) -> List[OfferRule]:
        """Offers applicable to the given basket, in source order."""
        return [rule for rule in self._rules if rule.is_applicable(basket)]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[OfferRule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"OfferPackage({[rule.description for rule in self._rules]!r})"
