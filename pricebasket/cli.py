"""
Command-line interface for pricing a basket of goods.

Usage: pricebasket [OPTIONS] ITEMS...
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config
from .core.basket import Basket
from .core.catalog import Catalog
from .core.errors import (
    ConfigError,
    CorruptDataError,
    DataFileNotFoundError,
    InvalidItemError,
    UnknownItemError,
)
from .core.loader import DataReader
from .core.pricing import price
from .core.reporting import Reporter
from .offers.package import OfferPackage
from .plugins import load_parsers
from .utils.logging_setup import get_logger, log_operation, setup_logging

logger = get_logger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Exit codes
EXIT_CORRUPT_DATA = 1
EXIT_BAD_ITEM = 2


def _load_config(config_path, data_dir, as_json, verbose) -> Config:
    """Resolve configuration from file, environment and command-line flags."""
    if config_path:
        config = Config.from_file(config_path)
    else:
        config = Config.find_and_load(Path.cwd())
    config.apply_env_overrides()

    # Command-line flags win over everything else
    if data_dir:
        config.set("data.dir", str(data_dir))
    if as_json:
        config.set("report.format", "json")
    if verbose:
        config.set("logging.level", "DEBUG")
    return config


@click.command(name="pricebasket")
@click.argument("items", nargs=-1)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding catalog.list and offers.list"
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file"
)
@click.option("--json", "as_json", is_flag=True, help="Print the receipt as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="pricebasket")
def main(items, data_dir, config_path, as_json, verbose):
    """Price a basket of ITEMS against the catalog and the special offers."""
    try:
        config = _load_config(config_path, data_dir, as_json, verbose)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)
        sys.exit(EXIT_CORRUPT_DATA)

    setup_logging(
        level=config.get("logging.level", "WARNING"),
        json_format=config.get("logging.format") == "json",
    )
    log_operation(logger, "price_basket", items=list(items))

    reader = DataReader(
        config.get("data.dir", "."),
        create_missing=config.get("data.create_missing", True),
    )

    try:
        catalog = Catalog.load(reader, config.get("data.catalog_file"))
        offers = OfferPackage.load(
            catalog, reader,
            parsers=load_parsers(config.to_dict()),
            name=config.get("data.offers_file"),
        )
    except CorruptDataError as e:
        source = f"{e.source}: " if e.source else ""
        err_console.print(f"[red]Corrupt data file:[/red] {escape(source)}{escape(e.message)}", soft_wrap=True)
        sys.exit(EXIT_CORRUPT_DATA)
    except DataFileNotFoundError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)
        sys.exit(EXIT_CORRUPT_DATA)

    basket = Basket(catalog)
    for name in items:
        try:
            basket.add_item(name)
        except (InvalidItemError, UnknownItemError) as e:
            err_console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)
            sys.exit(EXIT_BAD_ITEM)

    if basket.is_empty:
        logger.info("No items given, pricing an empty basket")

    result = price(catalog, basket, offers)
    reporter = Reporter(config.to_dict())
    console.print(reporter.render(result), markup=False, soft_wrap=True)


if __name__ == "__main__":
    main()
