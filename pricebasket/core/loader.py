"""Data file loading utilities."""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .errors import DataFileNotFoundError

logger = logging.getLogger(__name__)

CATALOG_FILE = "catalog.list"
OFFERS_FILE = "offers.list"

NumberedLine = Tuple[int, str]

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def iter_data_lines(lines: Iterable[NumberedLine]) -> Iterator[NumberedLine]:
    """Yield trimmed, meaningful lines from a numbered line source.

    Blank lines and lines whose first non-whitespace character is ``#``
    are skipped.

    Args:
        lines: ``(line_number, text)`` pairs, numbered from 1

    Returns:
        Iterator of ``(line_number, trimmed_text)`` pairs
    """
    for line_number, text in lines:
        text = text.strip()
        if not text or text.startswith("#"):
            continue
        yield line_number, text


def number_lines(lines: Union[str, Iterable[str]]) -> List[NumberedLine]:
    """Number raw text (or an iterable of lines) from 1.

    Text is split on \\n, \\r\\n and \\r only; other separators such as form
    feeds stay inside their line.
    """
    if isinstance(lines, str):
        lines = LINE_BREAK.split(lines)
        if lines[-1] == "":
            lines.pop()
    return list(enumerate(lines, start=1))


class DataReader:
    """
    Reader for the catalog and offer data files.

    Default data files are packaged with the application, but the user can
    override them by placing their own copies in the data directory. When a
    file does not exist there, the packaged default is used and, unless
    ``create_missing`` is off, written out so it can be edited later.
    """

    DEFAULTS_PACKAGE = "pricebasket"
    DEFAULTS_DIR = "defaults"

    def __init__(self, data_dir: Optional[Union[str, Path]] = None,
                 create_missing: bool = True):
        """
        Initialize the reader.

        Args:
            data_dir: Directory holding the data files (default: cwd)
            create_missing: Write packaged defaults to data_dir when absent
        """
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd()
        self.create_missing = create_missing

    def path_for(self, name: str) -> Path:
        """Path of a data file inside the data directory."""
        return self.data_dir / name

    def default_content(self, name: str) -> Optional[str]:
        """Packaged default content for a data file, if one exists."""
        resource = (resources.files(self.DEFAULTS_PACKAGE)
                    .joinpath(self.DEFAULTS_DIR)
                    .joinpath(name))
        if not resource.is_file():
            return None
        return resource.read_text(encoding="utf-8")

    def read_text(self, name: str) -> str:
        """Read a data file, falling back to its packaged default."""
        path = self.path_for(name)
        if path.exists():
            logger.debug(f"Reading {name} from {path}")
            return path.read_text(encoding="utf-8")

        content = self.default_content(name)
        if content is None:
            raise DataFileNotFoundError(name, str(path))

        if self.create_missing:
            logger.info(f"Creating {path} with default contents")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        else:
            logger.debug(f"Using packaged default for {name}")
        return content

    def read_lines(self, name: str) -> List[NumberedLine]:
        """Read a data file as ``(line_number, text)`` pairs, numbered from 1."""
        return number_lines(self.read_text(name))
