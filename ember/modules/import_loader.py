from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from ember.ast import Program
from ember.config import get_source_extension
from ember.errors import EmberImportError
from ember.reader.parser import parse_program
from ember.reader.tokens import Location
from ember.reporter import Reporter

logger = logging.getLogger(__name__)

ParseFn = Callable[[str, Reporter, str], Program]
ReadTextFn = Callable[[str], str]


def read_text_file(path: str) -> str:
    return Path(path).read_text(encoding='utf-8')


class ImportLoader:
    """Reads, parses and caches imported source files.

    Programs are cached under their normalized filename. A file whose parse
    reported errors is not cached, so a later import reads it again.
    """

    def __init__(
        self,
        parse_fn: ParseFn = parse_program,
        read_text: Optional[ReadTextFn] = None,
        extension: Optional[str] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self.parse_fn = parse_fn
        self.read_text: ReadTextFn = read_text if read_text is not None else read_text_file
        self.extension = extension if extension is not None else get_source_extension()
        self.base_dir: Optional[Path] = Path(base_dir) if base_dir is not None else None
        self.cache: Dict[str, Program] = {}

    def normalize(self, filename: str) -> str:
        """Append the default extension when there is none and resolve
        relative paths against the base directory."""
        path = Path(filename)
        if path.suffix == '':
            path = path.with_name(path.name + self.extension)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return str(path)

    def load(self, filename: str, reporter: Reporter, location: Optional[Location] = None) -> Optional[Program]:
        """Return the parsed program for `filename`.

        Raises EmberImportError when the file cannot be read. Returns None when
        parsing reported errors; those are already in `reporter`.
        """
        key = self.normalize(filename)
        program = self.cache.get(key)
        if program is not None:
            logger.debug("import cache hit: %s", key)
            return program

        logger.debug("import cache miss: %s", key)
        try:
            source = self.read_text(key)
        except OSError as err:
            logger.debug("cannot read %s: %s", key, err)
            raise EmberImportError(f"Couldn't read imported file '{filename}'", location)

        errors_before = reporter.error_count
        program = self.parse_fn(source, reporter, key)
        if reporter.error_count > errors_before:
            return None

        self.cache[key] = program
        return program

    def clear(self) -> None:
        self.cache.clear()
