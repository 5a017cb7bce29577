from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .models import OutputExistsError, OutputWriteError

OUTPUT_CONSOLE = "console"
OUTPUT_FILE = "file"
OUTPUT_TYPES = [OUTPUT_CONSOLE, OUTPUT_FILE]

DEFAULT_LOGGER_NAME = "settingsflat"


class Reporter:
    def __init__(
        self,
        output_type: str = OUTPUT_CONSOLE,
        output_path: Optional[Path] = None,
        overwrite: bool = False,
        *,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if output_type not in OUTPUT_TYPES:
            raise ValueError(f"Unknown output type: {output_type}")
        if output_type == OUTPUT_FILE and output_path is None:
            raise ValueError("An output file path must be specified")
        self.output_type = output_type
        self.output_path = output_path
        self.overwrite = overwrite
        self.stream = stream
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())

    def check_destination(self) -> None:
        """Raise OutputExistsError if writing would clobber a file we may not replace."""
        if self.output_type == OUTPUT_FILE and self.output_path.exists() and not self.overwrite:
            raise OutputExistsError(self.output_path)

    def write(self, text: str) -> None:
        if self.output_type == OUTPUT_CONSOLE:
            print(text, file=self.stream or sys.stdout)
            return

        self.check_destination()
        if self.output_path.exists():
            self.logger.info("Overwriting %s", self.output_path)
        # encode before opening so a bad string never truncates the destination
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise OutputWriteError(self.output_path, f"text is not encodable as utf-8 ({exc.reason})") from exc
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_bytes(data)
        except OSError as exc:
            raise OutputWriteError(self.output_path, exc.strerror or str(exc)) from exc
        self.logger.info("Wrote %d bytes to %s", len(data), self.output_path)
