from __future__ import annotations

import logging
from typing import Dict, Optional

from ..formatters.base import FormatterPlugin
from ..parsers.json_parser import JSONParser
from .flattener import flatten
from .loader import discover_formatter_plugins, select_formatter
from .models import ConvertOptions, FlatMapping
from .reporting import Reporter


DEFAULT_LOGGER_NAME = "settingsflat"


def configure_logging(verbose: bool = False, logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Configure and return the package logger.

    Ensures the converter has a configured logger even in script usage where
    ``logging.basicConfig`` was not called. Records go to stderr so they never
    mix with converted output printed on stdout; ``verbose`` raises the level
    from WARNING to INFO.
    """

    logger = logging.getLogger(logger_name)
    level = logging.INFO if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger


class SettingsConverter:
    def __init__(
        self,
        options: ConvertOptions,
        formatter_plugins: Optional[Dict[str, FormatterPlugin]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.options = options
        self.formatter_plugins = formatter_plugins if formatter_plugins is not None else discover_formatter_plugins()
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())
        self.parser = JSONParser(logger=base_logger)
        self.reporter = Reporter(
            output_type=options.output_type,
            output_path=options.output_path,
            overwrite=options.overwrite,
            logger=base_logger,
        )

    def load(self) -> FlatMapping:
        document = self.parser.parse(self.options.input_path)
        mapping = flatten(document)
        self.logger.info("Flattened %s into %d setting(s)", self.options.input_path, len(mapping))
        return mapping

    def render(self, mapping: FlatMapping) -> str:
        formatter = select_formatter(self.formatter_plugins, self.options.output_format)
        self.logger.info("Rendering with the %s formatter", formatter.NAME)
        return formatter.render(mapping, slot_setting=self.options.slot_setting)

    def run(self) -> str:
        """Convert the input file and write it out; returns the rendered text.

        Every step happens before the write, so any failure leaves the
        destination untouched.
        """
        # Fail fast on a formatter typo or a protected file before parsing.
        select_formatter(self.formatter_plugins, self.options.output_format)
        self.reporter.check_destination()

        text = self.render(self.load())
        self.reporter.write(text)
        return text
