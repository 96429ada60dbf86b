#!/usr/bin/env python3

"""Model-to-platform class generator orchestrator (Application Layer).

Coordinates the modular components for a generation run:
- DeclarationParser: loads interface declarations from source files
- Context: run-wide mapping rules, built once from all loaded declarations
- InterfaceEmitter: generates and writes the classes of one declaration
"""

from collections.abc import Iterable
from pathlib import Path

from ...domain.models.declaration import DeclarationUnit
from ...domain.services.generation import Context, InterfaceEmitter
from ...domain.services.parsing import DeclarationParser
from ...infrastructure.config import Config
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


class ModelGenerator:
    """Generates platform classes for every declaration in a set of inputs.

    Processing is fail-fast: the first error aborts the run. Files written
    for earlier declarations stay in place; generation is deterministic, so
    a re-run overwrites them with identical content.
    """

    def __init__(self, config: Config, parser: DeclarationParser | None = None):
        """Initialize generator.

        Args:
            config: Run configuration
            parser: Declaration parser (created on demand when omitted)
        """
        self.config = config
        self.parser = parser or DeclarationParser()
        self.tracker = ProgressTracker(logger)

    @staticmethod
    def discover_input_files(input_paths: Iterable[Path]) -> list[Path]:
        """Expand input paths into a sorted, de-duplicated list of source files.

        Directories are searched recursively for ``*.cs`` files.
        """
        files: set[Path] = set()
        for input_path in input_paths:
            if input_path.is_dir():
                files.update(p for p in input_path.rglob("*.cs") if p.is_file())
            elif DeclarationParser.is_supported_file(input_path):
                files.add(input_path)
            else:
                logger.warning(f"Skipping unsupported input file: {input_path}")
        return sorted(files)

    @log_timing
    def load_units(self, input_paths: Iterable[Path] | None = None) -> list[DeclarationUnit]:
        """Load every declaration unit from the configured inputs.

        Raises:
            StructuralError: If any input violates the nesting rules
        """
        files = self.discover_input_files(input_paths or self.config.input_paths)
        logger.info(f"Loading declarations from {len(files)} file(s)")

        units: list[DeclarationUnit] = []
        with self.tracker.track_operation("load declarations"):
            for file_path in files:
                units.extend(self.parser.parse_file(file_path))

        logger.info(f"Loaded {len(units)} declaration(s)")
        return units

    def build_context(self, units: list[DeclarationUnit], target_platform: str | None = None) -> Context:
        return Context.create(self.config, units, target_platform=target_platform)

    @log_timing
    def generate_units(self, context: Context, units: list[DeclarationUnit]) -> list[Path]:
        """Generate and write the classes for every unit.

        Args:
            context: Run context
            units: Declaration units in processing order

        Returns:
            Paths of all written files

        Raises:
            CodegenError: On the first invalid declaration
        """
        written: list[Path] = []
        for i, unit in enumerate(units, 1):
            name = unit.declaration.name
            logger.debug(f"[{i}/{len(units)}] Generating {context.output_strategy.platform}: {name}")
            with self.tracker.track_declaration(name):
                paths = InterfaceEmitter(context, unit).write()
            for path in paths:
                self.tracker.count_file()
                logger.debug(f"Generated: {path}")
            written.extend(paths)
        return written

    @log_timing
    def run(self, platforms: Iterable[str] | None = None) -> list[Path]:
        """Load the inputs once and generate for each requested platform.

        Args:
            platforms: Platform identifiers; defaults to the configured one

        Returns:
            Paths of all written files
        """
        units = self.load_units()
        written: list[Path] = []
        for platform in platforms or [self.config.target_platform]:
            context = self.build_context(units, target_platform=platform)
            logger.info(f"Generating {len(units)} declaration(s) for {context.output_strategy.platform}")
            written.extend(self.generate_units(context, units))

        self.tracker.report_summary()
        self.tracker.log_memory_usage()
        return written
