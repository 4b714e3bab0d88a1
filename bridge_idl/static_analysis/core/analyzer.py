"""
Main analyzer module for bridge interface sources.

This module orchestrates discovery of source units, running the interface parser
over each of them, and writing the resulting object model.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from bridge_idl.static_analysis.core.file_utils import DEFAULT_EXTENSIONS, find_source_files, load_blob
from bridge_idl.static_analysis.core.output_formatter import write_json_to_file
from bridge_idl.static_analysis.model.model import AnalysisFailure, AnalysisOutput, Blob, BlobStructure
from bridge_idl.static_analysis.parsers.base_parser import BaseParser
from bridge_idl.static_analysis.parsers.errors import AnalyzerError, UnsupportedMemberNameError
from bridge_idl.static_analysis.parsers.typescript_parser import TypeScriptParser

logger = logging.getLogger(__name__)


class BridgeAnalyzer:
    """
    Batch analyzer for bridge interface sources.

    Each source unit is analyzed on its own: a unit that fails analysis is
    recorded as a failure and never affects the results of other units.
    """

    def __init__(self, parser: Optional[BaseParser] = None, verbose: bool = False):
        """Initialize the analyzer with a parser."""
        self.verbose = verbose
        self.parser = parser if parser is not None else TypeScriptParser(verbose=verbose)

    def analyze_blob(self, blob: Blob) -> BlobStructure:
        """
        Analyze a single source unit.

        Args:
            blob: Source unit to analyze

        Returns:
            BlobStructure with the unit's class objects in source order

        Raises:
            AnalyzerError: if the unit cannot be analyzed
        """
        objects = self.parser.extract_classes(blob.raw)
        if self.verbose:
            logger.debug(f"Found {len(objects)} classes in {blob.source_file}")
        return BlobStructure(source_file=blob.source_file, filename=blob.filename, objects=objects)

    def analyze_blobs(self, blobs: Sequence[Blob]) -> AnalysisOutput:
        """
        Analyze several source units, isolating failures per unit.

        Args:
            blobs: Source units to analyze

        Returns:
            AnalysisOutput with one entry per unit, either in `units` or in `failures`
        """
        output = AnalysisOutput()
        total = len(blobs)
        for i, blob in enumerate(blobs):
            logger.info(f"Processing \"{blob.source_file}\" ({i + 1}/{total})")
            try:
                output.units.append(self.analyze_blob(blob))
            except AnalyzerError as e:
                logger.error(f"Skipping {blob.source_file}: {e.message} (line {e.line})")
                output.failures.append(AnalysisFailure(
                    source_file=blob.source_file,
                    error=e.message,
                    node_type=e.node_type if isinstance(e, UnsupportedMemberNameError) else None,
                ))
        return output

    def analyze_sources(
        self,
        source_dirs: List[str],
        output_file: Optional[Path] = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        exclude: Sequence[str] = (),
    ) -> AnalysisOutput:
        """
        Discover, read and analyze all source units in the given directories.

        Args:
            source_dirs: Directories containing interface sources
            output_file: Where to write the JSON result, if anywhere
            extensions: File name suffixes of source units
            exclude: Directory or file names to skip

        Returns:
            AnalysisOutput for all discovered units
        """
        logger.info("Starting analysis of files in:\n" + "\n".join(source_dirs))
        start_time = time.time()

        blobs = []
        read_failures = []
        for file_path in find_source_files(source_dirs, extensions, exclude):
            try:
                blobs.append(load_blob(file_path, extensions))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {file_path}: {e}")
                read_failures.append(AnalysisFailure(source_file=str(file_path), error=str(e)))

        logger.info(f"Found {len(blobs)} source files.")
        output = self.analyze_blobs(blobs)
        output.failures.extend(read_failures)

        if output_file is not None:
            write_json_to_file(output, Path(output_file))

        end_time = time.time()
        logger.info(f"Analysis completed in {end_time - start_time:.2f} seconds.")
        return output
