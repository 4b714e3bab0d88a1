"""
Output formatter for the interface analyzer.

This module provides functionality for formatting analysis results as JSON
and writing them to a file.
"""

import logging
from pathlib import Path

from bridge_idl.static_analysis.model.model import AnalysisOutput

logger = logging.getLogger(__name__)


def format_as_json(analysis_output: AnalysisOutput) -> str:
    """
    Format analysis output as a JSON string.

    Args:
        analysis_output: Analysis output to format

    Returns:
        JSON string representation of the analysis output, with `baseType` spelled
        the way the generator expects it
    """
    return analysis_output.model_dump_json(indent=2, by_alias=True)


def write_json_to_file(analysis_output: AnalysisOutput, output_path: Path) -> None:
    """Write analysis output as JSON, creating the output directory if needed."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_as_json(analysis_output), encoding='utf-8')
    logger.info(f"Analysis output written to {output_path}")

