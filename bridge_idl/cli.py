"""
Command-line interface for the bridge interface analyzer.

This module runs the analyzer over a directory of TypeScript declaration files and
writes the resulting object model as JSON for the binding generator.
"""

import argparse
import sys
from pathlib import Path

from bridge_idl.core.config.config import Config, load_config
from bridge_idl.core.utils.logging_utils import setup_logging
from bridge_idl.static_analysis.core.analyzer import BridgeAnalyzer

DEFAULT_CONFIG_FILE = "bridge_idl.json"


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Analyze TypeScript interface declarations and write the bridge object model as JSON.'
    )

    parser.add_argument(
        '-i', '--input-dir',
        required=True,
        help='Root directory of the interface sources'
    )

    parser.add_argument(
        '-c', '--config',
        help=f'Configuration file (default: <input-dir>/{DEFAULT_CONFIG_FILE} if present)'
    )

    parser.add_argument(
        '-o', '--output',
        help='Output JSON file, overrides `output_file` from the configuration'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    return parser.parse_args(argv)


def resolve_config(input_dir: Path, config_path: str = None) -> Config:
    """Load the configuration, falling back to defaults when no file is given or found."""
    if config_path:
        return load_config(config_path)
    default_path = input_dir / DEFAULT_CONFIG_FILE
    if default_path.exists():
        return load_config(str(default_path))
    return Config()


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    try:
        args = parse_args(argv)

        input_dir = Path(args.input_dir).resolve()
        if not input_dir.is_dir():
            print(f"Error: {input_dir} is not a directory")
            return 1

        config = resolve_config(input_dir, args.config)
        log_level = "DEBUG" if args.verbose else config.log_level
        logger = setup_logging(log_level, config.log_file)

        source_dirs = [str(input_dir / src) for src in config.source_dirs]
        for source_dir in source_dirs:
            if not Path(source_dir).is_dir():
                logger.error(f"Source directory does not exist: {source_dir}")
                return 1

        output = Path(args.output) if args.output else input_dir / config.output_file

        analyzer = BridgeAnalyzer(verbose=args.verbose)
        result = analyzer.analyze_sources(
            source_dirs,
            output_file=output,
            extensions=config.file_extensions,
            exclude=config.exclude,
        )

        for failure in result.failures:
            logger.error(f"Failed: {failure.source_file}: {failure.error}")
        logger.info(f"Analysis complete. {len(result.units)} units written to {output}")
        return 1 if result.failures else 0

    except Exception as e:
        print(f"Error: {str(e)}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
