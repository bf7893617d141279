#!/usr/bin/env python3
"""
svgops - Main Entry Point

Compiles SVG files into a generated Python module (or JSON) of drawing
programs. Run with: python -m svgops.main -o icons.py icons/*.svg
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import CompilerSettings, OUTPUT_FORMATS, load_settings
from .core.errors import CompileError
from .io.codegen import image_name, write_module
from .io.program_io import save_documents
from .io.svg_parser import compile_files

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_COMPILE = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgops",
        description="Convert SVG files to drawing programs. Only a limited subset of SVG is supported.",
    )
    parser.add_argument("files", nargs="*", help="SVG files to compile")
    parser.add_argument("-o", "--output", help="Output file (default: svg_images.py)")
    parser.add_argument("-f", "--format", dest="output_format", choices=OUTPUT_FORMATS,
                        help="Output format (default: python)")
    parser.add_argument("--prefix", dest="symbol_prefix", help="Prefix of generated image names")
    parser.add_argument("-j", "--jobs", type=int, help="Number of worker processes")
    parser.add_argument("-c", "--config", help="JSON settings file")
    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="Enable debug logging")
    return parser


def run(files: List[str], settings: CompilerSettings) -> int:
    """Compile files and write the output. Returns the exit status."""
    names = [image_name(path, settings.symbol_prefix) for path in files]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        logger.error(f"Duplicate image names: {', '.join(duplicates)}")
        return EXIT_USAGE

    try:
        documents = compile_files(files, jobs=settings.jobs)
    except CompileError as e:
        logger.error(str(e))
        return EXIT_COMPILE
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return EXIT_COMPILE

    named = dict(zip(names, documents))
    if settings.output_format == "json":
        save_documents(named, settings.output)
    else:
        write_module(named, settings.output)
    logger.info(f"Wrote {len(named)} images to {settings.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the svgops command."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else CompilerSettings()
    except (OSError, ValueError, TypeError) as e:
        setup_logging(bool(args.verbose))
        logger.error(f"Failed to load configuration: {e}")
        return EXIT_USAGE

    settings = settings.merged({
        "output": args.output,
        "output_format": args.output_format,
        "symbol_prefix": args.symbol_prefix,
        "jobs": args.jobs,
        "verbose": args.verbose,
    })
    setup_logging(settings.verbose)

    is_valid, error = settings.validate()
    if not is_valid:
        logger.error(error)
        return EXIT_USAGE
    if not args.files:
        logger.error("specify at least one SVG file")
        return EXIT_USAGE

    return run(args.files, settings)


if __name__ == "__main__":
    sys.exit(main())
