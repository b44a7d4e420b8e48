"""Command-line interface for steric overlap detection."""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ... import PROGRAM_NAME, __version__
from ...core.config import (
    DEDUP_MODES,
    DEFAULT_ATOM_RADIUS,
    DetectionConfig,
    GRID_METHOD,
    METHOD_ALIASES,
)
from ...core.services.clash_detection_service import ClashDetectionService

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.txt"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="steric-overlap",
        description="Find the atoms of the second structure that clash with atoms of the first",
    )
    parser.add_argument("input1", help="First PDB file")
    parser.add_argument("input2", help="Second PDB file; its clashing atoms are reported")
    parser.add_argument(
        "-m",
        "--method",
        default=GRID_METHOD,
        type=str.lower,
        choices=sorted(METHOD_ALIASES),
        help="Comparison method: grid (hash) or bruteforce",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"File to write the result to, '-' for standard output (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--atom-radius",
        type=float,
        default=DEFAULT_ATOM_RADIUS,
        help="Radius shared by all atoms (Angstroms); atoms clash below twice this distance",
    )
    parser.add_argument(
        "--dedup",
        choices=DEDUP_MODES,
        default=DEDUP_MODES[0],
        help="Remove every repeated atom (full) or only adjacent repeats (adjacent)",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log timings and sizes")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument(
        "--version", action="version", version=f"{PROGRAM_NAME} {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the steric overlap CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = DetectionConfig(
            atom_radius=args.atom_radius,
            method=args.method,
            dedup=args.dedup,
            show_progress=args.progress,
        ).validate()
    except ValueError as e:
        parser.error(str(e))

    service = ClashDetectionService(config)

    # The report is buffered so that a failed run leaves no output behind.
    buffer = io.StringIO()
    if not service.run(args.input1, args.input2, buffer):
        logger.error("Errors during computation.")
        return 1

    if args.output == "-":
        sys.stdout.write(buffer.getvalue())
        return 0

    try:
        with open(args.output, "w") as f:
            f.write(buffer.getvalue())
    except OSError as e:
        logger.error(f"Cannot open file {args.output} for writing: {e}")
        return 1

    logger.info(f"Result written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
