import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from filecalc.batch import find_inputs, process_many
from filecalc.config import OutputNaming

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecalc",
        description=(
            "Evaluates arithmetic expression files. Each result file holds the value,\n"
            "or ERROR:<pos> with the 1-based character position of the first fault."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", type=Path, help="expression file to evaluate")
    parser.add_argument("-d", "--dir", type=Path, help="evaluate every *.txt file in DIR (non-recursive)")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="where to write results, defaults to <input name>_<user>_<id>",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation errors in detail")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.dir is None and args.input is None:
        arg_parser.error("an input file or -d/--dir is required")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    naming = OutputNaming.from_env()
    out_dir: Path = args.output_dir or naming.default_output_dir(args.input or args.dir)

    paths: list[Path] = []
    if args.dir is not None:
        try:
            paths.extend(find_inputs(args.dir))
        except OSError as e:
            logger.error("Cannot list %s: %s", args.dir, e)
            return 1
        if not paths:
            logger.warning("No %s files in %s", "*.txt", args.dir)
    if args.input is not None:
        paths.append(args.input)

    try:
        failed = process_many(paths, out_dir, naming)
    except OSError as e:
        logger.error("Cannot create output directory %s: %s", out_dir, e)
        return 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
