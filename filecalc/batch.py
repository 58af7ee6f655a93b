import logging
from pathlib import Path
from typing import Iterable

from filecalc.config import OutputNaming
from filecalc.formatter import format_outcome
from filecalc.runtime import Failure, evaluate

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".txt"


def process_file(in_path: Path, out_dir: Path, naming: OutputNaming) -> Path:
    """Evaluates one input file and writes its result file, OSError is left to the caller"""
    outcome = evaluate(in_path.read_bytes())
    if isinstance(outcome, Failure):
        logger.debug("%s:\n%s", in_path, outcome.errmsg)
    out_path = out_dir / naming.output_filename(in_path)
    out_path.write_text(format_outcome(outcome), encoding="ascii", newline="\n")
    logger.info("%s -> %s", in_path, out_path)
    return out_path


def find_inputs(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.is_file() and p.name.endswith(INPUT_SUFFIX))


def process_many(paths: Iterable[Path], out_dir: Path, naming: OutputNaming) -> int:
    """Returns the number of files that could not be processed"""
    out_dir.mkdir(parents=True, exist_ok=True)
    failed = 0
    for path in paths:
        try:
            process_file(path, out_dir, naming)
        except OSError as e:
            logger.error("Skipping %s: %s", path, e)
            failed += 1
    return failed
