"""Validate concatenated question JSON and rewrite it in canonical form."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from questionforge.files import read_file, write_file
from questionforge.models import dump_questions, parse_questions

logger = logging.getLogger(__name__)

LEVELS = ("n2", "n3")
SOURCE_NAME = "concat_all.json"
TARGET_NAME = "concat_with_struct.json"


def restructure_level(
    level_dir: str | Path,
    source_name: str = SOURCE_NAME,
    target_name: str = TARGET_NAME,
) -> Path | None:
    """Parse *source_name* in *level_dir* and write it back as *target_name*.

    Returns the written path, or None when the directory or source is missing.
    Raises ValueError when the source is not a valid question list.
    """
    level_dir = Path(level_dir)
    if not level_dir.is_dir():
        logger.error("does not exists in %s", level_dir)
        return None
    source = level_dir / source_name
    if not source.exists():
        logger.error("does not exists in %s", source_name)
        return None
    try:
        questions = parse_questions(read_file(source))
    except ValueError as exc:
        raise ValueError(f"failed to parse JSON {source}: {exc}") from exc
    target = level_dir / target_name
    write_file(target, dump_questions(questions))
    return target


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="questionforge-restructure",
        description="Bind concatenated question JSON to the question schema.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="directory holding output/questions (default: current directory)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    root = (args.base_dir or Path.cwd()) / "output" / "questions"
    for level in LEVELS:
        try:
            restructure_level(root / level)
        except ValueError as exc:
            logger.error("%s", exc)
            return 1
    logger.info("done")
    return 0