"""Concatenate every file of a level directory into one document."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from questionforge.files import read_file, walk_dir, write_file

logger = logging.getLogger(__name__)

LEVELS = ("n3", "n2")
OUTPUT_NAME = "concat_all.md"


def concat_level(level_dir: str | Path, output_name: str = OUTPUT_NAME) -> Path | None:
    """Join the files of *level_dir* into *output_name* inside it.

    Returns the written path, or None when the directory holds no files.
    """
    level_dir = Path(level_dir)
    files = walk_dir(level_dir)
    if not files:
        logger.error("does not exists in %s", level_dir)
        return None
    content = "".join(read_file(path) for path in files)
    target = level_dir / output_name
    write_file(target, content)
    return target


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="questionforge-concat",
        description="Concatenate generated question files per level.",
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
            concat_level(root / level)
        except OSError as exc:
            logger.error("failed to process %s: %s", root / level, exc)
            return 1
    logger.info("done")
    return 0