"""Generate questions per level with the Gemini API and store the JSON."""

from __future__ import annotations

import argparse
import json
import logging
import os
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"
LEVELS = ("n3", "n2")
DEFAULT_COUNT = 30
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_WAIT = 60.0
DEFAULT_INTERVAL = 15.0
DEFAULT_TIMEOUT = 60.0


class ApiError(Exception):
    """A request to the generation API failed."""


@dataclass
class LevelStats:
    """Outcome counts for one level run."""

    success: int = 0
    fail: int = 0
    invalid_json: int = 0


def replace_level(text: str, level: str) -> str:
    """Replace the **LEVEL** marker with the upper-cased level."""
    return text.replace("**LEVEL**", f"**{level.upper()}**")


def _strip_prefix_all(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_suffix_all(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def clean_response(text: str) -> str:
    """Remove surrounding whitespace and Markdown code fences."""
    text = text.strip()
    text = _strip_prefix_all(text, "```json")
    text = _strip_prefix_all(text, "```")
    text = _strip_suffix_all(text, "```")
    return text.strip()


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def is_valid_json(text: str) -> bool:
    """Return True if *text* is a strict JSON document."""
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def load_settings(environ: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Return the API key and the first configured model."""
    env = os.environ if environ is None else environ
    key = env.get("GOOGLE_GEMINI_API_KEY")
    if key is None:
        raise RuntimeError("GOOGLE_GEMINI_API_KEY not set")
    models = env.get("GEMINI_MODELS")
    if models is None:
        raise RuntimeError("GEMINI_MODELS not set")
    names = models.split(",")
    if len(names) != 2:
        raise RuntimeError("GEMINI_MODELS must be 2 models")
    return key, names[0]


def build_prompt(prompt_dir: str | Path, level: str) -> str:
    """Assemble the generation prompt for *level* from the prompt files."""
    prompt_dir = Path(prompt_dir)
    create_path = prompt_dir / "create-question_to_json.md"
    base_path = prompt_dir / "base-info.md"
    detail_path = prompt_dir / level / "ja-question.md"
    for path in (create_path, base_path, detail_path):
        if not path.exists():
            raise FileNotFoundError(f"required file not found: {path}")
    first = replace_level(create_path.read_text(encoding="utf-8"), level)
    base = base_path.read_text(encoding="utf-8")
    detail = detail_path.read_text(encoding="utf-8")
    return f"{first}\n\n{base}\n\n{detail}"


def request_gemini(key: str, model: str, text: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Send *text* to *model* and return the first candidate's text."""
    url = f"{API_BASE}/models/{model}:generateContent"
    body = {"contents": [{"role": "user", "parts": [{"text": text}]}]}
    try:
        response = httpx.post(
            url, json=body, headers={"x-goog-api-key": key}, timeout=timeout
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ApiError(f"Error: {exc}") from exc
    try:
        payload = response.json()
    except ValueError as exc:
        raise ApiError("failed to parse API response") from exc
    try:
        result = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise ApiError("API response contains no text") from None
    if not isinstance(result, str):
        raise ApiError("API response contains no text")
    return result


def save_text(text: str, path: str | Path) -> None:
    """Write *text* to *path*, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _request_with_retry(
    key: str,
    model: str,
    prompt: str,
    label: str,
    max_retries: int,
    retry_wait: float,
) -> str | None:
    attempt = 0
    while True:
        try:
            return request_gemini(key, model, prompt)
        except ApiError as exc:
            attempt += 1
            if attempt >= max_retries:
                logger.error("[%s] failed after %d retries: %s", label, max_retries, exc)
                return None
            wait = retry_wait * attempt
            logger.warning(
                "[%s] API error (retry %d/%d): %s - retrying in %ss",
                label, attempt, max_retries, exc, wait,
            )
            time.sleep(wait)


def _run_level(
    key: str,
    model: str,
    prompt: str,
    level: str,
    output_dir: Path,
    args: argparse.Namespace,
    started: float,
) -> LevelStats:
    stats = LevelStats()
    for index in range(args.count):
        label = f"{level}/{index}"
        text = _request_with_retry(
            key, model, prompt, label, args.max_retries, args.retry_wait
        )
        if text is None:
            stats.fail += 1
        else:
            cleaned = clean_response(text)
            if is_valid_json(cleaned):
                save_text(cleaned, output_dir / f"{int(time.time())}.json")
                stats.success += 1
                logger.info(
                    "[%s] success (%d bytes), elapsed: %.1fs",
                    label, len(cleaned.encode("utf-8")), time.monotonic() - started,
                )
            else:
                stats.invalid_json += 1
                logger.warning(
                    "[%s] invalid JSON - skipped (first 100 chars: %s)", label, cleaned[:100]
                )
        time.sleep(args.interval)
    return stats


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="questionforge-generate",
        description="Generate questions for each level with the Gemini API.",
    )
    parser.add_argument("--base-dir", type=Path, default=None,
                        help="directory holding prompts/ and output/ (default: current directory)")
    parser.add_argument("--levels", nargs="+", default=list(LEVELS))
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--max-retries", type=int, default=DEFAULT_MAX_RETRIES)
    parser.add_argument("--retry-wait", type=float, default=DEFAULT_RETRY_WAIT)
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    started = time.monotonic()
    base = args.base_dir or Path.cwd()
    total = LevelStats()

    for level in args.levels:
        try:
            prompt = build_prompt(base / "prompts", level)
        except OSError as exc:
            logger.error("%s", exc)
            return 1
        try:
            key, model = load_settings()
        except RuntimeError as exc:
            logger.error("%s", exc)
            return 1
        logger.info("model: %s, level: %s, count: %d", model, level, args.count)

        output_dir = base / "output" / "questions" / level
        stats = _run_level(key, model, prompt, level, output_dir, args, started)
        logger.info(
            "=== %s done: success=%d, fail=%d, invalid_json=%d, elapsed: %.1fs ===",
            level, stats.success, stats.fail, stats.invalid_json, time.monotonic() - started,
        )
        total.success += stats.success
        total.fail += stats.fail
        total.invalid_json += stats.invalid_json

    logger.info(
        "=== all done: success=%d, fail=%d, invalid_json=%d, elapsed: %.1fs ===",
        total.success, total.fail, total.invalid_json, time.monotonic() - started,
    )
    return 0