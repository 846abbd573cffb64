"""
Command-line entry point.

Usage:
    python -m llm_helper.cli extract <image> [<image> ...]
    python -m llm_helper.cli solve <problem.json>
    python -m llm_helper.cli debug <problem.json> --current-state TEXT [<image> ...]
    python -m llm_helper.cli audio <audio file>
    python -m llm_helper.cli audio-b64 --mime-type audio/wav <base64 file>
    python -m llm_helper.cli image <image>

The API key comes from GEMINI_API_KEY / GOOGLE_API_KEY (``.env`` is
loaded first).  Results are printed as JSON, or written to ``-o``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from ai.exceptions import LLMHelperError
from prompts.templates import PromptTemplates

from llm_helper.config import HelperConfig
from llm_helper.helper import LLMHelper

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Workplace-security analysis with a Gemini model.",
    )
    parser.add_argument("-o", "--output", default=None, help="Write the JSON result to this file")
    parser.add_argument("--model", default=None, help="Model identifier (default: gemini-2.0-flash)")
    parser.add_argument(
        "--prompt-style",
        choices=["standard", "quoted"],
        default=None,
        help="Built-in prompt template set",
    )
    parser.add_argument("--prompts-file", default=None, help="JSON file with a full prompt template set")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Extract a problem from screenshots")
    extract.add_argument("images", nargs="+")

    solve = sub.add_parser("solve", help="Generate a solution for a problem JSON file")
    solve.add_argument("problem_file")

    debug = sub.add_parser("debug", help="Refine a solution with extra screenshots")
    debug.add_argument("problem_file")
    debug.add_argument("--current-state", required=True)
    debug.add_argument("images", nargs="*")

    audio = sub.add_parser("audio", help="Analyse an mp3 recording")
    audio.add_argument("path")

    audio_b64 = sub.add_parser("audio-b64", help="Analyse base64 audio read from a file")
    audio_b64.add_argument("data_file")
    audio_b64.add_argument("--mime-type", required=True)

    image = sub.add_parser("image", help="Analyse a single image")
    image.add_argument("path")

    return parser


def _load_problem(path: str):
    return json.loads(Path(path).read_text(encoding="utf-8"))


async def _run(helper: LLMHelper, args: argparse.Namespace) -> BaseModel:
    if args.command == "extract":
        return await helper.extract_problem_from_images(args.images)
    if args.command == "solve":
        return await helper.generate_solution(_load_problem(args.problem_file))
    if args.command == "debug":
        return await helper.debug_solution_with_images(
            _load_problem(args.problem_file), args.current_state, args.images
        )
    if args.command == "audio":
        return await helper.analyze_audio_file(args.path)
    if args.command == "audio-b64":
        data = Path(args.data_file).read_text(encoding="ascii").strip()
        return await helper.analyze_audio_from_base64(data, args.mime_type)
    if args.command == "image":
        return await helper.analyze_image_file(args.path)
    raise ValueError(f"Unknown command: {args.command!r}")


async def _main_async(config: HelperConfig, args: argparse.Namespace) -> BaseModel:
    async with LLMHelper(config) as helper:
        return await _run(helper, args)


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    try:
        prompts = None
        if args.prompts_file:
            prompts = PromptTemplates.from_file(args.prompts_file)
        elif args.prompt_style:
            prompts = PromptTemplates.from_style(args.prompt_style)
        config = HelperConfig.from_env(model=args.model, prompts=prompts)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    try:
        result = asyncio.run(_main_async(config, args))
    except LLMHelperError as exc:
        logger.error("%s failed (%s error): %s", args.command, exc.kind, exc)
        sys.exit(1)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read input for %s: %s", args.command, exc)
        sys.exit(1)

    json_str = result.model_dump_json(indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(json_str)
        logger.info("Output written to %s", args.output)
    else:
        print(json_str)


if __name__ == "__main__":
    main()
