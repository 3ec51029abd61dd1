#!/usr/bin/env python3
"""
Coach Program Builder
Command-line entry point: turn last block's text into next block's plan.
"""

import argparse
import os
import sys

from program_builder.block_generator import MODES, BlockRequest, generate_next_block
from program_builder.config import ConfigError, load_config
from program_builder.logging_setup import setup_logger
from program_builder.models import DifficultyRating, EnjoymentRating
from program_builder.templates import available_styles


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a client's next training block.")
    parser.add_argument("--client", default="", help="Client name for the header and file name.")
    parser.add_argument("--style", choices=available_styles(), help="Training style template.")
    parser.add_argument("--mode", choices=MODES, help="Start from the style template or progress a previous block.")
    parser.add_argument(
        "--previous",
        default="",
        help="Path to the previous block text file, or '-' to read it from stdin.",
    )
    parser.add_argument(
        "--difficulty",
        choices=[rating.value for rating in DifficultyRating] + ["just"],
        help="How the last block felt.",
    )
    parser.add_argument(
        "--enjoyment",
        choices=[rating.value for rating in EnjoymentRating],
        help="How much the client enjoyed the last block.",
    )
    parser.add_argument("--disliked", default="", help="Comma separated disliked exercises.")
    parser.add_argument("--injuries", default="", help="Injuries / niggles, free text.")
    parser.add_argument("--notes", default="", help="Coach notes to include in the plan.")
    parser.add_argument("--save", action="store_true", help="Also write the plan to the output folder.")
    parser.add_argument("--config", default=None, help="Path to config.yaml.")
    parser.add_argument("--list-styles", action="store_true", help="List template styles and exit.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def read_previous_block(path):
    """Read previous block text from a file path, '-' for stdin, or '' for none."""
    if not path:
        return ""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def save_plan(text, folder, filename):
    os.makedirs(folder, exist_ok=True)
    filepath = os.path.join(folder, filename)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(text)
    return filepath


def build_request(args, config, previous_block):
    defaults = config["defaults"]
    return BlockRequest(
        client=args.client.strip(),
        style=args.style or defaults["style"],
        mode=args.mode or defaults["mode"],
        previous_block=previous_block,
        difficulty=args.difficulty or defaults["difficulty"],
        enjoyment=args.enjoyment or defaults["enjoyment"],
        disliked=args.disliked,
        injuries=args.injuries,
        notes=args.notes,
    )


def main(argv=None):
    """Main application flow."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.debug else config["logging"]["level"]
    setup_logger(level=level, log_file=config["logging"].get("file"))

    if args.list_styles:
        for style in available_styles():
            print(style)
        return 0

    try:
        previous_block = read_previous_block(args.previous)
    except OSError as e:
        print(f"Error: could not read previous block: {e}", file=sys.stderr)
        return 1

    request = build_request(args, config, previous_block)
    result = generate_next_block(request)
    print(result.text)

    if args.save:
        filepath = save_plan(result.text, config["output"]["folder"], result.filename)
        print(f"\n✓ Saved to: {filepath}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nExiting...")
        sys.exit(0)
