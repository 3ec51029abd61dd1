"""
One generate pass: parse -> progress -> flag -> render.
"""

from dataclasses import dataclass

from loguru import logger

from program_builder.block_parser import parse_block
from program_builder.models import Block, DifficultyRating, EnjoymentRating
from program_builder.plan_renderer import download_filename, guideline_lines, render_block
from program_builder.progression_rules import progress_block
from program_builder.substitutions import (
    derive_injury_flags,
    parse_disliked_terms,
    should_flag,
    suggest_alternatives,
)
from program_builder.templates import template_to_text


MODE_TEMPLATE = "template"
MODE_PROGRESS = "progress"
MODES = (MODE_TEMPLATE, MODE_PROGRESS)

DEFAULT_STYLE = "Strength only"


@dataclass
class BlockRequest:
    """Free-text inputs for one generate pass."""

    client: str = ""
    style: str = DEFAULT_STYLE
    mode: str = MODE_TEMPLATE
    previous_block: str = ""
    difficulty: str = DifficultyRating.JUST_RIGHT.value
    enjoyment: str = EnjoymentRating.NEUTRAL.value
    disliked: str = ""
    injuries: str = ""
    notes: str = ""


@dataclass
class BlockResult:
    source_text: str
    block: Block
    flagged_count: int
    text: str
    filename: str


def resolve_source_text(request):
    """Previous block text, or the style's template when starting from one."""
    source = request.previous_block or ""
    if request.mode == MODE_TEMPLATE and not source.strip():
        logger.debug(f"Seeding block from {request.style!r} template")
        return template_to_text(request.style)
    return source


def generate_next_block(request):
    """
    Build the next block from a BlockRequest.

    Returns:
        BlockResult with the seed text used, the progressed block and the
        rendered document.
    """
    difficulty = DifficultyRating.from_value(request.difficulty)
    enjoyment = EnjoymentRating.from_value(request.enjoyment)
    injury_flags = derive_injury_flags(request.injuries)
    disliked_terms = parse_disliked_terms(request.disliked)

    source_text = resolve_source_text(request)
    parsed = parse_block(source_text)

    progressed = progress_block(parsed, difficulty)

    flagged = set()
    alternatives = {}
    for day_index, day in enumerate(parsed.days):
        for item_index, item in enumerate(day.items):
            if should_flag(item, disliked_terms, injury_flags):
                position = (day_index, item_index)
                flagged.add(position)
                alternatives[position] = suggest_alternatives(item.name)

    text = render_block(
        progressed,
        flagged=flagged,
        alternatives=alternatives,
        client=request.client,
        style=request.style,
        notes=request.notes,
        guidelines=guideline_lines(difficulty, enjoyment, request.injuries),
    )
    logger.info(
        f"Generated next block: {len(progressed.days)} day(s), "
        f"{progressed.entry_count()} exercise(s), {len(flagged)} flagged"
    )

    return BlockResult(
        source_text=source_text,
        block=progressed,
        flagged_count=len(flagged),
        text=text,
        filename=download_filename(request.client),
    )
