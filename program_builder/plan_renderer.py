"""
Render progressed blocks back to plain text.
"""

import math
import re

from program_builder.models import DifficultyRating, EnjoymentRating


BULLET = "•"
SWAP_ARROW = "→"

EASY_GUIDELINE = "- Last block felt easy → progress volume/load more aggressively this week."
HARD_GUIDELINE = "- Last block felt hard → hold volume or reduce load; prioritise form and consistency."
LOVED_GUIDELINE = "- Keep favourite lifts where possible."
DISLIKED_GUIDELINE = "- Swap disliked lifts for close variations."
INJURY_GUIDELINE = "- Respect current niggles: adjust ROM, tempo, or swap as noted."

DOWNLOAD_SUFFIX = "next_block.txt"


def format_load(value):
    """Format a load without a trailing ``.0`` on whole numbers."""
    if value is None or not math.isfinite(value):
        return ""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_rpe(value):
    return re.sub(r"\.0$", "", f"{value:.1f}")


def format_entry(entry):
    """
    Canonical single-line form of an exercise, e.g.
    ``Back Squat 4x6 @ RPE7.5 105kg``.
    """
    parts = [entry.name]
    if entry.sets is not None and entry.reps is not None:
        parts.append(f"{entry.sets}x{entry.reps}")
    if entry.rpe is not None:
        parts.append(f"@ RPE{format_rpe(entry.rpe)}")
    if entry.load is not None and math.isfinite(entry.load):
        parts.append(f"{format_load(entry.load)}kg")
    return " ".join(parts)


def format_bullet(entry, alternatives=None):
    line = f"{BULLET} {format_entry(entry)}"
    if alternatives:
        line += f"  {SWAP_ARROW} consider swap: {' / '.join(alternatives)}"
    return line


def guideline_lines(difficulty, enjoyment, injury_text=""):
    """Guideline bullets that apply to this run's feedback."""
    difficulty = DifficultyRating.from_value(difficulty)
    enjoyment = EnjoymentRating.from_value(enjoyment)

    lines = []
    if difficulty is DifficultyRating.EASY:
        lines.append(EASY_GUIDELINE)
    if difficulty is DifficultyRating.HARD:
        lines.append(HARD_GUIDELINE)
    if enjoyment is EnjoymentRating.LOVED:
        lines.append(LOVED_GUIDELINE)
    if enjoyment is EnjoymentRating.DISLIKED:
        lines.append(DISLIKED_GUIDELINE)
    if (injury_text or "").strip():
        lines.append(INJURY_GUIDELINE)
    return lines


def render_block(block, flagged=None, alternatives=None, client="", style="", notes="", guidelines=None):
    """
    Assemble the full next-block document.

    Args:
        block: progressed Block
        flagged: set of (day_index, item_index) positions to annotate
        alternatives: dict mapping (day_index, item_index) -> list of names
        client: optional client name for the header
        style: training style name for the header
        notes: optional coach notes
        guidelines: guideline bullet lines (see guideline_lines)

    Returns:
        The document as a single string.
    """
    flagged = flagged or set()
    alternatives = alternatives or {}

    out = []
    if client:
        out.append(f"Client: {client}")
    out.append(f"Style: {style}")
    out.append("")

    for day_index, day in enumerate(block.days):
        out.append(day.title)
        for item_index, item in enumerate(day.items):
            position = (day_index, item_index)
            swaps = alternatives.get(position) if position in flagged else None
            out.append(format_bullet(item, swaps))
        out.append("")

    notes = (notes or "").strip()
    if notes:
        out.append("Coach notes:")
        out.append(notes)
        out.append("")

    out.append("Guidelines:")
    out.extend(guidelines or [])
    return "\n".join(out)


def download_filename(client=""):
    """File name for the downloadable plan, e.g. ``Sarah_K._next_block.txt``."""
    if client:
        return re.sub(r"\s+", "_", client) + "_" + DOWNLOAD_SUFFIX
    return DOWNLOAD_SUFFIX
