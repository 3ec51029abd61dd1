"""
Static catalog of default week skeletons, keyed by training style.
"""

import os

import yaml
from loguru import logger


DEFAULT_TEMPLATES_FILE = os.path.join(os.path.dirname(__file__), "templates.yaml")


class TemplateCatalog:
    """
    Named day skeletons loaded from YAML.

    Usage:
        catalog = TemplateCatalog()
        catalog.styles()                  # -> ["Strength only", "Hybrid", ...]
        catalog.template_to_text("HYROX") # -> "Day 1 – Strength\\nBack Squat ..."
    """

    def __init__(self, templates_file=DEFAULT_TEMPLATES_FILE):
        with open(templates_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        self._styles = config.get("styles") or {}

    def styles(self):
        return list(self._styles.keys())

    def get(self, style):
        """Ordered day skeletons for a style, or an empty list if unknown."""
        days = self._styles.get(style)
        if days is None:
            logger.debug(f"No template for style {style!r}")
            return []
        return [
            {"title": str(day.get("title", "")), "items": [str(item) for item in day.get("items") or []]}
            for day in days
        ]

    def template_to_text(self, style):
        """Render a style's skeleton in the previous-block text grammar."""
        out = []
        for day in self.get(style):
            out.append(day["title"])
            out.extend(day["items"])
            out.append("")
        return "\n".join(out).strip()


_default_catalog = None


def get_catalog():
    """Get or create the module-level catalog."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = TemplateCatalog()
    return _default_catalog


def available_styles():
    return get_catalog().styles()


def get_template(style):
    return get_catalog().get(style)


def template_to_text(style):
    return get_catalog().template_to_text(style)
