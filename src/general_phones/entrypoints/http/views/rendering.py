"""Jinja2 environment shared by the page components."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).parent / "templates"


def display_number(value: Decimal) -> str:
    """Render a Decimal without trailing zeros or exponent (4.0 -> "4", 800 -> "800")."""
    return format(value.normalize(), "f")


environment = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)
environment.filters["display_number"] = display_number


def render_template(name: str, **context: Any) -> Markup:
    return Markup(environment.get_template(name).render(**context))
