"""
Jinja2 environment for the packaged HTML fragments.

Autoescaping is on; raw swatch HTML goes through the ``safe`` filter.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from swatchkit.core.settings import TEMPLATES_DIR


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env


def render_fragment(template_name: str, **context: Any) -> str:
    """Render a packaged template to a string."""
    return get_environment().get_template(template_name).render(**context)
