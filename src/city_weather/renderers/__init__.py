"""Pure rendering functions: display state -> HTML strings.

All renderers follow the same pattern:
  - Input: display-state records (from board.py) or schema models
  - Output: str (HTML fragment, or the full page for build_board_html)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - cards: build_weather_card_html, build_search_html, build_board_html,
           format_card_text
  - weather_utils: classify, CATEGORIES

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Fragments have no <html>/<body> tags; CSS lives in ``base.html.j2``.
3. Add tests asserting the returned HTML contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
