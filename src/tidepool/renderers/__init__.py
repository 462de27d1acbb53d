"""Pure rendering functions: dashboard JSON -> HTML strings.

All renderers follow the same pattern:
  - Input: the JSON-decoded section of a dashboard payload (camelCase dicts)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O
  - Missing or empty input renders a "no data" placeholder, never raises

Used by frontend/build.py which assembles the page.

Public API:
  - species: build_fish_species_html
  - biodiversity: build_stats_html, build_observations_html
  - weather: build_weather_html
  - page: build_dashboard_page
  - formatting: format_number, format_measure, format_date

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function::

       from tidepool.renderers import render_template

       def build_mywidget_html(data: dict[str, Any] | None) -> str:
           if not data:
               return '<p class="text-muted">No widget data available</p>'
           return render_template("mywidget.html.j2", data=data)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
   CSS goes in ``templates/base.html.j2`` within the <style> block.

3. Wire into ``renderers/page.py`` and add the placeholder in
   ``base.html.j2``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from tidepool.renderers.formatting import format_date, format_measure, format_number

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_jinja_env.filters["number"] = format_number
_jinja_env.filters["measure"] = format_measure
_jinja_env.filters["date"] = format_date


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
