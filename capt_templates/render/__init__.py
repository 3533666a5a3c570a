"""Template substitution engine for ``{{.field}}`` actions."""

from capt_templates.render.renderer import (
    ParsedTemplate,
    format_value,
    parse_template,
    render_template,
)

__all__ = [
    "ParsedTemplate",
    "format_value",
    "parse_template",
    "render_template",
]
