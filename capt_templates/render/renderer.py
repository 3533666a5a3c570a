"""Text-level renderer for ``{{.field}}`` templates.

Rendering happens in two stages:

* **parse** splits the template text into literal segments and field
  references.  Anything between ``{{`` and ``}}`` must be a plain
  ``.field`` reference.
* **execute** joins the segments, replacing every reference with the
  formatted value from the supplied mapping.

Substitution is single-pass, so values are inserted verbatim and never
re-parsed.  A value such as ``{{.device_1}}`` therefore survives into the
output untouched, ready for a later templating pass.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple, Union

from capt_templates.errors import TemplateError

logger = logging.getLogger(__name__)

# ── constants ────────────────────────────────────────────────────────

LEFT_DELIM = "{{"
RIGHT_DELIM = "}}"

#: Body of a valid action, e.g. ``.name`` or `` .image_url ``.
_FIELD_ACTION = re.compile(r"^\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*$")


@dataclass(frozen=True)
class FieldRef:
    """Reference to a named value inside a parsed template."""

    name: str
    offset: int


Segment = Union[str, FieldRef]


# ── parsed template ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ParsedTemplate:
    """Result of :func:`parse_template`."""

    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def fields(self) -> Tuple[str, ...]:
        """Referenced field names, in first-use order without repeats."""
        seen: List[str] = []
        for seg in self.segments:
            if isinstance(seg, FieldRef) and seg.name not in seen:
                seen.append(seg.name)
        return tuple(seen)

    def execute(self, values: Mapping[str, Any]) -> str:
        """Substitute *values* into the template.

        Raises
        ------
        TemplateError
            With ``stage="execute"`` if a referenced field has no value.
        """
        parts: List[str] = []
        for seg in self.segments:
            if isinstance(seg, str):
                parts.append(seg)
                continue
            try:
                value = values[seg.name]
            except KeyError as err:
                raise TemplateError(
                    "execute",
                    f"offset {seg.offset}: no field {seg.name!r} in data",
                ) from err
            parts.append(format_value(value))
        return "".join(parts)


# ── public API ───────────────────────────────────────────────────────


def format_value(value: Any) -> str:
    """Format a single value the way it should appear in YAML text.

    Booleans become ``true`` / ``false``; everything else goes through
    ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _split_segments(template_text: str) -> List[Segment]:
    """Split *template_text*, raising :class:`ValueError` on a bad action."""
    segments: List[Segment] = []
    pos = 0
    while True:
        start = template_text.find(LEFT_DELIM, pos)
        if start < 0:
            break
        end = template_text.find(RIGHT_DELIM, start + len(LEFT_DELIM))
        if end < 0:
            raise ValueError(f"offset {start}: unclosed action")
        body = template_text[start + len(LEFT_DELIM):end]
        match = _FIELD_ACTION.match(body)
        if match is None:
            raise ValueError(f"offset {start}: unsupported action {body!r}")
        if start > pos:
            segments.append(template_text[pos:start])
        segments.append(FieldRef(name=match.group(1), offset=start))
        pos = end + len(RIGHT_DELIM)

    if pos < len(template_text):
        segments.append(template_text[pos:])
    return segments


def parse_template(template_text: str) -> ParsedTemplate:
    """Split *template_text* into literal and field segments.

    Raises
    ------
    TemplateError
        With ``stage="parse"`` on an unclosed action or on an action that
        is not a ``.field`` reference.
    """
    try:
        segments = _split_segments(template_text)
    except ValueError as err:
        raise TemplateError("parse", str(err)) from err
    return ParsedTemplate(segments=tuple(segments))


def render_template(template_text: str, values: Mapping[str, Any]) -> str:
    """Parse *template_text* and execute it against *values*.

    Returns
    -------
    str
        Template text with every ``{{.field}}`` replaced by its value.

    Raises
    ------
    TemplateError
        Propagated from :func:`parse_template` or
        :meth:`ParsedTemplate.execute`.
    """
    parsed = parse_template(template_text)
    logger.debug("Parsed template with fields: %s", ", ".join(parsed.fields))
    return parsed.execute(values)
