"""Parser for the header block at the top of a ``SKILL.md`` manifest.

Skill manifests are Markdown with an optional header fenced by ``---``
lines. Only three values are used for display, so the header is read
with a single forward pass over its lines rather than a full YAML parser:

.. code-block:: text

    ---
    name: pdf-tools
    description: "Extract and merge PDF files"
    metadata:
      short-description: 'PDF helpers'
    ---
    Everything after the closing fence is the body.

Rules:
    - ``name:`` and ``description:`` are read only at column zero.
    - ``metadata:`` opens a nested block; the first column-zero line
      closes it. Inside it, an indented ``short-description:`` is read.
    - Values lose one layer of matching single or double quotes and are
      trimmed. Unrecognized lines are ignored, keys are case-sensitive,
      missing fields are empty strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_FENCE = "---"

_DIRECT_FIELD = re.compile(r"^(name|description):\s*(.+?)\s*$")
_SHORT_DESCRIPTION = re.compile(r"^\s+short-description:\s*(.+?)\s*$")
_METADATA_OPEN = re.compile(r"^metadata:\s*$")


@dataclass(frozen=True)
class Frontmatter:
    """Header fields of a manifest plus the text that follows the header."""

    name: str = ""
    description: str = ""
    short_description: str = ""
    body: str = ""


def strip_quoted_value(value: str) -> str:
    """Trim ``value`` and remove one layer of matching surrounding quotes."""
    trimmed = value.strip()
    if trimmed[:1] in ("\"", "'") and trimmed.endswith(trimmed[0]):
        return trimmed[1:-1].strip()
    return trimmed


def _split_header(text: str) -> tuple[list[str], str] | None:
    """Return ``(header_lines, body)`` or None when there is no fenced header."""
    lines = text.split("\n")
    if not lines or lines[0] != _FENCE:
        return None
    for index in range(1, len(lines)):
        if lines[index] == _FENCE:
            return lines[1:index], "\n".join(lines[index + 1:])
    return None


def parse_frontmatter(text: str) -> Frontmatter:
    """Parse a manifest into header fields and body.

    Args:
        text: Raw manifest text. ``\\r\\n`` line endings are accepted.

    Returns:
        A ``Frontmatter``. Without a fenced header every field is empty
        and ``body`` is the whole (newline-normalized) text.
    """
    normalized = text.replace("\r\n", "\n")
    split = _split_header(normalized)
    if split is None:
        return Frontmatter(body=normalized)

    header_lines, body = split
    fields = {"name": "", "description": ""}
    short_description = ""
    metadata_open = False

    for line in header_lines:
        if not line.strip():
            continue

        if _METADATA_OPEN.match(line.strip()):
            metadata_open = True
            continue

        if not line[0].isspace():
            metadata_open = False

        direct = _DIRECT_FIELD.match(line)
        if direct:
            fields[direct.group(1)] = strip_quoted_value(direct.group(2))
            continue

        if not metadata_open:
            continue

        short = _SHORT_DESCRIPTION.match(line)
        if short:
            short_description = strip_quoted_value(short.group(1))

    return Frontmatter(
        name=fields["name"],
        description=fields["description"],
        short_description=short_description,
        body=body,
    )


def extract_preview(body: str) -> str:
    """First trimmed body line that is neither blank nor a ``#`` heading."""
    for line in body.replace("\r\n", "\n").split("\n"):
        trimmed = line.strip()
        if trimmed and not trimmed.startswith("#"):
            return trimmed
    return ""
