# File: calsync/processors/rich_text_processor.py
"""
Rich-text composition for converted calendar events.

Builds the two bodies a task content carries:
- the presentation text, HTML-ish and rendered directly by the web client
- the base text, a delta document of insert operations for the editor

Description, location and attendees feed both. Attendees without a
display name are left out of both.
"""

import json
import re
from typing import List, NamedTuple, Optional, Sequence, Tuple

from calsync.models.calendar import Attendee

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
LINE_BREAK_CHARS = ('\n', '\r')
LINE_SEPARATOR = "\n"


class Segment(NamedTuple):
    """One insert operation of a delta document."""
    insert: str


LINE_BREAK = Segment("\n")


def strip_html_tags(html: Optional[str]) -> Optional[str]:
    """
    Remove anything that looks like a tag.

    >>> strip_html_tags("<b>bold</b>")
    'bold'
    """
    if html is None:
        return None
    return HTML_TAG_PATTERN.sub("", html)


def named_attendees(attendees: Optional[Sequence[Attendee]]) -> List[Attendee]:
    """Attendees with a non-blank display name, in input order."""
    return [a for a in attendees or [] if a.has_display_name()]


def _mailto_link(attendee: Attendee) -> str:
    # Quotes stay backslash-escaped; the client embeds this text in JSON
    return (
        f'<a href=\\"mailto:{attendee.email}\\" target=\\"_blank\\">'
        f'{attendee.display_name}</a>'
    )


def build_text(description: Optional[str], location: Optional[str],
               attendees: Optional[Sequence[Attendee]]) -> str:
    """Presentation text. The description is used as given, markup included."""
    parts: List[str] = []
    if description is not None:
        parts += [description, LINE_SEPARATOR]

    if location is not None:
        parts += [LINE_SEPARATOR, LINE_SEPARATOR, "<b>Location:</b> ", location, LINE_SEPARATOR]

    attendee_list = named_attendees(attendees)
    if attendee_list:
        parts += [LINE_SEPARATOR, LINE_SEPARATOR, "<b>Attendees:</b>", LINE_SEPARATOR]
        for attendee in attendee_list:
            parts.append(LINE_SEPARATOR)
            if attendee.email is None or not attendee.email.strip():
                parts.append(attendee.display_name)
            else:
                parts.append(_mailto_link(attendee))

    return "".join(parts)


def split_lines(text: str) -> Tuple[Segment, ...]:
    """
    One insert per run of text between line breaks, each followed by a
    line-break insert. Empty runs produce only the line break.
    """
    segments: Tuple[Segment, ...] = ()
    run: List[str] = []
    for char in text:
        if char in LINE_BREAK_CHARS:
            if run:
                segments += (Segment("".join(run)),)
            segments += (LINE_BREAK,)
            run = []
        else:
            run.append(char)

    if run:
        segments += (Segment("".join(run)), LINE_BREAK)
    return segments


def build_base_segments(description: Optional[str], location: Optional[str],
                        attendees: Optional[Sequence[Attendee]]) -> Tuple[Segment, ...]:
    """Delta document segments. The description is tag-stripped first."""
    segments: Tuple[Segment, ...] = ()
    if description is not None:
        segments += split_lines(strip_html_tags(description))

    if location is not None:
        segments += (LINE_BREAK, Segment("Location: "), Segment(location), LINE_BREAK)

    attendee_list = named_attendees(attendees)
    if attendee_list:
        segments += (LINE_BREAK, Segment("Attendees:"), LINE_BREAK)
        for attendee in attendee_list:
            segments += (LINE_BREAK, Segment(attendee.display_name))

    return segments + (LINE_BREAK,)


def render_segments(segments: Sequence[Segment]) -> str:
    """Serialize segments as a compact JSON array of insert operations."""
    return json.dumps(
        [{"insert": s.insert} for s in segments],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def compose_text(description: Optional[str], location: Optional[str],
                 attendees: Optional[Sequence[Attendee]]) -> Tuple[str, str]:
    """Return (presentation text, rendered base text)."""
    text = build_text(description, location, attendees)
    base_text = render_segments(build_base_segments(description, location, attendees))
    return text, base_text
