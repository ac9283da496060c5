"""Section splicing: merge a timestamped entry into markdown text (no I/O).

Sections are located by literal substring search, not by a markdown parser:
a section starts at the first exact occurrence of its header text and ends
at the next "\\n##" or at end of text.
"""

from __future__ import annotations

from datetime import datetime, timezone

SECTION_BOUNDARY = "\n##"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp at second resolution, e.g. 2026-02-18 09:30:00."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def format_entry(entry: str, timestamp: str) -> str:
    return f"\n[{timestamp}] - {entry}\n"


def find_section(text: str, header: str) -> tuple[int, int] | None:
    """Return (start, end) offsets of the section under header, or None.

    The boundary search starts after the header's own text, so a header
    repeated inside an entry never closes its own section.
    """
    start = text.find(header)
    if start == -1:
        return None
    end = text.find(SECTION_BOUNDARY, start + len(header))
    if end == -1:
        end = len(text)
    return start, end


def splice(existing: str, formatted_entry: str, header: str | None = None) -> str:
    """Compute the new file text after adding formatted_entry.

    - No header: append at end of text.
    - Header found: insert as the last item of that section.
    - Header missing: append the header and the entry at end of text.
    """
    if not header:
        return existing + formatted_entry

    section = find_section(existing, header)
    if section is None:
        return f"{existing}\n{header}\n{formatted_entry}"

    _, end = section
    return existing[:end].rstrip() + "\n" + formatted_entry.lstrip() + existing[end:]
