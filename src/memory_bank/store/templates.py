"""Initial markdown templates for the canonical memory bank files."""

from __future__ import annotations

TIMESTAMP_PLACEHOLDER = "YYYY-MM-DD HH:MM:SS"
BRIEF_PLACEHOLDER = "..."
PRODUCT_CONTEXT = "productContext.md"

# Insertion order is the provisioning order used by initialize.
INITIAL_FILES: dict[str, str] = {
    PRODUCT_CONTEXT: (
        "# Product Context\n\n"
        "This file provides a high-level overview of the project and the expected product "
        "that will be created. Initially it is based upon the project brief, if provided, "
        "and all other available project-related information in the working directory. "
        "This file is intended to be updated as the project evolves...\n\n"
        f"*{TIMESTAMP_PLACEHOLDER} - Initial creation*\n\n"
        "## Project Goal\n\n"
        "## Key Features\n\n"
        "## Overall Architecture\n"
    ),
    "activeContext.md": (
        "# Active Context\n\n"
        "This file tracks the project's current status, including recent changes, "
        "current goals, and open questions.\n\n"
        f"*{TIMESTAMP_PLACEHOLDER} - Initial creation*\n\n"
        "## Current Focus\n\n"
        "## Recent Changes\n\n"
        "## Open Questions/Issues\n"
    ),
    "progress.md": (
        "# Progress\n\n"
        "This file tracks the project's progress using a task list format.\n\n"
        f"*{TIMESTAMP_PLACEHOLDER} - Initial creation*\n\n"
        "## Completed Tasks\n\n"
        "## Current Tasks\n\n"
        "## Next Steps\n"
    ),
    "decisionLog.md": (
        "# Decision Log\n\n"
        "This file records architectural and implementation decisions using a list format.\n\n"
        f"*{TIMESTAMP_PLACEHOLDER} - Initial creation*\n\n"
        "## Decision\n\n"
        "## Rationale\n\n"
        "## Implementation Details\n"
    ),
    "systemPatterns.md": (
        "# System Patterns *Optional*\n\n"
        "This file documents recurring patterns and standards used in the project.\n\n"
        f"*{TIMESTAMP_PLACEHOLDER} - Initial creation*\n\n"
        "## Coding Patterns\n\n"
        "## Architectural Patterns\n\n"
        "## Testing Patterns\n"
    ),
}


def is_canonical(file_name: str) -> bool:
    return file_name in INITIAL_FILES


def get_template(file_name: str) -> str | None:
    """Raw template for a canonical file, or None for any other name."""
    return INITIAL_FILES.get(file_name)


def render_template(file_name: str, timestamp: str, brief: str | None = None) -> str | None:
    """Fill in the creation timestamp and, for the product context, the brief.

    The brief replaces the first "..." marker so the remaining description
    still reads as a continuation.
    """
    template = get_template(file_name)
    if template is None:
        return None

    content = template.replace(TIMESTAMP_PLACEHOLDER, timestamp, 1)
    if file_name == PRODUCT_CONTEXT and brief:
        content = content.replace(
            BRIEF_PLACEHOLDER, f"based on project brief:\n\n{brief}\n\n{BRIEF_PLACEHOLDER}", 1
        )
    return content
