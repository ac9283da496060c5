"""Memory bank storage: templates, the section splicer and file access.

Layout:
    <cwd>/memory-bank/
    ├── productContext.md      # High-level overview, optionally seeded from a brief
    ├── activeContext.md       # Current focus and open questions
    ├── progress.md            # Done / doing / next
    ├── decisionLog.md         # Architectural and implementation decisions
    └── systemPatterns.md      # Recurring patterns (optional)

Files are flat markdown, created on first initialize or append and only ever
grown by timestamped entries afterwards.
"""
