from __future__ import annotations

MAX_LINES_TEXT = 2000
