"""Cutting a command line into pipeline segments of raw chunks."""

from __future__ import annotations

__all__ = ["split_pipeline"]


def split_pipeline(line: str) -> list[list[str]]:
    """Split ``line`` at ``|`` into segments, each a list of raw chunks.

    A chunk ends at a space followed by a non-space, or just before a pipe
    or the end of the line. Chunks cover the text contiguously, so a pipe
    character starts the first chunk of the segment that follows it.
    """
    segments: list[list[str]] = []
    start = 0
    pos = 0
    end = len(line)
    for _ in range(line.count("|") + 1):
        chunks: list[str] = []
        while pos < end and line[pos] != "|":
            following = line[pos + 1] if pos + 1 < end else ""
            if (line[pos] == " " and following != " ") or following in ("|", ""):
                chunks.append(line[start:pos + 1])
                start = pos + 1
            pos += 1
        segments.append(chunks)
        pos += 1
    return segments