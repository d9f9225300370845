"""TreePath: parsed form of a slash-separated node path.

Syntax:
- Segments are separated by ``/``.
- A leading ``/`` makes the path absolute (walked from the root); otherwise
  it is relative to the walker's current position.
- Empty segments and ``.`` are dropped: ``"a//./b"`` equals ``"a/b"``.
- ``..`` moves to the parent node. Leading ``..`` segments of a relative
  path are kept; inner ones cancel the preceding segment.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PARENT", "SEPARATOR", "TreePath"]

SEPARATOR = "/"
PARENT = ".."
_CURRENT = "."


@dataclass(frozen=True, slots=True)
class TreePath:
    """Normalised path: an absolute flag plus the remaining segments."""

    segments: tuple[str, ...] = ()
    absolute: bool = False

    @classmethod
    def parse(cls, text: str) -> TreePath:
        """Parse ``text`` into a normalised ``TreePath``."""
        absolute = text.startswith(SEPARATOR)
        segments: list[str] = []
        for part in text.split(SEPARATOR):
            if not part or part == _CURRENT:
                continue
            if part == PARENT and segments and segments[-1] != PARENT:
                segments.pop()
                continue
            # unmatched ".." is kept; the walker rejects it above the root
            segments.append(part)
        return cls(segments=tuple(segments), absolute=absolute)

    def join(self, other: TreePath | str) -> TreePath:
        """Append ``other``; an absolute ``other`` replaces this path."""
        if isinstance(other, str):
            other = TreePath.parse(other)
        if other.absolute:
            return other
        prefix = SEPARATOR if self.absolute else ""
        return TreePath.parse(prefix + SEPARATOR.join((*self.segments, *other.segments)))

    def __str__(self) -> str:
        body = SEPARATOR.join(self.segments)
        return SEPARATOR + body if self.absolute else body or _CURRENT
