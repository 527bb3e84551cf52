from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AstNode:
    """Parse tree node.

    `tag` is a `|`-separated list of grammar rule names (e.g. "expr|number|regex"),
    tested by substring when the tree is read into values. The root of a
    program is tagged ">"; grammar punctuation leaves are tagged "char".
    """
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return self._format(0)

    def _format(self, depth: int) -> str:
        pad = "  " * depth
        if not self.children:
            return f"{pad}{self.tag} '{self.contents}'"
        lines = [f"{pad}{self.tag}"]
        lines.extend(child._format(depth + 1) for child in self.children)
        return "\n".join(lines)
