"""HTML element tree and its builder - pure, no I/O."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class HTMLElement:
    """A named node with optional text and ordered child elements."""

    name: str
    text: str = ""
    elements: list["HTMLElement"] = field(default_factory=list)

    indent_size: ClassVar[int] = 2

    def serialize(self, depth: int = 0) -> str:
        """
        Serialize this element and its children, one tag or text per line.

        Opening and closing tags sit at `depth * indent_size` spaces; text sits
        one level deeper. Empty text emits no line. No escaping is applied.
        """
        pad = " " * (self.indent_size * depth)
        result = f"{pad}<{self.name}>\n"

        if self.text:
            result += " " * (self.indent_size * (depth + 1)) + self.text + "\n"

        for element in self.elements:
            result += element.serialize(depth + 1)

        result += f"{pad}</{self.name}>\n"
        return result

    def __str__(self) -> str:
        return self.serialize()

    @staticmethod
    def build(root_name: str) -> "HTMLBuilder":
        """Start a fluent builder rooted at `root_name`."""
        return HTMLBuilder(root_name)


class HTMLBuilder:
    """Accumulates children under a single root element."""

    def __init__(self, root_name: str):
        self.root = HTMLElement(root_name)

    def add_child(self, child_name: str, child_text: str = "") -> "HTMLBuilder":
        self.root.elements.append(HTMLElement(child_name, child_text))
        return self

    def build(self) -> HTMLElement:
        """Return the root element."""
        return self.root

    def serialize(self) -> str:
        return self.root.serialize()

    def __str__(self) -> str:
        return self.serialize()
