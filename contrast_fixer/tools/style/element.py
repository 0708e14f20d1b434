from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from contrast_fixer.core.utils import ensure_list


@dataclass(eq=False)
class ElementNode:
    """
    Minimal stand-in for a rendered DOM element.

    computed_style: what the browser resolved (getComputedStyle)
    style: inline style written by us; wins over computed_style
    """
    tag: str = "div"
    text: str = ""
    computed_style: Dict[str, str] = field(default_factory=dict)
    style: Dict[str, str] = field(default_factory=dict)
    children: List["ElementNode"] = field(default_factory=list)
    parent: Optional["ElementNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementNode":
        """
        {"tag": "p", "text": "hi", "computed_style": {"color": "rgb(0, 0, 0)"},
         "children": [...]}
        """
        return cls(
            tag=data.get("tag", "div"),
            text=data.get("text") or "",
            computed_style=dict(data.get("computed_style") or {}),
            style=dict(data.get("style") or {}),
            children=[cls.from_dict(c) for c in ensure_list(data.get("children"))],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "text": self.text,
            "computed_style": dict(self.computed_style),
            "style": dict(self.style),
            "children": [c.to_dict() for c in self.children],
        }

    def append(self, child: "ElementNode") -> "ElementNode":
        child.parent = self
        self.children.append(child)
        return child

    def get_style(self, prop: str) -> Optional[str]:
        """Effective value: inline style if set, else computed."""
        inline = self.style.get(prop)
        if inline:
            return inline
        return self.computed_style.get(prop)

    def set_style(self, prop: str, value: str) -> None:
        self.style[prop] = value

    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())

    def iter_tree(self) -> Iterator["ElementNode"]:
        """Document order: a node comes before its descendants."""
        yield self
        for child in self.children:
            yield from child.iter_tree()
