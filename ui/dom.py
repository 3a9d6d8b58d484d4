"""Minimal in-memory element tree used by the demo widgets."""
from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, List, Optional

Listener = Callable[["Element"], None]


class Element:
    def __init__(self, tag: str, element_id: Optional[str] = None, **attributes: str):
        self.tag = tag
        self.id = element_id
        self.attributes = attributes
        self.inner_html = ""
        self.children: List[Element] = []
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def append_child(self, child: "Element") -> "Element":
        self.children.append(child)
        return child

    def add_event_listener(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def remove_event_listener(self, event: str, listener: Listener) -> None:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def dispatch(self, event: str) -> None:
        for listener in list(self._listeners[event]):
            listener(self)

    def click(self) -> None:
        self.dispatch("click")

    def query_selector(self, selector: str) -> Optional["Element"]:
        if not selector.startswith("#"):
            raise ValueError(f"Unsupported selector: {selector}")
        wanted = selector[1:]
        for child in self.children:
            if child.id == wanted:
                return child
            found = child.query_selector(selector)
            if found is not None:
                return found
        return None
