from __future__ import annotations

from weakref import WeakKeyDictionary

from ui.dom import Element, Listener

# Click handler currently attached to each element, replaced on re-attach.
_attached: "WeakKeyDictionary[Element, Listener]" = WeakKeyDictionary()


def setup_counter(element: Element) -> None:
    counter = 0

    def set_counter(count: int) -> None:
        nonlocal counter
        counter = count
        element.inner_html = f"count is {counter}"

    def on_click(_: Element) -> None:
        set_counter(counter + 1)

    previous = _attached.get(element)
    if previous is not None:
        element.remove_event_listener("click", previous)
    _attached[element] = on_click

    element.add_event_listener("click", on_click)
    set_counter(0)
