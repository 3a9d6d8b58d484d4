from __future__ import annotations

from ui.counter import setup_counter
from ui.dom import Element

TITLE = "Vite + TypeScript"
COUNTER_ID = "counter"


def page_markup() -> str:
    return (
        "<div>\n"
        f"  <h1>{TITLE}</h1>\n"
        '  <div class="card">\n'
        f'    <button id="{COUNTER_ID}" type="button"></button>\n'
        "  </div>\n"
        "</div>\n"
    )


def render_app(container: Element) -> Element:
    """Fill the container with the demo page and wire the counter button."""
    container.inner_html = page_markup()
    container.children.clear()

    wrapper = container.append_child(Element("div"))
    wrapper.append_child(Element("h1")).inner_html = TITLE
    card = wrapper.append_child(Element("div", **{"class": "card"}))
    card.append_child(Element("button", COUNTER_ID, type="button"))

    button = container.query_selector(f"#{COUNTER_ID}")
    setup_counter(button)
    return button
