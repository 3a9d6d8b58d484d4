"""Navigators used by the payment service to send the user to a payment link."""
from __future__ import annotations

import webbrowser
from typing import List, Tuple


class WebBrowserNavigator:
    """Opens links in the local web browser."""

    def open(self, url: str, target: str = "_blank") -> bool:
        new = 2 if target == "_blank" else 0
        return webbrowser.open(url, new=new)


class LinkRecorder:
    """Collects links instead of opening them, so a server can hand them back."""

    def __init__(self):
        self.opened: List[Tuple[str, str]] = []

    def open(self, url: str, target: str = "_blank") -> bool:
        self.opened.append((url, target))
        return True

    @property
    def last_url(self) -> str | None:
        return self.opened[-1][0] if self.opened else None
