from typing import Any, Callable, Dict, Optional
from js import window, document, CustomEvent, Object
from pyodide.ffi import create_proxy, to_js

from pagepilot.constants import EVENTS


class ContainerSink:
    """
    Mount point the router renders pages into.

    The element belongs to the surrounding application; the sink only clears
    and repopulates its children.
    """

    def __init__(self, element, document_ref=None):
        self.element = element
        self._document = document_ref if document_ref is not None else document

    def clear(self) -> None:
        self.element.innerHTML = ""

    def append(self, node: Any) -> None:
        # Component nodes expose the real element as .element
        if hasattr(node, "element"):
            node = node.element
        elif isinstance(node, str):
            node = self._document.createTextNode(node)
        self.element.appendChild(node)


class BrowserHost:
    """
    Thin adapter over ``window``/``document`` used by the navigation strategies.

    Every browser side effect the router performs goes through this class, so a
    strategy can be driven by any object exposing the same methods.
    """

    def __init__(self, window_ref=None, document_ref=None):
        self.window = window_ref if window_ref is not None else window
        self.document = document_ref if document_ref is not None else document

    # -- location --------------------------------------------------------

    def location_hash(self) -> str:
        return self.window.location.hash or ""

    def location_path(self) -> str:
        return self.window.location.pathname or ""

    def location_search(self) -> str:
        return self.window.location.search or ""

    def location_origin(self) -> str:
        return self.window.location.origin

    def set_hash(self, fragment: str) -> None:
        self.window.location.hash = fragment

    def replace_location(self, url: str) -> None:
        self.window.location.replace(url)

    # -- session history ---------------------------------------------------

    def push_state(self, state: Any, url: str) -> None:
        self.window.history.pushState(self._to_js(state), "", url)

    def replace_state(self, state: Any, url: str) -> None:
        self.window.history.replaceState(self._to_js(state), "", url)

    def back(self) -> None:
        self.window.history.back()

    def forward(self) -> None:
        self.window.history.forward()

    # -- document ----------------------------------------------------------

    def set_title(self, title: str) -> None:
        self.document.title = title

    def find_container(self, element_id: str) -> Optional[ContainerSink]:
        element = self.document.getElementById(element_id)
        if not element:
            return None
        return ContainerSink(element, self.document)

    # -- events ------------------------------------------------------------

    def listen(self, target: str, event_name: str, handler: Callable) -> Callable[[], None]:
        """
        Attach ``handler`` to ``window`` or ``document``.

        Returns a callable that detaches the listener and releases its proxy.
        """
        source = self.document if target == "document" else self.window
        proxy = create_proxy(handler)
        source.addEventListener(event_name, proxy)

        def unsubscribe():
            source.removeEventListener(event_name, proxy)
            proxy.destroy()

        return unsubscribe

    def dispatch_route_change(self, detail: Dict[str, Any]) -> None:
        event = CustomEvent.new(EVENTS.ROUTE_CHANGE, self._to_js({"detail": detail}))
        self.window.dispatchEvent(event)

    def _to_js(self, value: Any) -> Any:
        if value is None:
            return None
        return to_js(value, dict_converter=Object.fromEntries)
