from enum import Enum
from typing import Any, Callable, Dict, Optional

from pagepilot.dom import BrowserHost

ROUTER_VERSION = "0.0.0"


class RouterKind(Enum):
    HASH = "hash"
    HISTORY = "history"

    @property
    def router_name(self) -> str:
        return "HashRouter" if self is RouterKind.HASH else "HistoryRouter"

    @property
    def version(self) -> str:
        return ROUTER_VERSION

    def to_detail(self) -> Dict[str, str]:
        return {"name": self.router_name, "version": self.version}


class NavigationStrategy:
    """
    Supplies the current path to a router and performs navigation.

    Subclasses implement the listening, path reading and path changing hooks;
    the router never touches the location or history on its own.
    """

    kind: RouterKind = None
    # Whether route templates get compiled into parameterised patterns
    supports_params = False

    def __init__(self, host=None):
        if type(self) is NavigationStrategy:
            raise TypeError("NavigationStrategy is abstract and cannot be instantiated directly")
        self.host = host if host is not None else BrowserHost()
        self._on_navigate: Optional[Callable[[], None]] = None
        self._unsubscribers = []

    @property
    def is_listening(self) -> bool:
        return self._on_navigate is not None

    def start_listening(self, on_navigate: Callable[[], None]) -> None:
        raise NotImplementedError("start_listening() must be implemented by subclass")

    def stop_listening(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._on_navigate = None

    def get_current_path(self) -> str:
        raise NotImplementedError("get_current_path() must be implemented by subclass")

    def navigate_to_path(self, path: str, replace: bool = False, state: Any = None) -> None:
        raise NotImplementedError("navigate_to_path() must be implemented by subclass")

    def is_root_path(self, path: str) -> bool:
        return path in ("", "/")

    def href(self, path: str) -> str:
        raise NotImplementedError("href() must be implemented by subclass")

    def landing_path(self, path: str) -> Optional[str]:
        """Path reported after navigating to ``path``, or None if navigation cannot reach it."""
        return path

    def location_details(self) -> Dict[str, Any]:
        """Extra, strategy specific fields reported by ``RouterCore.get_current_route``."""
        return {}

    def back(self) -> None:
        self.host.back()

    def forward(self) -> None:
        self.host.forward()

    def _listen(self, target: str, event_name: str, handler: Callable) -> None:
        self._unsubscribers.append(self.host.listen(target, event_name, handler))
