from typing import Any, Callable, Dict

from pagepilot.constants import EVENTS
from pagepilot.routing.route import RouteInfo
from pagepilot.routing.strategy import NavigationStrategy, RouterKind

FRAGMENT_MARKER = "#"


class FragmentNavigationStrategy(NavigationStrategy):
    """Reads the route from ``window.location.hash``; only exact template matches."""

    kind = RouterKind.HASH
    supports_params = False

    def start_listening(self, on_navigate: Callable[[], None]) -> None:
        self._on_navigate = on_navigate
        self._listen("window", EVENTS.HASH_CHANGE, self._handle_hash_change)
        # A fragment may already be present before any listener was attached
        self._listen("window", EVENTS.LOAD, self._handle_hash_change)

    def get_current_path(self) -> str:
        fragment = self.host.location_hash()
        if fragment.startswith(FRAGMENT_MARKER):
            fragment = fragment[len(FRAGMENT_MARKER):]
        return fragment

    def navigate_to_path(self, path: str, replace: bool = False, state: Any = None) -> None:
        # The resulting hashchange event triggers the render
        fragment = self.href(path)
        if replace:
            self.host.replace_location(fragment)
        else:
            self.host.set_hash(fragment)

    def is_root_path(self, path: str) -> bool:
        return path in ("", FRAGMENT_MARKER, "/")

    def href(self, path: str) -> str:
        return f"{FRAGMENT_MARKER}{path}"

    def location_details(self) -> Dict[str, Any]:
        return {"fragment": self.host.location_hash()}

    def _handle_hash_change(self, event=None) -> None:
        if self._on_navigate:
            self._on_navigate()


class HASH_ROUTES:
    HOME = RouteInfo("home", "#home", "Home")
    ABOUT = RouteInfo("about-me", "#about-me", "About Me")
    PROJECTS = RouteInfo("projects", "#projects", "Projects")
    MISC = RouteInfo("misc", "#misc", "Misc")
    NOT_FOUND = RouteInfo("not-found", "#not-found", "Page Not Found")


HASH_NAVIGATION_ROUTES = [
    HASH_ROUTES.HOME,
    HASH_ROUTES.ABOUT,
    HASH_ROUTES.PROJECTS,
    HASH_ROUTES.MISC,
]

HASH_ROUTES_ARRAY = [
    HASH_ROUTES.HOME,
    HASH_ROUTES.ABOUT,
    HASH_ROUTES.PROJECTS,
    HASH_ROUTES.MISC,
    HASH_ROUTES.NOT_FOUND,
]
