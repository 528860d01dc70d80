from typing import Any, Callable, Dict, Optional
from urllib.parse import parse_qsl

from pagepilot.constants import EVENTS
from pagepilot.routing.route import RouteInfo
from pagepilot.routing.strategy import NavigationStrategy, RouterKind

PRIMARY_BUTTON = 0
SAME_CONTEXT_TARGETS = ("", "_self")


class HistoryNavigationStrategy(NavigationStrategy):
    """
    Reads the route from ``window.location.pathname`` and navigates with the
    History API. Supports parameterised templates such as ``/projects/:id``.

    Clicks on same-origin anchors are intercepted and turned into in-app
    navigations instead of full page loads.
    """

    kind = RouterKind.HISTORY
    supports_params = True

    def __init__(self, host=None, base_path: str = ""):
        super().__init__(host)
        self.base_path = base_path.rstrip("/")  # Remove trailing slash if present

    def start_listening(self, on_navigate: Callable[[], None]) -> None:
        self._on_navigate = on_navigate
        self._listen("window", EVENTS.POP_STATE, self._handle_pop_state)
        self._listen("document", EVENTS.CLICK, self._handle_link_click)

    def get_current_path(self) -> str:
        return self._strip_base_path(self.host.location_path())

    def navigate_to_path(self, path: str, replace: bool = False, state: Any = None) -> None:
        url = self.href(path)
        if replace:
            self.host.replace_state(state, url)
        else:
            self.host.push_state(state, url)

        # pushState/replaceState do not emit an event, render explicitly
        if self._on_navigate:
            self._on_navigate()

    def href(self, path: str) -> str:
        return f"{self.base_path}{path}"

    def location_details(self) -> Dict[str, Any]:
        return {"query": self.parse_query(self.host.location_search())}

    @staticmethod
    def parse_query(query_string: str) -> Dict[str, str]:
        """Parse a query string into a dictionary; repeated keys keep the last value."""
        query_string = (query_string or "").lstrip("?")
        if not query_string:
            return {}
        return dict(parse_qsl(query_string, keep_blank_values=True))

    def landing_path(self, path: str) -> Optional[str]:
        url = self.href(path).split("?", 1)[0]
        # An empty URL keeps the current document, it never lands on path
        if not url.startswith("/") or not self._is_under_base_path(url):
            return None
        return self._strip_base_path(url)

    def _is_under_base_path(self, path: str) -> bool:
        if not self.base_path:
            return True
        return path == self.base_path or path.startswith(self.base_path + "/")

    def _strip_base_path(self, path: str) -> str:
        if self.base_path and self._is_under_base_path(path):
            path = path[len(self.base_path):] or "/"
        return path

    def _handle_pop_state(self, event=None) -> None:
        if self._on_navigate:
            self._on_navigate()

    def _handle_link_click(self, event) -> None:
        target = event.target
        link = target.closest("a") if target else None
        if not link or not self._should_intercept(event, link):
            return

        event.preventDefault()

        path = self._strip_base_path(link.pathname) + (link.search or "")
        current = self.get_current_path() + self.host.location_search()
        if path != current:
            self.navigate_to_path(path)

    def _should_intercept(self, event, link) -> bool:
        if event.button != PRIMARY_BUTTON:
            return False
        if event.metaKey or event.ctrlKey or event.shiftKey or event.altKey:
            return False

        if (link.getAttribute("target") or "") not in SAME_CONTEXT_TARGETS:
            return False
        if link.hasAttribute("download"):
            return False

        href = link.getAttribute("href")
        if not href or href.startswith("#"):
            return False

        if link.origin != self.host.location_origin():
            return False

        # Links outside the mount prefix belong to another application
        return self._is_under_base_path(link.pathname)


class HISTORY_ROUTES:
    HOME = RouteInfo("/home", "/home", "Home")
    ABOUT = RouteInfo("/about-me", "/about-me", "About Me")
    PROJECTS = RouteInfo("/projects", "/projects", "Projects")
    MISC = RouteInfo("/misc", "/misc", "Misc")
    NOT_FOUND = RouteInfo("/not-found", "/not-found", "Page Not Found")
    # Dynamic routes
    PROJECT_DETAIL = RouteInfo("/projects/:id", "/projects", "Project Details")
    USER_PROFILE = RouteInfo("/users/:userId", "/users", "User Profile")


HISTORY_NAVIGATION_ROUTES = [
    HISTORY_ROUTES.HOME,
    HISTORY_ROUTES.ABOUT,
    HISTORY_ROUTES.PROJECTS,
    HISTORY_ROUTES.MISC,
]

_ALL_HISTORY_ROUTES = [
    HISTORY_ROUTES.HOME,
    HISTORY_ROUTES.ABOUT,
    HISTORY_ROUTES.PROJECTS,
    HISTORY_ROUTES.MISC,
    HISTORY_ROUTES.NOT_FOUND,
    HISTORY_ROUTES.PROJECT_DETAIL,
    HISTORY_ROUTES.USER_PROFILE,
]

# Dynamic templates are excluded from general iteration
HISTORY_ROUTES_ARRAY = [route for route in _ALL_HISTORY_ROUTES if not route.is_dynamic]
