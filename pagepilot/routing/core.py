from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
from js import console

from pagepilot.constants import IDS
from pagepilot.exceptions import (
    ConfigurationError,
    PageProductionError,
    UnresolvedRouteError,
    global_error_handler,
)
from pagepilot.routing.pattern import RoutePattern
from pagepilot.routing.route import PageFactory, RouteEntry
from pagepilot.routing.strategy import NavigationStrategy, RouterKind

# Consecutive redirects render() may issue before giving up
MAX_REDIRECT_DEPTH = 3


class LifecycleState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    DESTROYED = "destroyed"


class RouterCore:
    """
    Route table, fallback resolution and the render pipeline shared by every
    navigation strategy.

    Typical setup::

        router = RouterCore(HistoryNavigationStrategy())
        router.add_route("/home", create_home_page, "Home") \\
              .add_route("/not-found", create_not_found_page, "Page Not Found") \\
              .set_default_route("/home") \\
              .set_not_found_route("/not-found")
        router.initialize()

    On every navigation signal the current path is resolved to a route, the
    container is cleared and repopulated with the page the route produces, the
    document title is updated and a navigation-change notification is sent.
    """

    def __init__(self, strategy: NavigationStrategy,
                 error_handler: Optional[Callable[[Exception, str], None]] = None):
        if not isinstance(strategy, NavigationStrategy):
            raise ConfigurationError(f"Invalid navigation strategy: {strategy!r}")

        self.strategy = strategy
        self.routes: Dict[str, RouteEntry] = {}
        self.default_route: Optional[str] = None
        self.not_found_route: Optional[str] = None
        self.current_path = ""
        self.current_params: Dict[str, str] = {}
        self.state = LifecycleState.UNINITIALIZED
        self.container = None

        self._observers: List[Callable[[Dict[str, Any]], None]] = []
        self._redirect_depth = 0
        self._error_handler = error_handler or global_error_handler

    @property
    def kind(self) -> RouterKind:
        return self.strategy.kind

    @property
    def is_initialized(self) -> bool:
        return self.state is LifecycleState.INITIALIZED

    def set_error_handler(self, handler: Callable[[Exception, str], None]) -> None:
        self._error_handler = handler

    # -- configuration -----------------------------------------------------

    def add_route(self, path: str, component: PageFactory, title: Optional[str] = None) -> "RouterCore":
        pattern = RoutePattern.compile(path) if self.strategy.supports_params else None
        self.routes[path] = RouteEntry(path, component, title, pattern)
        return self

    def set_default_route(self, path: str) -> "RouterCore":
        if path not in self.routes:
            raise ConfigurationError(f"Cannot set default route. There is no route with '{path}' path.")
        if self.strategy.is_root_path(path):
            # A root default only terminates when navigating to it lands on a path it matches
            landed = self.strategy.landing_path(path)
            if landed is None or not self.routes[path].match(landed).success:
                raise ConfigurationError(
                    f"Cannot set default route. Navigating to root path '{path}' would redirect forever."
                )
        self.default_route = path
        return self

    def set_not_found_route(self, path: str) -> "RouterCore":
        if path not in self.routes:
            raise ConfigurationError(f"Cannot set not found route. There is no route with '{path}' path.")
        self.not_found_route = path
        return self

    # -- lifecycle ---------------------------------------------------------

    def initialize(self, container_id: str = IDS.MAIN) -> "RouterCore":
        if self.state is LifecycleState.INITIALIZED:
            error = ConfigurationError(f"{self.kind.router_name} router is already initialized")
            console.warn(f"{error.__class__.__name__}: {error}")
            return self
        if self.state is LifecycleState.DESTROYED:
            raise ConfigurationError(f"{self.kind.router_name} router was destroyed and cannot be initialized again")

        container = self.strategy.host.find_container(container_id)
        if not container:
            raise ConfigurationError(f"Container element with ID '{container_id}' not found")

        self.container = container
        self.strategy.start_listening(self.render)
        self.state = LifecycleState.INITIALIZED

        # Handle initial route
        self.render()
        return self

    def destroy(self) -> None:
        if self.state is not LifecycleState.INITIALIZED:
            return
        self.strategy.stop_listening()
        self.state = LifecycleState.DESTROYED

    # -- rendering ---------------------------------------------------------

    def render(self) -> None:
        if self.state is not LifecycleState.INITIALIZED:
            console.warn("render() called on a router that is not initialized")
            return

        current_path = self.strategy.get_current_path()
        previous_path = self.current_path
        self.current_path = current_path

        route, params = self._find_matching_route(current_path)

        # An unmatched root goes to the default route; the redirect re-enters render()
        if route is None and self.default_route and self.strategy.is_root_path(current_path):
            self._redirect(self.default_route)
            return

        if route is None and self.not_found_route:
            route = self.routes.get(self.not_found_route)
            params = {}

        if route is None:
            self._redirect_depth = 0
            self._report(UnresolvedRouteError(current_path))
            return

        try:
            self.container.clear()
            page = route.component(dict(params))
            if page is not None:
                self.container.append(page)
        except Exception as e:
            self._report(PageProductionError(route.path, e))
            # Try to render the not found page as fallback
            if self.not_found_route and self.not_found_route != route.path:
                self._redirect(self.not_found_route)
            else:
                self._redirect_depth = 0
            return

        self._redirect_depth = 0
        self.current_params = dict(params)

        if route.title:
            self.strategy.host.set_title(route.title)

        self._dispatch_navigation_event(previous_path, current_path, dict(params))

    def _redirect(self, path: str) -> None:
        if self._redirect_depth >= MAX_REDIRECT_DEPTH:
            self._redirect_depth = 0
            self._report(UnresolvedRouteError(path, f"aborted after {MAX_REDIRECT_DEPTH} consecutive redirects"))
            return
        self._redirect_depth += 1
        self.strategy.navigate_to_path(path, replace=True)

    def _find_matching_route(self, path: str) -> Tuple[Optional[RouteEntry], Dict[str, str]]:
        """First registered route matching ``path`` wins."""
        for route in self.routes.values():
            match = route.match(path)
            if match.success:
                return route, match.params
        return None, {}

    def _report(self, error: Exception) -> None:
        try:
            self._error_handler(error, self.kind.router_name)
        except Exception as e:
            console.error(f"Error handler failed: {str(e)}")

    # -- navigation --------------------------------------------------------

    def navigate(self, path: str, replace: bool = False, state: Any = None) -> None:
        self.strategy.navigate_to_path(path, replace=replace, state=state)

    def back(self) -> None:
        self.strategy.back()

    def forward(self) -> None:
        self.strategy.forward()

    def href(self, path: str) -> str:
        return self.strategy.href(path)

    def get_current_route(self) -> Dict[str, Any]:
        current_path = self.strategy.get_current_path()
        route, params = self._find_matching_route(current_path)
        return {
            "path": current_path,
            "params": dict(params),
            "route": route.path if route else None,
            **self.strategy.location_details(),
        }

    # -- notifications -----------------------------------------------------

    def on_route_change(self, handler: Callable[[Dict[str, Any]], None]) -> Callable[[], None]:
        """Subscribe to navigation-change notifications; returns an unsubscribe function."""
        self._observers.append(handler)

        def unsubscribe():
            if handler in self._observers:
                self._observers.remove(handler)

        return unsubscribe

    def _dispatch_navigation_event(self, from_path: str, to_path: str, params: Dict[str, str]) -> None:
        event = {
            "from": from_path,
            "to": to_path,
            "params": params,
            "router_type": self.kind,
        }
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as e:
                console.error(f"Error in route change observer: {str(e)}")

        self.strategy.host.dispatch_route_change({
            "from": from_path,
            "to": to_path,
            "params": params,
            "routerType": self.kind.to_detail(),
        })
