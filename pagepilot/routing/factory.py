from typing import List, Union

from pagepilot.exceptions import ConfigurationError
from pagepilot.routing.core import RouterCore
from pagepilot.routing.hash_strategy import (
    FragmentNavigationStrategy,
    HASH_NAVIGATION_ROUTES,
    HASH_ROUTES,
)
from pagepilot.routing.history_strategy import (
    HistoryNavigationStrategy,
    HISTORY_NAVIGATION_ROUTES,
    HISTORY_ROUTES,
)
from pagepilot.routing.route import RouteInfo
from pagepilot.routing.strategy import NavigationStrategy, RouterKind

_STRATEGIES = {
    RouterKind.HASH: FragmentNavigationStrategy,
    RouterKind.HISTORY: HistoryNavigationStrategy,
}

_ROUTE_TABLES = {
    RouterKind.HASH: HASH_ROUTES,
    RouterKind.HISTORY: HISTORY_ROUTES,
}

_NAVIGATION_ROUTES = {
    RouterKind.HASH: HASH_NAVIGATION_ROUTES,
    RouterKind.HISTORY: HISTORY_NAVIGATION_ROUTES,
}


def resolve_kind(kind: Union[RouterKind, str]) -> RouterKind:
    """Accepts a ``RouterKind``, its value (``"hash"``) or its router name (``"HashRouter"``)."""
    if isinstance(kind, RouterKind):
        return kind
    for candidate in RouterKind:
        if kind in (candidate.value, candidate.router_name):
            return candidate
    raise ConfigurationError(
        f"Unknown router type: {kind!r}. Use '{RouterKind.HASH.router_name}' or "
        f"'{RouterKind.HISTORY.router_name}'."
    )


def create_strategy(kind: Union[RouterKind, str], host=None, **options) -> NavigationStrategy:
    return _STRATEGIES[resolve_kind(kind)](host=host, **options)


def create_router(kind: Union[RouterKind, str], host=None, **options) -> RouterCore:
    """Build a router driven by the strategy registered for ``kind``.

    ``options`` are passed to the strategy (e.g. ``base_path`` for history routing).
    """
    return RouterCore(create_strategy(kind, host=host, **options))


def get_routes(kind: Union[RouterKind, str]):
    return _ROUTE_TABLES[resolve_kind(kind)]


def get_navigation_routes(kind: Union[RouterKind, str]) -> List[RouteInfo]:
    return list(_NAVIGATION_ROUTES[resolve_kind(kind)])
