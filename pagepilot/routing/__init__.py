from .pattern import RoutePattern, PatternMatch
from .route import RouteEntry, RouteInfo
from .strategy import NavigationStrategy, RouterKind
from .core import RouterCore, LifecycleState, MAX_REDIRECT_DEPTH
from .hash_strategy import (
    FragmentNavigationStrategy,
    HASH_ROUTES,
    HASH_NAVIGATION_ROUTES,
    HASH_ROUTES_ARRAY,
)
from .history_strategy import (
    HistoryNavigationStrategy,
    HISTORY_ROUTES,
    HISTORY_NAVIGATION_ROUTES,
    HISTORY_ROUTES_ARRAY,
)
from .factory import create_router, create_strategy, get_routes, get_navigation_routes

__all__ = [
    'RoutePattern',
    'PatternMatch',
    'RouteEntry',
    'RouteInfo',
    'NavigationStrategy',
    'RouterKind',
    'RouterCore',
    'LifecycleState',
    'MAX_REDIRECT_DEPTH',
    'FragmentNavigationStrategy',
    'HASH_ROUTES',
    'HASH_NAVIGATION_ROUTES',
    'HASH_ROUTES_ARRAY',
    'HistoryNavigationStrategy',
    'HISTORY_ROUTES',
    'HISTORY_NAVIGATION_ROUTES',
    'HISTORY_ROUTES_ARRAY',
    'create_router',
    'create_strategy',
    'get_routes',
    'get_navigation_routes',
]
