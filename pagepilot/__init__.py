from .exceptions import (
    RouterError,
    ConfigurationError,
    UnresolvedRouteError,
    PageProductionError,
    global_error_handler,
)
from .routing import (
    RouterCore,
    RouterKind,
    FragmentNavigationStrategy,
    HistoryNavigationStrategy,
    create_router,
    get_routes,
    get_navigation_routes,
)

__version__ = "0.1.0"

get_version = lambda: __version__
