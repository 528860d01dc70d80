class IDS:
    # Main application content container
    MAIN = "app"


class EVENTS:
    HASH_CHANGE = "hashchange"
    LOAD = "load"
    POP_STATE = "popstate"
    CLICK = "click"
    ROUTE_CHANGE = "routechange"
