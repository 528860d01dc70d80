import traceback
from js import console


class RouterError(Exception):
    """Base exception for routing errors."""
    pass


class ConfigurationError(RouterError):
    """Raised synchronously when the router is misconfigured."""
    pass


class UnresolvedRouteError(RouterError):
    """Reported when neither a route, the not-found route nor the default route resolves a path."""

    def __init__(self, path: str, reason: str = None):
        self.path = path
        self.reason = reason
        message = f"No route found for path: '{path}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PageProductionError(RouterError):
    """Reported when a page factory raises during render."""

    def __init__(self, template: str, cause: Exception):
        self.template = template
        self.cause = cause
        super().__init__(f"Error rendering route '{template}': {cause}")
        self.__cause__ = cause


def global_error_handler(error: Exception, description: str = None):
    traceback.print_exception(type(error), error, error.__traceback__)
    message = f"{error.__class__.__name__}: {str(error)}"
    if description:
        message = f"{description} - {message}"
    console.error(f"%c {message}", "color: #7b110a; font-family:sans-serif; font-size: 18px")
