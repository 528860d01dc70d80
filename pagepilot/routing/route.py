from typing import Any, Callable, Dict, NamedTuple, Optional

from pagepilot.exceptions import ConfigurationError
from pagepilot.routing.pattern import NO_MATCH, PatternMatch, RoutePattern

PageFactory = Callable[[Dict[str, str]], Any]


class RouteEntry:
    """A registered route: path template, page factory, title and optional compiled pattern."""

    __slots__ = ("_path", "_component", "_title", "_pattern")

    def __init__(self, path: str, component: PageFactory, title: Optional[str] = None,
                 pattern: Optional[RoutePattern] = None):
        if not callable(component):
            raise ConfigurationError(f"Page factory for route '{path}' is not callable")

        object.__setattr__(self, "_path", path)
        object.__setattr__(self, "_component", component)
        object.__setattr__(self, "_title", title)
        object.__setattr__(self, "_pattern", pattern)

    def __setattr__(self, name, value):
        raise AttributeError(f"RouteEntry is immutable, cannot set '{name}'")

    @property
    def path(self) -> str:
        return self._path

    @property
    def component(self) -> PageFactory:
        return self._component

    @property
    def title(self) -> Optional[str]:
        return self._title

    @property
    def pattern(self) -> Optional[RoutePattern]:
        return self._pattern

    def match(self, path: str) -> PatternMatch:
        """Test ``path`` against this route; routes without a pattern only match their exact path."""
        if self._pattern:
            return self._pattern.match(path)
        if self._path == path:
            return PatternMatch(True, {})
        return NO_MATCH

    def __repr__(self):
        return f"RouteEntry(path={self._path!r}, title={self._title!r})"


class RouteInfo(NamedTuple):
    """Static description of an application route used by navigation components."""
    path: str
    href: str
    title: str

    @property
    def is_dynamic(self) -> bool:
        return ":" in self.path
