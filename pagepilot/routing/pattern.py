import re
from functools import lru_cache
from typing import Dict, List, NamedTuple, Pattern

PARAM_PREFIX = ":"
SEGMENT_SEPARATOR = "/"
PARAM_CAPTURE = r"([^/]+)"


class PatternMatch(NamedTuple):
    success: bool
    params: Dict[str, str]


NO_MATCH = PatternMatch(False, {})


def _is_param_segment(segment: str) -> bool:
    return segment.startswith(PARAM_PREFIX) and len(segment) > len(PARAM_PREFIX)


def _compile_template(template: str) -> tuple:
    """Build the anchored regex and the ordered parameter names for a template.

    Both are produced in the same left-to-right pass over the segments, so the
    n-th capture group always belongs to the n-th parameter name.
    """
    param_names: List[str] = []
    parts: List[str] = []
    for segment in template.split(SEGMENT_SEPARATOR):
        if _is_param_segment(segment):
            param_names.append(segment[len(PARAM_PREFIX):])
            parts.append(PARAM_CAPTURE)
        else:
            parts.append(re.escape(segment))
    regex_path = f"^{SEGMENT_SEPARATOR.join(parts)}$"
    return regex_path, tuple(param_names)


class RoutePattern:
    """
    Compiled matcher for a path template such as ``/projects/:id``.

    Literal segments match verbatim, ``:name`` segments capture one or more
    non-``/`` characters. Captured values are always strings.
    """

    def __init__(self, template: str):
        self.template = template
        self.regex_path, self.param_names = _compile_template(template)
        self.regex: Pattern = re.compile(self.regex_path)

    @classmethod
    def compile(cls, template: str) -> "RoutePattern":
        return _cached_pattern(template)

    @property
    def has_params(self) -> bool:
        return bool(self.param_names)

    def match(self, path: str) -> PatternMatch:
        match = self.regex.fullmatch(path)
        if not match:
            return NO_MATCH
        return PatternMatch(True, dict(zip(self.param_names, match.groups())))

    def __eq__(self, other):
        return isinstance(other, RoutePattern) and other.regex_path == self.regex_path \
            and other.param_names == self.param_names

    def __hash__(self):
        return hash((self.regex_path, self.param_names))

    def __repr__(self):
        return f"RoutePattern({self.template!r})"


@lru_cache(maxsize=None)
def _cached_pattern(template: str) -> RoutePattern:
    return RoutePattern(template)
