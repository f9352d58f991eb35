"""
Fluent builder for OData query strings.
"""

from typing import Dict, List


class ODataQueryBuilder:
    """Collects $-options in insertion order and renders them as a query string.

    Values are passed through verbatim: callers are responsible for escaping
    filter literals and for supplying URL-safe strings.
    """

    def __init__(self):
        self._params: Dict[str, str] = {}

    def filter(self, expression: str) -> "ODataQueryBuilder":
        self._params["$filter"] = expression
        return self

    def select(self, fields: List[str]) -> "ODataQueryBuilder":
        self._params["$select"] = ",".join(fields)
        return self

    def expand(self, navigations: List[str]) -> "ODataQueryBuilder":
        self._params["$expand"] = ",".join(navigations)
        return self

    def top(self, n: int) -> "ODataQueryBuilder":
        self._params["$top"] = str(int(n))
        return self

    def skip(self, n: int) -> "ODataQueryBuilder":
        self._params["$skip"] = str(int(n))
        return self

    def order_by(self, expression: str) -> "ODataQueryBuilder":
        self._params["$orderby"] = expression
        return self

    def count(self) -> "ODataQueryBuilder":
        self._params["$count"] = "true"
        return self

    def build(self) -> str:
        if not self._params:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self._params.items())

    def __bool__(self) -> bool:
        return bool(self._params)
