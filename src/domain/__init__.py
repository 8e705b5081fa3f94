"""Domain models and pure query logic for the dummy price oracle.

Everything here operates on an explicit ``PriceTable`` passed in by the
caller; persistence lives in ``db`` and the entry points in ``services``.
"""

__all__ = [
    "assets",
    "base_types",
    "errors",
    "messages",
    "simulation",
    "triangulation",
    "uint128",
]
