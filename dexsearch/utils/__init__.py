# ABOUTME: Utils package for dexsearch helper functions.
# ABOUTME: Contains the type chart and name normalization.

from dexsearch.utils.normalize import to_id
from dexsearch.utils.type_chart import (
    TYPE_CHART,
    TYPES,
    get_effectiveness,
    get_effectiveness_exponent,
    is_immune,
)

__all__ = [
    "TYPES",
    "TYPE_CHART",
    "get_effectiveness",
    "get_effectiveness_exponent",
    "is_immune",
    "to_id",
]
