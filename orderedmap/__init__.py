"""
orderedmap is a Python library for insertion ordered, keyed containers with
array-like operations: positional access, random sampling, first/last
searches by value or key, in-place reversal and a filter that keeps the
concrete type of the container.

The library reads the ``ORDEREDMAP_FLAGS`` environment variable at import
time, see `orderedmap.configdefaults` for the available flags.
"""

from orderedmap.configdefaults import config
from orderedmap.exceptions import FractionalIndexWarning, NotCallableError
from orderedmap.misc.ordered_map import OrderedMap, ReadonlyOrderedMap
from orderedmap.misc.typed_map import TypedOrderedMap


__version__ = "0.1.0"

__all__ = [
    "FractionalIndexWarning",
    "NotCallableError",
    "OrderedMap",
    "ReadonlyOrderedMap",
    "TypedOrderedMap",
    "config",
]
