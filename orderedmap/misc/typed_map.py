from orderedmap.misc.ordered_map import K, OrderedMap, V


TypeSpec = type | tuple[type, ...] | None


class TypedOrderedMap(OrderedMap[K, V]):
    """An `OrderedMap` that only accepts keys and values of given types.

    ``None`` for `key_type` or `value_type` leaves that side unconstrained.
    Containers derived with `filter` or `copy` carry the same constraints.
    """

    __slots__ = ("_key_type", "_value_type")

    def __init__(
        self,
        items=None,
        *,
        key_type: TypeSpec = None,
        value_type: TypeSpec = None,
    ) -> None:
        self._key_type = key_type
        self._value_type = value_type
        super().__init__(items)

    @property
    def key_type(self) -> TypeSpec:
        return self._key_type

    @property
    def value_type(self) -> TypeSpec:
        return self._value_type

    def __setitem__(self, key: K, value: V) -> None:
        if self.key_type is not None and not isinstance(key, self.key_type):
            raise TypeError(
                f"Key {key!r} is not an instance of {_type_name(self.key_type)}"
            )
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise TypeError(
                f"Value {value!r} for key {key!r} is not an instance of "
                f"{_type_name(self.value_type)}"
            )
        super().__setitem__(key, value)

    def _make_empty(self) -> "TypedOrderedMap[K, V]":
        return type(self)(key_type=self.key_type, value_type=self.value_type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self._data.items())!r}, "
            f"key_type={_type_name(self.key_type)}, "
            f"value_type={_type_name(self.value_type)})"
        )


def _type_name(type_spec: TypeSpec) -> str:
    if type_spec is None:
        return "None"
    if isinstance(type_spec, tuple):
        return "(" + ", ".join(t.__name__ for t in type_spec) + ")"
    return type_spec.__name__
