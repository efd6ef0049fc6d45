import logging
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any


_logger = logging.getLogger("orderedmap.configparser")


class ConfigParam:
    """Base class of all kinds of configuration parameters.

    A ConfigParam has not only default values and configurable mutability, but
    also an optional ``apply`` callable that validates and converts raw values
    (for example strings coming from ``ORDEREDMAP_FLAGS``).
    """

    def __init__(
        self,
        default: Any,
        *,
        apply: Callable[[Any], Any] | None = None,
        mutable: bool = True,
    ):
        self._default = default
        self._apply = apply
        self._mutable = mutable
        self.name: str | None = None
        self.doc: str = ""

    @property
    def default(self):
        return self._default

    @property
    def mutable(self) -> bool:
        return self._mutable

    def apply(self, value):
        if self._apply is None:
            return value
        return self._apply(value)


class BoolParam(ConfigParam):
    _true_values = ("true", "1", "yes", "on")
    _false_values = ("false", "0", "no", "off")

    def __init__(self, default: bool, *, mutable: bool = True):
        super().__init__(default, apply=self._to_bool, mutable=mutable)

    @classmethod
    def _to_bool(cls, value) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if value.lower() in cls._true_values:
                return True
            if value.lower() in cls._false_values:
                return False
        raise ValueError(f"Invalid value ({value}) for a boolean flag")


class IntParam(ConfigParam):
    def __init__(
        self, default: int | None, *, allow_none: bool = False, mutable: bool = True
    ):
        self._allow_none = allow_none
        super().__init__(default, apply=self._to_int, mutable=mutable)

    def _to_int(self, value) -> int | None:
        if value is None or (isinstance(value, str) and value.lower() == "none"):
            if self._allow_none:
                return None
            raise ValueError("None is not a valid value for this flag")
        if isinstance(value, bool):
            raise ValueError(f"Invalid value ({value}) for an integer flag")
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise ValueError(f"Invalid value ({value}) for an integer flag") from err


def parse_config_string(config_string: str) -> dict[str, str]:
    """Parses a comma-separated ``name=value`` string into a dictionary."""
    config_dict = {}
    for kv_pair in config_string.split(","):
        kv_pair = kv_pair.strip()
        if not kv_pair:
            continue
        kv_tuple = kv_pair.split("=", 1)
        if len(kv_tuple) == 1:
            raise ValueError(f"Config key '{kv_tuple[0]}' has no value")
        k, v = kv_tuple
        config_dict[k.strip()] = v.strip()
    return config_dict


class OrderedMapConfigParser:
    """Object that holds configuration settings.

    Flags are registered with `add` and then read as attributes. Section
    names are separated from option names with a double underscore, e.g.
    ``config.warn__fractional_index``.
    """

    def __init__(self, flags_dict: dict[str, str] | None = None):
        self._flags_dict = dict(flags_dict or {})
        self._params: dict[str, ConfigParam] = {}
        self._values: dict[str, Any] = {}

    def add(self, name: str, doc: str, configparam: ConfigParam) -> None:
        if "." in name:
            raise ValueError(
                f"Dot-based sections were removed. Use double underscores! ({name})"
            )
        if name in self._params:
            raise AttributeError(f"The name {name} is already taken")
        configparam.name = name
        configparam.doc = doc
        self._params[name] = configparam

        if name in self._flags_dict:
            value = configparam.apply(self._flags_dict.pop(name))
            _logger.debug("Flag %s set to %r from ORDEREDMAP_FLAGS", name, value)
        else:
            value = configparam.apply(configparam.default)
        self._values[name] = value

    def __getattr__(self, name: str):
        # Only reached for names that are not regular attributes
        values = self.__dict__.get("_values", {})
        if name in values:
            return values[name]
        raise AttributeError(f"{type(self).__name__} has no flag {name}")

    def __setattr__(self, name: str, value) -> None:
        if name.startswith("_"):
            super().__setattr__(name, value)
            return
        if name not in self._params:
            raise KeyError(f"Unknown config flag {name}")
        param = self._params[name]
        if not param.mutable:
            raise AttributeError(f"Can't change the value of {name} config parameter.")
        self._values[name] = param.apply(value)

    def unused_flags(self) -> dict[str, str]:
        """Flags from the environment that no registered parameter consumed."""
        return dict(self._flags_dict)

    def flags(self) -> Iterator[str]:
        yield from self._params

    def __str__(self):
        lines = []
        for name, param in self._params.items():
            lines.append(f"{name} ({type(param).__name__})")
            lines.append(f"    Doc:  {param.doc}")
            lines.append(f"    Value:  {self._values[name]!r}")
            lines.append("")
        return "\n".join(lines)

    @contextmanager
    def change_flags(self, **kwargs):
        """Temporarily change the value of one or more flags.

        The previous values are restored on exit, also when the body raises.

        Examples
        --------
        >>> from orderedmap import config
        >>> with config.change_flags(warn__fractional_index=True):
        ...     config.warn__fractional_index
        True

        """
        for name in kwargs:
            if name not in self._params:
                raise KeyError(f"Unknown config flag {name}")
        old_values = {name: self._values[name] for name in kwargs}
        try:
            for name, value in kwargs.items():
                setattr(self, name, value)
                _logger.debug("Flag %s changed to %r", name, self._values[name])
            yield
        finally:
            for name, value in old_values.items():
                self._values[name] = value


def _create_default_config() -> OrderedMapConfigParser:
    return OrderedMapConfigParser(
        parse_config_string(os.getenv("ORDEREDMAP_FLAGS", ""))
    )
