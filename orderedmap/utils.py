import logging
from functools import partial

import numpy as np

from orderedmap.configdefaults import config
from orderedmap.exceptions import NotCallableError


_logger = logging.getLogger("orderedmap.utils")


class _NotGiven:
    """Marker for an omitted ``this_arg``; ``None`` is a valid context."""

    __slots__ = ()

    def __repr__(self):
        return "NOT_GIVEN"


NOT_GIVEN = _NotGiven()


def as_predicate(fn, this_arg=NOT_GIVEN):
    """Validate `fn` and bind it to `this_arg` when one is supplied.

    The bound predicate receives `this_arg` as its first positional argument,
    so a plain function behaves as if it were a method of `this_arg`.

    Raises
    ------
    NotCallableError
        If `fn` is not callable.

    """
    if not callable(fn):
        raise NotCallableError(f"{fn!r} is not a function")
    if this_arg is NOT_GIVEN:
        return fn
    return partial(fn, this_arg)


_default_rng: np.random.Generator | None = None
_default_rng_seed: int | None = None


def get_default_rng() -> np.random.Generator:
    """Return the process-wide generator, reseeding it when ``config.seed`` changes."""
    global _default_rng, _default_rng_seed
    if _default_rng is None or _default_rng_seed != config.seed:
        _logger.debug("Seeding default random generator with %r", config.seed)
        _default_rng = np.random.default_rng(config.seed)
        _default_rng_seed = config.seed
    return _default_rng


def as_rng(rng=None) -> np.random.Generator:
    if rng is None:
        return get_default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, int | np.integer | np.random.SeedSequence):
        return np.random.default_rng(rng)
    raise TypeError(
        f"rng must be a numpy Generator, a seed or None, got {type(rng).__name__}"
    )
