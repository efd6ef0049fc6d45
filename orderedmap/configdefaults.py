from orderedmap.configparser import (
    BoolParam,
    IntParam,
    OrderedMapConfigParser,
    _create_default_config,
)


def add_random_configvars(config: OrderedMapConfigParser):
    config.add(
        "seed",
        "Seed of the default random generator used by `OrderedMap.random`. "
        "None draws fresh entropy from the OS.",
        IntParam(None, allow_none=True),
    )


def add_warning_configvars(config: OrderedMapConfigParser):
    config.add(
        "warn__fractional_index",
        "Warn when `OrderedMap.at` truncates an index with a fractional part.",
        BoolParam(False),
    )


config = _create_default_config()
add_random_configvars(config)
add_warning_configvars(config)
