import pytest

from orderedmap import config
from orderedmap.configparser import (
    BoolParam,
    ConfigParam,
    IntParam,
    OrderedMapConfigParser,
    parse_config_string,
)
from orderedmap.utils import get_default_rng


def test_defaults():
    assert config.seed is None
    assert config.warn__fractional_index is False
    assert set(config.flags()) >= {"seed", "warn__fractional_index"}


def test_parse_config_string():
    assert parse_config_string("") == {}
    assert parse_config_string("seed=3, warn__fractional_index=True") == {
        "seed": "3",
        "warn__fractional_index": "True",
    }
    with pytest.raises(ValueError, match="has no value"):
        parse_config_string("seed")


def test_flags_from_environment_string():
    parser = OrderedMapConfigParser(parse_config_string("seed=3,other=1"))
    parser.add("seed", "doc", IntParam(None, allow_none=True))
    parser.add("flag", "doc", BoolParam(True))
    assert parser.seed == 3
    assert parser.flag is True
    assert parser.unused_flags() == {"other": "1"}


def test_add_errors():
    parser = OrderedMapConfigParser()
    parser.add("a", "doc", ConfigParam(1))
    with pytest.raises(AttributeError, match="already taken"):
        parser.add("a", "doc", ConfigParam(2))
    with pytest.raises(ValueError, match="double underscores"):
        parser.add("a.b", "doc", ConfigParam(2))


def test_param_validation():
    parser = OrderedMapConfigParser()
    parser.add("flag", "doc", BoolParam(False))
    parser.add("count", "doc", IntParam(0))
    parser.add("fixed", "doc", ConfigParam("x", mutable=False))

    parser.flag = "yes"
    assert parser.flag is True
    with pytest.raises(ValueError):
        parser.flag = "maybe"
    parser.count = "12"
    assert parser.count == 12
    with pytest.raises(ValueError):
        parser.count = None
    with pytest.raises(AttributeError, match="Can't change"):
        parser.fixed = "y"
    with pytest.raises(KeyError):
        parser.unknown = 1
    with pytest.raises(AttributeError):
        parser.unknown


def test_change_flags():
    with config.change_flags(seed=5, warn__fractional_index=True):
        assert config.seed == 5
        assert config.warn__fractional_index is True
    assert config.seed is None
    assert config.warn__fractional_index is False


def test_change_flags_restores_on_error():
    with pytest.raises(RuntimeError):
        with config.change_flags(seed=5):
            raise RuntimeError()
    assert config.seed is None


def test_change_flags_unknown():
    with pytest.raises(KeyError):
        with config.change_flags(not_a_flag=1):
            pass


def test_default_rng_follows_seed():
    with config.change_flags(seed=11):
        rng = get_default_rng()
        assert get_default_rng() is rng
    with config.change_flags(seed=12):
        assert get_default_rng() is not rng


def test_str():
    assert "warn__fractional_index (BoolParam)" in str(config)
