# tests/core/config/test_resolved_settings.py
"""
Testes de `ResolvedSettings`: imutabilidade e normalização de chaves.
"""

import copy
import pickle

import pytest

from component_framework.core.config.resolved import ResolvedSettings


class _Key:
    """Chave "simbólica": equivalente a `db` pela sua forma string."""

    def __str__(self):
        return "db"


@pytest.fixture
def settings():
    return ResolvedSettings({"db": {"host": "a", "replicas": ["r1", {"name": "r2"}]}, 1: "one"})


def test_string_and_key_like_lookups_are_equivalent(settings):
    assert settings["db"] is settings[_Key()]
    assert _Key() in settings


def test_keys_are_normalized_to_strings(settings):
    assert set(settings) == {"db", "1"}
    assert settings[1] == "one"


def test_attribute_access(settings):
    assert settings.db.host == "a"
    with pytest.raises(AttributeError):
        settings.missing


def test_nested_values_are_frozen(settings):
    assert isinstance(settings["db"], ResolvedSettings)
    assert settings["db"]["replicas"][0] == "r1"
    assert isinstance(settings["db"]["replicas"], tuple)
    assert isinstance(settings["db"]["replicas"][1], ResolvedSettings)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda s: s.__setitem__("db", 1),
        lambda s: s.__delitem__("db"),
        lambda s: setattr(s, "db", 1),
        lambda s: delattr(s, "db"),
    ],
)
def test_mutation_raises(settings, mutate):
    with pytest.raises(TypeError):
        mutate(settings)
    assert settings["db"]["host"] == "a"


def test_to_dict_returns_plain_copy(settings):
    plain = settings.to_dict()
    assert plain == {"db": {"host": "a", "replicas": ["r1", {"name": "r2"}]}, "1": "one"}
    plain["db"]["host"] = "changed"
    assert settings["db"]["host"] == "a"


def test_equality_with_plain_mapping():
    assert ResolvedSettings({"db": {"host": "a"}}) == {"db": {"host": "a"}}


def test_copy_and_pickle_round_trip(settings):
    assert copy.deepcopy(settings) == settings
    assert pickle.loads(pickle.dumps(settings)) == settings
