"""Tests for backend dispatch, instance caching and datadir resolution."""
import pytest

from hiera.backend import Backend, BaseBackend, ResolutionType
from hiera.backend import dispatcher as dispatcher_module
from hiera.config import DEFAULT_DATADIR, load_config


class StubBackend:
    """Answers from a fixed dict and records every call."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.calls = []

    def lookup(self, key, scope, order_override, resolution_type):
        self.calls.append((key, scope, order_override, resolution_type))
        return self.answers.get(key)


def make_dispatcher(registry, cache, backends, **settings):
    config = load_config({"backends": backends, **settings})
    return Backend(config, registry=registry, cache=cache)


def test_first_success_wins(registry, cache):
    a, b = StubBackend({"ntp": "a.pool"}), StubBackend({"ntp": "b.pool"})
    registry.add("a", lambda: a)
    registry.add("b", lambda: b)

    answer = make_dispatcher(registry, cache, ["a", "b"]).lookup("ntp", None, {})

    assert answer == "a.pool"
    assert len(a.calls) == 1
    assert b.calls == []


def test_falls_through_to_later_backend(registry, cache):
    a, b = StubBackend(), StubBackend({"ntp": "b.pool"})
    registry.add("a", lambda: a)
    registry.add("b", lambda: b)

    assert make_dispatcher(registry, cache, ["a", "b"]).lookup("ntp", None, {}) == "b.pool"
    assert len(a.calls) == 1


@pytest.mark.parametrize("empty", [None, "", [], {}])
def test_empty_answers_do_not_stop_the_search(registry, cache, empty):
    a, b = StubBackend({"k": empty}), StubBackend({"k": "found"})
    registry.add("a", lambda: a)
    registry.add("b", lambda: b)

    assert make_dispatcher(registry, cache, ["a", "b"]).lookup("k", None, {}) == "found"


@pytest.mark.parametrize("falsy", [False, 0])
def test_falsy_values_are_answers(registry, cache, falsy):
    a, b = StubBackend({"k": falsy}), StubBackend({"k": "other"})
    registry.add("a", lambda: a)
    registry.add("b", lambda: b)

    assert make_dispatcher(registry, cache, ["a", "b"]).lookup("k", None, {}) is falsy
    assert b.calls == []


def test_instance_is_constructed_once(registry, cache):
    constructed = []

    def factory():
        constructed.append(1)
        return StubBackend({"k": "v"})

    registry.add("stub", factory)
    dispatcher = make_dispatcher(registry, cache, ["stub"])

    dispatcher.lookup("k", None, {})
    dispatcher.lookup("k", None, {})

    assert len(constructed) == 1


def test_instances_shared_between_dispatchers_on_one_cache(registry, cache):
    constructed = []
    registry.add("stub", lambda: constructed.append(1) or StubBackend())

    make_dispatcher(registry, cache, ["stub"]).lookup("k", None, {})
    make_dispatcher(registry, cache, ["stub"]).lookup("k", None, {})

    assert len(constructed) == 1


def test_unknown_backend_is_skipped(registry, cache):
    stub = StubBackend({"k": "v"})
    registry.add("stub", lambda: stub)

    assert make_dispatcher(registry, cache, ["ldap", "stub"]).lookup("k", None, {}) == "v"
    assert "ldap" not in cache


def test_default_is_interpolated_when_nothing_answers(registry, cache):
    registry.add("stub", StubBackend)
    dispatcher = make_dispatcher(registry, cache, ["stub"])

    answer = dispatcher.lookup("k", "%{environment}-default", {"environment": "dev"})

    assert answer == "dev-default"


def test_none_default_returns_none(registry, cache):
    registry.add("stub", StubBackend)
    assert make_dispatcher(registry, cache, ["stub"]).lookup("k", None, {}) is None


def test_no_backends_configured_returns_default(registry, cache):
    assert make_dispatcher(registry, cache, ["missing"]).lookup("k", "fallback", {}) == "fallback"


def test_arguments_passed_through_unchanged(registry, cache):
    stub = StubBackend()
    registry.add("stub", lambda: stub)
    scope = {"role": "web"}

    make_dispatcher(registry, cache, ["stub"]).lookup("k", None, scope, "override", "custom-type")

    assert stub.calls == [("k", scope, "override", "custom-type")]


def test_backend_exceptions_propagate(registry, cache):
    class Exploding:
        def lookup(self, *args):
            raise RuntimeError("connection refused")

    later = StubBackend({"k": "v"})
    registry.add("boom", Exploding)
    registry.add("later", lambda: later)

    with pytest.raises(RuntimeError, match="connection refused"):
        make_dispatcher(registry, cache, ["boom", "later"]).lookup("k", None, {})
    assert later.calls == []


def test_base_backend_subclass_receives_dispatcher(registry, cache):
    class Aware(BaseBackend):
        def lookup(self, key, scope, order_override, resolution_type):
            return self.backend.datasources(scope, order_override)

    registry.add("aware", Aware)
    dispatcher = make_dispatcher(registry, cache, ["aware"], hierarchy=["%{role}", "common"])

    assert dispatcher.lookup("k", None, {"role": "db"}, "node") == ["node", "db", "common"]


def test_datadir_default(registry, cache):
    dispatcher = make_dispatcher(registry, cache, ["yaml"])
    assert dispatcher.datadir("yaml", {}) == DEFAULT_DATADIR


def test_datadir_configured_and_interpolated(registry, cache):
    dispatcher = make_dispatcher(
        registry, cache, ["yaml"], yaml={"datadir": "/srv/%{environment}/hieradata"}
    )
    assert dispatcher.datadir("yaml", {"environment": "prod"}) == "/srv/prod/hieradata"
    assert dispatcher.datadir("json", {"environment": "prod"}) == DEFAULT_DATADIR


def test_resolution_type_is_string_compatible():
    assert ResolutionType.ARRAY == "array"
    assert ResolutionType("hash") is ResolutionType.HASH


def test_module_level_functions_use_configured_dispatcher(registry, cache, monkeypatch):
    monkeypatch.setattr(dispatcher_module, "_default", None)
    stub = StubBackend({"k": "v"})
    registry.add("stub", lambda: stub)
    dispatcher_module.configure(
        load_config({"backends": ["stub"], "hierarchy": "%{role}"}),
        registry=registry,
        cache=cache,
    )

    assert dispatcher_module.lookup("k", None, {}) == "v"
    assert dispatcher_module.datasources({"role": "web"}) == ["web"]
    assert dispatcher_module.datadir("stub", {}) == DEFAULT_DATADIR


def test_datadir_configured_empty_string_is_kept(registry, cache):
    dispatcher = make_dispatcher(registry, cache, ["yaml"], yaml={"datadir": ""})
    assert dispatcher.datadir("yaml", {}) == ""


def test_reconfigure_rebinds_cached_backends(tmp_path, write_yaml, registry, monkeypatch):
    from hiera.backend import YamlBackend

    write_yaml(tmp_path / "one" / "common.yaml", {"k": "one"})
    write_yaml(tmp_path / "two" / "common.yaml", {"k": "two"})
    registry.add("yaml", YamlBackend)
    monkeypatch.setattr(dispatcher_module, "_default", None)

    def config_for(datadir):
        return load_config({"backends": ["yaml"], "yaml": {"datadir": str(datadir)}})

    dispatcher_module.configure(config_for(tmp_path / "one"), registry=registry)
    assert dispatcher_module.lookup("k", None, {}) == "one"

    dispatcher_module.configure(config_for(tmp_path / "two"), registry=registry)
    assert dispatcher_module.lookup("k", None, {}) == "two"
    assert len(dispatcher_module._dispatcher().cache) == 1
