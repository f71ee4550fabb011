from hiera.backend.hierarchy import datasources, iter_datasources
from hiera.config import load_config


def test_default_hierarchy_is_common():
    config = load_config({})
    assert datasources(config, {}) == ["common"]


def test_no_config_at_all_uses_common():
    assert datasources(None, {}) == ["common"]


def test_override_precedes_configured_hierarchy():
    config = load_config({"hierarchy": ["common"]})
    assert datasources(config, {}, override="custom") == ["custom", "common"]


def test_single_string_hierarchy():
    config = load_config({"hierarchy": "%{environment}"})
    assert datasources(config, {"environment": "dev"}) == ["dev"]


def test_explicit_hierarchy_replaces_configured_one():
    config = load_config({"hierarchy": ["%{fqdn}", "common"]})
    assert datasources(config, {}, hierarchy="special") == ["special"]


def test_override_precedes_explicit_hierarchy():
    config = load_config({"hierarchy": ["common"]})
    result = datasources(config, {}, override="first", hierarchy=["a", "b"])
    assert result == ["first", "a", "b"]


def test_sources_interpolating_to_empty_are_skipped(scope):
    config = load_config({"hierarchy": ["%{fqdn}", "%{missing}", "%{environment}", "common"]})
    assert datasources(config, scope) == ["web01.example.com", "production", "common"]


def test_nested_hierarchy_is_flattened_in_order():
    config = load_config({"hierarchy": ["a", ["b", ["c"]], "d"]})
    assert datasources(config, {}) == ["a", "b", "c", "d"]


def test_on_each_called_per_source_in_order(scope):
    config = load_config({"hierarchy": ["%{role}", "common"]})
    seen = []
    datasources(config, scope, on_each=seen.append)
    assert seen == ["web", "common"]


def test_iter_datasources_is_lazy():
    config = load_config({"hierarchy": ["a", "b"]})
    sources = iter_datasources(config, {})
    assert next(sources) == "a"
    assert list(sources) == ["b"]


def test_empty_explicit_hierarchy_replaces_configured_one():
    config = load_config({"hierarchy": ["common"]})
    assert datasources(config, {}, override="first", hierarchy="") == ["first"]
    assert datasources(config, {}, override="first", hierarchy=[]) == ["first"]
    assert datasources(config, {}, hierarchy=[]) == []


def test_empty_override_is_dropped():
    config = load_config({"hierarchy": ["common"]})
    assert datasources(config, {}, override="") == ["common"]
