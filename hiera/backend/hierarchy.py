"""
hiera.backend.hierarchy
=======================

Builds the ordered list of data sources a backend searches.

Given an explicit hierarchy only that is used, else the configured
``hierarchy``, failing that the single ``common`` source. An override is
put in front of whichever list was chosen. Every source name is then
interpolated against the scope and names that come out empty are dropped.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

from hiera.backend.interpolation import parse_string
from hiera.config.defaults import DEFAULT_HIERARCHY


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def _source_list(config: Any, override: Any, hierarchy: Any) -> List[Any]:
    if hierarchy is not None:
        sources: List[Any] = [hierarchy]
    elif config is not None and config.include("hierarchy"):
        sources = [config["hierarchy"]]
    else:
        sources = list(DEFAULT_HIERARCHY)

    if override is not None:
        sources.insert(0, override)

    return list(_flatten(sources))


def iter_datasources(
    config: Any,
    scope: Any,
    override: Any = None,
    hierarchy: Any = None,
) -> Iterator[str]:
    """Yield interpolated, non-empty source names, highest precedence first."""
    for source in _source_list(config, override, hierarchy):
        name = parse_string(source, scope)
        if name is None or name == "":
            continue
        yield name if isinstance(name, str) else str(name)


def datasources(
    config: Any,
    scope: Any,
    override: Any = None,
    hierarchy: Any = None,
    on_each: Optional[Callable[[str], Any]] = None,
) -> List[str]:
    """
    Return the data sources to search, calling *on_each* for every name.

    Parameters
    ----------
    config : HieraConfig | None
        Store consulted for ``hierarchy`` when no explicit one is given.
    scope : Mapping
        Variables used to interpolate the source names.
    override : str | list | None
        Source(s) searched before everything else.
    hierarchy : str | list | None
        Replaces the configured hierarchy for this call.
    on_each : callable, optional
        Invoked with each resolved name, in order.
    """
    names: List[str] = []
    for name in iter_datasources(config, scope, override, hierarchy):
        if on_each is not None:
            on_each(name)
        names.append(name)
    return names
