"""String resource lookup.

Error messages may be given directly or looked up by an integer resource
ID. The lookup is delegated to an injected provider: either an object with a
``get_string(resource_id)`` method or a plain callable ``(int) -> str``.

Usage:
    bundle = ResourceBundle({1: "This field may not be empty"})
    validator = NotEmptyValidator.from_resource(bundle, 1)

    bundle = ResourceBundle.from_yaml("strings.yaml")
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Protocol, Union, runtime_checkable

import yaml

from formvalidation.conditions import ensure_not_null
from formvalidation.errors import resource_not_found


@runtime_checkable
class ResourceProvider(Protocol):
    """Resolves integer resource IDs to strings. Raises LookupError for unknown IDs."""

    def get_string(self, resource_id: int) -> str: ...


StringProvider = Union[ResourceProvider, Callable[[int], str]]


class ResourceBundle:
    """Dict-backed ResourceProvider."""

    def __init__(self, strings: Mapping[int, str] | None = None):
        self._strings: dict[int, str] = dict(strings or {})

    @classmethod
    def from_yaml(cls, path: str | Path) -> ResourceBundle:
        """Load a bundle from a YAML mapping of integer IDs to strings."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
        return cls({int(k): str(v) for k, v in data.items()})

    def get_string(self, resource_id: int) -> str:
        try:
            return self._strings[resource_id]
        except KeyError:
            raise LookupError(f"No string resource with ID {resource_id}") from None

    def add(self, resource_id: int, text: str) -> None:
        self._strings[resource_id] = text

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._strings

    def __len__(self) -> int:
        return len(self._strings)


def resolve_string(provider: StringProvider, resource_id: int) -> str:
    """Resolve a string resource, raising InvalidArgument if it cannot be resolved."""
    ensure_not_null(provider, "The resource provider may not be null", argument="provider")
    lookup = provider.get_string if isinstance(provider, ResourceProvider) else provider
    try:
        text = lookup(resource_id)
    except LookupError as e:
        raise resource_not_found(resource_id, cause=e) from e
    if not text:
        raise resource_not_found(resource_id)
    return text
