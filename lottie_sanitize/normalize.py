"""Null keyframe tangent repair for parsed Lottie documents.

Some minifiers rewrite the spatial tangents ``to`` / ``ti`` of position
keyframes from ``[0, 0, 0]`` to ``null``. The Lottie players on iOS and
Android crash on those values, while the format itself allows the fields
to be left out. :func:`normalize` walks an already parsed JSON tree and
either drops or refills such fields, returning a new tree.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Protocol, Tuple

DEFAULT_TARGET_KEYS = frozenset({"to", "ti"})

JSONValue = Any


class _Omit:
    def __repr__(self) -> str:
        return "OMIT"


# Returned by a policy to leave the key out of the output object.
OMIT = _Omit()


class NullPolicy(Protocol):
    name: str

    def resolve(self, key: str) -> Any:
        ...


@dataclass(frozen=True)
class DropNull:
    """Remove the offending key; players treat a missing tangent as zero."""

    name: str = "drop"

    def resolve(self, key: str) -> Any:
        return OMIT


@dataclass(frozen=True)
class FillNull:
    """Replace the null with a fresh copy of ``fill``."""

    fill: Tuple[Any, ...] = (0, 0, 0)
    name: str = "zero"

    def resolve(self, key: str) -> Any:
        return list(self.fill)


DROP = DropNull()
ZERO = FillNull()

POLICIES = {DROP.name: DROP, ZERO.name: ZERO}


def get_policy(name: str) -> NullPolicy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown null policy '{name}'. Available: {sorted(POLICIES)}") from None


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def _branch(item: JSONValue, stack: List[Tuple[Any, Any]]) -> JSONValue:
    if not _is_container(item):
        return item
    child: Any = {} if isinstance(item, dict) else []
    stack.append((item, child))
    return child


def normalize(
    value: JSONValue,
    target_keys: Iterable[str] = DEFAULT_TARGET_KEYS,
    policy: NullPolicy = DROP,
) -> JSONValue:
    """Return a copy of ``value`` with null ``target_keys`` resolved by ``policy``.

    Lists keep their length and order (null elements included) and objects
    keep their key order. Only object keys listed in ``target_keys`` whose
    value is exactly ``None`` are touched. The input is never modified and
    the result shares no containers with it.

    The tree is walked with an explicit work list so nesting depth is only
    bounded by memory.
    """

    keys = frozenset(target_keys)
    if not _is_container(value):
        return value
    stack: List[Tuple[Any, Any]] = []
    root = _branch(value, stack)
    while stack:
        source, dest = stack.pop()
        if isinstance(source, dict):
            for key, item in source.items():
                if item is None and key in keys:
                    replacement = policy.resolve(key)
                    if replacement is not OMIT:
                        dest[key] = replacement
                    continue
                dest[key] = _branch(item, stack)
        else:
            for item in source:
                dest.append(_branch(item, stack))
    return root


def count_null_targets(value: JSONValue, target_keys: Iterable[str] = DEFAULT_TARGET_KEYS) -> int:
    """Count object keys in ``target_keys`` that currently hold ``None``."""

    keys = frozenset(target_keys)
    count = 0
    stack = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            for key, item in node.items():
                if item is None and key in keys:
                    count += 1
                elif _is_container(item):
                    stack.append(item)
        elif isinstance(node, (list, tuple)):
            stack.extend(item for item in node if _is_container(item))
    return count
