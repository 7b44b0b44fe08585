"""
Member descriptors and object introspection.

This module lists the state members of an instance and works out which
class in its hierarchy declares each one. Python keeps attribute values on
the instance rather than on the class, so "declared by a class" is derived
from slots, annotations and private-name mangling.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..exceptions import MemberResolutionError
from .names import DEFAULT_RECOGNIZER, MemberOrigin, NameRecognizer, mangled_owner

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class MemberDescriptor:
    """
    One piece of state on an instance.

    Attributes:
        raw_name: Name the value is stored under (e.g. "_Account__balance")
        semantic_name: Name as written in source (e.g. "balance")
        origin: Whether the raw name was synthesized, and how
        owner: Class in the hierarchy that declares the member
    """
    raw_name: str
    semantic_name: str
    origin: MemberOrigin
    owner: type
    slot: bool = field(default=False, compare=False)

    @property
    def label(self) -> str:
        """Label used in comparison paths."""
        return self.semantic_name

    def get_value(self, instance: Any) -> Any:
        """Read this member's current value from an instance."""
        if not self.slot:
            state = getattr(instance, "__dict__", None)
            if state is not None and self.raw_name in state:
                return state[self.raw_name]
        value = getattr(instance, self.raw_name, _MISSING)
        if value is _MISSING:
            raise MemberResolutionError(
                f"{type(instance).__name__} no longer has member '{self.raw_name}'"
            )
        return value


class TypeDescriptor(Protocol):
    """Capability the comparator needs to enumerate and read state."""

    def members(self, instance: Any) -> list[MemberDescriptor]: ...

    def declared_members(self, instance: Any, cls: type) -> list[MemberDescriptor]: ...


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _slot_storage_name(cls: type, slot: str) -> str:
    """Name a slot is stored under, applying private-name mangling."""
    if slot.startswith("__") and not slot.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{slot}"
    return slot


def _declared_slots(cls: type) -> list[str]:
    slots = vars(cls).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [_slot_storage_name(cls, s) for s in slots]


class ObjectIntrospector:
    """
    Default type descriptor for plain Python objects.

    Members are the entries of the instance ``__dict__`` plus every slot
    holding a value. Dunder names are interpreter machinery and are skipped.
    Each member is attributed to an owning class:

    - a slot belongs to the class whose ``__slots__`` declares it
    - a mangled private name belongs to the class it was mangled with
    - an annotated attribute belongs to the most basal class annotating it
    - anything else belongs to the instance's runtime type
    """

    def __init__(self, recognizer: NameRecognizer | None = None):
        self.recognizer = recognizer or DEFAULT_RECOGNIZER

    def members(self, instance: Any) -> list[MemberDescriptor]:
        """
        List every member of an instance once.

        Members owned by the runtime type come first, then those of each
        ancestor in MRO order; within a class, storage order is kept.
        """
        mro = type(instance).__mro__
        found: dict[str, MemberDescriptor] = {}

        for cls in mro:
            for raw_name in _declared_slots(cls):
                if _is_dunder(raw_name) or raw_name in found:
                    continue
                if getattr(instance, raw_name, _MISSING) is _MISSING:
                    continue  # unset slot
                found[raw_name] = self._describe(raw_name, cls, slot=True)

        state = getattr(instance, "__dict__", None)
        if isinstance(state, dict):
            for raw_name in state:
                if not isinstance(raw_name, str) or _is_dunder(raw_name) or raw_name in found:
                    continue
                found[raw_name] = self._describe(raw_name, self._owner_of(raw_name, mro))

        rank = {cls: index for index, cls in enumerate(mro)}
        return sorted(found.values(), key=lambda member: rank[member.owner])

    def declared_members(self, instance: Any, cls: type) -> list[MemberDescriptor]:
        """List the members of an instance that ``cls`` itself declares."""
        return [member for member in self.members(instance) if member.owner is cls]

    def has_state(self, instance: Any) -> bool:
        """
        Whether the instance carries any introspectable state storage.

        Classes, functions and modules have a ``__dict__`` but are compared
        by identity, never walked.
        """
        if inspect.isclass(instance) or inspect.isroutine(instance) or inspect.ismodule(instance):
            return False
        if hasattr(instance, "__dict__"):
            return True
        return any(_declared_slots(cls) for cls in type(instance).__mro__)

    def _describe(self, raw_name: str, owner: type, slot: bool = False) -> MemberDescriptor:
        semantic_name, origin = self.recognizer.normalize(raw_name)
        return MemberDescriptor(
            raw_name=raw_name,
            semantic_name=semantic_name,
            origin=origin,
            owner=owner,
            slot=slot,
        )

    def _owner_of(self, raw_name: str, mro: tuple[type, ...]) -> type:
        owner_name = mangled_owner(raw_name)
        if owner_name is not None:
            for cls in mro:
                if cls.__name__.lstrip("_") == owner_name:
                    return cls
            logger.debug(f"No class named {owner_name!r} in hierarchy for {raw_name!r}")

        for cls in reversed(mro):
            if cls is object:
                continue
            if raw_name in _own_annotations(cls):
                return cls

        return mro[0]


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls)
    except (TypeError, NameError):
        return {}
