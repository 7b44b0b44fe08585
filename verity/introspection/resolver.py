"""
Member resolution across a class hierarchy.

Given an instance, a class in its hierarchy and a member name, find the
member that class declares under that name, falling back to a match on
semantic names and then to the class's ancestors.
"""

from __future__ import annotations

import logging
from typing import Any

from .members import MemberDescriptor, ObjectIntrospector, TypeDescriptor
from .names import DEFAULT_RECOGNIZER, NameRecognizer

logger = logging.getLogger(__name__)


class MemberResolver:
    """
    Locates a member by raw or semantic name.

    Lookup order at each level of the hierarchy:
        1. exact raw name among the members the class declares
        2. same semantic name after normalizing both sides
    then the next class in the MRO, until ``object`` is reached.

    Example:
        resolver = MemberResolver()
        member = resolver.resolve(account, type(account), "_Account__balance")
        member.get_value(account)
    """

    def __init__(
        self,
        introspector: TypeDescriptor | None = None,
        recognizer: NameRecognizer | None = None,
    ):
        self.recognizer = recognizer or DEFAULT_RECOGNIZER
        self.introspector = introspector or ObjectIntrospector(self.recognizer)

    def resolve(self, instance: Any, cls: type, name: str) -> MemberDescriptor | None:
        """
        Resolve ``name`` on ``cls`` or one of its ancestors.

        Args:
            instance: Object whose state is searched
            cls: Class to start from (normally ``type(instance)``)
            name: Raw or semantic member name

        Returns:
            The matching MemberDescriptor, or None if no level declares it
        """
        mro = type(instance).__mro__
        if cls not in mro:
            raise ValueError(f"{cls.__name__} is not in the hierarchy of {type(instance).__name__}")
        return self._resolve_at(instance, mro, mro.index(cls), name)

    def _resolve_at(
        self, instance: Any, mro: tuple[type, ...], level: int, name: str
    ) -> MemberDescriptor | None:
        if level >= len(mro) or mro[level] is object:
            return None

        cls = mro[level]
        declared = self.introspector.declared_members(instance, cls)

        for member in declared:
            if member.raw_name == name:
                return member

        semantic_name, _ = self.recognizer.normalize(name)
        for member in declared:
            candidate, _ = self.recognizer.normalize(member.raw_name)
            if candidate == semantic_name:
                logger.debug(
                    f"Resolved {name!r} to {member.raw_name!r} on {cls.__name__} by semantic name"
                )
                return member

        return self._resolve_at(instance, mro, level + 1, name)


def resolve(instance: Any, cls: type, name: str) -> MemberDescriptor | None:
    """Resolve a member with the default recognizer."""
    return MemberResolver().resolve(instance, cls, name)
