"""Immutable lookup structures over a member snapshot."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from src.models import Member, MemberId, normalize_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberIndex:
    """
    Lookup tables for one snapshot of members.

    Built once per snapshot and never mutated, so a single index can be
    shared by concurrent readers. Rebuild it when the member list changes.

    Usage:
        index = MemberIndex.build(members)
        father = index.father_of(index.get(7))
        sons = index.children_of(3)
    """

    members: tuple[Member, ...]
    by_id: Mapping[MemberId, Member]
    children_by_father: Mapping[MemberId, tuple[Member, ...]]
    spouse_backrefs: Mapping[MemberId, Member]

    @classmethod
    def build(cls, members: Iterable[Member]) -> "MemberIndex":
        """Index members by id and by father id.

        Records without an id are skipped. A duplicated id keeps the last
        record, placed where the id was first seen; superseded records are
        dropped from every map.
        """
        by_id: dict[MemberId, Member] = {}
        skipped = 0

        for member in members:
            if member.id is None:
                skipped += 1
                continue
            if member.id in by_id:
                logger.debug("Duplicate member id %r, keeping the later record", member.id)
            by_id[member.id] = member

        if skipped:
            logger.debug("Skipped %d member(s) without an id", skipped)

        # dicts keep first insertion order when a value is replaced
        kept = list(by_id.values())
        children: dict[MemberId, list[Member]] = {}
        backrefs: dict[MemberId, Member] = {}
        for member in kept:
            if member.father_id is not None:
                children.setdefault(member.father_id, []).append(member)
            if member.spouse_id is not None:
                backrefs.setdefault(member.spouse_id, member)

        return cls(
            members=tuple(kept),
            by_id=MappingProxyType(by_id),
            children_by_father=MappingProxyType({k: tuple(v) for k, v in children.items()}),
            spouse_backrefs=MappingProxyType(backrefs),
        )

    def __len__(self) -> int:
        return len(self.by_id)

    def __contains__(self, member_id) -> bool:
        return self._key(member_id) in self.by_id

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members)

    @staticmethod
    def _key(member_id) -> Optional[MemberId]:
        try:
            return normalize_id(member_id)
        except ValueError:
            return None

    def get(self, member_id) -> Optional[Member]:
        """Member by id (int or numeric string), or None."""
        key = self._key(member_id)
        return self.by_id.get(key) if key is not None else None

    def father_of(self, member: Optional[Member]) -> Optional[Member]:
        if member is None or member.father_id is None:
            return None
        return self.by_id.get(member.father_id)

    def spouse_of(self, member: Optional[Member]) -> Optional[Member]:
        """Spouse record, following a one-sided link from the other partner.

        A dangling spouse id means no spouse.
        """
        if member is None or member.id is None:
            return None
        if member.spouse_id is not None:
            spouse = self.by_id.get(member.spouse_id)
        else:
            spouse = self.spouse_backrefs.get(member.id)
        if spouse is None or spouse.id == member.id:
            return None
        return spouse

    def children_of(self, member_id) -> tuple[Member, ...]:
        """Members whose father id is ``member_id``, in input order."""
        key = self._key(member_id)
        return self.children_by_father.get(key, ()) if key is not None else ()

    def search(self, term: str) -> list[Member]:
        """Case-insensitive match on full name, id or vansh."""
        needle = (term or "").strip().lower()
        if not needle:
            return list(self.members)
        return [
            m for m in self.members
            if needle in m.full_name.lower()
            or needle in str(m.id).lower()
            or needle in (m.vansh or "").lower()
        ]
