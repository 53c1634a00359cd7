"""Main FamilyGraph facade combining all kinship operations."""

from typing import Iterable, Mapping, Optional

from src.config import KinshipSettings, settings
from src.kinship import generations, inference, tree
from src.kinship.index import MemberIndex
from src.kinship.inference import RelatedMember, Relationship
from src.kinship.records import normalize_records
from src.kinship.tree import TreeNode
from src.models import Member


class FamilyGraph:
    """
    Main interface for kinship operations over one member snapshot.

    Builds the member index once; every query reads it without mutating it,
    so one instance can serve concurrent readers. Create a new FamilyGraph
    when the underlying records change.

    Usage:
        graph = FamilyGraph.from_records(documents)
        graph.infer(2, 3)            # Relationship(kind=SIBLING, ...)
        tree = graph.build_tree()    # rooted at member 1 when present
        levels = graph.group_by_generation()
    """

    def __init__(self, members: Iterable[Member], config: Optional[KinshipSettings] = None):
        self.config = config or settings.kinship
        self.members = list(members)
        self.index = MemberIndex.build(self.members)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping],
        config: Optional[KinshipSettings] = None,
        strict: bool = False,
    ) -> "FamilyGraph":
        """Normalize raw portal documents and index them."""
        return cls(normalize_records(records, strict=strict), config)

    # ─────────────────────────────────────────
    # Member lookups
    # ─────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.index)

    def get_member(self, member_id) -> Optional[Member]:
        return self.index.get(member_id)

    def search(self, term: str) -> list[Member]:
        return self.index.search(term)

    # ─────────────────────────────────────────
    # Relationship inference
    # ─────────────────────────────────────────

    def infer(self, from_id, to_id) -> Optional[Relationship]:
        """What ``to_id`` is to ``from_id``; None if unknown ids or no rule applies."""
        a = self.index.get(from_id)
        b = self.index.get(to_id)
        if a is None or b is None:
            return None
        return inference.infer(a, b, self.index)

    def relations_for(self, member_id) -> list[RelatedMember]:
        member = self.index.get(member_id)
        if member is None:
            return []
        return inference.relations_for(member, self.index)

    def static_relationships(self) -> list[Relationship]:
        return inference.static_relationships(self.index)

    # ─────────────────────────────────────────
    # Trees and layouts
    # ─────────────────────────────────────────

    def select_root(self) -> Optional[Member]:
        return tree.select_root(self.index, self.config.preferred_root_id)

    def build_tree(self, root_id=None, pair_couples: Optional[bool] = None) -> TreeNode:
        """Descendant tree under ``root_id``, or under the selected root if omitted."""
        if pair_couples is None:
            pair_couples = self.config.pair_couples
        if root_id is None:
            return tree.build_family_tree(self.index, self.config, pair_couples)
        return tree.build_tree(root_id, self.index, pair_couples=pair_couples)

    def group_by_generation(self, lineage_only: Optional[bool] = None) -> dict[Optional[int], list[Member]]:
        if lineage_only is None:
            lineage_only = self.config.lineage_only
        return generations.group_by_generation(
            self.members,
            index=self.index,
            lineage_root_ids=self.config.lineage_root_ids,
            lineage_only=lineage_only,
        )
