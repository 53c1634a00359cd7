"""Relationship inference between two members.

Rules are checked in a fixed order and the first match wins:

    1. spouse            (either spouse link)
    2. parent/child      (father link, either direction)
    3. parent/child      (explicit children list, either direction)
    4. sibling           (same father)
    5. grandparent/grandchild
    6. uncle-aunt/nephew-niece
    7. cousin            (same paternal grandfather)

Only father links are followed; mother links are carried on the record but
never walked. A missing record at any hop means the rule does not apply.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.kinship.index import MemberIndex
from src.kinship.labels import RelationLabel, RelationshipKind, label_for
from src.models import Member, MemberId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relationship:
    """What ``to_id`` is to ``from_id``."""
    kind: RelationshipKind
    from_id: MemberId
    to_id: MemberId
    path: tuple[MemberId, ...] = ()
    via_father: bool = False

    @property
    def label(self) -> RelationLabel:
        return label_for(self.kind, self.via_father)

    def inverse(self) -> "Relationship":
        """The same relationship read from the other member."""
        return Relationship(
            kind=self.kind.reciprocal,
            from_id=self.to_id,
            to_id=self.from_id,
            path=tuple(reversed(self.path)),
            via_father=self.via_father,
        )

    def to_dict(self) -> dict:
        return {
            "fromSerNo": self.from_id,
            "toSerNo": self.to_id,
            "kind": self.kind.value,
            "relation": self.label.english,
            **self.label.to_dict(),
            "relationshipPath": list(self.path),
        }


@dataclass(frozen=True)
class RelatedMember:
    """A member paired with how they relate to the member being viewed."""
    member: Member
    relationship: Relationship

    def to_dict(self) -> dict:
        return {
            "related": {"serNo": self.member.id, "name": self.member.display_name},
            **self.relationship.label.to_dict(),
            "kind": self.relationship.kind.value,
            "relationshipPath": list(self.relationship.path),
        }


def _rel(kind: RelationshipKind, a: Member, b: Member, *via, via_father: bool = False) -> Relationship:
    return Relationship(kind, a.id, b.id, (a.id, *via, b.id), via_father)


def infer(a: Member, b: Member, index: MemberIndex) -> Optional[Relationship]:
    """
    Infer what ``b`` is to ``a``.

    Args:
        a: The member the label is relative to
        b: The other member
        index: Index over the snapshot both members belong to

    Returns:
        The first matching Relationship, or None when no rule applies
        (including ``a`` and ``b`` being the same member).
    """
    if a.id is None or b.id is None or a.id == b.id:
        return None

    # 1. Spouse, tolerating one-sided links
    if a.spouse_id == b.id or b.spouse_id == a.id:
        return _rel(RelationshipKind.SPOUSE, a, b)

    # 2. Father link
    if a.father_id == b.id:
        return _rel(RelationshipKind.PARENT, a, b, via_father=True)
    if b.father_id == a.id:
        return _rel(RelationshipKind.CHILD, a, b, via_father=True)

    # 3. Explicit children list, independent of father back-references
    if b.id in a.children_ids:
        return _rel(RelationshipKind.CHILD, a, b)
    if a.id in b.children_ids:
        return _rel(RelationshipKind.PARENT, a, b)

    # 4. Sibling
    if a.father_id is not None and a.father_id == b.father_id:
        return _rel(RelationshipKind.SIBLING, a, b, a.father_id, via_father=True)

    a_father = index.father_of(a)
    b_father = index.father_of(b)

    # 5. Grandparent / grandchild
    if a_father is not None and a_father.father_id == b.id:
        return _rel(RelationshipKind.GRANDPARENT, a, b, a_father.id, via_father=True)
    if b_father is not None and b_father.father_id == a.id:
        return _rel(RelationshipKind.GRANDCHILD, a, b, b_father.id, via_father=True)

    # 6. b is a sibling of a's father, or a is a sibling of b's father
    if (a_father is not None and a_father.father_id is not None
            and b.father_id == a_father.father_id):
        return _rel(RelationshipKind.UNCLE_AUNT, a, b, a_father.id, a_father.father_id, via_father=True)
    if (b_father is not None and b_father.father_id is not None
            and a.father_id == b_father.father_id):
        return _rel(RelationshipKind.NEPHEW_NIECE, a, b, a.father_id, b_father.id, via_father=True)

    # 7. Cousin through a shared paternal grandfather
    if (a_father is not None and b_father is not None
            and a_father.father_id is not None
            and a_father.father_id == b_father.father_id):
        return _rel(
            RelationshipKind.COUSIN, a, b,
            a_father.id, a_father.father_id, b_father.id,
            via_father=True,
        )

    return None


def relations_for(member: Member, index: MemberIndex) -> list[RelatedMember]:
    """Every other member with an inferable relation to ``member``, in index order."""
    related = []
    for other in index:
        if other.id == member.id:
            continue
        relationship = infer(member, other, index)
        if relationship is not None:
            related.append(RelatedMember(other, relationship))

    logger.debug("Found %d relation(s) for member %r", len(related), member.id)
    return related


def static_relationships(index: MemberIndex) -> list[Relationship]:
    """
    Raw edges stored on the records themselves.

    One SPOUSE edge per spouse link and one CHILD edge per explicit child and
    per father link, each read from the parent (or the record owning the
    spouse link). Edges are not de-duplicated and targets are not checked.
    """
    edges = []
    for member in index:
        if member.spouse_id is not None:
            edges.append(Relationship(
                RelationshipKind.SPOUSE, member.id, member.spouse_id,
                (member.id, member.spouse_id),
            ))
        for child_id in member.children_ids:
            edges.append(Relationship(
                RelationshipKind.CHILD, member.id, child_id,
                (member.id, child_id),
            ))
        if member.father_id is not None:
            edges.append(Relationship(
                RelationshipKind.CHILD, member.father_id, member.id,
                (member.father_id, member.id), via_father=True,
            ))

    logger.debug("Generated %d static relationship(s)", len(edges))
    return edges
