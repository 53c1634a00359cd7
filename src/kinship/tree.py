"""Descendant tree construction."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from src.config import KinshipSettings, settings
from src.kinship.index import MemberIndex
from src.models import Member, MemberId

logger = logging.getLogger(__name__)


def couple_key(member: Member, spouse: Optional[Member] = None) -> str:
    """Stable key for a member and their spouse, ``"<low>-<high>"``.

    Numeric ids are ordered numerically. Members without a spouse are keyed
    by their own id.
    """
    spouse_id = spouse.id if spouse is not None else member.spouse_id
    if spouse_id is None:
        return str(member.id)
    if isinstance(member.id, int) and isinstance(spouse_id, int):
        low, high = sorted((member.id, spouse_id))
        return f"{low}-{high}"
    return f"{member.id}-{spouse_id}"


@dataclass
class TreeNode:
    """One member (or couple) in a descendant tree.

    A node without a member is the "no data" leaf returned when no root
    can be found.
    """
    member: Optional[Member]
    children: list["TreeNode"] = field(default_factory=list)
    spouse: Optional[Member] = None
    name: str = ""

    def __post_init__(self):
        if not self.name and self.member is not None:
            self.name = self.member.display_name

    @property
    def id(self) -> Optional[MemberId]:
        return self.member.id if self.member is not None else None

    @property
    def key(self) -> str:
        if self.member is None:
            return "0"
        return couple_key(self.member, self.spouse) if self.spouse else str(self.member.id)

    @property
    def is_empty(self) -> bool:
        return self.member is None

    def ids(self) -> Iterator[MemberId]:
        """Every member id in this subtree, spouses included, in preorder."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.member is not None:
                yield node.member.id
            if node.spouse is not None:
                yield node.spouse.id
            stack.extend(reversed(node.children))

    def to_dict(self) -> dict:
        """Nested dict with ``name``, ``attributes`` and ``children``."""
        member = self.member
        if member is None:
            return {
                "name": self.name,
                "attributes": {"serNo": 0, "gender": "Unknown", "spouse": "", "vansh": ""},
                "children": [],
            }

        attributes = {
            "serNo": member.id,
            "gender": member.gender or "Unknown",
            "spouse": self.spouse.display_name if self.spouse else (member.spouse_name or ""),
            "vansh": member.vansh or "",
            "dob": member.date_of_birth or "",
            "email": member.email or "",
        }
        if self.spouse is not None:
            attributes["spouseSerNo"] = self.spouse.id

        return {
            "id": self.key,
            "name": self.name,
            "attributes": attributes,
            "children": [child.to_dict() for child in self.children],
        }


def no_data_node(name: Optional[str] = None) -> TreeNode:
    return TreeNode(member=None, name=name or settings.kinship.no_data_name)


def _child_candidates(partners: list[Member], index: MemberIndex) -> list[Member]:
    """Father-link children then explicit children, per partner, de-duplicated."""
    seen: set = set()
    candidates = []
    for partner in partners:
        explicit = (index.get(cid) for cid in partner.children_ids)
        for child in (*index.children_of(partner.id), *explicit):
            if child is None or child.id in seen:
                continue
            seen.add(child.id)
            candidates.append(child)
    return candidates


def _open_node(member: Member, index: MemberIndex, visited: set, pair_couples: bool) -> tuple[TreeNode, list[Member]]:
    visited.add(member.id)
    partners = [member]
    node = TreeNode(member=member)

    if pair_couples:
        spouse = index.spouse_of(member)
        if spouse is not None and spouse.id not in visited:
            visited.add(spouse.id)
            partners.append(spouse)
            # The husband leads the couple when genders say so
            if spouse.is_male() and not member.is_male():
                node = TreeNode(member=spouse, spouse=member)
            else:
                node = TreeNode(member=member, spouse=spouse)

    return node, _child_candidates(partners, index)


def build_tree(root_id, index: MemberIndex, pair_couples: bool = False) -> TreeNode:
    """
    Build the descendant tree under ``root_id``.

    Depth-first, with one visited set shared by the whole traversal: a member
    reachable along two paths stays under the parent that reached it first,
    and cyclic father links are cut where they loop back. An explicit stack
    replaces recursion so long lineages cannot exhaust the interpreter stack.

    Args:
        root_id: Id of the tree root (int or numeric string)
        index: Member index for the snapshot
        pair_couples: Attach each member's spouse to their node and merge
            the spouse's children into the couple's

    Returns:
        Root TreeNode, or the no-data leaf if ``root_id`` is unknown
    """
    root = index.get(root_id)
    if root is None:
        logger.debug("Root %r not in index", root_id)
        return no_data_node()

    visited: set = set()
    root_node, candidates = _open_node(root, index, visited, pair_couples)
    stack = [(root_node, iter(candidates))]

    while stack:
        node, pending = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            continue
        if child.id in visited:
            continue
        child_node, child_candidates = _open_node(child, index, visited, pair_couples)
        node.children.append(child_node)
        stack.append((child_node, iter(child_candidates)))

    logger.debug("Tree under %r covers %d member(s)", root.id, len(visited))
    return root_node


def select_root(index: MemberIndex, preferred_root_id=None) -> Optional[Member]:
    """Preferred root id if present, else the first member without a father."""
    if preferred_root_id is None:
        preferred_root_id = settings.kinship.preferred_root_id

    root = index.get(preferred_root_id)
    if root is not None:
        logger.info("Using member %r as root: %s", root.id, root.display_name)
        return root

    for member in index:
        if member.father_id is None:
            logger.info("Using natural root (no father) %r: %s", member.id, member.display_name)
            return member

    logger.info("No root member found among %d member(s)", len(index))
    return None


def build_family_tree(
    index: MemberIndex,
    config: Optional[KinshipSettings] = None,
    pair_couples: Optional[bool] = None,
) -> TreeNode:
    """Select a root and build its tree; the no-data leaf when nothing qualifies."""
    config = config or settings.kinship
    if pair_couples is None:
        pair_couples = config.pair_couples

    root = select_root(index, config.preferred_root_id)
    if root is None:
        return no_data_node(config.no_data_name)
    return build_tree(root.id, index, pair_couples=pair_couples)
