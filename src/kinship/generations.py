"""Generation buckets for layered family-tree layouts."""

import logging
from typing import Iterable, Optional

from src.config import settings
from src.kinship.index import MemberIndex
from src.models import Member

logger = logging.getLogger(__name__)

UNKNOWN_GENERATION = None


def is_on_paternal_line(member: Member, index: MemberIndex, lineage_root_ids: Iterable) -> bool:
    """True if the member's father is known, or the member is a lineage root."""
    return index.father_of(member) is not None or member.id in set(lineage_root_ids)


def lineage_members(members: list[Member], index: MemberIndex, lineage_root_ids: Iterable) -> list[Member]:
    """
    Members belonging to the paternal lineage, in input order.

    Keeps lineage roots, members whose father is in the index, and spouses of
    members that have a father id or are roots themselves.
    """
    roots = set(lineage_root_ids)
    married_in = {
        m.spouse_id for m in index
        if m.spouse_id is not None and (m.father_id is not None or m.id in roots)
    }
    return [
        m for m in members
        if m.id in roots or index.father_of(m) is not None or m.id in married_in
    ]


def _reconcile(member: Member, spouse: Member, index: MemberIndex, roots: set) -> Optional[int]:
    member_line = is_on_paternal_line(member, index, roots)
    spouse_line = is_on_paternal_line(spouse, index, roots)

    if member_line and not spouse_line:
        return member.generation
    if spouse_line and not member_line:
        return spouse.generation
    return member.generation if member.generation is not None else spouse.generation


def group_by_generation(
    members: Iterable[Member],
    index: Optional[MemberIndex] = None,
    lineage_root_ids: Optional[Iterable] = None,
    lineage_only: Optional[bool] = None,
) -> dict[Optional[int], list[Member]]:
    """
    Partition members into generation buckets.

    A couple lands in one bucket: the partner on the paternal line decides,
    otherwise the first defined generation wins. Siblings already at the
    resolved generation are pulled in right after the member, each with their
    own spouse, so families stay adjacent inside a bucket. An unknown
    generation pulls in no siblings. Duplicated ids are grouped once, using
    the indexed record.

    Args:
        members: Member snapshot, in display order
        index: Index over the full snapshot, built from ``members`` if omitted
        lineage_root_ids: Ids treated as the top of the paternal line
        lineage_only: Drop members outside the paternal lineage first

    Returns:
        Mapping of generation (None for unknown) to members, buckets in
        first-seen order
    """
    members = [m for m in members if m.id is not None]
    if index is None:
        index = MemberIndex.build(members)

    # One record per id: the indexed (last-seen) one, at its first position
    resolved: dict = {}
    for m in members:
        if m.id not in resolved:
            resolved[m.id] = index.get(m.id) or m
    members = list(resolved.values())

    roots = set(settings.kinship.lineage_root_ids if lineage_root_ids is None else lineage_root_ids)
    if lineage_only is None:
        lineage_only = settings.kinship.lineage_only

    if lineage_only:
        members = lineage_members(members, index, roots)

    pool = {m.id: m for m in members}

    def spouse_in_pool(m: Member) -> Optional[Member]:
        spouse = index.spouse_of(m)
        return pool.get(spouse.id) if spouse is not None else None

    buckets: dict[Optional[int], list[Member]] = {}
    processed: set = set()

    for member in members:
        if member.id in processed:
            continue

        level = member.generation
        group = [member]
        in_group = {member.id}

        spouse = spouse_in_pool(member)
        if spouse is not None and spouse.id not in processed and spouse.id not in in_group:
            group.append(spouse)
            in_group.add(spouse.id)
            level = _reconcile(member, spouse, index, roots)

        if member.father_id is not None and level is not None:
            for sibling in members:
                if (sibling.id in processed or sibling.id in in_group
                        or sibling.father_id != member.father_id
                        or sibling.generation != level):
                    continue
                group.append(sibling)
                in_group.add(sibling.id)

                sibling_spouse = spouse_in_pool(sibling)
                if (sibling_spouse is not None and sibling_spouse.id not in processed
                        and sibling_spouse.id not in in_group):
                    group.append(sibling_spouse)
                    in_group.add(sibling_spouse.id)

        buckets.setdefault(level, []).extend(group)
        processed.update(in_group)

    logger.debug("Grouped %d member(s) into %d generation(s)", len(processed), len(buckets))
    return buckets


def ordered_generations(groups: dict) -> list:
    """Bucket keys for top-down layout: known generations ascending, unknown last."""
    known = sorted(k for k in groups if k is not UNKNOWN_GENERATION)
    if UNKNOWN_GENERATION in groups:
        known.append(UNKNOWN_GENERATION)
    return known
