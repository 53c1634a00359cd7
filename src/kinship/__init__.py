"""Kinship graph engine: relationship inference, family trees, generation layouts."""
from src.kinship.errors import KinshipError, MemberRecordError
from src.kinship.index import MemberIndex
from src.kinship.labels import RelationLabel, RelationshipKind
from src.kinship.inference import RelatedMember, Relationship, infer, relations_for, static_relationships
from src.kinship.tree import TreeNode, build_family_tree, build_tree, select_root
from src.kinship.generations import group_by_generation, ordered_generations
from src.kinship.records import normalize_record, normalize_records
from src.kinship.graph import FamilyGraph

__all__ = [
    "KinshipError",
    "MemberRecordError",
    "MemberIndex",
    "RelationLabel",
    "RelationshipKind",
    "RelatedMember",
    "Relationship",
    "infer",
    "relations_for",
    "static_relationships",
    "TreeNode",
    "build_family_tree",
    "build_tree",
    "select_root",
    "group_by_generation",
    "ordered_generations",
    "normalize_record",
    "normalize_records",
    "FamilyGraph",
]
