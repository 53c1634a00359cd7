"""Relationship kinds and their display label pairs."""

from dataclasses import dataclass
from enum import Enum


class RelationshipKind(str, Enum):
    """Kinds of inferable kinship, read as "b is a's <kind>"."""
    SPOUSE = "spouse"
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    GRANDPARENT = "grandparent"
    GRANDCHILD = "grandchild"
    UNCLE_AUNT = "uncle_aunt"
    NEPHEW_NIECE = "nephew_niece"
    COUSIN = "cousin"

    @property
    def reciprocal(self) -> "RelationshipKind":
        return _RECIPROCALS.get(self, self)


_RECIPROCALS = {
    RelationshipKind.PARENT: RelationshipKind.CHILD,
    RelationshipKind.CHILD: RelationshipKind.PARENT,
    RelationshipKind.GRANDPARENT: RelationshipKind.GRANDCHILD,
    RelationshipKind.GRANDCHILD: RelationshipKind.GRANDPARENT,
    RelationshipKind.UNCLE_AUNT: RelationshipKind.NEPHEW_NIECE,
    RelationshipKind.NEPHEW_NIECE: RelationshipKind.UNCLE_AUNT,
}


@dataclass(frozen=True)
class RelationLabel:
    """Opaque English/Marathi label pair for one relationship kind."""
    english: str
    marathi: str

    def to_dict(self) -> dict:
        return {"relationEnglish": self.english, "relationMarathi": self.marathi}


LABELS: dict[RelationshipKind, RelationLabel] = {
    RelationshipKind.SPOUSE: RelationLabel("Spouse", "पती/पत्नी"),
    RelationshipKind.PARENT: RelationLabel("Father/Mother", "वडील/आई"),
    RelationshipKind.CHILD: RelationLabel("Son/Daughter", "मुलगा/मुलगी"),
    RelationshipKind.SIBLING: RelationLabel("Sibling", "भाऊ/बहीण"),
    RelationshipKind.GRANDPARENT: RelationLabel("Grandfather", "आजोबा"),
    RelationshipKind.GRANDCHILD: RelationLabel("Grandson/Granddaughter", "नातू/नात"),
    RelationshipKind.UNCLE_AUNT: RelationLabel("Uncle/Aunt", "काका/मावशी"),
    RelationshipKind.NEPHEW_NIECE: RelationLabel("Nephew/Niece", "पुतण्या/पुतणी"),
    RelationshipKind.COUSIN: RelationLabel("Cousin", "चुलत भाऊ/बहीण"),
}

# A father link names the parent exactly
FATHER_LABEL = RelationLabel("Father", "वडील")


def label_for(kind: RelationshipKind, via_father: bool = False) -> RelationLabel:
    """Label for a kind; ``via_father`` selects the paternal wording for PARENT."""
    if via_father and kind is RelationshipKind.PARENT:
        return FATHER_LABEL
    return LABELS[kind]
