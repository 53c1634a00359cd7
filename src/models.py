"""Data models for the kinship graph."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

MemberId = Union[int, str]


def normalize_id(value: Any) -> Optional[MemberId]:
    """Canonical form of a member identifier.

    Integral numbers and numeric strings become ints, so ``"7"``, ``"7.0"``
    and ``7`` name the same member. Other strings are kept as opaque ids.
    Blank values mean "no reference".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or not value.is_integer():  # NaN or fractional
            raise ValueError(f"Invalid member id: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return text
        # "7.0" from spreadsheet exports names member 7
        return int(number) if number.is_integer() else text
    raise ValueError(f"Invalid member id: {value!r}")


class Member(BaseModel):
    """One person record in the kinship graph.

    Only the identifier fields drive the engine; everything else is
    display payload passed through untouched.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[MemberId] = None
    father_id: Optional[MemberId] = None
    mother_id: Optional[MemberId] = None
    spouse_id: Optional[MemberId] = None
    children_ids: tuple[MemberId, ...] = ()
    generation: Optional[int] = None

    name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    vansh: Optional[str] = None
    date_of_birth: Optional[str] = None
    email: Optional[str] = None
    spouse_name: Optional[str] = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "father_id", "mother_id", "spouse_id", mode="before")
    @classmethod
    def _normalize_reference(cls, value: Any) -> Optional[MemberId]:
        return normalize_id(value)

    @field_validator("children_ids", mode="before")
    @classmethod
    def _normalize_children(cls, value: Any) -> tuple[MemberId, ...]:
        if value is None:
            return ()
        if isinstance(value, (str, int, float)):
            value = [value]
        ids = []
        for raw in value:
            child_id = normalize_id(raw)
            if child_id is not None and child_id not in ids:
                ids.append(child_id)
        return tuple(ids)

    @field_validator("generation", mode="before")
    @classmethod
    def _normalize_generation(cls, value: Any) -> Optional[int]:
        if isinstance(value, str):
            value = value.strip()
            return int(value) if value else None
        return value

    @property
    def full_name(self) -> str:
        """Return full name."""
        if self.name and self.name.strip():
            return " ".join(self.name.split())
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(" ".join(p for p in parts if p).split())

    @property
    def display_name(self) -> str:
        """Full name, or a placeholder built from the id."""
        return self.full_name or f"Member #{self.id}"

    def is_male(self) -> bool:
        return (self.gender or "").strip().lower() in ("m", "male")
