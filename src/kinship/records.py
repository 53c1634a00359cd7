"""Normalize raw portal documents into canonical Member records.

Member documents arrive from the portal in several shapes: the current
nested schema (``personalDetails``, ``marriedDetails``), older flat imports
with spreadsheet-style keys ("First Name", "Gender"), and ids stored as
either numbers or strings. All of that is resolved here, once, so the
engine only ever sees ``Member``.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from src.kinship.errors import MemberRecordError
from src.models import Member

logger = logging.getLogger(__name__)

ID_FIELDS = ("serNo", "personalDetails.serNo", "SerNo", "id")
FATHER_FIELDS = ("fatherSerNo", "fatherId")
MOTHER_FIELDS = ("motherSerNo", "motherId")
SPOUSE_FIELDS = ("spouseSerNo", "spouseId")
CHILDREN_FIELDS = ("childrenSerNos", "sonDaughterSerNo", "childrenIds")
GENERATION_FIELDS = ("level", "generation")

FIRST_NAME_FIELDS = ("personalDetails.firstName", "firstName", "First Name")
MIDDLE_NAME_FIELDS = ("personalDetails.middleName", "middleName", "Middle Name")
LAST_NAME_FIELDS = ("personalDetails.lastName", "lastName", "Last Name")
GENDER_FIELDS = ("personalDetails.gender", "gender", "Gender")
DOB_FIELDS = ("personalDetails.dateOfBirth", "dateOfBirth", "Date of Birth")
EMAIL_FIELDS = ("personalDetails.email", "email", "Email")
VANSH_FIELDS = ("vansh", "personalDetails.vansh")
SPOUSE_FIRST_NAME_FIELDS = ("marriedDetails.spouseFirstName", "spouseFirstName")
SPOUSE_LAST_NAME_FIELDS = ("marriedDetails.spouseLastName", "spouseLastName")

_CONSUMED_FIELDS = {
    path
    for group in (
        ID_FIELDS, FATHER_FIELDS, MOTHER_FIELDS, SPOUSE_FIELDS, CHILDREN_FIELDS,
        GENERATION_FIELDS, FIRST_NAME_FIELDS, MIDDLE_NAME_FIELDS, LAST_NAME_FIELDS,
        GENDER_FIELDS, DOB_FIELDS, EMAIL_FIELDS, VANSH_FIELDS, ("name",),
        SPOUSE_FIRST_NAME_FIELDS, SPOUSE_LAST_NAME_FIELDS,
    )
    for path in group
    if "." not in path
}


def _lookup(raw: Mapping, path: str) -> Any:
    value: Any = raw
    for key in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _first(raw: Mapping, paths: Iterable[str]) -> Any:
    """First present (non-None, non-blank) value among dotted paths."""
    for path in paths:
        value = _lookup(raw, path)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        return value
    return None


def _text(raw: Mapping, paths: Iterable[str]) -> Optional[str]:
    value = _first(raw, paths)
    return str(value).strip() if value is not None else None


def _children(raw: Mapping) -> list:
    # Both child lists are concatenated; Member drops the repeats
    merged: list = []
    for path in CHILDREN_FIELDS:
        value = _lookup(raw, path)
        if value is None:
            continue
        if not isinstance(value, (list, tuple)):
            value = [value]
        merged.extend(value)
    return merged


def _spouse_name(raw: Mapping) -> Optional[str]:
    """Spouse name as written on the member's own marriage details."""
    parts = (_text(raw, SPOUSE_FIRST_NAME_FIELDS), _text(raw, SPOUSE_LAST_NAME_FIELDS))
    return " ".join(" ".join(p for p in parts if p).split()) or None


def normalize_record(raw: Mapping) -> Member:
    """Convert one raw portal document into a Member.

    Raises:
        MemberRecordError: if the record is not a mapping or a field holds a
            value that cannot be an identifier or generation.
    """
    if isinstance(raw, Member):
        return raw
    if not isinstance(raw, Mapping):
        raise MemberRecordError(f"Expected a mapping, got {type(raw).__name__}", raw)

    extra = {k: v for k, v in raw.items() if k not in _CONSUMED_FIELDS and k != "_id"}
    if "_id" in raw:
        extra["document_id"] = str(raw["_id"])

    try:
        return Member(
            id=_first(raw, ID_FIELDS),
            father_id=_first(raw, FATHER_FIELDS),
            mother_id=_first(raw, MOTHER_FIELDS),
            spouse_id=_first(raw, SPOUSE_FIELDS),
            children_ids=_children(raw),
            generation=_first(raw, GENERATION_FIELDS),
            name=_text(raw, ("name",)),
            first_name=_text(raw, FIRST_NAME_FIELDS),
            middle_name=_text(raw, MIDDLE_NAME_FIELDS),
            last_name=_text(raw, LAST_NAME_FIELDS),
            gender=_text(raw, GENDER_FIELDS),
            vansh=_text(raw, VANSH_FIELDS),
            date_of_birth=_text(raw, DOB_FIELDS),
            email=_text(raw, EMAIL_FIELDS),
            spouse_name=_spouse_name(raw),
            extra=extra,
        )
    except (ValidationError, ValueError) as e:
        raise MemberRecordError(f"Invalid member record: {e}", raw) from e


def normalize_records(raws: Iterable[Mapping], strict: bool = False) -> list[Member]:
    """Normalize a batch of raw documents, preserving order.

    With ``strict=False`` records that fail normalization are logged and
    skipped; with ``strict=True`` the first failure is raised.
    """
    members = []
    for position, raw in enumerate(raws):
        try:
            members.append(normalize_record(raw))
        except MemberRecordError as e:
            if strict:
                raise
            logger.warning("Skipping record at position %d: %s", position, e)
    return members
