"""Test normalization of raw portal documents."""

import logging

import pytest
from src.models import Member, normalize_id
from src.kinship.errors import KinshipError, MemberRecordError
from src.kinship.records import normalize_record, normalize_records


class TestNormalizeRecord:
    """Tests for single-record normalization."""

    def test_nested_schema(self):
        """Current schema reads names from personalDetails."""
        member = normalize_record({
            "serNo": 3,
            "fatherSerNo": 1,
            "spouseSerNo": 5,
            "level": 2,
            "personalDetails": {"firstName": "Vishnu", "lastName": "Gogte", "gender": "Male"},
        })
        assert member.id == 3
        assert member.father_id == 1
        assert member.spouse_id == 5
        assert member.generation == 2
        assert member.full_name == "Vishnu Gogte"
        assert member.is_male()

    def test_flat_schema_with_string_ids(self):
        """Older imports use spreadsheet keys and string ids."""
        member = normalize_record({
            "SerNo": "12", "fatherSerNo": "4", "level": "3",
            "First Name": "Madhav", "Last Name": "Gogte", "Gender": "Male",
        })
        assert member.id == 12
        assert member.father_id == 4
        assert member.generation == 3
        assert member.first_name == "Madhav"

    def test_id_inside_personal_details(self):
        """serNo may live under personalDetails."""
        assert normalize_record({"personalDetails": {"serNo": "7"}}).id == 7

    def test_children_lists_merged(self):
        """Both child lists are combined without repeats."""
        member = normalize_record({
            "serNo": 1,
            "childrenSerNos": [2, "3"],
            "sonDaughterSerNo": [3, 4],
        })
        assert member.children_ids == (2, 3, 4)

    def test_scalar_child(self):
        """A single child id is accepted as a list of one."""
        assert normalize_record({"serNo": 1, "sonDaughterSerNo": 5}).children_ids == (5,)

    def test_blank_reference_falls_through(self):
        """Blank values are skipped in favour of the next field."""
        assert normalize_record({"serNo": 1, "fatherSerNo": ""}).father_id is None
        assert normalize_record({"serNo": 1, "fatherSerNo": " ", "fatherId": 4}).father_id == 4

    def test_unconsumed_fields_kept(self):
        """Unknown keys and the document id are carried in extra."""
        member = normalize_record({"_id": "abc123", "serNo": 1, "notes": "eldest"})
        assert member.extra["document_id"] == "abc123"
        assert member.extra["notes"] == "eldest"
        assert "serNo" not in member.extra

    def test_member_passthrough(self):
        """Already-normalized members are returned as is."""
        member = Member(id=1)
        assert normalize_record(member) is member

    def test_integral_float_id(self):
        """Whole floats from spreadsheets become ints."""
        assert normalize_record({"serNo": 3.0}).id == 3

    def test_spouse_name_from_married_details(self):
        """The spouse name written on the record is kept."""
        member = normalize_record({
            "serNo": 1,
            "marriedDetails": {"spouseFirstName": "Janaki", "spouseLastName": " Gogte "},
        })
        assert member.spouse_name == "Janaki Gogte"
        assert normalize_record({"serNo": 1}).spouse_name is None

    def test_float_string_reference(self):
        """Spreadsheet ids such as "1.0" link to member 1."""
        member = normalize_record({"serNo": "7.0", "fatherSerNo": "1.0"})
        assert member.id == 7
        assert member.father_id == 1


class TestInvalidRecords:
    """Tests for records that cannot be normalized."""

    def test_not_a_mapping(self):
        """Non-mapping input is rejected with the record attached."""
        with pytest.raises(MemberRecordError) as exc_info:
            normalize_record(["serNo", 1])
        assert exc_info.value.record == ["serNo", 1]

    @pytest.mark.parametrize("raw", [
        {"serNo": {"nested": 1}},
        {"serNo": 1.5},
        {"serNo": 1, "level": "first"},
    ])
    def test_bad_values(self, raw):
        """Unusable ids or generations raise MemberRecordError."""
        with pytest.raises(MemberRecordError):
            normalize_record(raw)

    def test_error_hierarchy(self):
        """Record errors are kinship errors."""
        assert issubclass(MemberRecordError, KinshipError)


class TestNormalizeRecords:
    """Tests for batch normalization."""

    def test_skips_bad_records(self, caplog):
        """Bad records are logged and skipped by default."""
        with caplog.at_level(logging.WARNING):
            members = normalize_records([{"serNo": 1}, {"serNo": {"x": 1}}, {"serNo": 2}])
        assert [m.id for m in members] == [1, 2]
        assert "position 1" in caplog.text

    def test_strict_raises(self):
        """Strict mode raises on the first bad record."""
        with pytest.raises(MemberRecordError):
            normalize_records([{"serNo": 1}, "not a record"], strict=True)

    def test_order_preserved(self):
        """Output order matches input order."""
        members = normalize_records([{"serNo": 9}, {"serNo": "2"}, {"serNo": 5}])
        assert [m.id for m in members] == [9, 2, 5]


class TestNormalizeId:
    """Tests for identifier canonicalization."""

    @pytest.mark.parametrize("raw,expected", [
        (7, 7),
        (7.0, 7),
        ("7", 7),
        (" 7 ", 7),
        ("7.0", 7),
        ("7.5", "7.5"),
        ("A-12", "A-12"),
        ("", None),
        (None, None),
    ])
    def test_canonical_form(self, raw, expected):
        """Integral values collapse to ints, other text stays opaque."""
        assert normalize_id(raw) == expected
