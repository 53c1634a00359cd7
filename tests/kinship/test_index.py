"""Test member index construction and lookups."""

import pytest
from src.models import Member
from src.kinship.index import MemberIndex


class TestIndexBuild:
    """Tests for building the index."""

    def test_members_without_id_skipped(self):
        """Records without an id are left out of both maps."""
        index = MemberIndex.build([Member(father_id=1), Member(id=1)])
        assert len(index) == 1
        assert 1 not in index.children_by_father

    def test_duplicate_id_last_wins(self):
        """The later record for a duplicated id is kept."""
        index = MemberIndex.build([Member(id=1, first_name="Old"), Member(id=1, first_name="New")])
        assert index.get(1).first_name == "New"

    def test_children_in_input_order(self, family_index):
        """Children keep the order of the source list."""
        assert [c.id for c in family_index.children_of(3)] == [6, 7]
        assert [c.id for c in family_index.children_of(1)] == [3, 4]

    def test_empty_index(self):
        """An empty snapshot yields empty lookups."""
        index = MemberIndex.build([])
        assert len(index) == 0
        assert index.get(1) is None
        assert index.children_of(1) == ()

    def test_index_is_read_only(self, family_index):
        """Derived maps cannot be mutated."""
        with pytest.raises(TypeError):
            family_index.by_id[99] = Member(id=99)


class TestIndexLookups:
    """Tests for lookups on a built index."""

    def test_string_and_int_ids_match(self, family_index):
        """Numeric strings resolve to the same member."""
        assert family_index.get("3") is family_index.get(3)
        assert "3" in family_index

    def test_father_of(self, family_index):
        """Father resolves through the index."""
        assert family_index.father_of(family_index.get(6)).id == 3
        assert family_index.father_of(family_index.get(1)) is None

    def test_dangling_spouse_is_no_spouse(self):
        """A spouse id that points nowhere degrades to None."""
        index = MemberIndex.build([Member(id=1, spouse_id=42)])
        assert index.spouse_of(index.get(1)) is None

    def test_one_sided_spouse_link(self, scenario_index):
        """A spouse link recorded only on the partner is still found."""
        assert scenario_index.spouse_of(scenario_index.get(2)).id == 4
        assert scenario_index.spouse_of(scenario_index.get(4)).id == 2

    def test_self_spouse_ignored(self):
        """A member married to themselves has no spouse."""
        index = MemberIndex.build([Member(id=1, spouse_id=1)])
        assert index.spouse_of(index.get(1)) is None

    def test_search(self, family_index):
        """Search matches names case-insensitively and ids."""
        assert [m.id for m in family_index.search("anant")] == [6]
        assert [m.id for m in family_index.search("9")] == [9]
        assert len(family_index.search("")) == 9


class TestDuplicateIds:
    """Tests for snapshots that repeat an id."""

    @pytest.fixture
    def moved_child(self):
        """Member 2 re-recorded under a different father."""
        return MemberIndex.build([
            Member(id=1),
            Member(id=5),
            Member(id=2, father_id=1, first_name="Old"),
            Member(id=2, father_id=5, first_name="New"),
        ])

    def test_one_record_per_id(self, moved_child):
        """Iteration and length agree and only the later record is kept."""
        assert len(moved_child) == len(list(moved_child)) == 3
        assert [m.id for m in moved_child] == [1, 5, 2]
        assert moved_child.get(2).first_name == "New"

    def test_superseded_record_not_a_child(self, moved_child):
        """The replaced record no longer hangs under its old father."""
        assert moved_child.children_of(1) == ()
        assert [c.first_name for c in moved_child.children_of(5)] == ["New"]

    def test_superseded_spouse_link_dropped(self):
        """A one-sided spouse link from a replaced record is not followed."""
        index = MemberIndex.build([
            Member(id=1),
            Member(id=2, spouse_id=1),
            Member(id=2),
        ])
        assert index.spouse_of(index.get(1)) is None
