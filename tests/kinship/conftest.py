"""Pytest fixtures for kinship tests."""

import pytest
from src.models import Member
from src.kinship.index import MemberIndex


@pytest.fixture
def scenario_members():
    """Father 1 with sons 2 and 3; 4 married to 2 (one-sided link)."""
    return [
        Member(id=1),
        Member(id=2, father_id=1),
        Member(id=3, father_id=1),
        Member(id=4, spouse_id=2),
    ]


@pytest.fixture
def scenario_index(scenario_members):
    return MemberIndex.build(scenario_members)


@pytest.fixture
def family_members():
    """
    Four generations on the paternal line:

        1 + 2
        ├── 3 + 5
        │   ├── 6
        │   │   └── 9
        │   └── 7
        └── 4
            └── 8
    """
    return [
        Member(id=1, generation=1, spouse_id=2, gender="Male", first_name="Ramkrishna"),
        Member(id=2, generation=1, spouse_id=1, gender="Female", first_name="Janaki"),
        Member(id=3, generation=2, father_id=1, spouse_id=5, gender="Male", first_name="Vishnu"),
        Member(id=4, generation=2, father_id=1, gender="Male", first_name="Madhav"),
        Member(id=5, generation=2, spouse_id=3, gender="Female", first_name="Sushila"),
        Member(id=6, generation=3, father_id=3, gender="Male", first_name="Anant"),
        Member(id=7, generation=3, father_id=3, gender="Female", first_name="Sunanda"),
        Member(id=8, generation=3, father_id=4, gender="Male", first_name="Prakash"),
        Member(id=9, generation=4, father_id=6, gender="Male", first_name="Aditya"),
    ]


@pytest.fixture
def family_index(family_members):
    return MemberIndex.build(family_members)
