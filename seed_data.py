"""
Sample family data for the kinship engine.

Records are written in the shapes the portal actually stores: the nested
``personalDetails`` schema, older flat imports with spreadsheet keys, and
ids kept as strings. Use it to try the engine without a database:

    from seed_data import load_sample_graph
    graph = load_sample_graph()
"""

from src.kinship.graph import FamilyGraph

SAMPLE_RECORDS = [
    {
        "serNo": 1, "level": 1, "spouseSerNo": 2, "vansh": "1",
        "personalDetails": {"firstName": "Ramkrishna", "lastName": "Gogte", "gender": "Male"},
        "childrenSerNos": [3, 4],
    },
    {
        "serNo": 2, "level": 1, "spouseSerNo": 1, "vansh": "1",
        "personalDetails": {"firstName": "Janaki", "lastName": "Gogte", "gender": "Female"},
    },
    {
        "serNo": 3, "level": 2, "fatherSerNo": 1, "motherSerNo": 2, "spouseSerNo": 5, "vansh": "1",
        "personalDetails": {"firstName": "Vishnu", "middleName": "Ramkrishna", "lastName": "Gogte", "gender": "Male"},
    },
    {
        "serNo": "4", "level": "2", "fatherSerNo": "1", "vansh": "1",
        "First Name": "Madhav", "Middle Name": "Ramkrishna", "Last Name": "Gogte", "Gender": "Male",
    },
    {
        "serNo": 5, "level": 2, "spouseSerNo": 3, "vansh": "1",
        "personalDetails": {"firstName": "Sushila", "lastName": "Gogte", "gender": "Female"},
    },
    {
        "serNo": 6, "level": 3, "fatherSerNo": 3, "vansh": "1",
        "personalDetails": {"firstName": "Anant", "middleName": "Vishnu", "lastName": "Gogte", "gender": "Male"},
    },
    {
        "serNo": 7, "level": 3, "fatherSerNo": 3, "vansh": "1",
        "personalDetails": {"firstName": "Sunanda", "middleName": "Vishnu", "lastName": "Gogte", "gender": "Female"},
    },
    {
        "serNo": 8, "level": 3, "fatherSerNo": 4, "vansh": "1",
        "personalDetails": {"firstName": "Prakash", "middleName": "Madhav", "lastName": "Gogte", "gender": "Male"},
    },
    {
        "serNo": 9, "level": 4, "fatherSerNo": 6, "vansh": "1",
        "personalDetails": {"firstName": "Aditya", "middleName": "Anant", "lastName": "Gogte", "gender": "Male"},
    },
]


def load_sample_graph() -> FamilyGraph:
    """FamilyGraph over the sample records."""
    return FamilyGraph.from_records(SAMPLE_RECORDS)
