"""Title derivation and id strategy tests."""
import re

from leadfolder.ids import select_id_factory, timestamp_id, uuid_id
from leadfolder.titles import UNTITLED, derive_title


class TestDeriveTitle:
    def test_lead_name_prefix(self):
        assert derive_title("Lead Name: Jane Doe\nEmail: x") == "Jane Doe"

    def test_prefix_is_case_insensitive(self):
        assert derive_title("email: a@b.c\nLEAD NAME:   Claire Meyer  ") == "Claire Meyer"

    def test_empty_input(self):
        assert derive_title("") == UNTITLED == "Untitled lead"

    def test_whitespace_only(self):
        assert derive_title("  \n\t\n ") == UNTITLED

    def test_empty_name_falls_back(self):
        assert derive_title("Lead Name:   \nSomething") == "Untitled lead"

    def test_first_line_without_prefix(self):
        assert derive_title("\n  Acme Corp website redesign  \nBudget: 5k") == "Acme Corp website redesign"


class TestIdStrategies:
    def test_uuid_strategy(self):
        value = uuid_id()
        assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}", value)

    def test_timestamp_strategy(self):
        value = timestamp_id()
        assert re.fullmatch(r"\d{13,}-[0-9a-f]+", value)

    def test_selection_by_capability(self):
        assert select_id_factory(secure_random=True) is uuid_id
        assert select_id_factory(secure_random=False) is timestamp_id

    def test_ids_are_unique(self):
        for factory in (uuid_id, timestamp_id):
            assert len({factory() for _ in range(50)}) == 50
