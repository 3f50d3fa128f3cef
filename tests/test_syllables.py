"""
Tests for the Syllable Table Loader
===================================
Validation rules for SyllableTable.from_dict() and file loading.
"""

import dataclasses
import json

import pytest
import yaml

from namegen.generators.syllables import (
    SyllableTable,
    TableValidationError,
    load_default_table,
    load_syllable_table,
    reload_tables,
)


class TestFromDict:
    """Tests for SyllableTable.from_dict()."""

    def test_valid_table(self, table):
        assert table.genders == ("male", "female")
        assert table.is_valid()
        assert table.has_gender("male")
        assert table.slot("female", 1) == ("a",)
        assert table.last_name_syllables == ("berg", "mann", "stein")

    def test_lists_become_tuples(self, table):
        assert isinstance(table.last_name_syllables, tuple)
        assert all(isinstance(s, tuple) for s in table.first_name_syllables["male"])
        assert isinstance(table.nobility_for("male"), tuple)

    def test_not_a_mapping(self):
        with pytest.raises(TableValidationError, match="mapping"):
            SyllableTable.from_dict(["berg"])

    @pytest.mark.parametrize("gender", ["male", "female"])
    def test_missing_required_gender(self, sample_data, gender):
        del sample_data["firstNameSyllables"][gender]
        with pytest.raises(TableValidationError, match=gender):
            SyllableTable.from_dict(sample_data)

    def test_missing_first_names(self, sample_data):
        del sample_data["firstNameSyllables"]
        with pytest.raises(TableValidationError):
            SyllableTable.from_dict(sample_data)

    def test_two_slots(self, sample_data):
        sample_data["firstNameSyllables"]["male"] = [["Al"], ["win"]]
        with pytest.raises(TableValidationError, match="exactly 3 slots"):
            SyllableTable.from_dict(sample_data)

    def test_empty_slot(self, sample_data):
        sample_data["firstNameSyllables"]["female"][1] = []
        with pytest.raises(TableValidationError, match="must not be empty"):
            SyllableTable.from_dict(sample_data)

    def test_blank_syllable(self, sample_data):
        sample_data["firstNameSyllables"]["male"][0].append("  ")
        with pytest.raises(TableValidationError, match="empty or non-string"):
            SyllableTable.from_dict(sample_data)

    def test_non_string_syllable(self, sample_data):
        sample_data["lastNameSyllables"].append(42)
        with pytest.raises(TableValidationError):
            SyllableTable.from_dict(sample_data)

    def test_slot_given_as_string(self, sample_data):
        sample_data["firstNameSyllables"]["male"][2] = "hard"
        with pytest.raises(TableValidationError, match="list of strings"):
            SyllableTable.from_dict(sample_data)

    @pytest.mark.parametrize("value", [[], None])
    def test_empty_last_names(self, sample_data, value):
        sample_data["lastNameSyllables"] = value
        with pytest.raises(TableValidationError, match="lastNameSyllables"):
            SyllableTable.from_dict(sample_data)

    def test_nobility_absent(self, sample_data):
        """No nobility section means no prefixes for anyone."""
        del sample_data["nobilityPrefixes"]
        table = SyllableTable.from_dict(sample_data)
        assert table.nobility_prefixes == {}
        assert table.nobility_for("male") == ()

    def test_nobility_not_a_mapping(self, sample_data):
        sample_data["nobilityPrefixes"] = ["von"]
        with pytest.raises(TableValidationError, match="nobilityPrefixes"):
            SyllableTable.from_dict(sample_data)

    def test_to_dict_layout(self, table, sample_data):
        assert table.to_dict() == sample_data


class TestDirectConstruction:
    """Tables built without from_dict() skip validation."""

    def test_invalid_table_can_exist(self):
        table = SyllableTable(
            first_name_syllables={"male": (("A",), (), ("c",))},
            last_name_syllables=(),
        )
        assert not table.is_valid()
        assert not table.has_gender("male")
        assert not table.has_gender("female")

    def test_extra_gender_must_be_usable(self):
        slots = (("A",), ("b",), ("c",))
        table = SyllableTable(
            first_name_syllables={"male": slots, "female": slots, "diverse": ((), (), ())},
            last_name_syllables=("berg",),
        )
        assert table.has_gender("male") and table.has_gender("female")
        assert not table.is_valid()

    def test_inputs_are_copied(self):
        first = {"male": [["A"], ["b"], ["c"]], "female": [["A"], ["b"], ["c"]]}
        table = SyllableTable(first_name_syllables=first, last_name_syllables=["berg"])
        first["male"] = [[], [], []]
        assert table.has_gender("male")
        assert table.slot("male", 0) == ("A",)
        assert table.last_name_syllables == ("berg",)


class TestImmutability:
    """Loaded tables are shared through the cache and cannot be changed."""

    def test_first_names_read_only(self, table):
        with pytest.raises(TypeError):
            table.first_name_syllables["male"] = ((), (), ())

    def test_nobility_read_only(self, table):
        with pytest.raises(TypeError):
            table.nobility_prefixes["female"] = ("zu",)
        with pytest.raises(AttributeError):
            table.nobility_prefixes.clear()

    def test_fields_cannot_be_reassigned(self, table):
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.last_name_syllables = ()

    def test_cached_table_stays_intact(self):
        first = load_default_table()
        with pytest.raises(TypeError):
            first.first_name_syllables["male"] = ((), (), ())
        again = load_default_table()
        assert again is first
        assert again.is_valid()


class TestLoadFile:
    """Tests for load_syllable_table()."""

    @pytest.fixture(autouse=True)
    def fresh_cache(self):
        reload_tables()
        yield
        reload_tables()

    def test_load_json(self, tmp_path, sample_data):
        path = tmp_path / "syllables.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        table = load_syllable_table(path)
        assert table.genders == ("male", "female")

    def test_load_yaml(self, tmp_path, sample_data):
        path = tmp_path / "syllables.yaml"
        path.write_text(yaml.safe_dump(sample_data), encoding="utf-8")
        table = load_syllable_table(str(path))
        assert table.nobility_for("male") == ("von", "zu")

    def test_umlauts_survive(self, tmp_path, sample_data):
        sample_data["lastNameSyllables"] = ["mühl", "brück"]
        path = tmp_path / "umlaut.json"
        path.write_text(json.dumps(sample_data, ensure_ascii=False), encoding="utf-8")
        assert load_syllable_table(path).last_name_syllables == ("mühl", "brück")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_syllable_table(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TableValidationError, match="Cannot parse"):
            load_syllable_table(path)

    def test_invalid_content(self, tmp_path, sample_data):
        sample_data["lastNameSyllables"] = []
        path = tmp_path / "empty_last.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        with pytest.raises(TableValidationError):
            load_syllable_table(path)

    def test_cached(self, tmp_path, sample_data):
        path = tmp_path / "cached.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        assert load_syllable_table(path) is load_syllable_table(path)

    def test_reload_rereads(self, tmp_path, sample_data):
        path = tmp_path / "changing.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        first = load_syllable_table(path)

        sample_data["lastNameSyllables"].append("dorf")
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        reload_tables()
        assert load_syllable_table(path).last_name_syllables != first.last_name_syllables

    def test_single_last_syllable_warns(self, tmp_path, sample_data, caplog):
        sample_data["lastNameSyllables"] = ["berg"]
        path = tmp_path / "single.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")
        with caplog.at_level("WARNING", logger="namegen.generators.syllables"):
            load_syllable_table(path)
        assert "single last name syllable" in caplog.text

    def test_bundled_data(self):
        """The shipped German data file is valid."""
        table = load_default_table()
        assert table.is_valid()
        assert len(table.last_name_syllables) >= 2
        assert "von" in table.nobility_for("male")
