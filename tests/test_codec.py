"""Tests for the word:hash line codec."""

import pytest

import rainbow_tables
import utils
from conftest import AUDI_SHA256, BMW_SHA256
from exceptions import MalformedRecordError
from rainbow_tables import WordHash

MERCEDES_SHA256 = "917ebb3396b2ff2e27b75e3fe421b1edc07b998f74350472f3abc5c6620a68db"


class TestSerialize:
    """Tests for encoding pairs into table lines."""

    def test_generate_hash_str(self) -> None:
        word_hash = WordHash("zombie", "49460b7bbbd3aad3f2cba09864f5e8b01a220ea8c077e9fa996de367e7984af0")
        assert rainbow_tables.generate_hash_str(word_hash) == (
            "zombie:49460b7bbbd3aad3f2cba09864f5e8b01a220ea8c077e9fa996de367e7984af0"
        )

    def test_hash_word_vec_keeps_order(self) -> None:
        expected = [
            WordHash("origami45", "fa4f4a682bfb7477ca513001ed73d1fd999572174f718ea502d8b86584e44fd8"),
            WordHash("nintendo64", "be2876a1aa8dcfbafc3e5f145b3a572575393a016863ce59e45692d28467e4dd"),
            WordHash("KBF8GgQCbWBazt", "10f8b6f0f46b4d5dda8ceece3d77cffc8951ba202d35aa72aff5ef839fad8c4a"),
        ]
        assert rainbow_tables.hash_word_vec(["origami45", "nintendo64", "KBF8GgQCbWBazt"]) == expected

    def test_serialize_hashes(self) -> None:
        assert rainbow_tables.serialize_hashes(["online123", "earth616", "multiverse"]) == [
            "online123:a611e58490e1cf681f0dd17f6c76bf98537da365464f3327a6d08fb91777cd0d",
            "earth616:e2a7be9cd1f4d39f54f93facefdf99334366396f84dfd7061cb32dccba3c40c2",
            "multiverse:556a71b43bb411e3b11b3d7a4c2c11fd7d402643757d371638a4c9c2dfa1b753",
        ]

    def test_round_trip(self) -> None:
        """Decoding an encoded pair gives the same pair back."""
        for word in ["potato", "ünïcødé", "with space", "tab\tword", "#hash"]:
            pair = WordHash(word, utils.hash_password(word))
            assert rainbow_tables.deserialize_single_hash(rainbow_tables.generate_hash_str(pair)) == pair


class TestDeserialize:
    """Tests for decoding table lines."""

    def test_single_line(self) -> None:
        line = "command:5d347fd948b66308f502c3f65c8f7e12ff1c5cf8c760bcdfb188ae1ec7b8b618"
        assert rainbow_tables.deserialize_single_hash(line) == WordHash(
            "command", "5d347fd948b66308f502c3f65c8f7e12ff1c5cf8c760bcdfb188ae1ec7b8b618"
        )

    @pytest.mark.parametrize(
        "line",
        ["abc", "", f"audi{AUDI_SHA256}", "a:b:c", ":deadbeef", "audi:", ":", "a::b"],
    )
    def test_malformed_lines(self, line: str) -> None:
        with pytest.raises(MalformedRecordError) as exc_info:
            rainbow_tables.deserialize_single_hash(line)
        assert exc_info.value.line == line

    def test_whole_table(self) -> None:
        lines = [f"audi:{AUDI_SHA256}", f"mercedes:{MERCEDES_SHA256}", f"bmw:{BMW_SHA256}"]
        assert rainbow_tables.deserialize_hashes(lines) == [
            WordHash("audi", AUDI_SHA256),
            WordHash("mercedes", MERCEDES_SHA256),
            WordHash("bmw", BMW_SHA256),
        ]

    @pytest.mark.parametrize(
        "lines, bad_line_number",
        [
            ([f"audi{AUDI_SHA256}", f"mercedes:{MERCEDES_SHA256}", f"bmw:{BMW_SHA256}"], 1),
            ([f"audi:{AUDI_SHA256}", "adwadwad", f"bmw:{BMW_SHA256}"], 2),
            ([f"audi:{AUDI_SHA256}", f"mercedes:{MERCEDES_SHA256}", ""], 3),
        ],
    )
    def test_one_bad_line_rejects_table(self, lines, bad_line_number: int) -> None:
        """Decoding is all or nothing and names the first bad line."""
        with pytest.raises(MalformedRecordError) as exc_info:
            rainbow_tables.deserialize_hashes(lines)
        assert exc_info.value.line_number == bad_line_number
        assert exc_info.value.line == lines[bad_line_number - 1]

    def test_empty_table(self) -> None:
        assert rainbow_tables.deserialize_hashes([]) == []
