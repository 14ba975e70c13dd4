"""Tests for the menu tag registry and its wire format."""

import pytest

from cubeconf.settings.errors import MenuTagFormatError, MenuTagLookupError, SettingsError
from cubeconf.settings.menu_tag import NO_SUBTYPE, MenuTag, parse, resolve, serialize


class TestSerialize:
    def test_plain_tag(self) -> None:
        assert serialize(MenuTag.CONFIG) == "config"

    def test_tag_with_subtype(self) -> None:
        assert serialize(MenuTag.GCPAD_3) == "gcpad|2"

    def test_remote_slots_start_at_four(self) -> None:
        assert serialize(MenuTag.WIIMOTE_1) == "wiimote|4"
        assert serialize(MenuTag.WIIMOTE_4) == "wiimote|7"

    def test_str_matches_serialize(self) -> None:
        for tag in MenuTag:
            assert str(tag) == serialize(tag)


class TestParse:
    @pytest.mark.parametrize("tag", list(MenuTag))
    def test_round_trip(self, tag: MenuTag) -> None:
        assert parse(serialize(tag)) is tag

    def test_empty_is_no_tag(self) -> None:
        assert parse("") is None

    def test_none_is_no_tag(self) -> None:
        assert parse(None) is None

    def test_same_name_different_subtype(self) -> None:
        assert parse("wiimote") is MenuTag.WIIMOTE
        assert parse("wiimote|5") is MenuTag.WIIMOTE_2

    def test_non_integer_subtype(self) -> None:
        with pytest.raises(MenuTagFormatError):
            parse("bogus|notanumber")

    @pytest.mark.parametrize("raw", ["gcpad|1_0", "gcpad| 1", "gcpad|1 ", "gcpad|\u0661", "gcpad|"])
    def test_subtype_must_be_ascii_digits(self, raw: str) -> None:
        with pytest.raises(MenuTagFormatError):
            parse(raw)

    def test_signed_subtype(self) -> None:
        assert parse("gcpad|+1") is MenuTag.GCPAD_2

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("gcpad|x")

    def test_unregistered_subtype(self) -> None:
        with pytest.raises(MenuTagLookupError):
            parse("gcpad|9")

    def test_unknown_name(self) -> None:
        with pytest.raises(MenuTagLookupError):
            parse("nonexistent")

    def test_explicit_minus_one(self) -> None:
        assert parse("graphics|-1") is MenuTag.GRAPHICS


class TestResolve:
    def test_registered_pair(self) -> None:
        assert resolve("gcpad", 0) is MenuTag.GCPAD_1

    def test_default_subtype(self) -> None:
        assert resolve("hacks") is MenuTag.HACKS

    def test_subtype_not_registered_for_name(self) -> None:
        with pytest.raises(LookupError, match="tag not registered for this subtype"):
            resolve("config", 0)

    def test_member_name_is_not_wire_name(self) -> None:
        with pytest.raises(MenuTagLookupError):
            resolve("CONFIG", 0)

    def test_errors_share_base(self) -> None:
        with pytest.raises(SettingsError):
            resolve("config", 3)


class TestMenuTagMembers:
    def test_pairs_are_unique(self) -> None:
        pairs = [(t.tag, t.subtype) for t in MenuTag]
        assert len(pairs) == len(set(pairs))

    def test_has_subtype(self) -> None:
        assert MenuTag.GCPAD_1.has_subtype
        assert not MenuTag.CONTROLLER.has_subtype
        assert MenuTag.CONTROLLER.subtype == NO_SUBTYPE

    def test_gc_pad_lookup(self) -> None:
        assert [MenuTag.gc_pad(p) for p in range(4)] == [
            MenuTag.GCPAD_1, MenuTag.GCPAD_2, MenuTag.GCPAD_3, MenuTag.GCPAD_4,
        ]

    def test_wiimote_lookup(self) -> None:
        assert MenuTag.wiimote(6) is MenuTag.WIIMOTE_3

    def test_wiimote_lookup_rejects_pad_port(self) -> None:
        with pytest.raises(MenuTagLookupError):
            MenuTag.wiimote(0)
