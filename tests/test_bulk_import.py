from eduelevate.bulk_import import decode_upload, parse_roster, parse_roster_names
from eduelevate.models import Tier


def test_header_row_and_extra_columns():
    text = "Name,Grade,Tier\nAva,K,1\nBen,1,2\n"
    assert parse_roster_names(text) == ["Ava", "Ben"]


def test_header_guard_is_case_sensitive_and_exact():
    assert parse_roster_names("name\nNAME\nName \nNames") == ["name", "NAME", "Names"]


def test_lines_without_commas_are_whole_names():
    assert parse_roster_names("  Ava Lopez  \nBen") == ["Ava Lopez", "Ben"]


def test_blank_and_empty_first_fields_are_dropped():
    assert parse_roster_names("\n   \n,K\n , 2\nCara") == ["Cara"]


def test_windows_line_endings():
    assert parse_roster_names("Name,Grade\r\nAva,K\r\nBen\r\n") == ["Ava", "Ben"]


def test_empty_file_yields_nothing():
    assert parse_roster_names("") == []
    assert parse_roster("") == []


def test_duplicates_are_kept_in_order():
    assert parse_roster_names("Ava\nBen\nAva") == ["Ava", "Ben", "Ava"]


def test_parse_roster_builds_default_skeletons():
    drafts = parse_roster("Name\nAva\nBen,1")
    assert [d.name for d in drafts] == ["Ava", "Ben"]
    assert all(d.tier is Tier.CORE and d.scores == () and d.grade is None for d in drafts)


def test_decode_upload_strips_bom_and_tolerates_bad_bytes():
    assert decode_upload("\ufeffName\nAva".encode("utf-8")) == "Name\nAva"
    assert parse_roster_names(decode_upload(b"Ava\n\xffBen")) == ["Ava", "\ufffdBen"]
