"""Tests for MRZ record parsing (ID card TD1 and passport TD3)."""

from dataclasses import fields, replace

import pytest

from mrz_text import (
    DocumentKind,
    IDCardMRZ,
    PassportMRZ,
    normalize_mrz_date,
    pad_line,
    parse_id_card,
    parse_mrz,
    parse_passport,
    read_mrz,
    record_key_value_pairs,
    record_to_dict,
)
from mrz_text.parser import split_td1_names, split_td3_names

from mrz_samples import ICAO_TD3_LINES, PASSPORT_LINE1, PASSPORT_LINE2


def _string_fields(record):
    return [
        getattr(record, f.name)
        for f in fields(record)
        if f.name not in ("is_valid", "raw_lines")
    ]


class TestDateNormalization:
    """Tests for normalize_mrz_date."""

    @pytest.mark.parametrize("raw, expected", [
        ("000101", "01/01/2000"),
        ("991231", "31/12/1999"),
        ("300101", "01/01/2030"),
        ("310101", "01/01/1931"),
        ("951209", "09/12/1995"),
        ("330329", "29/03/1933"),
    ])
    def test_six_digit_dates(self, raw, expected):
        assert normalize_mrz_date(raw) == expected

    @pytest.mark.parametrize("raw", ["", "95120", "9512091", "95I209", "<<<<<<", "٩٥١٢٠٩"])
    def test_non_dates_pass_through(self, raw):
        assert normalize_mrz_date(raw) == raw


class TestPadLine:

    def test_pads_with_filler(self):
        assert pad_line("ABC", 6) == "ABC<<<"

    def test_truncates_long_lines(self):
        assert pad_line("ABCDEFGH", 6) == "ABCDEF"


class TestNameSplitting:
    """Tests for TD1/TD3 name splitting."""

    def test_td1_surname_and_given_names(self):
        assert split_td1_names("DOE<<JOHN<PAUL<<<<<<<<<<<<<<<<") == ("DOE", "JOHN PAUL")

    def test_td1_extra_components_join_into_given_names(self):
        assert split_td1_names("DOE<<JOHN<<PAUL") == ("DOE", "JOHN PAUL")

    def test_td1_surname_only(self):
        assert split_td1_names("DOE<<<<<<<<") == ("DOE", "")

    def test_td1_all_fillers(self):
        assert split_td1_names("<" * 30) == ("", "")

    def test_td3_without_separator_is_all_surname(self):
        assert split_td3_names("IVANOV<IVAN") == ("IVANOVIVAN", "")

    def test_td3_splits_on_first_separator(self):
        assert split_td3_names("O<BRIEN<<MARY<ANN<<<<") == ("OBRIEN", "MARY ANN")


class TestIDCardParsing:
    """Tests for parse_id_card."""

    def test_full_record(self, id_card_lines):
        record = parse_id_card(id_card_lines)
        assert record.document_type == "IU"
        assert record.country_code == "UZB"
        assert record.document_number == "AD2904903"
        assert record.document_number_check_digit == "4"
        assert record.personal_number == "30912955910015"
        assert record.date_of_birth == "09/12/1995"
        assert record.dob_check_digit == "2"
        assert record.sex == "M"
        assert record.expiry_date == "29/03/1933"
        assert record.expiry_check_digit == "6"
        assert record.nationality == "UZB"
        assert record.personal_number_check_digit == "0"
        assert record.surname == "SURNAME"
        assert record.given_names == "GIVEN NAMES"
        assert record.is_valid
        assert record.raw_lines == tuple(id_card_lines)

    def test_short_ocr_lines_are_padded(self):
        """Lines shorter than 30 characters are padded with fillers before slicing."""
        record = parse_id_card([
            "IUUZBAD29049034301295591",
            "9512092M3303296UZBUZB<0",
            "SURNAME  GIVEN NAMES",
        ])
        assert record.country_code == "UZB"
        assert record.sex == "M"
        assert record.date_of_birth == "09/12/1995"
        assert record.expiry_date == "29/03/1933"
        assert record.surname == "SURNAME"
        assert record.given_names == "GIVEN NAMES"
        assert record.personal_number_check_digit == "<"

    def test_extra_lines_are_ignored(self, id_card_lines):
        """Only the first three lines are parsed; raw_lines keeps the whole run."""
        lines = id_card_lines + ["EXTRA"]
        record = parse_id_card(lines)
        assert replace(record, raw_lines=()) == replace(parse_id_card(id_card_lines), raw_lines=())
        assert record.raw_lines == tuple(lines)

    @pytest.mark.parametrize("lines", [[], ["IUUZBAD2904903"], ["a", "b"]])
    def test_too_few_lines_gives_empty_record(self, lines):
        record = parse_id_card(lines)
        assert isinstance(record, IDCardMRZ)
        assert all(value == "" for value in _string_fields(record))
        assert record.is_valid is False
        assert record.raw_lines == tuple(lines)

    def test_wrong_country_is_invalid(self, id_card_lines):
        lines = [id_card_lines[0].replace("UZB", "KAZ", 1)] + id_card_lines[1:]
        record = parse_id_card(lines)
        assert record.country_code == "KAZ"
        assert not record.is_valid

    def test_unrecognized_sex_is_invalid(self, id_card_lines):
        line2 = id_card_lines[1][:7] + "X" + id_card_lines[1][8:]
        record = parse_id_card([id_card_lines[0], line2, id_card_lines[2]])
        assert record.sex == "X"
        assert not record.is_valid

    def test_missing_surname_is_invalid(self, id_card_lines):
        record = parse_id_card(id_card_lines[:2] + ["<" * 30])
        assert record.surname == ""
        assert not record.is_valid

    def test_parsing_is_idempotent(self, id_card_lines):
        first = parse_id_card(id_card_lines)
        second = parse_id_card(id_card_lines)
        assert first == second
        assert hash(first) == hash(second)


class TestPassportParsing:
    """Tests for parse_passport."""

    def test_full_record(self, passport_lines):
        record = parse_passport(passport_lines)
        assert record.document_type == "P"
        assert record.country_code == "UZB"
        assert record.surname == "IVANOV"
        assert record.given_names == "IVAN IVANOVICH"
        assert record.document_number == "AB1234567"
        assert record.document_number_check_digit == "1"
        assert record.nationality == "UZB"
        assert record.date_of_birth == "04/04/1995"
        assert record.dob_check_digit == "0"
        assert record.sex == "M"
        assert record.expiry_date == "12/08/2030"
        assert record.expiry_check_digit == "2"
        assert record.personal_number == "30404954170041"
        assert record.personal_number_check_digit == "4"
        assert record.final_check_digit == "4"
        assert record.is_valid

    @pytest.mark.parametrize("lines", [[], [PASSPORT_LINE1]])
    def test_too_few_lines_gives_empty_record(self, lines):
        record = parse_passport(lines)
        assert isinstance(record, PassportMRZ)
        assert all(value == "" for value in _string_fields(record))
        assert record.is_valid is False

    def test_document_type_must_be_p(self):
        record = parse_passport(["V" + PASSPORT_LINE1[1:], PASSPORT_LINE2])
        assert record.document_type == "V"
        assert not record.is_valid

    def test_foreign_passport_is_invalid(self):
        record = parse_passport(ICAO_TD3_LINES)
        assert record.country_code == "UTO"
        assert record.surname == "ERIKSSON"
        assert record.given_names == "ANNA MARIA"
        assert record.document_number == "L898902C3"
        assert record.date_of_birth == "12/08/1974"
        assert record.sex == "F"
        assert record.expiry_date == "15/04/2012"
        assert record.personal_number == "ZE184226B"
        assert not record.is_valid

    def test_filler_in_document_number_is_stripped(self):
        line2 = "AB12345<<" + PASSPORT_LINE2[9:]
        record = parse_passport([PASSPORT_LINE1, line2])
        assert record.document_number == "AB12345"

    def test_unreadable_date_passes_through(self):
        line2 = PASSPORT_LINE2[:13] + "95O4O4" + PASSPORT_LINE2[19:]
        record = parse_passport([PASSPORT_LINE1, line2])
        assert record.date_of_birth == "95O4O4"
        assert record.is_valid

    def test_empty_document_number_is_invalid(self):
        line2 = "<" * 9 + PASSPORT_LINE2[9:]
        record = parse_passport([PASSPORT_LINE1, line2])
        assert record.document_number == ""
        assert not record.is_valid


class TestRecordOutput:
    """Tests for display pairs and dict serialization."""

    def test_id_card_pairs(self, id_card_lines):
        pairs = parse_id_card(id_card_lines).to_key_value_pairs()
        assert pairs[0] == ("Document Type", "IU")
        assert pairs[1] == ("Nationality", "UZB")
        assert ("Personal ID Number", "30912955910015") in pairs
        assert ("Issuing Country", "UZB") in pairs
        assert pairs[-1] == ("Valid", "True")
        assert len(pairs) == 15

    def test_passport_pairs(self, passport_lines):
        pairs = parse_passport(passport_lines).to_key_value_pairs()
        labels = [label for label, _ in pairs]
        assert labels[:5] == ["Document Type", "Country Code", "Surname", "Given Names", "Passport Number"]
        assert ("Final Check Digit", "4") in pairs
        assert pairs[-1] == ("Valid", "True")
        assert len(pairs) == 16

    def test_empty_record_pairs_report_invalid(self):
        pairs = parse_passport([]).to_key_value_pairs()
        assert pairs[-1] == ("Valid", "False")
        assert all(value == "" for _, value in pairs[:-1])

    def test_to_dict(self, passport_lines):
        d = parse_passport(passport_lines).to_dict()
        assert d["kind"] == "passport"
        assert d["document_number"] == "AB1234567"
        assert d["is_valid"] is True
        assert d["raw_lines"] == passport_lines


class TestDispatch:
    """Tests for parse_mrz and read_mrz."""

    def test_parse_mrz_by_kind(self, id_card_lines, passport_lines):
        assert isinstance(parse_mrz(id_card_lines, DocumentKind.ID_CARD), IDCardMRZ)
        assert isinstance(parse_mrz(passport_lines, "passport"), PassportMRZ)

    def test_unknown_kind_raises(self, passport_lines):
        with pytest.raises(ValueError):
            parse_mrz(passport_lines, "visa")

    def test_read_mrz_from_ocr_text(self, passport_ocr_text, id_card_ocr_text):
        passport = read_mrz(passport_ocr_text, DocumentKind.PASSPORT)
        assert passport.is_valid
        assert passport.surname == "IVANOV"

        id_card = read_mrz(id_card_ocr_text, DocumentKind.ID_CARD)
        assert id_card.is_valid
        assert id_card.document_number == "AD2904903"

    def test_read_mrz_without_mrz_is_empty(self):
        record = read_mrz("just some caption text", DocumentKind.ID_CARD)
        assert record.is_valid is False
        assert record.raw_lines == ()

    def test_wrong_layout_for_text_is_invalid(self, passport_ocr_text):
        """A passport MRZ has only two lines, too few for the ID-card parser."""
        record = read_mrz(passport_ocr_text, DocumentKind.ID_CARD)
        assert not record.is_valid
        assert record.document_number == ""


class TestRecordKinds:
    """The two record kinds are independent types sharing only the protocol."""

    @pytest.mark.parametrize("record_type", [IDCardMRZ, PassportMRZ])
    def test_no_shared_base_class(self, record_type):
        assert record_type.__mro__ == (record_type, object)

    def test_module_functions_match_methods(self, id_card_lines, passport_lines):
        for record in (parse_id_card(id_card_lines), parse_passport(passport_lines)):
            assert record_key_value_pairs(record) == record.to_key_value_pairs()
            assert record_to_dict(record) == record.to_dict()
