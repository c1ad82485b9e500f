"""Tests for CSV word-list parsing (csv_parser.py, policies.py)"""

import pytest

from csv_parser import MissingRequiredColumnError, parse_csv, split_csv_line
from dto import WordItem
from policies import LenientPolicy, StrictPolicy, find_column, get_policy


# ─── Line splitting ───────────────────────────────────────────────────────

class TestSplitCsvLine:
    def test_plain_fields(self):
        assert split_csv_line('C1,犬,Dog') == ['C1', '犬', 'Dog']

    def test_quoted_comma_and_doubled_quotes(self):
        assert split_csv_line('"a,b","He said ""Hi"""') == ['a,b', 'He said "Hi"']

    def test_japanese_quoted_comma(self):
        row = split_csv_line('"ベルギー,王国","He said ""Hello"""')
        assert row == ['ベルギー,王国', 'He said "Hello"']

    def test_fields_are_trimmed(self):
        assert split_csv_line('  C1 ,  犬\t, Dog  ') == ['C1', '犬', 'Dog']

    def test_empty_fields_kept(self):
        assert split_csv_line(',,') == ['', '', '']

    def test_empty_line_is_one_empty_field(self):
        assert split_csv_line('') == ['']

    def test_trailing_quote_at_end_of_line(self):
        assert split_csv_line('"abc"') == ['abc']


# ─── Preprocessing ────────────────────────────────────────────────────────

class TestPreprocessing:
    LF = 'chapter,japanese,english\nC1,犬,Dog\nC1,猫,Cat'

    def test_lf_and_crlf_are_identical(self):
        crlf = self.LF.replace('\n', '\r\n')
        assert parse_csv(self.LF) == parse_csv(crlf)
        assert len(parse_csv(crlf)) == 2

    def test_lone_cr_line_endings(self):
        assert parse_csv(self.LF.replace('\n', '\r')) == parse_csv(self.LF)

    def test_values(self):
        rows = parse_csv(self.LF)
        assert rows[0] == WordItem(japanese='犬', english='Dog', chapter='C1')
        assert rows[1].english == 'Cat'

    def test_bom_is_stripped(self):
        rows = parse_csv('\ufeff' + self.LF, strict=True)
        assert rows == parse_csv(self.LF, strict=True)

    def test_empty_text(self):
        assert parse_csv('') == []
        assert parse_csv('   \n\n  ') == []

    def test_header_only(self):
        assert parse_csv('japanese,english') == []

    def test_surrounding_blank_lines_ignored(self):
        assert parse_csv('\n\n' + self.LF + '\n\n') == parse_csv(self.LF)

    def test_interior_blank_line_adds_nothing(self):
        text = 'chapter,japanese,english\nC1,犬,Dog\n\n   \nC1,猫,Cat'
        assert len(parse_csv(text)) == 2
        assert len(parse_csv(text, strict=True)) == 2

    def test_idempotent(self):
        assert parse_csv(self.LF) == parse_csv(self.LF)


# ─── Header resolution ────────────────────────────────────────────────────

class TestHeader:
    def test_column_order_irrelevant(self):
        rows = parse_csv('english,chapter,japanese\nDog,C1,犬')
        assert rows == [WordItem(japanese='犬', english='Dog', chapter='C1')]

    def test_substring_case_insensitive(self):
        rows = parse_csv('Unit Chapter,Japanese Word,ENGLISH answer\nU1,犬,Dog')
        assert rows == [WordItem(japanese='犬', english='Dog', chapter='U1')]

    def test_first_matching_column_wins(self):
        header = ['japanese', 'japanese (kana)', 'english']
        assert find_column(header, 'japanese') == 0

    def test_missing_column(self):
        assert find_column(['japanese', 'english'], 'chapter') is None

    def test_no_chapter_column(self):
        rows = parse_csv('japanese,english\n犬,Dog')
        assert rows == [WordItem(japanese='犬', english='Dog', chapter='')]

    def test_chapter_trimmed(self):
        rows = parse_csv('chapter,japanese,english\n" C2 ",犬,Dog')
        assert rows[0].chapter == 'C2'


# ─── Strict and lenient policies ──────────────────────────────────────────

class TestStrictPolicy:
    def test_missing_english_column_raises(self):
        with pytest.raises(MissingRequiredColumnError) as exc:
            parse_csv('chapter,japanese\nC1,犬', strict=True)
        assert 'japanese' in str(exc.value)
        assert 'english' in str(exc.value)

    def test_missing_japanese_column_raises(self):
        with pytest.raises(MissingRequiredColumnError):
            parse_csv('english\nDog', strict=True)

    def test_empty_english_cell_kept(self):
        rows = parse_csv('japanese,english\n犬,\n猫,Cat', strict=True)
        assert rows == [
            WordItem(japanese='犬', english=''),
            WordItem(japanese='猫', english='Cat'),
        ]

    def test_short_row_reads_empty(self):
        rows = parse_csv('chapter,japanese,english\nC1', strict=True)
        assert rows == [WordItem(japanese='', english='', chapter='C1')]

    def test_explicit_policy(self):
        rows = parse_csv('japanese,english\n犬,', policy=StrictPolicy())
        assert len(rows) == 1


class TestLenientPolicy:
    def test_missing_column_does_not_raise(self):
        assert parse_csv('chapter,japanese\nC1,犬') == []

    def test_empty_english_cell_dropped(self):
        rows = parse_csv('japanese,english\n犬,\n猫,Cat')
        assert rows == [WordItem(japanese='猫', english='Cat')]

    def test_empty_japanese_cell_dropped(self):
        assert parse_csv('japanese,english\n"  ",Dog') == []

    def test_get_policy(self):
        assert isinstance(get_policy(False), LenientPolicy)
        assert isinstance(get_policy(True), StrictPolicy)

    def test_accept_row(self):
        policy = LenientPolicy()
        assert policy.accept_row(WordItem(japanese='犬', english='Dog'))
        assert not policy.accept_row(WordItem(japanese='犬', english=' '))
