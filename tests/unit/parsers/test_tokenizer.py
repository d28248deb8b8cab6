from fio_csv.parsers.tokenizer import RawRow, iter_rows


def _rows(text: str, **kwargs: str) -> list[RawRow]:
    return list(iter_rows([text], **kwargs))


def _fields(text: str, **kwargs: str) -> list[tuple[str, ...]]:
    return [r.fields for r in _rows(text, **kwargs)]


class TestIterRows:
    def test_splits_fields_and_rows(self) -> None:
        assert _fields("a,b\nc,d\n") == [("a", "b"), ("c", "d")]

    def test_quoted_delimiter_is_literal(self) -> None:
        assert _fields('"a,b",c') == [("a,b", "c")]

    def test_doubled_quote_is_unescaped(self) -> None:
        assert _fields('"a""b"') == [('a"b',)]

    def test_quoted_newline_is_literal(self) -> None:
        assert _fields('"line1\nline2",x\n') == [("line1\nline2", "x")]

    def test_crlf_terminators(self) -> None:
        assert _fields("a,b\r\nc,d\r\n") == [("a", "b"), ("c", "d")]

    def test_lone_cr_terminates_row(self) -> None:
        assert _fields("a\rb") == [("a",), ("b",)]

    def test_quoted_crlf_is_preserved(self) -> None:
        assert _fields('"x\r\ny"') == [("x\r\ny",)]

    def test_trailing_delimiter_yields_empty_field(self) -> None:
        assert _fields("a,\n") == [("a", "")]

    def test_blank_lines_are_skipped(self) -> None:
        assert _fields("a\n\n\nb\n\n") == [("a",), ("b",)]

    def test_quoted_empty_field_is_not_blank(self) -> None:
        assert _fields('""\n') == [("",)]

    def test_quote_inside_unquoted_field_is_literal(self) -> None:
        assert _fields('ab"c,d') == [('ab"c', "d")]

    def test_custom_delimiter_and_quotechar(self) -> None:
        assert _fields("'a;b';c", delimiter=";", quotechar="'") == [("a;b", "c")]

    def test_empty_input_yields_nothing(self) -> None:
        assert _rows("") == []

    def test_rows_split_across_chunks(self) -> None:
        rows = list(iter_rows(['"a,', 'b""', '",c\r', "\nd"]))
        assert [r.fields for r in rows] == [('a,b"', "c"), ("d",)]


class TestLineNumbers:
    def test_line_numbers_track_physical_lines(self) -> None:
        rows = _rows("a\n\nb\n")
        assert [r.line_number for r in rows] == [1, 3]

    def test_multiline_field_advances_line_number(self) -> None:
        rows = _rows('"x\ny\nz",1\nnext\n')
        assert [r.line_number for r in rows] == [1, 4]

    def test_crlf_counts_as_one_line(self) -> None:
        rows = _rows("a\r\nb\r\nc")
        assert [r.line_number for r in rows] == [1, 2, 3]


class TestMalformedRows:
    def test_unterminated_quote_is_flagged(self) -> None:
        rows = _rows('a,b\n"open,c\nd\n')
        assert rows[0].error is None
        assert len(rows) == 2
        assert rows[1].error == "unterminated quoted field"
        assert rows[1].line_number == 2

    def test_character_after_closing_quote_is_flagged(self) -> None:
        rows = _rows('"a"b,c\nd\n')
        assert rows[0].error is not None
        assert "after closing quote" in rows[0].error
        assert rows[1].error is None
        assert rows[1].fields == ("d",)

    def test_raw_text_is_kept(self) -> None:
        rows = _rows('x,"y""z"\n')
        assert rows[0].text == 'x,"y""z"'
