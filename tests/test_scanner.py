import pytest

from dbcnet.scanner import DBCParseError, Scanner


def test_skip_whitespace_and_comments():
    scanner = Scanner("  // note\n /* block */\t VERSION")
    scanner.skip()
    assert scanner.text[scanner.pos:] == "VERSION"


def test_nested_block_comment_is_skipped():
    scanner = Scanner("/* outer /* inner */ still */ name")
    assert scanner.identifier() == "name"


def test_unterminated_block_comment_raises():
    scanner = Scanner("/* never closed")
    with pytest.raises(DBCParseError):
        scanner.skip()


def test_at_end_with_only_comments():
    assert Scanner("  // x\n/* y */  \n").at_end() is True
    assert Scanner("  BU_").at_end() is False


def test_at_keyword_respects_word_boundary_and_does_not_consume():
    scanner = Scanner("BO_TX_BU_ 1 : A;")
    assert scanner.at_keyword("BO_") is False
    assert scanner.at_keyword("BO_TX_BU_") is True
    assert scanner.identifier() == "BO_TX_BU_"


def test_accept_and_expect():
    scanner = Scanner("BS_ : 500")
    assert scanner.accept("BU_") is False
    assert scanner.accept("BS_") is True
    scanner.expect(":")
    assert scanner.unsigned() == 500
    with pytest.raises(DBCParseError):
        scanner.expect(";")


def test_accept_does_not_match_longer_keyword():
    scanner = Scanner("BA_DEF_DEF_ \"x\"")
    assert scanner.accept("BA_DEF_") is False
    assert scanner.accept("BA_DEF_DEF_") is True
    assert scanner.quoted_string() == "x"


def test_quoted_string_unescapes():
    scanner = Scanner(r'"say \"hi\" \\ now"')
    assert scanner.quoted_string() == 'say "hi" \\ now'
    assert scanner.at_end()


def test_quoted_string_keeps_other_backslashes():
    assert Scanner(r'"a\nb"').quoted_string() == "a\\nb"


def test_quoted_string_unterminated_raises():
    with pytest.raises(DBCParseError):
        Scanner('"open').quoted_string()


def test_identifier_rejects_leading_digit():
    with pytest.raises(DBCParseError):
        Scanner("9abc").identifier()


def test_unsigned_limits():
    assert Scanner("18446744073709551615").unsigned() == 18446744073709551615
    with pytest.raises(DBCParseError):
        Scanner("18446744073709551616").unsigned()
    with pytest.raises(DBCParseError):
        Scanner("-1").unsigned()


def test_signed_limits():
    assert Scanner("-9223372036854775808").signed() == -9223372036854775808
    with pytest.raises(DBCParseError):
        Scanner("9223372036854775808").signed()


def test_number_forms():
    scanner = Scanner("-0.5 1e3 .25 7")
    assert scanner.number() == -0.5
    assert scanner.number() == 1e3
    assert scanner.number() == 0.25
    assert scanner.number() == 7.0


def test_number_stops_at_separator():
    scanner = Scanner("(1,0)")
    scanner.expect("(")
    assert scanner.number() == 1.0
    scanner.expect(",")
    assert scanner.number() == 0.0
    scanner.expect(")")
    assert scanner.at_end()


def test_end_of_line_consumes_break():
    scanner = Scanner("A  \r\nB")
    assert scanner.identifier() == "A"
    scanner.end_of_line()
    assert scanner.text[scanner.pos:] == "B"


def test_end_of_line_accepts_end_of_input():
    scanner = Scanner("A \t")
    scanner.identifier()
    scanner.end_of_line()
    assert scanner.pos == len(scanner.text)


def test_end_of_line_rejects_more_tokens():
    scanner = Scanner("A B\n")
    scanner.identifier()
    with pytest.raises(DBCParseError):
        scanner.end_of_line()


def test_end_of_line_does_not_skip_comments():
    scanner = Scanner("A // c\n")
    scanner.identifier()
    with pytest.raises(DBCParseError):
        scanner.end_of_line()


def test_error_reports_position():
    scanner = Scanner("A\n  ;")
    scanner.identifier()
    with pytest.raises(DBCParseError) as info:
        scanner.identifier()
    assert info.value.line == 2
    assert info.value.column == 3