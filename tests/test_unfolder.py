from vcard_parser.loader.unfolder import LogicalLine, unfold_lines


def collect(text):
    reports = []
    lines = list(unfold_lines(text, report=lambda kind, msg, lineno: reports.append((kind, lineno))))
    return lines, reports


def test_folded_line_is_joined_without_the_leading_space():
    lines, reports = collect("NOTE:This is a long\r\n er note\r\nFN:x\r\n")

    assert [l.text for l in lines] == ["NOTE:This is a longer note", "FN:x"]
    assert lines[0].lineno == 1
    assert lines[1].lineno == 3
    assert reports == []


def test_tab_continuation_and_extra_whitespace_kept():
    lines, _ = collect("NOTE:a\n\t b\n")

    assert lines == [LogicalLine(lineno=1, text="NOTE:a b")]


def test_bare_lf_and_crlf_are_equivalent():
    crlf, _ = collect("BEGIN:VCARD\r\nFN:x\r\nEND:VCARD\r\n")
    lf, _ = collect("BEGIN:VCARD\nFN:x\nEND:VCARD\n")

    assert [l.text for l in crlf] == [l.text for l in lf]


def test_quoted_printable_soft_break():
    text = "NOTE;ENCODING=QUOTED-PRINTABLE:first=0D=0A=\r\nsecond\r\nFN:x\r\n"
    lines, _ = collect(text)

    assert lines[0].text == "NOTE;ENCODING=QUOTED-PRINTABLE:first=0D=0Asecond"
    assert lines[1].text == "FN:x"


def test_trailing_equals_without_qp_is_not_a_soft_break():
    lines, _ = collect("NOTE:a=\nFN:x\n")

    assert [l.text for l in lines] == ["NOTE:a=", "FN:x"]


def test_blank_and_orphan_lines_are_reported():
    lines, reports = collect("  orphan\nFN:x\n\nNOTE:y\n")

    assert [l.text for l in lines] == ["FN:x", "NOTE:y"]
    assert ("orphan-continuation", 1) in reports
    assert ("malformed-line", 3) in reports


def test_byte_order_mark_is_stripped():
    lines, _ = collect("\ufeffBEGIN:VCARD\nEND:VCARD\n")

    assert lines[0].text == "BEGIN:VCARD"


def test_empty_input_yields_nothing():
    lines, reports = collect("")

    assert lines == []
    assert reports == []
