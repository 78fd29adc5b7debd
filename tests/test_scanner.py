import io

from ppmdecode.io.cursor import ByteCursor
from ppmdecode.io.scanner import TokenScanner


def scanner(data, **kw):
    return TokenScanner(ByteCursor(io.BytesIO(data), buffer_size=3), **kw)


def test_mixed_whitespace_runs():
    sc = scanner(b"P6 \t\n4\n\n4\t255\nrest")
    assert sc.tokens(4) == [b"P6", b"4", b"4", b"255"]
    # zatrzymuje się tuż za terminatorem czwartego pola
    assert sc.cursor.read_byte() == ord("r")


def test_comment_is_skipped():
    data = b"P6 #comment 1 2 3\n4 4 255\n"
    sc = scanner(data)
    assert sc.tokens(4) == [b"P6", b"4", b"4", b"255"]
    assert sc.cursor.consumed == len(data)


def test_comment_inside_token_is_transparent():
    sc = scanner(b"12#x y\n3 ")
    assert sc.next_token() == b"123"


def test_end_of_stream_closes_pending_token():
    sc = scanner(b"  7")
    assert sc.next_token() == b"7"
    assert sc.next_token() is None


def test_unterminated_comment_reads_to_end():
    sc = scanner(b"5 # no newline here")
    assert sc.tokens(2) == [b"5"]


def test_custom_terminator():
    sc = scanner(b"a,b,,c", is_terminator=lambda b: b == ord(","))
    assert sc.tokens(10) == [b"a", b"b", b"c"]
