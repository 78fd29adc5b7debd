import io

from ppmdecode.io.cursor import ByteCursor


def test_read_byte_until_end():
    cur = ByteCursor(io.BytesIO(b"abc"), buffer_size=2)
    assert [cur.read_byte() for _ in range(4)] == [97, 98, 99, None]
    assert cur.consumed == 3


def test_read_exact_across_buffers():
    cur = ByteCursor(io.BytesIO(b"abcdef"), buffer_size=4)
    assert cur.read_byte() == ord("a")
    assert cur.read_exact(4) == b"bcde"
    assert cur.read_exact(4) == b"f"
    assert cur.read_exact(1) == b""
    assert cur.consumed == 6


def test_stream_is_left_open():
    stream = io.BytesIO(b"xy")
    cur = ByteCursor(stream)
    cur.read_exact(2)
    del cur
    assert not stream.closed
