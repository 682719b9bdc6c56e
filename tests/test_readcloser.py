import io

from gconvkit.readcloser import ReadCloser


def test_read_in_chunks_not_repeatable():
    body = ReadCloser(bytes([1, 2, 3, 4]), False)
    assert body.read(3) == bytes([1, 2, 3])
    assert body.read(3) == bytes([4])
    assert body.read(3) == b""
    assert body.read(3) == b""


def test_read_all_not_repeatable():
    body = ReadCloser(bytes([1, 2, 3, 4]), False)
    assert body.read_all() == bytes([1, 2, 3, 4])
    assert body.read_all() == b""


def test_read_repeatable():
    body = ReadCloser(bytes([1, 2, 3, 4]), True)
    assert body.read(3) == bytes([1, 2, 3])
    assert body.read(3) == bytes([4])
    assert body.read(3) == bytes([1, 2, 3])
    assert body.read(3) == bytes([4])
    assert body.read_all() == bytes([1, 2, 3, 4])
    assert body.read_all() == bytes([1, 2, 3, 4])


def test_default_is_not_repeatable():
    body = ReadCloser(b"abc")
    assert body.read() == b"abc"
    assert body.read() == b""


def test_close_keeps_content_readable():
    body = ReadCloser(b"abc", True)
    body.close()
    assert body.read(2) == b"ab"


def test_context_manager_returns_reader():
    with ReadCloser(b"xyz") as body:
        assert body.read(1) == b"x"


def test_from_reader_reads_and_closes():
    source = io.BytesIO(b"hello")
    body = ReadCloser.from_reader(source, True)
    assert source.closed is True
    assert body.read_all() == b"hello"
    assert body.read_all() == b"hello"


def test_accepts_bytearray():
    body = ReadCloser(bytearray(b"\x01\x02"))
    assert body.read(5) == b"\x01\x02"