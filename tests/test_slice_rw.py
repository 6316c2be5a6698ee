import pytest

from mavcore.slice_rw import SliceReader, SliceWriter


def test_reader_reads():
    content = bytes(range(10))
    reader = SliceReader(content)
    buffer = reader.read_exact(5)
    assert buffer == content[0:5]
    assert reader.pos == 5


def test_reader_reads_it_all():
    content = bytes(range(10))
    reader = SliceReader(content)
    assert reader.read_exact(10) == content
    assert reader.num_remaining_bytes() == 0


def test_writer_writes():
    content = bytes(range(5))
    buffer = bytearray(10)
    writer = SliceWriter(buffer)
    writer.write_all(content)
    assert writer.content[0:5] == content
    assert writer.pos == 5


def test_writer_writes_it_all():
    content = bytes(range(10))
    buffer = bytearray(10)
    writer = SliceWriter(buffer)
    writer.write_all(content)
    assert bytes(buffer) == content


def test_reader_eof_keeps_position():
    reader = SliceReader(bytes(range(4)))
    reader.read_exact(3)
    with pytest.raises(EOFError, match="buffer contains only 1 bytes but 2 requested"):
        reader.read_exact(2)
    assert reader.pos == 3
    assert reader.read_exact(1) == bytes([3])


def test_writer_eof_writes_nothing():
    buffer = bytearray(3)
    writer = SliceWriter(buffer)
    with pytest.raises(EOFError, match="buffer contains only 3 bytes but 4 requested"):
        writer.write_all(b"\x01\x02\x03\x04")
    assert writer.pos == 0
    assert bytes(buffer) == bytes(3)


def test_writer_into_memoryview_offset():
    buffer = bytearray(6)
    first = SliceWriter(buffer)
    first.write_all(b"\xaa\xbb")
    second = SliceWriter(memoryview(buffer)[first.pos:])
    second.write_all(b"\xcc")
    assert bytes(buffer[:3]) == b"\xaa\xbb\xcc"
    assert second.num_remaining_bytes() == 3


def test_round_trip_sequential_chunks():
    buffer = bytearray(8)
    writer = SliceWriter(buffer)
    chunks = [b"\x01\x02", b"\x03", b"\x04\x05\x06\x07\x08"]
    for chunk in chunks:
        writer.write_all(chunk)
    writer.flush()
    reader = SliceReader(writer.content)
    assert [reader.read_exact(len(c)) for c in chunks] == chunks


def test_readonly_buffer_rejected():
    with pytest.raises(TypeError):
        SliceWriter(memoryview(b"readonly"))


def test_default_reader_is_empty():
    reader = SliceReader()
    assert reader.num_remaining_bytes() == 0
    with pytest.raises(EOFError):
        reader.read_exact(1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        SliceReader(b"abc").read_exact(-1)