import mmap

import pytest

from prism.analyzers.entropy import entropy


def test_empty_buffer():
    assert entropy(b"") == 0.0


@pytest.mark.parametrize("n", [1, 2, 17, 4096])
def test_single_repeated_value(n):
    assert entropy(bytes([0x41]) * n) == 0.0


def test_uniform_coverage_of_all_byte_values():
    assert entropy(bytes(range(256))) == 8.0
    assert entropy(bytes(range(256)) * 16) == 8.0


def test_structured_data_sits_between_extremes():
    text = b"The quick brown fox jumps over the lazy dog. " * 20
    value = entropy(text)
    assert 3.0 < value < 5.0


def test_random_data_is_close_to_maximum(sample_bytes):
    assert 7.9 < entropy(sample_bytes) <= 8.0


def test_buffer_is_not_modified():
    data = bytearray(b"\x00\x01\x02\x03")
    entropy(data)
    assert data == bytearray(b"\x00\x01\x02\x03")


def test_memoryview_slice_matches_bytes(sample_bytes):
    view = memoryview(sample_bytes)[100:2100]
    assert entropy(view) == entropy(sample_bytes[100:2100])


def test_mapped_file(sample_file, sample_bytes):
    with open(sample_file, "rb") as fh:
        with mmap.mmap(fh.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
            assert entropy(mapped) == entropy(sample_bytes)


def test_strided_memoryview_matches_bytes():
    data = b"abcdef" * 100
    assert entropy(memoryview(data)[::2]) == entropy(data[::2])
