import pytest

from practicekit.bloom import BloomFilter


def test_added_items_are_always_found():
    bf = BloomFilter(100, 0.01)
    words = [f"item-{i}".encode() for i in range(100)]
    for word in words:
        bf.add(word)
    assert all(word in bf for word in words)


def test_empty_filter_contains_nothing():
    bf = BloomFilter(50, 0.05)
    assert b"anything" not in bf
    assert "other" not in bf


def test_str_and_bytes_are_equivalent():
    bf = BloomFilter(10, 0.1)
    bf.add("hello")
    assert b"hello" in bf


def test_lower_rate_needs_more_bits():
    loose = BloomFilter(1000, 0.1)
    tight = BloomFilter(1000, 0.001)
    assert tight.size > loose.size
    assert tight.hash_count >= loose.hash_count
    assert loose.hash_count >= 1


def test_more_elements_need_more_bits():
    assert BloomFilter(10_000, 0.01).size > BloomFilter(100, 0.01).size


@pytest.mark.parametrize("n, p", [(0, 0.01), (-5, 0.01), (10, 0.0), (10, 1.0), (10, 1.5)])
def test_invalid_parameters_raise(n, p):
    with pytest.raises(ValueError):
        BloomFilter(n, p)