import pytest

from rbxtypes.shared_string import SharedString, SharedStringHash


def test_insert_twice_shares_buffer():
    handle_1 = SharedString(bytes([5, 4, 3]))
    handle_2 = SharedString(bytes([5, 4, 3]))
    assert handle_1.data() is handle_2.data()
    assert handle_1 == handle_2


def test_data_round_trip():
    value = SharedString(b"hello")
    assert value.data() == b"hello"
    assert bytes(value) == b"hello"
    assert len(value) == 5


def test_accepts_lists_of_ints():
    assert SharedString([1, 2, 3]).data() == b"\x01\x02\x03"


def test_drop_and_recreate():
    first = SharedString(bytes([2]))
    first_hash = first.hash()
    del first
    second = SharedString(bytes([2]))
    assert second.data() == b"\x02"
    assert second.hash() == first_hash

    other = SharedString(bytes([5, 6, 7, 1]))
    del other
    assert SharedString(bytes([5, 6, 7, 1])).data() == bytes([5, 6, 7, 1])


def test_different_data_not_equal():
    a = SharedString(b"abc")
    b = SharedString(b"abd")
    assert a != b
    assert a.hash() != b.hash()


def test_hash_is_32_bytes_and_stable():
    a = SharedString(b"payload")
    b = SharedString(b"payload")
    assert len(a.hash().as_bytes()) == 32
    assert a.hash().as_bytes() == b.hash().as_bytes()
    assert hash(a) == hash(b)


def test_usable_in_sets():
    values = {SharedString(b"x"), SharedString(b"x"), SharedString(b"y")}
    assert len(values) == 2


def test_hash_ordering_follows_bytes():
    low = SharedStringHash(b"\x00" * 32)
    high = SharedStringHash(b"\xff" * 32)
    assert low < high
    assert sorted([high, low]) == [low, high]


def test_empty_data():
    value = SharedString(b"")
    assert value.data() == b""
    assert len(value) == 0


def test_rejects_non_bytes_like():
    with pytest.raises(TypeError):
        SharedString("text")