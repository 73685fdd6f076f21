import pytest

from graphkeeper.table import (
    KeySpace,
    SlotState,
    Table,
    common_hash,
    first_hash,
    is_prime,
    second_hash,
)


def _filled(size, keys):
    table = Table(size)
    for key in keys:
        table.insert(key)
    return table


def test_first_hash_of_empty_key_is_zero():
    assert first_hash("") == 0


@pytest.mark.parametrize("key", ["a", "alpha", "vertex-42", "ключ", "z" * 200])
def test_first_hash_fits_signed_32_bits(key):
    value = first_hash(key)
    assert -(2**31) <= value < 2**31
    assert first_hash(key) == value


def test_second_hash_is_one():
    assert second_hash(500, "anything") == 1


@pytest.mark.parametrize("key", ["a", "bc", "node"])
@pytest.mark.parametrize("iteration", [1, 2, 10])
def test_common_hash_steps_linearly(key, iteration):
    assert common_hash(7, key, iteration) - common_hash(7, key, iteration - 1 or 1) in (
        0,
        1,
    )
    assert common_hash(7, key, iteration + 1) - common_hash(7, key, iteration) == 1


@pytest.mark.parametrize("number", [3, 5, 7, 11, 13, 503])
def test_is_prime_true(number):
    assert is_prime(number) is True


@pytest.mark.parametrize("number", [0, 1, 2, 4, 9, 15, 500, 501])
def test_is_prime_false(number):
    assert is_prime(number) is False


def test_table_size_must_be_positive():
    with pytest.raises(ValueError):
        Table(0)


def test_insert_and_find():
    table = Table(11)
    slot = table.insert("a")
    assert slot.key == "a"
    assert slot.state is SlotState.BUSY
    assert slot.adjacency == []
    assert table.find("a") is slot
    assert "a" in table
    assert "b" not in table
    assert table.find("b") is None
    assert len(table) == 1


def test_duplicate_insert_raises():
    table = _filled(11, ["a"])
    with pytest.raises(KeyError):
        table.insert("a")
    assert len(table) == 1


def test_iteration_yields_busy_slots():
    keys = {"a", "b", "c", "d"}
    table = _filled(11, keys)
    assert {slot.key for slot in table} == keys
    assert all(slot.busy for slot in table)


def test_remove_leaves_other_keys_reachable():
    keys = ["k1", "k2", "k3", "k4", "k5"]
    table = _filled(5, keys)
    table.remove("k2")
    table.remove("k4")
    assert len(table) == 3
    assert "k2" not in table and "k4" not in table
    for key in ("k1", "k3", "k5"):
        assert table.find(key).key == key


def test_remove_missing_raises():
    table = _filled(5, ["a"])
    with pytest.raises(KeyError):
        table.remove("b")


def test_reinsert_after_remove():
    table = _filled(5, ["a", "b"])
    table.remove("a")
    table.insert("a")
    assert "a" in table
    assert len(table) == 2


def test_release_returns_payload():
    table = Table(7)
    slot = table.insert("a")
    slot.vertex = "payload"
    slot.adjacency.append("edge")
    released = table.release("a")
    assert isinstance(released, KeySpace)
    assert released.key == "a"
    assert released.vertex == "payload"
    assert released.adjacency == ["edge"]
    assert "a" not in table
    assert len(table) == 0


def test_release_missing_raises():
    with pytest.raises(KeyError):
        Table(3).release("a")


def test_expand_grows_to_next_prime_and_keeps_payloads():
    table = Table(5)
    for key in ["a", "b", "c"]:
        table.insert(key).vertex = key.upper()
    table.expand()
    assert table.msize == 7
    assert len(table) == 3
    for key in ["a", "b", "c"]:
        assert table.find(key).vertex == key.upper()


def test_insert_into_full_table_expands():
    keys = [f"v{n}" for n in range(5)]
    table = _filled(5, keys)
    assert table.msize == 5
    table.insert("extra")
    assert table.msize > 5
    assert is_prime(table.msize)
    assert len(table) == 6
    assert {slot.key for slot in table} == set(keys) | {"extra"}


def test_size_one_table_expands_past_two():
    table = _filled(1, ["a"])
    table.insert("b")
    assert table.msize == 3
    assert {"a", "b"} <= {slot.key for slot in table}


def test_format_empty_adjacency():
    table = _filled(3, ["a"])
    assert table.format() == "key a: \n"


def test_format_lists_adjacency_items():
    table = Table(3)
    table.insert("a").adjacency.extend(["x", "y"])
    assert table.format() == "key a: x -> y -> \n"


def test_format_skips_non_busy_slot():
    assert KeySpace().format() == ""
    table = _filled(3, ["a"])
    table.remove("a")
    assert table.format() == ""