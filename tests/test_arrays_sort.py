# tests/test_arrays_sort.py
from __future__ import annotations

from textshape.arrays import find_max_digit_sequence, sort

# ─────────────────────────────────────────────────────────────────────────────
# find_max_digit_sequence
# ─────────────────────────────────────────────────────────────────────────────


def test_find_max_digit_sequence_longest_run():
    strings = ["foo100bar1", "bar1foo100", "foo1000bar10", "bar10foo1000"]
    assert find_max_digit_sequence(strings) == "1000"


def test_find_max_digit_sequence_first_wins_on_equal_length():
    assert find_max_digit_sequence(["a12", "b34"]) == "12"


def test_find_max_digit_sequence_without_digits():
    assert find_max_digit_sequence(["abc", "def"]) is None
    assert find_max_digit_sequence([]) is None


# ─────────────────────────────────────────────────────────────────────────────
# sort: natural order
# ─────────────────────────────────────────────────────────────────────────────


def test_sort_numbers_numerically():
    assert sort([3, 10, 1, 100, 4, 2]) == [1, 2, 3, 4, 10, 100]


def test_sort_file_names_naturally():
    assert sort(["file10", "file2", "file1"]) == ["file1", "file2", "file10"]


def test_sort_integers_beyond_machine_width():
    big = 10**30
    assert sort([big, 5, 10**20]) == [5, 10**20, big]


def test_sort_integers_beyond_str_digit_limit():
    huge = 10**5000
    assert sort([huge, 1]) == [1, huge]
    assert sort([huge, huge // 10], key=lambda n: n) == [huge // 10, huge]


def test_sort_signs_and_decimal_points_compare_as_text():
    # only unsigned digit runs are padded; "-" and "." are plain characters
    assert sort([1.5, 1.25]) == [1.5, 1.25]
    assert sort([-1, -2]) == [-1, -2]


def test_sort_mixed_values_without_key():
    assert sort([{"id": 3}, 4, {"id": 2}, 1]) == [1, 4, {"id": 2}, {"id": 3}]


def test_sort_mixed_values_with_key():
    out = sort(
        [{"id": 3}, 4, {"id": 2}, 1],
        lambda e: e if isinstance(e, int) else e["id"],
    )
    assert out == [1, {"id": 2}, {"id": 3}, 4]


def test_sort_string_key_is_used_verbatim():
    assert sort(["b2", "a10", "a9"], key=str.upper) == ["a9", "a10", "b2"]


def test_sort_key_returning_none_falls_back_to_element():
    out = sort([{"id": 10}, {"id": 9}], key=lambda e: e.get("rank"))
    assert out == [{"id": 9}, {"id": 10}]


def test_sort_equal_keys_keep_input_order():
    first = {"id": 1, "name": "b"}
    second = {"id": 1, "name": "a"}
    out = sort([first, second, {"id": 0}], key=lambda e: e["id"])
    assert out[1] is first
    assert out[2] is second


# ─────────────────────────────────────────────────────────────────────────────
# sort: contract
# ─────────────────────────────────────────────────────────────────────────────


def test_sort_returns_new_list_and_leaves_input_untouched():
    data = [3, 1, 2]
    out = sort(data)
    assert out == [1, 2, 3]
    assert data == [3, 1, 2]
    assert out is not data


def test_sort_consumes_generators():
    assert sort(x for x in ["v10", "v9"]) == ["v9", "v10"]


def test_sort_empty():
    assert sort([]) == []


def test_sort_is_idempotent():
    data = ["img12.png", "img2.png", "img1.png", "img100.png", "a"]
    once = sort(data)
    assert sort(once) == once
