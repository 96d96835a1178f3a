import pytest

from algonotes.notes import (
    OrderedTuple,
    format_values,
    print_values,
    println_values,
)


def test_format_values_sample():
    assert format_values("iifcs", 1, 2, 3.14159, "c", "string") == (
        "1 2 3.141590 c string "
    )


def test_print_values_sample(capsys):
    print_values("iifcs", 1, 2, 3.14159, "c", "string")
    assert capsys.readouterr().out == "1 2 3.141590 c string "


def test_println_values_sample(capsys):
    println_values("css", "T", "test", "case")
    assert capsys.readouterr().out == "T\ntest\ncase\n"


def test_unknown_letters_skipped_without_consuming():
    assert format_values("ixs", 7, "word") == "7 word "


def test_empty_type_string():
    assert format_values("") == ""


def test_float_accepts_int():
    assert format_values("f", 2) == "2.000000 "


def test_too_few_values():
    with pytest.raises(ValueError):
        format_values("ii", 1)


def test_char_must_be_single():
    with pytest.raises(ValueError):
        format_values("c", "ab")


def test_int_rejects_string():
    with pytest.raises(TypeError):
        format_values("i", "x")


def test_float_rejects_string():
    with pytest.raises(TypeError):
        println_values("f", "x")


def test_compare_results():
    assert OrderedTuple.compare(OrderedTuple(1, 2), OrderedTuple(1, 3)) == -1
    assert OrderedTuple.compare(OrderedTuple(2, 0), OrderedTuple(1, 9)) == 1
    assert OrderedTuple.compare(OrderedTuple(1, "a"), OrderedTuple(1, "a")) == 0


def test_compare_empty():
    assert OrderedTuple.compare(OrderedTuple(), OrderedTuple()) == 0


def test_operators_agree_with_compare():
    a = OrderedTuple(1, "b", 3.0)
    b = OrderedTuple(1, "c", 0.0)
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert a != b
    assert not a == b


def test_equality_and_hash():
    a = OrderedTuple(4, "x")
    b = OrderedTuple(4, "x")
    assert a == b
    assert a <= b and a >= b
    assert hash(a) == hash(b)


def test_sorting_is_lexicographic():
    items = [OrderedTuple(2, 1), OrderedTuple(1, 5), OrderedTuple(1, 2)]
    assert [tuple(t) for t in sorted(items)] == [(1, 2), (1, 5), (2, 1)]


def test_length_mismatch_rejected():
    with pytest.raises(TypeError):
        OrderedTuple.compare(OrderedTuple(1), OrderedTuple(1, 2))


def test_sequence_access():
    t = OrderedTuple(9, "z")
    assert len(t) == 2
    assert t[1] == "z"
    assert list(t) == [9, "z"]