import pytest

from algonotes.shared import SharedValue


def test_share_points_to_same_value():
    a = SharedValue([1, 2])
    assert a.is_shared() is False
    b = a.share()
    assert a.is_shared() and b.is_shared()
    assert b.read() is a.read()


def test_modify_copies_shared_value():
    original = [1, 2]
    a = SharedValue(original)
    b = a.share()
    b.modify().append(3)
    assert a.read() == original[:2]
    assert b.read() == original[:2] + [3]
    assert b.read() is not a.read()
    assert not a.is_shared()
    assert not b.is_shared()


def test_modify_unshared_returns_same_object():
    data = {"k": 1}
    a = SharedValue(data)
    assert a.modify() is data


def test_unshareable_value_is_copied_on_share():
    a = SharedValue([[1], [2]])
    a.mark_unshareable()
    c = a.share()
    assert c.read() == a.read()
    assert c.read() is not a.read()
    assert c.read()[0] is not a.read()[0]
    assert not a.is_shared()


def test_release_drops_owner():
    a = SharedValue("text")
    b = a.share()
    b.release()
    assert a.is_shared() is False
    with pytest.raises(RuntimeError):
        b.read()
    with pytest.raises(RuntimeError):
        b.release()


def test_context_manager_releases():
    a = SharedValue([0])
    with a.share() as b:
        assert a.is_shared()
        assert b.read() is a.read()
    assert not a.is_shared()
    with pytest.raises(RuntimeError):
        b.share()


def test_three_owners_then_one_writes():
    a = SharedValue([5])
    b = a.share()
    c = b.share()
    c.modify()[0] = 6
    assert a.read() is b.read()
    assert a.is_shared()
    assert c.read() != a.read()
    assert not c.is_shared()