import pytest

from friendnet.network import FriendNet
from friendnet.profiles import ProfileStore
from friendnet.tree import Color


@pytest.fixture
def net(tmp_path):
    store = ProfileStore(tmp_path / "profiles.txt")
    store.reset()
    return FriendNet(store)


USERS = [
    ("Alice", "25", "Engineer"),
    ("Bob", "31", "Teacher"),
    ("Carol", "42", "Doctor"),
]


@pytest.fixture
def filled(net):
    for user in USERS:
        net.add_user(*user)
    return net


def test_record_line(filled):
    for name, age, occupation in USERS:
        assert filled.record_line(name) == f"{name},{age},{occupation},"


def test_record_line_unknown_raises(filled):
    with pytest.raises(KeyError):
        filled.record_line("Nobody")


def test_user_info(filled):
    name, age, occupation = USERS[1]
    assert filled.user_info(name) == f"{name},{age},{occupation},"
    assert filled.user_info("Nobody") is None


def test_duplicate_user_keeps_first_record(filled):
    name, age, occupation = USERS[0]
    index = filled.add_user(name, "99", "Pilot")
    assert index == len(USERS)
    assert filled.record_line(name) == f"{name},{age},{occupation},"


def test_friends_info_in_added_order(filled):
    assert filled.add_friend("Alice", "Carol")
    assert filled.add_friend("Alice", "Bob")
    expected = [f"{n},{a},{o}," for n, a, o in (USERS[2], USERS[1])]
    assert filled.friends_info("Alice") == expected
    assert filled.friends_info("Nobody") == []


def test_range_info(filled):
    lines = filled.range_info("Alice", "Bob")
    assert lines == [f"{n},{a},{o}," for n, a, o in USERS[:2]]


def test_network_lines(filled):
    filled.add_friend("Alice", "Bob")
    lines = filled.network_lines()
    assert lines[0] == f"Alice,25,Engineer,Bob,"
    assert lines[1].endswith(",Alice,")
    assert lines[2] == "Carol,42,Doctor,"


def test_tree_lines(filled):
    root = filled.tree.root
    assert root.name == "Bob"
    assert root.color is Color.BLACK
    assert filled.tree_lines() == ["Alice,0,", "Bob,1,Alice,Carol", "Carol,0,"]