import pytest

from dsakit.org_tree import (
    OrgTree,
    PositionNotFoundError,
    TooManySubordinatesError,
)


@pytest.fixture
def tree():
    t = OrgTree("CEO")
    t.add_subordinate("CEO", "Deputy Director")
    t.add_subordinate("Deputy Director", "IT Head")
    t.add_subordinate("Deputy Director", "Marketing Head")
    t.add_subordinate("IT Head", "Security Head")
    t.add_subordinate("IT Head", "App Development Head")
    t.add_subordinate("Marketing Head", "Logistics Head")
    t.add_subordinate("Marketing Head", "Public Relations Head")
    return t


def test_third_subordinate_rejected(tree):
    with pytest.raises(TooManySubordinatesError):
        tree.add_subordinate("Deputy Director", "Finance Head")
    assert tree.find("Finance Head") is None


def test_unknown_manager_rejected(tree):
    with pytest.raises(PositionNotFoundError):
        tree.add_subordinate("Nobody", "Intern")


def test_find_returns_node(tree):
    node = tree.find("IT Head")
    assert node.position == "IT Head"
    assert node.first.position == "Security Head"
    assert node.second.position == "App Development Head"


def test_pre_order(tree):
    assert tree.pre_order() == [
        "CEO",
        "Deputy Director",
        "IT Head",
        "Security Head",
        "App Development Head",
        "Marketing Head",
        "Logistics Head",
        "Public Relations Head",
    ]


def test_in_order(tree):
    assert tree.in_order() == [
        "Security Head",
        "IT Head",
        "App Development Head",
        "Deputy Director",
        "Logistics Head",
        "Marketing Head",
        "Public Relations Head",
        "CEO",
    ]


def test_post_order(tree):
    assert tree.post_order() == [
        "Security Head",
        "App Development Head",
        "IT Head",
        "Logistics Head",
        "Public Relations Head",
        "Marketing Head",
        "Deputy Director",
        "CEO",
    ]


def test_level_order(tree):
    assert tree.level_order() == [
        ["CEO"],
        ["Deputy Director"],
        ["IT Head", "Marketing Head"],
        ["Security Head", "App Development Head", "Logistics Head", "Public Relations Head"],
    ]


def test_traversals_visit_same_positions(tree):
    flat = [p for level in tree.level_order() for p in level]
    assert sorted(tree.pre_order()) == sorted(tree.in_order()) == sorted(tree.post_order()) == sorted(flat)


def test_single_root_tree():
    t = OrgTree("Owner")
    assert t.pre_order() == ["Owner"]
    assert t.level_order() == [["Owner"]]