"""Tests for up/next/previous/down navigation."""

from __future__ import annotations

from doctrail.navigation import find_down, find_next, find_previous, find_up, neighbors
from doctrail.schemas import Trail, TrailItem
from doctrail.search import find_item


def _locate(trail: Trail, identifier: str) -> TrailItem:
    item = find_item(trail, identifier)
    assert item is not None
    return item


class TestTutorialScenario:
    """Neighbors in Intro, Sub(S1, S2), End."""

    def test_first_item_of_subtrail(self, tutorial_trail: Trail) -> None:
        s1 = _locate(tutorial_trail, "s1.muse")

        assert find_up(tutorial_trail, s1).link == "sub"
        assert find_next(tutorial_trail, s1).link == "s2"
        assert find_previous(tutorial_trail, s1) is None

    def test_last_item_of_subtrail(self, tutorial_trail: Trail) -> None:
        s2 = _locate(tutorial_trail, "s2")

        assert find_next(tutorial_trail, s2) is None
        assert find_previous(tutorial_trail, s2).link == "s1"
        assert find_up(tutorial_trail, s2).link == "sub"

    def test_owner_item(self, tutorial_trail: Trail) -> None:
        sub = _locate(tutorial_trail, "sub")

        assert find_next(tutorial_trail, sub).link == "end"
        assert find_previous(tutorial_trail, sub).link == "intro"
        assert find_up(tutorial_trail, sub) is None

    def test_item_after_owner_skips_subtrail(self, tutorial_trail: Trail) -> None:
        """End's previous is Sub, not Sub's last child."""
        end = _locate(tutorial_trail, "end")

        assert find_previous(tutorial_trail, end).link == "sub"
        assert find_next(tutorial_trail, end) is None


class TestFindNext:
    """Tests for find_next."""

    def test_siblings_are_inverse(self) -> None:
        x = TrailItem(text="X", link="x")
        y = TrailItem(text="Y", link="y")
        trail = (x, y)

        assert find_next(trail, x) == y
        assert find_previous(trail, y) == x

    def test_does_not_cross_to_parent_level(self, nested_trail: Trail) -> None:
        b = _locate(nested_trail, "b")
        a = _locate(nested_trail, "a")

        assert find_next(nested_trail, b) is None
        assert find_next(nested_trail, a).link == "c"

    def test_match_without_neighbor_stops_the_walk(self) -> None:
        """A matched last item does not fall through to an equal item later on."""
        leaf = TrailItem(text="Leaf", link="leaf")
        trail = (
            TrailItem(text="A", link="a", subtrail=(leaf,)),
            leaf,
            TrailItem(text="Z", link="z"),
        )

        assert find_next(trail, leaf) is None

    def test_unknown_target(self, tutorial_trail: Trail) -> None:
        stranger = TrailItem(text="Stranger", link="stranger")
        assert find_next(tutorial_trail, stranger) is None


class TestFindPrevious:
    """Tests for find_previous."""

    def test_first_of_subtrail_has_no_previous_even_if_owner_does(self) -> None:
        child = TrailItem(text="Child", link="child")
        trail = (
            TrailItem(text="First", link="first"),
            TrailItem(text="Owner", link="owner", subtrail=(child,)),
        )

        assert find_previous(trail, child) is None

    def test_deeply_nested(self) -> None:
        leaf1 = TrailItem(text="L1", link="l1")
        leaf2 = TrailItem(text="L2", link="l2")
        trail = (
            TrailItem(
                text="A",
                link="a",
                subtrail=(TrailItem(text="B", link="b", subtrail=(leaf1, leaf2)),),
            ),
        )

        assert find_previous(trail, leaf2) == leaf1
        assert find_up(trail, leaf2).link == "b"

    def test_top_level_first_item(self, tutorial_trail: Trail) -> None:
        assert find_previous(tutorial_trail, tutorial_trail[0]) is None


class TestFindUp:
    """Tests for find_up."""

    def test_direct_owner(self, nested_trail: Trail) -> None:
        b = _locate(nested_trail, "b")
        assert find_up(nested_trail, b) == nested_trail[0]

    def test_top_level_items_have_no_up(self, tutorial_trail: Trail) -> None:
        for item in tutorial_trail:
            assert find_up(tutorial_trail, item) is None

    def test_only_direct_owner_is_returned(self) -> None:
        """A grandparent is not reported as up."""
        leaf = TrailItem(text="Leaf", link="leaf")
        middle = TrailItem(text="Middle", link="middle", subtrail=(leaf,))
        top = TrailItem(text="Top", link="top", subtrail=(middle,))

        assert find_up((top,), leaf) == middle
        assert find_up((top,), middle) == top


class TestFindDown:
    """Tests for find_down."""

    def test_first_child(self, nested_trail: Trail) -> None:
        assert find_down(nested_trail[0]).link == "b"

    def test_leaf(self, nested_trail: Trail) -> None:
        assert find_down(nested_trail[1]) is None


class TestNeighbors:
    """Tests for neighbors."""

    def test_collects_all_directions(self, tutorial_trail: Trail) -> None:
        result = neighbors(tutorial_trail, "docs/sub.muse")

        assert result is not None
        assert result.item.link == "sub"
        assert result.previous.link == "intro"
        assert result.next.link == "end"
        assert result.up is None
        assert result.down.link == "s1"

    def test_unknown_document(self, tutorial_trail: Trail) -> None:
        assert neighbors(tutorial_trail, "missing") is None
