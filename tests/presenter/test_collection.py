"""
Tests for ViewCollection pairing, matching and binding.

Collection operations pair members with data items by position and stop at
the shorter side without raising.
"""

import pytest
from conftest import Contact, texts

from viewbind import InvalidViewStateError, View, ViewCollection

LIST_MARKUP = """
<ul>
  <li data-scope="item"><b data-prop="name">one</b></li>
  <li data-scope="item"><b data-prop="name">two</b></li>
  <li data-scope="item"><b data-prop="name">three</b></li>
</ul>
<p>after</p>
"""


@pytest.fixture
def list_view():
    return View.from_string(LIST_MARKUP)


class TestSequenceProtocol:
    """Test collections behave like read-only sequences of views."""

    def test_length_iteration_and_indexing(self, list_view):
        items = list_view.scope("item")

        assert len(items) == 3
        assert [view.text for view in items] == ["one", "two", "three"]
        assert items[1].text == "two"
        assert items.first is items[0]
        assert items.last is items[2]

    def test_slices_are_collections(self, list_view):
        head = list_view.scope("item")[:2]
        assert isinstance(head, ViewCollection)
        assert len(head) == 2

    def test_empty_collection(self):
        empty = ViewCollection()
        assert not empty
        assert empty.first is None
        assert empty.last is None


class TestWithAndFor:
    """Test block invocation over members."""

    def test_with_yields_collection(self, list_view):
        items = list_view.scope("item")
        assert items.with_(lambda views: views) is items

    def test_for_pairs_members_with_data(self, list_view):
        items = list_view.scope("item")
        calls = []
        items.for_(["a", "b", "c"], lambda view, datum: calls.append((view, datum)))

        assert [datum for _, datum in calls] == ["a", "b", "c"]
        assert [view for view, _ in calls] == items.views

    def test_for_stops_when_no_more_data(self, list_view):
        calls = []
        list_view.scope("item").for_(["a"], lambda view, datum: calls.append(datum))
        assert calls == ["a"]

    def test_for_stops_when_no_more_views(self, list_view):
        calls = []
        list_view.scope("item").for_(
            list(range(10)), lambda view, datum: calls.append(datum)
        )
        assert calls == [0, 1, 2]

    def test_for_with_index(self, list_view):
        calls = []
        list_view.scope("item").for_with_index(
            ["a", "b"], lambda view, datum, i: calls.append((view.text, datum, i))
        )
        assert calls == [("one", "a", 0), ("two", "b", 1)]


class TestMatch:
    """Test collections grow and shrink to the data length."""

    def test_shrinks_by_removing_trailing_members(self, list_view):
        items = list_view.scope("item")
        matched = items.match(["a"])

        assert len(matched) == 1
        assert matched[0] is items[0]
        assert not items[1].is_valid
        assert not items[2].is_valid
        assert texts(list_view, "li") == ["one"]

    def test_grows_by_cloning_last_member(self, list_view):
        items = list_view.scope("item")
        matched = items.match(list(range(5)))

        assert len(matched) == 5
        assert matched.views[:3] == items.views
        assert texts(list_view, "li") == ["one", "two", "three", "three", "three"]
        ul = list_view.node.find("ul")
        assert len(ul.find_all("li", recursive=False)) == 5

    def test_clones_share_metadata(self, list_view):
        items = list_view.scope("item")
        matched = items.match(list(range(4)))

        clone = matched[3]
        assert clone.scoped_as == "item"
        assert clone.bindings == items.last.bindings
        assert clone.context is items.last.context

    def test_same_length_keeps_nodes(self, list_view):
        items = list_view.scope("item")
        html = list_view.to_html()
        matched = items.match(["a", "b", "c"])

        assert [view.node for view in matched] == [view.node for view in items]
        assert list_view.to_html() == html

    def test_empty_data_removes_all_members(self, list_view):
        list_view.scope("item").match([])
        assert len(list_view.scope("item")) == 0
        assert texts(list_view, "p") == ["after"]

    def test_empty_collection_stays_empty(self, list_view):
        assert len(list_view.scope("missing").match([1, 2])) == 0

    def test_growing_from_removed_member_raises(self, list_view):
        items = list_view.scope("item")
        items.last.remove()

        with pytest.raises(InvalidViewStateError):
            items[:3].match(list(range(4)))


class TestRepeat:
    """Test repeat and repeat_with_index on collections."""

    def test_repeat_matches_then_iterates(self, list_view):
        calls = []
        views = list_view.scope("item").repeat(
            ["a", "b"], lambda view, datum: calls.append(datum)
        )
        assert len(views) == 2
        assert calls == ["a", "b"]

    def test_repeat_with_index(self, list_view):
        calls = []
        list_view.scope("item").repeat_with_index(
            ["a", "b", "c", "d"], lambda view, datum, i: calls.append(i)
        )
        assert calls == [0, 1, 2, 3]

    def test_repeat_with_generator_data(self, list_view):
        calls = []
        views = list_view.scope("item").repeat(
            (name for name in "abcd"), lambda view, datum: calls.append(datum)
        )
        assert len(views) == 4
        assert calls == ["a", "b", "c", "d"]


class TestBind:
    """Test binding data across members."""

    def test_binds_a_hash(self, single_view):
        data = {"full_name": "Jugyo Kohno", "email": "jugyo@example.com"}
        single_view.scope("contact").bind(data)

        assert texts(single_view, ".contact span") == [data["full_name"]]
        assert texts(single_view, ".contact a") == [data["email"]]

    def test_binds_an_object(self, single_view):
        data = Contact("Jugyo Kohno", "jugyo@example.com")
        single_view.scope("contact").bind(data)

        assert texts(single_view, ".contact span") == [data["full_name"]]
        assert texts(single_view, ".contact a") == [data["email"]]

    def test_binds_data_across_views(self, many_view):
        many_view.scope("contact").bind(
            [
                {"full_name": "A", "email": "a@x"},
                {"full_name": "B", "email": "b@x"},
                {"full_name": "C", "email": "c@x"},
            ]
        )
        assert texts(many_view, "span") == ["A", "B", "C"]
        assert texts(many_view, "a") == ["a@x", "b@x", "c@x"]

    def test_stops_binding_when_no_more_data(self, many_view):
        many_view.scope("contact").bind(
            [{"full_name": "A", "email": "a@x"}, {"full_name": "B", "email": "b@x"}]
        )
        assert texts(many_view, "span") == ["A", "B", "John Doe"]
        assert texts(many_view, "a") == ["a@x", "b@x", "john@example.com"]

    def test_stops_binding_when_no_more_views(self, many_view):
        data = [{"full_name": name, "email": "x"} for name in "ABCDE"]
        many_view.scope("contact").bind(data)
        assert texts(many_view, "span") == ["A", "B", "C"]


class TestApply:
    """Test apply on collections."""

    def test_matches_then_binds(self, many_view):
        views = many_view.scope("contact").apply(
            [Contact("A", "a@x"), Contact("B", "b@x")]
        )
        assert len(views) == 2
        assert texts(many_view, "span") == ["A", "B"]

    def test_invokes_block_after_binding(self, many_view):
        seen = []
        many_view.scope("contact").apply(
            [{"full_name": "A", "email": "a@x"}],
            lambda view, datum: seen.append(view.prop("full_name")[0].text),
        )
        assert seen == ["A"]

    def test_binds_generator_data(self, many_view):
        data = ({"full_name": name, "email": "x"} for name in "AB")
        views = many_view.scope("contact").apply(data)

        assert len(views) == 2
        assert texts(many_view, "span") == ["A", "B"]


class TestLookup:
    """Test aggregated lookups across members."""

    def test_prop_lookup_spans_members(self, many_view):
        names = many_view.scope("contact").prop("full_name")
        assert len(names) == 3

    def test_scope_lookup_spans_members(self):
        view = View.from_string(
            '<div data-scope="post"><i data-scope="tag">a</i></div>'
            '<div data-scope="post"><i data-scope="tag">b</i></div>'
        )
        tags = view.scope("post").scope("tag")
        assert [tag.text for tag in tags] == ["a", "b"]
