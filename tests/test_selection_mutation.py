"""Tests for Selection mutation: after, before, remove and replace.

Every test also checks that the overlay stays consistent: each child
points back at the parent whose children list holds it, exactly once.
"""

import logging

import pytest

from dazzlequery import create_query, InvalidArgumentError
from dazzlequery.testing import check_overlay_consistency


def class_names(query):
    return query().find("class").value()


class TestAfter:

    def test_inserts_after(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").eq(1).after(make_rule("z"))
        assert class_names(query) == "rgzb"
        assert check_overlay_consistency(query.root) == []

    def test_returns_receiver(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        selection = query("rule").eq(1)
        assert selection.after(make_rule("z")) is selection

    def test_inserts_after_every_node(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").after(make_rule("z"))
        assert class_names(query) == "rzgzbz"
        assert check_overlay_consistency(query.root) == []

    def test_same_raw_node_gets_independent_wrappers(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        z = make_rule("z")
        query("rule").after(z)
        inserted = query("rule").filter(lambda node: node.raw is z)
        assert inserted.length() == 3
        assert len({id(node) for node in inserted}) == 3

    def test_existing_node_is_copied(self, rgb_tree):
        query = create_query(rgb_tree)
        rules = query("rule")
        rules.eq(0).after(rules.nodes[2])
        assert class_names(query) == "rbgb"
        assert check_overlay_consistency(query.root) == []

    def test_root_is_skipped(self, rgb_tree, make_rule, caplog):
        query = create_query(rgb_tree)
        with caplog.at_level(logging.DEBUG, logger="dazzlequery"):
            query().after(make_rule("z"))
        assert class_names(query) == "rgb"
        assert "after() skipped" in caplog.text

    def test_serialized_output(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        z = make_rule("z")
        query("rule").eq(0).after(z)
        assert query().get(0)["value"][2] == z
        assert len(rgb_tree["value"]) == 7


class TestBefore:

    def test_inserts_before(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").eq(0).before(make_rule("z"))
        assert class_names(query) == "zrgb"
        assert check_overlay_consistency(query.root) == []

    def test_inserts_before_every_node(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").before(make_rule("z"))
        assert class_names(query) == "zrzgzb"
        assert check_overlay_consistency(query.root) == []

    def test_root_is_skipped(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query().before(make_rule("z"))
        assert class_names(query) == "rgb"

    def test_index_shifts(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        g = query("rule").eq(1)
        assert g.index() == 3
        g.before(make_rule("z"))
        assert g.index() == 4


class TestRemove:

    def test_removes_node(self, rgb_tree):
        query = create_query(rgb_tree)
        rules_before = query("rule").get()
        query("rule").eq(1).remove()
        assert query("rule").get() == [rules_before[0], rules_before[2]]
        assert check_overlay_consistency(query.root) == []

    def test_removes_every_node(self, rgb_tree):
        query = create_query(rgb_tree)
        query("space").remove()
        assert [node["type"] for node in query().children().get()] == ["rule", "rule", "rule"]

    def test_removed_node_has_no_index(self, rgb_tree):
        query = create_query(rgb_tree)
        g = query("rule").eq(1)
        g.remove()
        assert g.index() == -1
        assert g.next().length() == 0

    def test_remove_twice_is_harmless(self, rgb_tree):
        query = create_query(rgb_tree)
        g = query("rule").eq(1)
        g.remove().remove()
        assert class_names(query) == "rb"

    def test_root_is_skipped(self, rgb_tree):
        query = create_query(rgb_tree)
        query().remove()
        assert query().get(0) == rgb_tree


class TestReplace:

    def test_replaces_node(self, border_tree):
        query = create_query(border_tree)
        query("number").first().replace(lambda node: {"type": "number", "value": "8"})
        assert query().find("number").first().value() == "8"
        assert query().find("number").value() == "823"
        assert check_overlay_consistency(query.root) == []

    def test_callback_receives_overlay_node(self, border_tree):
        query = create_query(border_tree)
        query("number").replace(
            lambda node: {"type": "number", "value": str(int(query(node).value()) * 2)}
        )
        assert query("number").value() == "246"

    def test_callback_may_return_overlay_node(self, rgb_tree):
        query = create_query(rgb_tree)
        rules = query("rule")
        rules.eq(0).replace(lambda node: rules.nodes[2])
        assert class_names(query) == "bgb"
        assert check_overlay_consistency(query.root) == []

    def test_callback_returning_same_node_keeps_tree(self, rgb_tree):
        query = create_query(rgb_tree)
        query("rule").replace(lambda node: node)
        assert query().get(0) == rgb_tree
        assert check_overlay_consistency(query.root) == []

    def test_replacement_children_are_queryable(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").eq(1).replace(lambda node: make_rule("z"))
        z = query("rule").eq(1)
        assert z.find("variable").parents_until("stylesheet").length() == 4
        assert z.parent().nodes == (query.root,)

    def test_requires_callable(self, rgb_tree):
        query = create_query(rgb_tree)
        with pytest.raises(InvalidArgumentError, match="callable"):
            query("rule").replace({"type": "rule", "value": []})


class TestMutationSequences:

    def test_sequence_keeps_overlay_consistent(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").eq(1).after(make_rule("z"))
        query("rule").first().before(make_rule("a"))
        query("space").eq(2).remove()
        query("rule").last().replace(lambda node: make_rule("y"))
        query("variable").first().after({"type": "space", "value": " "})
        assert check_overlay_consistency(query.root) == []
        assert class_names(query) == "argzy"
        for node in query().find():
            if node.parent is not None:
                assert node.parent.children[query(node).index()] is node

    def test_find_after_mutation(self, rgb_tree, make_rule):
        query = create_query(rgb_tree)
        query("rule").eq(2).remove()
        query("rule").eq(0).after(make_rule("z"))
        assert [query(node).value() for node in query("variable")] == ["_r", "_z", "_g"]
