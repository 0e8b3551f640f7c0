import pytest

from metricsfacade.label import Label, into_labels


def test_into_parts_round_trip():
    label = Label("service", "http")
    key, value = label.into_parts()
    assert (key, value) == ("service", "http")
    assert Label(key, value) == label


def test_from_pair_matches_constructor():
    assert Label.from_pair(("listener", "frontend")) == Label("listener", "frontend")


def test_from_pair_rejects_wrong_length():
    with pytest.raises(TypeError):
        Label.from_pair(("only",))
    with pytest.raises(TypeError):
        Label.from_pair(("a", "b", "c"))


def test_non_string_parts_rejected():
    with pytest.raises(TypeError):
        Label("key", 1)
    with pytest.raises(TypeError):
        Label.from_pair((None, "value"))


def test_labels_are_hashable_and_equal_by_content():
    labels = {Label("a", "b"), Label("a", "b"), Label("a", "c")}
    assert len(labels) == 2


def test_labels_order_by_key_then_value():
    unsorted = [Label("b", "a"), Label("a", "z"), Label("a", "b")]
    assert sorted(unsorted) == [Label("a", "b"), Label("a", "z"), Label("b", "a")]


def test_into_labels_none_is_empty():
    assert into_labels(None) == []
    assert into_labels([]) == []


def test_into_labels_from_pairs():
    pairs = [("request_type", "admin"), ("server", "web03")]
    result = into_labels(pairs)
    assert [label.into_parts() for label in result] == pairs


def test_into_labels_keeps_label_instances_and_order():
    first = Label("system", "http")
    second = Label("user", "joe")
    assert into_labels([first, ("x", "y"), second]) == [first, Label("x", "y"), second]


def test_into_labels_from_mapping_preserves_insertion_order():
    result = into_labels({"listener": "frontend", "server": "web03"})
    assert result == [Label("listener", "frontend"), Label("server", "web03")]


def test_into_labels_single_label():
    label = Label("k", "v")
    assert into_labels(label) == [label]


@pytest.mark.parametrize("bad", ["service", 42, [("a",)], [1]])
def test_into_labels_rejects_bad_input(bad):
    with pytest.raises(TypeError):
        into_labels(bad)