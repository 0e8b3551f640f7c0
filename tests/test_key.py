import pytest

from metricsfacade.key import KeyData, NameParts
from metricsfacade.label import Label

BORROWED_NAME = ("name",)
FOOBAR_NAME = ("foobar",)
LABELS = (Label("key", "value"),)


def test_key_ord_and_partialord():
    expected = [KeyData.from_name("aaaa"), KeyData.from_name("bbbb"), KeyData.from_name("cccc")]
    unsorted = [KeyData.from_name("bbbb"), KeyData.from_name("cccc"), KeyData.from_name("aaaa")]
    assert sorted(unsorted) == expected
    assert sorted(unsorted, reverse=True) == list(reversed(expected))


def test_keydata_eq_and_hash():
    keys = {}
    borrowed_basic = KeyData.from_parts(NameParts.from_names(BORROWED_NAME), [])
    owned_basic = KeyData.from_name("name")
    assert owned_basic == borrowed_basic

    assert keys.setdefault(owned_basic, 42) == 42
    assert keys.get(borrowed_basic) == 42

    borrowed_labels = KeyData.from_parts(NameParts.from_names(BORROWED_NAME), LABELS)
    owned_labels = KeyData.from_parts(list(BORROWED_NAME), list(LABELS))
    assert owned_labels == borrowed_labels

    assert owned_labels not in keys
    keys[owned_labels] = 43
    assert keys.get(borrowed_labels) == 43
    assert len(keys) == 2


def test_key_data_proper_display():
    assert str(KeyData.from_name("foobar")) == "KeyData(foobar)"

    key2 = KeyData.from_parts(FOOBAR_NAME, [Label("system", "http")])
    assert str(key2) == "KeyData(foobar, [system = http])"

    key3 = KeyData.from_parts(FOOBAR_NAME, [Label("system", "http"), Label("user", "joe")])
    assert str(key3) == "KeyData(foobar, [system = http, user = joe])"

    key4 = KeyData.from_parts(
        FOOBAR_NAME,
        [Label("black", "black"), Label("lives", "lives"), Label("matter", "matter")],
    )
    assert str(key4) == "KeyData(foobar, [black = black, lives = lives, matter = matter])"


def test_key_equality():
    owned_a = KeyData.from_name("a")
    owned_b = KeyData.from_name("b")
    static_a = KeyData.from_parts(NameParts.from_names(["a"]), None)
    static_b = KeyData.from_parts(NameParts.from_names(["b"]), None)

    assert owned_a == KeyData.from_name("a")
    assert owned_a == static_a
    assert static_b == owned_b
    assert owned_a != owned_b
    assert static_a != static_b
    assert owned_a != static_b
    assert owned_b != static_a


def test_name_parts_to_string_concatenates_parts():
    name = NameParts.from_names(["part1", "part2"])
    assert str(name) == "part1part2"
    assert f"{name}" == "part1part2"


def test_name_parts_append_and_prepend():
    name = NameParts.from_name("mid")
    assert list(name.append("end").parts()) == ["mid", "end"]
    assert list(name.prepend("start").parts()) == ["start", "mid"]
    assert list(name.parts()) == ["mid"]


def test_name_parts_rejects_non_strings():
    with pytest.raises(TypeError):
        NameParts.from_name(5)
    with pytest.raises(TypeError):
        NameParts.from_names("abc")


def test_key_append_and_prepend_name_keep_labels():
    key = KeyData.from_parts("svc", {"env": "prod"})
    appended = key.append_name("latency")
    prepended = key.prepend_name("app")
    assert list(appended.name.parts()) == ["svc", "latency"]
    assert list(prepended.name.parts()) == ["app", "svc"]
    assert list(appended.labels()) == [Label("env", "prod")]
    assert list(prepended.labels()) == [Label("env", "prod")]


def test_into_parts():
    key = KeyData.from_parts("requests", [("method", "GET")])
    name, labels = key.into_parts()
    assert name == NameParts.from_name("requests")
    assert labels == [Label("method", "GET")]


def test_with_extra_labels():
    key = KeyData.from_parts("requests", [("a", "1")])
    assert key.with_extra_labels([]) == key
    extended = key.with_extra_labels([Label("b", "2")])
    assert list(extended.labels()) == [Label("a", "1"), Label("b", "2")]
    assert list(key.labels()) == [Label("a", "1")]


def test_label_order_matters_for_equality():
    first = KeyData.from_parts("m", [("a", "1"), ("b", "2")])
    second = KeyData.from_parts("m", [("b", "2"), ("a", "1")])
    assert first != second


def test_coerce():
    key = KeyData.from_name("x")
    assert KeyData.coerce(key) is key
    assert KeyData.coerce("x") == key
    assert KeyData.coerce(("x", {"k": "v"})) == KeyData.from_parts("x", [Label("k", "v")])
    assert KeyData.coerce(NameParts.from_name("x")) == key
    with pytest.raises(TypeError):
        KeyData.coerce(42)


def test_ordering_falls_back_to_labels():
    plain = KeyData.from_name("m")
    labelled = KeyData.from_parts("m", [("a", "1")])
    assert sorted([labelled, plain]) == [plain, labelled]