"""Tests for Option-powered traversal of JSON documents."""

from functools import partial

import pytest

from monadic import JSONNode, JSONType, MonadicJSON, Nothing, P, Some, dig, parse
from monadic.json import Index, Key, resolve_step, unjson
from monadic.testing import assert_nothing, assert_some


def test_dig_resolves_nested_path(applications: MonadicJSON) -> None:
    result = applications.dig("applications", 0, "name")

    assert not result.is_none()
    assert result.unwrap(JSONNode).str == "cool programming"

    result = applications.dig("applications", 1, "examples", 1)
    assert result.unwrap(JSONNode).integer == 2


def test_dig_out_of_bounds(applications: MonadicJSON) -> None:
    assert_nothing(applications.dig("applications", 6))


def test_dig_negative_index_never_wraps(applications: MonadicJSON) -> None:
    assert_nothing(applications.dig("applications", -1))
    assert_nothing(applications.dig("applications", -1, "test", "even more", 8))


def test_dig_containers(applications: MonadicJSON) -> None:
    assert applications.dig("applications", 1).unwrap(JSONNode).type is JSONType.OBJECT
    assert applications.dig("applications").unwrap(JSONNode).type is JSONType.ARRAY


def test_dig_mismatched_step_kinds(applications: MonadicJSON) -> None:
    assert_nothing(applications.dig("applications", "test"))
    assert_nothing(applications.dig(0))
    assert_nothing(applications.dig("language", 0))
    assert_nothing(applications.dig("language", "length"))


def test_dig_missing_key(applications: MonadicJSON) -> None:
    assert_nothing(applications.dig("missing"))
    assert_nothing(applications.dig("applications", 0, "missing"))


def test_dig_without_steps_returns_root(applications: MonadicJSON) -> None:
    assert applications.dig() == Some(applications.root)


def test_dig_null_leaf_is_present(scalars: MonadicJSON) -> None:
    result = scalars.dig("nada")

    assert result.is_some()
    assert result.unwrap(JSONNode).is_null
    assert_nothing(scalars.dig("missing"))


def test_dig_accepts_path_objects(applications: MonadicJSON) -> None:
    by_path = applications.dig(P.applications[1].examples[2])

    assert by_path == applications.dig("applications", 1, "examples", 2)
    assert by_path.unwrap(JSONNode).integer == 3


def test_dig_decomposes_into_flatmaps(applications: MonadicJSON) -> None:
    step_b = partial(resolve_step, Index(0))

    chained = applications.dig("applications").flatmap(step_b, target=JSONNode)

    assert chained == applications.dig("applications", 0)
    assert_nothing(
        applications.dig("missing").flatmap(step_b, target=JSONNode)
    )


def test_resolve_step_table() -> None:
    array = JSONNode.from_python([10, 20])
    obj = JSONNode.from_python({"k": 1})

    assert resolve_step(Index(1), array) == Some(JSONNode.from_python(20))
    assert_nothing(resolve_step(Index(2), array))
    assert_nothing(resolve_step(Index(-1), array))
    assert_nothing(resolve_step(Key("k"), array))
    assert resolve_step(Key("k"), obj) == Some(JSONNode.from_python(1))
    assert_nothing(resolve_step(Key("x"), obj))
    assert_nothing(resolve_step(Index(0), obj))
    assert_nothing(resolve_step(Index(0), JSONNode.from_python("text")))


def test_dig_with_cast_scalars(applications: MonadicJSON) -> None:
    result = applications.dig_with_cast("applications", 0, "name")

    assert not result.is_none()
    assert result.unwrap(str) == "cool programming"
    assert result == Some("cool programming")

    assert applications.dig_with_cast("applications", 1, "examples", 1) == Some(2)


def test_dig_with_cast_failures(applications: MonadicJSON) -> None:
    assert_nothing(applications.dig_with_cast("applications", 6))
    assert_nothing(applications.dig_with_cast("applications", -1, "test", "even more", 8))
    assert_nothing(applications.dig_with_cast("applications", "test"))


def test_dig_with_cast_leaves_containers_as_nodes(applications: MonadicJSON) -> None:
    obj = applications.dig_with_cast("applications", 1).unwrap(JSONNode)
    arr = applications.dig_with_cast("applications").unwrap(JSONNode)

    assert obj.type is JSONType.OBJECT
    assert arr.type is JSONType.ARRAY


def test_dig_with_cast_null_bool_float(scalars: MonadicJSON) -> None:
    result = scalars.dig_with_cast("nada")

    assert not result.is_none()
    assert result.unwrap(None) is None
    assert result == Some(None)

    assert scalars.dig_with_cast("bools", 0).unwrap(bool) is True
    assert scalars.dig_with_cast("bools", 1).unwrap(bool) is False
    assert scalars.dig_with_cast("float").unwrap(float) == pytest.approx(10.7)
    assert scalars.dig_with_cast("float").unwrap_or(0) == 0


def test_dig_with_cast_unsigned() -> None:
    doc = parse('{"big": 18446744073709551615}')

    assert doc.dig("big").unwrap(JSONNode).uinteger == 2**64 - 1
    assert doc.dig_with_cast("big").unwrap(int) == 2**64 - 1


def test_unjson() -> None:
    assert unjson(JSONNode.from_python("s")) == Some("s")
    assert unjson(JSONNode.from_python(None)) == Some(None)
    node = JSONNode.from_python([1])
    assert unjson(node).unwrap(JSONNode) is node


def test_unwrap_on_failed_dig_raises_distinct_errors(applications: MonadicJSON) -> None:
    from monadic import CannotUnwrapNone, TypeMismatch

    with pytest.raises(CannotUnwrapNone):
        applications.dig_with_cast("applications", 6).unwrap(int)
    with pytest.raises(TypeMismatch):
        applications.dig_with_cast("language").unwrap(int)


def test_module_level_dig_accepts_nodes(applications: MonadicJSON) -> None:
    assert dig(applications.root, "language") == applications.dig("language")
    assert dig(applications, "language") == Some(JSONNode.from_python("D"))


def test_bool_step_is_a_programming_error(applications: MonadicJSON) -> None:
    with pytest.raises(TypeError):
        applications.dig("applications", True)


def test_traversal_does_not_mutate_document(applications: MonadicJSON) -> None:
    before = applications.to_python()

    applications.dig("applications", 6)
    applications.dig_with_cast("applications", 0, "name")

    assert applications.to_python() == before


def test_document_helpers(applications: MonadicJSON) -> None:
    assert applications.has_key("language") is True
    assert applications.has_key("nope") is False
    assert MonadicJSON.from_python(applications.to_python()) == applications
    assert parse(applications.dumps()) == applications
    assert assert_some(applications.dig_with_cast("language"), "D", str) == "D"
    assert Nothing() != applications.dig("nope")


def test_dig_results_on_equal_numbers_compare_equal() -> None:
    ints = parse('{"x": 2, "big": 9223372036854775808}')
    floats = parse('{"x": 2.0, "big": 9.223372036854775808e18}')

    assert ints.dig("x") == floats.dig("x")
    assert ints.dig("big") == floats.dig("big")
    assert ints.dig("x") != parse('{"x": true}').dig("x")


def test_parse_deeply_nested_document() -> None:
    doc = parse("[" * 600 + "]" * 600)

    innermost = doc.dig(*([0] * 599))
    assert innermost.unwrap(JSONNode).array == ()
    assert_nothing(doc.dig(*([0] * 600)))
