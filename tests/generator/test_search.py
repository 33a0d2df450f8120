"""Tests for searching accepted entities."""

import pytest

from lambdagen.core.models import DomainConfig, Entity, Kind, LambdaType, Signature
from lambdagen.generator import GeneratorCache, generate, search, search_all


@pytest.fixture
def entities():
    signatures = [
        Signature.of(["int"], "int"),
        Signature.of(["object", "int"], "int"),
        Signature.of(["object", "int"], "void", throwing=True),
        Signature.of(["long"], "boolean"),
        Signature.of([], "double"),
        Signature.of(["object"], "object"),
    ]
    return [Entity.from_signature(s) for s in signatures]


class TestSearchAll:
    """Tests for search_all()."""

    def test_no_filters_returns_everything(self, entities):
        assert search_all(entities) == entities

    def test_by_type(self, entities):
        found = search_all(entities, lambda_type=LambdaType.OPERATOR)
        assert [e.signature for e in found] == [Signature.of(["int"], "int")]

    def test_type_accepts_strings(self, entities):
        assert search_all(entities, lambda_type="operator") == search_all(
            entities, lambda_type=LambdaType.OPERATOR
        )
        assert len(search_all(entities, lambda_type="function")) == 2

    def test_unknown_type(self, entities):
        with pytest.raises(ValueError):
            search_all(entities, lambda_type="comparator")

    def test_by_arity_and_throwing(self, entities):
        found = search_all(entities, arity=2, throwing=True)
        assert [e.return_kind for e in found] == [Kind.VOID]

    def test_by_primitive(self, entities):
        found = search_all(entities, primitive=False)
        assert [e.signature for e in found] == [Signature.of(["object"], "object")]
        assert len(search_all(entities, primitive=True)) == 5

    def test_return_kind_accepts_strings(self, entities):
        found = search_all(entities, return_kind="boolean")
        assert [e.lambda_type for e in found] == [LambdaType.PREDICATE]

    def test_parameter_wildcards(self, entities):
        found = search_all(entities, parameter_kinds=["obj", None])
        assert len(found) == 2

        found = search_all(entities, parameter_kinds=[None, "int"])
        assert [e.arity for e in found] == [2, 2]

    def test_parameter_filter_longer_than_arity(self, entities):
        assert search_all(entities, parameter_kinds=["int", None]) == []

    def test_negative_arity(self, entities):
        with pytest.raises(ValueError, match="negative"):
            search_all(entities, arity=-1)

    def test_unknown_kind(self, entities):
        with pytest.raises(ValueError, match="unknown kind"):
            search_all(entities, return_kind="string")

    def test_defaults_to_process_cache(self, monkeypatch, single_int_domain):
        cache = GeneratorCache()
        monkeypatch.setattr(GeneratorCache, "_instance", cache)
        generate(single_int_domain)

        found = search_all(lambda_type=LambdaType.OPERATOR)
        assert [e.derived_name for e in found] == ["IntUnaryOperator"]


class TestSearch:
    """Tests for search()."""

    def test_returns_first_match(self, entities):
        found = search(entities, arity=2)
        assert found is entities[1]

    def test_no_match(self, entities):
        assert search(entities, arity=3) is None

    def test_over_generated_set(self, cache):
        config = DomainConfig(
            arity_range=(0, 2),
            parameter_kinds=["object", "int"],
            return_kinds=["void", "int"],
            throwing_enabled=True,
        )
        generate(config, cache=cache)

        found = search(
            cache.get_accepted(),
            lambda_type=LambdaType.CONSUMER,
            throwing=True,
            parameter_kinds=["object", "int"],
        )
        assert found.derived_name == "ThrowableObjIntConsumer"
