"""Tests for the equivalence registry."""

import pytest
from pydantic import ValidationError

from lambdagen.core.models import EquivalenceEntry, EquivalenceRegistry, Signature


class TestEquivalenceRegistry:
    """Tests for registry lookups and invariants."""

    def test_lookup(self, int_unary_registry, int_unary_signature):
        assert int_unary_registry.lookup(int_unary_signature) == "java.util.function.IntUnaryOperator"
        assert int_unary_signature in int_unary_registry
        assert len(int_unary_registry) == 1

    def test_lookup_miss(self, int_unary_registry):
        throwing = Signature.of(["int"], "int", throwing=True)
        assert int_unary_registry.lookup(throwing) is None
        assert throwing not in int_unary_registry

    def test_simple_names(self, int_unary_registry):
        assert int_unary_registry.simple_names == frozenset({"IntUnaryOperator"})

    def test_empty(self):
        registry = EquivalenceRegistry()
        assert len(registry) == 0
        assert registry.lookup(Signature.of([], "void")) is None

    def test_duplicate_signature_rejected(self, int_unary_signature):
        with pytest.raises(ValueError, match="duplicate signature"):
            EquivalenceRegistry(
                entries=(
                    EquivalenceEntry(signature=int_unary_signature, name="a.IntUnaryOperator"),
                    EquivalenceEntry(signature=int_unary_signature, name="b.IntUnaryOperator"),
                )
            )

    def test_immutable(self, int_unary_registry):
        with pytest.raises(ValidationError):
            int_unary_registry.entries = ()
