"""Global fixtures for lambdagen tests."""

import pytest

from lambdagen.core.models import (
    DomainConfig,
    EquivalenceEntry,
    EquivalenceRegistry,
    Kind,
    Signature,
)
from lambdagen.generator import GeneratorCache, load_equivalents


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep persisted settings out of the user's home directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("LAMBDAGEN_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def cache():
    """A fresh cache, independent of the process-wide instance."""
    return GeneratorCache()


@pytest.fixture(scope="session")
def jdk_registry():
    """The bundled java.util.function registry."""
    return load_equivalents()


@pytest.fixture
def jdk_cache(jdk_registry):
    """A fresh cache seeded with the bundled registry."""
    cache = GeneratorCache()
    cache.set_equivalents(jdk_registry)
    return cache


@pytest.fixture
def int_unary_signature():
    return Signature(arity=1, parameter_kinds=[Kind.INT], return_kind=Kind.INT)


@pytest.fixture
def int_unary_registry(int_unary_signature):
    """Registry holding only IntUnaryOperator."""
    return EquivalenceRegistry(
        entries=(
            EquivalenceEntry(
                signature=int_unary_signature,
                name="java.util.function.IntUnaryOperator",
            ),
        )
    )


@pytest.fixture
def single_int_domain():
    """One cell: (int) -> int, non-throwing."""
    return DomainConfig(
        arity_range=(1, 1),
        parameter_kinds=["int"],
        return_kinds=["int"],
        throwing_enabled=False,
    )


@pytest.fixture
def mixed_domain():
    """Arity 1-2 over {int, object} returning int: six cells."""
    return DomainConfig(
        arity_range=(1, 2),
        parameter_kinds=["int", "object"],
        return_kinds=["int"],
        throwing_enabled=False,
    )


@pytest.fixture
def full_domain():
    """Every kind, arity 0-3, throwing on."""
    return DomainConfig(
        arity_range=(0, 3),
        parameter_kinds=[k for k in Kind if k is not Kind.VOID],
        return_kinds=list(Kind),
        throwing_enabled=True,
    )
