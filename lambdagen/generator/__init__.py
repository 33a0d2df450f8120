"""Generator pipeline for functional interface variants.

The generator enumerates a domain of candidate signatures, drops the ones
the standard library already provides, and pushes the rest through an
ordered chain of stages.

Pipeline:
    Step 0: validate_domain() - Reject contradictory domains up front
    Step 1: enumerate_signatures() - Walk the domain deterministically
    Step 2: seed_entities() - Link seeds to standard-library equivalents
    Step 3: Chain.run() - shape -> naming -> collision, per entity
    Step 4: generate() - Collect failures, merge, commit to GeneratorCache

The renderer then reads GeneratorCache.get_instance().get_accepted() and
uses descriptors.describe() for template metadata.
"""

from .cache import GeneratorCache
from .chain import Chain, default_chain
from .descriptors import describe, functional_method_name, generic_type_string
from .enumerator import enumerate_signatures, generate, seed_entities
from .equivalents import load_equivalents, parse_equivalents
from .naming import check_shape, derive_name
from .search import search, search_all
from .stages import (
    CollisionStage,
    NamingStage,
    ShapeStage,
    Stage,
    StageContext,
    default_stages,
)

__all__ = [
    # Cache
    "GeneratorCache",
    # Chain and stages
    "Chain",
    "default_chain",
    "Stage",
    "StageContext",
    "ShapeStage",
    "NamingStage",
    "CollisionStage",
    "default_stages",
    # Enumeration
    "enumerate_signatures",
    "seed_entities",
    "generate",
    # Seed data
    "load_equivalents",
    "parse_equivalents",
    # Naming and metadata
    "check_shape",
    "derive_name",
    "describe",
    "functional_method_name",
    "generic_type_string",
    # Search
    "search",
    "search_all",
]
