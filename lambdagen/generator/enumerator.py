"""Enumeration driver: walks a domain and commits the accepted set.

Order of a run:
    1. validate_domain() - contradictory domains abort before any seeding
    2. enumerate_signatures() - deterministic walk over the domain
    3. seed + dedup - signatures the standard library already has are skipped
    4. Chain.run() - per entity, failures are collected, not raised
    5. merge + commit - uniqueness enforced, cache replaced wholesale
"""

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator

from pydantic import BaseModel, Field

from ..core.errors import DomainConfigurationError
from ..core.models import (
    DomainConfig,
    Entity,
    EquivalentMatch,
    GenerationFailure,
    GenerationReport,
    Signature,
)
from ..validation import validate_domain
from .cache import GeneratorCache
from .chain import Chain, default_chain
from .stages import StageContext

logger = logging.getLogger(__name__)

COMMIT_STAGE = "commit"


class _BatchResult(BaseModel):
    """What one worker produced for its slice of the seeds."""

    accepted: list[Entity] = Field(default_factory=list)
    equivalents: list[EquivalentMatch] = Field(default_factory=list)
    failures: list[GenerationFailure] = Field(default_factory=list)


def enumerate_signatures(config: DomainConfig) -> Iterator[Signature]:
    """Yield every cell of the domain in a fixed order.

    Arity ascending, then parameter-kind tuples in product order, then
    return kinds, then non-throwing before throwing.
    """
    for arity in config.arities:
        for params in itertools.product(config.parameter_kinds, repeat=arity):
            for return_kind in config.return_kinds:
                for throwing in config.throwing_options:
                    yield Signature(
                        arity=arity,
                        parameter_kinds=params,
                        return_kind=return_kind,
                        throwing=throwing,
                    )


def seed_entities(config: DomainConfig, context: StageContext) -> list[Entity]:
    """Build seed entities, linking each to its standard-library equivalent."""
    return [
        Entity.from_signature(signature, equivalent_of=context.equivalents.lookup(signature))
        for signature in enumerate_signatures(config)
    ]


def _process_batch(
    seeds: list[Entity],
    chain: Chain,
    context: StageContext,
    extend_standard: bool,
) -> _BatchResult:
    batch = _BatchResult()
    for entity in seeds:
        if entity.equivalent_of is not None and not extend_standard:
            batch.equivalents.append(
                EquivalentMatch(signature=entity.signature, name=entity.equivalent_of)
            )
            continue

        failure = chain.run(entity, context)
        if failure is None:
            batch.accepted.append(entity)
        else:
            batch.failures.append(failure)
    return batch


def _split(seeds: list[Entity], parts: int) -> list[list[Entity]]:
    size, remainder = divmod(len(seeds), parts)
    chunks, start = [], 0
    for index in range(parts):
        end = start + size + (1 if index < remainder else 0)
        chunks.append(seeds[start:end])
        start = end
    return [chunk for chunk in chunks if chunk]


def _merge(batches: list[_BatchResult], report: GenerationReport) -> None:
    """Fold worker results into the report, keeping the first of any duplicate."""
    signatures: set[Signature] = set()
    names: dict[str, Signature] = {}

    for batch in batches:
        report.equivalents.extend(batch.equivalents)
        report.failures.extend(batch.failures)
        for entity in batch.accepted:
            signature = entity.signature
            if signature in signatures:
                report.failures.append(
                    GenerationFailure(
                        stage=COMMIT_STAGE,
                        signature=signature,
                        reason="duplicate signature",
                    )
                )
                continue
            if entity.derived_name is not None and entity.derived_name in names:
                report.failures.append(
                    GenerationFailure(
                        stage=COMMIT_STAGE,
                        signature=signature,
                        reason=(
                            f"derived name {entity.derived_name} already used by "
                            f"{names[entity.derived_name]}"
                        ),
                    )
                )
                continue
            signatures.add(signature)
            if entity.derived_name is not None:
                names[entity.derived_name] = signature
            report.accepted.append(entity)


def generate(
    config: DomainConfig,
    chain: Chain | None = None,
    cache: GeneratorCache | None = None,
    workers: int = 1,
) -> GenerationReport:
    """Run the generation pipeline over a domain.

    Args:
        config: Domain to enumerate
        chain: Stage chain (defaults to the production chain)
        cache: Cache to read equivalents from and commit to
               (defaults to the process-wide instance)
        workers: Number of threads to spread entities over

    Returns:
        GenerationReport with accepted entities, equivalents and failures

    Raises:
        DomainConfigurationError: If the domain is invalid
    """
    validation = validate_domain(config)
    if not validation.valid:
        raise DomainConfigurationError(validation.errors)
    for warning in validation.warnings:
        logger.warning(f"[generate] {warning}")

    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    chain = chain or default_chain()
    cache = cache or GeneratorCache.get_instance()
    context = StageContext(equivalents=cache.get_equivalents())

    seeds = seed_entities(config, context)
    logger.info(
        f"[generate] {len(seeds)} seeds, chain={chain.stage_ids}, workers={workers}"
    )

    chunks = _split(seeds, workers) if workers > 1 else [seeds]
    if len(chunks) > 1:
        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            batches = list(
                executor.map(
                    lambda chunk: _process_batch(chunk, chain, context, config.extend_standard),
                    chunks,
                )
            )
    else:
        batches = [_process_batch(seeds, chain, context, config.extend_standard)]

    report = GenerationReport(seed_count=len(seeds))
    _merge(batches, report)
    cache.set_accepted(report.accepted)

    logger.info(
        f"[generate] accepted={report.accepted_count} "
        f"equivalent={report.equivalent_count} rejected={report.rejected_count}"
    )
    return report
