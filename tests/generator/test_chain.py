"""Tests for chain construction and the per-entity driver."""

import pytest

from lambdagen.core.errors import (
    ChainConfigurationError,
    InvalidTransitionError,
    NotProcessableError,
)
from lambdagen.core.models import Entity, EntityStatus, Signature, StageResult
from lambdagen.generator.chain import Chain, default_chain
from lambdagen.generator.stages import (
    CollisionStage,
    NamingStage,
    ShapeStage,
    Stage,
    StageContext,
)


class RecordingStage(Stage):
    """Stage returning a fixed result and remembering what it saw."""

    def __init__(self, stage_id, result=None, requires=(), provides=()):
        self.stage_id = stage_id
        self.result = result if result is not None else StageResult.proceed()
        self.requires = frozenset(requires)
        self.provides = frozenset(provides)
        self.calls = []

    def process(self, entity, context):
        self.calls.append(entity.signature)
        return self.result


class RaisingStage(Stage):
    stage_id = "raising"

    def __init__(self, error):
        self.error = error

    def process(self, entity, context):
        raise self.error


class ForgetfulStage(Stage):
    stage_id = "forgetful"

    def process(self, entity, context):
        entity.derived_name = "Forgotten"


def _seed(params=("int",), ret="int"):
    return Entity.from_signature(Signature.of(list(params), ret))


class TestChainConfiguration:
    """Tests for stage order validation."""

    def test_empty_chain(self):
        with pytest.raises(ChainConfigurationError, match="at least one stage"):
            Chain([])

    def test_duplicate_ids(self):
        with pytest.raises(ChainConfigurationError, match="duplicate stage id 'a'"):
            Chain([RecordingStage("a"), RecordingStage("a")])

    def test_requirement_not_met(self):
        with pytest.raises(ChainConfigurationError, match="collision"):
            Chain([ShapeStage(), CollisionStage(), NamingStage()])

    def test_not_a_stage(self):
        with pytest.raises(ChainConfigurationError, match="not a Stage"):
            Chain([ShapeStage(), "naming"])

    def test_missing_stage_id(self):
        with pytest.raises(ChainConfigurationError, match="no stage_id"):
            Chain([RecordingStage("")])

    def test_default_chain(self):
        assert default_chain().stage_ids == ["shape", "naming", "collision"]


class TestChainRun:
    """Tests for Chain.run."""

    def test_accepts_after_last_stage(self):
        first, second = RecordingStage("first"), RecordingStage("second")
        entity = _seed()

        failure = Chain([first, second]).run(entity, StageContext())

        assert failure is None
        assert entity.status is EntityStatus.ACCEPTED
        assert first.calls == second.calls == [entity.signature]

    def test_default_chain_names_entity(self):
        entity = _seed(("object", "int", "int"), "int")
        assert default_chain().run(entity, StageContext()) is None
        assert entity.derived_name == "ObjBiIntToIntFunction"

    def test_accept_short_circuits(self):
        early = RecordingStage("early", StageResult.accept())
        later = RecordingStage("later")
        entity = _seed()

        failure = Chain([early, later]).run(entity, StageContext())

        assert failure is None
        assert entity.status is EntityStatus.ACCEPTED
        assert later.calls == []

    def test_reject_result(self):
        rejecting = RecordingStage("picky", StageResult.reject("not today"))
        later = RecordingStage("later")
        entity = _seed()

        failure = Chain([rejecting, later]).run(entity, StageContext())

        assert entity.status is EntityStatus.REJECTED
        assert failure.stage == "picky"
        assert failure.signature == entity.signature
        assert failure.reason == "not today"
        assert failure.cause is None
        assert later.calls == []

    def test_not_processable_error(self):
        entity = _seed()
        cause = KeyError("kind")
        error = NotProcessableError("raising", entity.signature, "lookup failed", cause=cause)

        failure = Chain([RaisingStage(error)]).run(entity, StageContext())

        assert entity.status is EntityStatus.REJECTED
        assert failure.stage == "raising"
        assert failure.reason == "lookup failed"
        assert failure.cause == repr(cause)

    def test_other_errors_propagate(self):
        entity = _seed()
        with pytest.raises(RuntimeError):
            Chain([RaisingStage(RuntimeError("bug"))]).run(entity, StageContext())

    def test_missing_result_is_an_error(self):
        with pytest.raises(TypeError, match="forgetful"):
            Chain([ForgetfulStage()]).run(_seed(), StageContext())

    def test_entity_runs_once(self):
        chain = Chain([RecordingStage("only")])
        entity = _seed()
        chain.run(entity, StageContext())
        with pytest.raises(InvalidTransitionError):
            chain.run(entity, StageContext())
