"""Tests for derived interface names."""

import pytest

from lambdagen.core.models import Signature
from lambdagen.generator.naming import check_shape, derive_name, parameter_prefix


class TestDeriveName:
    """Tests for naming rules."""

    @pytest.mark.parametrize(
        "params,ret,expected",
        [
            ([], "void", "Runnable"),
            ([], "object", "Supplier"),
            ([], "short", "ShortSupplier"),
            (["object"], "object", "Function"),
            (["object", "object", "object"], "object", "TriFunction"),
            (["byte"], "object", "ByteFunction"),
            (["object", "int", "int"], "object", "ObjBiIntFunction"),
            (["object", "int", "int"], "int", "ObjBiIntToIntFunction"),
            (["object", "object", "byte"], "float", "BiObjByteToFloatFunction"),
            (["object", "object"], "char", "ToCharBiFunction"),
            (["object"], "float", "ToFloatFunction"),
            (["float"], "int", "FloatToIntFunction"),
            (["char", "char", "char"], "byte", "TriCharToByteFunction"),
            (["char"], "char", "CharUnaryOperator"),
            (["boolean", "boolean"], "boolean", "BooleanBinaryOperator"),
            (["short", "short", "short"], "short", "ShortTernaryOperator"),
            (["byte"], "boolean", "BytePredicate"),
            (["object", "object", "short"], "boolean", "BiObjShortPredicate"),
            (["object", "object", "float"], "void", "BiObjFloatConsumer"),
            (["boolean", "boolean", "boolean"], "void", "TriBooleanConsumer"),
        ],
    )
    def test_names(self, params, ret, expected):
        assert derive_name(Signature.of(params, ret)) == expected

    def test_throwing_prefix(self):
        signature = Signature.of(["object", "float"], "short", throwing=True)
        assert derive_name(signature) == "ThrowableObjFloatToShortFunction"
        assert derive_name(Signature.of([], "boolean", throwing=True)) == "ThrowableBooleanSupplier"

    def test_unsupported_shape_raises(self):
        with pytest.raises(ValueError, match="follows a primitive"):
            derive_name(Signature.of(["int", "object"], "int"))


class TestCheckShape:
    """Tests for parameter shape checks."""

    def test_supported(self):
        assert check_shape(Signature.of(["object", "object", "long"], "void")) is None

    def test_object_after_primitive(self):
        problem = check_shape(Signature.of(["int", "object"], "int"))
        assert problem == "object parameter at position 2 follows a primitive parameter"

    def test_mixed_primitives(self):
        problem = check_shape(Signature.of(["int", "long"], "void"))
        assert problem == "mixed primitive parameter kinds (int, long)"

    def test_arity_above_maximum(self):
        signature = Signature.of(["int"] * 4, "int")
        assert "exceeds the maximum" in check_shape(signature)

    def test_parameter_prefix(self):
        sig = Signature.of(["object", "int", "int"], "int")
        assert parameter_prefix(sig.parameter_kinds) == "ObjBiInt"
