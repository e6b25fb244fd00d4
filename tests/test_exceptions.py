"""Tests for the exception hierarchy and its message formatting."""

import pytest

from frozen_collectors.exceptions import (
    AbstractException,
    FrozenCollectorsError,
    ImproperUsageError,
    InvalidParamError,
    ParamError,
    UnsupportedOperationError,
)


class CollectionError(FrozenCollectorsError):
    content = "The elements could not be collected."


class CollectorUsageError(ImproperUsageError):
    default_klass = "Collector"


class TestHierarchy:
    def test_subclasses(self):
        assert issubclass(FrozenCollectorsError, AbstractException)
        assert issubclass(InvalidParamError, ParamError)
        assert issubclass(ParamError, ImproperUsageError)
        assert issubclass(UnsupportedOperationError, FrozenCollectorsError)
        assert issubclass(UnsupportedOperationError, TypeError)

    def test_unexpected_parameters(self):
        with pytest.raises(TypeError, match="unexpected parameters foo"):
            FrozenCollectorsError(foo=1)


class TestMessages:
    def test_static_content(self):
        assert str(CollectionError()) == "The elements could not be collected."

    def test_provided_message_takes_precedence(self):
        assert str(CollectionError(message="Nothing to collect.")) == (
            "Nothing to collect.")

    def test_prefix(self):
        exc = CollectionError(prefix="Collection failed")
        assert str(exc) == (
            "Collection failed: The elements could not be collected.")

    def test_prefix_without_content(self):
        assert str(FrozenCollectorsError(prefix="Collection failed:")) == (
            "Collection failed.")

    def test_detail(self):
        exc = CollectionError(detail=["The iterable raised.", "Twice."])
        assert str(exc) == (
            "The elements could not be collected.\n"
            "--> The iterable raised.\n"
            "--> Twice."
        )

    def test_default_attribute(self):
        exc = CollectorUsageError(message="Bad recipe.")
        assert exc.klass == "Collector"
        assert str(exc) == (
            "Improper initialization of class Collector: Bad recipe.")

    def test_improper_usage_prefix_choices(self):
        assert str(ImproperUsageError(func="collect", message="Bad.")) == (
            "Improper usage of method collect: Bad.")
        assert str(ImproperUsageError(
            func="collect",
            klass=dict,
            message="Bad."
        )) == "Improper usage of method collect on class dict: Bad."
        assert str(ImproperUsageError(message="Bad.")) == "Bad."


class TestInvalidParamError:
    def test_no_context(self):
        assert str(InvalidParamError()) == (
            "Received invalid value for param(s).")

    def test_value_only(self):
        assert str(InvalidParamError(value=[1])) == (
            "Received invalid value [1].")

    def test_param_and_value(self):
        assert str(InvalidParamError(param="factory", value=0)) == (
            "Received invalid value 0 for param(s) factory.")

    def test_valid_types(self):
        exc = InvalidParamError(
            param="factory",
            value=0,
            valid_types=(list, "callable")
        )
        assert str(exc) == (
            "Received invalid value 0 for param(s) factory, expected list or "
            "callable."
        )

    def test_multiple_params(self):
        exc = ParamError(param=["supplier", "accumulator"], conjunction="or")
        assert exc.humanized_param == "supplier or accumulator"


class TestUnsupportedOperationError:
    def test_messages(self):
        assert str(UnsupportedOperationError()) == (
            "The collection is unmodifiable.")
        assert str(UnsupportedOperationError(operation="pop")) == (
            "The operation `pop` is not supported, the collection is "
            "unmodifiable."
        )
        assert str(UnsupportedOperationError(
            operation="pop",
            klass="UnmodifiableList"
        )) == (
            "The operation `pop` is not supported by UnmodifiableList, it is "
            "unmodifiable."
        )

    def test_caught_as_type_error(self):
        with pytest.raises(TypeError):
            raise UnsupportedOperationError(operation="append")
