"""Tests for error factories.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from base_error import (
    BaseError,
    ErrorFactory,
    FactoryConfigurationError,
    factory,
    factory_stack,
    is_system,
    new,
    system_factory,
    system_factory_stack,
    wrap_factory,
    wrap_factory_stack,
)
from base_error.factory import factory_format

UserNotFound = factory("USER_NOT_FOUND", "user {} not found in {}")


class TestFactoryFormat:
    """Test template parsing."""

    def test_code_only_defaults_to_single_placeholder(self) -> None:
        """Test that a lone code gets ``{}`` template."""
        code, formatter = factory_format("E1")

        assert code == "E1"
        assert formatter("x") == "x"
        assert formatter() == ""

    @pytest.mark.parametrize(
        ("template", "values", "expected"),
        [
            ("{} and {}", ("a", "b"), "a and b"),
            ("{} and {}", ("a",), "a and "),
            ("{} and {}", (), " and "),
            ("{} and {}", ("a", "b", "c"), "a and b"),
            ("no placeholders", ("a",), "no placeholders"),
            ("{}{}", (1, None), "1None"),
            ("100% {name} {}", ("done",), "100% {name} done"),
        ],
    )
    def test_formatting(
        self,
        template: str,
        values: tuple[object, ...],
        expected: str,
    ) -> None:
        """Test positional substitution with padding."""
        _, formatter = factory_format("E1", template)

        assert formatter(*values) == expected

    @pytest.mark.parametrize(
        "args",
        [(), ("E1", "{}", "extra"), ("a", "b", "c", "d")],
    )
    def test_wrong_argument_count(self, args: tuple[str, ...]) -> None:
        """Test that arity misuse fails at build time."""
        with pytest.raises(FactoryConfigurationError):
            factory_format(*args)

        with pytest.raises(TypeError):
            factory(*args)


class TestFactory:
    """Test factory constructors."""

    def test_factory_default_template(self) -> None:
        """Test ``factory("E1")("x")``."""
        err = factory("E1")("x")

        assert isinstance(err, BaseError)
        assert str(err) == "[E1] x"

    def test_factory_pads_missing_values(self) -> None:
        """Test that under supplied values never raise."""
        err = factory("E1", "{} and {}")("a")

        assert err.msg == "a and "

    def test_module_level_factory(self) -> None:
        """Test factory built once and called many times."""
        first = UserNotFound("john", "ldap")
        second = UserNotFound("jane")

        assert first is not second
        assert first.msg == "user john not found in ldap"
        assert second.msg == "user jane not found in "
        assert first.code == second.code == "USER_NOT_FOUND"

    def test_classification(self) -> None:
        """Test business and system factories."""
        assert factory("E1")("x").system is False
        assert factory_stack(1, "E1")("x").system is False
        assert system_factory("E1")("x").system is True
        assert system_factory_stack(1, "E1")("x").system is True

        assert is_system(factory("E1")("x")) is True
        assert is_system(system_factory("E1")("x")) is False

    def test_plain_factory_has_no_stack(self) -> None:
        """Test that plain factories skip capture."""
        assert factory("E1")("x").stack is None
        assert system_factory("E1")("x").stack is None

    @pytest.mark.parametrize("depth", [0, None])
    def test_stack_factory_depth_coerced(self, depth: int | None) -> None:
        """Test that zero depth captures one frame."""
        make = factory_stack(depth, "E1", "{}")
        err = make("x")

        assert make.depth == 1
        assert err.stack is not None
        assert len(err.stack) == 1

    def test_stack_factory_captures_caller(self) -> None:
        """Test that trace starts where the factory is called."""
        make = system_factory_stack(3, "E1", "{}")
        err = make("x")

        assert err.stack is not None
        assert err.stack[0].filename == __file__
        assert err.stack[0].function.endswith(
            "test_stack_factory_captures_caller",
        )

    def test_each_call_is_fresh(self) -> None:
        """Test that invocations don't share state."""
        make = factory("E1", "{}")
        first = make("a").with_chain("x", "y")
        second = make("b")

        assert second.chain == ""
        assert first.msg == "a"

    def test_attributes(self) -> None:
        """Test factory introspection."""
        make = system_factory_stack(4, "E1", "{} - {}")

        assert isinstance(make, ErrorFactory)
        assert make.code == "E1"
        assert make.template == "{} - {}"
        assert make.placeholders == 2
        assert make.system is True
        assert make.depth == 4
        assert repr(make) == (
            "ErrorFactory(code='E1', template='{} - {}', "
            "system=True, depth=4)"
        )


class TestWrapFactory:
    """Test wrap factories."""

    def test_wrap_factory(self) -> None:
        """Test that wrap factory binds the code."""
        wrap_io = wrap_factory("IO")
        cause = OSError("disk full")
        err = wrap_io(cause)

        assert err is not None
        assert err.code == "IO"
        assert err.cause is cause
        assert err.system is True
        assert err.stack is None

    def test_wrap_factory_stack(self) -> None:
        """Test that stack wrap factory captures trace."""
        wrap_io = wrap_factory_stack(0, "IO")
        err = wrap_io(new("E1", "m"))

        assert err is not None
        assert err.stack is not None
        assert len(err.stack) == 1
        assert err.stack[0].filename == __file__

    def test_none_propagates(self) -> None:
        """Test that None stays None."""
        assert wrap_factory("IO")(None) is None
        assert wrap_factory_stack(3, "IO")(None) is None
