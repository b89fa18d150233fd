import logging

import pytest

from convenient_streams.adapters import kind_name, wrap, wrap_catch_all
from convenient_streams.errors import ContractViolationError
from convenient_streams.policy import WrapPolicy


class PersistError(Exception):
    pass


class DiskFullError(PersistError):
    pass


def _raising(exception: Exception):
    def operation(_: str) -> str:
        raise exception

    return operation


def test_normal_completion_is_captured_as_value() -> None:
    wrapped = wrap(str.upper, PersistError)
    trying = wrapped("abc")

    assert trying.is_success()
    assert trying.get_value() == "ABC"


def test_declared_kind_is_captured_as_failure() -> None:
    error = PersistError("write failed")
    trying = wrap(_raising(error), PersistError)("x")

    assert trying.is_failure()
    assert trying.get_failure() is error


def test_subclass_of_declared_kind_is_captured() -> None:
    error = DiskFullError("no space")
    trying = wrap(_raising(error), PersistError)("x")

    assert trying.get_failure() is error


def test_tuple_of_kinds_is_captured() -> None:
    error = KeyError("k")
    trying = wrap(_raising(error), (PersistError, KeyError))("x")

    assert trying.get_failure() is error


def test_predicate_discriminates_failures() -> None:
    def is_transient(exception: Exception) -> bool:
        return isinstance(exception, OSError) and exception.errno == 11

    transient = OSError(11, "try again")
    assert wrap(_raising(transient), is_transient)("x").get_failure() is transient

    permanent = OSError(2, "not found")
    with pytest.raises(ContractViolationError) as excinfo:
        wrap(_raising(permanent), is_transient)("x")
    assert excinfo.value.declared_kind == "is_transient"
    assert excinfo.value.__cause__ is permanent


@pytest.mark.parametrize(
    "error",
    [TypeError("bad operand"), AttributeError("no attr"), IndexError("out of range")],
)
def test_programming_errors_escape_unchanged(error: Exception) -> None:
    with pytest.raises(type(error)) as excinfo:
        wrap(_raising(error), PersistError)("x")

    assert excinfo.value is error


def test_undeclared_kind_raises_contract_violation() -> None:
    error = ValueError("not a persist error")

    with pytest.raises(ContractViolationError) as excinfo:
        wrap(_raising(error), PersistError)("x")

    violation = excinfo.value
    assert violation.__cause__ is error
    assert violation.actual_kind == "ValueError"
    assert violation.declared_kind.endswith("PersistError")
    assert "ValueError" in str(violation) and "PersistError" in str(violation)


def test_explicitly_declared_programming_error_is_captured() -> None:
    error = IndexError("empty")
    trying = wrap(_raising(error), IndexError)("x")

    assert trying.get_failure() is error


def test_custom_policy_changes_what_escapes() -> None:
    policy = WrapPolicy(programming_errors=(ValueError,))
    error = ValueError("bug")

    with pytest.raises(ValueError):
        wrap(_raising(error), PersistError, policy=policy)("x")

    with pytest.raises(ContractViolationError):
        wrap(_raising(TypeError("now a contract issue")), PersistError, policy=policy)("x")


def test_base_exceptions_are_never_intercepted() -> None:
    with pytest.raises(KeyboardInterrupt):
        wrap(_raising(KeyboardInterrupt()), PersistError)("x")  # type: ignore[arg-type]
    with pytest.raises(KeyboardInterrupt):
        wrap_catch_all(_raising(KeyboardInterrupt()))("x")  # type: ignore[arg-type]


def test_operation_runs_exactly_once_per_call() -> None:
    calls: list[int] = []

    def operation(value: int) -> int:
        calls.append(value)
        return value * 2

    wrapped = wrap(operation, PersistError)
    assert wrapped(3).get_value() == 6
    assert calls == [3]


def test_wrapped_keeps_operation_metadata() -> None:
    def write_data(thing: str) -> str:
        """Persist a thing."""
        return thing

    wrapped = wrap(write_data, PersistError)
    assert wrapped.__name__ == "write_data"
    assert wrapped.__doc__ == "Persist a thing."


def test_catch_all_captures_every_exception() -> None:
    wrapped = wrap_catch_all(lambda value: 10 // value)

    assert wrapped(5).get_value() == 2
    failure = wrapped(0).get_failure()
    assert isinstance(failure, ZeroDivisionError)

    type_error = wrap_catch_all(_raising(TypeError("bug")))("x")
    assert isinstance(type_error.get_failure(), TypeError)


def test_contract_violation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="convenient_streams.adapters"):
        with pytest.raises(ContractViolationError):
            wrap(_raising(ValueError("x")), PersistError)("x")

    assert any("PersistError" in record.getMessage() for record in caplog.records)


def test_kind_name_renders_classes_tuples_and_predicates() -> None:
    assert kind_name(ValueError) == "ValueError"
    assert kind_name(PersistError) == f"{__name__}.PersistError"
    assert kind_name((KeyError, ValueError)) == "KeyError | ValueError"

    def is_retryable(_: Exception) -> bool:
        return True

    assert kind_name(is_retryable) == "is_retryable"
