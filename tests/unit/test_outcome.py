"""
Comprehensive tests for the Outcome algebra.

Tests cover:
  - Creation (success, failure, attempt) and introspection
  - map, flat_map, fold
  - Recovery (or_else, or_else_get)
  - Side effects (act, if_success, if_failure)
  - Exception classification and the interrupt flag
  - Pattern matching, equality and repr
"""

from __future__ import annotations

import dataclasses
from unittest.mock import MagicMock

import pytest

from endeavour import interrupt
from endeavour.category import GenericFailureCategory
from endeavour.failure import FailureDescription
from endeavour.outcome import (
    Failure,
    Outcome,
    OutcomeStateError,
    QualSuccess,
    QuantSuccess,
    Success,
)
from tests.categories import AccountFailure


@pytest.fixture()
def description() -> FailureDescription:
    return FailureDescription.builder().category(AccountFailure.UNKNOWN).args("bob").build()


@pytest.fixture()
def failure(description: FailureDescription) -> Outcome[int]:
    return Outcome.failure(description)


def _raise(exception: BaseException):
    def supplier():
        raise exception

    return supplier


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestSuccessCreation:
    def test_value_gives_quantified_success(self) -> None:
        outcome = Outcome.success(42)
        assert isinstance(outcome, QuantSuccess)
        assert outcome.is_success()
        assert not outcome.is_failure()
        assert outcome.has_payload()
        assert outcome.get() == 42

    def test_none_gives_unqualified_success(self) -> None:
        outcome = Outcome.success(None)
        assert isinstance(outcome, QualSuccess)
        assert outcome.is_success()
        assert not outcome.has_payload()
        assert outcome.get() is None

    def test_no_argument_gives_truthy_unqualified_success(self) -> None:
        outcome = Outcome.success()
        assert isinstance(outcome, QualSuccess)
        assert outcome
        assert bool(outcome) is True

    def test_falsy_values_are_still_payloads(self) -> None:
        for value in (0, "", False, []):
            assert Outcome.success(value).has_payload()

    def test_both_shapes_are_success(self) -> None:
        assert isinstance(Outcome.success(1), Success)
        assert isinstance(Outcome.success(), Success)

    def test_quant_success_rejects_none(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            QuantSuccess(None)

    def test_outcomes_are_immutable(self) -> None:
        outcome = Outcome.success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.value = 2  # type: ignore[misc]


class TestFailureCreation:
    def test_wraps_description(self, description: FailureDescription) -> None:
        outcome = Outcome.failure(description)
        assert isinstance(outcome, Failure)
        assert outcome.is_failure()
        assert not outcome.is_success()
        assert not outcome.has_payload()
        assert outcome.description is description

    def test_shortcuts(self, description: FailureDescription) -> None:
        outcome = Outcome.failure(description)
        assert outcome.category is AccountFailure.UNKNOWN
        assert outcome.title == "account-unknown"
        assert outcome.detail == "about bob"
        assert outcome.cause is None

    def test_rejects_none(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.failure(None)  # type: ignore[arg-type]

    def test_failure_is_falsy(self, failure: Outcome[int]) -> None:
        assert not failure


class TestPayloadExtraction:
    def test_get_on_failure_raises(self, failure: Outcome[int]) -> None:
        with pytest.raises(OutcomeStateError, match="Cannot get a payload from a Failure"):
            failure.get()

    def test_state_error_is_a_value_error(self) -> None:
        assert issubclass(OutcomeStateError, ValueError)

    def test_get_or_none(self, failure: Outcome[int]) -> None:
        assert Outcome.success(3).get_or_none() == 3
        assert Outcome.success().get_or_none() is None
        assert failure.get_or_none() is None


# ═══════════════════════════════════════════════════════════════
# 2. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_transforms_payload(self) -> None:
        assert Outcome.success(5).map(lambda x: x * 2) == Outcome.success(10)

    def test_mapping_called_exactly_once(self) -> None:
        mapping = MagicMock(return_value="mapped")
        Outcome.success(5).map(mapping)
        mapping.assert_called_once_with(5)

    def test_none_result_gives_unqualified(self) -> None:
        outcome = Outcome.success(5).map(lambda x: None)
        assert isinstance(outcome, QualSuccess)

    def test_unqualified_calls_mapping_with_none(self) -> None:
        mapping = MagicMock(return_value="appeared")
        outcome = Outcome.success().map(mapping)
        mapping.assert_called_once_with(None)
        assert outcome == Outcome.success("appeared")

    def test_unqualified_stays_unqualified_when_mapping_returns_none(self) -> None:
        assert isinstance(Outcome.success().map(lambda _: None), QualSuccess)

    def test_failure_passes_through_without_calling_mapping(
        self, failure: Outcome[int], description: FailureDescription
    ) -> None:
        mapping = MagicMock()
        outcome = failure.map(mapping)
        mapping.assert_not_called()
        assert outcome == Outcome.failure(description)
        assert outcome.description is description

    def test_mapping_exception_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Outcome.success(1).map(lambda x: x / 0)

    def test_rejects_none_mapping(self, failure: Outcome[int]) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.success(1).map(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="must not be None"):
            failure.map(None)  # type: ignore[arg-type]

    def test_chain(self) -> None:
        outcome = Outcome.success(3).map(lambda x: x + 1).map(lambda x: x * 2).map(str)
        assert outcome.get() == "8"


class TestFlatMap:
    def test_returns_step_outcome_unchanged(self) -> None:
        step_result = Outcome.success("next")
        assert Outcome.success(1).flat_map(lambda _: step_result) is step_result

    def test_step_failure_is_returned(self, failure: Outcome[int]) -> None:
        assert Outcome.success(1).flat_map(lambda _: failure) is failure

    def test_unqualified_passes_none(self) -> None:
        step = MagicMock(return_value=Outcome.success("x"))
        Outcome.success().flat_map(step)
        step.assert_called_once_with(None)

    def test_failure_short_circuits(self, failure: Outcome[int], description) -> None:
        step = MagicMock()
        outcome = failure.flat_map(step)
        step.assert_not_called()
        assert outcome == Outcome.failure(description)

    def test_step_exception_becomes_generic_exception_failure(self) -> None:
        boom = ValueError("boom")
        outcome = Outcome.success(1).flat_map(_raise_with_arg(boom))
        assert isinstance(outcome, Failure)
        assert outcome.category is GenericFailureCategory.GENERIC_EXCEPTION
        assert outcome.cause is boom
        assert outcome.detail == "boom"

    def test_rejects_none_mapping(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.success(1).flat_map(None)  # type: ignore[arg-type]

    def test_pipeline_stops_at_first_failure(self) -> None:
        calls: list[str] = []

        def step(name: str, fail: bool = False):
            def run(value):
                calls.append(name)
                if fail:
                    return Outcome.failure(FailureDescription.builder().detail(name).build())
                return Outcome.success(f"{value}>{name}")

            return run

        outcome = (
            Outcome.success("start")
            .flat_map(step("one"))
            .flat_map(step("two", fail=True))
            .flat_map(step("three"))
        )
        assert calls == ["one", "two"]
        assert outcome.detail == "two"


def _raise_with_arg(exception: Exception):
    def mapping(_value):
        raise exception

    return mapping


class TestFold:
    def test_quantified_goes_to_on_success(self) -> None:
        assert Outcome.success(2).fold(lambda v: v * 10, lambda f: -1) == 20

    def test_unqualified_goes_to_on_success_with_none(self) -> None:
        assert Outcome.success().fold(lambda v: v, lambda f: "failed") is None

    def test_failure_goes_to_on_failure(self, failure: Outcome[int]) -> None:
        assert failure.fold(lambda v: "ok", lambda f: f.detail) == "about bob"

    def test_on_failure_receives_the_failure(self, failure: Outcome[int]) -> None:
        on_failure = MagicMock(return_value=1)
        failure.fold(lambda v: 0, on_failure)
        on_failure.assert_called_once_with(failure)

    def test_rejects_none_functions(self, failure: Outcome[int]) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.success(1).fold(None, lambda f: 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="must not be None"):
            failure.fold(lambda v: 0, None)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════
# 3. Recovery
# ═══════════════════════════════════════════════════════════════


class TestOrElse:
    def test_success_returns_self(self) -> None:
        original = Outcome.success(1)
        assert original.or_else(Outcome.success(2)) is original

    def test_failure_returns_alternate(self, failure: Outcome[int]) -> None:
        alternate = Outcome.success(2)
        assert failure.or_else(alternate) is alternate

    def test_rejects_none(self, failure: Outcome[int]) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.success(1).or_else(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="must not be None"):
            failure.or_else(None)  # type: ignore[arg-type]


class TestOrElseGet:
    def test_success_returns_self_without_calling_supplier(self) -> None:
        supplier = MagicMock()
        original = Outcome.success(1)
        assert original.or_else_get(supplier) is original
        supplier.assert_not_called()

    def test_unqualified_success_returns_self(self) -> None:
        supplier = MagicMock()
        original = Outcome.success()
        assert original.or_else_get(supplier) is original
        supplier.assert_not_called()

    def test_failure_returns_supplied_outcome(self, failure: Outcome[int]) -> None:
        supplied = Outcome.success(7)
        assert failure.or_else_get(lambda: supplied) is supplied

    def test_supplier_exception_is_converted_like_attempt(self, failure: Outcome[int]) -> None:
        outcome = failure.or_else_get(_raise(OSError("unreachable host")))
        assert isinstance(outcome, Failure)
        assert outcome.category is GenericFailureCategory.GENERIC_EXCEPTION
        assert outcome.detail == "unreachable host"

    def test_supplier_runtime_error_is_classified(self, failure: Outcome[int]) -> None:
        outcome = failure.or_else_get(_raise(KeyError("k")))
        assert outcome.category is GenericFailureCategory.GENERIC_RUNTIME_EXCEPTION

    def test_supplier_interrupt_restores_flag(self, failure: Outcome[int]) -> None:
        outcome = failure.or_else_get(_raise(InterruptedError("woken")))
        assert outcome.category is GenericFailureCategory.GENERIC_INTERRUPTED_EXCEPTION
        assert interrupt.is_interrupted()

    def test_rejects_none(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.success(1).or_else_get(None)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════
# 4. Side Effects
# ═══════════════════════════════════════════════════════════════


class TestHooks:
    def test_act_runs_for_every_variant(self, failure: Outcome[int]) -> None:
        for outcome in (Outcome.success(1), Outcome.success(), failure):
            action = MagicMock()
            assert outcome.act(action) is outcome
            action.assert_called_once_with(outcome)

    def test_if_success_runs_on_success(self) -> None:
        action = MagicMock()
        outcome = Outcome.success(1)
        assert outcome.if_success(action) is outcome
        action.assert_called_once_with(outcome)

    def test_if_success_runs_on_unqualified_success(self) -> None:
        action = MagicMock()
        Outcome.success().if_success(action)
        action.assert_called_once()

    def test_if_success_skips_failure(self, failure: Outcome[int]) -> None:
        action = MagicMock()
        assert failure.if_success(action) is failure
        action.assert_not_called()

    def test_if_failure_runs_on_failure(self, failure: Outcome[int]) -> None:
        action = MagicMock()
        assert failure.if_failure(action) is failure
        action.assert_called_once_with(failure)

    def test_if_failure_skips_success(self) -> None:
        action = MagicMock()
        Outcome.success(1).if_failure(action)
        action.assert_not_called()

    def test_hook_exceptions_propagate(self, failure: Outcome[int]) -> None:
        with pytest.raises(RuntimeError, match="hook"):
            Outcome.success(1).if_success(_raise_with_arg(RuntimeError("hook")))
        with pytest.raises(RuntimeError, match="hook"):
            failure.if_failure(_raise_with_arg(RuntimeError("hook")))
        with pytest.raises(RuntimeError, match="hook"):
            failure.act(_raise_with_arg(RuntimeError("hook")))

    def test_hooks_reject_none(self) -> None:
        outcome = Outcome.success(1)
        for hook in (outcome.act, outcome.if_success, outcome.if_failure):
            with pytest.raises(TypeError, match="must not be None"):
                hook(None)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════
# 5. attempt
# ═══════════════════════════════════════════════════════════════


class TestAttempt:
    def test_value_gives_quantified_success(self) -> None:
        assert Outcome.attempt(lambda: "done") == Outcome.success("done")

    def test_none_gives_unqualified_success(self) -> None:
        assert isinstance(Outcome.attempt(lambda: None), QualSuccess)

    @pytest.mark.parametrize(
        "exception",
        [
            RuntimeError("r"),
            TypeError("t"),
            ValueError("v"),
            AttributeError("a"),
            KeyError("k"),
            IndexError("i"),
            ZeroDivisionError("z"),
            AssertionError("a"),
            NotImplementedError("n"),
        ],
        ids=lambda e: type(e).__name__,
    )
    def test_programming_errors_are_runtime_failures(self, exception: Exception) -> None:
        outcome = Outcome.attempt(_raise(exception))
        assert outcome.category is GenericFailureCategory.GENERIC_RUNTIME_EXCEPTION
        assert outcome.title == "generic-runtime-exception-failure"
        assert outcome.cause is exception

    @pytest.mark.parametrize(
        "exception",
        [OSError("o"), FileNotFoundError("f"), TimeoutError("t"), Exception("e")],
        ids=lambda e: type(e).__name__,
    )
    def test_other_exceptions_are_checked_failures(self, exception: Exception) -> None:
        outcome = Outcome.attempt(_raise(exception))
        assert outcome.category is GenericFailureCategory.GENERIC_EXCEPTION
        assert outcome.cause is exception
        assert not interrupt.is_interrupted()

    def test_interrupted_error_sets_interrupt_flag(self) -> None:
        """
        GIVEN a supplier that raises InterruptedError
        WHEN run through attempt
        THEN the failure is GENERIC_INTERRUPTED_EXCEPTION with the cause set
        AND the calling thread's interrupt flag is set afterwards.
        """
        woken = InterruptedError("woken")
        outcome = Outcome.attempt(_raise(woken))
        assert outcome.category is GenericFailureCategory.GENERIC_INTERRUPTED_EXCEPTION
        assert outcome.cause is woken
        assert interrupt.is_interrupted()

    def test_detail_is_exception_message(self) -> None:
        assert Outcome.attempt(_raise(OSError("no route"))).detail == "no route"

    def test_keyboard_interrupt_is_not_captured(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            Outcome.attempt(_raise(KeyboardInterrupt()))

    def test_rejects_none_supplier(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            Outcome.attempt(None)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════
# 6. Pattern matching, equality, repr
# ═══════════════════════════════════════════════════════════════


class TestMatchAndRepr:
    @staticmethod
    def _describe(outcome: Outcome) -> str:
        match outcome:
            case QuantSuccess(value):
                return f"value {value}"
            case QualSuccess():
                return "no value"
            case Failure(description):
                return f"failed: {description.detail}"
        return "unreachable"

    def test_pattern_matching(self, failure: Outcome[int]) -> None:
        assert self._describe(Outcome.success(3)) == "value 3"
        assert self._describe(Outcome.success()) == "no value"
        assert self._describe(failure) == "failed: about bob"

    def test_equality(self, description: FailureDescription) -> None:
        assert Outcome.success(1) == Outcome.success(1)
        assert Outcome.success(1) != Outcome.success(2)
        assert Outcome.success() == Outcome.success()
        assert Outcome.success() != Outcome.success(1)
        assert Outcome.failure(description) == Outcome.failure(description)
        assert Outcome.failure(description) != Outcome.success(1)

    def test_repr(self, failure: Outcome[int]) -> None:
        assert repr(Outcome.success(42)) == "Success[42]"
        assert repr(Outcome.success("x")) == "Success['x']"
        assert repr(Outcome.success()) == "Success[No value]"
        assert repr(failure) == "Failure[UNKNOWN:account-unknown:about bob]"
