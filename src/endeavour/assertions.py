"""
Test assertions for Outcome values.

Expressive assert helpers that explain what was received when they fail,
instead of a bare `assert outcome.is_success()`.

Usage in tests:
    from endeavour import OutcomeAssertions

    def test_create_user():
        outcome = create_user(valid_command)
        user = OutcomeAssertions.assert_quantified(outcome)
        assert user.name == "Alice"

    def test_unknown_account():
        outcome = lock_account("nobody")
        OutcomeAssertions.assert_failure(outcome, AccountFailure.UNKNOWN)
        OutcomeAssertions.assert_detail_contains(outcome, "nobody")
"""

from __future__ import annotations

from typing import Any, TypeVar

from endeavour.category import FailureCategory
from endeavour.failure import FailureDescription
from endeavour.outcome import Failure, Outcome, QualSuccess, QuantSuccess

T = TypeVar("T")


def _describe(outcome: Outcome[Any]) -> str:
    return repr(outcome)


class OutcomeAssertions:
    """Expressive test assertions for Outcome values."""

    @staticmethod
    def assert_success(outcome: Outcome[T], message: str = "") -> None:
        """Assert the outcome is a success of either shape."""
        context = f" — {message}" if message else ""
        assert outcome.is_success(), (
            f"Expected Success but got {_describe(outcome)}{context}"
        )

    @staticmethod
    def assert_quantified(outcome: Outcome[T], message: str = "") -> T:
        """
        Assert the outcome is a success with a payload and return the payload.

            user = OutcomeAssertions.assert_quantified(outcome)
        """
        context = f" — {message}" if message else ""
        assert isinstance(outcome, QuantSuccess), (
            f"Expected Success with a payload but got {_describe(outcome)}{context}"
        )
        return outcome.value

    @staticmethod
    def assert_unqualified(outcome: Outcome[T], message: str = "") -> None:
        """Assert the outcome is a success without a payload."""
        context = f" — {message}" if message else ""
        assert isinstance(outcome, QualSuccess), (
            f"Expected Success without a payload but got {_describe(outcome)}{context}"
        )

    @staticmethod
    def assert_failure(
        outcome: Outcome[T],
        expected_category: FailureCategory | None = None,
        message: str = "",
    ) -> FailureDescription:
        """
        Assert the outcome is a Failure, optionally checking its category.

            description = OutcomeAssertions.assert_failure(outcome, GenericFailureCategory.GENERIC)
        """
        context = f" — {message}" if message else ""
        assert isinstance(outcome, Failure), (
            f"Expected Failure but got {_describe(outcome)}{context}"
        )
        description = outcome.description
        if expected_category is not None:
            assert description.category == expected_category, (
                f"Expected failure category {expected_category} "
                f"but got {description.category}: {description.detail!r}{context}"
            )
        return description

    @staticmethod
    def assert_payload_equals(outcome: Outcome[T], expected_value: Any) -> None:
        """Assert the outcome is a success with exactly this payload."""
        value = OutcomeAssertions.assert_quantified(outcome)
        assert value == expected_value, (
            f"Expected payload {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_has_cause(
        outcome: Outcome[T],
        expected_type: type[BaseException] | None = None,
    ) -> BaseException:
        """Assert the failure carries a cause, optionally of a given type, and return it."""
        description = OutcomeAssertions.assert_failure(outcome)
        assert description.cause is not None, (
            f"Expected failure to have a cause but {_describe(outcome)} has none"
        )
        if expected_type is not None:
            assert isinstance(description.cause, expected_type), (
                f"Expected cause of type {expected_type.__name__} "
                f"but got {type(description.cause).__name__}"
            )
        return description.cause

    @staticmethod
    def assert_no_cause(outcome: Outcome[T]) -> None:
        description = OutcomeAssertions.assert_failure(outcome)
        assert description.cause is None, (
            f"Expected failure without a cause but got {description.cause!r}"
        )

    @staticmethod
    def assert_detail_equals(outcome: Outcome[T], expected_detail: str) -> None:
        description = OutcomeAssertions.assert_failure(outcome)
        assert description.detail == expected_detail, (
            f"Expected failure detail {expected_detail!r} "
            f"but got {description.detail!r}"
        )

    @staticmethod
    def assert_detail_contains(outcome: Outcome[T], substring: str) -> None:
        """Assert the failure detail contains `substring`, ignoring case."""
        description = OutcomeAssertions.assert_failure(outcome)
        assert substring.lower() in description.detail.lower(), (
            f"Expected failure detail to contain {substring!r} "
            f"but detail was: {description.detail!r}"
        )

    @staticmethod
    def assert_title_equals(outcome: Outcome[T], expected_title: str) -> None:
        description = OutcomeAssertions.assert_failure(outcome)
        assert description.title == expected_title, (
            f"Expected failure title {expected_title!r} "
            f"but got {description.title!r}"
        )
