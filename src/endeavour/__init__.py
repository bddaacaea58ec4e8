"""
Endeavour — value-based error handling for Python.

Operations return an Outcome instead of raising: a success, with or without a
payload, or a failure carrying a structured FailureDescription.

    from endeavour import FailureCategoryEnum, Outcome, OutcomeFailures

    class OrderFailure(FailureCategoryEnum):
        EMPTY = ("order-empty", "Order {} has no lines")

    def check_lines(order) -> Outcome[Order]:
        if not order.lines:
            return OutcomeFailures.categorized(OrderFailure.EMPTY, order.id)
        return Outcome.success(order)

    outcome = (
        Outcome.attempt(lambda: load_order(order_id))
        .flat_map(check_lines)
        .map(lambda order: order.total)
    )
"""

from endeavour.category import FailureCategory, FailureCategoryEnum, GenericFailureCategory
from endeavour.failure import FailureDescription, FailureDescriptionBuilder
from endeavour.outcome import (
    Failure,
    Outcome,
    OutcomeStateError,
    QualSuccess,
    QuantSuccess,
    Success,
)
from endeavour.outcome_failures import OutcomeFailures
from endeavour.assertions import OutcomeAssertions

__all__ = [
    "Outcome",
    "Success",
    "QuantSuccess",
    "QualSuccess",
    "Failure",
    "OutcomeStateError",
    "FailureCategory",
    "FailureCategoryEnum",
    "GenericFailureCategory",
    "FailureDescription",
    "FailureDescriptionBuilder",
    "OutcomeFailures",
    "OutcomeAssertions",
]

__version__ = "1.0.0"
