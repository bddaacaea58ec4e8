"""
Convenience factory methods for common Outcome failures.

Every factory goes through the FailureDescription builder, so defaults are
resolved the same way as a hand-built description.

Usage:
    from endeavour import OutcomeFailures

    # Instead of:
    Outcome.failure(
        FailureDescription.builder().template("Order {} is empty").args(order_id).build()
    )

    # Write:
    OutcomeFailures.with_details("Order {} is empty", order_id)
"""

from __future__ import annotations

from typing import Any

from endeavour.category import FailureCategory, GenericFailureCategory
from endeavour.failure import FailureDescription, FailureDescriptionBuilder
from endeavour.outcome import Outcome


class OutcomeFailures:
    """Factory methods for the usual shapes of failure."""

    @staticmethod
    def generic() -> Outcome:
        """A GENERIC failure with the generic title and an empty detail."""
        return Outcome.failure(
            FailureDescription.builder().category(GenericFailureCategory.GENERIC).build()
        )

    @staticmethod
    def with_details(template: str, *args: Any) -> Outcome:
        """
        A GENERIC failure whose detail is expanded from `template`.

            OutcomeFailures.with_details("Ouch! That {}", "hurt a lot.")
        """
        if template is None:
            raise TypeError("Failure template must not be None")
        return Outcome.failure(
            FailureDescription.builder()
            .category(GenericFailureCategory.GENERIC)
            .template(template)
            .args(*args)
            .build()
        )

    @staticmethod
    def titled(title: str) -> Outcome:
        return Outcome.failure(
            FailureDescription.builder()
            .category(GenericFailureCategory.GENERIC)
            .title(title)
            .build()
        )

    @staticmethod
    def titled_with_details(title: str, template: str, *args: Any) -> Outcome:
        if template is None:
            raise TypeError("Failure template must not be None")
        return Outcome.failure(
            FailureDescription.builder()
            .category(GenericFailureCategory.GENERIC)
            .title(title)
            .template(template)
            .args(*args)
            .build()
        )

    @staticmethod
    def categorized(category: FailureCategory, *args: Any) -> Outcome:
        """
        A failure in `category`, its detail expanded from the category template.

        When the category template has no placeholders, a single argument is
        taken as the template itself:

            OutcomeFailures.categorized(AccountFailure.UNKNOWN, "bob")
            OutcomeFailures.categorized(GenericFailureCategory.GENERIC, "Disk is full")
        """
        if category is None:
            raise TypeError("Failure category must not be None")
        builder = FailureDescription.builder().category(category)
        return Outcome.failure(_with_category_args(builder, category, args).build())

    @staticmethod
    def categorized_with_details(category: FailureCategory, template: str, *args: Any) -> Outcome:
        """A failure in `category` with a detail from an explicit template."""
        if category is None:
            raise TypeError("Failure category must not be None")
        if template is None:
            raise TypeError("Failure template must not be None")
        return Outcome.failure(
            FailureDescription.builder()
            .category(category)
            .template(template)
            .args(*args)
            .build()
        )

    @staticmethod
    def caused(cause: BaseException) -> Outcome:
        """A GENERIC failure whose detail is the cause's message."""
        return Outcome.failure(
            FailureDescription.builder()
            .category(GenericFailureCategory.GENERIC)
            .cause(cause)
            .build()
        )

    @staticmethod
    def caused_categorized(cause: BaseException, category: FailureCategory, *args: Any) -> Outcome:
        """
        A failure in `category` caused by `cause`.

        Same single-argument shorthand as categorized(). Without arguments or
        template the detail is the cause's message.
        """
        if category is None:
            raise TypeError("Failure category must not be None")
        builder = FailureDescription.builder().category(category).cause(cause)
        return Outcome.failure(_with_category_args(builder, category, args).build())

    @staticmethod
    def caused_with_details(cause: BaseException, template: str, *args: Any) -> Outcome:
        if template is None:
            raise TypeError("Failure template must not be None")
        return Outcome.failure(
            FailureDescription.builder()
            .category(GenericFailureCategory.GENERIC)
            .cause(cause)
            .template(template)
            .args(*args)
            .build()
        )


def _with_category_args(
    builder: FailureDescriptionBuilder,
    category: FailureCategory,
    args: tuple[Any, ...],
) -> FailureDescriptionBuilder:
    if category.template_parameter_count() == 0 and len(args) == 1:
        return builder.template(str(args[0]))
    return builder.args(*args)
