"""
Failure categories — reusable (title, template) pairs that classify failures.

A category supplies the default title of a failure and the template its detail
is expanded from. Anything with `title`, `template` and
`template_parameter_count()` satisfies the FailureCategory protocol; the
usual way to declare a family of categories is an Enum:

    class AccountFailure(FailureCategoryEnum):
        LOCKED = ("account-locked", "Account {} is locked until {}")
        UNKNOWN = ("account-unknown", "No account named {}")

    AccountFailure.LOCKED.template_parameter_count()  # → 2
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Protocol, runtime_checkable

from endeavour.template import count_placeholders


@runtime_checkable
class FailureCategory(Protocol):
    """Structural interface every failure category satisfies."""

    @property
    def title(self) -> str: ...

    @property
    def template(self) -> str: ...

    def template_parameter_count(self) -> int: ...


class FailureCategoryEnum(Enum):
    """
    Base Enum for category families.

    Member values are `(title, template)` tuples. Titles must be unique within
    a family, otherwise Enum would alias the members.
    """

    def __init__(self, title: str, template: str) -> None:
        self._title = title
        self._template = template

    @property
    def title(self) -> str:
        return self._title

    @property
    def template(self) -> str:
        return self._template

    def template_parameter_count(self) -> int:
        """Number of `{}` placeholders the template expects."""
        return count_placeholders(self._template)

    def __str__(self) -> str:
        return self.name


@unique
class GenericFailureCategory(FailureCategoryEnum):
    """Categories assigned when the caller does not supply one."""

    GENERIC = ("generic-failure", "")
    GENERIC_EXCEPTION = ("generic-checked-exception-failure", "")
    GENERIC_INTERRUPTED_EXCEPTION = ("generic-interrupted-exception-failure", "")
    GENERIC_RUNTIME_EXCEPTION = ("generic-runtime-exception-failure", "")
