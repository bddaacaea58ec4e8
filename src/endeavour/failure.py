"""
Failure description — the structured "why" carried on the failure track.

A FailureDescription is never assembled by hand. Callers state whatever they
know (a category, a title, an explicit detail, a template with arguments, the
exception that caused it) and the builder resolves the rest:

    FailureDescription.builder().build()
    # → category GENERIC, title "generic-failure", detail ""

    FailureDescription.builder().template("Hi {} and {}").args("A").build().detail
    # → "Hi A and NotSupplied"

    FailureDescription.builder().cause(OSError("disk full")).build()
    # → category GENERIC_EXCEPTION, detail "disk full"

Resolution order (category → template → detail → title) is fixed and does not
depend on the order the setters were called in. The builder itself is
immutable: every setter returns a new builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

import structlog

from endeavour.category import FailureCategory, GenericFailureCategory
from endeavour.template import expand

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable description of a failed operation.

    >>> desc = FailureDescription.builder().title("lookup").detail("no such user").build()
    >>> desc.total_message
    'lookup-no such user'
    """

    category: FailureCategory
    title: str
    detail: str
    cause: Optional[BaseException] = field(default=None, repr=False)

    @property
    def has_cause(self) -> bool:
        return self.cause is not None

    @property
    def total_message(self) -> str:
        """Title and detail joined by a dash."""
        return f"{self.title}-{self.detail}"

    @staticmethod
    def builder() -> FailureDescriptionBuilder:
        """Start an empty builder."""
        return FailureDescriptionBuilder()

    @staticmethod
    def builder_from(description: FailureDescription) -> FailureDescriptionBuilder:
        """
        Start a builder seeded from an existing description.

        Category, title, detail and cause are carried over as explicit values,
        so only the fields overridden afterwards change.

            FailureDescription.builder_from(desc).title("retry exhausted").build()
        """
        if description is None:
            raise TypeError("Source FailureDescription must not be None")
        return FailureDescriptionBuilder(
            _FailureOptions(
                category=description.category,
                title=description.title,
                detail=description.detail,
                cause=description.cause,
            )
        )


@dataclass(frozen=True, slots=True)
class _FailureOptions:
    """Everything a caller may state about a failure; None means 'not stated'."""

    category: Optional[FailureCategory] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    template: Optional[str] = None
    cause: Optional[BaseException] = None
    args: tuple[Any, ...] = ()


class FailureDescriptionBuilder:
    """Fluent, immutable accumulator of failure options."""

    __slots__ = ("_options",)

    def __init__(self, options: _FailureOptions | None = None) -> None:
        self._options = options if options is not None else _FailureOptions()

    def _with(self, **changes: Any) -> FailureDescriptionBuilder:
        return FailureDescriptionBuilder(replace(self._options, **changes))

    def category(self, category: FailureCategory | None) -> FailureDescriptionBuilder:
        """Set the category; its title and template fill whatever is not given."""
        return self._with(category=category)

    def title(self, title: str | None) -> FailureDescriptionBuilder:
        return self._with(title=title)

    def detail(self, detail: str | None) -> FailureDescriptionBuilder:
        """Set the detail verbatim. An explicit detail beats any template."""
        return self._with(detail=detail)

    def template(self, template: str | None) -> FailureDescriptionBuilder:
        """Set the template the detail is expanded from (overrides the category's)."""
        return self._with(template=template)

    def cause(self, cause: BaseException | None) -> FailureDescriptionBuilder:
        return self._with(cause=cause)

    def args(self, *args: Any) -> FailureDescriptionBuilder:
        """Set the template arguments, replacing any set before."""
        return self._with(args=tuple(args))

    def build(self) -> FailureDescription:
        return resolve(self._options)


def resolve(options: _FailureOptions) -> FailureDescription:
    """
    Turn accumulated options into a FailureDescription.

    Steps:
      1. category — explicit, else GENERIC_EXCEPTION if a cause was given, else GENERIC
      2. template — explicit, else the category's
      3. detail   — explicit > expanded explicit template > cause message > expanded category template
      4. title    — explicit, else the category's
    """
    category_given = options.category is not None
    title_given = options.title is not None
    detail_given = options.detail is not None
    template_given = options.template is not None
    cause_given = options.cause is not None

    if cause_given and not (category_given or title_given or template_given or detail_given):
        log.warning(
            "failure_description.cause_only",
            cause_type=type(options.cause).__name__,
        )

    if category_given:
        category = options.category
    elif cause_given:
        category = GenericFailureCategory.GENERIC_EXCEPTION
    else:
        category = GenericFailureCategory.GENERIC

    template = options.template if template_given else category.template

    if detail_given:
        detail = options.detail
    elif template_given:
        detail = expand(template, options.args)
    elif cause_given:
        detail = _cause_message(options.cause)
    else:
        detail = expand(template, options.args)

    title = options.title if title_given else category.title

    return FailureDescription(category=category, title=title, detail=detail, cause=options.cause)


def _cause_message(cause: BaseException) -> str:
    # str() of an exception raised without arguments is ""
    return str(cause)
