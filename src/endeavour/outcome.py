"""
Outcome — a value that is either a success or a failure, never an exception.

    ┌──────────┐  flat_map  ┌──────────┐  flat_map  ┌──────────┐
    │  parse   │──Success───│ validate │──Success───│  store   │──→ Outcome[T]
    └────┬─────┘            └────┬─────┘            └────┬─────┘
         │ Failure               │ Failure               │ Failure
         └───────────────────────┴───────────────────────┴──────→ Outcome[T]

Exactly three shapes exist:

  - QuantSuccess(value) — success carrying a payload (never None)
  - QualSuccess()       — success without a payload, e.g. a void operation
  - Failure(description) — carries a FailureDescription and no payload

Both success shapes take the success track; map() and flat_map() hand the
payload, or None for QualSuccess, to the next step. A Failure passes through
every transformation untouched and the functions given to it are never
called.

    outcome = (
        Outcome.attempt(lambda: read_config(path))
        .flat_map(validate)
        .map(lambda cfg: cfg.port)
    )
    port = outcome.fold(lambda p: p, lambda failure: 8080)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from endeavour import interrupt
from endeavour.category import FailureCategory, GenericFailureCategory
from endeavour.failure import FailureDescription

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class OutcomeStateError(ValueError):
    """Raised when an outcome is asked for something its variant cannot provide."""


def _require(argument: Any, name: str) -> None:
    if argument is None:
        raise TypeError(f"{name} must not be None")


class Outcome(Generic[T]):
    """
    Result of an operation that may fail.

    Usage:
        >>> Outcome.success(21).map(lambda x: x * 2)
        Success[42]

        >>> Outcome.success(None)
        Success[No value]

        >>> Outcome.attempt(lambda: 1 / 0).is_failure()
        True
    """

    __slots__ = ()

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def has_payload(self) -> bool:
        """True only for a QuantSuccess."""
        return isinstance(self, QuantSuccess)

    def get(self) -> Optional[T]:
        """
        Return the payload; None for a QualSuccess.

        Raises OutcomeStateError on a Failure. Prefer fold() when the variant
        is not known.
        """
        match self:
            case QuantSuccess(value):
                return value
            case QualSuccess():
                return None
            case Failure(description):
                raise OutcomeStateError(
                    f"Cannot get a payload from a Failure: {description.total_message}"
                )
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_none(self) -> Optional[T]:
        """Return the payload if there is one, otherwise None. Never raises."""
        match self:
            case QuantSuccess(value):
                return value
            case _:
                return None

    # ──────────────────────── Transformations ────────────────────────

    def map(self, mapping: Callable[[Optional[T]], Optional[U]]) -> Outcome[U]:
        """
        Transform the payload. Short-circuits on failure.

        A None result becomes a QualSuccess. A QualSuccess calls the mapping
        with None, so the mapping decides whether a payload appears.
        Exceptions raised by the mapping propagate.

            Outcome.success(5).map(lambda x: x * 2)        # → Success[10]
            Outcome.success(5).map(lambda x: None)         # → Success[No value]
        """
        _require(mapping, "Mapping function")
        match self:
            case QuantSuccess(value):
                return Outcome.success(mapping(value))
            case QualSuccess():
                return Outcome.success(mapping(None))
            case Failure(description):
                return Failure(description)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapping: Callable[[Optional[T]], Outcome[U]]) -> Outcome[U]:
        """
        Chain an Outcome-returning step. Short-circuits on failure.

        The step's outcome is returned as is. An exception raised by the step
        becomes a Failure in the GENERIC_EXCEPTION category with the exception
        as its cause.

            Outcome.success(order).flat_map(validate).flat_map(persist)
        """
        _require(mapping, "Mapping function")
        match self:
            case QuantSuccess(value):
                payload: Optional[T] = value
            case QualSuccess():
                payload = None
            case Failure(description):
                return Failure(description)
            case _:  # pragma: no cover
                raise TypeError("unreachable")

        try:
            return mapping(payload)
        except Exception as e:
            return Failure(
                FailureDescription.builder()
                .category(GenericFailureCategory.GENERIC_EXCEPTION)
                .cause(e)
                .build()
            )

    def fold(
        self,
        on_success: Callable[[Optional[T]], V],
        on_failure: Callable[[Failure[T]], V],
    ) -> V:
        """
        Reduce to a single value — the fundamental destructor.

            exit_code = outcome.fold(lambda _: 0, lambda failure: 1)
        """
        _require(on_success, "Success function")
        _require(on_failure, "Failure function")
        match self:
            case QuantSuccess(value):
                return on_success(value)
            case QualSuccess():
                return on_success(None)
            case Failure():
                return on_failure(self)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Recovery ────────────────────────

    def or_else(self, alternate: Outcome[T]) -> Outcome[T]:
        """Return self on success, `alternate` on failure."""
        _require(alternate, "Alternate outcome")
        match self:
            case Failure():
                return alternate
            case _:
                return self

    def or_else_get(self, supplier: Callable[[], Outcome[T]]) -> Outcome[T]:
        """
        Return self on success; on failure return what `supplier` produces.

        The supplier is only called for a Failure. If it raises, the exception
        is converted exactly as attempt() would convert it.

            Outcome.attempt(load_from_cache).or_else_get(lambda: Outcome.attempt(load_from_disk))
        """
        _require(supplier, "Supplier")
        match self:
            case Failure():
                try:
                    return supplier()
                except Exception as e:
                    return Failure(_describe_raised(e))
            case _:
                return self

    # ──────────────────────── Side Effects ────────────────────────

    def act(self, action: Callable[[Outcome[T]], Any]) -> Outcome[T]:
        """Run `action` with this outcome whatever its variant. Exceptions propagate."""
        _require(action, "Action")
        action(self)
        return self

    def if_success(self, action: Callable[[Success[T]], Any]) -> Outcome[T]:
        """
        Run `action` with this outcome if it is a success.

            outcome.if_success(lambda s: log.info("user.created", user=s.get()))
        """
        _require(action, "Action")
        if isinstance(self, Success):
            action(self)
        return self

    def if_failure(self, action: Callable[[Failure[T]], Any]) -> Outcome[T]:
        """Run `action` with this outcome if it is a failure."""
        _require(action, "Action")
        if isinstance(self, Failure):
            action(self)
        return self

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: Optional[U] = None) -> Outcome[U]:
        """
        Create a success: QuantSuccess for a value, QualSuccess for None.

        With no argument this is the plain "it worked" outcome.
        """
        if value is None:
            return QualSuccess()
        return QuantSuccess(value)

    @staticmethod
    def failure(description: FailureDescription) -> Outcome[U]:
        """Create a failure from a built FailureDescription."""
        _require(description, "FailureDescription")
        return Failure(description)

    @staticmethod
    def attempt(supplier: Callable[[], Optional[U]]) -> Outcome[U]:
        """
        Run `supplier` and capture its result or the exception it raises.

        Exception mapping:
          - InterruptedError → GENERIC_INTERRUPTED_EXCEPTION, and the calling
            thread's interrupt flag is set again
          - RuntimeError, TypeError, ValueError, AttributeError, LookupError,
            ArithmeticError, AssertionError, NameError → GENERIC_RUNTIME_EXCEPTION
          - any other Exception → GENERIC_EXCEPTION

        KeyboardInterrupt and SystemExit are not captured.
        """
        _require(supplier, "Supplier")
        try:
            return Outcome.success(supplier())
        except Exception as e:
            return Failure(_describe_raised(e))

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Successes are truthy, failures falsy."""
        return self.is_success()


class Success(Outcome[T]):
    """Common base of the two success shapes."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class QuantSuccess(Success[T]):
    """Success carrying a payload."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("QuantSuccess value must not be None")

    def __repr__(self) -> str:
        return f"Success[{self.value!r}]"


@dataclass(frozen=True, slots=True)
class QualSuccess(Success[T]):
    """Success without a payload."""

    def __repr__(self) -> str:
        return "Success[No value]"


@dataclass(frozen=True, slots=True)
class Failure(Outcome[T]):
    """The failure track — wraps a FailureDescription."""

    description: FailureDescription

    def __post_init__(self) -> None:
        if self.description is None:
            raise TypeError("Failure description must not be None")

    @property
    def category(self) -> FailureCategory:
        return self.description.category

    @property
    def title(self) -> str:
        return self.description.title

    @property
    def detail(self) -> str:
        return self.description.detail

    @property
    def cause(self) -> Optional[BaseException]:
        return self.description.cause

    def __repr__(self) -> str:
        return f"Failure[{self.category}:{self.title}:{self.detail}]"


def _describe_raised(exception: Exception) -> FailureDescription:
    """Classify an exception captured from caller code."""
    match exception:
        case InterruptedError():
            interrupt.interrupt()
            category = GenericFailureCategory.GENERIC_INTERRUPTED_EXCEPTION
        case (
            RuntimeError()
            | TypeError()
            | ValueError()
            | AttributeError()
            | LookupError()
            | ArithmeticError()
            | AssertionError()
            | NameError()
        ):
            category = GenericFailureCategory.GENERIC_RUNTIME_EXCEPTION
        case _:
            category = GenericFailureCategory.GENERIC_EXCEPTION

    return FailureDescription.builder().category(category).cause(exception).build()
