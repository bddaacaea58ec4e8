"""
Message templates with positional `{}` placeholders.

Failure details are usually written once as a template and expanded with the
values at hand:

    expand("User {} not found in {}", ["alice", "ldap"])
    # → "User alice not found in ldap"

Expansion never fails. A mismatch between placeholders and arguments is
logged and the missing arguments are filled with the `NotSupplied` sentinel,
so a badly formed call still produces a readable detail.
"""

from __future__ import annotations

from typing import Any, Sequence

import structlog

PLACEHOLDER = "{}"
NOT_SUPPLIED = "NotSupplied"

log = structlog.get_logger()


def count_placeholders(template: str | None) -> int:
    """Count the non-overlapping `{}` markers in a template."""
    if not template:
        return 0
    return template.count(PLACEHOLDER)


def expand(template: str | None, args: Sequence[Any] | None = None) -> str:
    """
    Substitute placeholders left to right with `str()` of each argument.

    Fewer arguments than placeholders are padded with NOT_SUPPLIED; surplus
    arguments are dropped. Either way a `template.argument_count_mismatch`
    warning is emitted.

        >>> expand("Hi {} and {}", ["A"])
        'Hi A and NotSupplied'
    """
    if template is None:
        return ""

    supplied = list(args) if args is not None else []
    expected = count_placeholders(template)

    if len(supplied) != expected:
        log.warning(
            "template.argument_count_mismatch",
            supplied=len(supplied),
            expected=expected,
            template=template,
        )

    padded = supplied + [NOT_SUPPLIED] * (expected - len(supplied))

    pieces = template.split(PLACEHOLDER)
    expanded = [pieces[0]]
    for arg, piece in zip(padded, pieces[1:]):
        expanded.append(str(arg))
        expanded.append(piece)
    return "".join(expanded)
