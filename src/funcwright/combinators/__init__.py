"""Combinators - curried helpers built on the kernel."""

from funcwright.combinators.access import (
    field,
    fields,
    has_field,
    has_fields,
    has_prop,
    has_props,
    includes,
    prop,
    props,
)
from funcwright.combinators.application import (
    apply,
    apply_to,
    binary,
    construct,
    defer,
    effect,
    enforce,
    extract,
    identity,
    nary,
    partial,
    raise_,
    satisfies,
    then,
    unary,
)
from funcwright.combinators.branching import condition, unless, when
from funcwright.combinators.objects import assign, invoke, method, modify, object_of, trigger

__all__ = [
    # Application
    "apply",
    "apply_to",
    "binary",
    "construct",
    "defer",
    "effect",
    "enforce",
    "extract",
    "identity",
    "nary",
    "partial",
    "raise_",
    "satisfies",
    "then",
    "unary",
    # Branching
    "condition",
    "when",
    "unless",
    # Access
    "prop",
    "props",
    "has_prop",
    "has_props",
    "field",
    "fields",
    "has_field",
    "has_fields",
    "includes",
    # Objects
    "assign",
    "modify",
    "object_of",
    "invoke",
    "method",
    "trigger",
]
