from .combinators import (
    apply,
    apply_to,
    assign,
    binary,
    condition,
    construct,
    defer,
    effect,
    enforce,
    extract,
    field,
    fields,
    has_field,
    has_fields,
    has_prop,
    has_props,
    identity,
    includes,
    invoke,
    method,
    modify,
    nary,
    object_of,
    partial,
    prop,
    props,
    raise_,
    satisfies,
    then,
    trigger,
    unary,
    unless,
    when,
)
from .kernel import (
    ChainOptions,
    ChainStep,
    Curried,
    FuncwrightError,
    InvalidArgumentError,
    NotIterableError,
    PartialApplication,
    StepMode,
    Trace,
    TypeTag,
    UnsupportedTypeError,
    aggregate,
    classify,
    compose,
    curried,
    curry,
    is_callable,
    is_like,
    passthrough,
    spread,
    use,
)

__all__ = [
    # Core
    "curry",
    "curried",
    "compose",
    "aggregate",
    "use",
    "spread",
    "passthrough",
    "Curried",
    "PartialApplication",
    "ChainStep",
    "ChainOptions",
    "StepMode",
    # Tracing
    "Trace",
    # Types
    "TypeTag",
    "classify",
    "is_callable",
    "is_like",
    # Errors
    "FuncwrightError",
    "InvalidArgumentError",
    "NotIterableError",
    "UnsupportedTypeError",
    # Combinators
    "apply",
    "apply_to",
    "assign",
    "binary",
    "condition",
    "construct",
    "defer",
    "effect",
    "enforce",
    "extract",
    "field",
    "fields",
    "has_field",
    "has_fields",
    "has_prop",
    "has_props",
    "identity",
    "includes",
    "invoke",
    "method",
    "modify",
    "nary",
    "object_of",
    "partial",
    "prop",
    "props",
    "raise_",
    "satisfies",
    "then",
    "trigger",
    "unary",
    "unless",
    "when",
]
