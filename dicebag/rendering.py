"""Plain-text rendering of evaluation results for the command line."""

from __future__ import annotations

from dicebag.evaluator import TokenResult


def render_value(value: int | float) -> str:
    return str(value)


def render_result(result: TokenResult) -> str:
    """Render a successful result as ``<notation> <values>``.

    Values are the outcomes in draw order separated by spaces, or the single
    aggregate value when one was computed.

    Raises:
        ValueError: If result holds an error rather than a roll.
    """
    if result.roll_set is None:
        raise ValueError(f"No roll to render for {result.token!r}")
    if result.aggregate is not None:
        values = render_value(result.aggregate)
    else:
        values = " ".join(render_value(o) for o in result.roll_set.outcomes)
    return f"{result.roll_set.spec} {values}"


def render_error(result: TokenResult) -> str:
    """Render a failed result, naming the offending token."""
    return f"error: could not parse {result.token!r}: {result.error}"
