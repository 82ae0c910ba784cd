"""Tests for command-line text rendering."""

import pytest

from dicebag.aggregate import AggregateKind
from dicebag.evaluator import evaluate
from dicebag.random_source import ScriptedRandomSource
from dicebag.rendering import render_error, render_result


def _one(token, kind=None, draws=()):
    (result,) = evaluate([token], kind, ScriptedRandomSource(draws))
    return result


def test_outcomes_joined_in_draw_order():
    assert render_result(_one("5d6", draws=[3, 6, 1, 1, 4])) == "5d6 3 6 1 1 4"


def test_implicit_count_rendered_canonically():
    assert render_result(_one("d20", draws=[17])) == "1d20 17"


def test_aggregate_replaces_outcomes():
    assert render_result(_one("3d6", AggregateKind.sum, [1, 2, 3])) == "3d6 6"


def test_avg_rendered_as_float():
    assert render_result(_one("2d6", AggregateKind.avg, [3, 3])) == "2d6 3.0"
    assert render_result(_one("2d6", AggregateKind.avg, [1, 2])) == "2d6 1.5"


def test_error_names_token():
    line = render_error(_one("bad"))
    assert line.startswith("error: could not parse 'bad': ")


def test_render_result_rejects_error():
    with pytest.raises(ValueError):
        render_result(_one("56"))
