from __future__ import annotations

import math

import pytest

from neural.attribution import attribute, raw_totals


def test_perfect_conditions_ranking(perfect_inputs, weights) -> None:
    ranked = attribute(perfect_inputs, weights)
    assert [f.feature for f in ranked] == ["Solar Radiation", "Temperature", "Wind Speed", "Humidity"]
    assert [round(f.importance, 2) for f in ranked] == [100.0, 97.77, 69.2, 30.36]
    assert ranked[0].contribution == pytest.approx(1.12)
    assert ranked[1].contribution == pytest.approx(0.75 * 1.095)


def test_raw_totals(perfect_inputs) -> None:
    assert raw_totals(perfect_inputs) == pytest.approx([1.095, 0.34, 0.775, 1.12])


def test_max_importance_is_exactly_100(perfect_inputs) -> None:
    for scale in (0.1, 1.0, 7.5):
        ranked = attribute([x * scale for x in perfect_inputs])
        assert max(f.importance for f in ranked) == 100.0
        assert all(0.0 <= f.importance <= 100.0 for f in ranked)


def test_sorted_descending(perfect_inputs) -> None:
    importances = [f.importance for f in attribute(perfect_inputs)]
    assert importances == sorted(importances, reverse=True)


def test_ties_keep_feature_order(uniform_weights) -> None:
    ranked = attribute([1.0, 1.0, 1.0, 1.0], uniform_weights)
    assert [f.feature for f in ranked] == ["Temperature", "Humidity", "Wind Speed", "Solar Radiation"]
    assert all(f.importance == 100.0 for f in ranked)


def test_all_zero_inputs_give_zero_importance() -> None:
    ranked = attribute([0.0, 0.0, 0.0, 0.0])
    assert [f.importance for f in ranked] == [0.0, 0.0, 0.0, 0.0]
    assert not any(math.isnan(f.importance) for f in ranked)
    assert [f.feature for f in ranked] == ["Temperature", "Humidity", "Wind Speed", "Solar Radiation"]


def test_ranking_invariant_under_uniform_rescaling(perfect_inputs) -> None:
    base = [f.feature for f in attribute(perfect_inputs)]
    for factor in (0.01, 3.0, 250.0):
        scaled = [f.feature for f in attribute([x * factor for x in perfect_inputs])]
        assert scaled == base


def test_contribution_is_signed_by_input() -> None:
    ranked = {f.feature: f for f in attribute([-0.5, 0.4, 0.5, 1.0])}
    assert ranked["Temperature"].contribution < 0.0
    assert ranked["Temperature"].importance > 0.0
