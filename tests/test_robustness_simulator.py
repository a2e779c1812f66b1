"""
Unit Tests for RobustnessSimulator and RemovalStrategy

Tests for:
    - Strategy parsing and aliases
    - Removal ordering (targeted, tiebreak, seeded random)
    - Sweep protocol: 21 points, ratios, removal counts
    - NGC decay properties (monotonicity, star collapse)
"""

import random

import pytest

from netresilience.config import AnalysisSettings
from netresilience.domain.config import RemovalStrategy, DEFAULT_STRATEGIES
from netresilience.domain.models import UnknownStrategyError, RobustnessCurve
from netresilience.domain.services import RobustnessSimulator, CentralityEngine, TopologyStats

from conftest import make_index, star_edges


TARGETED = ["degree", "betweenness", "pageRank", "domiRank"]


# =============================================================================
# Strategy parsing
# =============================================================================

class TestRemovalStrategy:

    @pytest.mark.parametrize("text,expected", [
        ("random", RemovalStrategy.RANDOM),
        ("Degree", RemovalStrategy.DEGREE),
        ("betweenness", RemovalStrategy.BETWEENNESS),
        ("pageRank", RemovalStrategy.PAGERANK),
        ("page_rank", RemovalStrategy.PAGERANK),
        ("DOMIRANK", RemovalStrategy.DOMIRANK),
        (" dominance ", RemovalStrategy.DOMIRANK),
    ])
    def test_from_string(self, text, expected):
        assert RemovalStrategy.from_string(text) is expected

    def test_enum_passes_through(self):
        assert RemovalStrategy.from_string(RemovalStrategy.DEGREE) is RemovalStrategy.DEGREE

    def test_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError):
            RemovalStrategy.from_string("closeness")

    def test_metric_names(self):
        assert RemovalStrategy.RANDOM.metric_name is None
        assert RemovalStrategy.PAGERANK.metric_name == "pagerank"
        assert not RemovalStrategy.RANDOM.is_targeted
        assert RemovalStrategy.DOMIRANK.is_targeted


# =============================================================================
# Ordering
# =============================================================================

class TestRemovalOrder:

    def test_degree_order_puts_hub_first(self, star_index):
        order = RobustnessSimulator().removal_order(star_index, "degree")
        assert order[0] == "HUB"
        assert order[1:] == [f"L{i}" for i in range(19)]

    def test_ties_keep_node_order(self, cycle_index):
        simulator = RobustnessSimulator()
        for strategy in TARGETED:
            assert simulator.removal_order(cycle_index, strategy) == ["A", "B", "C", "D"]

    def test_random_order_is_permutation(self, random_index):
        order = RobustnessSimulator(rng=random.Random(1)).removal_order(random_index, "random")
        assert sorted(order) == sorted(random_index.node_ids)

    def test_seeded_random_is_reproducible(self, random_index):
        a = RobustnessSimulator(rng=random.Random(7)).simulate(random_index, "random")
        b = RobustnessSimulator(rng=random.Random(7)).simulate(random_index, "random")
        assert a.ngc_values() == b.ngc_values()

    def test_settings_seed_is_used(self, random_index):
        settings = AnalysisSettings(seed=11)
        a = RobustnessSimulator(settings=settings).removal_order(random_index, "random")
        b = RobustnessSimulator(settings=settings).removal_order(random_index, "random")
        assert a == b

    def test_precomputed_metrics_are_used(self, path_index):
        metrics = CentralityEngine().compute(path_index)
        order = RobustnessSimulator().removal_order(path_index, "betweenness", metrics)
        assert order[0] == "B"


# =============================================================================
# Sweep protocol
# =============================================================================

class TestSimulate:

    def test_twenty_one_points(self, random_index):
        curve = RobustnessSimulator().simulate(random_index, "degree")
        assert isinstance(curve, RobustnessCurve)
        assert len(curve) == 21
        assert curve.ratios() == [i / 20 for i in range(21)]
        assert curve.strategy == "degree"
        assert all(p.strategy == "degree" for p in curve.points)

    def test_removed_counts(self, random_index):
        curve = RobustnessSimulator().simulate(random_index, "pageRank")
        n = random_index.node_count
        assert [p.removed_count for p in curve.points] == [int(i / 20 * n) for i in range(21)]

    def test_endpoints(self, cycle_index):
        curve = RobustnessSimulator().simulate(cycle_index, "degree")
        assert curve.points[0].ngc == 1.0
        assert curve.points[-1].ngc == 0.0
        assert curve.points[-1].removed_count == 4

    @pytest.mark.slow
    @pytest.mark.parametrize("strategy", TARGETED + ["random"])
    def test_ngc_never_increases_against_original_size(self, random_index, strategy):
        settings = AnalysisSettings(ngc_relative_to_remaining=False)
        simulator = RobustnessSimulator(settings=settings, rng=random.Random(3))
        curve = simulator.simulate(random_index, strategy)
        values = curve.ngc_values()
        assert all(later <= earlier for earlier, later in zip(values, values[1:]))

    def test_star_collapses_when_hub_removed(self, star_index):
        """With the hub gone, 19 isolated leaves give 1/19."""
        curve = RobustnessSimulator().simulate(star_index, "degree")
        first = next(p for p in curve.points if p.removed_count > 0)
        assert curve.points[0].ngc == 1.0
        assert first.removed_count == 1
        assert first.ngc == pytest.approx(1 / 19)

    def test_star_point_matches_survivor_ngc(self):
        ids, edges = star_edges(4)
        index = make_index(ids, edges)
        simulator = RobustnessSimulator()
        curve = simulator.simulate(index, "degree")
        first = next(p for p in curve.points if p.removed_count > 0)
        order = simulator.removal_order(index, "degree")
        survivors = index.subgraph(order[first.removed_count:])
        assert first.ngc == pytest.approx(1 / 4)
        assert first.ngc == pytest.approx(TopologyStats.normalized_giant_component(survivors))
        assert curve.points[-1].ngc == 0.0

    def test_star_collapse_against_original_size(self):
        """Measured against the original V, N leaves give 1/(N+1)."""
        ids, edges = star_edges(4)
        index = make_index(ids, edges)
        settings = AnalysisSettings(ngc_relative_to_remaining=False)
        curve = RobustnessSimulator(settings=settings).simulate(index, "degree")
        first = next(p for p in curve.points if p.removed_count > 0)
        assert first.ngc == pytest.approx(1 / 5)

    def test_empty_graph(self, empty_index):
        curve = RobustnessSimulator().simulate(empty_index, "degree")
        assert len(curve) == 21
        assert set(curve.ngc_values()) == {0.0}

    def test_custom_step_count(self, cycle_index):
        settings = AnalysisSettings(robustness_steps=4)
        curve = RobustnessSimulator(settings=settings).simulate(cycle_index, "degree")
        assert curve.ratios() == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert [p.removed_count for p in curve.points] == [0, 1, 2, 3, 4]

    def test_targeted_curves_are_deterministic(self, random_index):
        simulator = RobustnessSimulator()
        for strategy in TARGETED:
            assert simulator.simulate(random_index, strategy).to_dict() == \
                simulator.simulate(random_index, strategy).to_dict()

    def test_collapse_ratio(self, star_index):
        curve = RobustnessSimulator().simulate(star_index, "degree")
        assert curve.collapse_ratio(0.5) == pytest.approx(0.05)
        assert curve.collapse_ratio(-1.0) is None

    def test_curve_dataframe(self, cycle_index):
        df = RobustnessSimulator().simulate(cycle_index, "degree").to_dataframe()
        assert list(df.columns) == ["removal_ratio", "ngc", "removed_count", "strategy"]
        assert len(df) == 21


class TestSimulateAll:

    @pytest.mark.slow
    def test_all_default_strategies(self, random_index):
        curves = RobustnessSimulator(rng=random.Random(5)).simulate_all(random_index)
        assert list(curves) == [s.value for s in DEFAULT_STRATEGIES]
        assert all(len(c) == 21 for c in curves.values())

    def test_subset_of_strategies(self, star_index):
        curves = RobustnessSimulator().simulate_all(star_index, ["degree", "random"])
        assert list(curves) == ["degree", "random"]

    def test_empty_strategy_list_runs_nothing(self, star_index):
        assert RobustnessSimulator().simulate_all(star_index, []) == {}

    def test_targeted_attack_beats_random_on_star(self, star_index):
        curves = RobustnessSimulator(rng=random.Random(0)).simulate_all(star_index)
        degree = curves["degree"].ngc_values()
        rand = curves["random"].ngc_values()
        assert sum(degree) <= sum(rand)
