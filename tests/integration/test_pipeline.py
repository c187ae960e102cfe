"""
Integration tests for the alignment pipeline.

Tests cover:
- End-to-end run with a stub aligner
- Biological costs: normalization, blending and the beta fallback
- Labelled DataFrame outputs
- Aligner failures and malformed inputs
"""

import numpy as np
import pandas as pd
import pytest

from minaa_core.costs import normalize
from minaa_core.errors import DimensionMismatchError, GraphShapeError, SignatureError
from minaa_core.signatures import build_cost_matrix
from minaa_orchestrator.errors import AlignerError, PipelineError
from minaa_orchestrator.models import AlignmentParameters, GraphData
from minaa_orchestrator.pipeline import AlignmentArtifacts, run_alignment


class TestRunAlignment:
    """Test a complete alignment run."""

    @pytest.mark.integration
    def test_two_paths(self, path2_graphs, identity_aligner):
        g, h = path2_graphs

        artifacts = run_alignment(g, h, identity_aligner)

        assert isinstance(artifacts, AlignmentArtifacts)
        assert artifacts.costs.shape == (2, 2)
        assert np.allclose(artifacts.costs, 0.0)
        assert artifacts.combined_costs is artifacts.costs
        assert np.array_equal(
            artifacts.bridged,
            [[0, 1, 1, 0], [1, 0, 0, 1], [1, 0, 0, 1], [0, 1, 1, 0]],
        )
        assert artifacts.merged_labels == ["ax", "by"]
        assert np.array_equal(artifacts.merged, [[0, 3], [3, 0]])
        assert artifacts.summary.conserved_edges == 1
        assert artifacts.summary.aligned_pairs == 2
        assert artifacts.summary.edge_conservation == 1.0

    @pytest.mark.integration
    def test_self_alignment_has_zero_diagonal_cost(self, path3_graph, identity_aligner):
        params = AlignmentParameters(alpha=1.0)
        artifacts = run_alignment(path3_graph, path3_graph, identity_aligner, params)
        assert np.allclose(np.diag(artifacts.costs), 0.0)

    @pytest.mark.integration
    def test_greedy_aligner_on_path_and_star(
        self, path3_graph, star3_adjacency, path3_signatures, signature_factory, greedy_aligner
    ):
        star = GraphData.from_sequences(
            ["x", "y", "z"],
            star3_adjacency,
            [signature_factory(2, o2=1), signature_factory(1, o1=1), signature_factory(1, o1=1)],
        )

        artifacts = run_alignment(path3_graph, star, greedy_aligner, AlignmentParameters(alpha=1.0))

        # b (path middle) has the star center's signature
        assert artifacts.alignment[1, 0] == 1.0
        assert "bx" in artifacts.merged_labels
        assert np.array_equal(artifacts.merged, artifacts.merged.T)

    @pytest.mark.integration
    def test_bio_costs_are_normalized_and_blended(self, path2_graphs, identity_aligner):
        g, h = path2_graphs
        bio = np.array([[2.0, 4.0], [6.0, 8.0]])
        params = AlignmentParameters(alpha=0.5, beta=0.5)

        artifacts = run_alignment(g, h, identity_aligner, params, bio_costs=bio)

        expected = 0.5 * artifacts.costs + 0.5 * normalize(bio)
        assert np.allclose(artifacts.combined_costs, expected)

    @pytest.mark.integration
    def test_bio_costs_used_raw_when_not_normalizing(self, path2_graphs, identity_aligner):
        g, h = path2_graphs
        bio = np.array([[2.0, 4.0], [6.0, 8.0]])
        params = AlignmentParameters(beta=0.0, normalize_bio=False)

        artifacts = run_alignment(g, h, identity_aligner, params, bio_costs=bio)

        assert np.allclose(artifacts.combined_costs, bio)

    @pytest.mark.integration
    def test_out_of_range_beta_falls_back(self, path2_graphs, identity_aligner):
        g, h = path2_graphs
        params = AlignmentParameters(beta=1.5)

        artifacts = run_alignment(g, h, identity_aligner, params, bio_costs=np.ones((2, 2)))

        assert np.array_equal(artifacts.combined_costs, artifacts.costs)

    @pytest.mark.integration
    def test_gamma_threshold(self, path2_graphs):
        class WeakAligner:
            name = "weak"

            def align(self, costs):
                return np.array([[0.9, 0.0], [0.0, 0.2]])

        g, h = path2_graphs
        artifacts = run_alignment(g, h, WeakAligner(), AlignmentParameters(gamma=0.5))

        assert artifacts.merged_labels == ["ax", "b", "y"]
        assert artifacts.bridged[1, 3] == 0
        assert artifacts.summary.aligned_pairs == 1

    @pytest.mark.integration
    def test_soft_aligner_scores_every_pair(self, path3_graph):
        """A dense score matrix resolves every node to its first match."""

        class SoftAligner:
            name = "soft"

            def align(self, costs):
                return 1 - costs

        artifacts = run_alignment(path3_graph, path3_graph, SoftAligner())

        assert artifacts.merged_labels == ["aa", "ba", "ca"]
        assert np.array_equal(artifacts.merged, artifacts.merged.T)
        assert np.all(np.diag(artifacts.merged) == 0)
        assert artifacts.summary.aligned_pairs == 3
        assert len(artifacts.alignment_pairs()) == 9

    @pytest.mark.integration
    def test_empty_graphs(self, identity_aligner):
        empty = GraphData.from_sequences([], [], [])
        artifacts = run_alignment(empty, empty, identity_aligner)
        assert artifacts.costs.shape == (0, 0)
        assert artifacts.merged_labels == []
        assert artifacts.summary.node_count == 0


class TestArtifactFrames:
    """Test labelled DataFrame views of the outputs."""

    @pytest.mark.integration
    def test_frames(self, path2_graphs, identity_aligner):
        g, h = path2_graphs
        artifacts = run_alignment(g, h, identity_aligner)

        costs = artifacts.cost_frame()
        assert isinstance(costs, pd.DataFrame)
        assert list(costs.index) == ["a", "b"]
        assert list(costs.columns) == ["x", "y"]

        merged = artifacts.merged_frame()
        assert merged.loc["ax", "by"] == 3

        pairs = artifacts.alignment_pairs()
        assert list(pairs.columns) == ["g_label", "h_label", "similarity"]
        assert pairs.to_dict("records") == [
            {"g_label": "a", "h_label": "x", "similarity": 1.0},
            {"g_label": "b", "h_label": "y", "similarity": 1.0},
        ]


class TestRunAlignmentErrors:
    """Test failures surfaced by the pipeline."""

    @pytest.mark.integration
    def test_aligner_failure_wrapped(self, path2_graphs, failing_aligner):
        g, h = path2_graphs
        with pytest.raises(AlignerError) as exc_info:
            run_alignment(g, h, failing_aligner)

        assert isinstance(exc_info.value, PipelineError)
        assert exc_info.value.details == {"stage": "alignment", "aligner": "failing"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.integration
    def test_wrong_alignment_shape(self, path2_graphs, wrong_shape_aligner):
        g, h = path2_graphs
        with pytest.raises(DimensionMismatchError):
            run_alignment(g, h, wrong_shape_aligner)

    @pytest.mark.integration
    def test_bio_shape_mismatch(self, path2_graphs, identity_aligner):
        g, h = path2_graphs
        with pytest.raises(DimensionMismatchError):
            run_alignment(
                g, h, identity_aligner, AlignmentParameters(beta=0.5), bio_costs=np.ones((3, 3))
            )

    @pytest.mark.integration
    def test_malformed_signatures(self, path2_adjacency, path2_graphs, identity_aligner):
        _, h = path2_graphs
        g = GraphData.from_sequences(["a", "b"], path2_adjacency, [[1] * 72, [1] * 72])
        with pytest.raises(SignatureError):
            run_alignment(g, h, identity_aligner)

    @pytest.mark.integration
    def test_signature_count_mismatch(self, path2_adjacency, path2_graphs, signature_factory, identity_aligner):
        _, h = path2_graphs
        g = GraphData.from_sequences(["a", "b"], path2_adjacency, [signature_factory(1)])
        with pytest.raises(DimensionMismatchError):
            run_alignment(g, h, identity_aligner)

    @pytest.mark.integration
    def test_label_count_mismatch(self, path2_adjacency, path2_signatures, path2_graphs, identity_aligner):
        _, h = path2_graphs
        g = GraphData.from_sequences(["a"], path2_adjacency, path2_signatures)
        with pytest.raises(DimensionMismatchError):
            run_alignment(g, h, identity_aligner)

    @pytest.mark.integration
    def test_non_square_adjacency(self, path2_signatures, path2_graphs, identity_aligner):
        _, h = path2_graphs
        g = GraphData.from_sequences(["a", "b"], [[0, 1, 0], [1, 0, 0]], path2_signatures)
        with pytest.raises(GraphShapeError):
            run_alignment(g, h, identity_aligner)

    @pytest.mark.integration
    def test_costs_match_direct_computation(self, path3_graph, path3_signatures, identity_aligner):
        artifacts = run_alignment(
            path3_graph, path3_graph, identity_aligner, AlignmentParameters(alpha=0.3)
        )
        direct = build_cost_matrix(path3_signatures, path3_signatures, alpha=0.3)
        assert np.allclose(artifacts.costs, direct)
