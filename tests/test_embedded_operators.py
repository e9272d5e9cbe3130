"""
Test Suite: Embedding and Unembedding Operators
===============================================

Covers `embed`, `unembed` and `EmbeddedOperator`, in particular the
round-trip law unembed(embed(U, s, L), s) == U.
"""

import numpy as np
import pytest
import scipy.sparse as sp

from quantum_objects import (
    DimensionMismatch,
    EmbeddedOperator,
    GATES,
    InvalidSubspace,
    embed,
    get_enr_subspace_indices,
    get_subspace_indices,
    operator_from_string,
    unembed,
)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


class TestEmbed:
    """Placing a subspace operator into a larger space."""

    def test_x_gate_in_three_levels(self):
        X3 = embed(GATES["X"], range(2), 3)
        expected = np.array([[0, 1, 0], [1, 0, 0], [0, 0, 0]], dtype=complex)
        assert np.array_equal(X3, expected)

    def test_round_trip_single_system(self):
        X = GATES["X"].full()
        assert np.array_equal(unembed(embed(X, range(2), 3), range(2)), X)

    @pytest.mark.parametrize("levels", [[3, 3], [2, 4], [3, 2, 2]])
    def test_round_trip_composite(self, levels, rng):
        indices = get_subspace_indices(levels)
        d = len(indices)
        U = rng.normal(size=(d, d)) + 1j * rng.normal(size=(d, d))
        assert np.array_equal(unembed(embed(U, indices, levels), indices), U)

    def test_round_trip_enr_subspace(self, rng):
        indices = get_enr_subspace_indices(1, [3, 3])
        U = rng.normal(size=(3, 3)) + 1j * rng.normal(size=(3, 3))
        assert np.array_equal(unembed(embed(U, indices, 9), indices), U)

    def test_zero_outside_subspace(self):
        full = embed(np.ones((2, 2)), [0, 2], 3)
        assert np.all(full[1, :] == 0)
        assert np.all(full[:, 1] == 0)

    def test_index_order_is_respected(self):
        full = embed(np.diag([1, 2]), [2, 0], 3)
        assert full[2, 2] == 1
        assert full[0, 0] == 2

    def test_accepts_sparse(self):
        full = embed(sp.csr_matrix(np.eye(2)), range(2), 4)
        assert np.array_equal(full, np.diag([1, 1, 0, 0]).astype(complex))

    def test_size_mismatch(self):
        with pytest.raises(DimensionMismatch):
            embed(np.eye(3), range(2), 3)

    def test_non_square(self):
        with pytest.raises(DimensionMismatch):
            embed(np.zeros((2, 3)), range(2), 3)

    def test_index_out_of_range(self):
        with pytest.raises(InvalidSubspace):
            embed(np.eye(2), [0, 5], 3)

    def test_duplicate_indices(self):
        with pytest.raises(InvalidSubspace):
            embed(np.eye(2), [1, 1], 3)

    def test_non_integer_indices(self):
        with pytest.raises(InvalidSubspace):
            embed(np.eye(2), [0, 1.9], 3)
        with pytest.raises(InvalidSubspace):
            unembed(np.eye(3), [0.0, 1.0])

    def test_numpy_integer_indices(self):
        full = embed(np.eye(2), np.array([0, 2]), 3)
        assert np.array_equal(full, np.diag([1, 0, 1]).astype(complex))

    def test_unembed_requires_indices(self):
        with pytest.raises(TypeError):
            unembed(np.eye(3))


class TestEmbeddedOperator:
    """Operator + subspace + subsystem structure."""

    @pytest.fixture
    def x_on_first_qubit(self):
        gate = operator_from_string("XI")
        levels = [3, 3]
        indices = get_subspace_indices([range(2), range(2)], levels)
        return gate, EmbeddedOperator(gate, indices, levels)

    def test_construction(self, x_on_first_qubit):
        _, op = x_on_first_qubit
        assert op.operator.shape == (9, 9)
        assert op.subspace_indices == [0, 1, 3, 4]
        assert op.subsystem_levels == [3, 3]
        assert op.dim == 9

    def test_unembed_recovers_gate(self, x_on_first_qubit):
        gate, op = x_on_first_qubit
        assert np.array_equal(op.unembed(), gate.full())
        assert np.array_equal(unembed(op), gate.full())

    def test_default_subspace_is_qubits(self):
        op = EmbeddedOperator(operator_from_string("XI"), subsystem_levels=[3, 3])
        assert op.subspace_indices == [0, 1, 3, 4]

    def test_embedded_x_swaps_levels(self, x_on_first_qubit):
        """X on the first qubit maps |00⟩ (0) ↔ |10⟩ (3) and |01⟩ (1) ↔ |11⟩ (4)."""
        _, op = x_on_first_qubit
        assert op.operator[3, 0] == 1
        assert op.operator[4, 1] == 1
        assert op.operator[0, 3] == 1
        assert np.all(op.operator[:, op.leakage_indices] == 0)

    def test_leakage_indices(self, x_on_first_qubit):
        _, op = x_on_first_qubit
        assert op.leakage_indices == [2, 5, 6, 7, 8]

    def test_sparse_view(self, x_on_first_qubit):
        _, op = x_on_first_qubit
        S = op.sparse()
        assert sp.issparse(S)
        assert S.nnz == 4

    def test_composition(self):
        X = EmbeddedOperator(GATES["X"], subsystem_levels=3)
        XX = X @ X
        assert isinstance(XX, EmbeddedOperator)
        assert np.allclose(XX.unembed(), np.eye(2))
        assert np.allclose(XX.operator, np.diag([1, 1, 0]))

    def test_composition_mismatch(self):
        a = EmbeddedOperator(GATES["X"], subsystem_levels=3)
        b = EmbeddedOperator(GATES["X"], [1, 2], 3)
        with pytest.raises(DimensionMismatch):
            a @ b

    def test_from_full_operator_shape_check(self):
        with pytest.raises(DimensionMismatch):
            EmbeddedOperator.from_full_operator(np.eye(4), [0, 1], 3)

    def test_non_integer_indices(self):
        with pytest.raises(InvalidSubspace):
            EmbeddedOperator(np.eye(2), [0.0, 2.7], 3)

    def test_subsystem_levels_required(self):
        with pytest.raises(TypeError):
            EmbeddedOperator(GATES["X"])
        with pytest.raises(TypeError):
            EmbeddedOperator(GATES["X"], [0, 1])
