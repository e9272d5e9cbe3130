"""
Test Suite: Real Isomorphisms
=============================

Checks the iso layouts the index functions rely on and that the
conversions are exact inverses of one another.
"""

import numpy as np
import pytest

from quantum_objects import (
    GATES,
    iso_operator,
    iso_operator_to_operator,
    iso_to_ket,
    iso_vec_to_operator,
    ket_from_string,
    ket_to_iso,
    operator_to_iso_vec,
    unvec,
    vec,
)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_operator(rng):
    return rng.normal(size=(3, 3)) + 1j * rng.normal(size=(3, 3))


class TestKetIso:
    """ψ ↦ [Re ψ; Im ψ]"""

    def test_layout(self):
        psi = np.array([1 + 2j, 3 - 4j])
        assert np.array_equal(ket_to_iso(psi), [1.0, 3.0, 2.0, -4.0])

    def test_inverse(self, rng):
        psi = rng.normal(size=5) + 1j * rng.normal(size=5)
        assert np.allclose(iso_to_ket(ket_to_iso(psi)), psi)

    def test_accepts_qobj(self):
        iso = ket_to_iso(ket_from_string("e", [2]))
        assert np.array_equal(iso, [0.0, 1.0, 0.0, 0.0])

    def test_odd_length_rejected(self):
        with pytest.raises(ValueError):
            iso_to_ket([1.0, 2.0, 3.0])


class TestOperatorIso:
    """Block form [[Re H, -Im H], [Im H, Re H]]."""

    def test_action_matches_complex_product(self, random_operator, rng):
        psi = rng.normal(size=3) + 1j * rng.normal(size=3)
        lhs = iso_operator(random_operator) @ ket_to_iso(psi)
        rhs = ket_to_iso(random_operator @ psi)
        assert np.allclose(lhs, rhs)

    def test_inverse(self, random_operator):
        assert np.allclose(iso_operator_to_operator(iso_operator(random_operator)), random_operator)

    def test_accepts_qobj(self):
        X = iso_operator(GATES["X"])
        assert X.shape == (4, 4)
        assert np.allclose(X[:2, :2], [[0, 1], [1, 0]])

    def test_non_square_rejected(self):
        with pytest.raises(ValueError):
            iso_operator(np.zeros((2, 3)))


class TestOperatorIsoVec:
    """Columns stacked as iso kets."""

    def test_entry_positions(self, random_operator):
        N = 3
        iso = operator_to_iso_vec(random_operator)
        assert iso.shape == (2 * N * N,)
        for i in range(N):
            for j in range(N):
                assert iso[2 * N * j + i] == random_operator[i, j].real
                assert iso[2 * N * j + N + i] == random_operator[i, j].imag

    def test_inverse(self, random_operator):
        assert np.allclose(iso_vec_to_operator(operator_to_iso_vec(random_operator)), random_operator)

    def test_bad_length_rejected(self):
        with pytest.raises(ValueError):
            iso_vec_to_operator(np.zeros(7))


class TestVec:
    def test_column_major(self):
        A = np.array([[1, 2], [3, 4]])
        assert np.array_equal(vec(A), [1, 3, 2, 4])
        assert np.array_equal(unvec(vec(A)), A)

    def test_unvec_bad_length(self):
        with pytest.raises(ValueError):
            unvec(np.arange(5))
