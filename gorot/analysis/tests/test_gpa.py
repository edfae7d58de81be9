# -*- coding: utf-8 -*-
"""
test_gpa.py
"""

import numpy as np
import pytest

from gorot.analysis.criteria import (
    RotationMethod,
    CrawfordFerguson,
    Varimax,
    Quartimax,
    MinimumEntropy,
    Oblimin,
    Quartimin,
)
from gorot.analysis.gpa import gpa_orthogonal, gpa_oblique
from gorot.exceptions import ConvergenceError, InvalidParameterError
from gorot.exceptions import RotationMethodError


def _rot2(theta):
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


# Two clusters of four variables, each loading on a single factor.
SIMPLE = np.array([
    [0.80, 0.00],
    [0.70, 0.00],
    [0.60, 0.00],
    [0.75, 0.00],
    [0.00, 0.80],
    [0.00, 0.70],
    [0.00, 0.65],
    [0.00, 0.60],
])
THETA = 0.5
ROTATED = SIMPLE @ _rot2(THETA)


def _same_structure(L, F, atol=1e-4):
    # Equal up to column order and column signs.
    return np.allclose(np.sort(np.abs(L), axis=1),
                       np.sort(np.abs(F), axis=1), atol=atol)


@pytest.mark.parametrize(
    "criterion", [Varimax(), Quartimax(), CrawfordFerguson(kappa=0.0)], ids=repr)
def test_orthogonal_recovers_simple_structure(criterion):
    L, T = gpa_orthogonal(ROTATED, criterion)
    assert _same_structure(L, SIMPLE)
    np.testing.assert_allclose(T.T @ T, np.eye(2), atol=1e-8)
    np.testing.assert_allclose(L, ROTATED @ T)


def test_oblique_recovers_simple_structure():
    L, T = gpa_oblique(ROTATED, Quartimin())
    assert _same_structure(L, SIMPLE)
    np.testing.assert_allclose(np.linalg.norm(T, axis=0), 1.0, atol=1e-8)
    np.testing.assert_allclose(L, ROTATED @ np.linalg.inv(T).T, atol=1e-10)
    _, value = Quartimin().evaluate(L)
    assert value < 1e-8


def test_oblique_constraint_on_generic_loadings():
    F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
    L, T = gpa_oblique(F, Oblimin(gamma=0.5))
    np.testing.assert_allclose(np.linalg.norm(T, axis=0), 1.0, atol=1e-8)
    np.testing.assert_allclose(L, F @ np.linalg.inv(T).T, atol=1e-10)


@pytest.mark.parametrize("optimizer, criterion", [
    (gpa_orthogonal, Varimax()),
    (gpa_oblique, Quartimin()),
    (gpa_oblique, Oblimin(gamma=0.5)),
], ids=["orthogonal-varimax", "oblique-quartimin", "oblique-oblimin"])
def test_criterion_value_never_increases(optimizer, criterion):
    values = []
    optimizer(ROTATED, criterion,
              callback=lambda it, f, s, alpha: values.append(f))
    assert len(values) > 1
    assert np.all(np.diff(values) <= 1e-12)


class _RisingCriterion:
    """Quartimax gradient with a value that grows on every evaluation."""

    method = RotationMethod.ORTHOGONAL

    def __init__(self):
        self.calls = 0

    def evaluate(self, L):
        self.calls += 1
        return Quartimax().evaluate(L)[0], float(self.calls)


def test_exhausted_line_search_accepts_last_trial():
    criterion = _RisingCriterion()
    records = []
    with pytest.raises(ConvergenceError):
        gpa_orthogonal(ROTATED, criterion, lsiter=3, maxiter=2,
                       callback=lambda *args: records.append(args))
    # One evaluation at the start, then three failed trials per iteration.
    assert criterion.calls == 1 + 2 * 3
    values = [r[1] for r in records]
    steps = [r[3] for r in records]
    assert values == [1.0, 4.0]
    assert steps == [1.0, 0.25]


def test_callback_receives_iteration_state():
    records = []
    gpa_oblique(ROTATED, Quartimin(),
                callback=lambda *args: records.append(args))
    iterations = [r[0] for r in records]
    assert iterations == list(range(1, len(records) + 1))
    assert all(r[2] >= 0 and r[3] > 0 for r in records)
    assert records[-1][2] < 1e-6
    assert all(r[2] >= 1e-6 for r in records[:-1])


def test_single_variable_left_unrotated():
    F = np.array([[0.3, 0.4, 0.5]])
    for optimizer, criterion in [(gpa_orthogonal, Varimax()),
                                 (gpa_oblique, Quartimin())]:
        L, T = optimizer(F, criterion, maxiter=0)
        np.testing.assert_array_equal(L, F)
        np.testing.assert_array_equal(T, np.eye(3))
        assert L is not F


def test_no_variables_left_unrotated():
    L, T = gpa_orthogonal(np.empty((0, 2)), Varimax())
    assert L.shape == (0, 2)
    np.testing.assert_array_equal(T, np.eye(2))


def test_maxiter_zero_raises():
    # Even an already optimal start is not inspected without an iteration.
    with pytest.raises(ConvergenceError) as excinfo:
        gpa_orthogonal(SIMPLE, Varimax(), maxiter=0)
    assert excinfo.value.n_iter == 0
    assert excinfo.value.tol == 1e-6


def test_iteration_budget_exhausted():
    with pytest.raises(ConvergenceError) as excinfo:
        gpa_orthogonal(ROTATED, Varimax(), maxiter=1)
    err = excinfo.value
    assert err.n_iter == 1
    assert err.grad_norm > err.tol
    assert "did not converge" in str(err)


def test_wrong_method_rejected():
    with pytest.raises(RotationMethodError):
        gpa_orthogonal(ROTATED, Quartimin())
    with pytest.raises(RotationMethodError):
        gpa_oblique(ROTATED, Varimax())
    with pytest.raises(RotationMethodError):
        gpa_oblique(ROTATED, CrawfordFerguson(kappa=0.5))


@pytest.mark.parametrize("options", [
    {"lsiter": 0},
    {"maxiter": -1},
    {"tol": 0.0},
    {"tol": -1e-3},
    {"normalizerows": "yes"},
    {"callback": 3},
])
def test_invalid_options(options):
    with pytest.raises(InvalidParameterError):
        gpa_orthogonal(ROTATED, Varimax(), **options)


def test_criterion_must_evaluate():
    with pytest.raises(InvalidParameterError):
        gpa_orthogonal(ROTATED, "varimax")


def test_random_start_reproducible():
    L1, T1 = gpa_orthogonal(ROTATED, Varimax(), randominit=True, random_state=3)
    L2, T2 = gpa_orthogonal(ROTATED, Varimax(), randominit=True, random_state=3)
    np.testing.assert_array_equal(L1, L2)
    np.testing.assert_array_equal(T1, T2)
    assert _same_structure(L1, SIMPLE)


def test_random_start_oblique():
    L, T = gpa_oblique(ROTATED, Quartimin(), randominit=True,
                       random_state=np.random.RandomState(11))
    np.testing.assert_allclose(np.linalg.norm(T, axis=0), 1.0, atol=1e-8)
    np.testing.assert_allclose(L, ROTATED @ np.linalg.inv(T).T, atol=1e-10)


def test_random_state_ignored_without_randominit():
    L1, T1 = gpa_orthogonal(ROTATED, Varimax(), random_state=1)
    L2, T2 = gpa_orthogonal(ROTATED, Varimax(), random_state=2)
    np.testing.assert_array_equal(T1, T2)


def test_normalizerows_orthogonal():
    F = ROTATED * np.array([[1.0], [0.5], [2.0], [1.0], [0.3], [1.0], [1.5], [1.0]])
    F_before = F.copy()
    L, T = gpa_orthogonal(F, Varimax(), normalizerows=True)
    np.testing.assert_array_equal(F, F_before)
    np.testing.assert_allclose(np.linalg.norm(L, axis=1),
                               np.linalg.norm(F, axis=1))
    np.testing.assert_allclose(L, F @ T)


def test_normalizerows_oblique():
    # Rows are rescaled before the rotation and back after it, so the
    # returned pair still satisfies L = F inv(T)' for the caller's F.
    F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6], [0.4, 0.2]])
    F_before = F.copy()
    L, T = gpa_oblique(F, Oblimin(gamma=0.5), normalizerows=True)
    np.testing.assert_array_equal(F, F_before)
    np.testing.assert_allclose(L, F @ np.linalg.inv(T).T, atol=1e-10)


def test_minimum_entropy_rotation():
    L, T = gpa_orthogonal(ROTATED + 0.01, MinimumEntropy())
    np.testing.assert_allclose(T.T @ T, np.eye(2), atol=1e-8)
    _, before = MinimumEntropy().evaluate(ROTATED + 0.01)
    _, after = MinimumEntropy().evaluate(L)
    assert after <= before
