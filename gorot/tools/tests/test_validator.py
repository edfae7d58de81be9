# -*- coding: utf-8 -*-
"""
test_validator.py
"""

import numpy as np
import pandas as pd
import pytest

from gorot.tools.validator import check_loadings, restore_labels, is_frame


def test_check_loadings_copies():
    F = np.array([[1, 2], [3, 4]])
    out, labels = check_loadings(F)
    assert out.dtype == np.float64
    assert labels is None
    out[0, 0] = -1.0
    assert F[0, 0] == 1

    G = np.array([[0.5, 0.2], [0.1, 0.9]])
    view, _ = check_loadings(G, copy=False)
    assert view is G


def test_check_loadings_keeps_frame_labels():
    df = pd.DataFrame([[0.5, 0.1], [0.2, 0.7]], index=["a", "b"],
                      columns=["F1", "F2"])
    F, (index, columns) = check_loadings(df)
    assert isinstance(F, np.ndarray)
    assert list(index) == ["a", "b"] and list(columns) == ["F1", "F2"]
    assert is_frame(df) and not is_frame(F)


def test_check_loadings_empty_rows_allowed():
    F, _ = check_loadings(np.empty((0, 3)))
    assert F.shape == (0, 3)


@pytest.mark.parametrize("bad", [
    [1.0, 2.0],
    [[1.0, np.nan]],
    [["a", "b"]],
    np.empty((2, 0)),
])
def test_check_loadings_rejects(bad):
    with pytest.raises(ValueError, match="loadings|array|float|NaN|feature"):
        check_loadings(bad)


def test_restore_labels():
    L, T = np.eye(2), np.eye(2)
    L_out, T_out = restore_labels(L, T, None)
    assert L_out is L and T_out is T
    L_df, T_df = restore_labels(L, T, (pd.Index(["x", "y"]), pd.Index(["F1", "F2"])))
    assert list(L_df.index) == ["x", "y"]
    assert list(T_df.index) == ["F1", "F2"] == list(T_df.columns)
