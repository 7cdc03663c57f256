import logging

import numpy as np
import pytest

from numframe.dataframe import ColumnType, DataFrame
from numframe.errors import InvalidArgumentError


@pytest.fixture
def df():
    """A 4x3 dataframe with named rows and a column of each type."""
    return DataFrame(
        [("A", [1, 2, 3, 4]), ("B", [5, 6, 7, 8]), ("C", [9, 10, 11, 12])],
        row_names=["w", "x", "y", "z"],
        types=[ColumnType.INT, ColumnType.FLOAT, ColumnType.DOUBLE],
    )


def test_slice_full_selection_is_equal(df):
    """Selecting every row and column in order gives back the same dataframe."""
    sliced = df.get(list(range(df.num_rows)), list(range(df.num_columns)))
    assert sliced.equals(df)
    assert sliced is not df


@pytest.mark.parametrize(
    "rows, cols",
    [
        ([2, 0], [1]),
        (["y", "w"], ["B"]),
        ([2, "w"], [1]),
        (["y", 0], ["B"]),
    ],
)
def test_slice_by_index_or_name(df, rows, cols):
    sliced = df.get(rows, cols)
    assert sliced.dim() == (2, 1)
    assert sliced.row_names == ["y", "w"]
    assert sliced.column_names == ["B"]
    assert sliced.get_column("B").as_doubles() == [7.0, 5.0]


def test_slice_keeps_requested_order_and_types(df):
    sliced = df.get(["z", "x"], ["C", "A"])
    assert sliced.column_names == ["C", "A"]
    assert sliced.get_row(0) == [12.0, 4.0]
    assert sliced.get_column_type("A") is ColumnType.INT
    assert sliced.get_column_type("C") is ColumnType.DOUBLE


def test_slice_repeated_rows(df):
    sliced = df.get([1, 1, 0], ["A"])
    assert sliced.dim() == (3, 1)
    assert sliced.get_column("A").as_doubles() == [2.0, 2.0, 1.0]
    assert sliced.row_names == ["x", "x", "w"]


def test_slice_repeated_columns_keeps_first(df, caplog):
    with caplog.at_level(logging.WARNING):
        sliced = df.get([0], ["A", "A", "B"])
    assert sliced.column_names == ["A", "B"]
    assert "already exists" in caplog.text


def test_slice_single_key_and_selector(df):
    """A scalar key on one axis and a selector on the other still slices."""
    column = df.get(["x", "y"], "B")
    assert isinstance(column, DataFrame)
    assert column.dim() == (2, 1)

    row = df.get("x", range(3))
    assert row.dim() == (1, 3)
    assert row.get_row(0) == [2.0, 6.0, 10.0]


def test_slice_with_numpy_selector(df):
    sliced = df.get(np.array([3, 0]), ("A", "C"))
    assert sliced.get_column("C").as_doubles() == [12.0, 9.0]


def test_slice_is_independent(df):
    sliced = df.get([0, 1], ["A"])
    sliced.set(100, 0, 0)
    sliced.add_row([5])
    assert df.get(0, 0) == 1.0
    assert df.dim() == (4, 3)


def test_slice_getitem(df):
    sliced = df[["w", "x"], ["A", "B"]]
    assert sliced.dim() == (2, 2)
    assert sliced.get("x", "B") == 6.0


@pytest.mark.parametrize(
    "rows, cols",
    [([0, 4], [0]), ([0], [0, 3]), (["w", "nope"], ["A"]), ([0], ["A", "nope"])],
)
def test_slice_unresolved(df, rows, cols):
    with pytest.raises(InvalidArgumentError):
        df.get(rows, cols)


def test_slice_empty_selection(df):
    assert df.get([], ["A"]).dim() == (0, 1)
    assert df.get([0], []).dim() == (0, 0)
