import copy
import logging

import numpy as np
import pyarrow as pa
import pytest

from numframe.dataframe import Column, ColumnType, DataFrame
from numframe.errors import InvalidArgumentError


@pytest.fixture
def df():
    """A 3x2 dataframe with default row names."""
    return DataFrame({"A": [1, 2, 3], "B": [4, 5, 6]})


def test_empty_dataframe():
    df = DataFrame()
    assert df.dim() == (0, 0)
    assert df.empty
    assert df.column_names == []
    assert df.row_names == []
    assert len(df) == 0


def test_construct_from_pairs_with_row_names():
    df = DataFrame([("A", [1, 2]), ("B", [3, 4])], row_names=["x", "y"])
    assert df.dim() == (2, 2)
    assert df.column_names == ["A", "B"]
    assert df.row_names == ["x", "y"]
    assert df.get("y", "B") == 4.0


def test_construct_default_row_names(df):
    assert df.row_names == ["R0", "R1", "R2"]


def test_construct_with_types():
    df = DataFrame(
        [("A", [1.7, 2.2]), ("B", [1.5, 2.5]), ("C", [0.1, 0.2])],
        types=[ColumnType.INT, ColumnType.FLOAT, ColumnType.DOUBLE],
    )
    assert df.get_column_type("A") is ColumnType.INT
    assert df.get_column_type(1) is ColumnType.FLOAT
    assert df.get_column_type("C") is ColumnType.DOUBLE
    assert df.get_column("A").as_doubles() == [1.0, 2.0]


def test_construct_from_columns_copies_them():
    """Columns passed to the constructor are not shared with the dataframe."""
    col = Column(ColumnType.INT, [1, 2, 3])
    df = DataFrame([("A", col)])
    col.set_at(100, 0)
    assert df.get(0, "A") == 1.0
    assert df.get_column_type("A") is ColumnType.INT


@pytest.mark.parametrize(
    "columns, kwargs",
    [
        ([], {}),
        ({}, {}),
        ([("A", [1, 2]), ("B", [1, 2, 3])], {}),
        ([("A", [1, 2])], {"row_names": ["x"]}),
        ([("A", [1, 2])], {"types": [ColumnType.INT, ColumnType.INT]}),
        ([("A", [1, 2]), ("A", [3, 4])], {}),
        ([(1, [1, 2])], {}),
        ([("A", [1, 2])], {"row_names": [1, 2]}),
        ([("A", ["x"])], {}),
        ([("A", [1, 2]), ("B", [3, None, "y"])], {}),
    ],
)
def test_construct_invalid(columns, kwargs):
    with pytest.raises(InvalidArgumentError):
        DataFrame(columns, **kwargs)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        DataFrame([])


@pytest.mark.parametrize(
    "row, col",
    [(1, 1), (1, "B"), ("R1", 1), ("R1", "B")],
)
def test_get_by_index_and_name(df, row, col):
    assert df.get(row, col) == 5.0
    assert df[row, col] == 5.0


@pytest.mark.parametrize(
    "row, col",
    [(3, 0), (-1, 0), (0, 2), (0, -1), ("R9", 0), (0, "Z"), (True, 0), (0.5, 0)],
)
def test_get_unresolved(df, row, col):
    with pytest.raises(InvalidArgumentError):
        df.get(row, col)


def test_get_row(df):
    assert df.get_row(0) == [1.0, 4.0]
    assert df.get_row("R2") == [3.0, 6.0]
    with pytest.raises(InvalidArgumentError):
        df.get_row(3)
    with pytest.raises(InvalidArgumentError):
        df.get_row("missing")


def test_get_column_returns_copy(df):
    col = df.get_column("A")
    col.set_at(100, 0)
    assert df.get(0, "A") == 1.0
    assert df.get_column(1).as_doubles() == [4.0, 5.0, 6.0]
    with pytest.raises(InvalidArgumentError):
        df.get_column("C")
    with pytest.raises(InvalidArgumentError):
        df.get_column_type(2)


def test_set(df):
    df.set(10, 0, "A")
    df.set(20, "R1", 1)
    df["R2", "A"] = 30
    assert df.get_column("A").as_doubles() == [10.0, 2.0, 30.0]
    assert df.get_column("B").as_doubles() == [4.0, 20.0, 6.0]


def test_set_converts_to_column_type():
    df = DataFrame([("A", [1, 2])], types=[ColumnType.INT])
    df.set(3.9, 0, 0)
    assert df.get(0, 0) == 3.0


@pytest.mark.parametrize("row, col", [(5, 0), (0, 5), ("x", "A"), (0, "x")])
def test_set_unresolved_leaves_data_unchanged(df, row, col):
    before = df.copy()
    with pytest.raises(InvalidArgumentError):
        df.set(1, row, col)
    assert df.equals(before)


def test_set_non_numeric(df):
    with pytest.raises(InvalidArgumentError):
        df.set("abc", 0, 0)


def test_add_row(df):
    """Adding a row grows the dataframe and gets a default name."""
    df.add_row([7, 8])
    assert df.dim() == (4, 2)
    assert df.get_row(3) == [7.0, 8.0]
    assert df.row_names == ["R0", "R1", "R2", "R3"]
    assert df.get("R3", "B") == 8.0


def test_add_row_with_name(df):
    df.add_row([7, 8], "last")
    assert df.get_row("last") == [7.0, 8.0]
    assert df.row_names[-1] == "last"


def test_add_row_invalid(df):
    with pytest.raises(InvalidArgumentError):
        df.add_row([1, 2, 3])
    with pytest.raises(InvalidArgumentError):
        df.add_row(["a", 2])
    with pytest.raises(InvalidArgumentError):
        DataFrame().add_row([1])
    assert df.dim() == (3, 2)


def test_add_row_duplicate_name_shadows_previous():
    df = DataFrame({"A": [1, 2]}, row_names=["x", "y"])
    df.add_row([3], "x")
    assert df.row_names == ["x", "y", "x"]
    assert df.get("x", "A") == 3.0


def test_add_column(df):
    df.add_column([7, 8, 9], "C", ColumnType.INT)
    assert df.dim() == (3, 3)
    assert df.column_names == ["A", "B", "C"]
    assert df.get(2, 2) == 9.0
    assert df.get_column_type("C") is ColumnType.INT


def test_add_column_length_mismatch(df):
    """A column of the wrong length is refused and the dataframe is untouched."""
    df.add_row([7, 8])
    with pytest.raises(InvalidArgumentError):
        df.add_column([9, 10, 11], "C")
    assert df.dim() == (4, 2)
    assert df.column_names == ["A", "B"]


def test_add_column_to_empty_adopts_length():
    df = DataFrame()
    df.add_column([1, 2, 3], "A")
    assert df.dim() == (3, 1)
    assert df.row_names == ["R0", "R1", "R2"]
    with pytest.raises(InvalidArgumentError):
        df.add_column([1, 2], "B")


def test_add_column_existing_name_warns(df, caplog):
    """Adding a column with a name in use is a no-op with a warning."""
    with caplog.at_level(logging.WARNING):
        df.add_column([7, 8, 9], "A")
    assert "already exists" in caplog.text
    assert df.dim() == (3, 2)
    assert df.get_column("A").as_doubles() == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("col", [1, "B"])
def test_drop_column(df, col):
    df.drop_column(col)
    assert df.dim() == (3, 1)
    assert df.column_names == ["A"]
    with pytest.raises(InvalidArgumentError):
        df.get(0, 1)


def test_drop_column_by_name_or_index_is_equivalent():
    data = {"A": [1], "B": [2], "C": [3]}
    by_index = DataFrame(data)
    by_name = DataFrame(data)
    by_index.drop_column(1)
    by_name.drop_column("B")
    assert by_index.column_names == by_name.column_names == ["A", "C"]
    assert by_index.get(0, 1) == by_name.get(0, "C") == 3.0


def test_drop_column_missing(df):
    with pytest.raises(InvalidArgumentError):
        df.drop_column("C")
    with pytest.raises(InvalidArgumentError):
        df.drop_column(2)
    assert df.dim() == (3, 2)


def test_drop_then_add_column_restores_count(df):
    df.drop_column("A")
    df.add_column([1, 2, 3], "A")
    assert df.dim() == (3, 2)
    assert df.column_names == ["B", "A"]


def test_drop_all_columns_keeps_rows(df):
    df.drop_column("A")
    df.drop_column("B")
    assert df.dim() == (3, 0)
    assert df.empty
    with pytest.raises(InvalidArgumentError):
        df.add_column([1, 2], "C")
    df.add_column([1, 2, 3], "C")
    assert df.row_names == ["R0", "R1", "R2"]


@pytest.mark.parametrize("row", [1, "R1"])
def test_drop_row(df, row):
    df.drop_row(row)
    assert df.dim() == (2, 2)
    assert df.row_names == ["R0", "R2"]
    assert df.get_row("R2") == [3.0, 6.0]
    assert df.get_row(1) == [3.0, 6.0]
    with pytest.raises(InvalidArgumentError):
        df.get_row("R1")


def test_drop_row_missing(df):
    with pytest.raises(InvalidArgumentError):
        df.drop_row(3)
    with pytest.raises(InvalidArgumentError):
        df.drop_row("R3")
    assert df.dim() == (3, 2)


def test_set_column_names(df):
    df.set_column_names(["X", "Y"])
    assert df.column_names == ["X", "Y"]
    assert df.get(0, "Y") == 4.0
    with pytest.raises(InvalidArgumentError):
        df.get(0, "A")


@pytest.mark.parametrize("names", [["X"], ["X", "Y", "Z"], ["X", "X"], ["X", 1]])
def test_set_column_names_invalid(df, names):
    with pytest.raises(InvalidArgumentError):
        df.set_column_names(names)
    assert df.column_names == ["A", "B"]


def test_set_row_names(df):
    df.set_row_names(["a", "b", "c"])
    assert df.row_names == ["a", "b", "c"]
    assert df.get_row("b") == [2.0, 5.0]
    with pytest.raises(InvalidArgumentError):
        df.get_row("R1")
    with pytest.raises(InvalidArgumentError):
        df.set_row_names(["a", "b"])


def test_names_are_copies(df):
    df.column_names.append("C")
    df.row_names.clear()
    assert df.column_names == ["A", "B"]
    assert df.row_names == ["R0", "R1", "R2"]


@pytest.mark.parametrize("copier", [DataFrame.copy, copy.copy, copy.deepcopy])
def test_copy_is_independent(df, copier):
    other = copier(df)
    assert other.equals(df)
    other.set(100, 0, 0)
    other.add_row([1, 1])
    other.set_column_names(["X", "Y"])
    assert df.get(0, 0) == 1.0
    assert df.dim() == (3, 2)
    assert df.column_names == ["A", "B"]


def test_equals():
    df = DataFrame({"A": [1, 2]})
    assert df.equals(DataFrame({"A": [1, 2]}))
    assert not df.equals(DataFrame({"A": [1, 3]}))
    assert not df.equals(DataFrame({"B": [1, 2]}))
    assert not df.equals(DataFrame({"A": [1, 2]}, row_names=["x", "y"]))
    assert not df.equals(DataFrame({"A": [1, 2]}, types=[ColumnType.INT]))
    assert not df.equals("A")


def test_to_numpy(df):
    matrix = df.to_numpy()
    assert matrix.shape == (3, 2)
    assert matrix.dtype == np.float64
    assert matrix.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
    assert DataFrame().to_numpy().shape == (0, 0)


def test_to_arrow_and_back():
    df = DataFrame(
        [("A", [1, 2]), ("B", [0.5, 1.5])],
        row_names=["x", "y"],
        types=[ColumnType.INT, ColumnType.DOUBLE],
    )
    table = df.to_arrow(row_names_column="names")
    assert table.column_names == ["names", "A", "B"]
    assert table.schema.field("A").type == pa.int32()
    assert table.column("names").to_pylist() == ["x", "y"]

    restored = DataFrame.from_arrow(table, row_names_column="names")
    assert restored.equals(df)


def test_from_arrow_without_row_names():
    table = pa.table({"A": [1.0, 2.0], "B": pa.array([3, 4], type=pa.int16())})
    df = DataFrame.from_arrow(table)
    assert df.row_names == ["R0", "R1"]
    assert df.get_column_type("B") is ColumnType.INT
    with pytest.raises(InvalidArgumentError):
        DataFrame.from_arrow(table, row_names_column="missing")


def test_print(df, capsys):
    df.print()
    captured = capsys.readouterr()
    assert captured.out == str(df) + "\n"
    assert captured.out.splitlines() == [
        "   | A | B",
        "-- | - | -",
        "R0 | 1 | 4",
        "R1 | 2 | 5",
        "R2 | 3 | 6",
    ]


def test_print_max_rows(df):
    lines = df.format(max_rows=1).splitlines()
    assert lines[-1] == "... and 2 more rows"
    assert len(lines) == 4


def test_repr(df):
    assert repr(df) == "DataFrame(columns=['A', 'B'], rows=3)"


def test_getitem_requires_pairs(df):
    with pytest.raises(InvalidArgumentError):
        df[0]


@pytest.mark.parametrize("values", [["x", "y", "z"], [1, object(), 3], [1, [2], 3]])
def test_add_column_non_numeric(df, values):
    with pytest.raises(InvalidArgumentError):
        df.add_column(values, "C")
    assert df.dim() == (3, 2)
    assert df.column_names == ["A", "B"]
