"""Typed storage for the values of a single column.

Every column of a :class:`numframe.dataframe.DataFrame` stores its
values under exactly one numeric representation, picked when the column
is created and never changed afterwards:

* :attr:`ColumnType.INT` stores 32 bit integers,
  values are truncated towards zero when stored.
* :attr:`ColumnType.FLOAT` stores single precision floats.
* :attr:`ColumnType.DOUBLE` stores double precision floats.

Regardless of how values are stored, they are always read back as
Python floats. Narrowing happens when a value enters the column,
widening when it leaves it:

>>> col = Column(ColumnType.INT, [1.7, 2.2, -3.9])
>>> col.as_doubles()
[1.0, 2.0, -3.0]
>>> col.append(4.99)
>>> col.value_at(3)
4.0

The storage itself is a :class:`TypedColumn`, one implementation per
representation. Nobody outside of this module is expected to deal with
them directly, the :class:`Column` handle wraps the typed storage and only
exposes the double view of the data and the declared :class:`ColumnType`.

Copying a :class:`Column` always duplicates its values,
two columns never share the same storage:

>>> other = col.copy()
>>> other.set_at(100, 0)
>>> col.value_at(0), other.value_at(0)
(1.0, 100.0)
"""

import abc
import enum
from collections.abc import Iterable, Iterator
from typing import Self

import numpy as np
import pyarrow as pa

from ..errors import InvalidArgumentError, OutOfRangeError


class ColumnType(enum.Enum):
    """The numeric representation used to store the values of a column."""

    INT = "Int"
    FLOAT = "Float"
    DOUBLE = "Double"

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype used to store values of this type."""
        return _NUMPY_DTYPES[self]

    @property
    def arrow_type(self) -> pa.DataType:
        """The Arrow data type matching this representation."""
        return _ARROW_TYPES[self]

    @classmethod
    def from_arrow(cls, arrow_type: pa.DataType) -> "ColumnType":
        """Pick the column type able to hold values of an Arrow data type.

        >>> ColumnType.from_arrow(pa.int64())
        <ColumnType.INT: 'Int'>
        >>> ColumnType.from_arrow(pa.float32())
        <ColumnType.FLOAT: 'Float'>
        """
        if pa.types.is_integer(arrow_type):
            return cls.INT
        elif pa.types.is_float16(arrow_type) or pa.types.is_float32(arrow_type):
            return cls.FLOAT
        elif pa.types.is_float64(arrow_type):
            return cls.DOUBLE
        raise InvalidArgumentError(f"Unsupported column data type: {arrow_type}")


_NUMPY_DTYPES = {
    ColumnType.INT: np.dtype(np.int32),
    ColumnType.FLOAT: np.dtype(np.float32),
    ColumnType.DOUBLE: np.dtype(np.float64),
}

_ARROW_TYPES = {
    ColumnType.INT: pa.int32(),
    ColumnType.FLOAT: pa.float32(),
    ColumnType.DOUBLE: pa.float64(),
}


class TypedColumn(abc.ABC):
    """Storage of a sequence of values under one numeric representation.

    This is the interface that every representation has to implement.
    All values enter and leave the storage as doubles, the conversion
    to the stored representation is a concern of the implementation.
    """

    column_type: ColumnType

    @abc.abstractmethod
    def append(self, value: float) -> None:
        """Convert the value to the stored representation and append it."""
        ...

    @abc.abstractmethod
    def extend(self, values: Iterable[float]) -> None:
        """Append all the values, in order."""
        ...

    @abc.abstractmethod
    def as_doubles(self) -> list[float]:
        """Return a new list with all the values widened to double."""
        ...

    @abc.abstractmethod
    def value_at(self, index: int) -> float:
        """Return the value at the given position."""
        ...

    @abc.abstractmethod
    def set_at(self, value: float, index: int) -> None:
        """Overwrite the value at the given position."""
        ...

    @abc.abstractmethod
    def delete_at(self, index: int) -> None:
        """Remove the value at the given position, shifting later values down."""
        ...

    @abc.abstractmethod
    def to_arrow(self) -> pa.Array:
        """Return a copy of the values as an Arrow array of the stored type."""
        ...

    @abc.abstractmethod
    def clone(self) -> Self:
        """Return an independent copy of the storage."""
        ...

    @abc.abstractmethod
    def __len__(self) -> int: ...


class ArrayColumn(TypedColumn):
    """Typed storage backed by a numpy array of the column dtype."""

    def __init__(self) -> None:
        self._data = np.empty(0, dtype=self.column_type.dtype)

    def _convert(self, values: Iterable[float]) -> np.ndarray:
        try:
            doubles = np.asarray(list(values), dtype=np.float64)
        except (TypeError, ValueError):
            raise InvalidArgumentError("Column values must be numeric") from None
        return doubles.astype(self.column_type.dtype)

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self._data):
            raise OutOfRangeError(
                f"Index {index} out of range in {operation} for column of length {len(self._data)}"
            )

    def append(self, value: float) -> None:
        # Copies the whole storage, growing row by row is quadratic.
        self._data = np.append(self._data, self._convert((value,)))

    def extend(self, values: Iterable[float]) -> None:
        self._data = np.concatenate((self._data, self._convert(values)))

    def as_doubles(self) -> list[float]:
        return self._data.astype(np.float64).tolist()

    def value_at(self, index: int) -> float:
        self._check_index(index, "value_at")
        return float(self._data[index])

    def set_at(self, value: float, index: int) -> None:
        self._check_index(index, "set_at")
        self._data[index] = self._convert((value,))[0]

    def delete_at(self, index: int) -> None:
        self._check_index(index, "delete_at")
        self._data = np.delete(self._data, index)

    def to_arrow(self) -> pa.Array:
        return pa.array(self._data.copy(), type=self.column_type.arrow_type)

    def clone(self) -> Self:
        copy = self.__class__()
        copy._data = self._data.copy()
        return copy

    def __len__(self) -> int:
        return len(self._data)


class IntColumn(ArrayColumn):
    column_type = ColumnType.INT


class FloatColumn(ArrayColumn):
    column_type = ColumnType.FLOAT


class DoubleColumn(ArrayColumn):
    column_type = ColumnType.DOUBLE


_IMPLEMENTATIONS: dict[ColumnType, type[TypedColumn]] = {
    ColumnType.INT: IntColumn,
    ColumnType.FLOAT: FloatColumn,
    ColumnType.DOUBLE: DoubleColumn,
}


def make_typed_column(column_type: ColumnType) -> TypedColumn:
    """Create an empty storage for the given column type."""
    try:
        implementation = _IMPLEMENTATIONS[ColumnType(column_type)]
    except (KeyError, ValueError):
        raise InvalidArgumentError(f"Unknown column type: {column_type!r}") from None
    return implementation()


class Column:
    """A sequence of numeric values stored under a fixed :class:`ColumnType`.

    The column owns its values, copying a column (via :meth:`copy`,
    :func:`copy.copy` or :func:`copy.deepcopy`) duplicates them.
    """

    __slots__ = ("_impl",)

    def __init__(
        self,
        column_type: ColumnType = ColumnType.DOUBLE,
        values: Iterable[float] | None = None,
    ) -> None:
        """
        :param column_type: The representation the values will be stored as.
        :param values: Optional initial values, converted to ``column_type``.
        """
        self._impl = make_typed_column(column_type)
        if values is not None:
            self._impl.extend(values)

    @classmethod
    def from_arrow(cls, array: pa.Array | pa.ChunkedArray) -> Self:
        """Build a column from an Arrow array, picking the type from the array."""
        if array.null_count:
            raise InvalidArgumentError("Columns can't contain null values")
        column = cls(ColumnType.from_arrow(array.type))
        column.extend(array.to_pylist())
        return column

    @property
    def column_type(self) -> ColumnType:
        return self._impl.column_type

    @property
    def type_name(self) -> str:
        """Human readable name of the column type, like ``"Double"``."""
        return self._impl.column_type.value

    def append(self, value: float) -> None:
        self._impl.append(value)

    def extend(self, values: Iterable[float]) -> None:
        self._impl.extend(values)

    def as_doubles(self) -> list[float]:
        """Return all the values as a new list of floats."""
        return self._impl.as_doubles()

    def to_numpy(self) -> np.ndarray:
        """Return all the values as a new float64 numpy array."""
        return np.asarray(self._impl.as_doubles(), dtype=np.float64)

    def to_arrow(self) -> pa.Array:
        return self._impl.to_arrow()

    def value_at(self, index: int) -> float:
        """Value at ``index``, raises :class:`OutOfRangeError` outside ``[0, len)``."""
        return self._impl.value_at(index)

    def set_at(self, value: float, index: int) -> None:
        """Overwrite the value at ``index``.

        Raises :class:`OutOfRangeError` outside ``[0, len)``.
        """
        self._impl.set_at(value, index)

    def delete_at(self, index: int) -> None:
        """Remove the value at ``index``.

        Raises :class:`OutOfRangeError` outside ``[0, len)``.
        """
        self._impl.delete_at(index)

    def copy(self) -> Self:
        copy = self.__class__.__new__(self.__class__)
        copy._impl = self._impl.clone()
        return copy

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def __len__(self) -> int:
        return len(self._impl)

    def __iter__(self) -> Iterator[float]:
        return iter(self._impl.as_doubles())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return (
            self.column_type == other.column_type
            and self.as_doubles() == other.as_doubles()
        )

    def __repr__(self) -> str:
        return f"Column(type={self.type_name}, values={self.as_doubles()})"
