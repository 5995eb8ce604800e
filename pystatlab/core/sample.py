"""
Sample: the single analytical input of PyStatLab.

A Sample is an ordered, finite, non-empty sequence of finite real numbers.
It is immutable once built; every new input action (file upload, synthetic
generation, AI text response) builds a new Sample rather than mutating an
existing one.

Usage:
    from pystatlab import Sample

    s = Sample.from_array([1.2, 3.4, 5.6])
    s = Sample.from_file("measurements.csv")
    s = Sample.from_text('Here is your data: [12.1, 15.3, 9.8]')

    s.values   # original order (read-only)
    s.sorted   # ascending copy (read-only)
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.defaults import MAX_FILE_BYTES
from pystatlab.core.exceptions import EmptySampleError, ValidationError
from pystatlab.core.validation import (
    check_array, check_1d, check_finite, check_min_samples,
)


_EXCEL_SUFFIXES = ('.xlsx', '.xls')
# Checked in order per line; the first one that splits the line wins
_SEPARATORS = (',', ';', '\t', ' ')

_BRACKET_LIST = re.compile(r'\[([^\]]+)\]')
_JSON_DATA_OBJECT = re.compile(r'\{[^}]*"data"[^}]*\}')
_ANY_NUMBER = re.compile(r'-?\d+\.?\d*')


def _read_only(array: NDArray) -> NDArray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class Sample:
    """
    Immutable one-dimensional numeric sample.

    Construct via factory classmethods, not directly.
    """
    _values: NDArray[np.floating[Any]]
    _sorted: NDArray[np.floating[Any]]
    _source: str

    @classmethod
    def from_array(cls, values: ArrayLike, *, source: str = 'array') -> Sample:
        """
        Build a Sample from any numeric array-like.

        Parameters
        ----------
        values : array-like
            1D numeric data. A pandas Series, a list, or an (n, 1) / (1, n)
            array are all accepted.
        source : str
            Free-form provenance tag ('array', 'file', 'generator', ...).

        Raises
        ------
        ValidationError
            Non-numeric data or non-finite values.
        DimensionError
            Data is not a single variable.
        EmptySampleError
            No observations.
        """
        if isinstance(values, Sample):
            return values
        if hasattr(values, 'to_numpy'):
            values = values.to_numpy()
        array = check_array(values, 'sample')
        array = check_1d(array, 'sample')
        check_min_samples(array, 1, 'sample')
        check_finite(array, 'sample')

        array = array.copy()
        return cls(
            _values=_read_only(array),
            _sorted=_read_only(np.sort(array, kind='stable')),
            _source=source,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Sample:
        """
        Build a Sample from a delimited text file (CSV, TSV, plain text).

        The first non-blank line is treated as a header and skipped. The
        separator is detected line by line (comma, semicolon, tab, then
        space). Every cell is coerced to a number; cells that are
        not numbers are dropped. Values are read row by row.

        Raises
        ------
        ValidationError
            Excel workbooks, or files over the 10 MiB limit.
        EmptySampleError
            No numeric cells found.
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in _EXCEL_SUFFIXES:
            raise ValidationError(
                f"{path.name}: Excel workbooks are not supported, export the sheet as CSV"
            )

        size = path.stat().st_size
        if size > MAX_FILE_BYTES:
            raise ValidationError(
                f"{path.name}: file is {size} bytes, limit is {MAX_FILE_BYTES} bytes"
            )

        text = path.read_text(encoding='utf-8', errors='replace')
        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            raise EmptySampleError(f"{path.name}: file is empty")

        data_lines = lines[1:]
        if not data_lines:
            raise EmptySampleError(f"{path.name}: no data rows after the header")

        values = _parse_delimited(data_lines)
        if values.size == 0:
            raise EmptySampleError(
                f"{path.name}: no numeric values found, make sure the file has a numeric column"
            )
        return cls.from_array(values, source=f'file:{path.name}')

    @classmethod
    def from_text(cls, text: str) -> Sample:
        """
        Build a Sample from free-form text, e.g. an AI text-generation reply.

        Strategies, first one yielding numbers wins:
            1. the first bracketed list: ``[1.2, 3.4, 5.6]``
            2. a JSON object with a ``"data"`` array: ``{"data": [1, 2]}``
            3. every number appearing in the text

        Raises
        ------
        EmptySampleError
            No numbers found in the text.
        """
        for strategy in (_numbers_in_brackets, _numbers_in_json, _numbers_anywhere):
            numbers = strategy(text)
            if numbers:
                return cls.from_array(numbers, source='text')
        raise EmptySampleError("text contains no numeric data")

    # --- Properties ---

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations in original order (read-only)."""
        return self._values

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Observations in ascending order (read-only)."""
        return self._sorted

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._values.shape[0])

    @property
    def source(self) -> str:
        return self._source

    @property
    def min(self) -> float:
        return float(self._sorted[0])

    @property
    def max(self) -> float:
        return float(self._sorted[-1])

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Sample(n={self.n}, min={self.min:g}, max={self.max:g}, source={self._source!r})"


def as_sample(data: ArrayLike | Sample) -> Sample:
    """Convert raw array-like to Sample if needed."""
    if isinstance(data, Sample):
        return data
    return Sample.from_array(data)


# --- File parsing ---

def _split_cells(line: str) -> list[str]:
    """Split one line on the first separator that yields more than one cell."""
    for sep in _SEPARATORS:
        pieces = [p.strip() for p in line.split(sep) if p.strip()]
        if len(pieces) > 1:
            return pieces
    return [line.strip()]


def _parse_delimited(data_lines: list[str]) -> NDArray[np.floating[Any]]:
    """
    Coerce every cell of the data lines to float, dropping non-numbers.

    Each line is split with its own separator, so a file mixing commas,
    semicolons, tabs and spaces keeps all of its numbers. Quote characters
    are ordinary text: a cell like '"widget' is simply not a number.
    """
    cells = pd.Series(
        [cell for line in data_lines for cell in _split_cells(line)],
        dtype=object,
    )
    numbers = pd.to_numeric(cells, errors='coerce').to_numpy(dtype=np.float64)
    # "nan" and "inf" cells are not data
    return numbers[np.isfinite(numbers)]


# --- Text parsing ---

def _to_floats(tokens) -> list[float]:
    numbers = []
    for token in tokens:
        try:
            value = float(str(token).strip())
        except ValueError:
            continue
        if np.isfinite(value):
            numbers.append(value)
    return numbers


def _numbers_in_brackets(text: str) -> list[float]:
    match = _BRACKET_LIST.search(text)
    if match is None:
        return []
    return _to_floats(t for t in re.split(r'[,\s]+', match.group(1)) if t)


def _numbers_in_json(text: str) -> list[float]:
    match = _JSON_DATA_OBJECT.search(text)
    if match is None:
        return []
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return []
    data = parsed.get('data') if isinstance(parsed, dict) else None
    if not isinstance(data, list):
        return []
    return _to_floats(data)


def _numbers_anywhere(text: str) -> list[float]:
    return _to_floats(_ANY_NUMBER.findall(text))
