# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

"""
Arrays that grow by rows with amortized cost.

The training data of a GP model is extended every time samples are added.
Instead of reallocating on every call, the backing store keeps spare rows
(filled with NaN) and grows geometrically by a factor 3/2.

Readers only ever see :py:meth:`_Growable.view`, a read-only view on the rows
in use. A view taken before an :py:meth:`_Growable.append` may point at a
store that has since been replaced: take a new view after every mutation.
"""

import numpy as np


class _Growable(object):
    """
    Base class holding the backing store, the number of rows in use and the
    growth policy. Subclasses fix the dimensionality of the rows.
    """
    def __init__(self, data):
        self._data = np.array(data, dtype=np.float64)
        self._size = self._data.shape[0]

    def __len__(self):
        return self._size

    @property
    def size(self):
        """number of rows in use"""
        return self._size

    @property
    def capacity(self):
        """number of rows allocated"""
        return self._data.shape[0]

    def _check_rows(self, rows):
        raise NotImplementedError

    def _reserve(self, required_size):
        capacity = self.capacity
        if required_size <= capacity:
            return
        new_capacity = max(required_size, (3 * capacity) // 2)
        new_data = np.full((new_capacity,) + self._data.shape[1:], np.nan)
        new_data[:self._size] = self._data[:self._size]
        self._data = new_data

    def append(self, rows):
        """
        Add rows at the end of the array.

        Reallocates the backing store (to at least 3/2 of its capacity) when
        the spare rows do not suffice.
        """
        rows = self._check_rows(rows)
        required_size = self._size + rows.shape[0]
        self._reserve(required_size)
        self._data[self._size:required_size] = rows
        self._size = required_size

    def assign(self, values):
        """
        Replace the content of the array by values, which must have exactly
        as many rows as are in use.
        """
        values = self._check_rows(values)
        assert values.shape[0] == self._size, "assign needs {} rows, got {}".format(self._size, values.shape[0])
        self._data[:self._size] = values

    def view(self):
        """
        Read-only view on the rows in use.
        """
        v = self._data[:self._size]
        v.flags.writeable = False
        return v

    def __repr__(self):
        return "{}(size={}, capacity={})".format(self.__class__.__name__, self._size, self.capacity)


class GrowableMatrix(_Growable):
    """
    A matrix that can grow to add additional rows efficiently.

    :param data: initial content, a 2 dimensional array (N x D)
    """
    def __init__(self, data):
        super(GrowableMatrix, self).__init__(data)
        assert self._data.ndim == 2, "GrowableMatrix needs 2 dimensional data, got shape {!s}".format(self._data.shape)

    @property
    def num_columns(self):
        return self._data.shape[1]

    def _check_rows(self, rows):
        rows = np.asarray(rows, dtype=np.float64)
        assert rows.ndim == 2, "rows need to be 2 dimensional, got shape {!s}".format(rows.shape)
        assert rows.shape[1] == self.num_columns, "rows have {} columns, matrix has {}".format(rows.shape[1], self.num_columns)
        return rows


class GrowableVector(_Growable):
    """
    A vector that can grow to add additional entries efficiently.

    :param data: initial content, a 1 dimensional array (N,)
    """
    def __init__(self, data):
        super(GrowableVector, self).__init__(data)
        assert self._data.ndim == 1, "GrowableVector needs 1 dimensional data, got shape {!s}".format(self._data.shape)

    def _check_rows(self, rows):
        rows = np.asarray(rows, dtype=np.float64)
        assert rows.ndim == 1, "entries need to be 1 dimensional, got shape {!s}".format(rows.shape)
        return rows
