# Copyright      2023   Xiaomi Corp.       (author: Wei Kang)
#
# See ../../LICENSE for clarification regarding multiple authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import operator
from typing import Optional, Sequence, Union

import numpy as np

from .datatypes import SymbolSequence, to_symbols
from .skew import suffix_array_padded
from .utils import InvalidInputError


def _check_permutation(suffix_array: np.ndarray, n: int) -> None:
    if suffix_array.ndim != 1:
        raise InvalidInputError(
            f"Expect a 1-D suffix array, given {suffix_array.ndim} dims"
        )
    if suffix_array.size != n:
        raise InvalidInputError(
            f"Suffix array has {suffix_array.size} entries, "
            f"but the sequence has {n} symbols"
        )
    if n == 0:
        return
    if not np.issubdtype(suffix_array.dtype, np.integer):
        raise InvalidInputError(
            f"Expect an integer suffix array, given dtype {suffix_array.dtype}"
        )
    if not np.array_equal(np.sort(suffix_array), np.arange(n)):
        raise InvalidInputError(
            f"Suffix array is not a permutation of 0 .. {n - 1}"
        )


def _renumbering(array: np.ndarray) -> np.ndarray:
    """Renumber element in the input array such that the returned array
    contains entries ranging from 0 to M - 1, where M equals
    to number of unique entries in the input array.

    The order of entries in the output array is the same as the order
    of entries in the input array. That is, if array[i] < array[j], then
    ans[i] < ans[j].

    Args:
      array:
        A 1-D array.
    Returns:
      Return a renumbered 1-D array.
    """
    _, inverse = np.unique(array, return_inverse=True)
    # np.unique returns sorted unique values, so `inverse` keeps the order
    return inverse.reshape(-1).astype(np.int64)


def build_suffix_array(
    sequence: Union[SymbolSequence, str, bytes, np.ndarray, Sequence[int]],
    max_symbol: Optional[int] = None,
    renumber: bool = False,
) -> np.ndarray:
    """Create the suffix array of a sequence drawn from a bounded integer
    alphabet in linear time.

    hint:
      Please refer to https://en.wikipedia.org/wiki/Suffix_array
      for what suffix array is. No end-of-sequence symbol is appended
      to the input; a suffix that is a prefix of another suffix is the
      smaller one.

    Args:
      sequence:
        A :class:`SymbolSequence`, a str, bytes, a 1-D integer array or a
        sequence of non-negative ints. See :func:`to_symbols`.
      max_symbol:
        The alphabet bound, i.e., all symbols are in ``[0, max_symbol]``.
        If None, the default bound of `sequence` is used (255 for bytes
        and utf-8 encoded :class:`SymbolSequence`, the largest symbol
        otherwise). The algorithm allocates arrays of size ``max_symbol``,
        so a smaller bound leads to less memory allocation.
      renumber:
        True to first map the symbols to ``0 .. M - 1``, where M is the
        number of distinct symbols, keeping their order. Useful for a
        sparse alphabet with large values. `max_symbol` is still checked
        against the original symbols.
    Returns:
      Returns a suffix array of type ``np.int32``, of shape ``(n,)``.
      This will consist of some permutation of the elements ``0 .. n - 1``.

    >>> from suffixsort import build_suffix_array
    >>> build_suffix_array("abcab").tolist()
    [3, 0, 4, 1, 2]
    """
    symbols, default_max_symbol = to_symbols(sequence)
    if max_symbol is None:
        max_symbol = default_max_symbol
    try:
        max_symbol = operator.index(max_symbol)
    except TypeError:
        raise InvalidInputError(
            f"Expect an integer alphabet bound, given {max_symbol!r}"
        )
    if max_symbol < 0:
        raise InvalidInputError(
            f"Alphabet bound should be non-negative, given {max_symbol}"
        )

    n = symbols.size
    if n > 0 and symbols.max() > max_symbol:
        raise InvalidInputError(
            f"Symbol {symbols.max()} exceeds the alphabet bound {max_symbol}"
        )
    if n >= np.iinfo(np.int32).max:
        raise InvalidInputError(f"Sequence of length {n} is too long")

    if n <= 1:
        return np.arange(n, dtype=np.int32)

    if renumber:
        symbols = _renumbering(symbols)
        max_symbol = int(symbols.max())

    # Shift all symbols by 1 so that 0 is smaller than any of them and
    # can be used as sentinel.
    text = (symbols + 1).tolist()
    text.extend([0, 0, 0])

    logging.debug(
        f"Building suffix array for {n} symbols, max symbol {max_symbol}"
    )
    sa = suffix_array_padded(text, n, max_symbol + 1)
    return np.array(sa, dtype=np.int32)


def build_rank_array(suffix_array: np.ndarray) -> np.ndarray:
    """Return the inverse permutation of a suffix array.

    Args:
      suffix_array:
        A 1-D array containing a permutation of ``0 .. n - 1``.
    Returns:
      Return an array ``rank`` of type ``np.int32`` such that
      ``rank[suffix_array[i]] == i``.
    """
    suffix_array = np.asarray(suffix_array)
    n = suffix_array.size
    _check_permutation(suffix_array, n)
    rank = np.empty(n, dtype=np.int32)
    if n > 0:
        rank[suffix_array] = np.arange(n, dtype=np.int32)
    return rank
