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

from typing import Sequence, Union

import numpy as np

from .datatypes import SymbolSequence, to_symbols
from .suffix_array import _check_permutation, build_rank_array


def build_lcp_array(
    suffix_array: Union[np.ndarray, Sequence[int]],
    sequence: Union[SymbolSequence, str, bytes, np.ndarray, Sequence[int]],
) -> np.ndarray:
    """Compute the longest common prefix (LCP) array in linear time
    using Kasai's algorithm.

    Args:
      suffix_array:
        The suffix array of `sequence`, e.g., as returned by
        :func:`build_suffix_array`.
      sequence:
        The sequence the suffix array was built from. It is converted with
        :func:`to_symbols`, so two elements are equal if and only if
        they are mapped to the same integer symbol.
    Returns:
      Return an array ``lcp`` of type ``np.int32`` and of shape ``(n - 1,)``
      (empty if n <= 1), where ``lcp[i]`` is the length of the longest
      common prefix of the suffixes starting at ``suffix_array[i]`` and
      ``suffix_array[i + 1]``.

    >>> from suffixsort import build_lcp_array, build_suffix_array
    >>> build_lcp_array(build_suffix_array("abcab"), "abcab").tolist()
    [2, 0, 1, 0]
    """
    symbols, _ = to_symbols(sequence)
    n = symbols.size
    suffix_array = np.asarray(suffix_array)
    _check_permutation(suffix_array, n)

    if n <= 1:
        return np.zeros(0, dtype=np.int32)

    s = symbols.tolist()
    sa = suffix_array.tolist()
    rank = build_rank_array(suffix_array).tolist()

    lcp = [0] * (n - 1)
    h = 0
    # Visit suffixes in order of their start positions. The LCP of
    # suffix i + 1 with its successor is at least h - 1.
    for i in range(n):
        r = rank[i]
        if r == n - 1:
            # The largest suffix has no successor
            h = 0
            continue
        j = sa[r + 1]
        while i + h < n and j + h < n and s[i + h] == s[j + h]:
            h += 1
        lcp[r] = h
        if h > 0:
            h -= 1
    return np.array(lcp, dtype=np.int32)
