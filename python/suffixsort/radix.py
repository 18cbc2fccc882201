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

from typing import List, Sequence


def radix_pass(
    indexes: Sequence[int],
    keys: Sequence[int],
    max_symbol: int,
    offset: int = 0,
) -> List[int]:
    """Stably sort `indexes` by `keys[index + offset]` with counting sort.

    Args:
      indexes:
        The indexes to sort. Each ``index + offset`` must be a valid
        index into `keys`.
      keys:
        The rank source. The sort key of `index` is ``keys[index + offset]``.
      max_symbol:
        All keys looked up are in the range ``[0, max_symbol]``.
      offset:
        Added to each index before looking up its key. Used to sort by
        the 2nd or 3rd character of a suffix without copying `keys`.
    Returns:
      Return a permutation of `indexes` with non-decreasing keys. Indexes
      having equal keys keep their relative order from the input.
    """
    # counts[k + 1] holds the number of occurrences of key k, so that
    # after the prefix sum counts[k] is the start of bucket k.
    counts = [0] * (max_symbol + 2)
    for index in indexes:
        key = keys[index + offset]
        assert 0 <= key <= max_symbol, (key, max_symbol)
        counts[key + 1] += 1

    for k in range(1, max_symbol + 2):
        counts[k] += counts[k - 1]

    ans = [0] * len(indexes)
    for index in indexes:
        key = keys[index + offset]
        ans[counts[key]] = index
        counts[key] += 1
    return ans
