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

"""
The skew (DC3) suffix array construction from "Linear Work Suffix Array
Construction" by Kärkkäinen, Sanders and Burkhardt.

Positions are split by their residue modulo 3. Suffixes starting at
positions 1 and 2 mod 3 (the sample) are sorted first, recursively if
needed, and then used to sort and merge the suffixes starting at
positions 0 mod 3.

Notation used below, for a text of length n:

  - n0 = (n + 2) // 3, number of positions 0 mod 3
  - n1 = (n + 1) // 3, number of positions 1 mod 3
  - n2 = n // 3, number of positions 2 mod 3
  - n02 = n0 + n2, number of sample positions, including a dummy
    1 mod 3 position when n % 3 == 1.

Sample suffixes are packed into one index space of size n02: the
1 mod 3 position p has index p // 3 and the 2 mod 3 position p has
index p // 3 + n0.
"""

import logging
from typing import List

from .radix import radix_pass


def _leq2(a1: int, a2: int, b1: int, b2: int) -> bool:
    return a1 < b1 or (a1 == b1 and a2 <= b2)


def _leq3(a1: int, a2: int, a3: int, b1: int, b2: int, b3: int) -> bool:
    return a1 < b1 or (a1 == b1 and _leq2(a2, a3, b2, b3))


def _sample_positions(n: int) -> List[int]:
    """Return positions in [0, n) that are not divisible by 3.

    When n % 3 == 1, position n is appended as a dummy 1 mod 3 position,
    so that there are as many 1 mod 3 positions as 0 mod 3 positions.
    Its key consists of sentinels only, so it is always sorted first.
    """
    positions = [i for i in range(n) if i % 3 != 0]
    if n % 3 == 1:
        positions.append(n)
    return positions


def _sort_sample(
    text: List[int], positions: List[int], max_symbol: int
) -> List[int]:
    """Sort sample positions by the triple (text[p], text[p+1], text[p+2]),
    least significant character first.
    """
    ans = radix_pass(positions, text, max_symbol, offset=2)
    ans = radix_pass(ans, text, max_symbol, offset=1)
    return radix_pass(ans, text, max_symbol)


def _name_triples(
    text: List[int], sorted_positions: List[int], ranks: List[int], n0: int
) -> int:
    """Give each distinct triple a name, starting from 1, in sorted order.

    The name of position p is written to ranks[p // 3] if p % 3 == 1,
    or to ranks[p // 3 + n0] otherwise.

    Returns:
      Return the number of distinct triples.
    """
    name = 0
    prev = None
    for p in sorted_positions:
        triple = (text[p], text[p + 1], text[p + 2])
        if triple != prev:
            name += 1
            prev = triple
        if p % 3 == 1:
            ranks[p // 3] = name
        else:
            ranks[p // 3 + n0] = name
    return name


def _sort_nonsample(
    text: List[int], sa12: List[int], n0: int, max_symbol: int
) -> List[int]:
    """Sort the 0 mod 3 positions.

    Taking them in the order of the already sorted 1 mod 3 suffixes that
    follow them, a single stable pass on the first character finishes
    the sort.
    """
    r0 = [3 * p for p in sa12 if p < n0]
    assert len(r0) == n0, (len(r0), n0)
    return radix_pass(r0, text, max_symbol)


def _merge(
    text: List[int],
    sa0: List[int],
    sa12: List[int],
    ranks: List[int],
    n: int,
    n0: int,
    n1: int,
) -> List[int]:
    """Merge the sorted 0 mod 3 suffixes with the sorted sample suffixes.

    `ranks` contains the rank (starting from 1) of each sample suffix in
    the packed index space, followed by zeros.
    """

    def position(p: int) -> int:
        return p * 3 + 1 if p < n0 else (p - n0) * 3 + 2

    n02 = len(sa12)
    sa = []
    # The dummy suffix, if any, is the first one in sa12. Skip it.
    t = n0 - n1
    k = 0
    while t < n02 and k < n0:
        p = sa12[t]
        i = position(p)
        j = sa0[k]
        if p < n0:
            smaller = _leq2(
                text[i], ranks[p + n0], text[j], ranks[j // 3]
            )
        else:
            smaller = _leq3(
                text[i],
                text[i + 1],
                ranks[p - n0 + 1],
                text[j],
                text[j + 1],
                ranks[j // 3 + n0],
            )
        if smaller:
            sa.append(i)
            t += 1
        else:
            sa.append(j)
            k += 1

    # Only one of the two partitions has suffixes left
    sa.extend(sa0[k:])
    sa.extend(position(p) for p in sa12[t:])
    assert len(sa) == n, (len(sa), n)
    return sa


def suffix_array_padded(
    text: List[int], n: int, max_symbol: int, depth: int = 0
) -> List[int]:
    """Compute the suffix array of text[0:n].

    Args:
      text:
        A list of length at least n + 3. text[0:n] are in the range
        [1, max_symbol] and text[n:n+3] are all 0, i.e., the sentinel.
      n:
        Length of the text. Must be at least 2.
      max_symbol:
        Alphabet bound of text[0:n].
      depth:
        Recursion depth, only used for logging.
    Returns:
      Return a list containing a permutation of 0 .. n - 1.
    """
    assert n >= 2, n
    assert len(text) >= n + 3, (len(text), n)
    assert text[n] == text[n + 1] == text[n + 2] == 0, text[n : n + 3]

    n0 = (n + 2) // 3
    n1 = (n + 1) // 3
    n2 = n // 3
    n02 = n0 + n2

    positions = _sample_positions(n)
    assert len(positions) == n02, (len(positions), n02)

    sa12 = _sort_sample(text, positions, max_symbol)

    # The last 3 entries are sentinels for the reduced text
    ranks = [0] * (n02 + 3)
    name = _name_triples(text, sa12, ranks, n0)

    logging.debug(
        f"Depth {depth}: length {n}, {n02} sample suffixes, {name} names"
    )

    if name < n02:
        # Names are not unique, sort the reduced text recursively
        sa12 = suffix_array_padded(ranks, n02, name, depth + 1)
        for i, p in enumerate(sa12):
            ranks[p] = i + 1
    else:
        sa12 = [0] * n02
        for i in range(n02):
            sa12[ranks[i] - 1] = i

    sa0 = _sort_nonsample(text, sa12, n0, max_symbol)

    return _merge(text, sa0, sa12, ranks, n, n0, n1)
