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

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np

from .utils import InvalidInputError

# Largest value of a utf-8 encoded byte, i.e., the alphabet bound used
# for byte sequences.
BYTE_MAX_SYMBOL = 255


@dataclass
class SymbolSequence:
    """
    Represents a sequence drawn from a bounded integer alphabet.

    The user can choose whether to save a text in a utf-8 encoded np.uint8
    array or to save its Unicode codepoint into a np.int32 array.
    """

    # filename or ID
    name: str

    # A 1-D array of non-negative integers.
    # If it is a np.uint8 array, it contains the utf-8 encoded bytes;
    # If it is a np.int32 array, it contains the Unicode codepoint of the text.
    symbols: np.ndarray

    # All entries of `symbols` are in the range [0, max_symbol].
    max_symbol: int

    def __len__(self) -> int:
        return self.symbols.size

    @property
    def text(self) -> str:
        """Return Python string representation of self.symbols."""
        if self.symbols.dtype == np.uint8:
            return self.symbols.tobytes().decode("utf-8")
        else:
            assert self.symbols.dtype == np.int32, self.symbols.dtype
            return "".join([chr(i) for i in self.symbols])

    def suffix(self, i: int) -> str:
        """Return the suffix starting at the i-th symbol as a string.

        For utf-8 encoded sequences, a suffix may start in the middle of a
        multi-byte character; such bytes are shown as the replacement
        character.
        """
        if self.symbols.dtype == np.uint8:
            return self.symbols[i:].tobytes().decode("utf-8", errors="replace")
        return "".join([chr(c) for c in self.symbols[i:]])

    @staticmethod
    def from_str(name: str, s: str, use_utf8: bool) -> "SymbolSequence":
        """Construct an instance of SymbolSequence from a string.

        Args:
          name:
            Name of the returned instance. It can be either a filename or an ID.
          s:
            It contains the text string.
          use_utf8:
            True to encode the text with utf-8.
            False to save the Unicode codepoint of the text.
        """
        if use_utf8:
            binary_text = s.encode("utf-8")
            return SymbolSequence(
                name=name,
                symbols=np.frombuffer(binary_text, dtype=np.uint8),
                max_symbol=BYTE_MAX_SYMBOL,
            )
        else:
            symbols = np.fromiter(
                (ord(i) for i in s), dtype=np.int32, count=len(s)
            )
            return SymbolSequence(
                name=name,
                symbols=symbols,
                max_symbol=int(symbols.max()) if symbols.size > 0 else 0,
            )

    @staticmethod
    def from_file(
        filename: Union[str, Path], use_utf8: bool = True
    ) -> "SymbolSequence":
        """Construct an instance of SymbolSequence from a utf-8 text file.

        Args:
          filename:
            The file to read. Its name is used as the name of the sequence.
          use_utf8:
            See :meth:`from_str`.
        """
        with open(filename, encoding="utf-8") as f:
            s = f.read()
        return SymbolSequence.from_str(
            name=str(filename), s=s, use_utf8=use_utf8
        )


def to_symbols(
    sequence: Union[SymbolSequence, str, bytes, np.ndarray, Sequence[int]]
) -> Tuple[np.ndarray, int]:
    """Convert the given sequence into a 1-D np.int64 array of
    non-negative integers.

    Both :func:`build_suffix_array` and :func:`build_lcp_array` go through
    this function, so that two elements are considered equal by the LCP
    derivation if and only if they are mapped to the same integer here.

    Args:
      sequence:
        A :class:`SymbolSequence`, a str (mapped to Unicode codepoints),
        bytes or bytearray, a 1-D integer array or a sequence of ints.
    Returns:
      Return a tuple of two elements:
        - the converted array
        - the default alphabet bound for it, i.e., ``max_symbol`` of a
          SymbolSequence, 255 for bytes and the largest value otherwise
          (0 for an empty sequence).
    """
    if isinstance(sequence, SymbolSequence):
        array = sequence.symbols
        max_symbol = sequence.max_symbol
    elif isinstance(sequence, str):
        array = np.fromiter(
            (ord(i) for i in sequence), dtype=np.int64, count=len(sequence)
        )
        max_symbol = None
    elif isinstance(sequence, (bytes, bytearray)):
        array = np.frombuffer(bytes(sequence), dtype=np.uint8)
        max_symbol = BYTE_MAX_SYMBOL
    else:
        array = np.asarray(sequence)
        max_symbol = None
        if array.size == 0 and array.dtype == np.float64:
            # np.asarray([]) gives a float array
            array = array.astype(np.int64)

    if array.ndim != 1:
        raise InvalidInputError(
            f"Expect a 1-D sequence, given an array with {array.ndim} dims"
        )
    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidInputError(
            f"Expect integer symbols, given dtype {array.dtype}"
        )

    int64_max = np.iinfo(np.int64).max
    if (
        array.size > 0
        and array.dtype == np.uint64
        and array.max() > np.uint64(int64_max)
    ):
        raise InvalidInputError(
            f"Symbol {array.max()} exceeds the largest supported "
            f"symbol {int64_max}"
        )

    array = array.astype(np.int64)
    if array.size > 0 and array.min() < 0:
        raise InvalidInputError(
            f"Symbols should be non-negative, given {array.min()}"
        )

    if max_symbol is None:
        max_symbol = int(array.max()) if array.size > 0 else 0
    return array, max_symbol
