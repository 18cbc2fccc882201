#!/usr/bin/env python3
#
# Copyright      2023  Xiaomi Corp.       (authors: Wei Kang)
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

import unittest
from tempfile import NamedTemporaryFile

import numpy as np

from suffixsort import InvalidInputError, SymbolSequence, to_symbols


class TestSymbolSequence(unittest.TestCase):
    def test_from_str_utf8(self):
        """Test constructing a SymbolSequence from a string using utf-8"""
        s = "zażółć"
        sequence = SymbolSequence.from_str(name="utf8", s=s, use_utf8=True)
        assert sequence.name == "utf8", sequence.name
        assert sequence.symbols.dtype == np.uint8, sequence.symbols.dtype
        np.testing.assert_equal(
            sequence.symbols,
            np.array(
                [122, 97, 197, 188, 195, 179, 197, 130, 196, 135],
                dtype=np.uint8,
            ),
        )
        assert sequence.max_symbol == 255, sequence.max_symbol
        assert len(sequence) == 10, len(sequence)
        assert sequence.text == s, sequence.text
        assert sequence.suffix(0) == s
        # Starts in the middle of "ż"
        assert sequence.suffix(3) == "�ółć", sequence.suffix(3)

    def test_from_str_unicode_code_point(self):
        """Test constructing a SymbolSequence from a string using Unicode code point"""
        s = "zażółć"
        sequence = SymbolSequence.from_str(name="cp", s=s, use_utf8=False)
        assert sequence.symbols.dtype == np.int32, sequence.symbols.dtype
        np.testing.assert_equal(
            sequence.symbols,
            np.array([122, 97, 380, 243, 322, 263], dtype=np.int32),
        )
        assert sequence.max_symbol == 380, sequence.max_symbol
        assert len(sequence) == 6, len(sequence)
        assert sequence.text == s, sequence.text
        assert sequence.suffix(2) == "żółć", sequence.suffix(2)

    def test_from_str_empty(self):
        for use_utf8 in [True, False]:
            sequence = SymbolSequence.from_str(
                name="empty", s="", use_utf8=use_utf8
            )
            assert len(sequence) == 0
            assert sequence.text == ""

    def test_from_file(self):
        with NamedTemporaryFile(suffix=".txt", encoding="utf8", mode="w+") as f:
            f.write("gęślą jaźń\n")
            f.flush()

            sequence = SymbolSequence.from_file(f.name)
            assert sequence.name == f.name, sequence.name
            assert sequence.symbols.dtype == np.uint8
            assert sequence.text == "gęślą jaźń\n"

            sequence = SymbolSequence.from_file(f.name, use_utf8=False)
            assert sequence.symbols.dtype == np.int32
            assert len(sequence) == 11, len(sequence)
            assert sequence.text == "gęślą jaźń\n"


class TestToSymbols(unittest.TestCase):
    def test_to_symbols(self):
        array, max_symbol = to_symbols("ab")
        np.testing.assert_equal(array, np.array([97, 98]))
        assert array.dtype == np.int64, array.dtype
        assert max_symbol == 98, max_symbol

        array, max_symbol = to_symbols(b"ab")
        np.testing.assert_equal(array, np.array([97, 98]))
        assert max_symbol == 255, max_symbol

        array, max_symbol = to_symbols([3, 0, 12])
        np.testing.assert_equal(array, np.array([3, 0, 12]))
        assert max_symbol == 12, max_symbol

        array, max_symbol = to_symbols(np.array([4, 1], dtype=np.uint16))
        assert array.dtype == np.int64, array.dtype
        assert max_symbol == 4, max_symbol

    def test_to_symbols_empty(self):
        for seq in ["", b"", [], np.array([], dtype=np.int32)]:
            array, max_symbol = to_symbols(seq)
            assert array.size == 0, seq
            assert array.dtype == np.int64, array.dtype
            assert max_symbol in (0, 255), max_symbol

    def test_to_symbols_invalid(self):
        with self.assertRaises(InvalidInputError):
            to_symbols([1, -3])
        with self.assertRaises(InvalidInputError):
            to_symbols(np.ones((2, 2), dtype=np.int32))
        with self.assertRaises(InvalidInputError):
            to_symbols([1.5, 2.0])
        with self.assertRaises(InvalidInputError):
            to_symbols(["a", "b"])

    def test_to_symbols_large_uint64(self):
        array = np.array([2**63 + 5, 1], dtype=np.uint64)
        with self.assertRaises(InvalidInputError) as cm:
            to_symbols(array)
        assert str(2**63 + 5) in str(cm.exception), str(cm.exception)

        array, max_symbol = to_symbols(np.array([2**63 - 1, 1], dtype=np.uint64))
        assert array.dtype == np.int64, array.dtype
        assert max_symbol == 2**63 - 1, max_symbol


if __name__ == "__main__":
    unittest.main()
