#!/usr/bin/env python3
#
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
This script builds the suffix array and the LCP array of a text and prints
the suffixes in lexicographic order.

Usage:

python3 -m suffixsort.cli --text abcab

python3 -m suffixsort.cli \
  --input /path/to/text.txt \
  --use-utf8 false \
  --show-suffixes false

The output for `--text abcab` is:

0	3	2	ab
1	0	0	abcab
2	4	1	b
3	1	0	bcab
4	2	-	cab
lcp = [2, 0, 1, 0]

where the columns are the rank of the suffix, its start position, the
length of the longest common prefix with the next suffix and the suffix
itself.
"""

import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from .datatypes import SymbolSequence
from .lcp import build_lcp_array
from .suffix_array import build_suffix_array
from .utils import AttributeDict, InvalidInputError, setup_logger, str2bool


def get_parser():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--text",
        type=str,
        help="The text to process. Either --text or --input is required.",
    )

    parser.add_argument(
        "--input",
        type=Path,
        help="Path to a utf-8 text file to process.",
    )

    parser.add_argument(
        "--use-utf8",
        type=str2bool,
        default=True,
        help="""True to process the utf-8 encoded bytes of the text,
        False to process its Unicode codepoints.
        """,
    )

    parser.add_argument(
        "--renumber",
        type=str2bool,
        default=False,
        help="True to compact the alphabet before building the suffix array.",
    )

    parser.add_argument(
        "--show-suffixes",
        type=str2bool,
        default=True,
        help="True to print one line per suffix, in lexicographic order.",
    )

    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Path to directory to save logs. No log file if not given.",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        help="""Possible values are:
          - debug
          - info
          - warning
          - error
        """,
    )

    return parser


def get_params() -> AttributeDict:
    """Return a dict containing default parameters."""
    params = AttributeDict(
        {
            # Suffixes longer than this are truncated when printed
            "max_suffix_chars": 60,
            # Shown in the lcp column of the largest suffix
            "no_lcp": "-",
        }
    )
    return params


def format_suffixes(
    params: AttributeDict,
    sequence: SymbolSequence,
    suffix_array: List[int],
    lcp: List[int],
) -> List[str]:
    """Return one tab separated line per suffix, in lexicographic order."""
    lines = []
    for r, pos in enumerate(suffix_array):
        suffix = sequence.suffix(pos)
        if len(suffix) > params.max_suffix_chars:
            suffix = suffix[: params.max_suffix_chars] + "..."
        # Keep one line per suffix
        suffix = suffix.replace("\n", "\\n").replace("\t", "\\t")
        h = lcp[r] if r < len(lcp) else params.no_lcp
        lines.append(f"{r}\t{pos}\t{h}\t{suffix}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    params = get_params()
    params.update(vars(args))

    setup_logger(
        f"{params.log_dir}/log-suffixsort" if params.log_dir else None,
        log_level=params.log_level,
    )
    logging.debug(f"{params}")

    if (params.text is None) == (params.input is None):
        parser.error("Exactly one of --text and --input is required.")

    if params.input is not None:
        assert params.input.is_file(), f"File not exists : {params.input}"
        sequence = SymbolSequence.from_file(
            params.input, use_utf8=params.use_utf8
        )
    else:
        sequence = SymbolSequence.from_str(
            name="text", s=params.text, use_utf8=params.use_utf8
        )

    logging.info(
        f"Processing {sequence.name} with {len(sequence)} symbols, "
        f"max symbol {sequence.max_symbol}"
    )

    start = time.time()
    try:
        suffix_array = build_suffix_array(sequence, renumber=params.renumber)
        lcp = build_lcp_array(suffix_array, sequence)
    except InvalidInputError as e:
        logging.error(f"Invalid input {sequence.name}: {e}")
        raise
    logging.info(f"Done in {time.time() - start:.3f} seconds.")

    suffix_array = suffix_array.tolist()
    lcp = lcp.tolist()
    if params.show_suffixes:
        for line in format_suffixes(params, sequence, suffix_array, lcp):
            print(line)
    print(f"lcp = {lcp}")
    return 0


if __name__ == "__main__":
    main()
