import os
import sys
import time

import numpy as np

from huffcodec.constants import ALPH_SIZE, PSEUDO_EOF
from huffcodec.HuffProcessor import HuffException, compress_file, decompress_file
from huffcodec.huffman import make_codings_from_tree, make_tree_from_counts
from huffcodec.stats import average_code_length, calculate_entropy, compression_ratio, print_frequencies
from huffcodec.util.benchmarks import print_results, run_benchmark
from huffcodec.util.util import load_file

USAGE = """Usage: huffcodec compress <input> <output> [debug_level]
       huffcodec decompress <input> <output> [debug_level]
       huffcodec stats <input>
       huffcodec bench <input> [<input> ...]"""


def _run_codec(command: str, args):
    if len(args) not in (2, 3):
        print(USAGE)
        sys.exit(1)
    if len(args) == 3 and not args[2].isdigit():
        print(USAGE)
        sys.exit(1)
    input_path, output_path = args[0], args[1]
    debug = int(args[2]) if len(args) == 3 else 0

    start = time.perf_counter()
    if command == "compress":
        compress_file(input_path, output_path, debug)
    else:
        decompress_file(input_path, output_path, debug)
    end = time.perf_counter()

    input_size = os.path.getsize(input_path)
    output_size = os.path.getsize(output_path)
    if command == "compress":
        ratio = compression_ratio(input_size, output_size)
    else:
        ratio = compression_ratio(output_size, input_size)
    print(f"{command}: {input_size} bytes -> {output_size} bytes")
    print(f"{ratio * 100:.2f}% compression ratio")
    print(f"Time: {end - start:.6f} seconds")


def _run_stats(args):
    if len(args) != 1:
        print(USAGE)
        sys.exit(1)
    data = load_file(args[0])

    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    counts[:ALPH_SIZE] = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPH_SIZE)
    counts[PSEUDO_EOF] = 1
    codings = make_codings_from_tree(make_tree_from_counts(counts))

    print_frequencies(counts)
    print(f"Entropy: {calculate_entropy(data):.4f} bits per byte")
    print(f"Average code length: {average_code_length(counts, codings):.4f} bits per symbol")
    lengths = [length for _, length in codings.values()]
    print(f"Code lengths: {min(lengths)} to {max(lengths)} bits over {len(codings)} symbols")


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        sys.exit(1)

    command, rest = args[0], args[1:]
    try:
        if command in ("compress", "decompress"):
            _run_codec(command, rest)
        elif command == "stats":
            _run_stats(rest)
        elif command == "bench":
            if not rest:
                print(USAGE)
                sys.exit(1)
            print_results(run_benchmark(rest))
        else:
            print(USAGE)
            sys.exit(1)
    except (HuffException, OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
