import io
import os

import numpy as np

from huffcodec.constants import (
    ALPH_SIZE,
    BITS_PER_INT,
    BITS_PER_WORD,
    DEBUG_HIGH,
    DEBUG_LOW,
    HUFF_TREE,
    MAX_TREE_DEPTH,
    PSEUDO_EOF,
)
from huffcodec.encoders.BitStream import BitInputStream, BitOutputStream
from huffcodec.huffman import HuffNode, count_leaves, make_codings_from_tree, make_tree_from_counts
from huffcodec.stats import print_codings, print_frequencies


class HuffException(Exception):
    pass


class HuffProcessor:
    """Compresses and decompresses byte streams with a Huffman code.

    The container is the 32-bit ``HUFF_TREE`` magic, the tree written in
    pre-order and then one code per input byte, closed by the code of
    ``PSEUDO_EOF``.
    """

    def __init__(self, debug: int = 0):
        self.debug = debug

    def compress(self, bit_input: BitInputStream, bit_output: BitOutputStream):
        counts = self.read_for_counts(bit_input)
        root = make_tree_from_counts(counts)
        codings = make_codings_from_tree(root)

        if self.debug >= DEBUG_HIGH:
            print_frequencies(counts)
            print_codings(codings)
        if self.debug >= DEBUG_LOW:
            print(f"Tree has {count_leaves(root)} leaves")

        bit_output.write_bits(BITS_PER_INT, HUFF_TREE)
        self.write_header(root, bit_output)
        header_bits = bit_output.bits_written

        bit_input.reset()
        self.write_compressed_bits(codings, bit_input, bit_output)
        bit_output.finish()

        if self.debug >= DEBUG_LOW:
            print(f"Wrote {header_bits} header bits and {bit_output.bits_written - header_bits} payload bits")

    def decompress(self, bit_input: BitInputStream, bit_output: BitOutputStream):
        bits = bit_input.read_bits(BITS_PER_INT)
        if bits != HUFF_TREE:
            raise HuffException(f"Illegal header starts with {bits}")

        root = self.read_tree_header(bit_input)
        if root.is_leaf():
            raise HuffException("tree header holds a single leaf")
        symbols = self.read_compressed_bits(root, bit_input, bit_output)
        bit_output.finish()

        if self.debug >= DEBUG_LOW:
            print(f"Decoded {symbols} symbols from {bit_input.bits_read} bits")

    def read_for_counts(self, bit_input: BitInputStream) -> np.ndarray:
        counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
        while True:
            word = bit_input.read_bits(BITS_PER_WORD)
            if word == -1:
                break
            counts[word] += 1
        counts[PSEUDO_EOF] = 1
        return counts

    def write_header(self, root: HuffNode, bit_output: BitOutputStream):
        if root.is_leaf():
            bit_output.write_bits(1, 1)
            bit_output.write_bits(BITS_PER_WORD + 1, root.value)
            return
        bit_output.write_bits(1, 0)
        self.write_header(root.left, bit_output)
        self.write_header(root.right, bit_output)

    def read_tree_header(self, bit_input: BitInputStream, depth: int = 0) -> HuffNode:
        if depth > MAX_TREE_DEPTH:
            raise HuffException("tree header is nested too deeply")
        bit = bit_input.read_bit()
        if bit == -1:
            raise HuffException("unexpected end of input while reading tree header")
        if bit == 0:
            left = self.read_tree_header(bit_input, depth + 1)
            right = self.read_tree_header(bit_input, depth + 1)
            return HuffNode(-1, 0, left, right)

        value = bit_input.read_bits(BITS_PER_WORD + 1)
        if value == -1:
            raise HuffException("unexpected end of input while reading a leaf symbol")
        if value > PSEUDO_EOF:
            raise HuffException(f"leaf symbol {value} is out of range")
        return HuffNode(value, 0)

    def write_compressed_bits(self, codings, bit_input: BitInputStream, bit_output: BitOutputStream):
        while True:
            word = bit_input.read_bits(BITS_PER_WORD)
            if word == -1:
                break
            code, length = codings[word]
            bit_output.write_bits(length, code)
        code, length = codings[PSEUDO_EOF]
        bit_output.write_bits(length, code)

    def read_compressed_bits(self, root: HuffNode, bit_input: BitInputStream, bit_output: BitOutputStream) -> int:
        symbols = 0
        current = root
        while True:
            bit = bit_input.read_bit()
            if bit == -1:
                raise HuffException("bad input, no PSEUDO_EOF")
            current = current.left if bit == 0 else current.right
            if current.is_leaf():
                if current.value == PSEUDO_EOF:
                    return symbols
                bit_output.write_bits(BITS_PER_WORD, current.value)
                symbols += 1
                current = root


def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    output_stream = io.BytesIO()
    bit_input = BitInputStream(io.BytesIO(data))
    bit_output = BitOutputStream(output_stream)
    HuffProcessor(debug).compress(bit_input, bit_output)
    return output_stream.getvalue()


def decompress_bytes(data: bytes, debug: int = 0) -> bytes:
    output_stream = io.BytesIO()
    bit_input = BitInputStream(io.BytesIO(data))
    bit_output = BitOutputStream(output_stream)
    HuffProcessor(debug).decompress(bit_input, bit_output)
    return output_stream.getvalue()


def _check_distinct_paths(input_path: str, output_path: str):
    # Opening the output for writing would truncate the input before it is read
    if os.path.exists(output_path) and os.path.samefile(input_path, output_path):
        raise ValueError(f"input and output are the same file: {input_path}")


def compress_file(input_path: str, output_path: str, debug: int = 0):
    _check_distinct_paths(input_path, output_path)
    with open(input_path, 'rb') as input_file, open(output_path, 'wb') as output_file:
        HuffProcessor(debug).compress(BitInputStream(input_file), BitOutputStream(output_file))


def decompress_file(input_path: str, output_path: str, debug: int = 0):
    _check_distinct_paths(input_path, output_path)
    try:
        with open(input_path, 'rb') as input_file, open(output_path, 'wb') as output_file:
            HuffProcessor(debug).decompress(BitInputStream(input_file), BitOutputStream(output_file))
    except HuffException:
        # Partial output of a corrupt container is never kept
        os.remove(output_path)
        raise
