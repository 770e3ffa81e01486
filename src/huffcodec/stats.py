import itertools
import math
from collections import Counter
from typing import Dict, Sequence, Tuple

from termcolor import colored

from huffcodec.constants import PSEUDO_EOF
from huffcodec.huffman import code_to_string

PSEUDO_EOF_LABEL = "EOF"


def symbol_label(symbol: int) -> str:
    if symbol == PSEUDO_EOF:
        return PSEUDO_EOF_LABEL
    char = chr(symbol)
    if char.isprintable() and symbol < 128:
        return f"{symbol:3d} {char!r}"
    return f"{symbol:3d}"


def print_frequencies(frequencies: Sequence[int]):
    # Only symbols that actually occur get a bar
    data = {symbol: int(freq) for symbol, freq in enumerate(frequencies) if freq > 0}
    if not data:
        print("No symbols to show")
        return

    # Longest bar is 50 characters
    scale = 50 / max(data.values())

    colors = ['red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']
    color_cycle = itertools.cycle(colors)

    for symbol, freq in data.items():
        color = next(color_cycle)
        bar = colored('█' * max(1, int(freq * scale)), color)
        print(f"{symbol_label(symbol):>9}: {bar} ({freq})")


def print_codings(codings: Dict[int, Tuple[int, int]]):
    for symbol in sorted(codings):
        code, length = codings[symbol]
        print(f"{symbol_label(symbol):>9}: {code_to_string(code, length)} ({length} bits)")


def calculate_entropy(byte_data: bytes) -> float:
    if not byte_data:
        return 0.0
    byte_counts = Counter(byte_data)
    total_bytes = len(byte_data)

    probabilities = [count / total_bytes for count in byte_counts.values()]

    # Shannon entropy in bits per byte
    return -sum(p * math.log2(p) for p in probabilities)


def average_code_length(frequencies: Sequence[int], codings: Dict[int, Tuple[int, int]]) -> float:
    total = sum(int(frequencies[symbol]) for symbol in codings)
    if total == 0:
        return 0.0
    weighted = sum(int(frequencies[symbol]) * length for symbol, (_, length) in codings.items())
    return weighted / total


def compression_ratio(original_size: int, compressed_size: int) -> float:
    if original_size == 0:
        return 0.0
    return compressed_size / original_size
