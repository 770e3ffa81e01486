import os
import time
from typing import List

from tqdm import tqdm

from huffcodec.encoders.Encoder import METHODS, Encoder
from huffcodec.util.util import load_file, match_bytes


def run_benchmark(paths: List[str], methods: List[str] = None, byte_count: int = None) -> List[dict]:
    methods = methods or METHODS
    results = []
    for path in paths:
        data = load_file(path, byte_count)
        name = os.path.basename(path)

        for encode_method in tqdm(methods, desc=name, leave=False):
            encoder = Encoder(method=encode_method)
            start = time.perf_counter()
            compressed = encoder.encode(data)
            end = time.perf_counter()
            restored = encoder.decode(compressed)

            results.append({
                "file": name,
                "method": encode_method,
                "original_size": len(data),
                "compressed_size": len(compressed),
                "seconds": end - start,
                "roundtrip": match_bytes(data, restored),
            })
    return results


def print_results(results: List[dict]):
    for result in results:
        status = "ok" if result["roundtrip"] else "MISMATCH"
        print(
            f"[{result['file']}] Size: ({result['method']}): {result['compressed_size']} bytes"
            f" of {result['original_size']}. Time: {result['seconds']:.6f} seconds. Round trip: {status}"
        )
