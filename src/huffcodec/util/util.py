def load_file(path: str, byte_count: int = None) -> bytes:
    with open(path, "rb") as f:
        data = f.read() if byte_count is None else f.read(byte_count)
    return data


def match_bytes(original: bytes, restored: bytes) -> bool:
    if original == restored:
        return True

    min_len = min(len(original), len(restored))
    for i in range(min_len):
        if original[i] != restored[i]:
            start = max(0, i - 50)
            end = i + 50
            print(f"Error at index {i}:\n{original[start:end]!r}\n-----------------------\n{restored[start:end]!r}")
            return False

    start = max(0, min_len - 50)
    print(f"Length mismatch at index {min_len} ({len(original)} != {len(restored)}):\n"
          f"{original[start:min_len + 50]!r}\n-----------------------\n{restored[start:min_len + 50]!r}")
    return False
