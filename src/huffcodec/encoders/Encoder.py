import bz2
import gzip
import io
import lzma
import zlib

import brotli

from huffcodec.HuffProcessor import compress_bytes, decompress_bytes

METHODS = ["huffman", "lzma", "zlib", "bz2", "gzip", "brotli"]


class Encoder:

    def __init__(self, method: str = "huffman"):
        assert method in METHODS, f"method must be one of {', '.join(METHODS)}"
        self.method = method

    def encode(self, data: bytes) -> bytes:
        if self.method == "huffman":
            return compress_bytes(data)
        elif self.method == "lzma":
            return lzma.compress(data)
        elif self.method == "zlib":
            return zlib.compress(data)
        elif self.method == "bz2":
            return bz2.compress(data)
        elif self.method == "gzip":
            with io.BytesIO() as byte_stream:
                with gzip.GzipFile(fileobj=byte_stream, mode='wb') as gzip_file:
                    gzip_file.write(data)
                return byte_stream.getvalue()
        elif self.method == "brotli":
            return brotli.compress(data)

    def decode(self, encoded_data: bytes) -> bytes:
        if self.method == "huffman":
            return decompress_bytes(encoded_data)
        elif self.method == "lzma":
            return lzma.decompress(encoded_data)
        elif self.method == "zlib":
            return zlib.decompress(encoded_data)
        elif self.method == "bz2":
            return bz2.decompress(encoded_data)
        elif self.method == "gzip":
            with io.BytesIO(encoded_data) as byte_stream:
                with gzip.GzipFile(fileobj=byte_stream, mode='rb') as gzip_file:
                    return gzip_file.read()
        elif self.method == "brotli":
            return brotli.decompress(encoded_data)
