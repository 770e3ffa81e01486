from huffcodec.HuffProcessor import (
    HuffException,
    HuffProcessor,
    compress_bytes,
    compress_file,
    decompress_bytes,
    decompress_file,
)
from huffcodec.encoders.BitStream import BitInputStream, BitOutputStream

__version__ = "0.1.0"
