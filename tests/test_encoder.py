import pytest

from huffcodec.encoders.Encoder import METHODS, Encoder
from huffcodec.util.benchmarks import print_results, run_benchmark
from huffcodec.util.util import load_file, match_bytes

SAMPLE = b"It was the best of times, it was the worst of times. " * 40


@pytest.mark.parametrize("method", METHODS)
def test_encoder_round_trip(method):
    encoder = Encoder(method=method)
    assert encoder.decode(encoder.encode(SAMPLE)) == SAMPLE


def test_encoder_rejects_unknown_method():
    with pytest.raises(AssertionError):
        Encoder(method="arithmetic")


def test_load_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789")
    assert load_file(str(path)) == b"0123456789"
    assert load_file(str(path), 4) == b"0123"


def test_match_bytes(capsys):
    assert match_bytes(b"abc", b"abc")
    assert capsys.readouterr().out == ""

    assert not match_bytes(b"abcdef", b"abXdef")
    assert "Error at index 2" in capsys.readouterr().out

    assert not match_bytes(b"abc", b"abcd")
    assert "Length mismatch at index 3" in capsys.readouterr().out


def test_run_benchmark(tmp_path, capsys):
    path = tmp_path / "sample.txt"
    path.write_bytes(SAMPLE)

    results = run_benchmark([str(path)], methods=["huffman", "zlib"])
    assert [r["method"] for r in results] == ["huffman", "zlib"]
    assert all(r["roundtrip"] for r in results)
    assert all(r["original_size"] == len(SAMPLE) for r in results)
    assert results[0]["compressed_size"] < len(SAMPLE)

    print_results(results)
    out = capsys.readouterr().out
    assert "[sample.txt] Size: (huffman)" in out
    assert "Round trip: ok" in out
