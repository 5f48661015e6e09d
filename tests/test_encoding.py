import pytest

from minitalk.encoding import BitDecoder, encode_bits


def _decode(bits):
    decoder = BitDecoder()
    result = bytearray()
    for bit in bits:
        byte = decoder.push(bit)
        if byte is not None:
            result.append(byte)
    return bytes(result)


def test_least_significant_bit_first():
    assert list(encode_bits(b"\x01")) == [1, 0, 0, 0, 0, 0, 0, 0]
    assert list(encode_bits(b"\x80")) == [0, 0, 0, 0, 0, 0, 0, 1]


def test_eight_bits_per_byte():
    data = b"hello world"
    assert len(list(encode_bits(data))) == 8 * len(data)


@pytest.mark.parametrize("data", [b"", b"A", b"\x00\xff", bytes(range(256))])
def test_round_trip_bytes(data):
    assert _decode(encode_bits(data)) == data


def test_text_is_sent_as_utf8():
    text = "zażółć"
    assert _decode(encode_bits(text)).decode("utf-8") == text


def test_push_returns_byte_only_on_eighth_bit():
    decoder = BitDecoder()
    bits = list(encode_bits(b"Z"))
    results = [decoder.push(bit) for bit in bits]
    assert results[:7] == [None] * 7
    assert results[7] == ord("Z")
    assert decoder.pending == 0


def test_pending_counts_partial_bits():
    decoder = BitDecoder()
    decoder.push(1)
    decoder.push(0)
    decoder.push(True)
    assert decoder.pending == 3


def test_reset_discards_partial_byte():
    decoder = BitDecoder()
    for bit in [1, 1, 1]:
        decoder.push(bit)
    decoder.reset()
    assert decoder.pending == 0
    assert _decode(encode_bits(b"q")) == b"q"
    results = [decoder.push(bit) for bit in encode_bits(b"q")]
    assert results[-1] == ord("q")


@pytest.mark.parametrize("bad", [2, -1, "1"])
def test_invalid_bit_rejected(bad):
    decoder = BitDecoder()
    with pytest.raises(ValueError):
        decoder.push(bad)