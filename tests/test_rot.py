import io
import string

from exercisekit.rot import RotDecoder, rotate


def test_joke():
    rot = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    assert rot.read().decode("ascii") == "To get to the other side!"


def test_binary():
    data = bytes(range(256))
    rot = RotDecoder(io.BytesIO(data), 13)
    buf = bytearray(256)
    assert rot.readinto(buf) == 256
    for original, decoded in zip(data, buf):
        if original != decoded:
            assert chr(original) in string.ascii_letters
            assert chr(decoded) in string.ascii_letters


def test_rot13_is_its_own_inverse():
    data = bytes(range(256))
    assert rotate(rotate(data, 13), 13) == data


def test_rotate_preserves_case_and_non_letters():
    assert rotate(b"Gb trg gb gur bgure fvqr!", 13) == b"To get to the other side!"


def test_rotate_by_26_is_identity():
    text = b"Hello, World"
    assert rotate(text, 26) == text


def test_readinto_at_end_returns_zero():
    rot = RotDecoder(io.BytesIO(b""), 13)
    buf = bytearray(8)
    assert rot.readinto(buf) == 0


def test_works_with_text_wrapper():
    raw = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    wrapper = io.TextIOWrapper(io.BufferedReader(raw), encoding="ascii")
    assert wrapper.read() == "To get to the other side!"