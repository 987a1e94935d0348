import pytest

from bmp_app.errors import InvalidHeaderError
from bmp_app.header import decode_header
from bmp_app.validation import (BAD_MAGIC, COMPRESSED, NEGATIVE_WIDTH,
                                UNSUPPORTED_DEPTH, validate_header)
from bmp_factory import build_bmp


def test_accepts_bm(small_bmp):
    validate_header(decode_header(small_bmp))


@pytest.mark.parametrize("magic", [b"MB", b"BA", b"\x00\x00", b"PN"])
def test_rejects_other_magic(magic):
    with pytest.raises(InvalidHeaderError) as excinfo:
        validate_header(decode_header(build_bmp(1, 1, bytes(3), magic=magic)))
    assert excinfo.value.reason == BAD_MAGIC
    assert excinfo.value.message == "Error: Invalid header"


def test_default_only_checks_magic():
    header = decode_header(build_bmp(-4, 1, b"", bits_per_pixel=8, compression=1))
    validate_header(header)


@pytest.mark.parametrize(
    "kwargs, reason",
    [
        ({"bits_per_pixel": 32}, UNSUPPORTED_DEPTH),
        ({"compression": 1}, COMPRESSED),
        ({"width": -1}, NEGATIVE_WIDTH),
    ],
)
def test_strict_rejections(kwargs, reason):
    params = {"width": 2, "height": 1, "pixels": bytes(6)}
    params.update(kwargs)
    header = decode_header(build_bmp(**params))
    with pytest.raises(InvalidHeaderError) as excinfo:
        validate_header(header, strict=True)
    assert excinfo.value.reason == reason
    assert reason in excinfo.value.message


def test_strict_accepts_plain_24_bit(small_bmp):
    validate_header(decode_header(small_bmp), strict=True)


def test_strict_still_checks_magic_first():
    header = decode_header(build_bmp(2, 1, bytes(6), magic=b"XX", bits_per_pixel=8))
    with pytest.raises(InvalidHeaderError) as excinfo:
        validate_header(header, strict=True)
    assert excinfo.value.reason == BAD_MAGIC
