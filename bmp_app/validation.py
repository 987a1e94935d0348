from .errors import InvalidHeaderError
from .header import BMP_MAGIC, BitmapHeader

BAD_MAGIC = "bad magic"
UNSUPPORTED_DEPTH = "unsupported bit depth"
COMPRESSED = "compressed bitmap"
NEGATIVE_WIDTH = "negative width"


def validate_header(header: BitmapHeader, strict: bool = False) -> None:
    if header.magic != BMP_MAGIC:
        raise InvalidHeaderError(BAD_MAGIC)

    if not strict:
        return

    checks = [
        (header.bits_per_pixel == 24, UNSUPPORTED_DEPTH),
        (header.compression == 0, COMPRESSED),
        (header.width_px >= 0, NEGATIVE_WIDTH),
    ]
    for passed, reason in checks:
        if not passed:
            raise InvalidHeaderError(reason, message=f"Error: Invalid header ({reason})")
