from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .config import ConversionConfig
from .errors import (ConversionError, HeaderDecodeError, OutputCreateError,
                     PixelTransformError, SourceOpenError)
from .header import HEADER_SIZE, BitmapHeader, format_header, read_header
from .pixels import copy_verbatim, invert_pixels, row_padding
from .validation import validate_header
from .verify import verify_inversion


@dataclass
class ConversionResult:
    path: str
    output_path: str | None = None
    error: ConversionError | None = None
    verified: bool | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def output_path_for(path: str, prefix: str = "INV_", naming: str = "full") -> str:
    path = str(path)
    if naming == "full":
        # "dir/a.bmp" -> "INV_dir/a.bmp", the prefix goes before the whole argument
        return prefix + path
    if naming == "basename":
        head, tail = os.path.split(path)
        return os.path.join(head, prefix + tail)
    raise ValueError(f"Unknown naming mode: {naming}")


def _leading_size(header: BitmapHeader, stride: str) -> int:
    if stride == "aligned":
        return max(HEADER_SIZE, header.pixel_data_offset)
    return HEADER_SIZE


def convert_file(path: str, config: ConversionConfig | None = None) -> ConversionResult:
    """
    Writes the inverted copy of one bitmap file.

    Raises a ConversionError subclass on failure. No output file is created
    unless the header was decoded and accepted.
    """
    config = config or ConversionConfig()
    path = str(path)
    try:
        source = open(path, "rb")
    except OSError as exc:
        raise SourceOpenError(f"{path}: {exc.strerror}", path) from exc

    with source:
        try:
            header, _ = read_header(source)
            validate_header(header, strict=config.strict)
        except OSError as exc:
            raise HeaderDecodeError("Error: failed to read header", path) from exc
        except ConversionError as exc:
            exc.path = path
            raise

        if config.debug:
            print(format_header(header), file=sys.stderr)

        output_path = output_path_for(path, config.prefix, config.naming)
        try:
            destination = open(output_path, "wb")
        except OSError as exc:
            raise OutputCreateError(f"{output_path}: {exc.strerror}", path) from exc

        try:
            # buffered writes may only fail when the file is flushed on close
            try:
                with destination:
                    source.seek(0)
                    copy_verbatim(source, destination, _leading_size(header, config.stride))
                    invert_pixels(
                        source,
                        destination,
                        width=header.width_px,
                        height=header.height_px,
                        padding=row_padding(header.width_px, config.stride),
                    )
            except OSError as exc:
                raise PixelTransformError(f"{output_path}: {exc.strerror or exc}", path) from exc
        except PixelTransformError as exc:
            exc.path = path
            if config.cleanup_partial:
                Path(output_path).unlink(missing_ok=True)
            raise

    result = ConversionResult(path=path, output_path=output_path)
    if config.verify:
        result.verified = verify_inversion(path, output_path)
    return result


def convert_batch(paths: list[str], config: ConversionConfig | None = None) -> list[ConversionResult]:
    config = config or ConversionConfig()
    results: list[ConversionResult] = []
    for path in paths:
        print(f"Inverting {path} . . . ", end="", flush=True)
        try:
            result = convert_file(path, config)
        except ConversionError as exc:
            print(exc.message, file=sys.stderr)
            print(f"Error: could not inverse {path}", file=sys.stderr)
            results.append(ConversionResult(path=str(path), error=exc))
            continue

        if result.verified is False:
            print(f"Warning: verification failed for {result.output_path}", file=sys.stderr)
        print("DONE")
        results.append(result)

    if len(paths) > 1:
        done = sum(1 for result in results if result.ok)
        print(f"Inverted {done}/{len(results)} images")
    return results
