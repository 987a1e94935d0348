class ConversionError(RuntimeError):
    """Base class for per-file conversion failures."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class SourceOpenError(ConversionError):
    pass


class HeaderDecodeError(ConversionError):
    pass


class InvalidHeaderError(ConversionError):
    def __init__(self, reason: str, message: str = "Error: Invalid header", path: str | None = None):
        super().__init__(message, path)
        self.reason = reason


class OutputCreateError(ConversionError):
    pass


class PixelTransformError(ConversionError):
    pass
