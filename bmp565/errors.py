class Bmp565Error(ValueError):
    """Base class for conversion and export failures."""


class InvalidPayload(Bmp565Error):
    """Byte buffer cannot be read as a sequence of 16-bit words."""


class MalformedSourceBuffer(Bmp565Error):
    """Dimensions, stride and data length of a pixel buffer disagree."""
