class ImageServiceError(Exception):
    """Base class for failures surfaced by the /resize endpoint."""

    http_status = 500


class MissingParameterError(ImageServiceError):
    http_status = 400


class FetchError(ImageServiceError):
    """The source image could not be downloaded."""


class DecodeError(ImageServiceError):
    """The downloaded bytes are not a readable image."""


class EncodeError(ImageServiceError):
    """The processed image could not be written as JPEG."""
