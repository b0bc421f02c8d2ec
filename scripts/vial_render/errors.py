"""Exception types raised by the rendering pipeline."""


class VialRenderError(Exception):
    """Base class for failures that abort a render."""


class FileReadError(VialRenderError):
    """Input file is missing or unreadable."""


class ParseError(VialRenderError):
    """Configuration text is malformed or lacks a required field."""


class FontLoadError(VialRenderError):
    """Bundled font asset could not be loaded."""


class DirectoryCreateError(VialRenderError):
    """Output directory could not be created."""


class ImageWriteError(VialRenderError):
    """Rendered image could not be written."""
