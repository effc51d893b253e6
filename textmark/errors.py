"""Exceptions raised while building or applying a watermark."""


class WatermarkError(Exception):
    pass


class ConfigurationError(WatermarkError, ValueError):
    """Invalid text, color, opacity or other user-supplied setting."""


class FontLoadError(WatermarkError, OSError):
    """A font file could not be read or parsed."""


class EmptyContentError(WatermarkError):
    """The rendered mark or text box has no visible pixels."""
