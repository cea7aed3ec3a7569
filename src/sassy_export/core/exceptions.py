class SassyExportError(Exception):
    """Base exception for SassyExport failures."""


class ArgumentTypeError(SassyExportError, TypeError):
    """Raised when an export argument does not have the required type."""


class ConversionDepthError(SassyExportError):
    """Raised when a value nests deeper than the converter allows."""


class DataFileError(SassyExportError, ValueError):
    """Raised when a data file cannot be turned into a SassMap."""
