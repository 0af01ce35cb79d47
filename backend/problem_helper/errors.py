class ProblemHelperError(Exception):
    """Base class for failures that abort an /analyze request."""


class UpstreamError(ProblemHelperError):
    """The problem metadata service could not be reached or answered garbage."""


class NotFoundError(UpstreamError):
    """The metadata service has no problem for the requested slug."""


class RepairError(ValueError):
    """Gemini text could not be turned into an AnalysisResult."""


class ConfigError(RuntimeError):
    """Required configuration is missing at startup."""
