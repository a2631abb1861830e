class UpstreamError(Exception):
    """The employee service answered with something we cannot use."""


class UpstreamUnavailableError(UpstreamError):
    """The employee service kept failing until the retry budget ran out."""
