"""
Error taxonomy for hostinfo.

Only the browser-side detectors raise; everything else degrades to the
placeholder value for the affected field.
"""


class HostInfoError(Exception):
    """Base class for all hostinfo errors."""


class UnrecognizedUserAgentError(HostInfoError, ValueError):
    """
    Raised when a user-agent string carries no token a detector knows about.
    """

    def __init__(self, detail: str, user_agent: str):
        self.detail = detail
        self.user_agent = user_agent
        super().__init__(f"Cannot detect {detail} from user agent {user_agent!r}")
