# leadfolder/errors.py
"""
Error taxonomy shared by the UI pipeline and the backend proxy.

None of these are fatal: the UI turns each one into a short message and stays
interactive so the operator can retry.
"""


class LeadFolderError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LeadFolderError):
    """Input rejected before any network call (e.g. blank lead text)."""


class TransportError(LeadFolderError):
    """Network, DNS, timeout or response-decoding failure."""


class UpstreamError(LeadFolderError):
    """Backend answered with a non-2xx status, or the LLM provider failed."""


class MissingCredentialError(UpstreamError):
    """The provider API key is not configured."""


class PersistenceError(LeadFolderError):
    """History could not be read from or written to the key/value store."""


class ClipboardError(LeadFolderError):
    """Clipboard write was refused."""


class ClipboardPending(LeadFolderError):
    """The browser has not reported the outcome of a clipboard write yet."""
