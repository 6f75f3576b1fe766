class ApiTesterError(Exception):
    """Base class for errors raised while preparing or sending a request."""

    message = "Unknown error"

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)


class RequestBuildError(ApiTesterError):
    """The draft cannot be turned into an outbound request."""


class MissingURLError(RequestBuildError):
    message = "URL is required"


class InvalidURLError(RequestBuildError):
    message = "Invalid URL format"


class InvalidHeadersError(RequestBuildError):
    message = "Invalid headers JSON"


class TransportError(ApiTesterError):
    """The request reached the network layer and failed there."""


class RequestInFlightError(ApiTesterError):
    message = "A request is already in progress"


class HistoryEntryNotFoundError(ApiTesterError):
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"History entry {entry_id!r} not found")


class FormBodyRequiredError(ApiTesterError):
    message = "The current body type has no form entries"


class FormEntryNotFoundError(ApiTesterError):
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Form entry {entry_id!r} not found")
