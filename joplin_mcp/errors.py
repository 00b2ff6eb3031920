"""Error types shared by the backend client, the tool executor and the dispatcher."""


class AdapterError(Exception):
    """Base error for all adapter failures."""


class BackendError(AdapterError):
    """A request to the Joplin backend failed."""


class BackendTransportError(BackendError):
    """The backend could not be reached (connection refused, timeout)."""


class BackendStatusError(BackendError):
    """The backend answered with an HTTP error status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class ToolError(AdapterError):
    """Base error for tool resolution and argument failures."""


class UnknownToolError(ToolError):
    """Requested tool is not part of the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown tool: {name}")


class InvalidParamsError(ToolError):
    """Tool arguments failed validation."""

    def __init__(self, tool: str, detail: str) -> None:
        self.tool = tool
        self.detail = detail
        super().__init__(f"Invalid params for {tool}: {detail}")
