"""Exceptions raised by the Biopics API client."""


class BiopicsError(Exception):
    """Base class for errors raised by this package."""


class ApiError(BiopicsError):
    """The remote API answered with a non-2xx status.

    The message is ``API <status>: <body>`` with the body passed through
    verbatim, so whatever the service explains ends up in front of the agent.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API {status_code}: {body}")
