"""Authentication for describe calls.

The REST API takes an OAuth access token (or a session id) as a bearer
token. Anything else can be plugged in through an object with
``get_headers``.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Supplies the auth headers sent with every describe request.

    Example:
        class SessionIdAuth:
            def __init__(self, session_id: str):
                self.session_id = session_id

            def get_headers(self) -> dict[str, str]:
                return {"Authorization": f"OAuth {self.session_id}"}
    """

    def get_headers(self) -> Dict[str, str]:
        ...


class BearerAuth:
    """Sends the org access token as ``Authorization: Bearer <token>``."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}
