"""Schema sources that produce sObject descriptions.

``RestSchemaSource`` calls the org's REST describe endpoint over HTTP;
``FileSchemaSource`` reads describe payloads saved as ``<Name>.json``.
Both satisfy the ``SchemaSource`` protocol used by the generator.
"""

import logging
import os
from typing import Any, Protocol, runtime_checkable

import httpx

from .auth import Auth, BearerAuth
from .config import ConnectionSettings
from .errors import DescribeError
from .ir import IREntity
from .parser import DescribeParser

logger = logging.getLogger(__name__)


@runtime_checkable
class SchemaSource(Protocol):
    """Protocol for anything that can describe an sObject."""

    async def describe(self, sobject_name: str) -> IREntity:
        """Return the description of one sObject.

        Raises:
            DescribeError: If the sObject cannot be described
        """
        ...


class RestSchemaSource:
    """Describes sObjects through the REST API.

    Examples:
        settings = ConnectionSettings(instance_url=url, access_token=token)
        async with RestSchemaSource(settings) as source:
            account = await source.describe("Account")

        # Custom auth
        source = RestSchemaSource(settings, auth=MyCustomAuth())
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the source.

        Args:
            settings: Instance URL, access token and API version
            auth: Authentication handler; defaults to BearerAuth(access_token)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self.timeout = timeout
        self._auth = auth if auth is not None else BearerAuth(settings.access_token)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._parser = DescribeParser()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def describe_url(self, sobject_name: str) -> str:
        return f"{self.settings.describe_base_url}/{sobject_name}/describe"

    async def describe(self, sobject_name: str) -> IREntity:
        """Fetch and parse the describe result for one sObject.

        Raises:
            DescribeError: If the API answers with an error status
            httpx.TransportError: If the org cannot be reached
        """
        client = await self._get_client()
        url = self.describe_url(sobject_name)
        logger.debug("GET %s", url)

        response = await client.get(url)
        if response.is_error:
            errors = self._extract_errors(response)
            error_messages = "; ".join(e.get("message", str(e)) for e in errors)
            raise DescribeError(
                f"Describe of {sobject_name} failed ({response.status_code}): {error_messages}",
                errors,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DescribeError(
                f"Describe of {sobject_name} returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e
        return self._parser.parse(payload)

    @staticmethod
    def _extract_errors(response: httpx.Response) -> list[dict[str, Any]]:
        """Pull the error list out of an error response."""
        try:
            body = response.json()
        except ValueError:
            return [{"message": response.text or response.reason_phrase}]
        if isinstance(body, list):
            return [e if isinstance(e, dict) else {"message": str(e)} for e in body]
        if isinstance(body, dict):
            return [body]
        return [{"message": str(body)}]


class FileSchemaSource:
    """Describes sObjects from saved describe JSON files.

    Looks for ``<directory>/<sobject_name>.json``.
    """

    def __init__(self, directory: str):
        self.directory = directory
        self._parser = DescribeParser()

    async def describe(self, sobject_name: str) -> IREntity:
        file_path = os.path.join(self.directory, f"{sobject_name}.json")
        if not os.path.isfile(file_path):
            raise DescribeError(f"No describe file for {sobject_name}: {file_path}")
        logger.debug("Reading %s", file_path)
        return self._parser.parse_file(file_path)
