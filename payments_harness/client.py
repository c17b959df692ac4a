from typing import Any, ClassVar, Generic, Mapping, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from payments_harness.config import ClientConfig
from payments_harness.log import get_logger
from payments_harness.models import Payment, Refund, ResourceId

logger = get_logger(__name__)

R = TypeVar("R", bound=BaseModel)

Payload = Union[Mapping[str, Any], BaseModel]


def build_transport(config: ClientConfig) -> httpx.Client:
    """Plain HTTP transport for talking to a running server."""
    return httpx.Client(timeout=config.timeout)


def _body(payload: Payload) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return dict(payload)


class CollectionClient(Generic[R]):
    """
    Issues create/get/list calls against one REST collection.

    The raw response is handed back for every status code; deciding what
    counts as a failure is left to the caller.
    """

    path: ClassVar[str] = ""
    model: ClassVar[Type[BaseModel]] = BaseModel

    def __init__(self, transport: httpx.Client, config: ClientConfig):
        self.transport = transport
        self.base_url = f"{config.base_url}{self.path}"

    def _url(self, resource_id: ResourceId | None = None) -> str:
        if resource_id is None:
            return self.base_url
        return f"{self.base_url}/{resource_id}"

    def _send(self, method: str, url: str, payload: Payload | None = None) -> httpx.Response:
        if payload is None:
            response = self.transport.request(method, url)
        else:
            response = self.transport.request(method, url, json=_body(payload))
        logger.debug("http call", method=method, url=url, status=response.status_code)
        return response

    def create(self, payload: Payload) -> httpx.Response:
        return self._send("POST", self._url(), payload)

    def get(self, resource_id: ResourceId) -> httpx.Response:
        return self._send("GET", self._url(resource_id))

    def list(self) -> httpx.Response:
        return self._send("GET", self._url())

    def parse(self, response: httpx.Response):
        """Validate a response body against the record model.

        Returns a list of records for collection responses. Raises
        pydantic.ValidationError when the shape does not match.
        """
        data = response.json()
        if isinstance(data, list):
            return [self.model.model_validate(item) for item in data]
        return self.model.model_validate(data)


class ResourceClient(CollectionClient[R]):
    """Collection client that can also update and delete records."""

    def update(self, resource_id: ResourceId, payload: Payload) -> httpx.Response:
        return self._send("PUT", self._url(resource_id), payload)

    def delete(self, resource_id: ResourceId) -> httpx.Response:
        return self._send("DELETE", self._url(resource_id))


class PaymentsClient(ResourceClient[Payment]):
    path = "/payments"
    model = Payment


class RefundsClient(CollectionClient[Refund]):
    path = "/refunds"
    model = Refund

    def refund_payment(self, payload: Payload) -> httpx.Response:
        return self.create(payload)

