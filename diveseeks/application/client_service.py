from typing import Final

from ..domain.clients import Client, CreateClient
from ..domain.exceptions import ClientAlreadyExistsError
from ..domain.pagination import PaginatedResult, paginate
from ..logging_config import get_logger
from ..logging_utils import log_client_action

logger: Final = get_logger(__name__)


class ClientRegistry:
    """In-process registry of API clients, keyed by normalized email."""

    def __init__(self):
        self._clients: dict[str, Client] = {}

    @staticmethod
    def _key(email: str) -> str:
        return email.strip().lower()

    def get_by_email(self, email: str) -> Client | None:
        return self._clients.get(self._key(email))

    def register(self, data: CreateClient) -> Client:
        logger.debug("Registering client", client_name=data.name)

        if self.get_by_email(data.email):
            logger.warning("Client registration rejected - email taken")
            raise ClientAlreadyExistsError(
                f"A client with email {data.email} already exists"
            )

        client = Client(name=data.name.strip(), email=data.email.strip())
        self._clients[self._key(client.email)] = client

        log_client_action("register_client", client.id, client_name=client.name)
        return client

    def list_clients(
        self, page: int | None = None, limit: int | None = None
    ) -> PaginatedResult[Client]:
        """List clients in registration order."""
        clients = list(self._clients.values())
        return paginate(clients, page, limit)
