"""Client repository — maps stored rows to the UI's client shape."""

from repair_shop.application.interfaces import Record
from repair_shop.application.repositories.base import EntityRepository, build_dataclass
from repair_shop.domain.entities import CLIENT_SCHEMA, Client
from repair_shop.domain.entities.client import CLIENT_OPTIONAL_TEXT
from repair_shop.domain.normalization import none_to_blank


class ClientRepository(EntityRepository):
    """Clients with dependents (service orders) are deactivated, never purged."""

    schema = CLIENT_SCHEMA

    def _to_entity(self, record: Record) -> Client:
        return build_dataclass(Client, none_to_blank(record, CLIENT_OPTIONAL_TEXT))
