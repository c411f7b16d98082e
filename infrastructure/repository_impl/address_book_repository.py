import json
from typing import Dict, List, Optional

import redis
import structlog

from application.ports.address_book_port import AddressBookPort
from core_domain.entities.address import AddressBookEntry
from infrastructure.monitoring.metrics import address_book_entries_added_total


class InMemoryAddressBookRepository(AddressBookPort):
    """Address book kept in process memory, in insertion order."""

    def __init__(self):
        self._entries: Dict[str, AddressBookEntry] = {}
        self.log = structlog.get_logger(__name__).bind(repository=self.__class__.__name__)

    def add_address(self, entry: AddressBookEntry) -> None:
        entry_id = entry.entry_id
        if entry_id in self._entries:
            self.log.info("Entry already in address book, skipping", entry_id=entry_id)
            return
        self._entries[entry_id] = entry
        address_book_entries_added_total.inc()
        self.log.info("Entry added to address book", entry_id=entry_id, total=len(self._entries))

    def remove_address(self, entry_id: str) -> None:
        if self._entries.pop(entry_id, None) is None:
            self.log.debug("Entry not in address book", entry_id=entry_id)
            return
        self.log.info("Entry removed from address book", entry_id=entry_id)

    def list_addresses(self) -> List[AddressBookEntry]:
        return list(self._entries.values())


class RedisAddressBookRepository(AddressBookPort):
    """
    Address book stored as a Redis hash (field = entry id, value = the flat
    entry record as JSON) plus a list of entry ids in insertion order, so
    listing matches the in-memory backend.
    """

    DEFAULT_KEY = "address_book:entries"

    def __init__(self, connection_string: Optional[str] = None, key: str = DEFAULT_KEY, client: Optional[redis.Redis] = None):
        if client is None:
            if not connection_string:
                raise ValueError("Redis connection string is required when no client is given.")
            client = redis.Redis.from_url(connection_string, decode_responses=True)
        self.client = client
        self.key = key
        self.order_key = f"{key}:order"
        self.log = structlog.get_logger(__name__).bind(repository=self.__class__.__name__, key=key)

    def add_address(self, entry: AddressBookEntry) -> None:
        entry_id = entry.entry_id
        value = json.dumps(entry.to_dict(), ensure_ascii=False)
        # HSETNX keeps the first copy of an identical entry.
        created = self.client.hsetnx(self.key, entry_id, value)
        if not created:
            self.log.info("Entry already in address book, skipping", entry_id=entry_id)
            return
        self.client.rpush(self.order_key, entry_id)
        address_book_entries_added_total.inc()
        self.log.info("Entry added to address book", entry_id=entry_id)

    def remove_address(self, entry_id: str) -> None:
        removed = self.client.hdel(self.key, entry_id)
        self.client.lrem(self.order_key, 0, entry_id)
        if removed:
            self.log.info("Entry removed from address book", entry_id=entry_id)
        else:
            self.log.debug("Entry not in address book", entry_id=entry_id)

    def list_addresses(self) -> List[AddressBookEntry]:
        entry_ids = self.client.lrange(self.order_key, 0, -1)
        if not entry_ids:
            return []
        entries = []
        for entry_id, value in zip(entry_ids, self.client.hmget(self.key, entry_ids)):
            if value is None:
                self.log.warning("Ordered entry id has no stored record", entry_id=entry_id)
                continue
            try:
                entries.append(AddressBookEntry.from_dict(json.loads(value)))
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                self.log.error("Skipping unreadable address book entry", entry_id=entry_id, error=str(e))
        return entries
