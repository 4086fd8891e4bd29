# src/blades/core/registry.py

import logging
from typing import Iterable, List
from src.blades.core.interfaces import CharacterRegistry
from src.blades.models import Character, Crew

logger = logging.getLogger(__name__)

class InMemoryRegistry(CharacterRegistry):
    """
    Dictionary-backed registry of characters and crews.
    The host owns and mutates the records; lookups always return the live object.
    """
    def __init__(self, records: Iterable[Character | Crew] = ()):
        self._records: dict[str, Character | Crew] = {}
        for record in records:
            self.add(record)

    def add(self, record: Character | Crew) -> None:
        if record.id in self._records:
            logger.warning(f"Replacing registry record {record.id}")
        self._records[record.id] = record

    def lookup(self, entity_id: str) -> Character | Crew | None:
        return self._records.get(entity_id)

    def characters(self) -> List[Character]:
        return [r for r in self._records.values() if isinstance(r, Character)]
