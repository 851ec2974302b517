"""
Glue between the obfuscation core and a record store.

The store only has to look records up by integer ID. ObfuscatedRepository
wraps it so callers hand in public tokens (or raw IDs, where allowed) and
get records back, and so records can be turned into tokens for URLs.
"""
import threading
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Union

from config import logger
from core_logic import Identifier, deobfuscate_id, resolve
from encoding import Permutation, encode
from errors import RecordNotFoundError
from models import TypeConfig


class RecordStore(Protocol):
    """Lookup primitive the repository delegates to."""

    def get(self, record_id: int) -> Any:
        ...

    def get_many(self, record_ids: Sequence[int]) -> List[Any]:
        ...


class InMemoryRecordStore:
    """Dict-backed store keyed by each record's integer ``id`` attribute."""

    def __init__(self, type_name: str, records: Optional[Iterable[Any]] = None):
        self.type_name = type_name
        self._records: Dict[int, Any] = {}
        self._lock = threading.Lock()
        for record in records or ():
            self.add(record)

    def add(self, record: Any) -> Any:
        with self._lock:
            self._records[record.id] = record
        return record

    def get(self, record_id: int) -> Any:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"Couldn't find {self.type_name} with ID={record_id}")
        return record

    def get_many(self, record_ids: Sequence[int]) -> List[Any]:
        missing = [i for i in record_ids if i not in self._records]
        if missing:
            raise RecordNotFoundError(
                f"Couldn't find all {self.type_name} with IDs {list(record_ids)} (missing {missing})"
            )
        return [self._records[i] for i in record_ids]

    def __len__(self) -> int:
        return len(self._records)


class ObfuscatedRepository:
    """A store whose public identifiers are tokens of one configured type."""

    def __init__(self, config: TypeConfig, store: RecordStore, permutation: Optional[Permutation] = None):
        self.config = config
        self.store = store
        self.permutation = permutation

    def to_param(self, record: Any) -> str:
        """Public token for a record, suitable for URLs."""
        return encode(record.id, self.config.prefix, self.config.spin, self.permutation)

    def deobfuscate_id(self, value: Identifier) -> int:
        return deobfuscate_id(value, self.config, self.permutation)

    def find(self, value: Union[Identifier, Sequence[Identifier]]) -> Union[Any, List[Any]]:
        """
        Finds one record, or a list of records in input order.

        Raises:
            RecordNotFoundError: unknown IDs, or raw IDs under silent enforcement.
            NonObfuscatedIdError: raw IDs when the type raises on violations.
        """
        resolved = resolve(value, self.config, self.permutation)
        if isinstance(resolved, list):
            if not resolved:
                return []
            return self.store.get_many(resolved)
        try:
            return self.store.get(resolved)
        except RecordNotFoundError:
            logger.debug(f"No {self.config.type_name} for resolved ID {resolved}")
            raise
