import hashlib
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional

from advisorcomply.models.validation import ComplianceValidation

logger = logging.getLogger("advisorcomply.storage")

ValidationUpdate = Callable[[ComplianceValidation], ComplianceValidation]


def compute_record_hash(record: dict) -> str:
    """
    SHA-256 over the canonical JSON form of a serialized validation.
    """
    serialized = json.dumps(record, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


class ValidationStore(ABC):
    """
    Persistence boundary for validation records. The engine never writes;
    callers decide what and when to store.
    """

    @abstractmethod
    def get(self, validation_id: str) -> Optional[ComplianceValidation]:
        pass

    @abstractmethod
    def put(self, validation: ComplianceValidation) -> None:
        pass

    @abstractmethod
    def update(self, validation_id: str, fn: ValidationUpdate) -> Optional[ComplianceValidation]:
        """
        Read, transform and write back one record as a single step.

        Returns the stored result, or None when the record does not exist.
        Exceptions raised by `fn` propagate and leave the record unchanged.
        """
        pass


class InMemoryValidationStore(ValidationStore):

    def __init__(self):
        self._records: Dict[str, ComplianceValidation] = {}
        self._lock = threading.Lock()

    def get(self, validation_id: str) -> Optional[ComplianceValidation]:
        with self._lock:
            return self._records.get(validation_id)

    def put(self, validation: ComplianceValidation) -> None:
        with self._lock:
            self._records[validation.id] = validation

    def update(self, validation_id: str, fn: ValidationUpdate) -> Optional[ComplianceValidation]:
        with self._lock:
            current = self._records.get(validation_id)
            if current is None:
                return None

            updated = fn(current)
            self._records[validation_id] = updated
            return updated


class FileValidationStore(ValidationStore):
    """
    One JSON document per validation, sealed with a record hash that is
    verified on every read.

    Writes are serialized per store instance; run one instance per directory.
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _path(self, validation_id: str) -> Path:
        if not validation_id or "/" in validation_id or "\\" in validation_id or validation_id.startswith("."):
            raise ValueError(f"Invalid validation id: {validation_id!r}")
        return self.directory / f"{validation_id}.json"

    def get(self, validation_id: str) -> Optional[ComplianceValidation]:
        path = self._path(validation_id)
        if not path.exists():
            return None

        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)

        record = document.get("validation", {})
        expected = compute_record_hash(record)
        if document.get("record_hash") != expected:
            logger.error(f"Record hash mismatch for validation {validation_id}")
            raise ValueError("Validation record hash mismatch")

        return ComplianceValidation.from_dict(record)

    def _write(self, validation: ComplianceValidation) -> None:
        record = validation.to_dict()
        document = {
            "record_hash": compute_record_hash(record),
            "validation": record,
        }

        path = self._path(validation.id)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.directory,
            prefix=f"{validation.id}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = f.name
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)

        logger.info(f"Stored validation {validation.id} ({validation.status.value})")

    def put(self, validation: ComplianceValidation) -> None:
        with self._lock:
            self._write(validation)

    def update(self, validation_id: str, fn: ValidationUpdate) -> Optional[ComplianceValidation]:
        with self._lock:
            current = self.get(validation_id)
            if current is None:
                return None

            updated = fn(current)
            self._write(updated)
            return updated


def build_store(directory: Optional[str]) -> ValidationStore:
    if directory:
        return FileValidationStore(directory)
    return InMemoryValidationStore()
