"""
File-backed document store.

The whole service state lives in one JSON document. Writers go through
`DocumentStore.transaction()`, which holds the store lock across
load -> mutate -> save so concurrent requests cannot lose each other's
updates. Saves write a temp file and `os.replace` it over the target, so
readers always see a complete document.
"""
import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError as PydanticValidationError

from userboard.core.exceptions import StorageUnavailable
from userboard.models.document import Document

logger = logging.getLogger("userboard.store")

# Mode for a newly created document
DEFAULT_FILE_MODE = 0o644


class DocumentStore:
    """Loads and saves the service document at `path`."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        # Re-entrant so a transaction can call save() and load() internally
        self._lock = threading.RLock()

    def exists(self) -> bool:
        """
        Whether the document file is present on disk.

        Raises:
            StorageUnavailable: If the path cannot be checked (e.g. permissions)
        """
        try:
            return self.path.exists()
        except OSError as e:
            logger.error(f"Failed to check document {self.path}: {e}")
            raise StorageUnavailable(f"Could not access data store: {e}") from e

    def load(self) -> Document:
        """
        Read the document from disk.

        Creates and persists an empty document on first access.

        Raises:
            StorageUnavailable: If the file cannot be read, is not valid
                JSON, or does not match the document schema
        """
        if not self.exists():
            with self._lock:
                # Re-check: another thread may have created it meanwhile
                if not self.exists():
                    document = Document()
                    self.save(document)
                    logger.info(f"Created empty document at {self.path}")
                    return document
        return self._read()

    def save(self, document: Document) -> None:
        """
        Atomically replace the document on disk.

        Raises:
            StorageUnavailable: If any part of the write fails; the previous
                document is left in place
        """
        payload = document.model_dump_json(by_alias=True, indent=2)
        with self._lock:
            tmp_name = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.path.parent,
                    prefix=f".{self.path.name}.",
                    suffix=".tmp",
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                # mkstemp creates 0600; keep the mode the document already had
                os.chmod(tmp_name, self._target_mode())
                os.replace(tmp_name, self.path)
            except OSError as e:
                if tmp_name is not None and os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                logger.error(f"Failed to write document {self.path}: {e}")
                raise StorageUnavailable(f"Could not write data store: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """
        Load the document, yield it for mutation, then save it.

        The store lock is held for the whole block. If the block raises,
        nothing is written and the exception propagates.
        """
        with self._lock:
            document = self.load()
            yield document
            self.save(document)

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def _read(self) -> Document:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            logger.error(f"Failed to read document {self.path}: {e}")
            raise StorageUnavailable(f"Could not read data store: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Document {self.path} is not valid JSON: {e}")
            raise StorageUnavailable(f"Data store is corrupt: {e}") from e

        try:
            return Document.model_validate(raw)
        except PydanticValidationError as e:
            logger.error(f"Document {self.path} failed validation: {e}")
            raise StorageUnavailable(
                f"Data store is corrupt: {e.error_count()} invalid field(s)"
            ) from e
