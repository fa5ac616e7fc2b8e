from botocore.exceptions import BotoCoreError, ClientError
import logging
import os
import tempfile
from uuid import uuid4
from pathlib import Path
from typing import Optional
from booking_core.utils.custom_exceptions import PersistenceError

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
else:
    Table = object


logger = logging.getLogger(__name__)


class FileSnapshotStorage:
    """Keeps each collection as ``<name>.json`` inside one directory."""

    def __init__(self, directory: str | os.PathLike = "."):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def read(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as err:
            logger.error(f"Error reading snapshot {path}: {err}")
            raise PersistenceError(f"could not read {path}") from err

    def write(self, name: str, payload: str):
        path = self._path(name)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{name}-", suffix=".tmp", dir=self.directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except OSError as err:
            logger.error(f"Error writing snapshot {path}: {err}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"could not write {path}") from err


class DynamoSnapshotStorage:
    """Keeps each collection in a DynamoDB table, split into parts.

    A snapshot is a head item (``sk = "DETAILS"``) naming a generation and a
    part count, plus ``PART#<generation>#<n>`` items holding the payload.
    The head is written last, so readers never see a half-written generation.
    """

    # characters per part; DynamoDB caps an item at 400 KB
    PART_SIZE = 90_000

    def __init__(self, table: Table):
        self.table = table

    @staticmethod
    def _head_key(name: str) -> dict:
        return {"pk": f"SNAPSHOT#{name}", "sk": "DETAILS"}

    @staticmethod
    def _part_key(name: str, generation: str, index: int) -> dict:
        return {"pk": f"SNAPSHOT#{name}", "sk": f"PART#{generation}#{index:05d}"}

    def _get(self, key: dict) -> Optional[dict]:
        response = self.table.get_item(Key=key, ConsistentRead=True)
        return response.get("Item")

    def read(self, name: str) -> Optional[str]:
        try:
            head = self._get(self._head_key(name))
            if not head:
                return None
            parts = []
            for index in range(int(head["parts"])):
                part = self._get(self._part_key(name, head["generation"], index))
                if not part:
                    raise PersistenceError(f"snapshot {name} is missing part {index}")
                parts.append(part["payload"])
        except (BotoCoreError, ClientError, KeyError) as err:
            logger.error(f"Error retrieving snapshot {name}: {err}")
            raise PersistenceError(f"could not read snapshot {name}") from err
        return "".join(parts)

    def write(self, name: str, payload: str):
        generation = uuid4().hex
        chunks = [
            payload[i : i + self.PART_SIZE]
            for i in range(0, len(payload), self.PART_SIZE)
        ] or [""]
        try:
            previous = self._get(self._head_key(name))
            for index, chunk in enumerate(chunks):
                self.table.put_item(
                    Item={**self._part_key(name, generation, index), "payload": chunk}
                )
            self.table.put_item(
                Item={
                    **self._head_key(name),
                    "generation": generation,
                    "parts": len(chunks),
                }
            )
        except (BotoCoreError, ClientError) as err:
            logger.error(f"Error saving snapshot {name}: {err}")
            raise PersistenceError(f"could not write snapshot {name}") from err

        if previous and "generation" in previous:
            self._drop_generation(name, previous["generation"], int(previous["parts"]))

    def _drop_generation(self, name: str, generation: str, parts: int):
        try:
            for index in range(parts):
                self.table.delete_item(Key=self._part_key(name, generation, index))
        except (BotoCoreError, ClientError) as err:
            # the new head is already in place; stale parts are only clutter
            logger.warning(f"Could not remove old parts of snapshot {name}: {err}")
