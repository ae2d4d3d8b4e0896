"""
JSON array persistence adapter.

A RecordStore is a handle on one file holding a JSON array. Every operation
reads or rewrites the whole array; services do their own scanning in memory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Type, TypeVar
import json
import logging
import os
import stat
import tempfile

from pydantic import ValidationError as SchemaError

from edu.domain.models import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class StoreError(Exception):
    """Base class for store failures (filesystem or content)."""

    def __init__(self, path: Path | str, detail: str):
        super().__init__(f"{path}: {detail}")
        self.path = Path(path)
        self.detail = detail


class ParseError(StoreError):
    """The store file does not hold a valid JSON array of records."""


class RecordStore:
    """Load/save a JSON array of records at a fixed path."""

    def __init__(self, path: Path | str, *, indent: Optional[int] = None) -> None:
        self.path = Path(path)
        self.indent = indent

    def __repr__(self) -> str:
        return f"RecordStore({str(self.path)!r})"

    # -------------------------------------- raw --------------------------------------
    def ensure_store_exists(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreError(self.path, f"cannot create store ({exc.strerror or exc})") from exc
        logger.debug("created empty store %s", self.path)

    def load_all(self) -> list[dict[str, Any]]:
        self.ensure_store_exists()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(self.path, f"cannot read store ({exc.strerror or exc})") from exc
        except UnicodeDecodeError as exc:
            raise ParseError(self.path, f"not valid UTF-8 at byte {exc.start}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(self.path, f"invalid JSON at line {exc.lineno} column {exc.colno}") from exc
        if not isinstance(data, list):
            raise ParseError(self.path, f"expected a JSON array, found {type(data).__name__}")
        return data

    def save_all(self, records: Sequence[Any]) -> None:
        self.ensure_store_exists()
        payload = json.dumps(list(records), ensure_ascii=False, indent=self.indent)
        # Write next to the target then rename, so readers never see a partial file.
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # mkstemp creates 0600; keep the mode the store already had.
            os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
            raise StoreError(self.path, f"cannot write store ({exc.strerror or exc})") from exc
        logger.debug("wrote %d record(s) to %s", len(records), self.path)

    # -------------------------------------- typed --------------------------------------
    def load_models(self, model: Type[R]) -> list[R]:
        items: list[R] = []
        for index, raw in enumerate(self.load_all()):
            try:
                items.append(model.model_validate(raw))
            except SchemaError as exc:
                problems = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}" for err in exc.errors()
                )
                raise ParseError(self.path, f"malformed {model.__name__.lower()} at index {index} ({problems})") from exc
        return items

    def save_models(self, items: Iterable[Record]) -> None:
        self.save_all([item.to_dict() for item in items])
