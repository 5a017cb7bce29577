from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


class SettingsFlatError(Exception):
    """Base class for conversion failures."""


class FlattenError(SettingsFlatError):
    pass


class DuplicateKeyError(FlattenError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate key '{key}' produced while flattening; refusing to overwrite it")
        self.key = key


class DocumentError(SettingsFlatError):
    def __init__(self, path: Optional[Path], message: str) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{message}")
        self.path = path


class OutputExistsError(SettingsFlatError):
    def __init__(self, path: Path) -> None:
        super().__init__(f'file "{path}" already exists')
        self.path = path


class OutputWriteError(SettingsFlatError):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f'unable to write "{path}": {message}')
        self.path = path


class JsonNumber(str):
    """A JSON number kept as the literal text it had in the source document."""


class JsonObject(list):
    """Ordered (name, value) pairs of a JSON object, duplicate names included."""


@dataclass
class ConvertOptions:
    input_path: Path
    output_path: Optional[Path] = None
    output_type: str = "console"
    output_format: str = "azure"
    overwrite: bool = False
    slot_setting: bool = False


@dataclass(frozen=True)
class FlatEntry:
    key: str
    value: str


@dataclass
class SettingRecord:
    name: str
    value: str
    slot_setting: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # camelCase is what the app-service bulk editor expects
        return {"name": self.name, "value": self.value, "slotSetting": self.slot_setting}


class FlatMapping:
    """Insertion-ordered key/value entries with unique keys."""

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}

    def add(self, key: str, value: str) -> None:
        if key in self._entries:
            raise DuplicateKeyError(key)
        self._entries[key] = value

    def entries(self) -> List[FlatEntry]:
        return [FlatEntry(k, v) for k, v in self._entries.items()]

    def as_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[FlatEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FlatMapping({self._entries!r})"
