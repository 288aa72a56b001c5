import io
import json
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from ._encode_query_string import stringify_scalar

FileContent = Union[bytes, io.IOBase]


def is_binary(value: Any) -> bool:
    """Whether ``value`` should be uploaded as a file part."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return True
    return isinstance(value, io.IOBase) and not isinstance(value, io.TextIOBase)


class FormData:
    """An ordered multipart form body.

    Every part is kept as an httpx ``files`` entry. Plain fields use a
    ``None`` file name, which httpx renders as a regular form field, so the
    body is always sent as ``multipart/form-data``.
    """

    def __init__(self) -> None:
        self._parts: List[Tuple[str, Tuple[Optional[str], Any]]] = []

    def append(
        self,
        name: str,
        value: Union[str, FileContent],
        filename: Optional[str] = None,
    ) -> None:
        if isinstance(value, str):
            self._parts.append((name, (None, value.encode("utf-8"))))
            return

        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        self._parts.append((name, (filename or name, value)))

    def get(self, name: str) -> Optional[Union[str, FileContent]]:
        """Return the first value appended under ``name``."""
        for part_name, (filename, content) in self._parts:
            if part_name != name:
                continue
            if filename is None:
                return content.decode("utf-8")
            return content
        return None

    def keys(self) -> List[str]:
        return [name for name, _ in self._parts]

    @property
    def files(self) -> List[Tuple[str, Tuple[Optional[str], Any]]]:
        return list(self._parts)

    def __contains__(self, name: object) -> bool:
        return name in self.keys()

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)


def _filename_for(key: str, value: Any) -> str:
    name = getattr(value, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name
    return key


def encode_form_data(params: Mapping[str, Any]) -> FormData:
    """Encode parameters into a multipart ``FormData`` body.

    Binary values (bytes or binary file objects) become file parts. Lists,
    sets and mappings are sent as JSON, everything else as its string form.
    ``None`` values are skipped.
    """
    form = FormData()
    for key, value in params.items():
        if value is None:
            continue
        if is_binary(value):
            form.append(key, value, filename=_filename_for(key, value))
        elif isinstance(value, (set, frozenset)):
            form.append(key, json.dumps(list(value)))
        elif isinstance(value, (Mapping, list, tuple)):
            form.append(key, json.dumps(value))
        else:
            form.append(key, stringify_scalar(value))
    return form
