import json
import os
from pathlib import Path
from typing import Any, Dict
from uuid import uuid4

from nexus_studio.domain.exceptions import StorageError


class UserConfigStore:
    """Settings 菜单使用的 JSON 键值存储（默认 ~/.nexus-studio/config.json）。"""

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(code="STORE_READ_ERROR", message=str(e), path=str(self._path))
        if not isinstance(data, dict):
            raise StorageError(code="STORE_READ_ERROR", message="config blob is not an object", path=str(self._path))
        return data

    def set(self, key: str, value: Any) -> Dict[str, Any]:
        data = self.load()
        data[key] = value
        self.save(data)
        return data

    def reset(self) -> None:
        if self._path.exists():
            try:
                self._path.unlink()
            except OSError as e:
                raise StorageError(code="STORE_DELETE_ERROR", message=str(e), path=str(self._path))

    def save(self, data: Dict[str, Any]) -> None:
        tmp_path = self._path.parent / f"{self._path.name}.{uuid4().hex}.tmp"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(code="STORE_WRITE_ERROR", message=str(e), path=str(self._path))
