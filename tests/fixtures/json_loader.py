import copy
import json
from pathlib import Path
from typing import Any, Dict

DATA_FILE = Path(__file__).with_name("test_data.json")


class AccountDataLoader:
    """Named request payloads and expected bodies from test_data.json"""

    def __init__(self, path: Path = DATA_FILE):
        self._data: Dict[str, Dict[str, Any]] = json.loads(path.read_text())

    def payload(self, name: str, **overrides: Any) -> Dict[str, Any]:
        """Fresh copy of a named entry with overrides applied"""
        data = copy.deepcopy(self._data[name])
        data.update(overrides)
        return data
