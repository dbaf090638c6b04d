import json
from pathlib import Path
from typing import Any, List

from schemas import RelativeCreate

CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "relatives.json"


def load_json(path: str) -> Any:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_relative_catalog(path: str = str(CATALOG_PATH)) -> List[RelativeCreate]:
    return [RelativeCreate.model_validate(row) for row in load_json(path)]
