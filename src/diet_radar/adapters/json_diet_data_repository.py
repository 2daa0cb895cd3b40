"""JSON file repository for diet nutrient data."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from diet_radar.domain.chart import SimilarityPoint
from diet_radar.domain.diets import NutrientRecord
from diet_radar.services.chart import DietDataRepository

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DEFAULT_DIET_DATA_PATH = DATA_DIR / "diet_data.json"
DEFAULT_SIMILARITY_PATH = DATA_DIR / "similarity.json"

_logger = logging.getLogger(__name__)


@dataclass
class JsonDietDataRepository(DietDataRepository):
    """Reads diet records and similarity scores from JSON files."""

    diet_data_path: Path = DEFAULT_DIET_DATA_PATH
    similarity_path: Path = DEFAULT_SIMILARITY_PATH

    @classmethod
    def create(
        cls, diet_data_path: str | None = None, similarity_path: str | None = None
    ) -> "JsonDietDataRepository":
        """Create a repository, falling back to the bundled sample files."""
        return cls(
            diet_data_path=(
                Path(diet_data_path) if diet_data_path else DEFAULT_DIET_DATA_PATH
            ),
            similarity_path=(
                Path(similarity_path) if similarity_path else DEFAULT_SIMILARITY_PATH
            ),
        )

    def load_diets(self) -> dict[str, NutrientRecord]:
        """Return the raw nutrient record for each diet in the file."""
        payload = _read_json(self.diet_data_path)
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Diet data must be a JSON object: {self.diet_data_path}"
            )
        diets = {
            str(diet): record
            for diet, record in payload.items()
            if isinstance(record, dict)
        }
        _logger.info(
            "Loaded diet dataset: path=%s diets=%s", self.diet_data_path, len(diets)
        )
        return diets

    def load_similarity(self) -> list[SimilarityPoint]:
        """Return similarity scores listed in the file."""
        payload = _read_json(self.similarity_path)
        if not isinstance(payload, list):
            raise RuntimeError(
                f"Similarity data must be a JSON array: {self.similarity_path}"
            )
        return [
            SimilarityPoint(name=str(item["name"]), value=float(item["value"]))
            for item in payload
            if isinstance(item, dict) and "name" in item and "value" in item
        ]


def _read_json(path: Path) -> object:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)
