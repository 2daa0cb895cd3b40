"""Tests for the JSON diet data repository."""

import json
from pathlib import Path

import pytest

from diet_radar.adapters.json_diet_data_repository import JsonDietDataRepository
from diet_radar.domain.diets import DIETS
from diet_radar.domain.metrics import METRICS
from diet_radar.services.normalization import raw_value


def test_bundled_dataset_covers_every_diet_and_metric() -> None:
    repository = JsonDietDataRepository.create()

    diets = repository.load_diets()

    assert set(diets) == set(DIETS)
    for record in diets.values():
        for metric in METRICS:
            assert raw_value(record, metric) is not None


def test_bundled_similarity_scores() -> None:
    points = JsonDietDataRepository.create().load_similarity()

    assert len(points) == 7
    assert points[0].name == "Balanced Omnivore"
    assert points[0].value == pytest.approx(0.92)


def test_custom_paths(tmp_path: Path) -> None:
    diet_path = tmp_path / "diets.json"
    diet_path.write_text(json.dumps({"vegan": {"fiber": 50}, "bad": 3}))
    similarity_path = tmp_path / "similarity.json"
    similarity_path.write_text(json.dumps([{"name": "Vegan", "value": 1}, {}]))

    repository = JsonDietDataRepository.create(str(diet_path), str(similarity_path))

    assert repository.load_diets() == {"vegan": {"fiber": 50}}
    assert [point.name for point in repository.load_similarity()] == ["Vegan"]


def test_malformed_dataset_raises(tmp_path: Path) -> None:
    diet_path = tmp_path / "diets.json"
    diet_path.write_text("[1, 2, 3]")

    repository = JsonDietDataRepository.create(str(diet_path))

    with pytest.raises(RuntimeError):
        repository.load_diets()


def test_missing_dataset_file_raises(tmp_path: Path) -> None:
    repository = JsonDietDataRepository.create(str(tmp_path / "missing.json"))

    with pytest.raises(FileNotFoundError):
        repository.load_diets()
