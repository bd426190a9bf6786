import importlib
import json
import uuid
from pathlib import Path

import pytest

from json_schema_to_model.pipeline import PipelineGenerator

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def offers_schema_path():
    return TEST_DATA / "schemas" / "offers.schema.json"


@pytest.fixture
def offers_schema(offers_schema_path):
    with open(offers_schema_path) as f:
        return json.load(f)


@pytest.fixture
def generated_package(tmp_path, monkeypatch):
    """Generate a schema into a uniquely named package under tmp_path and import it."""

    def _generate(schema, config=None):
        package_name = f"models_{uuid.uuid4().hex[:12]}"
        generator = PipelineGenerator(schema, config)
        result = generator.generate()
        assert result.ok, [str(e) for e in result.failures]
        generator.write(result, tmp_path / package_name)
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        return importlib.import_module(package_name)

    return _generate
