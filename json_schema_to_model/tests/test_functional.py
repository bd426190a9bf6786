"""
Functional tests for the pipeline generator.

Each case in test_data/functional/*_tests.json generates a schema and checks
the source of one class for expected and unexpected patterns.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_model.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict, class_name):
    """Helper to generate the source of one class with given schema and config."""
    config = CodeGeneratorConfig.from_dict(config_dict or {})
    result = PipelineGenerator(schema, config).generate()
    assert result.ok, [str(e) for e in result.failures]
    return result.files[f"{class_name}.py"]


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda case: case["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    name = test_case["name"]
    source_file = test_case.get("_source_file", "unknown")

    generated_code = _generate_code(test_case["schema"], test_case.get("config"), test_case["class_name"])

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"{name} ({source_file}): expected pattern {pattern!r} not found"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"{name} ({source_file}): unexpected pattern {pattern!r} found"


if __name__ == "__main__":
    pytest.main([__file__])
