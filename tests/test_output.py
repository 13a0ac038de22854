import json

from scriptsifter.models import AnalysisResult, SecretFinding
from scriptsifter.output import JSONExporter, build_text_report

RESULT = AnalysisResult(
    secrets=(SecretFinding.of("s3cr3t-Value-1234"), SecretFinding.of("s3cr3t-Value-1234")),
    urls=("https://a.com/x",),
    domains=("a.com", "cdn.a.com"),
    paths=(),
)


def test_text_report_layout():
    assert build_text_report(RESULT) == (
        "Secrets (2):\n"
        "1. s3cr3t-Value-1234\n"
        "2. s3cr3t-Value-1234\n"
        "\n"
        "URLs (1):\n"
        "1. https://a.com/x\n"
        "\n"
        "Domains (2):\n"
        "1. a.com\n"
        "2. cdn.a.com\n"
        "\n"
        "Paths (0):\n"
    )


def test_text_report_of_empty_result():
    assert build_text_report(AnalysisResult()) == (
        "Secrets (0):\n\nURLs (0):\n\nDomains (0):\n\nPaths (0):\n"
    )


def test_text_report_is_deterministic():
    assert build_text_report(RESULT) == build_text_report(RESULT)


def test_json_export_fields():
    data = json.loads(JSONExporter().to_json(RESULT))
    assert data == {
        "secrets": [
            {"value": "s3cr3t-Value-1234", "length": 17},
            {"value": "s3cr3t-Value-1234", "length": 17},
        ],
        "urls": ["https://a.com/x"],
        "domains": ["a.com", "cdn.a.com"],
        "paths": [],
    }


def test_json_export_to_file(tmp_path):
    exporter = JSONExporter()
    path = exporter.export(RESULT, str(tmp_path / "nested" / "scan-results.json"))
    assert exporter.load(path) == RESULT
