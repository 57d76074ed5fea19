from pathlib import Path

import pytest

from depinsight.analyzers.base import DependencyChecker
from depinsight.analyzers.registry import CheckerRegistry
from depinsight.deducers.package_json import PackageJsonDeducer
from depinsight.domain.errors import NoSupportedProjectError, ToolConfigurationError
from depinsight.domain.models import DependencyCategory, DependencyStatus, Finding
from depinsight.services.analysis_service import AnalysisService

from helpers import failing_run, fake_run


class FakeChecker(DependencyChecker):
    command = "fake"
    install_url = "https://example.invalid/install"
    docs_url = "https://example.invalid/docs"

    def __init__(self, name: str, manifest_file: str, run_fn, help_text: str = ""):
        super().__init__(PackageJsonDeducer(), run_fn)
        self.name = name
        self.manifest_file = manifest_file
        self.help_text = help_text

    def default_run(self, project_root: Path) -> str:
        raise AssertionError("the real tool must not run in tests")

    def parse_output(self, output: str, project_root: Path) -> list[Finding]:
        return [
            Finding(
                status=DependencyStatus.UNUSED,
                category=DependencyCategory.UNKNOWN,
                dependency_name=name,
                source_file=self.manifest_file,
            )
            for name in output.split()
        ]


def test_no_supported_project(tmp_path):
    service = AnalysisService(CheckerRegistry([FakeChecker("a", "a.json", fake_run(""))]))

    with pytest.raises(NoSupportedProjectError, match="supported project type"):
        service.run(tmp_path)


def test_concatenates_in_registration_order(tmp_path):
    for m in ("a.json", "b.json", "c.json"):
        (tmp_path / m).write_text("")
    registry = CheckerRegistry(
        [
            FakeChecker("a", "a.json", fake_run("x y"), help_text="[A]"),
            FakeChecker("skipped", "missing.json", fake_run("never")),
            FakeChecker("b", "b.json", fake_run(""), help_text="[B]"),
            FakeChecker("c", "c.json", fake_run("z"), help_text="[C]"),
        ]
    )

    report = AnalysisService(registry).run(tmp_path)

    assert [(f.dependency_name, f.source_file) for f in report.findings] == [
        ("x", "a.json"),
        ("y", "a.json"),
        ("z", "c.json"),
    ]
    assert report.help_text == "[A][B][C]"
    assert report.failed is True
    assert report.summary()["total"] == 3
    assert report.summary()["by_status"] == {"UNUSED": 3, "UNDECLARED": 0}


def test_clean_project_is_not_failed(tmp_path):
    (tmp_path / "a.json").write_text("")
    report = AnalysisService(CheckerRegistry([FakeChecker("a", "a.json", fake_run(""))])).run(tmp_path)

    assert report.findings == []
    assert report.failed is False


def test_tool_error_propagates_and_stops(tmp_path):
    (tmp_path / "a.json").write_text("")
    (tmp_path / "b.json").write_text("")
    ran = []

    def record(project_root):
        ran.append("b")
        return ""

    registry = CheckerRegistry(
        [
            FakeChecker("a", "a.json", failing_run(RuntimeError("boom"))),
            FakeChecker("b", "b.json", record),
        ]
    )

    with pytest.raises(ToolConfigurationError):
        AnalysisService(registry).run(tmp_path)
    assert ran == []
