from depinsight.core.containers import build_checker_registry

ALL_MANIFESTS = ["package.json", "composer.json", "pyproject.toml", "pom.xml"]


def test_empty_directory_selects_nothing(tmp_path):
    assert build_checker_registry().select_applicable(tmp_path) == []


def test_missing_directory_selects_nothing(tmp_path):
    assert build_checker_registry().select_applicable(tmp_path / "nope") == []


def test_selects_by_manifest(tmp_path):
    (tmp_path / "pom.xml").write_text("<project/>")

    selected = build_checker_registry().select_applicable(tmp_path)

    assert [c.name for c in selected] == ["Maven Dependency Analyzer"]


def test_all_manifests_select_all_in_registration_order(tmp_path):
    for name in reversed(ALL_MANIFESTS):
        (tmp_path / name).write_text("")

    selected = build_checker_registry().select_applicable(tmp_path)

    assert [c.manifest_file for c in selected] == ALL_MANIFESTS


def test_list_and_get():
    reg = build_checker_registry()
    assert reg.list() == ["Knip", "Composer Unused", "FawltyDeps", "Maven Dependency Analyzer"]
    assert reg.get("FawltyDeps").manifest_file == "pyproject.toml"
    assert reg.get("nonexistent") is None
