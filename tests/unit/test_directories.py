"""Unit tests for directories module."""

import pytest

from tfdocs_action.directories import (
    DirectoryResolutionError,
    find_terraform_directories,
    parse_atlantis_file,
    resolve_directories,
    split_working_dirs,
)
from tfdocs_action.inputs import ActionInputs

ATLANTIS_YAML = """\
version: 3
projects:
  - name: network
    dir: modules/network
  - name: root
    dir: .
  - name: storage
    dir: modules/storage
"""


class TestSplitWorkingDirs:
    """Explicit comma separated directories."""

    def test_order_is_preserved(self):
        assert split_working_dirs("a,b,c") == ["a", "b", "c"]

    def test_single_directory(self):
        assert split_working_dirs(".") == ["."]

    def test_empty_segments_are_dropped(self):
        assert split_working_dirs(",a,,b,") == ["a", "b"]

    def test_whitespace_is_trimmed(self):
        assert split_working_dirs("a, b ,c") == ["a", "b", "c"]

    def test_only_commas(self):
        assert split_working_dirs(",,") == []


class TestParseAtlantisFile:
    """Atlantis project file parsing."""

    def test_project_dirs_in_file_order(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text(ATLANTIS_YAML)
        assert parse_atlantis_file(path) == ["modules/network", ".", "modules/storage"]

    def test_leading_list_marker_is_stripped(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("projects:\n  - dir: '- modules/network'\n")
        assert parse_atlantis_file(path) == ["modules/network"]

    def test_projects_without_dir_are_skipped(self, workspace, caplog):
        path = workspace / "atlantis.yaml"
        path.write_text("projects:\n  - name: a\n  - dir: b\n")

        with caplog.at_level("WARNING"):
            assert parse_atlantis_file(path) == ["b"]

        assert "without a dir" in caplog.text

    def test_empty_file(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("")
        assert parse_atlantis_file(path) == []

    def test_no_projects(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("version: 3\n")
        assert parse_atlantis_file(path) == []

    def test_invalid_yaml(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("projects: [\n")
        with pytest.raises(DirectoryResolutionError, match="Invalid YAML"):
            parse_atlantis_file(path)

    def test_projects_must_be_a_list(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("projects:\n  dir: a\n")
        with pytest.raises(DirectoryResolutionError, match="must be a list"):
            parse_atlantis_file(path)

    def test_top_level_must_be_a_mapping(self, workspace):
        path = workspace / "atlantis.yaml"
        path.write_text("- dir: a\n")
        with pytest.raises(DirectoryResolutionError, match="must be a mapping"):
            parse_atlantis_file(path)


class TestFindTerraformDirectories:
    """Recursive *.tf search."""

    def test_finds_module_directories(self, module_tree):
        assert find_terraform_directories(".", base=module_tree) == [
            ".",
            "./modules/network",
            "./modules/storage",
        ]

    def test_directory_with_many_tf_files_appears_once(self, module_tree):
        found = find_terraform_directories("modules", base=module_tree)
        assert found == ["modules/network", "modules/storage"]
        assert len(found) == len(set(found))

    def test_ignores_non_terraform_files(self, module_tree):
        found = find_terraform_directories(".", base=module_tree)
        assert "./docs" not in found

    def test_missing_directory(self, workspace, caplog):
        with caplog.at_level("WARNING"):
            assert find_terraform_directories("nope", base=workspace) == []
        assert "does not exist" in caplog.text

    def test_tfvars_do_not_count(self, workspace):
        (workspace / "env").mkdir()
        (workspace / "env" / "prod.tfvars").write_text('name = "x"\n')
        assert find_terraform_directories(".", base=workspace) == []


class TestResolveDirectories:
    """Strategy priority: Atlantis, then find, then explicit."""

    def test_explicit_is_the_fallback(self, module_tree):
        inputs = ActionInputs(working_dir="modules/network,modules/storage")
        assert resolve_directories(inputs, module_tree) == ["modules/network", "modules/storage"]

    def test_find_beats_explicit(self, module_tree):
        inputs = ActionInputs(working_dir="ignored", find_dir="modules")
        assert resolve_directories(inputs, module_tree) == ["modules/network", "modules/storage"]

    def test_atlantis_beats_find_and_explicit(self, module_tree):
        (module_tree / "atlantis.yaml").write_text("projects:\n  - dir: modules/storage\n")
        inputs = ActionInputs(
            working_dir="ignored", find_dir="modules", atlantis_file="atlantis.yaml"
        )
        assert resolve_directories(inputs, module_tree) == ["modules/storage"]

    def test_missing_atlantis_file_falls_through(self, module_tree):
        inputs = ActionInputs(atlantis_file="atlantis.yaml", find_dir="modules")
        assert resolve_directories(inputs, module_tree) == ["modules/network", "modules/storage"]

    def test_disabled_find_dir_uses_working_dir(self, module_tree):
        inputs = ActionInputs(find_dir="disabled", working_dir="a,b,c")
        assert resolve_directories(inputs, module_tree) == ["a", "b", "c"]
