"""Tests for the edge-list instance loader."""

import pytest

from vcover.utils.instance_loader import load_instances


@pytest.fixture
def single_instance(tmp_path):
    path = tmp_path / "tri.txt"
    path.write_text("1,2\n2,3\n3,1\n")
    return str(path)


@pytest.fixture
def instance_dir(tmp_path):
    (tmp_path / "b.txt").write_text("1,2\n")
    (tmp_path / "a.txt").write_text("1,2\n2,3\n")
    (tmp_path / "notes.md").write_text("ignored")
    return str(tmp_path)


class TestInstanceLoader:
    def test_load_single(self, single_instance):
        instances = load_instances(single_instance)
        assert len(instances) == 1
        assert instances[0]["instance_name"] == "tri"
        assert instances[0]["lines"] == ["1,2", "2,3", "3,1"]
        assert instances[0]["metadata"]["generator"] == "custom"

    def test_load_directory_sorted(self, instance_dir):
        instances = load_instances(instance_dir)
        assert [i["instance_name"] for i in instances] == ["a", "b"]

    def test_path_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_instances("/nonexistent/file.txt")

    def test_empty_directory(self, tmp_path):
        with pytest.raises(ValueError, match="No \\*.txt edge lists"):
            load_instances(str(tmp_path))
