"""Tests for the corpus provider and directory sampler."""

import os

import pytest

from project_knowledge.scanner import directory_basenames, list_directories, scan_files


@pytest.fixture
def sample_tree(tmp_path):
    """A small solution layout with build output and editor folders."""
    src = tmp_path / "src" / "Shop.Domain"
    src.mkdir(parents=True)
    (src / "Order.cs").write_text("public class Order { }\n")
    (src / "Customer.cs").write_text("public class Customer { }\n")

    web = tmp_path / "web" / "app"
    web.mkdir(parents=True)
    (web / "main.ts").write_text("export class AppComponent {}\n")

    for skipped in ("bin", "obj", "node_modules", ".git", ".vs"):
        d = tmp_path / "src" / "Shop.Domain" / skipped
        d.mkdir()
        (d / "Generated.cs").write_text("public class Generated { }\n")

    (tmp_path / "build").mkdir()
    return tmp_path


class TestScanFiles:
    def test_finds_csharp_files(self, sample_tree):
        files = scan_files(sample_tree, "**/*.cs")
        assert [f.path for f in files] == [
            "src/Shop.Domain/Customer.cs",
            "src/Shop.Domain/Order.cs",
        ]
        assert all(f.extension == ".cs" for f in files)
        assert "class Order" in files[1].content

    def test_finds_typescript_files(self, sample_tree):
        files = scan_files(sample_tree, "**/*.ts")
        assert [f.path for f in files] == ["web/app/main.ts"]

    def test_hidden_directories_are_skipped(self, tmp_path):
        (tmp_path / "Order.cs").write_text("public class Order { }\n")
        for hidden in (".github", ".claude"):
            (tmp_path / hidden).mkdir()
            (tmp_path / hidden / "Tool.cs").write_text("public class Tool { }\n")
        (tmp_path / ".Scratch.cs").write_text("public class Scratch { }\n")
        assert [f.path for f in scan_files(tmp_path, "**/*.cs")] == ["Order.cs"]

    def test_empty_tree(self, tmp_path):
        assert scan_files(tmp_path, "**/*.cs") == []

    def test_undecodable_file_is_skipped(self, tmp_path, caplog):
        (tmp_path / "Good.cs").write_text("public class Good { }\n")
        (tmp_path / "Bad.cs").write_bytes(b"\xff\xfe\xfa class")
        with caplog.at_level("WARNING", logger="project_knowledge"):
            files = scan_files(tmp_path, "**/*.cs")
        assert [f.path for f in files] == ["Good.cs"]
        assert "Could not read file" in caplog.text


class TestListDirectories:
    def test_skips_tooling_directories(self, sample_tree):
        names = directory_basenames(list_directories(sample_tree))
        assert "shop.domain" in names
        assert "app" in names
        for skipped in ("bin", "obj", "node_modules", ".git", ".vs", "build"):
            assert skipped not in names

    def test_depth_limit(self, tmp_path):
        deep = tmp_path
        for i in range(10):
            deep = deep / f"level{i}"
        deep.mkdir(parents=True)
        names = directory_basenames(list_directories(tmp_path, max_depth=2))
        assert names == ["level0", "level1", "level2"]

    def test_sorted_output(self, tmp_path):
        for name in ("zeta", "alpha", "Mid"):
            (tmp_path / name).mkdir()
        names = [d.name for d in list_directories(tmp_path)]
        assert names == sorted(names)

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="permissions not enforced")
    def test_unreadable_directory_is_ignored(self, tmp_path):
        locked = tmp_path / "locked"
        (locked / "inner").mkdir(parents=True)
        locked.chmod(0)
        try:
            names = directory_basenames(list_directories(tmp_path))
        finally:
            locked.chmod(0o755)
        assert names == ["locked"]
