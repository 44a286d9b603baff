from pathlib import Path

import pytest

from binarysearchtree.cli import (
    demo_binary_search_tree,
    demo_binary_tree,
    demo_median,
    main,
)


def test_demo_median_returns_twelve(capsys):
    median = demo_median()
    assert median.key == 12
    out = capsys.readouterr().out
    assert "predec of 12: " in out
    assert "12 node: " in out


def test_demo_median_predecessor_of_twelve_is_its_parent(capsys):
    demo_median()
    out = capsys.readouterr().out
    line = next(line for line in out.splitlines() if line.startswith("predec of 12: "))
    assert "key=10" in line


def test_demo_binary_tree_writes_files(tmp_path: Path, capsys):
    paths = demo_binary_tree(tmp_path)
    assert [p.name for p in paths] == ["prime.dot", "prime_t2.dot", "prime_t3.dot", "prime_t4.dot"]
    assert all(p.is_file() for p in paths)
    capsys.readouterr()


def test_demo_binary_tree_discard_removes_left_subtree(tmp_path: Path, capsys):
    demo_binary_tree(tmp_path)
    after = (tmp_path / "prime_t3.dot").read_text()
    original = (tmp_path / "prime_t4.dot").read_text()
    assert "\t5--3;" not in after
    assert "\t5--7;" in after
    assert "\t5--3;" in original
    out = capsys.readouterr().out
    assert "status of node deletion: true" in out


def test_demo_binary_tree_growth_between_snapshots(tmp_path: Path, capsys):
    demo_binary_tree(tmp_path)
    first = (tmp_path / "prime.dot").read_text()
    second = (tmp_path / "prime_t2.dot").read_text()
    assert second.count("--") > first.count("--")
    assert "\t7--10;" in second
    capsys.readouterr()


def test_demo_binary_search_tree_output(tmp_path: Path, capsys):
    demo_binary_search_tree(tmp_path)
    out = capsys.readouterr().out
    assert "tree search result of key 15 is found -> 15" in out
    assert "tree search result of key 22 is not found" in out
    assert "minimum result 2" in out
    assert "maximum result 20" in out
    assert "root node 15" in out
    assert "node with key of 22 does not exist, failed to get successor" in out
    assert "successor of node (15) is 17" in out
    assert "successor of node (2) is 3" in out


def test_demo_binary_search_tree_delete_removes_root(tmp_path: Path, capsys):
    paths = demo_binary_search_tree(tmp_path)
    assert [p.name for p in paths] == ["bst_graph.dot", "bst.dot", "bst_delete_root.dot"]
    deleted = (tmp_path / "bst_delete_root.dot").read_text()
    inserted = (tmp_path / "bst.dot").read_text()
    assert "\t15--" in inserted
    assert "\t15--" not in deleted
    assert (tmp_path / "bst_graph.dot").read_text() == inserted
    capsys.readouterr()


def test_main_default_runs_median(capsys):
    assert main([]) == 0
    assert "predec of 12: " in capsys.readouterr().out


def test_main_bst_writes_into_output_dir(tmp_path: Path, capsys):
    assert main(["--demo", "bst", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "bst_delete_root.dot").is_file()
    capsys.readouterr()


def test_main_tree_writes_into_output_dir(tmp_path: Path, capsys):
    assert main(["--demo", "tree", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "prime_t4.dot").is_file()
    capsys.readouterr()


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--demo", "unknown"])
    assert excinfo.value.code == 2
    capsys.readouterr()