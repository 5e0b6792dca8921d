# File: tests/conftest.py

import os
import logging
import sys
import pytest

# Add project root to path
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def reset_package_logger():
    """
    main() attaches a stderr handler; drop it so it never outlives capsys.
    """
    yield
    package_logger = logging.getLogger("json_walker")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def mixed_tree(tmp_path):
    """
    Creates a nested folder structure with:
    - 3 JSON files (top level, nested, deeply nested)
    - Decoys: other extensions, a bare "json" name, a dotfile, upper-case JSON,
      and a directory whose name ends in .json
    """
    root = tmp_path / "dump"
    root.mkdir()

    # 1. Valid JSON files
    (root / "top.json").write_text("{}")
    nested = root / "nested"
    nested.mkdir()
    (nested / "inner.json").write_text("[]")
    deep = nested / "a" / "b" / "c"
    deep.mkdir(parents=True)
    (deep / "deep.json").write_text("null")

    # 2. Decoys
    (root / "notes.txt").write_text("not json")
    (root / "json").write_text("no extension")
    (root / ".json").write_text("dotfile")
    (root / "UPPER.JSON").write_text("{}")
    (root / "data.json.bak").write_text("{}")
    (root / "folder.json").mkdir()
    (nested / "readme.md").write_text("# readme")

    return root
