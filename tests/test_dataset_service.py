import pytest

from dataset_viewer.services.dataset_service import DatasetService


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"")


def test_scan_groups_by_prefix(tmp_path):
    _touch(tmp_path, "dog_2.png", "cat_1.jpg", "dog_1.JPEG", "cat_2.png", "notes.txt")
    catalog = DatasetService().scan_directory(tmp_path)

    assert catalog.category_names() == ["All", "cat", "dog"]
    assert [p.name for p in catalog.files("cat")] == ["cat_1.jpg", "cat_2.png"]
    assert [p.name for p in catalog.files("dog")] == ["dog_1.JPEG", "dog_2.png"]
    assert [p.name for p in catalog.files("All")] == ["cat_1.jpg", "cat_2.png", "dog_1.JPEG", "dog_2.png"]
    assert len(catalog) == 4


def test_file_without_separator_is_its_own_category(tmp_path):
    _touch(tmp_path, "Hummel.jpg")
    catalog = DatasetService().scan_directory(tmp_path)
    assert catalog.category_names() == ["All", "Hummel.jpg"]


def test_find_file(tmp_path):
    _touch(tmp_path, "cat_1.png", "cat_2.png")
    catalog = DatasetService().scan_directory(tmp_path)

    assert [p.name for p in catalog.find_file("cat", "cat_2.png")] == ["cat_2.png"]
    assert [p.name for p in catalog.find_file("All", "cat_1.png")] == ["cat_1.png"]
    assert catalog.find_file("cat", "dog_1.png") == []


def test_unknown_category(tmp_path):
    catalog = DatasetService().scan_directory(tmp_path)
    assert catalog.category_names() == ["All"]
    assert catalog.files("All") == []
    with pytest.raises(KeyError):
        catalog.files("bird")


def test_custom_separator_and_extensions(tmp_path):
    _touch(tmp_path, "a-1.bmp", "a-2.png", "b-1.bmp")
    catalog = DatasetService(extensions=(".BMP",), separator="-", all_category="*").scan_directory(tmp_path)
    assert catalog.category_names() == ["*", "a", "b"]
    assert [p.name for p in catalog.files("*")] == ["a-1.bmp", "b-1.bmp"]


def test_subdirectories_are_ignored(tmp_path):
    (tmp_path / "sub_dir.png").mkdir()
    _touch(tmp_path, "x_1.png")
    catalog = DatasetService().scan_directory(tmp_path)
    assert [p.name for p in catalog.files("All")] == ["x_1.png"]


def test_missing_directory(tmp_path):
    with pytest.raises(NotADirectoryError):
        DatasetService().scan_directory(tmp_path / "nope")
