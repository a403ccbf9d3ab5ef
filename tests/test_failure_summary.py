from pathlib import Path

from dataset_viewer.models.image_model import ComputationFailure, describe_failures


def test_describe_failures_names_files_and_kinds():
    failures = [
        ComputationFailure(kind="decode_failure", path=Path("/data/cat_1.png"), message="broken"),
        ComputationFailure(kind="dimension_mismatch", path=Path("/data/cat_2.png"), message="3x3 vs 2x2"),
        ComputationFailure(kind="empty_input", path=None, message="no images"),
    ]
    assert describe_failures(failures) == (
        "cat_1.png: не декодирован; cat_2.png: разный размер; нет изображений"
    )


def test_describe_failures_unknown_kind_and_empty():
    assert describe_failures([ComputationFailure(kind="other", path=None, message="")]) == "other"
    assert describe_failures([]) == ""
