import numpy as np
from PIL import Image

from dataset_viewer.models.image_model import MEAN_COLOR_SENTINEL
from dataset_viewer.services.analysis_service import AnalysisService
from dataset_viewer.services.image_service import ImageService
from dataset_viewer.services.mean_service import MeanService


def test_analyze_red_blue_files(write_image):
    paths = [
        write_image("a_red.png", color=(255, 0, 0)),
        write_image("a_blue.png", color=(0, 0, 255)),
    ]
    result = AnalysisService().analyze(paths)

    assert result.ok
    assert result.rasters_used == 2
    assert result.mean_color == (0, 0, 255)
    assert (result.mean_image == np.array([127, 0, 127], dtype=np.uint8)).all()


def test_analyze_mixed_pixel_modes(write_image):
    paths = [
        write_image("m_1.png", color=(40, 80, 120), mode="RGBA"),
        write_image("m_2.png", color=(40, 80, 120), mode="P"),
        write_image("m_3.jpg", color=(40, 40, 40), mode="L"),
    ]
    result = AnalysisService(MeanService(mean_color_mode="aggregate")).analyze(paths[:2])
    assert result.ok
    assert result.mean_color == (40, 80, 120)

    gray = AnalysisService().analyze(paths[2:])
    assert gray.mean_image.shape == (2, 2, 3)


def test_analyze_empty_selection():
    result = AnalysisService().analyze([])

    assert result.mean_color == MEAN_COLOR_SENTINEL
    assert result.mean_image is None
    assert [f.kind for f in result.failures] == ["empty_input"]


def test_decode_failure_is_reported_and_skipped(write_image, tmp_path):
    broken = tmp_path / "a_broken.png"
    broken.write_bytes(b"garbage")
    good = write_image("a_good.png", color=(9, 9, 9))

    result = AnalysisService().analyze([broken, good])

    assert result.rasters_used == 1
    assert result.mean_color == (9, 9, 9)
    assert result.mean_image is not None
    assert len(result.failures) == 1
    assert result.failures[0].kind == "decode_failure"
    assert result.failures[0].path == broken


def test_all_files_fail_to_decode(tmp_path):
    missing = tmp_path / "gone.png"
    result = AnalysisService().analyze([missing])

    assert result.mean_color == MEAN_COLOR_SENTINEL
    assert result.mean_image is None
    assert [f.kind for f in result.failures] == ["decode_failure", "empty_input"]


def test_dimension_mismatch_names_offending_file(write_image):
    first = write_image("d_1.png", size=(2, 2))
    second = write_image("d_2.png", size=(3, 3))

    result = AnalysisService().analyze([first, second])

    assert result.mean_image is None
    assert result.failures[-1].kind == "dimension_mismatch"
    assert result.failures[-1].path == second
    # mean color does not need equal sizes
    assert result.mean_color == (255, 0, 0)


def test_custom_decoder_is_used(write_image):
    calls = []
    real = write_image("x_1.png", color=(5, 6, 7))

    def decoder(path):
        calls.append(path)
        return ImageService().load_image(real)

    result = AnalysisService(decoder=decoder).analyze(["whatever.png"])
    assert len(calls) == 1
    assert result.mean_color == (5, 6, 7)


def test_oversized_file_is_skipped(write_image, monkeypatch):
    huge = write_image("b_huge.png", color=(0, 0, 0), size=(64, 64))
    small = write_image("b_small.png", color=(30, 60, 90), size=(2, 2))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    result = AnalysisService().analyze([huge, small])

    assert result.rasters_used == 1
    assert result.mean_color == (30, 60, 90)
    assert result.mean_image.shape == (2, 2, 3)
    assert [(f.kind, f.path) for f in result.failures] == [("decode_failure", huge)]
