import logging

import numpy as np
import pytest

from conftest import solid_raster
from dataset_viewer.models.errors import DimensionMismatchError, EmptyInputError
from dataset_viewer.models.image_model import MEAN_COLOR_SENTINEL
from dataset_viewer.services.mean_service import MeanService, clamp_channel, clamp_channels

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_clamp_channel_bounds():
    assert clamp_channel(-5) == 0
    assert clamp_channel(260) == 255
    assert clamp_channel(128) == 128


def test_clamp_channel_logs_only_when_changed(caplog):
    with caplog.at_level(logging.WARNING, logger="dataset_viewer.services.mean_service"):
        clamp_channel(0)
        clamp_channel(255)
        assert not caplog.records
        clamp_channel(300)
    assert len(caplog.records) == 1


def test_clamp_channels_vectorized():
    values = np.array([-1, 0, 128, 255, 999], dtype=np.int64)
    out = clamp_channels(values)
    assert out.dtype == np.uint8
    assert out.tolist() == [0, 0, 128, 255, 255]


def test_mean_color_empty_returns_sentinel():
    assert MeanService().mean_color([]) == MEAN_COLOR_SENTINEL
    assert MeanService(mean_color_mode="aggregate").mean_color([]) == MEAN_COLOR_SENTINEL


@pytest.mark.parametrize("mode", ["last", "aggregate"])
def test_identical_solid_rasters_keep_their_color(mode):
    color = (10, 200, 33)
    rasters = [solid_raster(color, 3, 2) for _ in range(4)]
    service = MeanService(mean_color_mode=mode)

    assert service.mean_color(rasters) == color
    image = service.mean_image(rasters)
    assert image.shape == (2, 3, 3)
    assert (image == np.array(color, dtype=np.uint8)).all()


def test_red_blue_scenario():
    rasters = [solid_raster(RED), solid_raster(BLUE)]
    service = MeanService()

    image = service.mean_image(rasters)
    assert image.shape == (2, 2, 3)
    assert image.dtype == np.uint8
    assert (image == np.array([127, 0, 127], dtype=np.uint8)).all()

    # only the last raster decides the color
    assert service.mean_color(rasters) == BLUE


def test_reordering_changes_last_mean_color_but_not_mean_image():
    rasters = [solid_raster(RED), solid_raster(BLUE), solid_raster((0, 255, 0))]
    reordered = [rasters[2], rasters[0], rasters[1]]
    service = MeanService()

    assert np.array_equal(service.mean_image(rasters), service.mean_image(reordered))
    assert service.mean_color(rasters) == (0, 255, 0)
    assert service.mean_color(reordered) == BLUE


def test_aggregate_mean_color_is_order_independent():
    rasters = [solid_raster(RED), solid_raster(BLUE)]
    service = MeanService(mean_color_mode="aggregate")

    assert service.mean_color(rasters) == (127, 0, 127)
    assert service.mean_color(rasters[::-1]) == (127, 0, 127)


def test_aggregate_weights_by_pixel_count():
    small = solid_raster((0, 0, 0), 1, 1)
    large = solid_raster((100, 100, 100), 3, 1)
    assert MeanService(mean_color_mode="aggregate").mean_color([small, large]) == (75, 75, 75)


def test_raster_mean_truncates():
    raster = np.array([[[0, 0, 0], [1, 3, 255]]], dtype=np.uint8)
    assert MeanService().raster_mean(raster) == (0, 1, 127)


def test_mean_image_truncates_per_pixel():
    a = np.array([[[1, 2, 3], [10, 20, 30]]], dtype=np.uint8)
    b = np.array([[[2, 2, 4], [11, 21, 31]]], dtype=np.uint8)
    image = MeanService().mean_image([a, b])
    assert image.tolist() == [[[1, 2, 3], [10, 20, 30]]]


def test_mean_image_empty_raises():
    with pytest.raises(EmptyInputError):
        MeanService().mean_image([])


def test_mean_image_strict_rejects_different_shape():
    rasters = [solid_raster(RED, 2, 2), solid_raster(BLUE, 4, 1)]
    with pytest.raises(DimensionMismatchError) as info:
        MeanService().mean_image(rasters)
    assert info.value.index == 1
    assert info.value.expected == (2, 2)
    assert info.value.actual == (1, 4)


def test_mean_image_linear_index_mode_accepts_larger_raster():
    first = solid_raster(RED, 2, 2)
    wider = solid_raster(BLUE, 5, 1)
    image = MeanService(require_equal_dimensions=False).mean_image([first, wider])
    assert image.shape == (2, 2, 3)
    assert (image == np.array([127, 0, 127], dtype=np.uint8)).all()


def test_mean_image_linear_index_mode_rejects_fewer_pixels():
    rasters = [solid_raster(RED, 2, 2), solid_raster(BLUE, 3, 1)]
    with pytest.raises(DimensionMismatchError):
        MeanService(require_equal_dimensions=False).mean_image(rasters)


def test_mean_image_does_not_mutate_inputs():
    rasters = [solid_raster(RED), solid_raster(BLUE)]
    before = [r.copy() for r in rasters]
    MeanService().mean_image(rasters)
    for raster, original in zip(rasters, before):
        assert np.array_equal(raster, original)


def test_unknown_mean_color_mode():
    with pytest.raises(ValueError):
        MeanService(mean_color_mode="median")
