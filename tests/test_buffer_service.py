import numpy as np
import pytest

from solidfill.models.fill_model import MAX_BUFFER_BYTES, MAX_DIMENSION, RGBColor
from solidfill.services.buffer_service import BufferService


def test_checked_capacity():
    assert BufferService().checked_capacity(2, 5) == 30


def test_checked_capacity_overflow():
    with pytest.raises(OverflowError):
        BufferService().checked_capacity(MAX_DIMENSION, MAX_DIMENSION)


def test_checked_capacity_boundary():
    service = BufferService()
    width = MAX_BUFFER_BYTES // 3
    assert service.checked_capacity(width, 1) == width * 3
    with pytest.raises(OverflowError):
        service.checked_capacity(width + 1, 1)


def test_build_buffer_overflow_fails_before_allocation(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("allocated")

    monkeypatch.setattr(np, "empty", fail)
    with pytest.raises(OverflowError):
        BufferService().build_buffer(MAX_DIMENSION, MAX_DIMENSION, RGBColor(1, 2, 3))


def test_build_buffer_repeats_triplet():
    buffer = BufferService().build_buffer(4, 3, RGBColor(0x12, 0x34, 0x56))
    assert buffer.data.shape == (3, 4, 3)
    assert buffer.data.dtype == np.uint8
    assert buffer.nbytes == 4 * 3 * 3
    raw = buffer.data.tobytes()
    assert raw == bytes([0x12, 0x34, 0x56]) * 12
    assert [raw[i] for i in range(6)] == [[0x12, 0x34, 0x56][i % 3] for i in range(6)]


def test_build_buffer_single_pixel(red):
    buffer = BufferService().build_buffer(1, 1, red)
    assert buffer.data.tobytes() == b"\xff\x00\x00"


def test_build_buffer_is_read_only(red):
    buffer = BufferService().build_buffer(2, 2, red)
    with pytest.raises(ValueError):
        buffer.data[0, 0, 0] = 1


def test_build_buffer_memory_error_has_size(monkeypatch, red):
    def fail(*args, **kwargs):
        raise MemoryError()

    monkeypatch.setattr(np, "empty", fail)
    with pytest.raises(MemoryError, match="3x2x3"):
        BufferService().build_buffer(3, 2, red)
