from __future__ import annotations

import numpy as np

from solidfill.models.fill_model import CHANNELS, MAX_BUFFER_BYTES, PixelBuffer, RGBColor


class BufferService:
    def checked_capacity(self, width: int, height: int) -> int:
        """
        Размер буфера width * height * 3 в байтах.
        OverflowError, если он не помещается в размерный тип платформы.
        """
        capacity = width * height * CHANNELS
        if capacity > MAX_BUFFER_BYTES:
            raise OverflowError(
                f"буфер {width}x{height}x{CHANNELS} ({capacity} байт) превышает допустимый размер {MAX_BUFFER_BYTES}"
            )
        return capacity

    def build_buffer(self, width: int, height: int, color: RGBColor) -> PixelBuffer:
        """
        Заполняет буфер одним цветом: каждый триплет равен (R, G, B).
        MemoryError с размером в сообщении, если память выделить не удалось.
        """
        capacity = self.checked_capacity(width, height)
        try:
            data = np.empty((height, width, CHANNELS), dtype=np.uint8)
        except MemoryError as exc:
            raise MemoryError(
                f"не удалось выделить буфер {width}x{height}x{CHANNELS} ({capacity} байт)"
            ) from exc
        # broadcast одного пикселя на весь массив
        data[...] = np.array(color.as_tuple(), dtype=np.uint8)
        data.flags.writeable = False
        return PixelBuffer(width=width, height=height, data=data)
