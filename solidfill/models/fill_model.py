"""Модели данных для генерации однотонного изображения.

Принципы:
- SRP: только структуры данных и лимиты, без ввода-вывода.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np

CHANNELS = 3
# Размер по одной оси хранится как беззнаковое 32-битное число.
MAX_DIMENSION = 2**32 - 1
MAX_BUFFER_BYTES = sys.maxsize


@dataclass(frozen=True)
class RGBColor:
    """Цвет 24 бита: по 8 бит на канал."""
    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, text: str) -> "RGBColor":
        """Декодирует уже провалидированную строку из шести hex-цифр."""
        value = int(text, 16)
        return cls(
            red=(value & 0xFF0000) >> 16,
            green=(value & 0x00FF00) >> 8,
            blue=value & 0x0000FF,
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class FillRequest:
    """Провалидированные входные данные одного запуска."""
    width: int
    height: int
    color: RGBColor
    path: Path


@dataclass(frozen=True)
class PixelBuffer:
    """Буфер пикселей RGB, 8 бит на канал.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        data: numpy-массив uint8 формы (height, width, 3), только для чтения.
    """
    width: int
    height: int
    data: np.ndarray

    @property
    def nbytes(self) -> int:
        return int(self.data.nbytes)
