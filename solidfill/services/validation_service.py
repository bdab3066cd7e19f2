"""Разбор и проверка аргументов командной строки.

Каждая функция подходит как `type=` для argparse: при ошибке поднимает
`argparse.ArgumentTypeError`, а argparse сам добавляет имя аргумента.
"""
from __future__ import annotations

import argparse
import re
from pathlib import Path

from solidfill.models.fill_model import MAX_DIMENSION

_HEX_COLOR_RE = re.compile(r"[0-9a-fA-F]{6}")
_DIMENSION_RE = re.compile(r"[0-9]+")


def parse_dimension(text: str) -> int:
    """Ширина или высота: целое без знака в диапазоне [1, 2**32 - 1]."""
    if not _DIMENSION_RE.fullmatch(text):
        raise argparse.ArgumentTypeError(f"ожидается целое число >= 1, получено {text!r}")
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"значение должно быть >= 1, получено {text!r}")
    if value > MAX_DIMENSION:
        raise argparse.ArgumentTypeError(f"значение должно быть <= {MAX_DIMENSION}, получено {text!r}")
    return value


def parse_hex_color(text: str) -> str:
    """Цвет: ровно шесть hex-цифр, регистр не важен, без префикса `#`."""
    if not _HEX_COLOR_RE.fullmatch(text):
        raise argparse.ArgumentTypeError(f"ожидается шесть hex-цифр (например ff8800), получено {text!r}")
    return text


def parse_output_path(text: str) -> Path:
    """Путь назначения. Существование каталога проверяется только при записи."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        # argv с непредставимыми байтами приходит как surrogateescape
        raise argparse.ArgumentTypeError(f"путь не является корректным UTF-8: {text!r}") from exc
    if not text:
        raise argparse.ArgumentTypeError("путь не может быть пустым")
    return Path(text)
