"""Парсер аргументов командной строки."""
from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from solidfill.services.validation_service import parse_dimension, parse_hex_color, parse_output_path

PROG = "solid-fill"


def _package_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "0+unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Создаёт однотонное RGB-изображение заданного размера и цвета.",
    )
    parser.add_argument("width", type=parse_dimension, help="ширина, px (>= 1)")
    parser.add_argument("height", type=parse_dimension, help="высота, px (>= 1)")
    parser.add_argument("hex", type=parse_hex_color, help="цвет, шесть hex-цифр без #, например ff8800")
    parser.add_argument("path", type=parse_output_path, help="файл назначения; формат по расширению (.png, .bmp, .jpg, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser
