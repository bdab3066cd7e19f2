"""Запись буфера пикселей на диск.

Принципы:
- SRP: класс отвечает только за кодирование через PIL и файловый ввод-вывод.
- Атомарность: файл пишется во временный рядом с целевым и переименовывается,
  поэтому при ошибке целевой путь не создаётся и не портится.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from PIL import Image

from solidfill.models.fill_model import CHANNELS, PixelBuffer

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    # у os.umask нет чтения без записи; процесс однопоточный
    mask = os.umask(0)
    os.umask(mask)
    return mask


class ImageService:
    def resolve_format(self, file_path: str | Path) -> str:
        """Определяет формат PIL по расширению пути.

        Raises:
            ValueError: если расширение отсутствует или PIL его не знает.
        """
        path = Path(file_path)
        ext = path.suffix.lower()
        if not ext:
            raise ValueError(f"Не удалось определить формат: у пути нет расширения: {path}")
        fmt = Image.registered_extensions().get(ext)
        if fmt is None or fmt not in Image.SAVE:
            raise ValueError(f"Неподдерживаемое расширение {ext!r}: {path}")
        return fmt

    def save_buffer(self, buffer: PixelBuffer, file_path: str | Path) -> Path:
        """Кодирует буфер как RGB 8 бит и атомарно записывает его в `file_path`.

        Args:
            buffer: Буфер формы (height, width, 3).
            file_path: Путь назначения; формат берётся из расширения.

        Returns:
            Путь записанного файла.

        Raises:
            ValueError: неизвестное расширение, некорректный буфер или
                размер, который кодировщик формата не поддерживает.
            OSError: ошибка создания, записи или переименования файла.
        """
        path = Path(file_path)
        fmt = self.resolve_format(path)

        expected = buffer.width * buffer.height * CHANNELS
        if buffer.data.shape != (buffer.height, buffer.width, CHANNELS) or buffer.nbytes != expected:
            raise ValueError(
                f"Размер буфера {buffer.data.shape} не соответствует {buffer.width}x{buffer.height}x{CHANNELS}"
            )

        pil_image = Image.fromarray(buffer.data)
        with tempfile.NamedTemporaryFile(prefix=f".{path.name}.", suffix=".tmp",
                                         dir=path.parent, delete=False) as tmp:
            tmp_path = Path(tmp.name)
            try:
                self._encode(pil_image, tmp, fmt)
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise

        try:
            # NamedTemporaryFile создаёт файл с правами 0600
            os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug("wrote %s (%s, %dx%d)", path, fmt, buffer.width, buffer.height)
        return path

    def _encode(self, pil_image: Image.Image, fp, fmt: str) -> None:
        width, height = pil_image.size
        try:
            pil_image.save(fp, format=fmt)
        except OSError:
            raise
        except Exception as exc:
            # например struct.error в заголовках GIF/TGA/PCX при размере > 65535
            raise ValueError(f"Кодировщик {fmt} не поддерживает изображение {width}x{height}: {exc}") from exc
