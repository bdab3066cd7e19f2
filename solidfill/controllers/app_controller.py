"""Контроллер приложения: оркестрация сервисов.

SOLID:
- SRP: класс связывает проверку размера, сборку буфера и запись файла,
  не содержит логики кодирования.
- DIP: зависит от сервисов как от ролей; их можно подменить в тестах.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from solidfill.models.fill_model import FillRequest
from solidfill.services.buffer_service import BufferService
from solidfill.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Выполняет один запрос генерации.

    Ответственности:
    - Проверка формата и размера буфера до выделения памяти.
    - Сборка буфера через `BufferService`.
    - Запись файла через `ImageService`.
    """
    _buffer_service: BufferService = field(default_factory=BufferService)
    _image_service: ImageService = field(default_factory=ImageService)

    def run(self, request: FillRequest) -> Path:
        # формат проверяем до выделения буфера
        fmt = self._image_service.resolve_format(request.path)
        capacity = self._buffer_service.checked_capacity(request.width, request.height)
        logger.debug("%dx%d %s -> %s (%s, %d bytes)", request.width, request.height,
                     request.color.as_tuple(), request.path, fmt, capacity)

        buffer = self._buffer_service.build_buffer(request.width, request.height, request.color)
        return self._image_service.save_buffer(buffer, request.path)
