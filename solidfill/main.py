"""Точка входа в приложение."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from solidfill.cli import PROG, build_parser
from solidfill.controllers.app_controller import AppController
from solidfill.models.fill_model import FillRequest, RGBColor

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, создаёт изображение и возвращает код выхода.

    Ошибки использования argparse завершает сам (SystemExit с кодом 2).
    """
    logging.basicConfig(level=logging.WARNING, format=f"{PROG}: %(levelname)s: %(message)s")

    args = build_parser().parse_args(argv)
    request = FillRequest(
        width=args.width,
        height=args.height,
        color=RGBColor.from_hex(args.hex),
        path=args.path,
    )

    controller = AppController()
    try:
        controller.run(request)
    except (OverflowError, MemoryError, ValueError, OSError) as exc:
        logger.debug("generation failed", exc_info=True)
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
