"""PyQt6 application bootstrap."""
from __future__ import annotations

from typing import Optional, Sequence

from PyQt6 import QtWidgets

from ..core.game import GameEngine
from .table import TableWindow


def launch_qt(engine: GameEngine, argv: Sequence[str], source: Optional[str] = None) -> int:
    app = QtWidgets.QApplication(list(argv))
    window = TableWindow(engine, source)
    window.show()
    return app.exec()


__all__ = ["launch_qt"]
