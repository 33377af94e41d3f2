from __future__ import annotations

import os
import sys
from typing import Sequence

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

ORG_ID = "lifeprogress"
APP_ID = "life-progress"
ORG_DOMAIN = "lifeprogress.app"

VISIBLE_APP_NAME = "Life Progress"


def create_app(argv: Sequence[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or reuse the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
