from PySide6.QtCore import QCoreApplication, QSettings

import sys

ORG_ID = "gw2pao"
APP_ID = "player-markers"
ORG_DOMAIN = "gw2pao.local"

VISIBLE_APP_NAME = "Player Markers"


def create_app() -> QCoreApplication:
    """
    Create and configure the Qt application instance.

    The names must be set before anything asks QStandardPaths for the
    user data directory. Reuses a running instance (e.g. the overlay's
    QApplication) when there is one.
    """
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    return app
