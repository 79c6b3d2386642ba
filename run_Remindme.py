import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QPalette
from PyQt5.QtWidgets import QApplication

from Mainwindow.MainWindow import MainWindow
from Remindme.conf import CONF_PATH, AppConfig
from Remindme.store import ReminderStore


class AppManager:
    def __init__(self, conf_path=None):
        self.app = QApplication(sys.argv)
        self.main_window = None
        self.init_platform_style()
        self.setup_logging()
        self.config = AppConfig.init_config(conf_path or CONF_PATH)
        self.store = ReminderStore(self.config.reminder_file)
        self.store.load()

    def init_platform_style(self):
        self.app.setStyle('Fusion')

        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.WindowText, Qt.white)
        dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
        dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
        dark_palette.setColor(QPalette.ToolTipText, Qt.white)
        dark_palette.setColor(QPalette.Text, Qt.white)
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, Qt.white)
        dark_palette.setColor(QPalette.BrightText, Qt.red)
        dark_palette.setColor(QPalette.Link, QColor(42, 130, 218))
        dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        dark_palette.setColor(QPalette.HighlightedText, Qt.black)

        self.app.setPalette(dark_palette)

    def setup_logging(self):
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )

    def show_main_window(self):
        if self.main_window is None:
            self.main_window = MainWindow(self.app, self.store, self.config)

        self.main_window.bring_to_front()

    def run(self):
        self.show_main_window()
        sys.exit(self.app.exec_())


def main():
    manager = AppManager()
    manager.run()


if __name__ == "__main__":
    main()
