import sys
import os
import logging
import argparse

# Add board/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 imports
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QApplication

# Component imports
from components.board_canvas import BoardCanvas
from components.font_size_control import FontSizeControl
from components.zoom_toolbar import ZoomToolbar

# Service imports
from services.card_store import CardStore

# Utility imports
from utils.logger import set_main_window
from constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME

# Mixin imports
from window.config_mixin import ConfigMixin
from window.menu_mixin import MenuMixin


class BoardWindow(MenuMixin, ConfigMixin, QMainWindow):
    """Main window: toolbar row above the infinite board"""

    def __init__(self, config_dir=None):
        super().__init__()
        self.setWindowTitle("Infinite Board")
        self.resize(1280, 800)

        self.config_dir = config_dir or os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)

        self.store = CardStore()
        self._setup_ui()
        self._create_menu_bar()
        self._load_config()

    def _setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        toolbar_row = QHBoxLayout()
        toolbar_row.setContentsMargins(8, 4, 8, 4)
        self.font_size_control = FontSizeControl(self.store)
        toolbar_row.addWidget(self.font_size_control)
        toolbar_row.addStretch()
        self.zoom_toolbar = ZoomToolbar()
        toolbar_row.addWidget(self.zoom_toolbar)
        layout.addLayout(toolbar_row)

        self.board = BoardCanvas(self.store, central)
        layout.addWidget(self.board, 1)
        self.setCentralWidget(central)

        # Wire toolbar <-> board
        self.zoom_toolbar.zoom_changed.connect(self.board.set_zoom_level)
        self.zoom_toolbar.zoom_in_requested.connect(lambda: self.board.zoom_in())
        self.zoom_toolbar.zoom_out_requested.connect(lambda: self.board.zoom_out())
        self.zoom_toolbar.zoom_reset_requested.connect(self.board.zoom_reset)
        self.board.viewportChanged.connect(
            lambda scale, tx, ty: self.zoom_toolbar.set_zoom_percent(self.board.get_zoom_percent()))
        self.board.selection.selectionChanged.connect(self.font_size_control.on_selection_changed)

    def closeEvent(self, event):
        self._save_config()
        self.board.shutdown()
        super().closeEvent(event)


def main():
    parser = argparse.ArgumentParser(description="Infinite Board")
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging.')
    parser.add_argument('--config-dir', help='Directory holding config.json.')
    args, qt_args = parser.parse_known_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(sys.argv[:1] + qt_args)
    window = BoardWindow(config_dir=args.config_dir)
    set_main_window(window)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
