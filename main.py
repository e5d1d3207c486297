import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import AppConfig
from core.controller import PlaybackController
from core.state import AppState
from player.player import QtPlaybackEngine
from ui.main_window import MainWindow
from ui.workers.duration_probe_worker import ThreadedDurationProber

def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main() -> int:
    qt_app = QApplication(sys.argv)

    config = AppConfig.from_env()
    configure_logging(config)

    app_state = AppState()
    prober = ThreadedDurationProber()
    engine = QtPlaybackEngine()

    with PlaybackController(engine, prober=prober, volume=config.initial_volume) as controller:
        app_state.bind(controller)
        logging.getLogger(__name__).info("Using %s backend", engine.backend_name())

        main_window = MainWindow(app_state, controller, config)
        main_window.show()

        try:
            return qt_app.exec()
        finally:
            prober.shutdown()
            app_state.unbind()

if __name__ == "__main__":
    raise SystemExit(main())
