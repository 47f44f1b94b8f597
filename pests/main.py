# main.py
import argparse
import logging
import os
import signal
import sys

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtWidgets import QApplication

from pests.config import load_config
from pests.errors import PanicError, PestError
from pests.events import EventHandler, Quit
from pests.game import FrameLoop
from pests.logging_config import setup_logging
from pests.manager import PestManager
from pests.pest import Immunity
from pests.pest_window import EventQueue, QtWindowFactory, alt_held
from pests.physics import Bounds
from pests.vector import Vector

logger = logging.getLogger("pests.main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pests", description="Bouncing desktop pests.")
    parser.add_argument("--config", default="config.json", help="JSON file overriding the defaults")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log here")
    return parser.parse_args(argv)


def build_manager(screen, queue, cfg):
    avail = screen.availableGeometry()
    full = screen.geometry()
    bounds = Bounds.from_screen(avail.x(), avail.y(), avail.width(), avail.height(),
                                margin=cfg["screen_margin"])
    center = (full.x() + full.width() // 2, full.y() + full.height() // 2)
    logger.info("bounds %s, center %s", bounds, center)
    return PestManager(QtWindowFactory(queue), bounds, center, cfg)


def run_frame(loop, timer, app):
    """Timer slot: one frame, then stop the app if the loop is done."""
    try:
        running = loop.tick()
    except PanicError as e:
        logger.critical("panic: %s", e)
        os.abort()
        return
    except PestError as e:
        logger.error("frame failed: %s", e)
        timer.stop()
        app.exit(1)
        return
    if not running:
        timer.stop()
        app.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        cfg = load_config(args.config)
    except PestError as e:
        logger.error("%s", e)
        return 1

    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    app = QApplication(sys.argv[:1])
    app.setQuitOnLastWindowClosed(False)

    screen = app.primaryScreen()
    if screen is None:
        logger.error("no primary screen")
        return 1

    queue = EventQueue()
    manager = build_manager(screen, queue, cfg)
    try:
        x, y = cfg["initial_pos"]
        manager.spawn_at(x, y, manager.texture, Immunity.ON_FIRST_FOCUS,
                         Vector(*cfg["initial_velocity"]))
    except PestError as e:
        logger.error("startup failed: %s", e)
        return 1

    handler = EventHandler(manager, quit_enabled=cfg["quit_enabled"])
    loop = FrameLoop(manager, handler, queue.drain, alt_held)

    timer = QTimer()
    timer.setInterval(max(1, round(cfg["frame_budget"] * 1000)))
    timer.timeout.connect(lambda: run_frame(loop, timer, app))
    signal.signal(signal.SIGINT, lambda *_: queue.push(Quit()))
    timer.start()

    code = app.exec_()
    manager.close_all()
    logger.info("exit %d after %d frames", code, loop.frames)
    return code


if __name__ == "__main__":
    sys.exit(main())
