# pest_window.py
import logging

from PyQt5.QtCore import Qt, QEvent
from PyQt5.QtGui import QIcon, QPixmap
from PyQt5.QtWidgets import QApplication, QLabel, QWidget

from pests.errors import ResourceError, WindowError
from pests.events import Button, MouseButtonDown, Quit, TakeFocus

logger = logging.getLogger(__name__)

_BUTTONS = {
    Qt.LeftButton: Button.LEFT,
    Qt.RightButton: Button.RIGHT,
    Qt.MiddleButton: Button.MIDDLE,
}


class EventQueue:
    """Events Qt delivered since the last frame."""

    def __init__(self):
        self._events = []

    def push(self, event):
        self._events.append(event)

    def drain(self):
        events, self._events = self._events, []
        return events

    def __len__(self):
        return len(self._events)


def alt_held():
    return bool(QApplication.queryKeyboardModifiers() & Qt.AltModifier)


def load_pixmap(path):
    pixmap = QPixmap(path)
    if pixmap.isNull():
        raise ResourceError(f"cannot load image {path}")
    return pixmap


class PestWindow(QWidget):
    def __init__(self, queue, title, x, y, w, h, icon):
        super().__init__()
        self.queue = queue
        self._closing = False

        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.setAttribute(Qt.WA_ShowWithoutActivating, True)
        self.setAttribute(Qt.WA_DeleteOnClose, True)
        self.setWindowTitle(title)
        self.setWindowIcon(icon)
        self.setFixedSize(w, h)
        self.move(x, y)

        self.image_label = QLabel(self)
        self.image_label.move(0, 0)

    @property
    def window_id(self):
        return int(self.winId())

    def fill(self, color):
        """Flat color fill"""
        r, g, b = color
        self.setStyleSheet(f"background-color: rgb({r}, {g}, {b});")

    def draw_image(self, path):
        """Image at its own size in the top-left corner"""
        pixmap = load_pixmap(path)
        self.image_label.setPixmap(pixmap)
        self.image_label.resize(pixmap.size())

    def close(self):
        self._closing = True
        return super().close()

    def event(self, e):
        if e.type() == QEvent.WindowActivate:
            self.queue.push(TakeFocus(self.window_id))
        return super().event(e)

    def mousePressEvent(self, e):
        button = _BUTTONS.get(e.button())
        if button is not None:
            self.queue.push(MouseButtonDown(self.window_id, button))
        e.accept()

    def closeEvent(self, e):
        if self._closing:
            e.accept()
            return
        # closed by the window manager
        self.queue.push(Quit())
        e.ignore()


class QtWindowFactory:
    def __init__(self, queue):
        self.queue = queue
        self._icons = {}

    def _icon(self, path):
        if path not in self._icons:
            self._icons[path] = QIcon(load_pixmap(path))
        return self._icons[path]

    def create(self, title, x, y, w, h, icon_path):
        icon = self._icon(icon_path)
        window = PestWindow(self.queue, title, x, y, w, h, icon)
        if not window.window_id:
            window.close()
            raise WindowError(f"no native window for {title!r}")
        window.show()
        return window
