"""Resize handle widget shown on the selected card.

The handle knows how to draw itself, where it sits on its card and which
cursor it shows. It has no gesture logic of its own; the ResizeHandler
binds a press filter to it.
"""

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor
from PyQt5.QtWidgets import QWidget

from constants import RESIZE_HANDLE_SIZE


class ResizeHandle(QWidget):
    """Bottom-right square handle, a child of the card element."""

    def __init__(self, card_element, size=RESIZE_HANDLE_SIZE):
        super().__init__(card_element)
        self.setObjectName('resizeHandle')
        self.handle_size = size
        self.setFixedSize(size, size)
        self.setCursor(self.get_cursor())
        self.reposition()

    def get_cursor(self):
        """Diagonal resize cursor for the bottom-right corner."""
        return Qt.SizeFDiagCursor

    def reposition(self):
        """Pin the handle to the parent's bottom-right corner."""
        parent = self.parentWidget()
        if parent is None:
            return
        self.move(parent.width() - self.handle_size, parent.height() - self.handle_size)
        self.raise_()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(QPen(QColor(255, 255, 255), 1))
        painter.setBrush(QBrush(QColor(90, 141, 191)))
        painter.drawRect(QRectF(0.5, 0.5, self.handle_size - 1, self.handle_size - 1))
