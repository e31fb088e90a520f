"""
Demo Window
===========
Shows a few styled `Division` widgets side by side.

Usage:
    $ python -m division
"""
import logging
import sys

from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QWidget

from division.format.color import rgba
from division.logging_config import setup_logging
from division.qt import Division
from division.style import StyleClass


def build_demo() -> QWidget:
    card = (
        StyleClass()
        .width(180)
        .height(120)
        .padding(all=16)
        .margin(all=20)
        .border_radius(all=16)
        .background_color('#ffffff')
        .elevation(12, color=rgba(0, 0, 0, 1.0))
        .align_child('center')
    )
    gradient = (
        StyleClass()
        .add(card)
        .linear_gradient(colors=['#5e60ce', '#48bfe3'], begin_align='topLeft', end_align='bottomRight')
        .rotate(0.02)
    )
    outlined = (
        StyleClass()
        .add(card)
        .background_color('#f5f5f5')
        .border(all=2, color='#5e60ce')
    )

    window = QWidget()
    window.setWindowTitle("division")
    layout = QHBoxLayout(window)
    for style, text in ((card, "Card"), (gradient, "Gradient"), (outlined, "Outlined")):
        layout.addWidget(Division(style, QLabel(text)))
    return window


def main() -> None:
    setup_logging(level=logging.DEBUG)

    app = QApplication(sys.argv)
    app.setApplicationName("division")

    window = build_demo()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
