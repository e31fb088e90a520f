"""
The Qt layer renders `StyleClass` objects with PySide6.
Importing it requires PySide6; the rest of the package does not.
"""
from division.qt.widget import Division

__all__ = ["Division"]
