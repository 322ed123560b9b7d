"""
Loading Spinner Widget - Animated growing/shrinking arc indicator

PURPOSE: Provide visual feedback during async operations.
CONTEXT: Draws the arc described by SpinnerMotionModel; a QTimer requests a
         repaint every frame and a QElapsedTimer is the animation clock.
"""
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import QElapsedTimer, QRectF, QSize, QTimer, Qt
from PySide6.QtGui import QColor, QPainter, QPen

from config import (
    DEFAULT_MAX_ANGLE,
    DEFAULT_MIN_ANGLE,
    DEFAULT_ROTATION_SPEED_MULTIPLIER,
    DEFAULT_SPINNER_SIZE,
    DEFAULT_SWEEP_TIME_MILLIS,
    FRAME_INTERVAL_MS,
)
from core.spinner_motion import SpinnerFrame, SpinnerMotionModel
from ui.theme import ColorPalette
from utils.logger import get_logger

logger = get_logger()

# Qt measures arc angles in 1/16 degree
QT_ANGLE_UNITS = 16


class LoadingSpinner(QWidget):
    """
    Animated arc spinner

    WHY: The arc grows, holds, shrinks and spins independently, which reads as
         "busy" without any text.
    """

    def __init__(
        self,
        parent=None,
        size: float = DEFAULT_SPINNER_SIZE,
        color: Optional[str] = None,
        stroke_width: Optional[float] = None,
        sweep_time_millis: int = DEFAULT_SWEEP_TIME_MILLIS,
        rotation_speed_multiplier: float = DEFAULT_ROTATION_SPEED_MULTIPLIER,
        min_angle: float = DEFAULT_MIN_ANGLE,
        max_angle: float = DEFAULT_MAX_ANGLE,
    ):
        super().__init__(parent)

        # Qt paints in logical pixels, so no extra density scaling here
        self.model = SpinnerMotionModel(
            size=size,
            color=color or ColorPalette.ACCENT_PRIMARY,
            stroke_width=stroke_width,
            sweep_time_millis=sweep_time_millis,
            rotation_speed_multiplier=rotation_speed_multiplier,
            min_angle=min_angle,
            max_angle=max_angle,
        )
        self._color = QColor(self.model.config.color)

        # Animation clock
        self._clock = QElapsedTimer()

        # Timer for repaints
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update)
        self.timer.setInterval(FRAME_INTERVAL_MS)

        self.setAttribute(Qt.WA_TranslucentBackground)
        self._apply_size()

    def _apply_size(self):
        side = round(self.model.geometry.canvas_size_pixels)
        self.setFixedSize(side, side)

    def sizeHint(self) -> QSize:
        side = round(self.model.geometry.canvas_size_pixels)
        return QSize(side, side)

    def start(self):
        """Start the spinner animation"""
        if not self.timer.isActive():
            self._clock.start()
            self.timer.start()
        self.show()

    def stop(self):
        """Stop the spinner animation"""
        self.timer.stop()
        self._clock.invalidate()
        self.hide()

    def is_running(self) -> bool:
        return self.timer.isActive()

    def set_color(self, color: str):
        """Set arc color (#RRGGBB or #AARRGGBB)"""
        self.model.reconfigure(color=color)
        self._color = QColor(color)
        self.update()

    def reconfigure(self, **changes):
        """Change spinner parameters; the animation restarts from the cycle start"""
        self.model.reconfigure(**changes)
        self._color = QColor(self.model.config.color)
        self._apply_size()
        if self._clock.isValid():
            self._clock.restart()
        self.update()

    def elapsed_millis(self) -> int:
        return self._clock.elapsed() if self._clock.isValid() else 0

    def current_frame(self) -> SpinnerFrame:
        """Angles for the frame that would be painted now"""
        return self.model.frame_at(self.elapsed_millis())

    def paintEvent(self, event):
        frame = self.current_frame()
        geometry = self.model.geometry

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        # Extra rotation spins the whole arc around the canvas center
        center_x, center_y = geometry.center
        painter.translate(center_x, center_y)
        painter.rotate(frame.extra_rotate_angle)
        painter.translate(-center_x, -center_y)

        pen = QPen(self._color)
        pen.setWidthF(geometry.stroke_width_pixels)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)

        left, top = geometry.top_left
        width, height = geometry.arc_size

        # Qt angles run counter-clockwise, the model's run clockwise
        painter.drawArc(
            QRectF(left, top, width, height),
            round(-frame.start_angle * QT_ANGLE_UNITS),
            round(-frame.sweep_angle * QT_ANGLE_UNITS),
        )
        painter.end()
