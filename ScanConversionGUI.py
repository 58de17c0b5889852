import logging
import sys
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter
from PyQt5.QtWidgets import (QComboBox, QLabel, QPushButton, QSlider, QSpinBox,
                             QFormLayout, QHBoxLayout, QVBoxLayout, QWidget,
                             QApplication, QMessageBox)
from algorithms import InvalidParameter
from config import (WINDOW_TITLE, VISUALIZER_CANVAS, ALGORITHM_LABELS, DEFAULT_PARAMS,
                    SPEED_MIN_MS, SPEED_MAX_MS, LOG_LEVEL, LOG_FORMAT)
from player import QtScheduler
from renderer_qt import QImageSurface
from states import PlaybackState
from visualizer import AlgorithmVisualizer

# Config
PANEL_XPOS = 200
PANEL_YPOS = 100
MENU_WIDTH = 220
COORD_RANGE = (-2000, 2000)
RADIUS_RANGE = (0, 1000)
LINE_KEYS = ('x0', 'y0', 'x1', 'y1')
CIRCLE_KEYS = ('cx', 'cy', 'r')

# ----------------- Canvas -----------------

class CanvasWidget(QWidget):
    def __init__(self, surface):
        super().__init__()
        self.surface = surface
        self.setFixedSize(*surface.dimensions())

    def paintEvent(self, _):
        qp = QPainter(self)
        qp.drawImage(0, 0, self.surface.image)
        qp.end()

# ----------------- GUI -----------------

class ScanConversionGUI(QWidget):
    def __init__(self, scheduler=None):
        super().__init__()
        self.surface = QImageSurface(*VISUALIZER_CANVAS)
        self.visualizer = AlgorithmVisualizer(self.surface, scheduler or QtScheduler())
        self.visualizer.on_change = self.refresh
        self.canvas = CanvasWidget(self.surface)
        self.keys = list(ALGORITHM_LABELS)
        self.spins = {}
        self.rows = {}
        self.create_menu()
        self.sync_controls()
        self.setWindowTitle(WINDOW_TITLE)
        self.move(PANEL_XPOS, PANEL_YPOS)
        self.show()

    def create_menu(self):
        main_layout = QHBoxLayout()
        menu_layout = QVBoxLayout()

        menu_layout.addWidget(QLabel('Algorithm:'))
        self.algo_select = QComboBox(); self.algo_select.addItems(ALGORITHM_LABELS.values())
        self.algo_select.currentIndexChanged.connect(self.set_algorithm)
        menu_layout.addWidget(self.algo_select)

        form = QFormLayout()
        for key in LINE_KEYS + CIRCLE_KEYS:
            spin = QSpinBox()
            spin.setRange(*(RADIUS_RANGE if key == 'r' else COORD_RANGE))
            spin.setValue(DEFAULT_PARAMS[key])
            label = QLabel(f'{key}:')
            form.addRow(label, spin)
            self.spins[key] = spin
            self.rows[key] = (label, spin)
        menu_layout.addLayout(form)

        self.speed_label = QLabel()
        menu_layout.addWidget(self.speed_label)
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(SPEED_MIN_MS, SPEED_MAX_MS)
        self.speed_slider.valueChanged.connect(self.set_speed)
        menu_layout.addWidget(self.speed_slider)

        self.btn_start = QPushButton('Start', self); self.btn_start.clicked.connect(self.start); menu_layout.addWidget(self.btn_start)
        self.btn_pause = QPushButton('Pause', self); self.btn_pause.clicked.connect(self.toggle_pause); menu_layout.addWidget(self.btn_pause)
        btn_clear = QPushButton('Clear', self); btn_clear.clicked.connect(self.visualizer.clear); menu_layout.addWidget(btn_clear)
        btn_reset = QPushButton('Reset', self); btn_reset.clicked.connect(self.reset); menu_layout.addWidget(btn_reset)

        self.lbl_x = QLabel(); self.lbl_y = QLabel(); self.lbl_info = QLabel()
        self.lbl_info.setWordWrap(True)
        for lbl in (self.lbl_x, self.lbl_y, self.lbl_info):
            menu_layout.addWidget(lbl)
        menu_layout.addStretch(1)

        menu = QWidget(); menu.setLayout(menu_layout); menu.setFixedWidth(MENU_WIDTH)
        main_layout.addWidget(self.canvas)
        main_layout.addWidget(menu)
        self.setLayout(main_layout)

    def sync_controls(self):
        """Push visualizer state into the widgets without re-triggering handlers."""
        v = self.visualizer
        widgets = [self.algo_select, self.speed_slider] + list(self.spins.values())
        for w in widgets: w.blockSignals(True)
        self.algo_select.setCurrentIndex(self.keys.index(v.algorithm))
        self.speed_slider.setValue(int(v.speed))
        for key, spin in self.spins.items():
            spin.setValue(int(v.params[key]))
        for w in widgets: w.blockSignals(False)
        self.update_rows()
        self.refresh()

    def update_rows(self):
        circle = self.visualizer.algorithm == 'midpointCircle'
        for key, (label, spin) in self.rows.items():
            visible = (key in CIRCLE_KEYS) == circle
            label.setVisible(visible); spin.setVisible(visible)

    def set_algorithm(self, i):
        self.visualizer.set_algorithm(self.keys[i])
        self.update_rows()

    def set_speed(self, value):
        self.visualizer.set_speed(value)
        self.speed_label.setText(f'Animation delay: {value} ms')

    def start(self):
        params = {key: spin.value() for key, spin in self.spins.items()}
        try:
            self.visualizer.start(**params)
        except InvalidParameter as e:
            QMessageBox.warning(self, "Invalid input", str(e))
        self.refresh()

    def toggle_pause(self):
        if self.visualizer.state is PlaybackState.PAUSED:
            self.visualizer.resume()
        else:
            self.visualizer.pause()
        self.refresh()

    def reset(self):
        self.visualizer.reset()
        self.sync_controls()

    def refresh(self):
        r = self.visualizer.readout
        self.lbl_x.setText(f'X: {r.x}')
        self.lbl_y.setText(f'Y: {r.y}')
        self.lbl_info.setText(f'Info: {r.info}')
        self.speed_label.setText(f'Animation delay: {self.visualizer.speed} ms')
        paused = self.visualizer.state is PlaybackState.PAUSED
        self.btn_pause.setText('Resume' if paused else 'Pause')
        self.canvas.update()

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    gui = ScanConversionGUI()
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
