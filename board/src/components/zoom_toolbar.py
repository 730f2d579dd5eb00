"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QComboBox
from PyQt5.QtCore import pyqtSignal

from constants import MIN_ZOOM, MAX_ZOOM


class ZoomToolbar(QWidget):
	"""Toolbar with zoom in/out buttons and zoom level dropdown"""
	
	zoom_changed = pyqtSignal(int)  # Emits zoom percentage
	zoom_in_requested = pyqtSignal()
	zoom_out_requested = pyqtSignal()
	zoom_reset_requested = pyqtSignal()
	
	# Standard zoom presets
	ZOOM_PRESETS = [10, 25, 50, 75, 100, 150, 200, 300, 400, 500]
	
	def __init__(self, parent=None):
		super().__init__(parent)
		
		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)
		
		# Zoom out button
		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
		self.zoom_out_btn.clicked.connect(self.zoom_out_requested.emit)
		layout.addWidget(self.zoom_out_btn)
		
		# Zoom level dropdown
		self.zoom_combo = QComboBox()
		self.zoom_combo.setEditable(False)
		self.zoom_combo.setMinimumWidth(80)
		for preset in self.ZOOM_PRESETS:
			self.zoom_combo.addItem(f"{preset}%", preset)
		self.zoom_combo.setCurrentIndex(self.ZOOM_PRESETS.index(100))
		self.zoom_combo.currentIndexChanged.connect(self._on_combo_changed)
		layout.addWidget(self.zoom_combo)
		
		# Zoom in button
		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In (Ctrl++)")
		self.zoom_in_btn.clicked.connect(self.zoom_in_requested.emit)
		layout.addWidget(self.zoom_in_btn)
		
		# Reset button
		self.zoom_reset_btn = QToolButton()
		self.zoom_reset_btn.setText("1:1")
		self.zoom_reset_btn.setToolTip("Reset View (Ctrl+0)")
		self.zoom_reset_btn.clicked.connect(self.zoom_reset_requested.emit)
		layout.addWidget(self.zoom_reset_btn)
		
		self.setLayout(layout)
	
	def _on_combo_changed(self, index):
		"""Handle combo box selection change"""
		if index >= 0:
			self.zoom_changed.emit(self.zoom_combo.itemData(index))
	
	def set_zoom_percent(self, percent):
		"""Show the nearest preset for percent without emitting zoom_changed"""
		self.zoom_combo.blockSignals(True)
		for i, preset in enumerate(self.ZOOM_PRESETS):
			if preset >= percent:
				self.zoom_combo.setCurrentIndex(i)
				break
		else:
			self.zoom_combo.setCurrentIndex(len(self.ZOOM_PRESETS) - 1)
		self.zoom_combo.blockSignals(False)
		self.zoom_in_btn.setEnabled(percent < int(MAX_ZOOM * 100))
		self.zoom_out_btn.setEnabled(percent > int(MIN_ZOOM * 100))
	
	def get_zoom_percent(self):
		"""Get current zoom percentage"""
		return self.zoom_combo.currentData()
