"""Configuration management for the board window"""

import os
import json

from models.card import CanvasViewport
from utils.logger import loggerRaise


class ConfigMixin:
	"""Load/save of the board (viewport + cards) and window settings"""
	
	# Expected state variables (initialized in main class):
	# - config_dir, config_file: str
	# - store: CardStore
	# - board: BoardCanvas
	
	def _load_config(self):
		"""Load the last board from the config file"""
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
				self.store.load_dict(config.get('board', {}))
				self.board.set_viewport(CanvasViewport.from_dict(config.get('viewport', {})))
				geometry = config.get('window')
				if geometry:
					self.resize(geometry.get('width', self.width()), geometry.get('height', self.height()))
		except Exception as e:
			loggerRaise(e, "Error loading config")
	
	def _save_config(self):
		"""Save the board and window settings to the config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)
			
			config = {
				'viewport': self.board.viewport.to_dict(),
				'board': self.store.to_dict(),
				'window': {'width': self.width(), 'height': self.height()},
			}
			
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
