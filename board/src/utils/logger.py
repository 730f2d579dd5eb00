"""Global logging and error handling utilities"""
import sys
import logging
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None
_logger = logging.getLogger('Board')

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode
    
    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog
    
    In DEBUG_MODE:
        - Logs the message and raises (shows full traceback)
    
    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    message = user_message if user_message else str(e)
    if DEBUG_MODE:
        _logger.error("%s: %s", message, e)
        raise e

    _logger.error("%s\n%s", message, traceback.format_exc())
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("Error popup (no window): %s - %s", title, message)

    # Re-raise so application can handle it appropriately
    raise e
