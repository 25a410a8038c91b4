#!/usr/bin/env python3
"""
Gesture Recognizer - Main Entry Point
Opens the drawing window for adding and recognizing gestures.
"""

import logging

from gesture_recognizer.app.drawing_app import GestureApp
from gesture_recognizer.app.session import GestureSession
from gesture_recognizer.config.settings import AppConfig
from gesture_recognizer.utils.logger import GestureLogger


def main():
    """Main entry point for the gesture recognizer."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    session = GestureSession(gesture_logger=GestureLogger(AppConfig.DEBUG_LOG_FILE))
    app = GestureApp(session)

    try:
        app.run()
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        app.close()

if __name__ == "__main__":
    main()
