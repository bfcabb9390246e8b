"""
Application Initialization
==========================
This module wires the state store, the main window and the background loader,
then starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the application state (AppState).
2. Instantiates the Main Window (View), passing the state in.
3. Starts the table load; menu and chart are built once the data arrives.
"""
import logging
import sys

from birdabundance.app.application import create_app
from birdabundance.app.state import AppState
from birdabundance.config import DEFAULT_DATA_PATH
from birdabundance.logging_config import setup_logging
from birdabundance.view.main_window import MainWindow


def main() -> int:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every selection and render
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the state; it stays LOADING until the table arrives
    state = AppState()

    # 4. Initialize the Main Window, passing the state
    window = MainWindow(state)
    window.show()

    # 5. Load data in the background
    window.start_loading(DEFAULT_DATA_PATH)

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
