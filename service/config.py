"""
Global Configuration for Application
"""
import os

# Project root: the directory holding the `service` package
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Location of the XML file that holds the stocks collection
STOCKS_FILE = os.getenv("STOCKS_FILE", os.path.join(BASE_DIR, "Dat", "dat.xml"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Secret for session management
SECRET_KEY = os.getenv("SECRET_KEY", "s3cr3t-key-shhhh")

# Port used when the app is started with `python wsgi.py`
PORT = int(os.getenv("PORT", "3000"))
