# flatdoc/extensions.py
from flask_cors import CORS

from .storage.json_store import Store

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

# Shared store; the base directory is bound in create_app from DATA_DIR
store = Store()
