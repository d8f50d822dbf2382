from flask import Flask
from .config import Config
from .extensions import cors, store
from .storage.collection import Collection, model
from .storage.json_store import Store


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Keep records in insertion-key order
    app.json.sort_keys = False

    # Extensions
    cors.init_app(app)

    # Storage
    store.set_base_dir(app.config["DATA_DIR"])
    store.connect()

    # Blueprints
    from .routes.collections_api import bp as collections_api

    app.register_blueprint(collections_api, url_prefix="/api")

    return app
