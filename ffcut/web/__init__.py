"""Flask application factory for the ffcut planning API."""

from flask import Flask, jsonify

from ffcut.errors import ExternalToolError, FFCutError, FilesystemError


def create_app() -> Flask:
    app = Flask(__name__)

    from ffcut.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(FilesystemError)
    def filesystem_error(error):
        return jsonify({"error": str(error)}), 404

    @app.errorhandler(ExternalToolError)
    def tool_error(error):
        return jsonify({"error": str(error)}), 502

    @app.errorhandler(FFCutError)
    def cut_error(error):
        return jsonify({"error": str(error)}), 400

    return app
