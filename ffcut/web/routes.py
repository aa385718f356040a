"""JSON routes: plan cuts over HTTP without running ffmpeg."""

from dataclasses import replace

from flask import Blueprint, jsonify, request

from ffcut.engine import plan
from ffcut.manifest import manifest_from_dict
from ffcut.tokens import collect_times

bp = Blueprint("api", __name__)


def _json_body() -> dict | None:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@bp.route("/api/health")
def health():
    return jsonify({"status": "ok"})


@bp.route("/api/tokens", methods=["POST"])
def tokens():
    data = _json_body()
    if data is None or not isinstance(data.get("args"), list):
        return jsonify({"error": "Body must be a JSON object with an 'args' list"}), 400

    pairs = collect_times([str(a) for a in data["args"]])
    return jsonify({"pairs": [list(p) for p in pairs]})


@bp.route("/api/plan", methods=["POST"])
def plan_cuts():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Body must be a JSON object"}), 400

    try:
        manifest = manifest_from_dict(data)
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    manifest.options = replace(manifest.options, dry_run=True)
    commands = plan(manifest)

    return jsonify({
        "parts": [
            {
                "number": c.number,
                "start": c.start_clock,
                "duration": c.duration_clock,
                "output": c.output_path,
                "command": c.command(),
            }
            for c in commands
        ]
    })
