"""Web UI routes for the SilenceCut panel."""

from flask import Blueprint, Response, current_app, jsonify, render_template, request

bp = Blueprint("web", __name__, template_folder="templates")


def _panel():
    return current_app.config["PANEL"]


@bp.route("/")
def index():
    return render_template("index.html", state=_panel().state())


@bp.route("/api/state")
def state():
    return jsonify(_panel().state())


@bp.route("/api/controls", methods=["POST"])
def set_controls():
    values = request.get_json(silent=True)
    if not isinstance(values, dict):
        return jsonify({"error": "Expected a JSON object of control values"}), 400

    try:
        _panel().set_controls(values)
    except KeyError as e:
        return jsonify({"error": e.args[0]}), 400
    except (TypeError, ValueError):
        return jsonify({"error": "Control values must be numbers"}), 400
    return jsonify(_panel().state())


@bp.route("/api/analyze", methods=["POST"])
def analyze():
    _panel().analyze()
    return jsonify(_panel().state())


@bp.route("/api/cut", methods=["POST"])
def cut():
    _panel().cut()
    return jsonify(_panel().state())


@bp.route("/api/evaluate", methods=["POST"])
def evaluate():
    expression = request.get_data(as_text=True)
    result = _panel().channel.evaluate(expression)
    return Response(result, mimetype="application/json")
