"""Flask application factory for the SilenceCut panel."""

import random

from flask import Flask, jsonify

from silencecut.host import Host, MemoryHost
from silencecut.models import SequenceInfo
from silencecut.panel import Panel
from silencecut.rpc import Channel


def demo_sequence(duration: float = 120.0, fps: float = 30.0, audio_tracks: int = 1) -> SequenceInfo:
    return SequenceInfo(
        name="Sequence 01",
        duration=duration,
        fps=fps,
        audio_clip_counts=[1] * audio_tracks,
    )


def create_app(host: Host | None = None, rng: random.Random | None = None) -> Flask:
    app = Flask(__name__)
    app.config["HOST"] = host or MemoryHost(demo_sequence())
    app.config["PANEL"] = Panel(Channel(app.config["HOST"], rng=rng))

    from silencecut.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({"error": "Malformed request"}), 400

    return app
