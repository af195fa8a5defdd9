import logging

from flask import Flask, jsonify, request

from api.config import Settings
from articulation import AnalysisConfig, analyze, generate_feedback
from articulation.errors import ArticulationError
from articulation.utils.logger import get_logger

logger = get_logger("articulation.api")
logging.getLogger("articulation").setLevel(Settings.LOG_LEVEL)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = Settings.MAX_CONTENT_LENGTH


@app.errorhandler(ArticulationError)
def handle_articulation_error(e):
    return jsonify({"error": e.code, "detail": str(e)}), 400


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "service": "articulation"})


@app.route("/analyze", methods=["POST"])
def analyze_reading():
    """Analyze a read-aloud attempt.

    Body (JSON):
        referenceText: text the learner was asked to read
        transcription: {text, words: [{word, start, end, confidence?}], language, duration}
        audioDurationMs: recording length in milliseconds
        config: optional threshold overrides
        includeFeedback: also return learner-facing feedback
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "invalid_input", "detail": "Expected a JSON object body"}), 400

    config = AnalysisConfig.from_dict(payload.get("config"))
    try:
        result = analyze(
            payload.get("referenceText"),
            payload.get("transcription"),
            payload.get("audioDurationMs"),
            config=config,
        )
    except ArticulationError:
        raise
    except Exception:
        logger.exception("Unexpected failure while analyzing reading")
        return jsonify({"error": "internal_error"}), 500

    response = result.to_dict()
    if payload.get("includeFeedback"):
        response["feedback"] = generate_feedback(result).to_dict()
    return jsonify(response)


if __name__ == "__main__":
    app.run(host=Settings.HOST, port=Settings.PORT, debug=Settings.DEBUG)
