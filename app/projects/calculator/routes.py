"""
Calculator - web front end for the calculator state machine.
The page sends button clicks and key presses to the JSON API and renders the
display text it gets back. State lives in the user's Flask session.
"""
import logging

from flask import Blueprint, jsonify, render_template, request, session

from app.projects.calculator.core.events import InvalidEventError, InputEvent
from app.projects.calculator.core.session import CalculatorSession
from app.projects.registry import get_project_by_id
from app.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

PROJECT_ID = "calculator"
SESSION_KEY = "calculator_state"
# Browsers drop cookies over about 4 KB, which resets the calculator
COOKIE_DISPLAY_WARN_CHARS = 3000

calculator_bp = Blueprint(
    "calculator",
    __name__,
    template_folder="templates",
    url_prefix="/calculator",
)


def _load_calculator():
    # A fresh CalculatorSession per request; its lock does not span requests.
    # Request ordering comes from the page, which sends one event at a time.
    return CalculatorSession.from_dict(session.get(SESSION_KEY))


def _save_calculator(calculator):
    if len(calculator.display) > COOKIE_DISPLAY_WARN_CHARS:
        logger.warning(
            f"Calculator display is {len(calculator.display)} chars; "
            "the session cookie may be dropped by the browser"
        )
    session[SESSION_KEY] = calculator.to_dict()


def _state_response(calculator, **extra):
    body = calculator.to_dict()
    body.update(extra)
    return jsonify(body)


def _json_body():
    """Request JSON as a dict, or None when the body is missing/malformed."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@calculator_bp.route("/")
def index():
    """Display the calculator"""
    project = get_project_by_id(PROJECT_ID)
    log_project_visit(PROJECT_ID, project["name"])
    calculator = _load_calculator()
    return render_template("calculator.html", project=project, display=calculator.display)


@calculator_bp.route("/api/state", methods=["GET"])
def api_state():
    return _state_response(_load_calculator())


@calculator_bp.route("/api/event", methods=["POST"])
def api_event():
    """Apply one input event. Body: {"type": "digit", "value": "7"}."""
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    try:
        event = InputEvent.from_payload(data)
    except InvalidEventError as e:
        logger.info(f"Rejected calculator event {data!r}: {e}")
        return jsonify({"error": str(e)}), 400

    calculator = _load_calculator()
    calculator.dispatch(event)
    _save_calculator(calculator)
    return _state_response(calculator)


@calculator_bp.route("/api/key", methods=["POST"])
def api_key():
    """Apply a raw key press. Keys with no calculator meaning are ignored."""
    data = _json_body()
    key = data.get("key") if data else None
    if not isinstance(key, str) or not key:
        return jsonify({"error": "Missing key"}), 400

    calculator = _load_calculator()
    if calculator.press_key(key) is None:
        return _state_response(calculator, ignored=True)
    _save_calculator(calculator)
    return _state_response(calculator, ignored=False)


@calculator_bp.route("/api/clear", methods=["POST"])
def api_clear():
    calculator = _load_calculator()
    calculator.reset()
    _save_calculator(calculator)
    return _state_response(calculator)
