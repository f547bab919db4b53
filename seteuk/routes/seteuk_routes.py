"""
SeTeuk API routes.
Handles upload encoding, draft generation, status polling and retry.

Generation runs on a background thread; the page polls /api/status until
the state leaves LOADING.
"""
import logging
import threading
from flask import Blueprint, request, jsonify

from ..config import config, LENGTH_OPTIONS, ACCEPTED_UPLOAD_TYPES
from ..errors import ValidationError, InvalidTransitionError, SubmissionInProgressError
from ..models import parse_submission
from ..prompt_config import DEFAULT_EMPHASIS_KEYWORD, GENERATION_ERROR_MESSAGE
from ..services import gemini_service
from ..services.file_reader import read_uploads, file_kind

logger = logging.getLogger(__name__)

seteuk_bp = Blueprint('seteuk', __name__)

# Set by app.py during initialization
draft_state = None


def init_seteuk_routes(state_ref):
    """Initialize routes with the shared DraftState from the main app."""
    global draft_state
    draft_state = state_ref


def run_generation(state, submission):
    """
    Generate one draft and record the outcome on state.

    Every failure of the call (ServiceError, SchemaError or anything the
    SDK raises) ends in ERROR with the generic message.
    """
    try:
        result = gemini_service.generate_seteuk(submission)
    except Exception:
        logger.exception("SeTeuk generation failed")
        state.fail(GENERATION_ERROR_MESSAGE)
        return
    state.succeed(result)
    logger.info("SeTeuk draft generated (%d chars)", len(result.draft))


@seteuk_bp.route('/api/options')
def get_options():
    """Form options: length labels, accepted upload types, keyword fallback."""
    return jsonify({
        "length_options": LENGTH_OPTIONS,
        "default_length_option": LENGTH_OPTIONS[0],
        "accepted_upload_types": ACCEPTED_UPLOAD_TYPES,
        "default_emphasis_keyword": DEFAULT_EMPHASIS_KEYWORD,
        "model": config.to_dict(),
    })


@seteuk_bp.route('/api/files', methods=['POST'])
def upload_files():
    """Read and base64-encode uploaded files so the page can attach them to a submission."""
    storages = request.files.getlist('files')
    if not storages:
        return jsonify({"error": "No files uploaded"}), 400

    uploaded = read_uploads(storages)
    return jsonify({
        "files": [
            dict(f.model_dump(by_alias=True), kind=file_kind(f.mime_type))
            for f in uploaded
        ]
    })


@seteuk_bp.route('/api/generate', methods=['POST'])
def generate():
    """Validate a submission and start generating a draft."""
    if draft_state is None:
        return jsonify({"error": "SeTeuk routes not initialized"}), 500

    try:
        submission = parse_submission(request.get_json(silent=True))
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        draft_state.begin(submission.length_option)
    except SubmissionInProgressError as e:
        return jsonify({"error": str(e)}), 409

    thread = threading.Thread(target=run_generation, args=(draft_state, submission), daemon=True)
    thread.start()

    return jsonify({"status": "started"}), 202


@seteuk_bp.route('/api/status')
def get_status():
    """Current state, error message and rendered result."""
    if draft_state is None:
        return jsonify({"error": "SeTeuk routes not initialized"}), 500
    return jsonify(draft_state.to_dict())


@seteuk_bp.route('/api/retry', methods=['POST'])
def retry():
    """Return from ERROR to IDLE so the teacher can submit again."""
    if draft_state is None:
        return jsonify({"error": "SeTeuk routes not initialized"}), 500
    try:
        draft_state.reset()
    except InvalidTransitionError as e:
        return jsonify({"error": str(e)}), 409
    return jsonify(draft_state.to_dict())
