from flask import jsonify

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def ok(data=None, message="success", status=200):
    payload = {"status": "success", "message": message}
    if data is not None:
        payload["data"] = data
    return jsonify(payload), status


def error(message, status=400, code=None):
    return jsonify({
        "status": "error",
        "message": message,
        "code": code or status
    }), status


def validation_error_response(errors):
    return jsonify({
        "status": "error",
        "message": "Validation failed",
        "code": 400,
        "errors": errors,
    }), 400


def internal_error_response():
    return error(INTERNAL_ERROR_MESSAGE, status=500)
