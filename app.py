"""
Main application module for the MusicXML metadata service.

This module sets up the Flask application that exposes metadata extraction
from MusicXML 3.0 documents over HTTP.
"""

from flask import Flask, request, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
from datetime import datetime
import logging
import traceback
import os
import sys
import platform
import uuid
import psutil

from musicxml_meta import config
from musicxml_meta.exceptions import MusicXMLParserError
from musicxml_meta.parser import MusicXMLParser

# Configure logging
config.configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Add ProxyFix middleware for proper handling of proxy headers
app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

app.secret_key = config.SECRET_KEY
app.config['MAX_CONTENT_LENGTH'] = config.MAX_UPLOAD_BYTES

parser = MusicXMLParser()
logger.info("MusicXML parser initialized")


@app.route("/")
def home():
    """Serve the banner."""
    return "MusicXML Metadata Service", 200


@app.route("/metadata", methods=["POST"])
def metadata():
    """Extract metadata from an uploaded MusicXML file or raw request body."""
    if "file" in request.files:
        file = request.files["file"]
        if file.filename == '':
            return jsonify({"status": "error", "message": "No file selected"}), 400
        logger.info(f"File received: {file.filename}, content_type: {file.content_type}")
        data = file.read()
    else:
        data = request.get_data()

    if not data:
        return jsonify({"status": "error", "message": "No file or XML data provided"}), 400

    logger.info(f"Received metadata extraction request, {len(data)} bytes")
    try:
        model = parser.parse(data)
    except MusicXMLParserError as e:
        logger.warning(f"Metadata extraction failed: {str(e)}")
        return jsonify({
            "status": "error",
            "message": str(e),
            "error_type": e.__class__.__name__
        }), 400

    return jsonify({
        "status": "success",
        "metadata": model.to_dict()
    })


@app.route("/health")
def health_check():
    """Health check endpoint."""
    process = psutil.Process()
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "components": {
            "parser": parser is not None
        },
        "system": {
            "python_version": sys.version,
            "platform": platform.platform(),
            "memory_usage": process.memory_info().rss / 1024 / 1024,  # MB
            "cpu_usage": process.cpu_percent()
        }
    })


@app.errorhandler(400)
def bad_request(e):
    """Handle 400 Bad Request errors."""
    logger.warning(f"Bad Request: {str(e)}")
    return jsonify({"status": "error", "message": "Bad request"}), 400


@app.errorhandler(404)
def not_found(e):
    """Handle 404 Not Found errors."""
    logger.warning(f"Not Found: {request.path}")
    return jsonify({
        "status": "error",
        "message": "Resource not found",
        "path": request.path
    }), 404


@app.errorhandler(413)
def payload_too_large(e):
    """Handle 413 Request Entity Too Large errors."""
    logger.warning(f"Upload rejected, limit is {app.config['MAX_CONTENT_LENGTH']} bytes")
    return jsonify({
        "status": "error",
        "message": "Uploaded document is too large",
        "limit_bytes": app.config['MAX_CONTENT_LENGTH']
    }), 413


@app.errorhandler(500)
def server_error(e):
    """Handle 500 Internal Server Error."""
    logger.error(f"Server Error: {str(e)}")
    logger.error(traceback.format_exc())
    return jsonify({
        "status": "error",
        "message": "Internal server error",
        "error_id": str(uuid.uuid4())
    }), 500


@app.after_request
def after_request(response):
    """Add response headers after each request."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Request-ID'] = request.headers.get('X-Request-ID', str(uuid.uuid4()))
    return response


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    debug = os.environ.get("DEBUG", "False").lower() == "true"

    logger.info(f"Starting server on port {port}, debug={debug}")
    app.run(host="0.0.0.0", port=port, debug=debug)
