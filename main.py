from flask import Flask
from werkzeug.exceptions import HTTPException
import logging

from config import LOG_LEVEL, PORT
from routes.resize import resize_bp

# ✅ Setup logging
logging.basicConfig(level=LOG_LEVEL)

app = Flask(__name__)

# === Global Health and Error Routes ===
@app.route("/healthz", methods=["GET"])
def health():
    return "ok", 200

@app.errorhandler(Exception)
def handle_error(e):
    if isinstance(e, HTTPException):
        return e
    logging.error(f"Unhandled exception: {e}")
    return "An error occurred while processing the image.", 500, {"Content-Type": "text/plain"}

# === Register Blueprints ===
app.register_blueprint(resize_bp)


# === Launch ===
if __name__ == '__main__':
    logging.info(f"Server is running on http://localhost:{PORT}")
    app.run(host='0.0.0.0', port=PORT)
