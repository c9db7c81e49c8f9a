# routes/resize.py

import io
import logging

from flask import Blueprint, request, send_file

from api.image_fetcher import download_image
from services.errors import ImageServiceError, MissingParameterError
from services.image_transformer import transform

resize_bp = Blueprint('resize', __name__)

MISSING_PARAMS_MESSAGE = "Image URL and option are required"
PROCESSING_ERROR_MESSAGE = "An error occurred while processing the image."


@resize_bp.route('/resize', methods=['GET'])
def resize_image():
    image_url = request.args.get('imageUrl')
    option = request.args.get('option')

    try:
        # Both are required here even though the transformer defaults option to fit
        if not image_url or not option:
            raise MissingParameterError(MISSING_PARAMS_MESSAGE)

        logging.info(f"Resize requested: {image_url} (option={option})")
        image_bytes = download_image(image_url)
        resized = transform(image_bytes, option)

    except MissingParameterError as e:
        logging.warning(f"Rejected /resize request: {e}")
        return MISSING_PARAMS_MESSAGE, e.http_status, {'Content-Type': 'text/plain'}
    except ImageServiceError as e:
        logging.error(f"Error processing image ({type(e).__name__}): {e}")
        return PROCESSING_ERROR_MESSAGE, e.http_status, {'Content-Type': 'text/plain'}

    return send_file(io.BytesIO(resized), mimetype='image/jpeg')
