import io
import logging

from PIL import Image, ImageEnhance, ImageOps, UnidentifiedImageError

from config import (
    ASPECT_RATIO,
    COLOR_ADJUSTMENTS,
    JPEG_QUALITY,
    NORMALIZE_CUTOFF,
    OUTPUT_WIDTH,
)
from services.errors import DecodeError, EncodeError
from services.resize_options import ResizeOption, strategy_for


def target_dimensions(output_width=OUTPUT_WIDTH, aspect_ratio=ASPECT_RATIO):
    return output_width, round(output_width / aspect_ratio)


# ------------------------------- #
#        Geometry helpers         #
# ------------------------------- #
def scaled_size(source_size, target_size, fit, without_enlargement=True):
    """
    Size the source is resized to before any crop.

    cover  -> both sides at least the target (overflow is cropped later)
    inside -> both sides at most the target
    """
    src_w, src_h = source_size
    tgt_w, tgt_h = target_size
    scale_w = tgt_w / src_w
    scale_h = tgt_h / src_h
    scale = max(scale_w, scale_h) if fit == "cover" else min(scale_w, scale_h)

    if without_enlargement and scale >= 1:
        return src_w, src_h

    if scale == scale_w:
        return tgt_w, max(1, round(src_h * scale_w))
    return max(1, round(src_w * scale_h)), tgt_h


def crop_box(image, width, height, position):
    """
    Crop window for a cover resize. Horizontal overflow is always centred;
    `position` pins the vertical edge ("top", "bottom") or centres it.
    """
    img_w, img_h = image.size
    width, height = min(width, img_w), min(height, img_h)

    left = (img_w - width) // 2
    if position == "top":
        top = 0
    elif position == "bottom":
        top = img_h - height
    else:
        top = (img_h - height) // 2

    return left, top, left + width, top + height


def resize_to_target(image, target_size, strategy, without_enlargement=True):
    new_size = scaled_size(image.size, target_size, strategy.fit, without_enlargement)
    if new_size != image.size:
        image = image.resize(new_size, Image.Resampling.LANCZOS)

    # inside never overflows the target, so its position is never used
    if strategy.fit == "cover":
        box = crop_box(image, *target_size, strategy.position)
        if box != (0, 0) + image.size:
            image = image.crop(box)

    return image


# ------------------------------- #
#        Colour adjustment        #
# ------------------------------- #
def modulate(image, saturation=1.0, brightness=1.0, hue=0):
    """Saturation, then brightness, then a hue rotation in degrees."""
    image = ImageEnhance.Color(image).enhance(saturation)
    image = ImageEnhance.Brightness(image).enhance(brightness)

    if hue:
        # Pillow stores hue as 0-255 around the full circle
        offset = round(hue / 360 * 256)
        h, s, v = image.convert("HSV").split()
        h = h.point(lambda value: (value + offset) % 256)
        image = Image.merge("HSV", (h, s, v)).convert("RGB")

    return image


def normalize(image):
    return ImageOps.autocontrast(image, cutoff=NORMALIZE_CUTOFF, preserve_tone=True)


# ------------------------------- #
#          Entry point            #
# ------------------------------- #
def decode_image(image_bytes):
    """Decodes to an RGB copy; the source handle is closed before returning."""
    try:
        with Image.open(io.BytesIO(image_bytes)) as source:
            return source.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        logging.error(f"Decode failed: {e}")
        raise DecodeError(f"Not a readable image: {e}") from e


def encode_jpeg(image):
    out_buffer = io.BytesIO()
    try:
        image.save(out_buffer, format="JPEG", quality=JPEG_QUALITY)
    except (OSError, ValueError) as e:
        logging.error(f"Encode failed: {e}")
        raise EncodeError(f"Could not encode JPEG: {e}") from e
    return out_buffer.getvalue()


def transform(image_bytes, option=ResizeOption.FIT, output_width=OUTPUT_WIDTH, aspect_ratio=ASPECT_RATIO):
    """
    Resizes `image_bytes` toward a 16:9 frame using the strategy for `option`,
    applies the fixed colour pass and returns JPEG bytes.

    Unknown or missing options behave exactly like `fit`. No strategy ever
    enlarges the source beyond its native resolution.
    """
    target_size = target_dimensions(output_width, aspect_ratio)
    strategy = strategy_for(option)

    img = decode_image(image_bytes)
    original_size = img.size

    img = resize_to_target(img, target_size, strategy)
    img = modulate(img, **COLOR_ADJUSTMENTS)
    img = normalize(img)

    logging.info(
        f"Resized {original_size[0]}x{original_size[1]} → {img.width}x{img.height} "
        f"(fit={strategy.fit}, position={strategy.position})"
    )
    return encode_jpeg(img)
