# csv_helper/csv_encoding.py
"""
CSV encoding detection

Decodes raw CSV bytes to text.
Uses BOM detection, the chardet library, and an encoding candidate list.
"""
import logging
from typing import Optional, Tuple

import chardet

from urlsheet.core.processor.csv_helper.csv_constants import (
    CHARDET_MIN_CONFIDENCE,
    CHARDET_SAMPLE_SIZE,
    ENCODING_CANDIDATES,
)

logger = logging.getLogger("urlsheet.csv.encoding")


def detect_bom(data: bytes) -> Optional[str]:
    """
    Detect a BOM (Byte Order Mark).

    Args:
        data: Raw bytes

    Returns:
        Encoding implied by the BOM, or None
    """
    if data.startswith(b'\xef\xbb\xbf'):
        return 'utf-8-sig'
    elif data.startswith(b'\xff\xfe\x00\x00'):
        return 'utf-32'
    elif data.startswith(b'\x00\x00\xfe\xff'):
        return 'utf-32'
    elif data.startswith(b'\xff\xfe'):
        return 'utf-16'
    elif data.startswith(b'\xfe\xff'):
        return 'utf-16'
    return None


def decode_csv_bytes(
    data: bytes,
    preferred_encoding: Optional[str] = None
) -> Tuple[str, str]:
    """
    Decode CSV bytes, detecting the encoding.

    Detection order:
    1. BOM
    2. Preferred encoding (if given)
    3. chardet (when confident enough)
    4. Encoding candidates in order
    5. latin-1 (accepts every byte)

    Args:
        data: Raw CSV bytes
        preferred_encoding: Encoding to try first after the BOM check

    Returns:
        (content, detected_encoding) tuple
    """
    bom_encoding = detect_bom(data)
    if bom_encoding:
        logger.debug(f"BOM detected: {bom_encoding}")
        try:
            return data.decode(bom_encoding), bom_encoding
        except UnicodeDecodeError:
            pass

    if preferred_encoding:
        try:
            return data.decode(preferred_encoding), preferred_encoding
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Preferred encoding {preferred_encoding} failed")

    if data:
        detected = chardet.detect(data[:CHARDET_SAMPLE_SIZE])
        detected_enc = detected.get('encoding') if detected else None
        if detected_enc:
            confidence = detected.get('confidence') or 0
            logger.debug(f"chardet detected: {detected_enc} (confidence: {confidence})")

            if confidence > CHARDET_MIN_CONFIDENCE:
                try:
                    return data.decode(detected_enc), detected_enc
                except (UnicodeDecodeError, LookupError):
                    pass

    for enc in ENCODING_CANDIDATES:
        try:
            content = data.decode(enc)
            logger.debug(f"Successfully decoded with: {enc}")
            return content, enc
        except UnicodeDecodeError:
            continue

    logger.warning("Could not detect CSV encoding, falling back to latin-1")
    return data.decode("latin-1"), "latin-1"


__all__ = [
    'detect_bom',
    'decode_csv_bytes',
]
