import os
import secrets
import string
import time
from typing import Optional

from werkzeug.utils import secure_filename

ALLOWED_PAYMENT_FILE_TYPES = (
    'application/pdf',
    'image/png',
    'image/jpeg',
    'image/jpg',
)

CONTENT_TYPES_BY_EXTENSION = {
    '.pdf': 'application/pdf',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
}

_RANDOM_ALPHABET = string.ascii_lowercase + string.digits


def validate_payment_file(content_type: Optional[str], size: int, max_size: int) -> Optional[str]:
    """Return a user-facing error message, or None when the file is acceptable."""
    if content_type not in ALLOWED_PAYMENT_FILE_TYPES:
        return 'Nieobsługiwany typ pliku. Dozwolone formaty: PDF, PNG, JPG, JPEG'
    if size > max_size:
        return f'Plik jest za duży. Maksymalny rozmiar to {max_size // (1024 * 1024)}MB'
    return None


def generate_file_name(original_name: str, now_ms: Optional[int] = None) -> str:
    """``<ms timestamp>-<random>-<safe base name><ext>``."""
    safe = secure_filename(original_name or '') or 'file'
    base, extension = os.path.splitext(safe)
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    random_part = ''.join(secrets.choice(_RANDOM_ALPHABET) for _ in range(13))
    return f'{timestamp}-{random_part}-{base or "file"}{extension.lower()}'


def safe_segment(value: Optional[str]) -> str:
    """Sanitise a user id or file name used as a single path segment.

    Returns an empty string when nothing usable is left.
    """
    return secure_filename(value or '')


def content_type_for(file_name: str) -> str:
    extension = os.path.splitext(file_name)[1].lower()
    return CONTENT_TYPES_BY_EXTENSION.get(extension, 'application/octet-stream')
