import os
from typing import Dict, Optional

from flask import current_app
from werkzeug.datastructures import FileStorage

from wtyczka_app.core.error_handlers import NotFoundError, PersistenceError, ValidationError
from wtyczka_app.core.signals import confirmation_file_changed
from ..logics.files import generate_file_name, safe_segment, validate_payment_file


class UploadService:
    """Local-disk storage for payment confirmation files."""

    @staticmethod
    def storage_root() -> str:
        return os.path.join(
            current_app.config['UPLOAD_FOLDER'],
            current_app.config.get('PAYMENT_UPLOAD_SUBDIR', 'payment-confirmations'),
        )

    @classmethod
    def user_dir(cls, user_id: str) -> str:
        return os.path.join(cls.storage_root(), user_id)

    @classmethod
    def store(cls, file: Optional[FileStorage], user_id: Optional[str]) -> Dict[str, object]:
        """
        Validate and write an uploaded confirmation.

        Returns the metadata the payment form attaches to the payment record.
        """
        safe_user = safe_segment(user_id)
        if file is None or not file.filename or not safe_user:
            raise ValidationError('Brak pliku lub ID użytkownika')

        content = file.read()
        error = validate_payment_file(
            file.mimetype,
            len(content),
            current_app.config.get('MAX_UPLOAD_SIZE', 5 * 1024 * 1024),
        )
        if error:
            raise ValidationError(error)

        file_name = generate_file_name(file.filename)
        target_dir = cls.user_dir(safe_user)
        try:
            os.makedirs(target_dir, exist_ok=True)
            with open(os.path.join(target_dir, file_name), 'wb') as handle:
                handle.write(content)
        except OSError as exc:
            current_app.logger.exception("Error uploading file locally")
            raise PersistenceError('Błąd podczas przesyłania pliku') from exc

        confirmation_file_changed.send(
            current_app._get_current_object(), user_id=safe_user, file_name=file_name, action='stored'
        )
        return {
            'url': f'/api/files/{safe_user}/{file_name}',
            'fileName': file_name,
            'fileSize': len(content),
            'fileType': file.mimetype,
        }

    @classmethod
    def delete(cls, user_id: Optional[str], file_name: Optional[str]) -> None:
        """Remove a stored file. Missing files are not an error."""
        safe_user = safe_segment(user_id)
        safe_name = safe_segment(file_name)
        if not safe_user or not safe_name:
            raise ValidationError('Brak ID użytkownika lub nazwy pliku')

        path = os.path.join(cls.user_dir(safe_user), safe_name)
        try:
            if os.path.exists(path):
                os.remove(path)
                confirmation_file_changed.send(
                    current_app._get_current_object(), user_id=safe_user, file_name=safe_name, action='deleted'
                )
        except OSError as exc:
            current_app.logger.exception("Error deleting file locally")
            raise PersistenceError('Błąd podczas usuwania pliku') from exc

    @classmethod
    def locate(cls, user_id: str, file_name: str) -> str:
        """Directory holding ``file_name`` for ``user_id``; raises NotFoundError."""
        safe_user = safe_segment(user_id)
        safe_name = safe_segment(file_name)
        if not safe_user or not safe_name or safe_name != file_name:
            raise NotFoundError('File not found')

        directory = cls.user_dir(safe_user)
        if not os.path.isfile(os.path.join(directory, safe_name)):
            raise NotFoundError('File not found')
        return directory
