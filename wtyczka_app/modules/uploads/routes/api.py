from flask import jsonify, request, send_from_directory

from ..logics.files import content_type_for
from ..services.upload_service import UploadService
from . import blueprint


@blueprint.route('/upload-local', methods=['POST'])
def upload_payment_confirmation():
    """Multipart form with ``file`` and ``userId``."""
    result = UploadService.store(request.files.get('file'), request.form.get('userId'))
    return jsonify(result)


@blueprint.route('/upload-local', methods=['DELETE'])
def delete_payment_confirmation():
    UploadService.delete(request.args.get('userId'), request.args.get('fileName'))
    return jsonify({'success': True})


@blueprint.route('/files/<user_id>/<file_name>', methods=['GET'])
def serve_payment_confirmation(user_id, file_name):
    directory = UploadService.locate(user_id, file_name)
    response = send_from_directory(
        directory,
        file_name,
        mimetype=content_type_for(file_name),
        as_attachment=True,
        download_name=file_name,
        max_age=31536000,
    )
    response.cache_control.private = True
    response.cache_control.public = False
    return response
