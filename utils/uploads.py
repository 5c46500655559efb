"""
Image upload storage.
Saves uploaded guest images under UPLOAD_FOLDER and returns their stored path.
"""

import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from utils.helpers import allowed_file


def save_upload(file) -> str:
    """
    Save an uploaded image file.

    Args:
        file: werkzeug FileStorage from request.files

    Returns:
        Stored path, relative to the application root (forward slashes)

    Raises:
        ValueError: If the file extension is not an allowed image type
    """
    allowed = current_app.config.get('ALLOWED_IMAGE_EXTENSIONS', set())
    if not allowed_file(file.filename, allowed):
        raise ValueError(f'Unsupported image type: {file.filename}')

    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)

    filename = f'{uuid.uuid4().hex}_{secure_filename(file.filename)}'
    file.save(os.path.join(upload_folder, filename))

    return f"{upload_folder.rstrip('/')}/{filename}"


def get_uploaded_paths(files, field_names) -> dict:
    """
    Save every uploaded file among field_names.

    Args:
        files: request.files (MultiDict) or None
        field_names: Upload field names to look for

    Returns:
        Dict of field name -> stored path, only for fields with a file
    """
    paths = {}
    if not files:
        return paths

    for field in field_names:
        file = files.get(field)
        if file and file.filename:
            paths[field] = save_upload(file)
            current_app.logger.debug(f'Stored upload {field} at {paths[field]}')

    return paths
