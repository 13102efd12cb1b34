import logging
import os
import time
from io import BytesIO

from PIL import Image
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.user import User

logger = logging.getLogger(__name__)

MAX_AVATAR_SIZE = 5 * 1024 * 1024
MIME_TO_EXT = {
    'image/jpeg': 'jpg',
    'image/png': 'png',
    'image/webp': 'webp'
}


def sniff_image_mime(data):
    """تحديد نوع الصورة من محتوى الملف وليس من اسمه"""
    if not data:
        return None
    try:
        with Image.open(BytesIO(data)) as img:
            return Image.MIME.get(img.format)
    except OSError:
        return None


def _failure(kind, code, error):
    return {'success': False, 'kind': kind, 'code': code, 'error': error}


def _remove_old_avatar(user_id, media_root):
    # حذف الصورة القديمة إن وجدت، والفشل هنا لا يوقف الرفع
    try:
        user = db.session.get(User, user_id)
        if user and user.avatar_url:
            old_path = os.path.join(media_root, user.avatar_url)
            if os.path.isfile(old_path):
                os.remove(old_path)
    except (OSError, SQLAlchemyError):
        logger.warning('Could not remove previous avatar for user %s', user_id, exc_info=True)


def upload_avatar(file, user_id, uploads_dir, media_root, max_size=MAX_AVATAR_SIZE):
    """رفع صورة شخصية جديدة للمستخدم

    يعيد قاموساً فيه success و path عند النجاح، أو kind و code و error عند
    الفشل. kind تكون validation لأخطاء الملف المرفوع و system لأخطاء التخزين.
    """
    if file is None or not file.filename:
        return _failure('validation', 'upload_error', 'Upload error')

    data = file.stream.read(max_size + 1)
    if len(data) > max_size:
        return _failure('validation', 'too_large', 'File too large (max 5MB)')

    mime = sniff_image_mime(data)
    if mime not in MIME_TO_EXT:
        return _failure('validation', 'invalid_type', 'Invalid file type')

    user_dir = os.path.join(uploads_dir, 'avatars', str(user_id))
    try:
        os.makedirs(user_dir, mode=0o755, exist_ok=True)
    except OSError:
        logger.exception('Failed to create avatar directory %s', user_dir)
        return _failure('system', 'mkdir_failed', 'Failed to create upload directory')

    _remove_old_avatar(user_id, media_root)

    filename = f'avatar_{int(time.time())}.{MIME_TO_EXT[mime]}'
    filepath = os.path.join(user_dir, filename)
    try:
        with open(filepath, 'wb') as f:
            f.write(data)
    except OSError:
        logger.exception('Failed to save avatar for user %s', user_id)
        return _failure('system', 'save_failed', 'Failed to save file')

    relative_path = os.path.relpath(filepath, media_root).replace(os.sep, '/')
    logger.info('Saved avatar for user %s at %s', user_id, relative_path)
    return {'success': True, 'path': relative_path}
