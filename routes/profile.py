import logging
from flask import Blueprint, render_template, redirect, url_for, session, jsonify, current_app
from flask_login import login_required, current_user
from forms.profile_forms import AvatarForm
from helpers.avatar import upload_avatar
from helpers.flash import set_flash, get_flash
from models import db

logger = logging.getLogger(__name__)

profile_bp = Blueprint('profile', __name__, url_prefix='/profile')


def save_avatar(user, file):
    """رفع الصورة وحفظ مسارها في حساب المستخدم"""
    result = upload_avatar(
        file,
        user.id,
        current_app.config['UPLOADS_DIR'],
        current_app.config['MEDIA_ROOT'],
        max_size=current_app.config.get('MAX_AVATAR_SIZE', 5 * 1024 * 1024)
    )
    if result['success']:
        user.avatar_url = result['path']
        db.session.commit()
    return result


@profile_bp.route('/avatar', methods=['GET', 'POST'])
@login_required
def avatar():
    form = AvatarForm()
    if form.validate_on_submit():
        result = save_avatar(current_user, form.avatar.data)
        if result['success']:
            set_flash(session, 'success', 'تم تحديث الصورة الشخصية بنجاح')
            return redirect(url_for('profile.avatar'))
        logger.info('Avatar upload rejected for user %s: %s', current_user.id, result['code'])
        set_flash(session, 'error', result['error'])
    return render_template('profile/avatar.html', title='الصورة الشخصية', form=form)


@profile_bp.route('/api/avatar', methods=['POST'])
@login_required
def api_avatar():
    form = AvatarForm()
    if not form.validate_on_submit():
        return jsonify({'success': False, 'kind': 'validation', 'code': 'upload_error',
                        'error': 'Upload error', 'errors': form.errors}), 400
    result = save_avatar(current_user, form.avatar.data)
    if result['success']:
        return jsonify(result)
    status = 400 if result['kind'] == 'validation' else 500
    return jsonify(result), status


@profile_bp.route('/flash')
@login_required
def flash_message():
    return jsonify({'flash': get_flash(session)})
