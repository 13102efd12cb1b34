from flask import Blueprint, render_template, redirect, url_for, session, jsonify
from flask_login import login_required, current_user
from routes.auth import admin_required
from helpers.flash import set_flash
from helpers.visitors import get_visitor_stats
from models.user import User
from models import db

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


@admin_bp.route('/users')
@login_required
@admin_required
def list_users():
    users = User.query.order_by(User.role, User.username).all()
    return render_template('admin/users.html', title='إدارة المستخدمين', users=users)


@admin_bp.route('/users/verify_phone/<int:user_id>', methods=['POST'])
@login_required
@admin_required
def toggle_phone_verified(user_id):
    user = User.query.get_or_404(user_id)
    if not user.phone:
        set_flash(session, 'warning', 'لا يوجد رقم هاتف لهذا المستخدم')
        return redirect(url_for('admin.list_users'))
    user.phone_verified = not user.phone_verified
    db.session.commit()
    set_flash(session, 'success', 'تم تحديث حالة توثيق الهاتف')
    return redirect(url_for('admin.list_users'))


@admin_bp.route('/users/toggle_active/<int:user_id>', methods=['POST'])
@login_required
@admin_required
def toggle_active(user_id):
    user = User.query.get_or_404(user_id)
    if user.id == current_user.id:
        set_flash(session, 'error', 'لا يمكنك تعطيل حسابك بنفسك!')
        return redirect(url_for('admin.list_users'))
    user.is_active = not user.is_active
    db.session.commit()
    set_flash(session, 'success', 'تم تحديث حالة الحساب')
    return redirect(url_for('admin.list_users'))


@admin_bp.route('/api/visitors')
@login_required
@admin_required
def api_visitors():
    return jsonify(get_visitor_stats())
