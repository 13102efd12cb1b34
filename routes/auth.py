from flask import Blueprint, render_template, redirect, url_for, session, abort
from flask_login import login_user, logout_user, login_required, current_user
from functools import wraps
from forms.auth_forms import LoginForm
from helpers.flash import set_flash
from models.user import User

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


# ديكوريتور لفحص صلاحية الأدمن
def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.is_admin():
            set_flash(session, 'error', 'ليس لديك صلاحية الوصول لهذه الصفحة')
            return redirect(url_for('dashboard'))
        return f(*args, **kwargs)
    return decorated_function


def self_or_admin_required(user_id):
    """السماح للمستخدم ببياناته فقط، أو للأدمن بكل البيانات"""
    if not (current_user.is_admin() or current_user.id == user_id):
        abort(403)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('dashboard'))
    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(username=form.username.data).first()
        if user and user.is_active and user.check_password(form.password.data):
            login_user(user, remember=form.remember.data)
            set_flash(session, 'success', 'تم تسجيل الدخول بنجاح')
            return redirect(url_for('dashboard'))
        else:
            set_flash(session, 'error', 'اسم المستخدم أو كلمة المرور غير صحيحة')
    return render_template('auth/login.html', title='تسجيل الدخول', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    set_flash(session, 'success', 'تم تسجيل الخروج بنجاح')
    return redirect(url_for('auth.login'))
