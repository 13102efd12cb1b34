import logging
from flask import Flask, render_template, request, session, g
from flask_login import LoginManager, login_required, current_user
from flask_babel import Babel
from config import Config
from models import db
from models.user import User
from models.order import Order
from helpers.locale import resolve_locale
from helpers.flash import get_flash
from helpers.visitors import track_visitor, get_visitor_stats
from helpers.stats import get_driver_stats, get_client_stats
from helpers import presentation

# Initialize extensions
login_manager = LoginManager()
babel = Babel()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    db.init_app(app)
    login_manager.init_app(app)
    # إعداد صفحة تسجيل الدخول الافتراضية
    login_manager.login_view = 'auth.login'
    login_manager.login_message = None

    def get_locale():
        return g.get('lang', app.config['BABEL_DEFAULT_LOCALE'])
    babel.init_app(app, locale_selector=get_locale)

    # Flask-Login user loader
    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @app.before_request
    def prepare_request():
        # اللغة واتجاه النص لكل طلب
        g.lang, g.dir = resolve_locale(session, request.args.get('lang'))
        if app.config.get('TRACK_VISITORS') and request.endpoint != 'static':
            user_id = current_user.id if current_user.is_authenticated else None
            track_visitor(request, user_id)

    @app.context_processor
    def inject_helpers():
        return {
            'get_flash': lambda: get_flash(session),
            'e': presentation.e,
            'format_rating': presentation.format_rating
        }

    # Register Blueprints
    from routes.auth import auth_bp
    app.register_blueprint(auth_bp)
    from routes.stats import stats_bp
    app.register_blueprint(stats_bp)
    from routes.profile import profile_bp
    app.register_blueprint(profile_bp)
    from routes.admin import admin_bp
    app.register_blueprint(admin_bp)

    # Dashboard route
    @app.route("/")
    @login_required
    def dashboard():
        context = {'user': current_user}
        if current_user.is_driver():
            context['driver_stats'] = get_driver_stats(current_user.id)
        elif current_user.is_customer():
            context['client_stats'] = get_client_stats(current_user.id, current_user.username)
        else:
            context['users_count'] = User.query.count()
            context['orders_count'] = Order.query.count()
            context['visitor_stats'] = get_visitor_stats()
        return render_template('dashboard.html', title='لوحة التحكم', **context)

    @app.template_filter('fmt_date')
    def fmt_date_filter(value):
        return presentation.fmt_date(value, g.get('lang', 'ar'))

    @app.template_filter('avatar_url')
    def avatar_url_filter(user):
        return presentation.get_avatar_url(user, app.config['MEDIA_ROOT'])

    app.add_template_filter(presentation.get_user_initials, 'initials')
    app.add_template_filter(presentation.get_avatar_color, 'avatar_color')
    app.add_template_filter(presentation.status_badge, 'status_badge')
    app.add_template_filter(presentation.status_icon, 'status_icon')
    app.add_template_filter(presentation.is_phone_verified, 'phone_verified')

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
