import os

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your_secret_key_here'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///delivery.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BABEL_DEFAULT_LOCALE = 'ar'
    LANGUAGES = ('ar', 'fr')

    # مسارات رفع الصور الشخصية
    MEDIA_ROOT = os.environ.get('MEDIA_ROOT') or os.path.join(basedir, 'static')
    UPLOADS_DIR = os.environ.get('UPLOADS_DIR') or os.path.join(MEDIA_ROOT, 'uploads')
    MAX_AVATAR_SIZE = 5 * 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    TRACK_VISITORS = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = 'DEBUG'
