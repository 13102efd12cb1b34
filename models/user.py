from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from datetime import datetime
from models import db


# نموذج المستخدم
class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='customer')  # admin, driver, customer
    full_name = db.Column(db.String(128), nullable=True)  # الاسم الكامل
    phone = db.Column(db.String(20), nullable=True)  # رقم الهاتف
    phone_verified = db.Column(db.Boolean, default=False)
    avatar_url = db.Column(db.String(255), nullable=True)  # مسار نسبي للصورة الشخصية
    is_active = db.Column(db.Boolean, default=True)  # حالة الحساب
    created_at = db.Column(db.DateTime, default=datetime.now)

    def __repr__(self):
        return f'<User {self.username}>'

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def is_admin(self):
        return self.role == 'admin'

    def is_driver(self):
        return self.role == 'driver'

    def is_customer(self):
        return self.role == 'customer'

    def get_display_name(self):
        return self.full_name or self.username
