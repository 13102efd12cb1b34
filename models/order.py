from models import db
from datetime import datetime

ORDER_STATUSES = ('pending', 'accepted', 'picked_up', 'delivered', 'cancelled')
DRIVER_ACTIVE_STATUSES = ('accepted', 'picked_up')
CLIENT_ACTIVE_STATUSES = ('pending', 'accepted', 'picked_up')


# نموذج طلب التوصيل
class Order(db.Model):
    __tablename__ = 'orders'
    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    customer_name = db.Column(db.String(128), nullable=True)  # اسم العميل (للطلبات القديمة بدون حساب)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, accepted, picked_up, delivered, cancelled
    points_cost = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.now)
    delivered_at = db.Column(db.DateTime, nullable=True)

    # العلاقات
    client = db.relationship('User', foreign_keys=[client_id], backref='client_orders')
    driver = db.relationship('User', foreign_keys=[driver_id], backref='driver_orders')

    def __repr__(self):
        return f'<Order {self.id} {self.status}>'

    def is_active_for_driver(self):
        return self.status in DRIVER_ACTIVE_STATUSES

    def get_status_badge(self):
        from helpers.presentation import status_badge
        return status_badge(self.status)

    def get_status_icon(self):
        from helpers.presentation import status_icon
        return status_icon(self.status)
