from datetime import datetime, timedelta
from app import create_app
from models import db
from models.user import User
from models.order import Order
from models.rating import Rating


def create_database(reset=False):
    app = create_app()
    with app.app_context():
        if reset:
            # حذف جميع الجداول الموجودة
            db.drop_all()
            print("تم حذف قاعدة البيانات القديمة")

        # إنشاء جميع الجداول
        db.create_all()
        print("تم إنشاء قاعدة البيانات")

        if User.query.filter_by(username='admin').first():
            print("✅ البيانات الافتراضية موجودة بالفعل")
            return

        admin_user = User(username='admin', full_name='مدير النظام', role='admin')
        admin_user.set_password('admin123')
        driver = User(username='driver', full_name='سائق تجريبي', role='driver',
                      phone='0600000001', phone_verified=True)
        driver.set_password('driver123')
        customer = User(username='customer', full_name='Client Démo', role='customer',
                        phone='0600000002')
        customer.set_password('customer123')
        db.session.add_all([admin_user, driver, customer])
        db.session.flush()

        # طلبات تجريبية
        now = datetime.now()
        orders = [
            Order(client_id=customer.id, customer_name=customer.username, driver_id=driver.id,
                  status='delivered', points_cost=10, created_at=now - timedelta(hours=5),
                  delivered_at=now - timedelta(hours=3)),
            Order(client_id=customer.id, customer_name=customer.username, driver_id=driver.id,
                  status='accepted', points_cost=8),
            Order(customer_name=customer.username, status='pending', points_cost=5)
        ]
        db.session.add_all(orders)
        db.session.add(Rating(ratee_id=driver.id, rater_id=customer.id, score=4.5))

        # حفظ التغييرات
        db.session.commit()
        print("تم إضافة البيانات الافتراضية")
        print("بيانات تسجيل الدخول: admin / admin123")


if __name__ == '__main__':
    create_database()
