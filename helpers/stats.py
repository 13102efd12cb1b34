from datetime import datetime, timedelta

from sqlalchemy import func, or_

from models import db
from models.order import Order, DRIVER_ACTIVE_STATUSES, CLIENT_ACTIVE_STATUSES
from models.rating import Rating


def _day_range(now):
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def _week_range(now):
    # الأسبوع يبدأ يوم الأحد
    day_start, _ = _day_range(now)
    start = day_start - timedelta(days=(now.weekday() + 1) % 7)
    return start, start + timedelta(days=7)


def _month_range(now):
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    end = (start + timedelta(days=32)).replace(day=1)
    return start, end


def _delivered_by(driver_id):
    return db.session.query(Order).filter(
        Order.driver_id == driver_id,
        Order.status == 'delivered'
    )


def _earnings(driver_id, period=None):
    query = db.session.query(func.coalesce(func.sum(Order.points_cost), 0)).filter(
        Order.driver_id == driver_id,
        Order.status == 'delivered'
    )
    if period:
        start, end = period
        query = query.filter(Order.delivered_at >= start, Order.delivered_at < end)
    return query.scalar() or 0


def get_driver_stats(driver_id, now=None):
    """إحصائيات السائق للوحة التحكم (كل رقم باستعلام مستقل)"""
    now = now or datetime.now()
    today = _day_range(now)
    week = _week_range(now)
    month = _month_range(now)

    stats = {
        'total_orders': 0,
        'total_delivered': 0,
        'total_earnings': 0,
        'completed_today': 0,
        'earnings_today': 0,
        'earnings_week': 0,
        'earnings_month': 0,
        'this_month': 0,
        'orders_this_month': 0,
        'active_orders': 0,
        'rating': 5.0
    }

    # الطلبات المكتملة
    stats['total_orders'] = _delivered_by(driver_id).count()
    stats['total_delivered'] = stats['total_orders']

    # المكتملة اليوم وهذا الشهر
    stats['completed_today'] = _delivered_by(driver_id).filter(
        Order.delivered_at >= today[0], Order.delivered_at < today[1]
    ).count()
    stats['orders_this_month'] = _delivered_by(driver_id).filter(
        Order.delivered_at >= month[0], Order.delivered_at < month[1]
    ).count()

    # الأرباح (نقاط الطلبات المكتملة)
    stats['earnings_today'] = _earnings(driver_id, today)
    stats['earnings_week'] = _earnings(driver_id, week)
    stats['earnings_month'] = _earnings(driver_id, month)
    stats['this_month'] = stats['earnings_month']
    stats['total_earnings'] = _earnings(driver_id)

    stats['active_orders'] = count_active_orders(driver_id)

    # متوسط التقييم
    avg_rating = db.session.query(func.avg(Rating.score)).filter(
        Rating.ratee_id == driver_id
    ).scalar()
    if avg_rating is not None:
        stats['rating'] = round(float(avg_rating), 2)

    return stats


def get_client_stats(client_id, username, now=None):
    """إحصائيات العميل: يطابق الطلبات برقم العميل أو بالاسم القديم"""
    now = now or datetime.now()
    month_start, month_end = _month_range(now)

    # قيمة None لا تطابق أي طلب (وليس IS NULL)
    conditions = []
    if client_id is not None:
        conditions.append(Order.client_id == client_id)
    if username is not None:
        conditions.append(Order.customer_name == username)
    if not conditions:
        return {'total_orders': 0, 'active': 0, 'delivered': 0, 'this_month': 0}

    def client_orders():
        return Order.query.filter(or_(*conditions))

    return {
        'total_orders': client_orders().count(),
        'active': client_orders().filter(Order.status.in_(CLIENT_ACTIVE_STATUSES)).count(),
        'delivered': client_orders().filter(Order.status == 'delivered').count(),
        'this_month': client_orders().filter(
            Order.created_at >= month_start, Order.created_at < month_end
        ).count()
    }


def count_active_orders(driver_id):
    return Order.query.filter(
        Order.driver_id == driver_id,
        Order.status.in_(DRIVER_ACTIVE_STATUSES)
    ).count()
