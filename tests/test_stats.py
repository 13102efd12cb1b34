from datetime import datetime

import pytest

from helpers.stats import get_driver_stats, get_client_stats, count_active_orders, _week_range
from models.order import Order
from models.rating import Rating
from models.user import User

NOW = datetime(2024, 5, 15, 12, 0)  # الأربعاء


@pytest.fixture
def people(db):
    driver = User(username='driver1', role='driver')
    other = User(username='driver2', role='driver')
    client = User(username='sara', role='customer', full_name='Sara Ali')
    for user in (driver, other, client):
        user.set_password('x')
        db.session.add(user)
    db.session.commit()
    return driver.id, other.id, client.id


def delivered(driver_id, points, when):
    return Order(driver_id=driver_id, status='delivered', points_cost=points,
                 created_at=when, delivered_at=when)


def test_driver_with_no_orders(db, people):
    driver_id, _, _ = people
    stats = get_driver_stats(driver_id, now=NOW)
    assert stats['rating'] == 5.0
    for key, value in stats.items():
        if key != 'rating':
            assert value == 0, key


def test_driver_stats(db, people):
    driver_id, other_id, _ = people
    db.session.add_all([
        delivered(driver_id, 10, datetime(2024, 5, 15, 10, 0)),
        delivered(driver_id, 20, datetime(2024, 5, 13, 9, 0)),
        delivered(driver_id, 30, datetime(2024, 5, 2, 18, 0)),
        delivered(driver_id, 40, datetime(2024, 4, 20, 8, 0)),
        Order(driver_id=driver_id, status='accepted', points_cost=5),
        Order(driver_id=driver_id, status='picked_up', points_cost=7),
        Order(driver_id=driver_id, status='cancelled', points_cost=100),
        Order(driver_id=driver_id, status='pending', points_cost=3),
        delivered(other_id, 99, datetime(2024, 5, 15, 11, 0)),
        Rating(ratee_id=driver_id, score=4),
        Rating(ratee_id=driver_id, score=5),
        Rating(ratee_id=driver_id, score=5),
        Rating(ratee_id=other_id, score=1),
    ])
    db.session.commit()

    stats = get_driver_stats(driver_id, now=NOW)
    assert stats['total_orders'] == 4
    assert stats['total_delivered'] == 4
    assert stats['completed_today'] == 1
    assert stats['orders_this_month'] == 3
    assert stats['earnings_today'] == 10
    assert stats['earnings_week'] == 30
    assert stats['earnings_month'] == 60
    assert stats['this_month'] == 60
    assert stats['total_earnings'] == 100
    assert stats['active_orders'] == 2
    assert stats['rating'] == 4.67


def test_week_starts_on_sunday():
    start, end = _week_range(datetime(2024, 5, 12, 10, 0))  # الأحد
    assert start == datetime(2024, 5, 12)
    assert end == datetime(2024, 5, 19)

    start, _ = _week_range(datetime(2024, 5, 18, 23, 59))  # السبت
    assert start == datetime(2024, 5, 12)


def test_count_active_orders(db, people):
    driver_id, other_id, _ = people
    db.session.add_all([
        Order(driver_id=driver_id, status='accepted'),
        Order(driver_id=driver_id, status='picked_up'),
        Order(driver_id=driver_id, status='delivered'),
        Order(driver_id=other_id, status='accepted'),
    ])
    db.session.commit()
    assert count_active_orders(driver_id) == 2
    assert count_active_orders(other_id) == 1


def test_client_stats_matches_id_or_legacy_name_once(db, people):
    _, _, client_id = people
    db.session.add_all([
        # يطابق الرقم والاسم معاً ويُحسب مرة واحدة
        Order(client_id=client_id, customer_name='sara', status='pending',
              created_at=datetime(2024, 5, 10)),
        # طلب قديم بدون رقم عميل
        Order(client_id=None, customer_name='sara', status='delivered',
              created_at=datetime(2024, 5, 11)),
        Order(client_id=client_id, customer_name=None, status='accepted',
              created_at=datetime(2024, 4, 10)),
        Order(client_id=client_id, status='cancelled', created_at=datetime(2024, 3, 1)),
        Order(client_id=None, customer_name='someone else', status='pending',
              created_at=datetime(2024, 5, 12)),
    ])
    db.session.commit()

    assert get_client_stats(client_id, 'sara', now=NOW) == {
        'total_orders': 4,
        'active': 2,
        'delivered': 1,
        'this_month': 2
    }


def test_client_without_orders(db, people):
    _, _, client_id = people
    assert get_client_stats(client_id, 'sara', now=NOW) == {
        'total_orders': 0, 'active': 0, 'delivered': 0, 'this_month': 0
    }


def test_client_stats_ignores_missing_name(db, people):
    _, _, client_id = people
    db.session.add_all([
        Order(client_id=None, customer_name=None, status='pending',
              created_at=datetime(2024, 5, 10)),
        Order(client_id=None, customer_name=None, status='delivered',
              created_at=datetime(2024, 5, 11)),
        Order(client_id=client_id, status='delivered', created_at=datetime(2024, 5, 12)),
    ])
    db.session.commit()

    assert get_client_stats(client_id, None, now=NOW) == {
        'total_orders': 1, 'active': 0, 'delivered': 1, 'this_month': 1
    }
    assert get_client_stats(None, None, now=NOW) == {
        'total_orders': 0, 'active': 0, 'delivered': 0, 'this_month': 0
    }
