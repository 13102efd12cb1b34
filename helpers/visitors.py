import logging
from datetime import date, timedelta

from sqlalchemy import func
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.visitor import SiteVisitor

logger = logging.getLogger(__name__)


def client_ip(headers, remote_addr):
    forwarded = headers.get('X-Forwarded-For')
    ip = forwarded.split(',')[0] if forwarded else (remote_addr or '')
    return ip.strip()


def _upsert_statement(values):
    """insert ... on conflict حسب نوع قاعدة البيانات"""
    table = SiteVisitor.__table__
    dialect = db.session.get_bind().dialect.name

    if dialect in ('mysql', 'mariadb'):
        stmt = mysql.insert(table).values(**values)
        return stmt.on_duplicate_key_update(
            page_url=stmt.inserted.page_url,
            user_id=func.coalesce(table.c.user_id, stmt.inserted.user_id)
        )

    insert = postgresql.insert if dialect == 'postgresql' else sqlite.insert
    stmt = insert(table).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=['ip_address', 'visit_date'],
        set_={
            'page_url': stmt.excluded.page_url,
            'user_id': func.coalesce(table.c.user_id, stmt.excluded.user_id)
        }
    )


def track_visitor(request, user_id=None, today=None):
    """تسجيل زيارة (سجل واحد لكل IP في اليوم). لا يرفع أي استثناء"""
    values = {
        'ip_address': client_ip(request.headers, request.remote_addr),
        'user_agent': (request.headers.get('User-Agent') or '')[:255],
        'page_url': (request.full_path.rstrip('?') or '')[:500],
        'referrer': (request.headers.get('Referer') or '')[:500] or None,
        'user_id': user_id,
        'visit_date': today or date.today()
    }
    try:
        db.session.execute(_upsert_statement(values))
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.warning('Visitor tracking failed for %s', values['ip_address'], exc_info=True)
        return False
    return True


def get_visitor_stats(today=None):
    stats = {
        'total': 0,
        'today': 0,
        'this_week': 0,
        'this_month': 0
    }
    today = today or date.today()
    month_start = today.replace(day=1)
    next_month = (month_start + timedelta(days=32)).replace(day=1)

    try:
        # إجمالي الزوار (عناوين IP مختلفة)
        stats['total'] = db.session.query(
            func.count(func.distinct(SiteVisitor.ip_address))
        ).scalar() or 0

        # زوار اليوم
        stats['today'] = SiteVisitor.query.filter(SiteVisitor.visit_date == today).count()

        # زوار آخر 7 أيام
        stats['this_week'] = SiteVisitor.query.filter(
            SiteVisitor.visit_date >= today - timedelta(days=7)
        ).count()

        # زوار الشهر الحالي
        stats['this_month'] = SiteVisitor.query.filter(
            SiteVisitor.visit_date >= month_start,
            SiteVisitor.visit_date < next_month
        ).count()
    except SQLAlchemyError:
        db.session.rollback()
        logger.warning('Could not load visitor stats', exc_info=True)
        return {key: 0 for key in stats}

    return stats
