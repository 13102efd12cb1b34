import math
import os
from datetime import datetime

from markupsafe import Markup, escape

ARABIC_MONTHS = ['', 'يناير', 'فبراير', 'مارس', 'أبريل', 'مايو', 'يونيو',
                 'يوليو', 'أغسطس', 'سبتمبر', 'أكتوبر', 'نوفمبر', 'ديسمبر']

STATUS_BADGES = {
    'pending': 'badge-pending',
    'accepted': 'badge-accepted',
    'picked_up': 'badge-picked_up',
    'delivered': 'badge-delivered',
    'cancelled': 'badge-cancelled'
}

STATUS_ICONS = {
    'pending': 'clock',
    'accepted': 'truck',
    'picked_up': 'box',
    'delivered': 'check-double',
    'cancelled': 'times-circle'
}

AVATAR_COLORS = {
    'admin': '#dc2626',
    'driver': '#0891b2',
    'customer': '#059669'
}


def e(value):
    if value is None:
        return ''
    return str(escape(value))


def fmt_date(value, lang='ar', now=None):
    """تنسيق التاريخ حسب اللغة (وقت نسبي للتواريخ الحديثة)"""
    if not value:
        return ''
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return ''
    if value.tzinfo is not None:
        # توحيد التوقيت إلى الوقت المحلي بدون منطقة زمنية
        value = value.astimezone().replace(tzinfo=None)
    now = now or datetime.now()
    diff = (now - value).total_seconds()

    if diff < 60:
        return 'الآن' if lang == 'ar' else 'Maintenant'
    elif diff < 3600:
        mins = int(diff // 60)
        return f'منذ {mins} دقيقة' if lang == 'ar' else f'Il y a {mins} min'
    elif diff < 86400:
        hours = int(diff // 3600)
        return f'منذ {hours} ساعة' if lang == 'ar' else f'Il y a {hours}h'

    if lang == 'ar':
        month = ARABIC_MONTHS[value.month]
        hour = value.hour % 12 or 12
        meridiem = 'AM' if value.hour < 12 else 'PM'
        return f'{value.day:02d} {month} {value.year} - {hour:02d}:{value.minute:02d} {meridiem}'

    return value.strftime('%d/%m/%Y %H:%M')


def status_badge(status):
    return STATUS_BADGES.get(status, 'bg-secondary')


def status_icon(status):
    return STATUS_ICONS.get(status, 'circle')


def get_avatar_url(user, media_root):
    """رابط الصورة الشخصية مع معامل لتجاوز الكاش، أو None لعرض الأحرف الأولى"""
    avatar_url = getattr(user, 'avatar_url', None)
    if avatar_url:
        full_path = os.path.join(media_root, avatar_url)
        if os.path.isfile(full_path):
            mtime = int(os.path.getmtime(full_path))
            return f'{avatar_url}?v={mtime}'
    return None


def get_user_initials(user):
    name = (getattr(user, 'full_name', None) or getattr(user, 'username', None) or 'U').strip()
    parts = name.split()
    if len(parts) >= 2:
        return (parts[0][:1] + parts[1][:1]).upper()
    return (name[:2] or 'U').upper()


def get_avatar_color(role):
    return AVATAR_COLORS.get(role, '#6366f1')


def rating_breakdown(score):
    score = min(max(float(score or 0), 0.0), 5.0)
    full = int(math.floor(score))
    half = (score - full) >= 0.5
    empty = 5 - full - (1 if half else 0)
    return {
        'full': full,
        'half': half,
        'empty': empty,
        'label': f'{score:.1f}'
    }


def format_rating(score, show_number=True):
    stars = rating_breakdown(score)
    html = Markup('<span class="rating-stars">')
    html += Markup('<i class="fas fa-star text-warning"></i>') * stars['full']
    if stars['half']:
        html += Markup('<i class="fas fa-star-half-alt text-warning"></i>')
    html += Markup('<i class="far fa-star text-warning"></i>') * stars['empty']
    if show_number:
        html += Markup(' <small class="text-muted">({})</small>').format(stars['label'])
    html += Markup('</span>')
    return html


def is_phone_verified(user):
    return bool(getattr(user, 'phone', None)) and bool(getattr(user, 'phone_verified', False))
