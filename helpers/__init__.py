from .locale import resolve_locale
from .flash import set_flash, get_flash
from .presentation import (
    e, fmt_date, status_badge, status_icon, get_avatar_url, get_user_initials,
    get_avatar_color, rating_breakdown, format_rating, is_phone_verified
)
from .avatar import upload_avatar, sniff_image_mime
from .visitors import track_visitor, get_visitor_stats, client_ip
from .stats import get_driver_stats, get_client_stats, count_active_orders
