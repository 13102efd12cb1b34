FLASH_KEY = 'flash'


def set_flash(session, kind, message):
    # خانة واحدة فقط: الرسالة الجديدة تستبدل القديمة
    session[FLASH_KEY] = {'type': kind, 'msg': message}


def get_flash(session):
    """قراءة رسالة التنبيه وحذفها من الجلسة (قراءة واحدة فقط)"""
    flash_data = session.pop(FLASH_KEY, None)
    if not flash_data:
        return None

    kind = flash_data.get('type')
    icon_map = {
        'success': 'check-circle',
        'warning': 'exclamation-circle'
    }
    class_map = {
        'error': 'danger'
    }
    return {
        'type': kind,
        'msg': flash_data.get('msg', ''),
        'icon': icon_map.get(kind, 'exclamation-triangle'),
        'cls': class_map.get(kind, kind)
    }
