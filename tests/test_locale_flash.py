from helpers.flash import set_flash, get_flash
from helpers.locale import resolve_locale


def test_default_locale_is_arabic_rtl():
    session = {}
    assert resolve_locale(session) == ('ar', 'rtl')


def test_requested_language_is_stored_in_session():
    session = {}
    assert resolve_locale(session, 'fr') == ('fr', 'ltr')
    assert session['lang'] == 'fr'
    # الطلب التالي بدون معامل يستخدم الجلسة
    assert resolve_locale(session) == ('fr', 'ltr')


def test_unsupported_language_falls_back_and_is_persisted():
    for code in ('de', 'en', 'AR', 'x' * 20):
        session = {}
        assert resolve_locale(session, code) == ('ar', 'rtl')
        assert session['lang'] == 'ar'


def test_invalid_session_value_is_reset():
    session = {'lang': 'es'}
    assert resolve_locale(session) == ('ar', 'rtl')
    assert session['lang'] == 'ar'


def test_flash_is_read_once():
    session = {}
    set_flash(session, 'success', 'Saved')
    flash = get_flash(session)
    assert flash == {'type': 'success', 'msg': 'Saved', 'icon': 'check-circle', 'cls': 'success'}
    assert get_flash(session) is None
    assert 'flash' not in session


def test_second_flash_replaces_first():
    session = {}
    set_flash(session, 'success', 'first')
    set_flash(session, 'error', 'second')
    flash = get_flash(session)
    assert flash['msg'] == 'second'
    assert get_flash(session) is None


def test_flash_style_mapping():
    session = {}
    set_flash(session, 'error', 'x')
    assert get_flash(session)['cls'] == 'danger'

    set_flash(session, 'warning', 'x')
    flash = get_flash(session)
    assert flash['icon'] == 'exclamation-circle'
    assert flash['cls'] == 'warning'

    set_flash(session, 'info', 'x')
    flash = get_flash(session)
    assert flash['icon'] == 'exclamation-triangle'
    assert flash['cls'] == 'info'


def test_get_flash_without_message():
    assert get_flash({}) is None
