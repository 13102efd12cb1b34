LANGUAGES = ('ar', 'fr')
DEFAULT_LANGUAGE = 'ar'


def resolve_locale(session, requested=None):
    """تحديد اللغة الحالية واتجاه النص

    اللغة المطلوبة في الرابط تُحفظ في الجلسة كما هي، ثم يتم التحقق منها
    عند القراءة. أي قيمة غير مدعومة تعيد اللغة والجلسة إلى العربية.
    """
    if requested:
        session['lang'] = requested

    lang = session.get('lang') or DEFAULT_LANGUAGE
    if lang not in LANGUAGES:
        lang = DEFAULT_LANGUAGE
        session['lang'] = DEFAULT_LANGUAGE

    direction = 'rtl' if lang == 'ar' else 'ltr'
    return lang, direction
