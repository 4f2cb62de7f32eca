"""
Language Module - Resolves the display language of a request
"""

from flask import current_app, request


DEFAULT_LANGUAGE = 'en'
SUPPORTED_LANGUAGES = ('en', 'fr')
LANGUAGE_COOKIE = 'language'


def resolve_language(args, cookies, supported=SUPPORTED_LANGUAGES,
                     default=DEFAULT_LANGUAGE, cookie_name=LANGUAGE_COOKIE):
    """
    Derive the language from query parameters and cookies

    The ``lang`` query parameter wins when non-empty, otherwise the
    language cookie is used. Anything outside ``supported`` becomes ``default``.

    Args:
        args (Mapping): Query parameters
        cookies (Mapping): Request cookies

    Returns:
        str: A supported language code
    """
    lang = args.get('lang') or ''
    if not lang:
        lang = cookies.get(cookie_name) or ''
    if lang not in supported:
        return default
    return lang


def get_request_language():
    """Resolve the language of the current request using app configuration"""
    return resolve_language(
        request.args,
        request.cookies,
        supported=current_app.config.get('SUPPORTED_LANGUAGES', SUPPORTED_LANGUAGES),
        default=current_app.config.get('DEFAULT_LANGUAGE', DEFAULT_LANGUAGE),
        cookie_name=current_app.config.get('LANGUAGE_COOKIE', LANGUAGE_COOKIE),
    )
