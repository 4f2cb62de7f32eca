"""
Decorators Module - Request language and experience index handling
"""

import re
from functools import wraps
from flask import abort, g
from .content import load_experience
from .language import get_request_language


ITEM_ID_PATTERN = re.compile(r'[+-]?[0-9]+')


def localized(f):
    """Decorator resolving the request language and passing it as ``lang``"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.lang = get_request_language()
        return f(*args, lang=g.lang, **kwargs)
    return decorated_function


def experience_item_required(f):
    """
    Decorator turning the ``item_id`` path segment into a validated experience item

    The experience list is loaded for the request language and the item at
    ``item_id`` is passed as ``item``. A non-integer or negative id gives
    400 "Invalid ID", an id past the end of the list gives 400 "ID out of range".
    """
    @wraps(f)
    def decorated_function(*args, item_id, lang, **kwargs):
        if not isinstance(item_id, str) or not ITEM_ID_PATTERN.fullmatch(item_id):
            abort(400, description='Invalid ID')
        index = int(item_id)
        if index < 0:
            abort(400, description='Invalid ID')

        items = load_experience(lang).items
        if index >= len(items):
            abort(400, description='ID out of range')

        return f(*args, item=items[index], item_id=index, lang=lang, **kwargs)
    return decorated_function
