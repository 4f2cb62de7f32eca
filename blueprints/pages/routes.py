"""
Pages Routes - Index page, contact form and PWA assets
"""

from flask import render_template, request, abort, send_from_directory, current_app
from utils.content import load_profile
from utils.decorators import localized
from utils.notifications import send_contact_email
from utils.translations import TRANSLATIONS, get_translation
from . import pages_bp


@pages_bp.route('/')
@localized
def index(lang):
    """Landing page - profile, skills and lazily loaded CV sections"""
    return render_template('index.html',
                           skills=current_app.config['SKILLS'],
                           profile=load_profile(lang),
                           translations=TRANSLATIONS,
                           lang=lang)


@pages_bp.route('/contact')
@localized
def contact(lang):
    """Contact form fragment"""
    return render_template('fragments/contact.html',
                           translations=TRANSLATIONS,
                           lang=lang)


@pages_bp.route('/contact-submit', methods=['POST'])
@localized
def contact_submit(lang):
    """Contact form processing - relays the message by email"""
    name = request.form.get('name', '').strip()
    email = request.form.get('email', '').strip()
    message = request.form.get('message', '').strip()

    if not all([name, email, message]):
        abort(400, description=get_translation('all_fields_required', lang))

    if not send_contact_email(name, email, message):
        abort(500, description=get_translation('failed_send', lang))

    return render_template('fragments/contact_result.html',
                           message=get_translation('message_sent', lang))


@pages_bp.route('/manifest.json')
def manifest():
    """PWA manifest"""
    return send_from_directory(current_app.static_folder, 'manifest.json',
                               mimetype='application/json')


@pages_bp.route('/sw.js')
def service_worker():
    """Service worker, served from the root so it controls the whole site"""
    return send_from_directory(current_app.static_folder, 'sw.js',
                               mimetype='application/javascript')
