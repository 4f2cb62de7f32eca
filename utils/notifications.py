"""
Notifications Module - Contact form relay over SMTP
"""

import smtplib
from email.mime.text import MIMEText
from flask import current_app


def load_smtp_config():
    """Load the contact relay SMTP settings from app configuration"""
    sender = current_app.config.get('CONTACT_SMTP_EMAIL', '')
    return {
        'host': current_app.config.get('CONTACT_SMTP_HOST', ''),
        'port': current_app.config.get('CONTACT_SMTP_PORT', '587'),
        'email': sender,
        'password': current_app.config.get('CONTACT_SMTP_PASSWORD', ''),
        'recipient': current_app.config.get('CONTACT_RECIPIENT_EMAIL') or sender,
    }


def build_contact_message(name, email, message, sender, recipient):
    """Build the email relayed for a contact form submission"""
    msg = MIMEText(f"Name: {name}\nEmail: {email}\nMessage: {message}", 'plain', 'utf-8')
    msg['Subject'] = f"Contact from {name}"
    msg['From'] = sender
    msg['To'] = recipient
    msg['Reply-To'] = email
    return msg


def send_contact_email(name, email, message):
    """
    Relay a contact form submission to the site owner

    Args:
        name (str): Visitor name
        email (str): Visitor email address
        message (str): Message body

    Returns:
        bool: Success status
    """
    smtp_config = load_smtp_config()
    if not all([
        smtp_config.get('host'),
        smtp_config.get('port'),
        smtp_config.get('email'),
        smtp_config.get('password')
    ]):
        current_app.logger.error("Contact SMTP config incomplete, cannot relay message")
        return False

    msg = build_contact_message(name, email, message,
                                smtp_config['email'], smtp_config['recipient'])

    try:
        with smtplib.SMTP(smtp_config['host'], int(smtp_config['port'])) as server:
            server.starttls()
            server.login(smtp_config['email'], smtp_config['password'])
            server.send_message(msg)
    except (smtplib.SMTPException, OSError, ValueError) as e:
        current_app.logger.error(f"Error relaying contact message from {email}: {str(e)}")
        return False

    current_app.logger.info(f"Contact message from {email} relayed to {smtp_config['recipient']}")
    return True
