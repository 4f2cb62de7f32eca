"""Tests for the contact form SMTP relay."""

import smtplib
from unittest.mock import patch

import pytest

import utils.notifications as notifications_mod
from utils.notifications import build_contact_message, send_contact_email


@pytest.fixture()
def ctx(app):
    with app.app_context():
        yield


@pytest.mark.usefixtures('ctx')
class TestSendContactEmail:
    def test_relays_message(self):
        with patch.object(notifications_mod.smtplib, 'SMTP') as MockSMTP:
            server = MockSMTP.return_value.__enter__.return_value
            assert send_contact_email('Ann', 'ann@example.com', 'Hello') is True

        MockSMTP.assert_called_once_with('smtp.test.local', 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with('portfolio@test.local', 'secret')
        sent = server.send_message.call_args.args[0]
        assert sent['To'] == 'owner@test.local'
        assert sent['Reply-To'] == 'ann@example.com'
        assert sent['Subject'] == 'Contact from Ann'

    def test_smtp_failure_returns_false(self):
        with patch.object(notifications_mod.smtplib, 'SMTP') as MockSMTP:
            server = MockSMTP.return_value.__enter__.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b'bad credentials')
            assert send_contact_email('Ann', 'ann@example.com', 'Hello') is False

    def test_connection_failure_returns_false(self):
        with patch.object(notifications_mod.smtplib, 'SMTP', side_effect=OSError('unreachable')):
            assert send_contact_email('Ann', 'ann@example.com', 'Hello') is False

    def test_incomplete_config_does_not_connect(self, app):
        app.config['CONTACT_SMTP_PASSWORD'] = None
        with patch.object(notifications_mod.smtplib, 'SMTP') as MockSMTP:
            assert send_contact_email('Ann', 'ann@example.com', 'Hello') is False
        MockSMTP.assert_not_called()

    def test_recipient_defaults_to_sender(self, app):
        app.config['CONTACT_RECIPIENT_EMAIL'] = None
        with patch.object(notifications_mod.smtplib, 'SMTP') as MockSMTP:
            server = MockSMTP.return_value.__enter__.return_value
            send_contact_email('Ann', 'ann@example.com', 'Hello')
        assert server.send_message.call_args.args[0]['To'] == 'portfolio@test.local'


def test_message_body():
    msg = build_contact_message('Ann', 'ann@example.com', 'Hello', 'from@x.test', 'to@x.test')
    body = msg.get_payload(decode=True).decode('utf-8')
    assert body == 'Name: Ann\nEmail: ann@example.com\nMessage: Hello'
