import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    PORT = int(os.environ.get('PORT', '33333'))

    # JSON Settings
    JSON_AS_ASCII = False

    # Content Settings
    CONTENT_DIR = os.environ.get('CONTENT_DIR', os.path.join(BASE_DIR, 'data'))
    DEFAULT_LANGUAGE = 'en'
    SUPPORTED_LANGUAGES = ('en', 'fr')
    LANGUAGE_COOKIE = 'language'

    SKILLS = (
        'Golang', 'Python', 'C', 'React',
        'Stripe', 'HubSpot', 'PostgreSQL', 'Docker', 'Kubernetes', 'Git', 'Agile Methodologies',
        'Dutch (Native)', 'English (Fluent)', 'French (Fluent)',
        'AI Integration', 'Privacy-Conscious AI', 'Event Sourcing', 'Domain-Driven Design',
    )

    # GitHub Stats Settings
    GITHUB_TOKEN = os.environ.get('GITHUB_TOKEN')
    GITHUB_API_URL = os.environ.get('GITHUB_API_URL', 'https://api.github.com')
    GITHUB_TIMEOUT = float(os.environ.get('GITHUB_TIMEOUT', '10'))

    # Contact Form Mail Relay
    CONTACT_SMTP_HOST = os.environ.get('CONTACT_SMTP_HOST')
    CONTACT_SMTP_PORT = os.environ.get('CONTACT_SMTP_PORT', '587')
    CONTACT_SMTP_EMAIL = os.environ.get('CONTACT_SMTP_EMAIL')
    CONTACT_SMTP_PASSWORD = os.environ.get('CONTACT_SMTP_PASSWORD')
    CONTACT_RECIPIENT_EMAIL = os.environ.get('CONTACT_RECIPIENT_EMAIL')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    GITHUB_TOKEN = 'test-token'
    CONTACT_SMTP_HOST = 'smtp.test.local'
    CONTACT_SMTP_PORT = '587'
    CONTACT_SMTP_EMAIL = 'portfolio@test.local'
    CONTACT_SMTP_PASSWORD = 'secret'
    CONTACT_RECIPIENT_EMAIL = 'owner@test.local'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
