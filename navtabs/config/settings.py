# config/settings.py
"""
Application configuration
Values can be overridden through environment variables
"""

import os
import secrets


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class BaseConfig:
    """Settings shared by every environment"""

    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_urlsafe(32)
    VERSION = os.environ.get('APP_VERSION', '1.0.0')

    # Widget defaults
    NAVTABS_NAV_TYPE = os.environ.get('NAVTABS_NAV_TYPE', 'nav-tabs')
    NAVTABS_ENCODE_LABELS = _env_flag('NAVTABS_ENCODE_LABELS', True)
    NAVTABS_AUTO_ID_PREFIX = os.environ.get('NAVTABS_AUTO_ID_PREFIX', 'w')

    # Asset URLs (None keeps the CDN defaults)
    NAVTABS_JQUERY_URL = os.environ.get('NAVTABS_JQUERY_URL')
    NAVTABS_BOOTSTRAP_CSS_URL = os.environ.get('NAVTABS_BOOTSTRAP_CSS_URL')
    NAVTABS_BOOTSTRAP_JS_URL = os.environ.get('NAVTABS_BOOTSTRAP_JS_URL')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    LOG_LEVEL = 'WARNING'
    LOG_FILE = None


class ProductionConfig(BaseConfig):
    """Production settings; the app runs behind a reverse proxy"""
    PROXY_FIX = True


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}
