import logging
import yaml
from .definitions import (
    CUSTOM_FIELD_PREFIX,
    DEFAULT_LOGIN_ENDPOINT,
    DEFAULT_LOGIN_PAGE_ENDPOINT,
    DEFAULT_LOGOUT_RETURN_PATH,
    DEFAULT_USER_FIELDS,
    FIELD_MAP_PREFIX,
    SP_SESSION_COOKIES,
)
from .errors import SamlConfigError

logger = logging.getLogger(__name__)

TRUE_STRINGS = ('1', 'true', 'yes', 'on')


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


class PluginConfig(object):
    """
    Plugin settings: the current settings merged over the legacy ones.

    Field mappings are plain entries of the form ``field_map_<localfield>: <external attribute name>``.
    """
    def __init__(self, settings: dict, legacy_settings: dict = None):
        merged = dict(legacy_settings or {})
        merged.update(settings or {})
        self.settings = merged

    @classmethod
    def from_settings(cls, config: dict):
        legacy = dict(config.get('legacy_settings') or {})
        legacy_file = config.get('legacy_settings_file')
        if legacy_file:
            file_settings = cls._load_legacy_file(legacy_file)
            file_settings.update(legacy)
            legacy = file_settings
        current = {k: v for k, v in config.items() if k not in ('legacy_settings', 'legacy_settings_file')}
        return cls(current, legacy)

    @staticmethod
    def _load_legacy_file(path):
        logger.debug(f"loading legacy settings from {path}")
        with open(path) as f:
            content = yaml.safe_load(f)
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise SamlConfigError(f"Legacy settings file {path} does not contain a mapping")
        return content

    def get(self, key, default=None):
        return self.settings.get(key, default)

    @property
    def autologin(self):
        return _as_bool(self.settings.get('autologin', False))

    @property
    def single_logout(self):
        return _as_bool(self.settings.get('dosinglelogout', False))

    @property
    def fields(self):
        fields = self.settings.get('userfields')
        if fields is None:
            return list(DEFAULT_USER_FIELDS)
        if isinstance(fields, str):
            return [fields]
        return list(fields)

    @property
    def custom_profile_fields(self):
        return [CUSTOM_FIELD_PREFIX + name for name in self.settings.get('custom_profile_fields') or []]

    @property
    def login_endpoint(self):
        return self.settings.get('login_endpoint', DEFAULT_LOGIN_ENDPOINT)

    @property
    def login_page_endpoint(self):
        return self.settings.get('login_page_endpoint', DEFAULT_LOGIN_PAGE_ENDPOINT)

    @property
    def host_config_file(self):
        return self.settings.get('host_config_file')

    @property
    def sp_session_cookies(self):
        return list(self.settings.get('sp_session_cookies', SP_SESSION_COOKIES))

    @property
    def remembered_user_cookie(self):
        return self.settings.get('remembered_user_cookie')

    @property
    def cookie_path(self):
        return self.settings.get('cookie_path', '/')

    @property
    def cookie_domain(self):
        return self.settings.get('cookie_domain')

    @property
    def cookie_secure(self):
        return _as_bool(self.settings.get('cookie_secure', True))

    @property
    def logout_return_path(self):
        return self.settings.get('logout_return_path', DEFAULT_LOGOUT_RETURN_PATH)

    @property
    def logout_return_rewrites(self):
        # ordered (old prefix, new prefix) pairs applied to the base url
        return [tuple(pair) for pair in self.settings.get('logout_return_rewrites') or []]

    @property
    def default_logout_url(self):
        return self.settings.get('default_logout_url')

    def attribute_map(self):
        """
        Returns the mapping local field -> external attribute name for every field with a configured mapping.
        """
        attribute_map = {}
        for field in self.fields + self.custom_profile_fields:
            external_name = self.settings.get(FIELD_MAP_PREFIX + field)
            if external_name is not None:
                attribute_map[field] = str(external_name).strip()
        return attribute_map
