import logging
import os
from urllib.parse import urlencode
import satosa.response
from .attribute_map import map_attributes
from .errors import SamlConfigError
from .login_session import LoginSession
from .sp_config import expired_cookie_headers, find_dataroot, find_side_config, load_side_config

logger = logging.getLogger(__name__)


class SamlAuthPlugin(object):
    """
    Login delegation to an external SAML Identity Provider.

    The host application calls these methods at its login and logout extension points. All SAML protocol
    handling is done by the SP library (the SATOSA SAML backend); this class only consumes the session flags
    the login endpoint left behind and maps the IdP attributes onto local profile fields.
    """
    auth_type = 'saml'
    role_auth = 'auth_saml'
    internal = False
    can_change_password = False
    prevent_local_passwords = True

    def __init__(self, config, base_url):
        self.config = config
        self.base_url = base_url.rstrip('/')

    def _url(self, endpoint, **params):
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        if params:
            url += '?' + urlencode(params)
        return url

    def user_login(self, session, username, password):
        # credentials are never checked here, only whether the login endpoint has just run
        if LoginSession(session).consume_login():
            logger.info(f"SAML login accepted for {username}")
            return True
        return False

    def get_attributes(self):
        return self.config.attribute_map()

    def get_userinfo(self, session, username):
        login_attributes = LoginSession(session).pop_attributes()
        if not login_attributes:
            return None
        result = map_attributes(self.get_attributes(), login_attributes)
        result['username'] = username
        logger.debug(f"userinfo for {username}: fields {sorted(result)}")
        return result

    def login_redirect(self, wantsurl):
        """ With auto-login on, the login page is skipped and the user goes straight to the IdP """
        if not self.config.autologin:
            return None
        url = self._url(self.config.login_endpoint, wantsurl=wantsurl or '')
        logger.info(f"autologin: redirect to {url}")
        return satosa.response.Redirect(url)

    def login_page(self, settings, query=None):
        settings = dict(settings or {})
        query = query or {}
        if not settings.get('alternate_login_url') and query.get('saml') != 'false':
            settings['alternate_login_url'] = self._url(self.config.login_page_endpoint)
        # the username of the last session must not show up on the login page after logout
        settings['no_last_logged_in'] = True
        return settings

    def _local_logout(self, context):
        LoginSession(context.state).clear()
        if self.config.remembered_user_cookie:
            return self._expired_cookies([self.config.remembered_user_cookie])
        return []

    def _expired_cookies(self, names):
        return expired_cookie_headers(
            names,
            path=self.config.cookie_path,
            domain=self.config.cookie_domain,
            secure=self.config.cookie_secure,
        )

    def logout_return_url(self):
        url = self.base_url
        for old, new in self.config.logout_return_rewrites:
            if url.startswith(old):
                url = new + url[len(old):]
        return url + self.config.logout_return_path

    def logout(self, context):
        if self.config.single_logout:
            headers = self._local_logout(context)
            url = self._url(self.config.login_endpoint, logout=1)
            logger.info(f"single logout: redirect to {url}")
            return satosa.response.Redirect(url, headers=headers)

        try:
            dataroot = find_dataroot(self.config.host_config_file)
            side_config = load_side_config(find_side_config(dataroot, os.getcwd()))
            side_config.check_library()
        except (SamlConfigError, OSError, ValueError) as e:
            logger.warning(f"SAML logout skipped: {e}")
            logger.debug('SAML logout failure', exc_info=True)
            return None

        headers = self._expired_cookies(self.config.sp_session_cookies)
        # the SP library keeps its session in the state under its own name
        context.state.pop(side_config.sp_source, None)
        headers += self._local_logout(context)
        context.state.delete = True

        url = self.logout_return_url()
        logger.info(f"logout via {side_config.sp_source}: redirect to {url}")
        return satosa.response.Redirect(url, headers=headers)
