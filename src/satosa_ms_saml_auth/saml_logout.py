import logging
import satosa.response
from satosa.micro_services.base import ResponseMicroService
from .auth_plugin import SamlAuthPlugin
from .definitions import DEFAULT_LOGOUT_ENDPOINT
from .plugin_config import PluginConfig

logger = logging.getLogger(__name__)


class SamlLogout(ResponseMicroService):
    """
    Handle the logout endpoint:
    * single logout enabled: clear the local login and hand over to the SP login endpoint
    * otherwise: drop the SP library session, expire its cookies and return to the application
    """
    def __init__(self, config: dict, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.endpoint = config.get('endpoint', DEFAULT_LOGOUT_ENDPOINT)
        self.plugin = SamlAuthPlugin(PluginConfig.from_settings(config), self.base_url)
        self.default_logout_url = self.plugin.config.default_logout_url or self.base_url
        logger.info('SamlLogout microservice active')

    def _handle_logout(self, context):
        response = self.plugin.logout(context)
        if response is None:
            logger.info(f"falling back to default logout: redirect to {self.default_logout_url}")
            return satosa.response.Redirect(self.default_logout_url)
        return response

    def register_endpoints(self):
        return [("^{}$".format(self.endpoint), self._handle_logout), ]
