import logging
from satosa.micro_services.base import ResponseMicroService
from .login_session import LoginSession

logger = logging.getLogger(__name__)


class SamlLoginResponse(ResponseMicroService):
    """ Record a validated SAML login in SATOSA STATE for the host application to pick up """
    def __init__(self, config: dict, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.required_attributes = list(config.get('required_attributes') or [])
        logger.info('SamlLoginResponse microservice active')

    def process(self, context, internal_response):
        missing = [name for name in self.required_attributes if not internal_response.attributes.get(name)]
        if missing:
            logger.warning(f"Attributes {missing} not in response: login not recorded")
            return super().process(context, internal_response)

        LoginSession(context.state).mark_login(internal_response.attributes, internal_response.subject_id)
        logger.info(f"recorded SAML login for subject {internal_response.subject_id}")
        return super().process(context, internal_response)
