from satosa.exception import SATOSAConfigurationError, SATOSAError


class SamlAuthError(SATOSAError):
    pass


class SamlConfigError(SamlAuthError, SATOSAConfigurationError):
    """ SAML side configuration or plugin settings are missing or unusable """
