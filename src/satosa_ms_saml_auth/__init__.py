"""
SAML login delegation for a host web application, with the SAML protocol handled by SATOSA.
* Record a validated login and its IdP attributes in SATOSA_STATE (SamlLoginResponse)
* Let the host application consume the login once and map the attributes onto local profile fields (SamlAuthPlugin)
* Logout endpoint: single logout via the SP login endpoint, or drop the SP session and return to the application (SamlLogout)

Field mappings are configured as `field_map_<localfield>: <external attribute name>`; the current settings are
merged over legacy settings (inline `legacy_settings` or a `legacy_settings_file`).

Example microservice configuration:

    module: satosa_ms_saml_auth.SamlLogout
    name: SamlLogout
    config:
      dosinglelogout: false
      host_config_file: /etc/webapp/config.yaml
      logout_return_rewrites: [["https://edu.", "https://app."]]

No SAML messages are parsed or validated here: the attributes are taken as delivered by the SATOSA backend.
"""

from .auth_plugin import SamlAuthPlugin
from .plugin_config import PluginConfig
from .saml_login_response import SamlLoginResponse
from .saml_logout import SamlLogout
