"""
Side configuration locating the external SAML SP library.

The parameters are read from a JSON file instead of the plugin settings, because the logout has to run
before the host application's own session and settings store is available::

    {"samllib": "/etc/satosa", "sp_source": "Saml2"}
"""
import json
import logging
import os
from collections import namedtuple
from http.cookies import SimpleCookie
import yaml
from .definitions import LIBRARY_LOADER_NAME, SIDE_CONFIG_NAME
from .errors import SamlConfigError

logger = logging.getLogger(__name__)

EXPIRED = 'Thu, 01 Jan 1970 00:00:00 GMT'


class SideConfig(namedtuple('SideConfig', ['samllib', 'sp_source'])):
    __slots__ = ()

    @property
    def loader(self):
        return os.path.join(self.samllib, LIBRARY_LOADER_NAME)

    def check_library(self):
        if not os.path.isfile(self.loader):
            raise SamlConfigError(f"SAML SP library loader file does not exist: {self.loader}")
        return self.loader


def find_dataroot(host_config_file):
    if not host_config_file or not os.path.isfile(host_config_file):
        return None
    with open(host_config_file) as f:
        try:
            content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SamlConfigError(f"Host config file {host_config_file} is not valid YAML: {e}") from e
    if not isinstance(content, dict):
        return None
    dataroot = content.get('dataroot')
    if dataroot is not None and not isinstance(dataroot, str):
        raise SamlConfigError(f"Host config file {host_config_file}: dataroot must be a string")
    return dataroot


def find_side_config(dataroot=None, cwd=None):
    candidates = []
    if dataroot:
        candidates.append(os.path.join(dataroot, SIDE_CONFIG_NAME))
    candidates.append(os.path.join(cwd or os.getcwd(), SIDE_CONFIG_NAME))
    for path in candidates:
        if os.path.isfile(path):
            return path
    raise SamlConfigError('SAML config params are not set.')


def load_side_config(path):
    with open(path) as f:
        try:
            params = json.load(f)
        except ValueError as e:
            raise SamlConfigError(f"SAML config file {path} is not valid JSON: {e}") from e
    if not isinstance(params, dict):
        raise SamlConfigError(f"SAML config file {path} does not contain a JSON object")
    try:
        side_config = SideConfig(params['samllib'], params['sp_source'])
    except KeyError as e:
        raise SamlConfigError(f"SAML config file {path} is missing {e}") from e
    for name, value in side_config._asdict().items():
        if not isinstance(value, str):
            raise SamlConfigError(f"SAML config file {path}: {name} must be a string")
    logger.debug(f"loaded SAML side config from {path}: {side_config}")
    return side_config


def expired_cookie_headers(names, path='/', domain=None, secure=True):
    cookie = SimpleCookie()
    for name in names:
        cookie[name] = ''
        cookie[name]['path'] = path
        cookie[name]['expires'] = EXPIRED
        cookie[name]['max-age'] = 0
        cookie[name]['httponly'] = True
        cookie[name]['secure'] = secure
        if domain:
            cookie[name]['domain'] = domain
    return [('Set-Cookie', morsel.OutputString()) for morsel in cookie.values()]
