import re
from satosa.internal import InternalData
from satosa_ms_saml_auth import SamlAuthPlugin, SamlLoginResponse, SamlLogout
from satosa_ms_saml_auth.definitions import STATE_KEY
from satosa_ms_saml_auth.plugin_config import PluginConfig

BASE_URL = 'https://edu.example.org'


def passthrough(context, data):
    return data


def location(response):
    return [value for key, value in response.headers if key == 'Location'][0]


def make_login_response(config=None):
    ms = SamlLoginResponse(config=config or {}, name='SamlLoginResponse', base_url=BASE_URL)
    ms.next = passthrough
    return ms


def test_login_response_records_login(context):
    internal_response = InternalData(subject_id='ada', attributes={'mail': ['ada@example.org'], 'sn': ['Lovelace']})

    result = make_login_response().process(context, internal_response)

    assert result is internal_response
    plugin = SamlAuthPlugin(PluginConfig({'field_map_email': 'mail', 'field_map_lastname': 'sn'}), BASE_URL)
    assert plugin.user_login(context.state, 'ada', '') is True
    assert plugin.get_userinfo(context.state, 'ada') == {'email': 'ada@example.org', 'lastname': 'Lovelace',
                                                         'username': 'ada'}


def test_login_response_skips_incomplete_response(context):
    internal_response = InternalData(subject_id='ada', attributes={'sn': ['Lovelace']})

    result = make_login_response({'required_attributes': ['mail']}).process(context, internal_response)

    assert result is internal_response
    assert STATE_KEY not in context.state


def make_logout(config=None):
    ms = SamlLogout(config=config or {}, name='SamlLogout', base_url=BASE_URL)
    ms.next = passthrough
    return ms


def test_logout_registers_endpoint():
    [(pattern, handler)] = make_logout({'endpoint': 'auth/logout'}).register_endpoints()

    assert re.match(pattern, 'auth/logout')
    assert not re.match(pattern, 'auth/logout/other')


def test_logout_endpoint_single_logout(context):
    [(_, handler)] = make_logout({'dosinglelogout': True}).register_endpoints()

    assert location(handler(context)) == BASE_URL + '/saml_login?logout=1'


def test_logout_endpoint_falls_back_to_default_logout(context, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    [(_, handler)] = make_logout({'default_logout_url': 'https://edu.example.org/login/logout'}).register_endpoints()

    assert location(handler(context)) == 'https://edu.example.org/login/logout'


def test_logout_endpoint_falls_back_to_base_url(context, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    [(_, handler)] = make_logout().register_endpoints()

    assert location(handler(context)) == BASE_URL


def test_logout_endpoint_with_legacy_settings(context, host_config_file):
    ms = make_logout({'legacy_settings': {'host_config_file': str(host_config_file), 'logout_return_path': '/bye'}})
    [(_, handler)] = ms.register_endpoints()

    assert location(handler(context)) == BASE_URL + '/bye'
    assert context.state.delete is True


def test_logout_passes_responses_through(context):
    internal_response = InternalData(attributes={})

    assert make_logout().process(context, internal_response) is internal_response
