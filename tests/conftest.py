import json
import pytest
from satosa.context import Context
from satosa.state import State


@pytest.fixture
def context():
    context = Context()
    context.state = State()
    return context


@pytest.fixture
def samllib(tmp_path):
    path = tmp_path / 'satosa'
    path.mkdir()
    (path / 'proxy_conf.yaml').write_text('BASE: https://edu.example.org\n')
    return path


@pytest.fixture
def dataroot(tmp_path, samllib):
    path = tmp_path / 'dataroot'
    path.mkdir()
    (path / 'saml_config.json').write_text(json.dumps({'samllib': str(samllib), 'sp_source': 'Saml2'}))
    return path


@pytest.fixture
def host_config_file(tmp_path, dataroot):
    path = tmp_path / 'config.yaml'
    path.write_text(f"dataroot: {dataroot}\n")
    return path
