STATE_KEY = 'SATOSA_MS_SAML_AUTH'
LOGIN_FLAG = 'login'
LOGIN_ATTRIBUTES = 'login_attributes'
LOGIN_SUBJECT_ID = 'subject_id'

FIELD_MAP_PREFIX = 'field_map_'
CUSTOM_FIELD_PREFIX = 'profile_field_'

DEFAULT_USER_FIELDS = (
    'firstname', 'lastname', 'email', 'phone1', 'phone2',
    'department', 'address', 'city', 'country', 'description',
    'idnumber', 'lang', 'guid', 'web', 'skype', 'yahoo', 'msn',
    'aim', 'icq',
)

# side configuration of the external SP library, looked up in the dataroot and then in the cwd
SIDE_CONFIG_NAME = 'saml_config.json'
LIBRARY_LOADER_NAME = 'proxy_conf.yaml'
SP_SESSION_COOKIES = ('SimpleSAMLSessionID', 'SimpleSAMLAuthToken')

DEFAULT_LOGIN_ENDPOINT = 'saml_login'
DEFAULT_LOGIN_PAGE_ENDPOINT = 'saml_login_page'
DEFAULT_LOGOUT_ENDPOINT = 'saml_logout'
DEFAULT_LOGOUT_RETURN_PATH = '/user'
