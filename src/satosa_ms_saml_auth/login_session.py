import logging
from .definitions import LOGIN_ATTRIBUTES, LOGIN_FLAG, LOGIN_SUBJECT_ID, STATE_KEY

logger = logging.getLogger(__name__)


class LoginSession(object):
    """
    Session flags handed from the login endpoint to the host application.
    Works on a SATOSA State or any other mutable mapping; every value is read at most once.
    """
    def __init__(self, session):
        self.session = session

    def _data(self, create=False):
        data = self.session.get(STATE_KEY)
        if data is None and create:
            data = {}
            self.session[STATE_KEY] = data
        return data

    def _pop(self, key):
        data = self._data()
        if not data:
            return None
        value = data.pop(key, None)
        # reassign so that the change is seen by mappings tracking top-level writes only
        self.session[STATE_KEY] = data
        return value

    def mark_login(self, attributes, subject_id=None):
        data = self._data(create=True)
        data[LOGIN_FLAG] = True
        data[LOGIN_ATTRIBUTES] = {
            name: [values] if isinstance(values, str) else list(values or [])
            for name, values in (attributes or {}).items()
        }
        if subject_id is not None:
            data[LOGIN_SUBJECT_ID] = subject_id
        self.session[STATE_KEY] = data
        logger.debug(f"login marked with attributes {sorted(data[LOGIN_ATTRIBUTES])}")

    def consume_login(self):
        return bool(self._pop(LOGIN_FLAG))

    def pop_attributes(self):
        return self._pop(LOGIN_ATTRIBUTES)

    @property
    def subject_id(self):
        data = self._data()
        return data.get(LOGIN_SUBJECT_ID) if data else None

    def clear(self):
        self.session.pop(STATE_KEY, None)
