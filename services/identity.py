from collections import namedtuple

from models.permission import permissions_for

SESSION = "session"
API_KEY = "api_key"


class SessionIdentity(namedtuple("SessionIdentity", "user_id username role")):
    """A browser caller, as established at login and carried in the session."""
    __slots__ = ()
    kind = SESSION

    @property
    def acting_user_id(self):
        return self.user_id

    @property
    def permissions(self):
        return permissions_for(self.role)

    def to_session(self, session):
        session["username"] = self.username
        session["role"] = self.role

    @classmethod
    def from_session(cls, session):
        user_id = session.get("_user_id")
        if not user_id or "role" not in session:
            return None
        return cls(int(user_id), session.get("username"), session["role"])


class ApiKeyIdentity(namedtuple("ApiKeyIdentity",
                                "key_id owner_user_id granted_permissions name")):
    """An API caller. Its permissions are the key's stored grant, not a role."""
    __slots__ = ()
    kind = API_KEY
    role = None

    @property
    def acting_user_id(self):
        return self.owner_user_id

    @property
    def permissions(self):
        return frozenset(self.granted_permissions)

    @classmethod
    def from_api_key(cls, api_key):
        return cls(api_key.id, api_key.user_id, tuple(api_key.permissions), api_key.name)
