"""Authenticated user identity."""

from flask_login import UserMixin


class User(UserMixin):
    """Subject identity and role taken from a verified bearer token.

    Users are not stored anywhere; one is built per request by the
    Flask-Login request loader.
    """

    def __init__(self, id, role='customer'):
        self.id = str(id)
        self.role = role or 'customer'

    def is_admin(self):
        """Check if user is admin."""
        return self.role == 'admin'

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id and self.role == other.role

    def __hash__(self):
        return hash((self.id, self.role))

    def __repr__(self):
        return f'<User {self.id} ({self.role})>'
