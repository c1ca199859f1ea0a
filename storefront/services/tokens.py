"""Bearer token verification."""

import logging
from datetime import timedelta

import jwt

from storefront.errors import AuthMissing, AuthInvalid
from storefront.models import User
from storefront.utils.formatters import utc_now

logger = logging.getLogger(__name__)


def extract_bearer(header):
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not header or not header.startswith('Bearer '):
        raise AuthMissing()
    token = header.split(' ', 1)[1].strip()
    if not token:
        raise AuthMissing()
    return token


class TokenVerifier:
    """Verifies HS256 tokens signed with the shared secret."""

    def __init__(self, secret, algorithm='HS256', expires_minutes=60):
        if not secret:
            raise ValueError('A token secret is required')
        self._secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def verify(self, token):
        """Return the ``User`` the token was issued to."""
        if not token:
            raise AuthMissing()
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            logger.info('Rejected bearer token: %s', e.__class__.__name__)
            raise AuthInvalid() from e

        subject = payload.get('id') or payload.get('sub')
        if isinstance(subject, bool) or not isinstance(subject, (str, int)) or subject == '':
            logger.info('Rejected bearer token: no subject claim')
            raise AuthInvalid()
        return User(subject, payload.get('role'))

    def issue(self, subject_id, role='customer', expires_in=None):
        """Sign a token for ``subject_id``. Used by tooling and tests."""
        if expires_in is None:
            expires_in = timedelta(minutes=self.expires_minutes)
        now = utc_now()
        payload = {
            'sub': str(subject_id),
            'id': str(subject_id),
            'role': role,
            'iat': now,
            'exp': now + expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)
