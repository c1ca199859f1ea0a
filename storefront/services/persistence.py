"""JSON snapshot file for the cart store."""

import json
import logging
import os
import tempfile
from pathlib import Path

from storefront.models import Cart

logger = logging.getLogger(__name__)


class CartSnapshotFile:
    """Reads and writes the whole cart store as ``[[uid, cart], ...]``."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        """Return the saved ``(uid, Cart)`` pairs.

        A missing snapshot is an empty store. An unreadable or corrupt one is
        also treated as empty so the service can still start, but it is
        logged so operators know carts were dropped.
        """
        if not self.path.exists():
            return []
        try:
            with self.path.open('r', encoding='utf-8') as f:
                raw = json.load(f)
            entries = [(str(uid), Cart.from_dict(cart)) for uid, cart in raw]
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning('Ignoring unreadable cart snapshot %s: %s', self.path, e)
            return []
        logger.info('Loaded %d carts from %s', len(entries), self.path)
        return entries

    def save(self, entries):
        """Rewrite the snapshot. Failures are logged, not raised."""
        data = [[uid, cart.to_dict()] for uid, cart in entries]
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=self.path.parent,
                                             prefix=f'.{self.path.name}.', suffix='.tmp',
                                             delete=False) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error('Failed to write cart snapshot %s: %s', self.path, e)
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False
        return True
