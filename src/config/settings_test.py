"""Settings for the test suite.

Supplies the values ``config.settings`` refuses to default and points
the web root at a throwaway directory.
"""

import os
import tempfile

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("WEB_ROOT", tempfile.mkdtemp(prefix="catalog-wwwroot-"))

from config.settings import *  # noqa: E402,F401,F403

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
