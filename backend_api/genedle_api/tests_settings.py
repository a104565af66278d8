import importlib
import os
from unittest import mock

from django.test import SimpleTestCase

from config import settings as project_settings


class SettingsTests(SimpleTestCase):
    def _reload(self, **env):
        environ = {k: v for k, v in os.environ.items() if k != "DJANGO_DEBUG"}
        environ.update(env)
        try:
            with mock.patch.dict(os.environ, environ, clear=True):
                return importlib.reload(project_settings).DEBUG
        finally:
            importlib.reload(project_settings)

    def test_debug_is_off_by_default(self):
        self.assertIs(self._reload(), False)

    def test_debug_can_be_enabled(self):
        self.assertIs(self._reload(DJANGO_DEBUG="true"), True)
        self.assertIs(self._reload(DJANGO_DEBUG="0"), False)
