import unittest

from grocer.api.guards import InFlightGuard
from grocer.utilities.config import require_api_key
from grocer.utilities.errors import MissingConfiguration, RequestInProgress


class TestInFlightGuard(unittest.TestCase):
    def test_second_hold_is_rejected(self):
        guard = InFlightGuard("recipe generation")
        with guard.hold():
            self.assertTrue(guard.loading)
            with self.assertRaises(RequestInProgress):
                with guard.hold():
                    pass
        self.assertFalse(guard.loading)

    def test_loading_resets_after_failure(self):
        guard = InFlightGuard("recipe import")
        with self.assertRaises(ValueError):
            with guard.hold():
                raise ValueError("boom")
        self.assertFalse(guard.loading)
        with guard.hold():
            pass

    def test_guards_are_independent(self):
        generate, imports = InFlightGuard("generate"), InFlightGuard("import")
        with generate.hold():
            with imports.hold():
                self.assertTrue(imports.loading)


class TestRequireApiKey(unittest.TestCase):
    def test_explicit_key_is_returned(self):
        self.assertEqual(require_api_key("sk-test"), "sk-test")

    def test_blank_key_is_fatal(self):
        with self.assertRaises(MissingConfiguration):
            require_api_key("   ")


if __name__ == '__main__':
    unittest.main()
