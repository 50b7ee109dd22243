import logging
from unittest import TestCase

from utf8slice.logging_utils import configure_logging_from
from utf8slice.parameters import ParameterError, Parameters


class TestLoggingUtils(TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.setLevel(self._original_level)
        root.handlers = self._original_handlers

    def test_root_level_from_params(self) -> None:
        configure_logging_from(
            Parameters.from_mapping({"logging": {"root_level": "DEBUG"}})
        )
        self.assertEqual(logging.DEBUG, logging.getLogger().level)

    def test_defaults_to_info(self) -> None:
        configure_logging_from(Parameters.empty())
        self.assertEqual(logging.INFO, logging.getLogger().level)

    def test_invalid_level(self) -> None:
        with self.assertRaisesRegex(ParameterError, "Invalid logging level LOUD"):
            configure_logging_from(
                Parameters.from_mapping({"logging": {"root_level": "LOUD"}})
            )
