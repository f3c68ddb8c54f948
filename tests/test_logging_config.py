#!/usr/bin/env python3
"""Tests for configure_logging."""

import logging

import pytest

from rental.logging_config import configure_logging


@pytest.fixture
def bare_root():
    """Root logger with no handlers, restored afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_console_handler(self, bare_root):
        assert configure_logging() is True
        assert len(bare_root.handlers) == 1
        assert bare_root.level == logging.WARNING

    def test_verbose_sets_debug(self, bare_root):
        configure_logging(verbose=True)
        assert bare_root.level == logging.DEBUG

    def test_leaves_existing_setup_alone(self, bare_root):
        handler = logging.NullHandler()
        bare_root.addHandler(handler)
        bare_root.setLevel(logging.INFO)

        assert configure_logging(verbose=True) is False
        assert bare_root.handlers == [handler]
        assert bare_root.level == logging.INFO
