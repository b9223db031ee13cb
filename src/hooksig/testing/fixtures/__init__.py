"""Testing fixtures – enable with ``pytest_plugins = ["hooksig.testing.fixtures"]``."""
from hooksig.testing.fixtures.clock import fake_clock
from hooksig.testing.fixtures.secrets import WEBHOOK_SECRET, webhook_secret

__all__ = ["WEBHOOK_SECRET", "fake_clock", "webhook_secret"]
